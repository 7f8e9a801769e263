from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

import numpy as np

from .grid import Board
from .pieces import BlockColor, Piece, TetrominoType


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    NONE = 5


@dataclass
class GameConfig:
    width: int = 10
    height: int = 24
    random_seed: Optional[int] = None


class DroppingPiece:
    """The piece the player controls, spawned centred at the top of `board`."""

    def __init__(self, board: Board, piece: Piece, color: BlockColor) -> None:
        self.board = board
        self.piece = piece
        self.color = color
        self.x = board.width // 2
        self.y = board.height - piece.max_y - 1
        self._drop_y: Optional[int] = None

    def move_down(self) -> Optional[int]:
        """Move down one row, or lock and return the rows completed."""
        if self.board.collides(self.piece, self.x, self.y - 1):
            return self.drop()
        self.y -= 1
        return None

    def drop(self) -> int:
        return self.board.drop_piece(self.piece, self.color, self.x, self.y)

    def get_drop_y(self) -> int:
        if self._drop_y is None:
            self._drop_y = self.board.get_drop_y(self.piece, self.x, self.y)
        return self._drop_y

    def _shift(self, dx: int) -> bool:
        if self.board.collides(self.piece, self.x + dx, self.y):
            return False
        self.x += dx
        self._drop_y = None
        return True

    def move_left(self) -> bool:
        return self._shift(-1)

    def move_right(self) -> bool:
        return self._shift(1)

    def rotate(self) -> bool:
        rotated = self.piece.rotate()
        rotated_x = self.x
        # Clamp into the side walls, no further search
        if rotated.max_x + rotated_x >= self.board.width:
            rotated_x = self.board.width - rotated.max_x - 1
        elif rotated.min_x + rotated_x < 0:
            rotated_x = -rotated.min_x

        if self.board.collides(rotated, rotated_x, self.y):
            return False
        self.piece = rotated
        self.x = rotated_x
        self._drop_y = None
        return True


class TetrisGame:
    """One game: a board, the active piece and the rows completed so far.

    Commands never raise on an illegal move; they return False and leave the
    state untouched. Once `has_lost()` is true every command is a no-op.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random(self.config.random_seed)
        self.board = Board(self.config.width, self.config.height)
        self.lines_cleared_total = 0
        self.current: DroppingPiece = self._next_dropping_piece()

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng = random.Random(seed)
        self.board.reset()
        self.lines_cleared_total = 0
        self.current = self._next_dropping_piece()

    def _random_kind(self) -> TetrominoType:
        return self.rng.choice(list(TetrominoType))

    def _next_dropping_piece(self) -> DroppingPiece:
        kind = self._random_kind()
        return DroppingPiece(self.board, kind.piece(), kind.color)

    def _lock(self, rows: int) -> None:
        self.lines_cleared_total += rows
        self.current = self._next_dropping_piece()

    # ---------- Commands ----------
    def move_down(self) -> bool:
        """Soft drop. Returns True when the piece locked instead of moving."""
        if self.has_lost():
            return False
        rows = self.current.move_down()
        if rows is None:
            return False
        self._lock(rows)
        return True

    def move_left(self) -> bool:
        if self.has_lost():
            return False
        return self.current.move_left()

    def move_right(self) -> bool:
        if self.has_lost():
            return False
        return self.current.move_right()

    def rotate_current_piece(self) -> bool:
        if self.has_lost():
            return False
        return self.current.rotate()

    def drop_current_piece(self) -> int:
        """Hard drop. Returns the rows completed by the placement."""
        if self.has_lost():
            return 0
        rows = self.current.drop()
        self._lock(rows)
        return rows

    def step(self, action: Action) -> bool:
        """Apply one command; the result is what that command returned."""
        action = Action(action)
        if action == Action.LEFT:
            return self.move_left()
        if action == Action.RIGHT:
            return self.move_right()
        if action == Action.ROTATE:
            return self.rotate_current_piece()
        if action == Action.SOFT_DROP:
            return self.move_down()
        if action == Action.HARD_DROP:
            if self.has_lost():
                return False
            self.drop_current_piece()
            return True
        return False

    # ---------- Queries ----------
    @property
    def current_piece(self) -> Piece:
        return self.current.piece

    @property
    def current_piece_color(self) -> BlockColor:
        return self.current.color

    @property
    def current_piece_x(self) -> int:
        return self.current.x

    @property
    def current_piece_y(self) -> int:
        return self.current.y

    def get_current_piece_drop_y(self) -> int:
        return self.current.get_drop_y()

    def rows_completed(self) -> int:
        return self.lines_cleared_total

    def get_block(self, x: int, y: int) -> Optional[BlockColor]:
        return self.board.get_block(x, y)

    def has_lost(self) -> bool:
        return self.board.collides(self.current.piece, self.current.x, self.current.y)

    def get_state(self) -> np.ndarray:
        """Board as ``state[y, x]`` with the active piece as negative colour codes."""
        state = self.board.to_array()
        if not self.has_lost():
            for x, y in self.current.piece.cells:
                bx, by = self.current.x + x, self.current.y + y
                if self.board.is_inside(bx, by):
                    state[by, bx] = -int(self.current.color)
        return state


def new_game(width: int = 10, height: int = 24, rng: Optional[random.Random] = None) -> TetrisGame:
    return TetrisGame(GameConfig(width=width, height=height), rng=rng)
