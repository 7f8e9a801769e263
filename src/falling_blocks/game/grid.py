from __future__ import annotations

from typing import Optional

import numpy as np

from .pieces import BlockColor, Piece


class InvalidPlacementError(ValueError):
    """A drop was requested from a position that crosses a wall or the floor."""


class Board:
    """Locked blocks of a falling-block game.

    Storage is column-major: ``columns[x, y]`` holds 0 for an empty cell or a
    `BlockColor` value. y = 0 is the floor. There is no ceiling, pieces may
    stick out above ``height`` while they fall.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.width}x{self.height}")
        self.columns = np.zeros((self.width, self.height), dtype=np.int8)

    def reset(self) -> None:
        self.columns.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    # ---------- Collisions ----------
    def _collides_with_walls(self, piece: Piece, piece_x: int) -> bool:
        return piece.min_x + piece_x < 0 or piece.max_x + piece_x >= self.width

    def _collides_with_ground(self, piece: Piece, piece_y: int) -> bool:
        return piece.min_y + piece_y < 0

    def _collides_with_blocks(self, piece: Piece, piece_x: int, piece_y: int) -> bool:
        for x, y in piece.cells:
            bx, by = piece_x + x, piece_y + y
            if self.is_inside(bx, by) and self.columns[bx, by] != 0:
                return True
        return False

    def collides(self, piece: Piece, piece_x: int, piece_y: int) -> bool:
        return (
            self._collides_with_walls(piece, piece_x)
            or self._collides_with_ground(piece, piece_y)
            or self._collides_with_blocks(piece, piece_x, piece_y)
        )

    def get_drop_y(self, piece: Piece, piece_x: int, piece_y: int) -> int:
        """Resting y of `piece` dropped straight down from (piece_x, piece_y)."""
        if self._collides_with_walls(piece, piece_x) or self._collides_with_ground(piece, piece_y):
            raise InvalidPlacementError(
                f"Cannot drop piece from ({piece_x}, {piece_y}): start position is outside the board"
            )
        floor_y = -piece.min_y
        for y in range(piece_y, floor_y - 1, -1):
            if self._collides_with_ground(piece, y - 1) or self._collides_with_blocks(piece, piece_x, y - 1):
                return y
        return floor_y

    # ---------- Locking and clearing ----------
    def drop_piece(self, piece: Piece, color: BlockColor, piece_x: int, piece_y: int) -> int:
        """Lock `piece` where it lands and return the number of rows cleared."""
        drop_y = self.get_drop_y(piece, piece_x, piece_y)
        value = int(color)
        for x, y in piece.cells:
            bx, by = piece_x + x, drop_y + y
            # Cells above the top row have nowhere to go
            if by < self.height:
                self.columns[bx, by] = value
        return self._remove_completed_rows()

    def is_row_complete(self, y: int) -> bool:
        return bool(np.all(self.columns[:, y] != 0))

    def _remove_row(self, y: int) -> None:
        # Every column shifts down by one above y; the top row empties.
        # numpy buffers overlapping slices, so the in-place copy reads old values
        self.columns[:, y:-1] = self.columns[:, y + 1:]
        self.columns[:, -1] = 0

    def _remove_completed_rows(self) -> int:
        rows_completed = 0
        for y in range(self.height - 1, -1, -1):
            if self.is_row_complete(y):
                self._remove_row(y)
                rows_completed += 1
        return rows_completed

    # ---------- Queries ----------
    def get_block(self, x: int, y: int) -> Optional[BlockColor]:
        if not 0 <= x < self.width:
            raise IndexError(f"Column {x} is outside a board of width {self.width}")
        if not 0 <= y < self.height:
            return None
        value = int(self.columns[x, y])
        return BlockColor(value) if value else None

    def to_array(self) -> np.ndarray:
        """Row-major copy, ``array[y, x]``, row 0 at the bottom."""
        return self.columns.T.copy()
