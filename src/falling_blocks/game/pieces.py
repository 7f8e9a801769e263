from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Dict, Iterator, Optional, Tuple


Coordinate = Tuple[int, int]


class BlockColor(IntEnum):
    RED = 1
    PURPLE = 2
    GREEN = 3
    YELLOW = 4
    AQUA = 5
    ORANGE = 6
    BLUE = 7


@dataclass(frozen=True, eq=False)
class Piece:
    """Four cells relative to a local origin, y pointing up.

    Pieces never change: `rotate()` builds a new one. Equality ignores the
    order the cells were given in.
    """

    cells: Tuple[Coordinate, ...]
    min_x: int = field(init=False)
    max_x: int = field(init=False)
    min_y: int = field(init=False)
    max_y: int = field(init=False)

    def __post_init__(self) -> None:
        cells = tuple((int(x), int(y)) for x, y in self.cells)
        if len(cells) != 4:
            raise ValueError(f"A piece has exactly 4 cells, got {len(cells)}")
        xs = [x for x, _ in cells]
        ys = [y for _, y in cells]
        object.__setattr__(self, "cells", cells)
        object.__setattr__(self, "min_x", min(xs))
        object.__setattr__(self, "max_x", max(xs))
        object.__setattr__(self, "min_y", min(ys))
        object.__setattr__(self, "max_y", max(ys))

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(frozenset(self.cells))

    def rotate(self) -> "Piece":
        # 90 degrees clockwise about (0, 0); may leave the board, callers check
        return Piece(tuple((y, -x) for x, y in self.cells))

    def contains(self, x: int, y: int) -> bool:
        return (x, y) in self.cells

    def equals(self, other: "Piece") -> bool:
        return all(other.contains(x, y) for x, y in self.cells)

    def same_shape(self, other: "Piece") -> bool:
        for _ in range(4):
            if self.equals(other):
                return True
            other = other.rotate()
        return False

    def for_each_cell(self, fn: Callable[[int, int], None]) -> None:
        for x, y in self.cells:
            fn(x, y)


class TetrominoType(IntEnum):
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7

    def piece(self) -> Piece:
        return BASE_PIECES[self]

    @property
    def color(self) -> BlockColor:
        return PIECE_COLORS[self]


BASE_CELLS: Dict[TetrominoType, Tuple[Coordinate, ...]] = {
    TetrominoType.I: ((-2, 1), (-1, 1), (0, 1), (1, 1)),
    TetrominoType.J: ((0, 0), (1, 1), (1, 0), (-1, 0)),
    TetrominoType.L: ((0, 0), (-1, 1), (-1, 0), (1, 0)),
    TetrominoType.O: ((-1, -1), (-1, 0), (0, -1), (0, 0)),
    TetrominoType.S: ((0, 0), (-1, 0), (0, 1), (1, 1)),
    TetrominoType.T: ((0, 0), (-1, 0), (0, -1), (1, 0)),
    TetrominoType.Z: ((0, 0), (1, -1), (0, -1), (-1, 0)),
}

PIECE_COLORS: Dict[TetrominoType, BlockColor] = {
    TetrominoType.Z: BlockColor.RED,
    TetrominoType.T: BlockColor.PURPLE,
    TetrominoType.S: BlockColor.GREEN,
    TetrominoType.O: BlockColor.YELLOW,
    TetrominoType.I: BlockColor.AQUA,
    TetrominoType.L: BlockColor.ORANGE,
    TetrominoType.J: BlockColor.BLUE,
}

BASE_PIECES: Dict[TetrominoType, Piece] = {kind: Piece(cells) for kind, cells in BASE_CELLS.items()}

PIECE_I = BASE_PIECES[TetrominoType.I]
PIECE_J = BASE_PIECES[TetrominoType.J]
PIECE_L = BASE_PIECES[TetrominoType.L]
PIECE_O = BASE_PIECES[TetrominoType.O]
PIECE_S = BASE_PIECES[TetrominoType.S]
PIECE_T = BASE_PIECES[TetrominoType.T]
PIECE_Z = BASE_PIECES[TetrominoType.Z]

PIECES: Tuple[Piece, ...] = (PIECE_I, PIECE_J, PIECE_L, PIECE_O, PIECE_S, PIECE_T, PIECE_Z)


def kind_of(piece: Piece) -> Optional[TetrominoType]:
    """Recognise a piece in any orientation."""
    for kind, base in BASE_PIECES.items():
        if base.same_shape(piece):
            return kind
    return None


def color_of(piece: Piece) -> Optional[BlockColor]:
    kind = kind_of(piece)
    return None if kind is None else kind.color
