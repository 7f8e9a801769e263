"""Game module for Falling Blocks.

Exports the rules engine and supporting classes:
- Piece: Immutable four-cell shape with rotation and shape comparison
- TetrominoType: Enum of the seven shapes, carrying cells and colour
- Board: Column-major grid with collision checks and row clearing
- TetrisGame: Active piece, commands and game-over detection
"""

from .pieces import (
    BlockColor,
    Piece,
    TetrominoType,
    PIECES,
    PIECE_I,
    PIECE_J,
    PIECE_L,
    PIECE_O,
    PIECE_S,
    PIECE_T,
    PIECE_Z,
    kind_of,
    color_of,
)
from .grid import Board, InvalidPlacementError
from .core import TetrisGame, DroppingPiece, GameConfig, Action, new_game

__all__ = [
    "BlockColor",
    "Piece",
    "TetrominoType",
    "PIECES",
    "PIECE_I",
    "PIECE_J",
    "PIECE_L",
    "PIECE_O",
    "PIECE_S",
    "PIECE_T",
    "PIECE_Z",
    "kind_of",
    "color_of",
    "Board",
    "InvalidPlacementError",
    "TetrisGame",
    "DroppingPiece",
    "GameConfig",
    "Action",
    "new_game",
]
