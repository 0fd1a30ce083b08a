"""Game module for Wood Block.

Exports the pure puzzle engine and its supporting pieces:
- Board: copy-on-write occupancy grid
- Piece, ShapeKind, BASE_SHAPES, COLORS: piece catalog and rotation
- check_placement: the single legality check
- clear_full_lines: simultaneous row/column clearing
- is_game_over: exhaustive game-over search
- ScoringRules: placement, combo and swap scoring
- BlockPuzzleEngine, initialize, apply: the reducer and its actions
"""

from .grid import Board
from .pieces import BASE_SHAPES, COLORS, Piece, ShapeKind, draw_piece, rotate, rotations
from .placement import check_placement, ghost_cells, valid_origins
from .lines import clear_full_lines, find_full_lines
from .oracle import is_game_over
from .rules import ScoringRules
from .rng import numpy_source, sequence_source
from .core import (
    Action,
    BlockPuzzleEngine,
    ErrorKind,
    GameConfig,
    GameState,
    Place,
    Rotate,
    Swap,
    apply,
    initialize,
)

__all__ = [
    "Board",
    "BASE_SHAPES",
    "COLORS",
    "Piece",
    "ShapeKind",
    "draw_piece",
    "rotate",
    "rotations",
    "check_placement",
    "ghost_cells",
    "valid_origins",
    "clear_full_lines",
    "find_full_lines",
    "is_game_over",
    "ScoringRules",
    "numpy_source",
    "sequence_source",
    "Action",
    "BlockPuzzleEngine",
    "ErrorKind",
    "GameConfig",
    "GameState",
    "Place",
    "Rotate",
    "Swap",
    "apply",
    "initialize",
]
