from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple, Union

from .grid import Board, Coordinate
from .lines import clear_full_lines
from .oracle import is_game_over
from .pieces import Piece, RandomSource
from .placement import check_placement, placed_cells, valid_origins
from .queue import PieceQueue, consume, draw_queue, is_valid_slot, refill_if_exhausted, rotate_slot
from .rules import ScoringRules


logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    INVALID_PLACEMENT = "invalid_placement"
    INVALID_QUEUE_INDEX = "invalid_queue_index"
    INSUFFICIENT_SCORE = "insufficient_score"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Rotate:
    slot: int


@dataclass(frozen=True)
class Place:
    slot: int
    origin: Coordinate


@dataclass(frozen=True)
class Swap:
    pass


Action = Union[Rotate, Place, Swap]


@dataclass(frozen=True)
class GameConfig:
    grid_size: int = 8
    queue_size: int = 3


@dataclass(frozen=True)
class GameState:
    board: Board
    queue: PieceQueue
    score: int = 0
    game_over: bool = False
    lines_cleared_total: int = 0
    pieces_placed: int = 0

    def to_dict(self) -> dict:
        return {
            "board": self.board.to_rows(),
            "queue": [None if piece is None else piece.to_dict() for piece in self.queue],
            "score": self.score,
            "game_over": self.game_over,
            "lines_cleared_total": self.lines_cleared_total,
            "pieces_placed": self.pieces_placed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GameState":
        score = int(data["score"])
        if score < 0:
            raise ValueError(f"score must be non-negative, got {score}")
        return cls(
            board=Board.from_rows(data["board"]),
            queue=tuple(None if item is None else Piece.from_dict(item) for item in data["queue"]),
            score=score,
            game_over=bool(data["game_over"]),
            lines_cleared_total=int(data.get("lines_cleared_total", 0)),
            pieces_placed=int(data.get("pieces_placed", 0)),
        )


ApplyResult = Tuple[GameState, Optional[ErrorKind]]


@dataclass
class BlockPuzzleEngine:
    """Pure reducer over `GameState`.

    The engine holds configuration only; every call takes a state and returns
    the next one. Rejected actions return the very same state object.
    """

    config: GameConfig = field(default_factory=GameConfig)
    rules: ScoringRules = field(default_factory=ScoringRules)

    def initialize(self, random_source: RandomSource) -> GameState:
        board = Board.empty(self.config.grid_size)
        queue = draw_queue(random_source, self.config.queue_size)
        return GameState(board=board, queue=queue, game_over=is_game_over(board, queue))

    def apply(self, state: GameState, action: Action, random_source: RandomSource) -> ApplyResult:
        if isinstance(action, Rotate):
            return self._rotate(state, action)
        if isinstance(action, Place):
            return self._place(state, action, random_source)
        if isinstance(action, Swap):
            return self._swap(state, random_source)
        raise TypeError(f"unsupported action: {action!r}")

    def _reject(self, state: GameState, action: Action, error: ErrorKind) -> ApplyResult:
        logger.debug("Rejected %r: %s", action, error.value)
        return state, error

    def _rotate(self, state: GameState, action: Rotate) -> ApplyResult:
        if not is_valid_slot(state.queue, action.slot):
            return self._reject(state, action, ErrorKind.INVALID_QUEUE_INDEX)
        return replace(state, queue=rotate_slot(state.queue, action.slot)), None

    def _place(self, state: GameState, action: Place, random_source: RandomSource) -> ApplyResult:
        if state.game_over:
            return self._reject(state, action, ErrorKind.GAME_OVER)
        if not is_valid_slot(state.queue, action.slot):
            return self._reject(state, action, ErrorKind.INVALID_QUEUE_INDEX)
        piece = state.queue[action.slot]
        assert piece is not None
        origin = (int(action.origin[0]), int(action.origin[1]))
        if not check_placement(state.board, origin, piece.shape):
            return self._reject(state, action, ErrorKind.INVALID_PLACEMENT)

        board = state.board.occupy(placed_cells(origin, piece.shape), piece.color)
        cleared = clear_full_lines(board)
        gained = self.rules.score_for_placement(piece.cell_count, cleared.lines_cleared)

        queue, refilled = refill_if_exhausted(consume(state.queue, action.slot), random_source)
        if refilled:
            logger.debug("Queue exhausted, drew %d new pieces", len(queue))
        next_state = GameState(
            board=cleared.board,
            queue=queue,
            score=state.score + gained,
            game_over=False,
            lines_cleared_total=state.lines_cleared_total + cleared.lines_cleared,
            pieces_placed=state.pieces_placed + 1,
        )
        return self._check_game_over(next_state), None

    def _swap(self, state: GameState, random_source: RandomSource) -> ApplyResult:
        if state.game_over:
            return self._reject(state, Swap(), ErrorKind.GAME_OVER)
        if not self.rules.can_swap(state.score):
            return self._reject(state, Swap(), ErrorKind.INSUFFICIENT_SCORE)
        queue = draw_queue(random_source, len(state.queue))
        next_state = replace(state, queue=queue, score=state.score - self.rules.swap_cost)
        return self._check_game_over(next_state), None

    def _check_game_over(self, state: GameState) -> GameState:
        if not is_game_over(state.board, state.queue):
            return state
        logger.info(
            "Game over: score=%d pieces_placed=%d lines_cleared=%d",
            state.score,
            state.pieces_placed,
            state.lines_cleared_total,
        )
        return replace(state, game_over=True)

    def valid_placements(self, state: GameState) -> List[Tuple[int, Coordinate]]:
        """List of (slot, origin) placements legal for the current orientations"""
        if state.game_over:
            return []
        placements: List[Tuple[int, Coordinate]] = []
        for slot, piece in enumerate(state.queue):
            if piece is None:
                continue
            for origin in valid_origins(state.board, piece.shape):
                placements.append((slot, origin))
        return placements


_DEFAULT_ENGINE = BlockPuzzleEngine()


def initialize(random_source: RandomSource) -> GameState:
    return _DEFAULT_ENGINE.initialize(random_source)


def apply(state: GameState, action: Action, random_source: RandomSource) -> ApplyResult:
    return _DEFAULT_ENGINE.apply(state, action, random_source)
