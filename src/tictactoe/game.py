"""Core rules for tic-tac-toe: immutable game state and the move transition."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Tuple


class Player(Enum):
    CROSS = "cross"
    CIRCLE = "circle"

    @property
    def other(self) -> "Player":
        return Player.CIRCLE if self is Player.CROSS else Player.CROSS


class Status(Enum):
    RUNNING = "running"
    WON = "won"
    DRAW = "draw"


Mark = Optional[Player]
Board = Tuple[Mark, ...]

EMPTY: Mark = None
BOARD_SIZE = 9

WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

EMPTY_BOARD: Board = (EMPTY,) * BOARD_SIZE


# ---------- State ----------


@dataclass(frozen=True)
class GameState:
    """A snapshot of one game. Moves produce a new snapshot, never edit this one."""

    board: Board = EMPTY_BOARD
    current_player: Player = Player.CIRCLE
    status: Status = Status.RUNNING

    def __post_init__(self) -> None:
        if len(self.board) != BOARD_SIZE:
            raise ValueError(
                f"Board must have exactly {BOARD_SIZE} cells, got {len(self.board)}"
            )
        # Accept any sequence but always store a tuple
        if not isinstance(self.board, tuple):
            object.__setattr__(self, "board", tuple(self.board))

    @property
    def is_over(self) -> bool:
        return self.status is not Status.RUNNING

    @property
    def winner(self) -> Optional[Player]:
        """The player who completed a line; the turn never advances past a win."""
        return self.current_player if self.status is Status.WON else None


@dataclass(frozen=True)
class PlayAction:
    square: int
    type: str = "PLAY"


def new_game(starting_player: Player = Player.CIRCLE) -> GameState:
    return GameState(
        board=EMPTY_BOARD, current_player=starting_player, status=Status.RUNNING
    )


# ---------- Evaluators ----------


def winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    for a, b, c in WINNING_LINES:
        v = board[a]
        if v is not EMPTY and v == board[b] == board[c]:
            return (a, b, c)
    return None


def is_won(board: Board) -> bool:
    return winning_line(board) is not None


def is_draw(board: Board) -> bool:
    """True when no cell is empty. Only meaningful once ``is_won`` is false."""
    return all(cell is not EMPTY for cell in board)


def available_squares(board: Board) -> List[int]:
    return [i for i, cell in enumerate(board) if cell is EMPTY]


def is_valid_square(square: object) -> bool:
    # bool is an int subclass but never a square
    return (
        isinstance(square, int)
        and not isinstance(square, bool)
        and 0 <= square < BOARD_SIZE
    )


# ---------- Transition ----------


def apply_move(state: GameState, target_square: int) -> GameState:
    """Place the current player's mark on ``target_square``.

    Illegal moves (finished game, out-of-range or occupied square) are ignored:
    the same ``state`` object is returned so callers can detect the rejection by
    identity.
    """
    if state.status is not Status.RUNNING:
        return state
    if not is_valid_square(target_square):
        return state
    if state.board[target_square] is not EMPTY:
        return state

    cells = list(state.board)
    cells[target_square] = state.current_player
    board = tuple(cells)

    if is_won(board):
        return replace(state, board=board, status=Status.WON)
    if is_draw(board):
        return replace(state, board=board, status=Status.DRAW)
    return replace(
        state,
        board=board,
        current_player=state.current_player.other,
        status=Status.RUNNING,
    )


def dispatch(state: GameState, action: PlayAction) -> GameState:
    """Reducer entry point for move actions."""
    if action.type != "PLAY":
        return state
    return apply_move(state, action.square)
