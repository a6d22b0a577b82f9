"""Display mappings from ``GameState`` to text, glyphs and clickable cells."""

from __future__ import annotations

from typing import Dict, List

from .game import (
    BOARD_SIZE,
    GameState,
    Mark,
    Player,
    Status,
    is_valid_square,
    winning_line,
)

GLYPHS: Dict[Player, str] = {Player.CROSS: "X", Player.CIRCLE: "O"}


def mark_glyph(mark: Mark) -> str:
    if mark is None:
        return ""
    return GLYPHS[mark]


def player_from_glyph(glyph: str) -> Player:
    normalized = glyph.strip().upper()
    for player, value in GLYPHS.items():
        if value == normalized:
            return player
    raise ValueError(f"Unknown player {glyph!r}. Choose one of X, O.")


def status_text(state: GameState) -> str:
    if state.status is Status.WON:
        return f"Won: {mark_glyph(state.winner)}"
    if state.status is Status.DRAW:
        return "It's a draw!"
    return f"Playing: {mark_glyph(state.current_player)}"


def is_square_playable(state: GameState, square: int) -> bool:
    if state.is_over or not is_valid_square(square):
        return False
    return state.board[square] is None


def serialize_state(state: GameState) -> Dict[str, object]:
    """JSON-ready view of ``state`` consumed by the browser page."""

    line = winning_line(state.board) if state.status is Status.WON else None
    playable: List[int] = [
        square for square in range(BOARD_SIZE) if is_square_playable(state, square)
    ]
    return {
        "board": [mark_glyph(cell) for cell in state.board],
        "currentPlayer": mark_glyph(state.current_player),
        "status": state.status.value,
        "winner": mark_glyph(state.winner) or None,
        "winningLine": list(line) if line else None,
        "statusText": status_text(state),
        "playableSquares": playable,
    }
