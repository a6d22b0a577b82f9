"""Tests for the display helpers."""

import pytest

from tictactoe.game import Player, apply_move, new_game
from tictactoe.presentation import (
    is_square_playable,
    mark_glyph,
    player_from_glyph,
    serialize_state,
    status_text,
)


def play(state, *squares):
    for square in squares:
        state = apply_move(state, square)
    return state


def test_mark_glyphs():
    assert mark_glyph(Player.CROSS) == "X"
    assert mark_glyph(Player.CIRCLE) == "O"
    assert mark_glyph(None) == ""


def test_player_from_glyph():
    assert player_from_glyph("X") is Player.CROSS
    assert player_from_glyph("O") is Player.CIRCLE
    assert player_from_glyph(" x ") is Player.CROSS
    with pytest.raises(ValueError):
        player_from_glyph("Z")


def test_status_text_for_each_status():
    assert status_text(new_game()) == "Playing: O"
    assert status_text(play(new_game(), 0, 3, 1, 4, 2)) == "Won: O"
    assert status_text(play(new_game(), 0, 1, 2, 3, 5, 4, 6, 8, 7)) == "It's a draw!"


def test_squares_not_playable_once_occupied_or_finished():
    game = apply_move(new_game(), 0)
    assert not is_square_playable(game, 0)
    assert is_square_playable(game, 1)
    assert not is_square_playable(game, 9)

    finished = play(new_game(), 0, 3, 1, 4, 2)
    assert not any(is_square_playable(finished, s) for s in range(9))


def test_serialize_won_state():
    finished = play(new_game(), 0, 3, 1, 4, 2)
    payload = serialize_state(finished)
    assert payload == {
        "board": ["O", "O", "O", "X", "X", "", "", "", ""],
        "currentPlayer": "O",
        "status": "won",
        "winner": "O",
        "winningLine": [0, 1, 2],
        "statusText": "Won: O",
        "playableSquares": [],
    }


def test_serialize_does_not_touch_state():
    game = apply_move(new_game(), 4)
    before = game
    payload = serialize_state(game)
    assert game == before
    assert payload["playableSquares"] == [0, 1, 2, 3, 5, 6, 7, 8]
    assert payload["winner"] is None
    assert payload["winningLine"] is None


def test_playable_squares_follow_click_rule():
    for game in (
        new_game(),
        play(new_game(), 4, 0, 8),
        play(new_game(), 0, 3, 1, 4, 2),
    ):
        payload = serialize_state(game)
        assert payload["playableSquares"] == [
            s for s in range(9) if is_square_playable(game, s)
        ]
    assert serialize_state(play(new_game(), 4, 0, 8))["playableSquares"] == [
        1, 2, 3, 5, 6, 7
    ]

