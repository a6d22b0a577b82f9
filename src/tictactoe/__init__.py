"""Tic-tac-toe package exposing the game rules and the local web application."""

from .game import GameState, PlayAction, Player, Status, apply_move, dispatch, new_game
from .ui import app

__all__ = [
    "GameState",
    "PlayAction",
    "Player",
    "Status",
    "app",
    "apply_move",
    "dispatch",
    "new_game",
]
