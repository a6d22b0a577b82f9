"""FastAPI-powered web UI for a local two-player tic-tac-toe session."""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, field
from typing import Dict, Literal, Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from .game import GameState, PlayAction, Player, dispatch, new_game
from .presentation import mark_glyph, player_from_glyph, serialize_state

logger = logging.getLogger(__name__)

STARTING_PLAYER_ENV = "TICTACTOE_STARTING_PLAYER"
DEFAULT_STARTING_PLAYER = Player.CIRCLE


def configured_starting_player() -> Player:
    """Starting player from the environment, Circle when unset."""

    value = os.environ.get(STARTING_PLAYER_ENV)
    if not value:
        return DEFAULT_STARTING_PLAYER
    return player_from_glyph(value)


@dataclass
class GameSession:
    """Holder for the one current game. Each accepted move replaces ``state``."""

    state: GameState
    starting_player: Player
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def reset(self, starting_player: Optional[Player] = None) -> GameState:
        with self.lock:
            player = starting_player or self.starting_player
            self.state = new_game(player)
            logger.info("New game started, %s to move", mark_glyph(player))
            return self.state

    def play(self, action: PlayAction) -> GameState:
        with self.lock:
            previous = self.state
            self.state = dispatch(previous, action)
            if self.state is previous:
                logger.debug("Ignored move on square %r", action.square)
            else:
                logger.info(
                    "%s played square %d",
                    mark_glyph(previous.current_player),
                    action.square,
                )
                if self.state.is_over:
                    logger.info("Game finished: %s", self.state.status.value)
            return self.state

    def snapshot(self) -> GameState:
        with self.lock:
            return self.state


def _create_session() -> GameSession:
    player = configured_starting_player()
    return GameSession(state=new_game(player), starting_player=player)


SESSION = _create_session()
app = FastAPI(title="Tic-tac-toe", description="Two players, one board, one browser")


class NewGameRequest(BaseModel):
    """Request payload for starting a new game."""

    model_config = ConfigDict(populate_by_name=True)

    starting_player: Optional[str] = Field(
        default=None,
        alias="startingPlayer",
        description="Glyph of the player who moves first",
    )

    @field_validator("starting_player")
    @classmethod
    def ensure_known_player(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return mark_glyph(player_from_glyph(value))


class PlayRequest(BaseModel):
    """A single PLAY action dispatched by a cell click."""

    type: Literal["PLAY"]
    square: StrictInt


@app.get("/api/game")
def get_game() -> Dict[str, object]:
    return serialize_state(SESSION.snapshot())


@app.post("/api/game")
def create_game(request: Optional[NewGameRequest] = None) -> Dict[str, object]:
    player = None
    if request is not None and request.starting_player is not None:
        player = player_from_glyph(request.starting_player)
    return serialize_state(SESSION.reset(player))


@app.post("/api/game/actions")
def play(request: PlayRequest) -> Dict[str, object]:
    # Illegal moves are not errors: the unchanged state comes back
    return serialize_state(SESSION.play(PlayAction(square=request.square)))


@app.get("/", response_class=HTMLResponse)
def index() -> str:
    return HTML_PAGE


HTML_PAGE = """<!DOCTYPE html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <title>Tic-tac-toe</title>
    <style>
      :root {
        color-scheme: light;
        font-family: system-ui, -apple-system, BlinkMacSystemFont, \"Segoe UI\", sans-serif;
      }
      * {
        box-sizing: border-box;
      }
      body {
        margin: 0;
        background: radial-gradient(circle at top, #f2f5ff, #dbe0ff 40%, #cfd8ff 70%);
        min-height: 100vh;
        display: flex;
        justify-content: center;
        padding: 2rem 1rem 3rem;
        color: #13203a;
      }
      main {
        background: rgba(255, 255, 255, 0.92);
        border-radius: 18px;
        box-shadow: 0 20px 40px rgba(34, 47, 79, 0.16);
        padding: clamp(1.5rem, 4vw, 2.5rem);
        width: min(420px, 100%);
      }
      h1 {
        margin: 0 0 1rem;
        text-align: center;
        letter-spacing: 0.06em;
      }
      #status {
        text-align: center;
        font-size: 1.1rem;
        font-weight: 600;
        margin: 0 auto 1rem;
      }
      .board-grid {
        display: grid;
        grid-template-columns: repeat(3, minmax(0, 1fr));
        gap: 0.45rem;
        margin: 0 auto 1.25rem;
      }
      .cell {
        aspect-ratio: 1 / 1;
        font-size: clamp(1.6rem, 6vw, 2.6rem);
        font-weight: 700;
        font-family: inherit;
        background: rgba(255, 255, 255, 0.95);
        border: 2px solid rgba(80, 100, 160, 0.25);
        border-radius: 10px;
        cursor: pointer;
      }
      .cell:disabled {
        cursor: default;
        background: rgba(240, 240, 240, 0.8);
      }
      .cell.x {
        color: #f04a6a;
      }
      .cell.o {
        color: #3a66ff;
      }
      .cell.winning {
        box-shadow: 0 0 0 3px rgba(58, 102, 255, 0.55);
      }
      .controls {
        display: flex;
        justify-content: center;
      }
      .controls button {
        font-size: 1rem;
        padding: 0.55rem 0.95rem;
        border-radius: 999px;
        border: 1px solid rgba(60, 70, 120, 0.25);
        background: white;
        cursor: pointer;
      }
    </style>
  </head>
  <body>
    <main>
      <h1>Tic-tac-toe</h1>
      <div id=\"status\" role=\"status\">Loading…</div>
      <div id=\"board\" class=\"board-grid\"></div>
      <div class=\"controls\">
        <button id=\"new-game\" type=\"button\">New game</button>
      </div>
    </main>
    <script>
      const boardEl = document.getElementById('board');
      const statusEl = document.getElementById('status');
      const newGameButton = document.getElementById('new-game');
      let gameState = null;
      let isRequestPending = false;

      function renderBoard() {
        boardEl.innerHTML = '';
        if (!gameState) return;
        const playable = new Set(gameState.playableSquares);
        const winning = new Set(gameState.winningLine || []);
        gameState.board.forEach((glyph, square) => {
          const cell = document.createElement('button');
          cell.type = 'button';
          cell.classList.add('cell');
          if (glyph) cell.classList.add(glyph.toLowerCase());
          if (winning.has(square)) cell.classList.add('winning');
          cell.textContent = glyph;
          cell.disabled = !playable.has(square);
          cell.setAttribute('aria-label', glyph ? `Square ${square + 1}: ${glyph}` : `Square ${square + 1}`);
          cell.addEventListener('click', () => sendAction({ type: 'PLAY', square }));
          boardEl.appendChild(cell);
        });
        statusEl.textContent = gameState.statusText;
      }

      function setState(data) {
        gameState = data;
        renderBoard();
      }

      async function request(url, options) {
        if (isRequestPending) return;
        isRequestPending = true;
        try {
          const response = await fetch(url, options);
          if (!response.ok) {
            throw new Error('Request failed');
          }
          setState(await response.json());
        } catch (error) {
          statusEl.textContent = 'Network error. Please try again.';
        } finally {
          isRequestPending = false;
        }
      }

      function sendAction(action) {
        return request('/api/game/actions', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(action),
        });
      }

      newGameButton.addEventListener('click', () =>
        request('/api/game', { method: 'POST' })
      );

      request('/api/game');
    </script>
  </body>
</html>
"""
