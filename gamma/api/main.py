"""
FastAPI backend for Gamma.
Provides REST API endpoints for creating games in memory and making moves.
"""

import threading
import uuid
from contextlib import contextmanager
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field

from gamma.config import (
    CORS_ORIGINS,
    DEFAULT_HEIGHT,
    DEFAULT_MAX_AREAS,
    DEFAULT_PLAYERS,
    DEFAULT_WIDTH,
    MAX_BOARD_FIELDS,
    MAX_PLAYERS,
)
from gamma.engine.actions import ACTION_TYPES, Action, MOVE, golden_move, move
from gamma.engine.queries import get_game_summary, get_player_stats, validate_action
from gamma.engine.reducer import apply_action
from gamma.engine.session import GameSession, new_session

app = FastAPI(
    title="Gamma API",
    description="Backend API for Gamma - a territory claiming board game",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request, call_next):
    """Log method and path so 500s can be traced to the failing endpoint."""
    method = getattr(request, "method", "?")
    url = getattr(request, "url", None)
    path = url.path if url else "?"
    try:
        response = await call_next(request)
        if response.status_code >= 500:
            print(f"[500] {method} {path}", flush=True)
        return response
    except Exception:
        print(f"[500] {method} {path} (exception)", flush=True)
        raise


@app.exception_handler(Exception)
async def unhandled_exception_handler(request, exc):
    """Return 500 with CORS headers so the frontend can read the error."""
    origin = request.headers.get("origin")
    allow_origin = origin if origin in CORS_ORIGINS else (CORS_ORIGINS[0] if CORS_ORIGINS else "*")
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc)},
        headers={
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Credentials": "true",
        },
    )


# In-memory games; nothing is persisted
games: dict[str, GameSession] = {}

# One lock per game: the engine must not be entered by two requests at once
game_locks: dict[str, threading.Lock] = {}
_registry_lock = threading.Lock()


# ===== Pydantic Models =====

class CreateGameRequest(BaseModel):
    width: int = Field(DEFAULT_WIDTH, gt=0)
    height: int = Field(DEFAULT_HEIGHT, gt=0)
    players: int = Field(DEFAULT_PLAYERS, gt=0, le=MAX_PLAYERS)
    max_areas: int = Field(DEFAULT_MAX_AREAS, gt=0)


class MoveRequest(BaseModel):
    player: int
    x: int
    y: int


class ValidateRequest(MoveRequest):
    type: str = MOVE  # "move" or "golden_move"


# ===== Helper Functions =====

@contextmanager
def game_lock(game_id: str):
    """Hold the game's lock for the whole block; 404 if the game does not exist."""
    with _registry_lock:
        lock = game_locks.get(game_id)
    if lock is None:
        raise HTTPException(status_code=404, detail=f"Game {game_id} not found")
    with lock:
        session = games.get(game_id)
        if session is None:
            # Deleted while we were waiting
            raise HTTPException(status_code=404, detail=f"Game {game_id} not found")
        yield session


def game_response(session: GameSession) -> dict[str, Any]:
    """Summary dict including the board for the UI."""
    out = get_game_summary(session.grid)
    out["board"] = session.grid.to_dict()["rows"]
    return out


def _require_player(session: GameSession, player: int) -> None:
    if not session.grid.is_player(player):
        raise HTTPException(
            status_code=400,
            detail=f"Player must be in range 1..{session.grid.number_of_players}",
        )


def _apply(game_id: str, action: Action) -> dict[str, Any]:
    with game_lock(game_id) as session:
        success, events = apply_action(session, action)
        return {
            "success": success,
            "events": [e.to_dict() for e in events],
            "game": game_response(session),
        }


# ===== API Endpoints =====

@app.get("/")
def root():
    return {"message": "Gamma API", "version": "1.0.0"}


@app.post("/games")
def create_game(request: CreateGameRequest):
    """Create a new game. Returns game_id."""
    if request.width * request.height > MAX_BOARD_FIELDS:
        raise HTTPException(
            status_code=400,
            detail=f"Board too large: at most {MAX_BOARD_FIELDS} fields",
        )
    session = new_session(request.width, request.height, request.players, request.max_areas)
    if session is None:
        raise HTTPException(status_code=400, detail="Could not create game with these parameters")

    game_id = str(uuid.uuid4())
    with _registry_lock:
        games[game_id] = session
        game_locks[game_id] = threading.Lock()
    return {"game_id": game_id, "game": game_response(session)}


@app.delete("/games/{game_id}")
def delete_game(game_id: str):
    """Drop a game. Deleting an unknown game is a no-op."""
    with _registry_lock:
        lock = game_locks.pop(game_id, None)
    if lock is None:
        return {"deleted": False}
    with lock:
        session = games.pop(game_id, None)
        if session is not None:
            session.close()
    return {"deleted": session is not None}


@app.get("/games/{game_id}")
def get_game(game_id: str):
    with game_lock(game_id) as session:
        return game_response(session)


@app.get("/games/{game_id}/board", response_class=PlainTextResponse)
def get_board(game_id: str):
    """The board in the text layout used by batch mode."""
    with game_lock(game_id) as session:
        return session.render()


@app.get("/games/{game_id}/players/{player}")
def get_player(game_id: str, player: int):
    with game_lock(game_id) as session:
        _require_player(session, player)
        return get_player_stats(session.grid, player)


@app.post("/games/{game_id}/move")
def make_move(game_id: str, request: MoveRequest):
    return _apply(game_id, move(request.player, request.x, request.y))


@app.post("/games/{game_id}/golden-move")
def make_golden_move(game_id: str, request: MoveRequest):
    return _apply(game_id, golden_move(request.player, request.x, request.y))


@app.post("/games/{game_id}/validate")
def validate(game_id: str, request: ValidateRequest):
    """Check a move without making it."""
    if request.type not in ACTION_TYPES:
        raise HTTPException(status_code=400, detail=f"Unknown action type: {request.type}")
    action = Action(type=request.type, player=request.player, payload={"x": request.x, "y": request.y})
    with game_lock(game_id) as session:
        return validate_action(session.grid, action).to_dict()
