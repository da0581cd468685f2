import logging
import random
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .ai import CORNERS
from .board import Board, Position, SIZE
from .config import load_settings
from .session import GameSession
from .stone import Stone

logger = logging.getLogger(__name__)

app = FastAPI(title="Othello AI Engine")

# Enable CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins for local dev
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

settings = load_settings()

# Game state
session = GameSession(
    human_color=Stone.BLACK if settings.human_black else Stone.WHITE,
    rng=random.Random(settings.ai_seed),
)


class MoveRequest(BaseModel):
    r: int = Field(ge=0, lt=SIZE)
    c: int = Field(ge=0, lt=SIZE)


class GameState(BaseModel):
    grid: List[List[str]]
    to_move: str
    black: int
    white: int
    legal: List[List[int]]
    terminal: bool
    winner: Optional[str]
    human: str
    status: str
    last_move: Optional[List[int]] = None


def _pos(p: Position) -> List[int]:
    return [p[0], p[1]]


def board_to_state(board: Board, game: GameSession) -> GameState:
    """Convert the session's board to the JSON view the front end renders"""
    black_count, white_count = board.count()
    terminal = board.is_game_over()
    return GameState(
        grid=[[cell.value for cell in row] for row in board.rows()],
        to_move=board.current_player.value,
        black=black_count,
        white=white_count,
        legal=[] if terminal else [_pos(m) for m in board.valid_moves()],
        terminal=terminal,
        winner=board.winner().value if terminal else None,
        human=game.human_color.value,
        status=game.status(),
        last_move=_pos(game.last_move) if game.last_move else None,
    )


@app.post("/new")
async def new_game(human_black: bool = True):
    """Start a new game"""
    session.new_game(Stone.BLACK if human_black else Stone.WHITE)
    return board_to_state(session.board, session)


@app.get("/state")
async def get_state():
    """Get current game state"""
    return board_to_state(session.board, session)


@app.post("/move")
async def make_move(move: MoveRequest):
    """Commit a human move; illegal clicks leave the game unchanged"""
    if not session.human_move(move.r, move.c):
        logger.debug("Rejected move %d,%d", move.r, move.c)
    return board_to_state(session.board, session)


@app.post("/ai_move")
async def ai_move():
    """AI plays one move for its side; the client paces repeated calls"""
    if session.board.is_game_over():
        raise HTTPException(status_code=400, detail="Game is over")
    if not session.is_ai_turn():
        raise HTTPException(status_code=400, detail="Not the AI's turn")

    session.ai_move()
    return board_to_state(session.board, session)


@app.get("/info")
async def get_info():
    """Get engine information"""
    return {
        "engine": "Greedy flips + corner preference",
        "search": False,
        "first_mover": Stone.BLACK.value,
        "corners": [_pos(c) for c in CORNERS],
        "human": session.human_color.value,
        "ai": session.ai_color.value,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
