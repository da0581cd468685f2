"""
Othello rules engine, greedy AI opponent and the HTTP play server.

Modules:
- stone.py: Stone enum
- board.py: Board, the move-legality engine
- ai.py: AIPlayer
- session.py: GameSession, the human-vs-AI turn loop
- server.py: FastAPI app
"""
from .stone import Stone
from .board import Board, Position, SIZE
from .ai import AIPlayer
from .session import GameSession

__all__ = ["Stone", "Board", "Position", "SIZE", "AIPlayer", "GameSession"]
