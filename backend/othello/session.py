import logging
import random
from typing import List, Optional

from .ai import AIPlayer
from .board import Board, Position
from .stone import Stone

logger = logging.getLogger(__name__)


class GameSession:
    """One human-vs-AI game: the board, who plays what, and the turn loop.

    Presentation layers go through this class; they read the board but never
    change it directly.
    """

    def __init__(self, human_color: Stone = Stone.BLACK, rng: Optional[random.Random] = None):
        if human_color == Stone.EMPTY:
            raise ValueError("human colour must be BLACK or WHITE")
        self.rng = rng
        self.human_color = human_color
        self.ai = AIPlayer(human_color.opposite(), rng)
        self.board = Board()
        self.last_move: Optional[Position] = None

    @property
    def ai_color(self) -> Stone:
        return self.ai.color

    def new_game(self, human_color: Optional[Stone] = None):
        """Start over with a freshly built board"""
        if human_color is not None and human_color != self.human_color:
            if human_color == Stone.EMPTY:
                raise ValueError("human colour must be BLACK or WHITE")
            self.human_color = human_color
            self.ai = AIPlayer(human_color.opposite(), self.rng)
        self.board = Board()
        self.last_move = None
        logger.info("New game, human plays %s", self.human_color.value)

    def is_human_turn(self) -> bool:
        return not self.board.is_game_over() and self.board.current_player == self.human_color

    def is_ai_turn(self) -> bool:
        return not self.board.is_game_over() and self.board.current_player == self.ai_color

    def human_move(self, r: int, c: int) -> bool:
        """Play a human click; anything illegal is ignored (returns False)"""
        if not self.is_human_turn():
            logger.debug("Ignoring click at %d,%d: not the human's turn", r, c)
            return False
        if not self.board.make_move(r, c):
            logger.debug("Ignoring illegal move at %d,%d", r, c)
            return False

        self.last_move = (r, c)
        logger.info("Human (%s) played %d,%d", self.human_color.value, r, c)
        self._after_move(self.human_color)
        return True

    def ai_move(self) -> Optional[Position]:
        """Let the AI play one move if it is its turn"""
        if not self.is_ai_turn():
            return None

        move = self.ai.choose_move(self.board)
        if move is None:
            return None

        self.board.make_move(*move)
        self.last_move = move
        logger.info("AI (%s) played %d,%d", self.ai_color.value, move[0], move[1])
        self._after_move(self.ai_color)
        return move

    def play_ai_turns(self) -> List[Position]:
        """Play AI moves until the human is to move or the game ends"""
        played = []
        while self.is_ai_turn():
            move = self.ai_move()
            if move is None:
                break
            played.append(move)
        return played

    def _after_move(self, mover: Stone):
        if self.board.is_game_over():
            black, white = self.board.count()
            logger.info("Game over, black %d white %d, winner %s",
                        black, white, self.board.winner().value)
        elif self.board.current_player == mover:
            logger.info("%s has no legal move, turn skipped", mover.opposite().value)

    def status(self) -> str:
        if self.board.is_game_over():
            winner = self.board.winner()
            if winner == self.human_color:
                return "Game Over - You win!"
            if winner == self.ai_color:
                return "Game Over - AI wins!"
            return "Game Over - It's a tie!"

        if self.board.current_player == self.human_color:
            return f"Your turn ({self.human_color.value.capitalize()}) - click to place a stone"
        return f"{self.ai_color.value.capitalize()}'s turn (AI thinking...)"
