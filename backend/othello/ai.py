import random
from typing import List, Optional

from .board import Board, Position
from .stone import Stone

# Corner positions
CORNERS = [(0, 0), (0, 7), (7, 0), (7, 7)]

# Adjacent to corner positions; playing here tends to hand the corner over
ADJACENT_TO_CORNERS = [
    (0, 1), (1, 0), (1, 1),  # Adjacent to (0, 0)
    (0, 6), (1, 6), (1, 7),  # Adjacent to (0, 7)
    (6, 0), (6, 1), (7, 1),  # Adjacent to (7, 0)
    (6, 6), (6, 7), (7, 6)   # Adjacent to (7, 7)
]

# Upper bound of the random bonus added to each candidate's flip count
NOISE = 2


class AIPlayer:
    """Beginner-level opponent: greedy on flips, corner-seeking, a bit random."""

    def __init__(self, color: Stone, rng: Optional[random.Random] = None):
        if color == Stone.EMPTY:
            raise ValueError("AI colour must be BLACK or WHITE")
        self.color = color
        self.rng = rng if rng is not None else random.Random()

    def choose_move(self, board: Board) -> Optional[Position]:
        """Pick a move for self.color, or None when there is none"""
        legal = board.valid_moves(self.color)
        if not legal:
            return None

        # Prefer corners instantly
        for m in legal:
            if m in CORNERS:
                return m

        # Skip corner-adjacent squares if any alternatives exist
        safe_moves = [m for m in legal if m not in ADJACENT_TO_CORNERS]
        candidates = safe_moves or legal

        return self._greedy_pick(board, candidates)

    def _greedy_pick(self, board: Board, candidates: List[Position]) -> Position:
        best_move = candidates[0]
        best_score = -1
        for r, c in candidates:
            score = len(board.stones_to_flip(r, c, self.color)) + self.rng.randint(0, NOISE)
            if score > best_score:
                best_score = score
                best_move = (r, c)
        return best_move
