from typing import List, Tuple, Optional

from .stone import Stone

# Constants
SIZE = 8

Position = Tuple[int, int]

DIRECTIONS = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]

_CELL_CHARS = {
    "B": Stone.BLACK,
    "W": Stone.WHITE,
    ".": Stone.EMPTY,
}
_CELL_CHARS.update({stone.to_char(): stone for stone in Stone})


class Board:
    def __init__(self):
        # Initialize 8x8 board
        self._grid = [[Stone.EMPTY for _ in range(SIZE)] for _ in range(SIZE)]
        self._current_player = Stone.BLACK  # Black moves first

        # Set initial pieces (standard Othello starting position)
        # D4 (3,3) = White, E5 (4,4) = White
        # E4 (3,4) = Black, D5 (4,3) = Black
        self._grid[3][3] = Stone.WHITE  # D4
        self._grid[4][4] = Stone.WHITE  # E5
        self._grid[3][4] = Stone.BLACK  # E4
        self._grid[4][3] = Stone.BLACK  # D5

    @classmethod
    def from_rows(cls, rows: List[str], current_player: Stone = Stone.BLACK) -> 'Board':
        """Build a position from 8 strings of 8 cells ('B'/'●', 'W'/'○', '.')"""
        if current_player == Stone.EMPTY:
            raise ValueError("current_player must be BLACK or WHITE")
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"Expected {SIZE} rows of {SIZE} cells")

        board = cls()
        for r, row in enumerate(rows):
            for c, ch in enumerate(row):
                if ch not in _CELL_CHARS:
                    raise ValueError(f"Unknown cell {ch!r} at {r}, {c}")
                board._grid[r][c] = _CELL_CHARS[ch]
        board._current_player = current_player
        return board

    def copy(self) -> 'Board':
        """Create a deep copy of the board"""
        new_board = Board()
        new_board._grid = [list(row) for row in self._grid]
        new_board._current_player = self._current_player
        return new_board

    @property
    def current_player(self) -> Stone:
        return self._current_player

    def is_valid_position(self, r: int, c: int) -> bool:
        return 0 <= r < SIZE and 0 <= c < SIZE

    def get_stone(self, r: int, c: int) -> Stone:
        """Get the stone at (r, c); raises ValueError off the board"""
        if not self.is_valid_position(r, c):
            raise ValueError(f"Invalid position: {r}, {c}")
        return self._grid[r][c]

    def stones_to_flip(self, r: int, c: int, player: Stone) -> List[Position]:
        """Positions that would flip if player placed a stone at (r, c)"""
        opponent = player.opposite()
        flips: List[Position] = []

        for dr, dc in DIRECTIONS:
            line = []
            rr, cc = r + dr, c + dc
            # Walk over opponent pieces
            while self.is_valid_position(rr, cc) and self._grid[rr][cc] == opponent:
                line.append((rr, cc))
                rr += dr
                cc += dc

            # The line only counts when it is closed by one of our own pieces
            if line and self.is_valid_position(rr, cc) and self._grid[rr][cc] == player:
                flips.extend(line)

        return flips

    def is_valid_move(self, r: int, c: int, player: Optional[Stone] = None) -> bool:
        """Check if placing a piece at (r, c) is legal for player (or the side to move)"""
        if player is None:
            player = self._current_player

        if not self.is_valid_position(r, c):
            return False
        if self._grid[r][c] != Stone.EMPTY:
            return False
        return len(self.stones_to_flip(r, c, player)) > 0

    def valid_moves(self, player: Optional[Stone] = None) -> List[Position]:
        """Get legal moves for the given player (or current side to move)"""
        if player is None:
            player = self._current_player

        moves = []
        for r in range(SIZE):
            for c in range(SIZE):
                if self.is_valid_move(r, c, player):
                    moves.append((r, c))
        return moves

    def has_valid_moves(self, player: Stone) -> bool:
        for r in range(SIZE):
            for c in range(SIZE):
                if self.is_valid_move(r, c, player):
                    return True
        return False

    def make_move(self, r: int, c: int) -> bool:
        """Play (r, c) for the side to move.

        Returns False and leaves the board untouched when the move is illegal.
        """
        if not self.is_valid_move(r, c):
            return False

        player = self._current_player
        flips = self.stones_to_flip(r, c, player)
        self._grid[r][c] = player
        for fr, fc in flips:
            self._grid[fr][fc] = player

        self._advance_turn()
        return True

    def _advance_turn(self):
        mover = self._current_player
        next_player = mover.opposite()

        if self.has_valid_moves(next_player):
            self._current_player = next_player
        elif self.has_valid_moves(mover):
            # Opponent has no reply, mover plays again
            pass
        else:
            # Game over; still hand the turn over for display
            self._current_player = next_player

    def count_stones(self, player: Stone) -> int:
        return sum(1 for row in self._grid for cell in row if cell == player)

    def count(self) -> Tuple[int, int]:
        """Return (black_count, white_count)"""
        return self.count_stones(Stone.BLACK), self.count_stones(Stone.WHITE)

    def is_game_over(self) -> bool:
        """Check if the game is over"""
        return not self.has_valid_moves(Stone.BLACK) and not self.has_valid_moves(Stone.WHITE)

    def winner(self) -> Stone:
        """Return the winning colour, or EMPTY while ongoing or on a draw"""
        if not self.is_game_over():
            return Stone.EMPTY

        black_count, white_count = self.count()
        if black_count > white_count:
            return Stone.BLACK
        elif white_count > black_count:
            return Stone.WHITE
        else:
            return Stone.EMPTY

    def rows(self) -> List[List[Stone]]:
        """Snapshot of the grid; mutating it does not touch the board"""
        return [list(row) for row in self._grid]

    def __str__(self) -> str:
        lines = ["  " + " ".join(str(c) for c in range(SIZE))]
        for r, row in enumerate(self._grid):
            lines.append(f"{r} " + " ".join(cell.to_char() for cell in row))
        return "\n".join(lines)
