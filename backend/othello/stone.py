from enum import Enum


class Stone(Enum):
    EMPTY = "empty"
    BLACK = "black"
    WHITE = "white"

    def opposite(self) -> 'Stone':
        """Return the other colour (EMPTY stays EMPTY)"""
        if self is Stone.BLACK:
            return Stone.WHITE
        if self is Stone.WHITE:
            return Stone.BLACK
        return Stone.EMPTY

    def to_char(self) -> str:
        return _GLYPHS[self]


_GLYPHS = {
    Stone.BLACK: "●",
    Stone.WHITE: "○",
    Stone.EMPTY: ".",
}
