"""Cell states for the wildfire cellular automaton."""

from enum import Enum

# Number of cycles a tree burns before it is burned out
BURN_STAGES = 3


class CellState(Enum):
    """Possible states of a grid cell."""
    Empty = 0
    Tree = 1
    Burning = 2
    Burned = 3

    @property
    def glyph(self) -> str:
        """Character used to draw the state in a text grid."""
        return GLYPHS[self]

    @classmethod
    def from_glyph(cls, glyph: str) -> "CellState":
        """
        Look up the state drawn with a given character.

        Args:
            glyph: One of ' ', 'Y', '*', '.'

        Returns:
            The matching CellState

        Raises:
            ValueError: If the character does not represent any state
        """
        for state, char in GLYPHS.items():
            if char == glyph:
                return state
        raise ValueError(f"Unknown cell glyph: {glyph!r}")


GLYPHS = {
    CellState.Empty: " ",
    CellState.Tree: "Y",
    CellState.Burning: "*",
    CellState.Burned: ".",
}
