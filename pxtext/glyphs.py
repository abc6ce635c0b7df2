"""Built-in variable-width 5-row bitmap font.

Every glyph is authored by hand; widths run from 1 to 5 columns so narrow
letters (i, l, j, ...) don't waste horizontal space.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

GLYPH_HEIGHT = 5
MAX_GLYPH_WIDTH = 5

# ---------------------------------------------------------------------------
# Font data: 5 rows per glyph, variable width
# ---------------------------------------------------------------------------

FONT_5ROW: dict[str, list[list[int]]] = {
    "A": [[0,1,1,1,0],[1,0,0,0,1],[1,1,1,1,1],[1,0,0,0,1],[1,0,0,0,1]],
    "B": [[1,1,1,1,0],[1,0,0,0,1],[1,1,1,1,0],[1,0,0,0,1],[1,1,1,1,0]],
    "C": [[0,1,1,1,0],[1,0,0,0,1],[1,0,0,0,0],[1,0,0,0,1],[0,1,1,1,0]],
    "D": [[1,1,1,1,0],[1,0,0,0,1],[1,0,0,0,1],[1,0,0,0,1],[1,1,1,1,0]],
    "E": [[1,1,1,1,1],[1,0,0,0,0],[1,1,1,1,0],[1,0,0,0,0],[1,1,1,1,1]],
    "F": [[1,1,1,1,1],[1,0,0,0,0],[1,1,1,1,0],[1,0,0,0,0],[1,0,0,0,0]],
    "G": [[0,1,1,1,0],[1,0,0,0,0],[1,0,1,1,1],[1,0,0,0,1],[0,1,1,1,0]],
    "H": [[1,0,0,0,1],[1,0,0,0,1],[1,1,1,1,1],[1,0,0,0,1],[1,0,0,0,1]],
    "I": [[1,1,1],[0,1,0],[0,1,0],[0,1,0],[1,1,1]],
    "J": [[1,1,1,1,1],[0,0,0,1,0],[0,0,0,1,0],[1,0,0,1,0],[0,1,1,0,0]],
    "K": [[1,0,0,1,0],[1,0,1,0,0],[1,1,0,0,0],[1,0,1,0,0],[1,0,0,1,0]],
    "L": [[1,0,0,0,0],[1,0,0,0,0],[1,0,0,0,0],[1,0,0,0,0],[1,1,1,1,1]],
    "M": [[1,0,0,0,1],[1,1,0,1,1],[1,0,1,0,1],[1,0,0,0,1],[1,0,0,0,1]],
    "N": [[1,0,0,0,1],[1,1,0,0,1],[1,0,1,0,1],[1,0,0,1,1],[1,0,0,0,1]],
    "O": [[0,1,1,1,0],[1,0,0,0,1],[1,0,0,0,1],[1,0,0,0,1],[0,1,1,1,0]],
    "P": [[1,1,1,1,0],[1,0,0,0,1],[1,1,1,1,0],[1,0,0,0,0],[1,0,0,0,0]],
    "Q": [[0,1,1,1,0],[1,0,0,0,1],[1,0,1,0,1],[1,0,0,1,1],[0,1,1,1,1]],
    "R": [[1,1,1,1,0],[1,0,0,0,1],[1,1,1,1,0],[1,0,1,0,0],[1,0,0,1,0]],
    "S": [[0,1,1,1,0],[1,0,0,0,0],[0,1,1,1,0],[0,0,0,0,1],[0,1,1,1,0]],
    "T": [[1,1,1,1,1],[0,0,1,0,0],[0,0,1,0,0],[0,0,1,0,0],[0,0,1,0,0]],
    "U": [[1,0,0,0,1],[1,0,0,0,1],[1,0,0,0,1],[1,0,0,0,1],[0,1,1,1,0]],
    "V": [[1,0,0,0,1],[1,0,0,0,1],[1,0,0,0,1],[0,1,0,1,0],[0,0,1,0,0]],
    "W": [[1,0,0,0,1],[1,0,0,0,1],[1,0,1,0,1],[1,1,0,1,1],[1,0,0,0,1]],
    "X": [[1,0,0,0,1],[0,1,0,1,0],[0,0,1,0,0],[0,1,0,1,0],[1,0,0,0,1]],
    "Y": [[1,0,0,0,1],[0,1,0,1,0],[0,0,1,0,0],[0,0,1,0,0],[0,0,1,0,0]],
    "Z": [[1,1,1,1,1],[0,0,0,1,0],[0,0,1,0,0],[0,1,0,0,0],[1,1,1,1,1]],
    "a": [[0,0,0,0],[0,1,1,0],[0,0,0,1],[0,1,1,1],[0,1,1,1]],
    "b": [[1,0,0,0],[1,0,0,0],[1,1,1,0],[1,0,0,1],[1,1,1,0]],
    "c": [[0,0,0,0],[0,1,1,0],[1,0,0,0],[1,0,0,0],[0,1,1,0]],
    "d": [[0,0,0,1],[0,0,0,1],[0,1,1,1],[1,0,0,1],[0,1,1,1]],
    "e": [[0,0,0,0],[0,1,1,0],[1,1,1,1],[1,0,0,0],[0,1,1,0]],
    "f": [[0,1,1],[0,1,0],[1,1,0],[0,1,0],[0,1,0]],
    "g": [[0,0,0,0],[0,1,1,1],[1,0,0,1],[0,1,1,1],[0,0,0,1]],
    "h": [[1,0,0,0],[1,0,0,0],[1,1,1,0],[1,0,0,1],[1,0,0,1]],
    "i": [[1],[0],[1],[1],[1]],
    "j": [[0,1],[0,0],[0,1],[0,1],[1,0]],
    "k": [[1,0,0],[1,0,1],[1,1,0],[1,1,0],[1,0,1]],
    "l": [[1],[1],[1],[1],[1]],
    "m": [[0,0,0,0,0],[1,1,0,1,0],[1,0,1,0,1],[1,0,1,0,1],[1,0,1,0,1]],
    "n": [[0,0,0,0],[1,1,1,0],[1,0,0,1],[1,0,0,1],[1,0,0,1]],
    "o": [[0,0,0,0],[0,1,1,0],[1,0,0,1],[1,0,0,1],[0,1,1,0]],
    "p": [[0,0,0,0],[1,1,1,0],[1,0,0,1],[1,1,1,0],[1,0,0,0]],
    "q": [[0,0,0,0],[0,1,1,1],[1,0,0,1],[0,1,1,1],[0,0,0,1]],
    "r": [[0,0,0],[1,0,1],[1,1,0],[1,0,0],[1,0,0]],
    "s": [[0,0,0,0],[0,1,1,0],[0,1,0,0],[0,0,1,0],[1,1,0,0]],
    "t": [[0,1,0],[1,1,1],[0,1,0],[0,1,0],[0,0,1]],
    "u": [[0,0,0,0],[1,0,0,1],[1,0,0,1],[1,0,0,1],[0,1,1,1]],
    "v": [[0,0,0,0],[1,0,0,1],[1,0,0,1],[0,1,1,0],[0,0,1,0]],
    "w": [[0,0,0,0,0],[1,0,0,0,1],[1,0,1,0,1],[1,0,1,0,1],[0,1,0,1,0]],
    "x": [[0,0,0,0],[1,0,0,1],[0,1,1,0],[0,0,1,0],[1,0,0,1]],
    "y": [[0,0,0,0],[1,0,0,1],[1,0,0,1],[0,1,1,1],[0,0,0,1]],
    "z": [[0,0,0,0],[1,1,1,1],[0,0,1,0],[0,1,0,0],[1,1,1,1]],
    # Blank advance only
    " ": [[0,0,0],[0,0,0],[0,0,0],[0,0,0],[0,0,0]],
}


@dataclass(frozen=True)
class GlyphPattern:
    """One character's bitmap: exactly GLYPH_HEIGHT rows of ``width`` bits."""
    width: int
    rows: tuple[tuple[int, ...], ...]

    def __post_init__(self):
        if not 1 <= self.width <= MAX_GLYPH_WIDTH:
            raise ValueError(f"glyph width must be 1-{MAX_GLYPH_WIDTH}, got {self.width}")
        if len(self.rows) != GLYPH_HEIGHT:
            raise ValueError(f"glyph must have {GLYPH_HEIGHT} rows, got {len(self.rows)}")
        for r, row in enumerate(self.rows):
            if len(row) != self.width:
                raise ValueError(f"row {r} has {len(row)} bits, expected {self.width}")
            if any(bit not in (0, 1) for bit in row):
                raise ValueError(f"row {r} contains values other than 0/1: {row}")

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> "GlyphPattern":
        """Build a pattern, taking the width from the first row."""
        if not rows:
            raise ValueError("glyph needs at least one row")
        return cls(width=len(rows[0]), rows=tuple(tuple(row) for row in rows))


class GlyphTable:
    """Read-only character -> GlyphPattern lookup."""

    def __init__(self, font: Mapping[str, list[list[int]]]):
        if " " not in font:
            raise ValueError("font must define the space character")
        self._glyphs = MappingProxyType(
            {ch: GlyphPattern.from_rows(rows) for ch, rows in font.items()}
        )

    def lookup(self, ch: str) -> GlyphPattern | None:
        return self._glyphs.get(ch)

    def supports(self, ch: str) -> bool:
        return ch in self._glyphs

    def supported_chars(self) -> str:
        """All supported characters: uppercase, then lowercase, then space."""
        return "".join(sorted(self._glyphs, key=lambda c: (c == " ", c.islower(), c)))

    @property
    def space(self) -> GlyphPattern:
        return self._glyphs[" "]

    def __contains__(self, ch) -> bool:
        return ch in self._glyphs

    def __len__(self) -> int:
        return len(self._glyphs)


# Process-wide table, built once at import
GLYPHS = GlyphTable(FONT_5ROW)
