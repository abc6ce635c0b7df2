"""Text -> pixel-art rows using the built-in glyph table.

Glyphs are laid out left to right on a 7-row canvas: one blank row above
and below the 5-row glyphs, one blank column on each side, and a single
blank spacing column between neighbouring glyphs.
"""

from enum import Enum

import numpy as np

from pxtext.glyphs import GLYPH_HEIGHT, GLYPHS, GlyphPattern, GlyphTable
from pxtext.logging import audit, get_logger, trace

log = get_logger("renderer")

MAX_TEXT_LENGTH = 100
BORDER = 1
SPACING = 1
CANVAS_HEIGHT = GLYPH_HEIGHT + 2 * BORDER


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class PixelArtError(Exception):
    """Base class for inputs the renderer refuses."""


class CharacterNotFound(PixelArtError):
    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Character '{char}' not found in font")


class TextTooLong(PixelArtError):
    def __init__(self, length: int, limit: int = MAX_TEXT_LENGTH):
        self.length = length
        self.limit = limit
        super().__init__(f"Text too long: {length} characters (max: {limit})")


class EmptyText(PixelArtError):
    def __init__(self):
        super().__init__("Text is empty")


class FallbackPolicy(Enum):
    STRICT = "strict"   # unsupported character is an error
    SPACE = "space"     # unsupported character renders as blank space


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def _check_length(text: str, max_length: int):
    if len(text) > max_length:
        raise TextTooLong(len(text), max_length)
    if not text:
        raise EmptyText()


@trace(expected=(PixelArtError,))
def validate(text: str, *, max_length: int = MAX_TEXT_LENGTH, table: GlyphTable = GLYPHS) -> None:
    """Raise the first problem with ``text``; return None when it renders.

    Checks, in order: length limit, empty input, then each character left
    to right. Only the first unsupported character is reported.
    """
    _check_length(text, max_length)
    for ch in text:
        if not table.supports(ch):
            raise CharacterNotFound(ch)


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------

def _resolve(text: str, policy: FallbackPolicy, table: GlyphTable) -> tuple[list[GlyphPattern], int]:
    glyphs = []
    substituted = 0
    for ch in text:
        glyph = table.lookup(ch)
        if glyph is None:
            if policy is FallbackPolicy.STRICT:
                raise CharacterNotFound(ch)
            glyph = table.space
            substituted += 1
        glyphs.append(glyph)
    return glyphs, substituted


def resolve_glyphs(text: str, policy: FallbackPolicy, table: GlyphTable = GLYPHS) -> list[GlyphPattern]:
    """Map each character to its glyph according to ``policy``."""
    return _resolve(text, policy, table)[0]


def canvas_width(glyphs: list[GlyphPattern]) -> int:
    """Total columns: glyph widths + spacing between them + both borders."""
    content = sum(g.width for g in glyphs) + SPACING * max(len(glyphs) - 1, 0)
    return content + 2 * BORDER


def compose(glyphs: list[GlyphPattern]) -> np.ndarray:
    """Place glyphs on a zeroed canvas and return it as a uint8 array."""
    canvas = np.zeros((CANVAS_HEIGHT, canvas_width(glyphs)), dtype=np.uint8)
    x = BORDER
    for glyph in glyphs:
        canvas[BORDER:BORDER + GLYPH_HEIGHT, x:x + glyph.width] = glyph.rows
        x += glyph.width + SPACING
    return canvas


def serialize(canvas: np.ndarray) -> list[str]:
    return ["".join("1" if bit else "0" for bit in row.tolist()) for row in canvas]


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

@trace(expected=(PixelArtError,))
def render(text: str, *, max_length: int = MAX_TEXT_LENGTH, table: GlyphTable = GLYPHS) -> list[str]:
    """Render ``text`` to 7 rows of '0'/'1' characters.

    Raises:
        TextTooLong: more than ``max_length`` characters.
        EmptyText: ``text`` is empty.
        CharacterNotFound: first character missing from the font.
    """
    validate(text, max_length=max_length, table=table)
    try:
        glyphs, _ = _resolve(text, FallbackPolicy.STRICT, table)
    except CharacterNotFound as exc:
        raise RuntimeError(f"glyph for {exc.char!r} vanished after validation") from exc
    return serialize(compose(glyphs))


@trace(expected=(PixelArtError,))
def render_lossy(text: str, *, max_length: int = MAX_TEXT_LENGTH, table: GlyphTable = GLYPHS) -> list[str]:
    """Like render(), but unsupported characters become blank space."""
    _check_length(text, max_length)
    glyphs, substituted = _resolve(text, FallbackPolicy.SPACE, table)
    if substituted:
        audit("render.substituted", logger=log, count=substituted, text=text[:80])
    return serialize(compose(glyphs))
