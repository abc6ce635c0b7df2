"""Turn rendered rows into arrays, text previews and PNG images."""

from pathlib import Path

import numpy as np
from PIL import Image

from pxtext.logging import audit, get_logger, trace

log = get_logger("export")


def to_array(rows: list[str]) -> np.ndarray:
    """Parse '0'/'1' rows into a (height, width) uint8 array."""
    if not rows:
        return np.zeros((0, 0), dtype=np.uint8)
    width = len(rows[0])
    for r, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"row {r} has {len(row)} columns, expected {width}")
        if set(row) - {"0", "1"}:
            raise ValueError(f"row {r} contains characters other than '0'/'1'")
    return np.array([[ch == "1" for ch in row] for row in rows], dtype=np.uint8)


def to_text(rows: list[str], on: str = "#", off: str = ".") -> str:
    """Preview with custom ink/background characters, one line per row."""
    return "\n".join("".join(on if ch == "1" else off for ch in row) for row in rows)


def column_profile(rows: list[str]) -> list[int]:
    """Number of lit pixels in each column, left to right."""
    return to_array(rows).sum(axis=0).astype(int).tolist()


@trace
def to_image(
    rows: list[str],
    *,
    scale: int = 10,
    fg_color: tuple[int, int, int] = (0, 0, 0),
    bg_color: tuple[int, int, int] = (255, 255, 255),
) -> Image.Image:
    """Draw the bitmap as an RGB image, each pixel a ``scale`` x ``scale`` block."""
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")
    if not rows or not rows[0]:
        raise ValueError("nothing to draw: rows are empty")
    bits = to_array(rows)
    height, width = bits.shape

    rgb = np.where(bits[..., None] == 1, np.array(fg_color, dtype=np.uint8),
                   np.array(bg_color, dtype=np.uint8)).astype(np.uint8)
    img = Image.fromarray(rgb)

    # Nearest-neighbor keeps pixel edges hard
    return img.resize((width * scale, height * scale), Image.NEAREST)


@trace
def save_png(rows: list[str], path: str | Path, **kwargs) -> Image.Image:
    """Render rows with to_image() and write them to ``path``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    img = to_image(rows, **kwargs)
    img.save(path)
    audit("export.saved", logger=log, path=str(path), size=f"{img.size[0]}x{img.size[1]}")
    return img
