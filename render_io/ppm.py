"""Plain (P3) PPM encoding of a canvas.

Example:
    >>> from render_core.canvas import Canvas
    >>> from render_io.ppm import canvas_to_ppm
    >>> canvas_to_ppm(Canvas(5, 3)).splitlines()[:3]
    ['P3', '5 3', '255']
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import numpy as np

from render_core.canvas import Canvas

MAX_VALUE = 255
PIXELS_PER_LINE = 5


def scale_channels(pixels: np.ndarray, max_value: int = MAX_VALUE) -> np.ndarray:
    """Clamp to [0, 1] and scale to integers, rounding halves up."""

    clipped = np.clip(np.asarray(pixels, dtype=float), 0.0, 1.0)
    return np.floor(clipped * max_value + 0.5).astype(np.int64)


def canvas_to_ppm(canvas: Canvas, max_value: int = MAX_VALUE) -> str:
    header = f"P3\n{canvas.width} {canvas.height}\n{max_value}"
    scaled = scale_channels(canvas.pixels, max_value).reshape(-1, 3)
    pixels = [f"{r} {g} {b}" for r, g, b in scaled.tolist()]
    lines: List[str] = [" ".join(pixels[i : i + PIXELS_PER_LINE]) for i in range(0, len(pixels), PIXELS_PER_LINE)]
    return header + "\n" + "\n".join(lines) + "\n"


def save_ppm(filepath: str, canvas: Canvas) -> str:
    out = Path(filepath)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(canvas_to_ppm(canvas), encoding="ascii")
    return str(out)
