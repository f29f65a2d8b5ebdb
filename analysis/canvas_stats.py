"""Canvas statistics for the validation report."""

from __future__ import annotations

from typing import Dict

import numpy as np

from render_core.canvas import Canvas

# Rec. 709 luma weights
LUMA = np.array([0.2126, 0.7152, 0.0722])


def luminance(canvas: Canvas) -> np.ndarray:
    """Per-pixel relative luminance, shape (H, W)."""

    return np.asarray(canvas.pixels, dtype=float) @ LUMA


def canvas_summary(canvas: Canvas, black_tol: float = 1e-9) -> Dict[str, object]:
    px = np.asarray(canvas.pixels, dtype=float)
    flat = px.reshape(-1, 3)
    lum = luminance(canvas)
    return {
        "mean_rgb": flat.mean(axis=0),
        "max_channel": float(flat.max()) if flat.size else 0.0,
        "clipped_fraction": float(np.mean(np.any(flat > 1.0, axis=1))),
        "black_fraction": float(np.mean(np.all(np.abs(flat) <= black_tol, axis=1))),
        "mean_luminance": float(lum.mean()),
    }
