"""Matplotlib previews of rendered canvases."""

from __future__ import annotations

from pathlib import Path
import warnings

import matplotlib.pyplot as plt
import numpy as np

from analysis.canvas_stats import luminance
from render_core.canvas import Canvas


def _save(fig: plt.Figure, outdir: str, name: str) -> str:
    Path(outdir).mkdir(parents=True, exist_ok=True)
    png = Path(outdir) / f"{name}.png"
    pdf = Path(outdir) / f"{name}.pdf"
    fig.savefig(png, dpi=150, bbox_inches="tight")
    try:
        fig.savefig(pdf, bbox_inches="tight")
    except PermissionError:
        warnings.warn(
            f"Could not write '{pdf}' (permission denied). Saved PNG only.",
            RuntimeWarning,
            stacklevel=2,
        )
    plt.close(fig)
    return str(png)


def show_canvas(canvas: Canvas, outdir: str, name: str = "render", title: str | None = None) -> str:
    fig, ax = plt.subplots()
    ax.imshow(np.clip(canvas.pixels, 0.0, 1.0), interpolation="nearest")
    ax.set_axis_off()
    ax.set_title(title or f"{canvas.width}x{canvas.height}")
    return _save(fig, outdir, name)


def channel_histogram(canvas: Canvas, outdir: str, name: str = "histogram", bins: int = 64) -> str:
    fig, ax = plt.subplots()
    flat = canvas.pixels.reshape(-1, 3)
    for ch, c in enumerate(("red", "green", "blue")):
        ax.hist(flat[:, ch], bins=bins, histtype="step", color=c, label=c)
    ax.hist(luminance(canvas).ravel(), bins=bins, histtype="step", color="black", label="luminance")
    ax.axvline(1.0, color="gray", linestyle="--", linewidth=0.8)
    ax.set_xlabel("linear value")
    ax.set_ylabel("pixels")
    ax.legend()
    ax.set_title("channel histogram")
    return _save(fig, outdir, name)
