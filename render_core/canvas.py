"""Dense grid of unclamped linear colors."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray


@dataclass
class Canvas:
    width: int
    height: int
    pixels: NDArray[np.float64] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Canvas size must be positive")
        self.pixels = np.zeros((self.height, self.width, 3), dtype=np.float64)

    @classmethod
    def from_array(cls, pixels: NDArray[np.float64]) -> "Canvas":
        arr = np.asarray(pixels, dtype=np.float64)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError(f"Expected (H, W, 3) pixels, got {arr.shape}")
        canvas = cls(width=arr.shape[1], height=arr.shape[0])
        canvas.pixels[...] = arr
        return canvas

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def write(self, x: int, y: int, color) -> None:
        self._check(x, y)
        self.pixels[y, x] = np.asarray(color, dtype=np.float64)[:3]

    def pixel_at(self, x: int, y: int) -> NDArray[np.float64]:
        self._check(x, y)
        return self.pixels[y, x].copy()

    def write_i(self, i: int, color) -> None:
        self.write(i % self.width, i // self.width, color)

    def pixel_at_i(self, i: int) -> NDArray[np.float64]:
        return self.pixel_at(i % self.width, i // self.width)

    def fill(self, color) -> None:
        self.pixels[...] = np.asarray(color, dtype=np.float64)[:3]
