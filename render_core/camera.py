"""Pinhole camera: pixel-to-ray mapping and the render loop.

The view plane sits one unit in front of the eye. The field of view spans
the narrower canvas dimension.

Example:
    >>> import math
    >>> from render_core.camera import Camera
    >>> round(Camera(200, 125, math.pi / 2).pixel_size, 5)
    0.01
"""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Callable, Optional

import numpy as np
from numpy.typing import NDArray

from render_core.canvas import Canvas
from render_core.rays import Ray
from render_core.transforms import identity, inverse, normalize, point
from render_core.world import World


@dataclass(frozen=True)
class Camera:
    hsize: int
    vsize: int
    field_of_view: float
    transform: NDArray[np.float64] = field(default_factory=identity)
    pixel_size: float = field(init=False)
    half_width: float = field(init=False)
    half_height: float = field(init=False)
    _inverse: NDArray[np.float64] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.hsize <= 0 or self.vsize <= 0:
            raise ValueError("Camera size must be positive")
        inv = inverse(self.transform)
        if inv is None:
            raise ValueError("Camera transform is not invertible")

        half_view = math.tan(self.field_of_view / 2.0)
        aspect = self.hsize / self.vsize
        if aspect >= 1.0:
            half_width, half_height = half_view, half_view / aspect
        else:
            half_width, half_height = half_view * aspect, half_view

        object.__setattr__(self, "half_width", half_width)
        object.__setattr__(self, "half_height", half_height)
        object.__setattr__(self, "pixel_size", (half_width * 2.0) / self.hsize)
        object.__setattr__(self, "_inverse", inv)

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        """Ray from the eye through the centre of pixel (x, y)."""

        xoffset = (x + 0.5) * self.pixel_size
        yoffset = (y + 0.5) * self.pixel_size
        # camera looks toward -z, so +x is to the left
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        pixel = self._inverse @ point(world_x, world_y, -1.0)
        origin = self._inverse @ point(0.0, 0.0, 0.0)
        return Ray(origin, normalize(pixel - origin))

    def ray_for_pixel_i(self, i: int) -> Ray:
        return self.ray_for_pixel(i % self.hsize, i // self.hsize)

    def render(
        self,
        world: World,
        max_bounces: Optional[int] = None,
        progress: Optional[Callable[[int, int], None]] = None,
    ) -> Canvas:
        """Trace one primary ray per pixel, row by row."""

        bounces = world.config.max_bounces if max_bounces is None else int(max_bounces)
        if bounces < 0:
            raise ValueError("max_bounces must be >= 0")
        canvas = Canvas(self.hsize, self.vsize)
        for y in range(self.vsize):
            for x in range(self.hsize):
                canvas.write(x, y, world.color_at(self.ray_for_pixel(x, y), bounces))
            if progress is not None:
                progress(y, self.vsize)
        return canvas
