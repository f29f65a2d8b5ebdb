"""Ray container and transform helper.

Example:
    >>> import numpy as np
    >>> from render_core.rays import Ray
    >>> from render_core.transforms import point, vector
    >>> r = Ray(point(2.0, 3.0, 4.0), vector(1.0, 0.0, 0.0))
    >>> np.allclose(r.position(2.5), point(4.5, 3.0, 4.0))
    True
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

Vector = NDArray[np.float64]


@dataclass(frozen=True)
class Ray:
    origin: Vector
    direction: Vector

    def position(self, t: float) -> Vector:
        return self.origin + self.direction * t

    def transform(self, m: NDArray[np.float64]) -> "Ray":
        """Return a new ray with ``m`` applied to origin and direction."""

        return Ray(m @ self.origin, m @ self.direction)
