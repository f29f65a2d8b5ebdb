"""Procedural two-color patterns sampled in their own local space.

Example:
    >>> from render_core.patterns import Pattern
    >>> from render_core.transforms import BLACK, WHITE, point
    >>> p = Pattern("stripe", WHITE, BLACK)
    >>> p.at(point(0.5, 0.0, 0.0)).tolist(), p.at(point(1.5, 0.0, 0.0)).tolist()
    ([1.0, 1.0, 1.0], [0.0, 0.0, 0.0])
"""

from __future__ import annotations

from dataclasses import dataclass, field
import math

import numpy as np
from numpy.typing import NDArray

from render_core.transforms import BLACK, WHITE, identity

Vector = NDArray[np.float64]

PATTERN_KINDS = ("stripe", "ring", "gradient", "checkers")


@dataclass(frozen=True, eq=False)
class Pattern:
    """Two-color pattern.

    kind: "stripe", "ring", "gradient" or "checkers".
    transform: pattern space -> object space.
    """

    kind: str = "stripe"
    a: NDArray[np.float64] = field(default_factory=lambda: WHITE.copy())
    b: NDArray[np.float64] = field(default_factory=lambda: BLACK.copy())
    transform: NDArray[np.float64] = field(default_factory=identity)

    def __post_init__(self) -> None:
        if self.kind.lower() not in PATTERN_KINDS:
            raise ValueError(f"Unsupported pattern kind: {self.kind}")

    def at(self, p: Vector) -> NDArray[np.float64]:
        """Color at ``p`` given in pattern space."""

        kind = self.kind.lower()
        x, y, z = float(p[0]), float(p[1]), float(p[2])
        if kind == "stripe":
            return self.a if math.floor(x) % 2 == 0 else self.b
        if kind == "ring":
            return self.a if math.floor(math.sqrt(x * x + z * z)) % 2 == 0 else self.b
        if kind == "gradient":
            return self.a + (self.b - self.a) * (x - math.floor(x))
        return self.a if (math.floor(x) + math.floor(y) + math.floor(z)) % 2 == 0 else self.b


def stripe_pattern(a, b, transform=None) -> Pattern:
    return Pattern("stripe", np.asarray(a, dtype=float), np.asarray(b, dtype=float), identity() if transform is None else transform)


def ring_pattern(a, b, transform=None) -> Pattern:
    return Pattern("ring", np.asarray(a, dtype=float), np.asarray(b, dtype=float), identity() if transform is None else transform)


def gradient_pattern(a, b, transform=None) -> Pattern:
    return Pattern("gradient", np.asarray(a, dtype=float), np.asarray(b, dtype=float), identity() if transform is None else transform)


def checkers_pattern(a, b, transform=None) -> Pattern:
    return Pattern("checkers", np.asarray(a, dtype=float), np.asarray(b, dtype=float), identity() if transform is None else transform)
