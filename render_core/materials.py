"""Phong materials, point lights and local illumination.

Example:
    >>> import numpy as np
    >>> from render_core.materials import PointLight, lighting
    >>> from render_core.shapes import sphere
    >>> from render_core.transforms import WHITE, point, vector
    >>> light = PointLight(point(0.0, 0.0, -10.0), WHITE)
    >>> c = lighting(sphere(), light, point(0, 0, 0), vector(0, 0, -1), vector(0, 0, -1))
    >>> np.allclose(c, [1.9, 1.9, 1.9])
    True
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from render_core.patterns import Pattern
from render_core.transforms import BLACK, WHITE, dot, normalize, reflect

Vector = NDArray[np.float64]
Color = NDArray[np.float64]

VACUUM = 1.0
WATER = 1.333
GLASS = 1.5
DIAMOND = 2.417


@dataclass(frozen=True, eq=False)
class Material:
    """Phong surface with optional reflection and refraction.

    ambient/diffuse/specular: weights, usually in [0, 1].
    shininess: specular exponent, 10 (broad) .. 200 (tight) works best.
    reflective: 0 for matte, 1 for a perfect mirror.
    transparency/refractive_index: refraction weight and index.
    """

    color: Color = field(default_factory=lambda: WHITE.copy())
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = VACUUM
    pattern: Optional[Pattern] = None


@dataclass(frozen=True, eq=False)
class PointLight:
    """Light with no size; intensity is its color."""

    position: Vector
    intensity: Color = field(default_factory=lambda: WHITE.copy())


def surface_color(shape, position: Vector) -> Color:
    """Flat material color, or the pattern sample at a world-space position."""

    material: Material = shape.material
    if material.pattern is None:
        return material.color
    sampled = shape.pattern_at(position)
    return material.color if sampled is None else sampled


def lighting(
    shape,
    light: PointLight,
    position: Vector,
    eyev: Vector,
    normalv: Vector,
    in_shadow: bool = False,
) -> Color:
    """Phong shading of ``shape`` at ``position``; the result is not clamped."""

    material: Material = shape.material
    effective = surface_color(shape, position) * light.intensity
    ambient = effective * material.ambient

    lightv = normalize(light.position - position)
    light_dot_normal = dot(lightv, normalv)
    if in_shadow or light_dot_normal < 0:
        return ambient

    diffuse = effective * material.diffuse * light_dot_normal
    reflect_dot_eye = dot(reflect(-lightv, normalv), eyev)
    if reflect_dot_eye <= 0:
        specular = BLACK
    else:
        specular = light.intensity * material.specular * reflect_dot_eye**material.shininess
    return ambient + diffuse + specular
