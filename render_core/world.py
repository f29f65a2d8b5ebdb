"""World aggregation, shadows and recursive Whitted shading.

Example:
    >>> import numpy as np
    >>> from render_core.rays import Ray
    >>> from render_core.transforms import point, vector
    >>> from render_core.world import default_world
    >>> w = default_world()
    >>> c = w.color_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
    >>> np.allclose(c, [0.38066, 0.47583, 0.2855], atol=1e-5)
    True
"""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import List, Optional, Tuple
import warnings

import numpy as np
from numpy.typing import NDArray

from render_core.intersections import Intersections, PreComputed, prepare_computations, schlick
from render_core.materials import Material, PointLight, lighting
from render_core.rays import Ray
from render_core.shapes import Shape, sphere
from render_core.transforms import BLACK, EPSILON, color, dot, point, scaling

Vector = NDArray[np.float64]
Color = NDArray[np.float64]


@dataclass(frozen=True)
class TraceConfig:
    epsilon: float = EPSILON
    max_bounces: int = 5
    shadows: bool = True

    def __post_init__(self) -> None:
        if self.max_bounces < 0:
            raise ValueError("max_bounces must be >= 0")
        if self.epsilon <= 0:
            raise ValueError("epsilon must be > 0")


@dataclass(frozen=True)
class World:
    """Shapes plus at most one point light; read-only while rendering."""

    objects: Tuple[Shape, ...] = ()
    light: Optional[PointLight] = None
    config: TraceConfig = field(default_factory=TraceConfig)

    def __post_init__(self) -> None:
        object.__setattr__(self, "objects", tuple(self.objects))
        inert = self.validate()
        if inert:
            warnings.warn(
                f"Shapes {inert} have a non-invertible transform and are ignored.",
                RuntimeWarning,
                stacklevel=3,
            )

    def validate(self) -> List[int]:
        """Ids of shapes that cannot take part in any query."""

        return [s.uid for s in self.objects if s.is_inert]

    def intersect(self, ray: Ray) -> Intersections:
        hits = []
        for shape in self.objects:
            found = shape.intersects(ray, eps=self.config.epsilon)
            if found is not None:
                hits.extend(found)
        return Intersections(hits)

    def is_shadowed(self, p: Vector) -> bool:
        """True when an object sits between ``p`` and the light."""

        if self.light is None:
            return False
        v = self.light.position - p
        distance = float(np.linalg.norm(v))
        if distance == 0:
            return False
        hit = self.intersect(Ray(p, v / distance)).hit()
        return hit is not None and hit.t < distance

    def color_at(self, ray: Ray, remaining: Optional[int] = None) -> Color:
        remaining = self.config.max_bounces if remaining is None else remaining
        xs = self.intersect(ray)
        hit = xs.hit()
        if hit is None:
            return BLACK.copy()
        comps = prepare_computations(hit, ray, xs, eps=self.config.epsilon)
        if comps is None:
            return BLACK.copy()
        return self.shade_hit(comps, remaining)

    def shade_hit(self, comps: PreComputed, remaining: Optional[int] = None) -> Color:
        remaining = self.config.max_bounces if remaining is None else remaining
        if self.light is None:
            surface = BLACK.copy()
        else:
            shadowed = self.config.shadows and self.is_shadowed(comps.over_point)
            surface = lighting(comps.shape, self.light, comps.over_point, comps.eyev, comps.normalv, shadowed)

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        material: Material = comps.shape.material
        if material.reflective > 0 and material.transparency > 0:
            reflectance = schlick(comps)
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)
        return surface + reflected + refracted

    def reflected_color(self, comps: PreComputed, remaining: int) -> Color:
        material: Material = comps.shape.material
        if material.reflective == 0 or remaining <= 0:
            return BLACK.copy()
        c = self.color_at(Ray(comps.over_point, comps.reflectv), remaining - 1)
        return c * material.reflective

    def refracted_color(self, comps: PreComputed, remaining: int) -> Color:
        material: Material = comps.shape.material
        if material.transparency == 0 or remaining <= 0:
            return BLACK.copy()

        n_ratio = comps.n1 / comps.n2
        cos_i = dot(comps.eyev, comps.normalv)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            return BLACK.copy()

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
        c = self.color_at(Ray(comps.under_point, direction), remaining - 1)
        return c * material.transparency


def default_world(config: Optional[TraceConfig] = None) -> World:
    """Two concentric spheres lit from (-10, 10, -10)."""

    outer = sphere(material=Material(color=color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = sphere(scaling(0.5, 0.5, 0.5))
    return World(
        objects=(outer, inner),
        light=PointLight(point(-10.0, 10.0, -10.0), color(1.0, 1.0, 1.0)),
        config=config or TraceConfig(),
    )
