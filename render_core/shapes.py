"""Shape primitives, object-space intersection and surface normals.

Every shape is a ``Shape`` wrapping one geometry record. The geometry set is
closed: ``Sphere``, ``Plane``, ``Cube``, ``Cylinder`` and ``Cone``. Object-space
conventions:

* Sphere: radius 1 centred at the origin.
* Plane: the xz plane, normal +y.
* Cube: axis aligned, -1..1 on every axis.
* Cylinder: radius 1 around the y axis, optionally truncated to
  ``minimum < y < maximum`` and capped when ``closed``.
* Cone: double napped around the y axis with radius ``|y|``, truncated and
  capped like the cylinder.

Example:
    >>> from render_core.rays import Ray
    >>> from render_core.shapes import sphere
    >>> from render_core.transforms import point, vector
    >>> xs = sphere().intersects(Ray(point(0, 0, -5), vector(0, 0, 1)))
    >>> [i.t for i in xs]
    [4.0, 6.0]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
import math
from typing import List, Optional

import numpy as np
from numpy.typing import NDArray

from render_core.intersections import Intersection, Intersections
from render_core.materials import GLASS, Material
from render_core.rays import Ray
from render_core.transforms import EPSILON, identity, inverse, vector

Vector = NDArray[np.float64]

_shape_ids = count(1)


def next_shape_id() -> int:
    return next(_shape_ids)


@dataclass(frozen=True)
class Sphere:
    pass


@dataclass(frozen=True)
class Plane:
    pass


@dataclass(frozen=True)
class Cube:
    pass


@dataclass(frozen=True)
class Cylinder:
    minimum: float = -math.inf
    maximum: float = math.inf
    closed: bool = False


@dataclass(frozen=True)
class Cone:
    minimum: float = -math.inf
    maximum: float = math.inf
    closed: bool = False


Geometry = Sphere | Plane | Cube | Cylinder | Cone


@dataclass(frozen=True, eq=False)
class Shape:
    """A geometry placed in the world by ``transform`` (object -> world).

    Shapes compare by identity; ``uid`` tells apart two shapes built from the
    same definition, and ``dataclasses.replace`` draws a fresh one. A shape
    whose transform is singular is inert: every transform-dependent query
    returns None.
    """

    geometry: Geometry = field(default_factory=Sphere)
    transform: NDArray[np.float64] = field(default_factory=identity)
    material: Material = field(default_factory=Material)
    uid: int = field(init=False, default_factory=next_shape_id)
    _inverse: Optional[NDArray[np.float64]] = field(init=False, repr=False)
    _normal_matrix: Optional[NDArray[np.float64]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        inv = inverse(self.transform)
        object.__setattr__(self, "_inverse", inv)
        object.__setattr__(self, "_normal_matrix", None if inv is None else inv.T)

    @property
    def inverse(self) -> Optional[NDArray[np.float64]]:
        return self._inverse

    @property
    def is_inert(self) -> bool:
        if self._inverse is None:
            return True
        pattern = self.material.pattern
        return pattern is not None and inverse(pattern.transform) is None

    def intersects(self, ray: Ray, eps: float = EPSILON) -> Optional[Intersections]:
        """All intersections of a world-space ray with this shape."""

        if self._inverse is None:
            return None
        local = ray.transform(self._inverse)
        ts = local_intersect(self.geometry, local, eps=eps)
        return Intersections([Intersection(t, self) for t in ts])

    def normal_at(self, world_point: Vector, eps: float = EPSILON) -> Optional[Vector]:
        """Unit world-space normal at a point on the surface."""

        if self._inverse is None:
            return None
        object_point = self._inverse @ world_point
        object_normal = local_normal_at(self.geometry, object_point, eps=eps)
        world_normal = self._normal_matrix @ object_normal
        world_normal[3] = 0.0
        n = np.linalg.norm(world_normal)
        if n == 0:
            return None
        return world_normal / n

    def pattern_at(self, world_point: Vector) -> Optional[NDArray[np.float64]]:
        pattern = self.material.pattern
        if self._inverse is None or pattern is None:
            return None
        pattern_inverse = inverse(pattern.transform)
        if pattern_inverse is None:
            return None
        return pattern.at(pattern_inverse @ (self._inverse @ world_point))


def sphere(transform=None, material: Optional[Material] = None) -> Shape:
    return _make(Sphere(), transform, material)


def glass_sphere(transform=None, refractive_index: float = GLASS) -> Shape:
    return _make(Sphere(), transform, Material(transparency=1.0, refractive_index=refractive_index))


def plane(transform=None, material: Optional[Material] = None) -> Shape:
    return _make(Plane(), transform, material)


def cube(transform=None, material: Optional[Material] = None) -> Shape:
    return _make(Cube(), transform, material)


def cylinder(
    transform=None,
    material: Optional[Material] = None,
    minimum: float = -math.inf,
    maximum: float = math.inf,
    closed: bool = False,
) -> Shape:
    return _make(Cylinder(minimum, maximum, closed), transform, material)


def cone(
    transform=None,
    material: Optional[Material] = None,
    minimum: float = -math.inf,
    maximum: float = math.inf,
    closed: bool = False,
) -> Shape:
    return _make(Cone(minimum, maximum, closed), transform, material)


def _make(geometry: Geometry, transform, material: Optional[Material]) -> Shape:
    return Shape(
        geometry=geometry,
        transform=identity() if transform is None else np.asarray(transform, dtype=float),
        material=Material() if material is None else material,
    )


# ---------------------------------------------------------------------------
# object-space intersection
# ---------------------------------------------------------------------------


def local_intersect(geometry: Geometry, ray: Ray, eps: float = EPSILON) -> List[float]:
    """Intersection parameters of an object-space ray, unsorted."""

    if isinstance(geometry, Sphere):
        return _intersect_sphere(ray)
    if isinstance(geometry, Plane):
        return _intersect_plane(ray, eps)
    if isinstance(geometry, Cube):
        return _intersect_cube(ray, eps)
    if isinstance(geometry, Cylinder):
        return _intersect_cylinder(geometry, ray, eps)
    if isinstance(geometry, Cone):
        return _intersect_cone(geometry, ray, eps)
    raise TypeError(f"Unsupported geometry: {type(geometry).__name__}")


def _intersect_sphere(ray: Ray) -> List[float]:
    o = ray.origin[:3]
    d = ray.direction[:3]
    a = float(np.dot(d, d))
    b = 2.0 * float(np.dot(d, o))
    c = float(np.dot(o, o)) - 1.0
    disc = b * b - 4.0 * a * c
    if disc < 0:
        return []
    root = math.sqrt(disc)
    return [(-b - root) / (2.0 * a), (-b + root) / (2.0 * a)]


def _intersect_plane(ray: Ray, eps: float) -> List[float]:
    # parallel and coplanar rays both miss
    dy = float(ray.direction[1])
    if abs(dy) < eps:
        return []
    return [-float(ray.origin[1]) / dy]


def _check_axis(origin: float, direction: float, eps: float) -> tuple[float, float]:
    if abs(direction) < eps:
        # parallel to this slab: inside for every t, or never
        if -1.0 <= origin <= 1.0:
            return -math.inf, math.inf
        return math.inf, -math.inf
    tmin = (-1.0 - origin) / direction
    tmax = (1.0 - origin) / direction
    return min(tmin, tmax), max(tmin, tmax)


def _intersect_cube(ray: Ray, eps: float) -> List[float]:
    xtmin, xtmax = _check_axis(float(ray.origin[0]), float(ray.direction[0]), eps)
    ytmin, ytmax = _check_axis(float(ray.origin[1]), float(ray.direction[1]), eps)
    ztmin, ztmax = _check_axis(float(ray.origin[2]), float(ray.direction[2]), eps)
    tmin = max(xtmin, ytmin, ztmin)
    tmax = min(xtmax, ytmax, ztmax)
    if tmin > tmax:
        return []
    return [tmin, tmax]


def _cap_hit(ray: Ray, t: float, radius: float) -> bool:
    x = float(ray.origin[0]) + t * float(ray.direction[0])
    z = float(ray.origin[2]) + t * float(ray.direction[2])
    return x * x + z * z <= radius * radius


def _intersect_caps(ray: Ray, minimum: float, maximum: float, cone: bool, eps: float) -> List[float]:
    dy = float(ray.direction[1])
    if abs(dy) < eps:
        return []
    oy = float(ray.origin[1])
    out: List[float] = []
    for limit in (minimum, maximum):
        if math.isinf(limit):
            continue
        t = (limit - oy) / dy
        if _cap_hit(ray, t, abs(limit) if cone else 1.0):
            out.append(t)
    return out


def _within(ray: Ray, t: float, minimum: float, maximum: float) -> bool:
    y = float(ray.origin[1]) + t * float(ray.direction[1])
    return minimum < y < maximum


def _intersect_cylinder(cyl: Cylinder, ray: Ray, eps: float) -> List[float]:
    ox, oz = float(ray.origin[0]), float(ray.origin[2])
    dx, dz = float(ray.direction[0]), float(ray.direction[2])
    a = dx * dx + dz * dz
    xs: List[float] = []
    # a ~ 0: ray parallel to the axis, only the caps can be hit
    if abs(a) >= eps:
        b = 2.0 * ox * dx + 2.0 * oz * dz
        c = ox * ox + oz * oz - 1.0
        disc = b * b - 4.0 * a * c
        if disc < 0:
            return []
        root = math.sqrt(disc)
        for t in sorted(((-b - root) / (2.0 * a), (-b + root) / (2.0 * a))):
            if _within(ray, t, cyl.minimum, cyl.maximum):
                xs.append(t)
    if cyl.closed:
        xs.extend(_intersect_caps(ray, cyl.minimum, cyl.maximum, False, eps))
    return xs


def _intersect_cone(cone: Cone, ray: Ray, eps: float) -> List[float]:
    ox, oy, oz = (float(v) for v in ray.origin[:3])
    dx, dy, dz = (float(v) for v in ray.direction[:3])
    a = dx * dx - dy * dy + dz * dz
    b = 2.0 * ox * dx - 2.0 * oy * dy + 2.0 * oz * dz
    c = ox * ox - oy * oy + oz * oz
    xs: List[float] = []
    if abs(a) < eps:
        # parallel to one half: a single crossing, or none when b ~ 0 as well
        if abs(b) >= eps:
            t = -c / (2.0 * b)
            if _within(ray, t, cone.minimum, cone.maximum):
                xs.append(t)
    else:
        disc = b * b - 4.0 * a * c
        if disc < 0:
            return []
        root = math.sqrt(disc)
        for t in sorted(((-b - root) / (2.0 * a), (-b + root) / (2.0 * a))):
            if _within(ray, t, cone.minimum, cone.maximum):
                xs.append(t)
    if cone.closed:
        xs.extend(_intersect_caps(ray, cone.minimum, cone.maximum, True, eps))
    return xs


# ---------------------------------------------------------------------------
# object-space normals
# ---------------------------------------------------------------------------


def local_normal_at(geometry: Geometry, p: Vector, eps: float = EPSILON) -> Vector:
    """Object-space normal, not normalized."""

    x, y, z = float(p[0]), float(p[1]), float(p[2])
    if isinstance(geometry, Sphere):
        return vector(x, y, z)
    if isinstance(geometry, Plane):
        return vector(0.0, 1.0, 0.0)
    if isinstance(geometry, Cube):
        return _cube_normal(x, y, z, eps)
    if isinstance(geometry, Cylinder):
        dist = x * x + z * z
        if geometry.closed and dist < 1.0 and y >= geometry.maximum - eps:
            return vector(0.0, 1.0, 0.0)
        if geometry.closed and dist < 1.0 and y <= geometry.minimum + eps:
            return vector(0.0, -1.0, 0.0)
        return vector(x, 0.0, z)
    if isinstance(geometry, Cone):
        dist = x * x + z * z
        if geometry.closed and dist < geometry.maximum**2 and y >= geometry.maximum - eps:
            return vector(0.0, 1.0, 0.0)
        if geometry.closed and dist < geometry.minimum**2 and y <= geometry.minimum + eps:
            return vector(0.0, -1.0, 0.0)
        ny = math.sqrt(dist)
        if y > 0:
            ny = -ny
        return vector(x, ny, z)
    raise TypeError(f"Unsupported geometry: {type(geometry).__name__}")


def _cube_normal(x: float, y: float, z: float, eps: float) -> Vector:
    # ties resolve x, then y, then z
    ax, ay, az = abs(x), abs(y), abs(z)
    maxc = max(ax, ay, az)
    if maxc - ax < eps:
        return vector(x, 0.0, 0.0)
    if maxc - ay < eps:
        return vector(0.0, y, 0.0)
    return vector(0.0, 0.0, z)
