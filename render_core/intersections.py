"""Intersection records, sorted intersection lists and hit shading context.

Example:
    >>> from render_core.intersections import Intersection, Intersections
    >>> from render_core.shapes import sphere
    >>> s = sphere()
    >>> xs = Intersections([Intersection(5.0, s), Intersection(-3.0, s), Intersection(2.0, s)])
    >>> xs.hit().t
    2.0
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional

import numpy as np
from numpy.typing import NDArray

from render_core.rays import Ray
from render_core.transforms import EPSILON, dot, reflect

if TYPE_CHECKING:
    from render_core.shapes import Shape

Vector = NDArray[np.float64]

VACUUM_INDEX = 1.0


@dataclass(frozen=True)
class Intersection:
    t: float
    shape: "Shape"


class Intersections:
    """Intersections kept in ascending ``t`` order after every mutation."""

    def __init__(self, items: Iterable[Intersection] = ()) -> None:
        self._items: List[Intersection] = sorted(items, key=lambda i: i.t)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Intersections({[i.t for i in self._items]})"

    def count(self) -> int:
        return len(self._items)

    def get(self, index: int) -> Optional[Intersection]:
        if index < 0 or index >= len(self._items):
            return None
        return self._items[index]

    def t_at(self, index: int) -> Optional[float]:
        i = self.get(index)
        return None if i is None else i.t

    def shape_at(self, index: int) -> Optional["Shape"]:
        i = self.get(index)
        return None if i is None else i.shape

    def add(self, intersection: Intersection) -> None:
        self._items.append(intersection)
        self._items.sort(key=lambda i: i.t)

    def extend(self, other: Iterable[Intersection]) -> None:
        self._items.extend(other)
        self._items.sort(key=lambda i: i.t)

    def aggregate(self, intersection: Intersection) -> "Intersections":
        """Return a new list with ``intersection`` merged in."""

        return Intersections([*self._items, intersection])

    def hit(self) -> Optional[Intersection]:
        """Intersection with the smallest non-negative ``t``."""

        for i in self._items:
            if i.t >= 0:
                return i
        return None


@dataclass
class PreComputed:
    """Shading context at one hit.

    n1 is the refractive index being exited and n2 the one being entered.
    """

    t: float
    shape: "Shape"
    point: Vector
    eyev: Vector
    normalv: Vector
    inside: bool
    reflectv: Vector
    over_point: Vector
    under_point: Vector
    n1: float = VACUUM_INDEX
    n2: float = VACUUM_INDEX


def refractive_indices(hit: Intersection, xs: Iterable[Intersection]) -> tuple[float, float]:
    """(exited, entered) indices at ``hit`` by walking ``xs`` front to back."""

    containers: List["Shape"] = []
    n1 = n2 = VACUUM_INDEX
    for i in xs:
        is_hit = i == hit
        if is_hit:
            n1 = containers[-1].material.refractive_index if containers else VACUUM_INDEX

        position = next((k for k, c in enumerate(containers) if c.uid == i.shape.uid), None)
        if position is None:
            containers.append(i.shape)
        else:
            del containers[position]

        if is_hit:
            n2 = containers[-1].material.refractive_index if containers else VACUUM_INDEX
            break
    return n1, n2


def prepare_computations(
    hit: Intersection,
    ray: Ray,
    xs: Optional[Iterable[Intersection]] = None,
    eps: float = EPSILON,
) -> Optional[PreComputed]:
    """Build the shading context for ``hit``.

    ``xs`` must be every intersection along ``ray`` for refraction to see the
    volumes the ray is travelling through; it defaults to ``[hit]``.
    Returns None when the shape cannot produce a normal at the hit point.
    """

    point = ray.position(hit.t)
    normalv = hit.shape.normal_at(point, eps=eps)
    if normalv is None:
        return None
    eyev = -ray.direction
    inside = dot(normalv, eyev) < 0
    if inside:
        normalv = -normalv

    n1, n2 = refractive_indices(hit, [hit] if xs is None else xs)
    return PreComputed(
        t=hit.t,
        shape=hit.shape,
        point=point,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        reflectv=reflect(ray.direction, normalv),
        over_point=point + normalv * eps,
        under_point=point - normalv * eps,
        n1=n1,
        n2=n2,
    )


def schlick(comps: PreComputed) -> float:
    """Schlick approximation of the Fresnel reflectance at a hit."""

    cos = dot(comps.eyev, comps.normalv)
    if comps.n1 > comps.n2:
        n = comps.n1 / comps.n2
        sin2_t = n * n * (1.0 - cos * cos)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)
    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5
