"""Homogeneous points, vectors, colors and 4x4 transformation builders.

Points carry w=1 and vectors w=0 so one matrix product handles both:
translations move points and leave vectors untouched.

Example:
    >>> import numpy as np
    >>> from render_core.transforms import point, translation
    >>> np.allclose(translation(5.0, -3.0, 2.0) @ point(-3.0, 4.0, 5.0), point(2.0, 1.0, 7.0))
    True
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import NDArray

Vector = NDArray[np.float64]
Matrix = NDArray[np.float64]
Color = NDArray[np.float64]

EPSILON = 1e-5


def point(x: float, y: float, z: float) -> Vector:
    return np.array([x, y, z, 1.0], dtype=float)


def vector(x: float, y: float, z: float) -> Vector:
    return np.array([x, y, z, 0.0], dtype=float)


def color(r: float, g: float, b: float) -> Color:
    return np.array([r, g, b], dtype=float)


BLACK = color(0.0, 0.0, 0.0)
WHITE = color(1.0, 1.0, 1.0)


def dot(a: Vector, b: Vector) -> float:
    return float(np.dot(a, b))


def cross(a: Vector, b: Vector) -> Vector:
    c = np.cross(a[:3], b[:3])
    return vector(c[0], c[1], c[2])


def magnitude(v: Vector) -> float:
    return float(np.linalg.norm(v))


def normalize(v: Vector) -> Vector:
    vv = np.asarray(v, dtype=float)
    n = np.linalg.norm(vv)
    if n == 0:
        raise ValueError("Cannot normalize zero vector")
    return vv / n


def reflect(incident: Vector, normal: Vector) -> Vector:
    """Mirror ``incident`` about ``normal`` (normal assumed unit length)."""

    return incident - normal * (2.0 * dot(incident, normal))


def identity() -> Matrix:
    return np.eye(4, dtype=float)


def translation(x: float, y: float, z: float) -> Matrix:
    m = identity()
    m[:3, 3] = (x, y, z)
    return m


def scaling(x: float, y: float, z: float) -> Matrix:
    return np.diag([x, y, z, 1.0]).astype(float)


def rotation_x(rad: float) -> Matrix:
    c, s = np.cos(rad), np.sin(rad)
    m = identity()
    m[1, 1], m[1, 2] = c, -s
    m[2, 1], m[2, 2] = s, c
    return m


def rotation_y(rad: float) -> Matrix:
    c, s = np.cos(rad), np.sin(rad)
    m = identity()
    m[0, 0], m[0, 2] = c, s
    m[2, 0], m[2, 2] = -s, c
    return m


def rotation_z(rad: float) -> Matrix:
    c, s = np.cos(rad), np.sin(rad)
    m = identity()
    m[0, 0], m[0, 1] = c, -s
    m[1, 0], m[1, 1] = s, c
    return m


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear each axis in proportion to the other two (``xy``: x moved by y)."""

    m = identity()
    m[0, 1], m[0, 2] = xy, xz
    m[1, 0], m[1, 2] = yx, yz
    m[2, 0], m[2, 1] = zx, zy
    return m


def chain(*matrices: Matrix) -> Matrix:
    """Compose transforms in application order: ``chain(a, b)`` applies ``a`` first."""

    out = identity()
    for m in matrices:
        out = m @ out
    return out


def view_transform(from_point: Vector, to_point: Vector, up: Vector) -> Matrix:
    """World-to-eye matrix for an eye at ``from_point`` looking at ``to_point``."""

    forward = normalize(to_point - from_point)
    left = cross(forward, normalize(up))
    true_up = cross(left, forward)
    orientation = np.array(
        [
            [left[0], left[1], left[2], 0.0],
            [true_up[0], true_up[1], true_up[2], 0.0],
            [-forward[0], -forward[1], -forward[2], 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=float,
    )
    return orientation @ translation(-from_point[0], -from_point[1], -from_point[2])


def inverse(m: Matrix, eps: float = 1e-12) -> Optional[Matrix]:
    """Return the inverse of ``m`` or None when it is singular."""

    mm = np.asarray(m, dtype=float)
    if abs(np.linalg.det(mm)) < eps:
        return None
    try:
        return np.linalg.inv(mm)
    except np.linalg.LinAlgError:
        return None
