import numpy as np
import pytest

from render_core.rays import Ray
from render_core.shapes import Cube, cube, local_normal_at
from render_core.transforms import magnitude, point, scaling, vector


@pytest.mark.parametrize(
    "origin, direction, t1, t2",
    [
        ((5, 0.5, 0), (-1, 0, 0), 4.0, 6.0),
        ((-5, 0.5, 0), (1, 0, 0), 4.0, 6.0),
        ((0.5, 5, 0), (0, -1, 0), 4.0, 6.0),
        ((0.5, -5, 0), (0, 1, 0), 4.0, 6.0),
        ((0.5, 0, 5), (0, 0, -1), 4.0, 6.0),
        ((0.5, 0, -5), (0, 0, 1), 4.0, 6.0),
        ((0, 0.5, 0), (0, 0, 1), -1.0, 1.0),
    ],
)
def test_ray_intersects_cube(origin, direction, t1, t2):
    xs = cube().intersects(Ray(point(*origin), vector(*direction)))
    assert [i.t for i in xs] == [t1, t2]


@pytest.mark.parametrize(
    "origin, direction",
    [
        ((-2, 0, 0), (0.2673, 0.5345, 0.8018)),
        ((0, -2, 0), (0.8018, 0.2673, 0.5345)),
        ((0, 0, -2), (0.5345, 0.8018, 0.2673)),
        ((2, 0, 2), (0, 0, -1)),
        ((0, 2, 2), (0, -1, 0)),
        ((2, 2, 0), (-1, 0, 0)),
    ],
)
def test_ray_misses_cube(origin, direction):
    assert len(cube().intersects(Ray(point(*origin), vector(*direction)))) == 0


@pytest.mark.parametrize(
    "p, n",
    [
        ((1, 0.5, -0.8), (1, 0, 0)),
        ((-1, -0.2, 0.9), (-1, 0, 0)),
        ((-0.4, 1, -0.1), (0, 1, 0)),
        ((0.3, -1, -0.7), (0, -1, 0)),
        ((-0.6, 0.3, 1), (0, 0, 1)),
        ((0.4, 0.4, -1), (0, 0, -1)),
        ((1, 1, 1), (1, 0, 0)),
        ((-1, -1, -1), (-1, 0, 0)),
    ],
)
def test_cube_normal(p, n):
    assert np.allclose(local_normal_at(Cube(), point(*p)), vector(*n))


def test_corner_tie_breaks_y_before_z():
    assert np.allclose(local_normal_at(Cube(), point(0.2, 1, -1)), vector(0, 1, 0))


def test_world_normal_is_unit_on_scaled_cube():
    n = cube(scaling(2, 3, 4)).normal_at(point(2, 0.5, 1))
    assert np.isclose(magnitude(n), 1.0, atol=1e-5)
    assert np.allclose(n, vector(1, 0, 0))
