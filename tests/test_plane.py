import numpy as np

from render_core.rays import Ray
from render_core.shapes import Plane, local_normal_at, plane
from render_core.transforms import point, vector


def _ts(origin, direction):
    return [i.t for i in plane().intersects(Ray(point(*origin), vector(*direction)))]


def test_normal_is_constant():
    for p in (point(0, 0, 0), point(10, 0, -10), point(-5, 0, 150)):
        assert np.allclose(local_normal_at(Plane(), p), vector(0, 1, 0))
        assert np.allclose(plane().normal_at(p), vector(0, 1, 0))


def test_parallel_ray_misses():
    assert _ts((0, 10, 0), (0, 0, 1)) == []


def test_coplanar_ray_misses():
    assert _ts((0, 0, 0), (0, 0, 1)) == []


def test_nearly_parallel_ray_below_epsilon_misses():
    assert _ts((0, 1, 0), (1, 1e-7, 0)) == []


def test_ray_from_above_and_below():
    assert _ts((0, 1, 0), (0, -1, 0)) == [1.0]
    assert _ts((0, -1, 0), (0, 1, 0)) == [1.0]
