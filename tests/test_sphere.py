import math

import numpy as np

from render_core.rays import Ray
from render_core.shapes import Shape, Sphere, sphere
from render_core.transforms import chain, magnitude, point, rotation_z, scaling, translation, vector


def _ts(shape, origin, direction):
    xs = shape.intersects(Ray(point(*origin), vector(*direction)))
    return [i.t for i in xs]


def test_ray_through_center_hits_twice():
    assert _ts(sphere(), (0, 0, -5), (0, 0, 1)) == [4.0, 6.0]


def test_tangent_ray_hits_twice_at_same_t():
    assert _ts(sphere(), (0, 1, -5), (0, 0, 1)) == [5.0, 5.0]


def test_ray_misses():
    assert _ts(sphere(), (0, 2, -5), (0, 0, 1)) == []


def test_ray_from_inside_is_symmetric():
    assert _ts(sphere(), (0, 0, 0), (0, 0, 1)) == [-1.0, 1.0]


def test_sphere_behind_ray():
    assert _ts(sphere(), (0, 0, 5), (0, 0, 1)) == [-6.0, -4.0]


def test_intersections_carry_the_shape():
    s = sphere()
    xs = s.intersects(Ray(point(0, 0, -5), vector(0, 0, 1)))
    assert all(i.shape is s for i in xs)


def test_transformed_sphere():
    assert _ts(sphere(scaling(2, 2, 2)), (0, 0, -5), (0, 0, 1)) == [3.0, 7.0]
    assert _ts(sphere(translation(5, 0, 0)), (0, 0, -5), (0, 0, 1)) == []


def test_normals_are_unit_and_radial():
    s = sphere()
    k = math.sqrt(3.0) / 3.0
    assert np.allclose(s.normal_at(point(1, 0, 0)), vector(1, 0, 0))
    n = s.normal_at(point(k, k, k))
    assert np.allclose(n, vector(k, k, k))
    assert np.isclose(magnitude(n), 1.0, atol=1e-5)


def test_normal_on_translated_sphere():
    n = sphere(translation(0, 1, 0)).normal_at(point(0, 1.70711, -0.70711))
    assert np.allclose(n, vector(0, 0.70711, -0.70711), atol=1e-5)


def test_normal_under_non_uniform_scaling():
    h = math.sqrt(2.0) / 2.0
    s = sphere(chain(rotation_z(math.pi / 5), scaling(1, 0.5, 1)))
    assert np.allclose(s.normal_at(point(0, h, -h)), vector(0, 0.97014, -0.24254), atol=1e-5)


def test_normal_invariant_under_uniform_scaling():
    k = math.sqrt(3.0) / 3.0
    n1 = sphere().normal_at(point(k, k, k))
    n2 = sphere(scaling(3, 3, 3)).normal_at(point(3 * k, 3 * k, 3 * k))
    assert np.allclose(n1, n2)


def test_singular_transform_is_inert():
    s = sphere(scaling(0, 1, 1))
    assert s.is_inert
    assert s.intersects(Ray(point(0, 0, -5), vector(0, 0, 1))) is None
    assert s.normal_at(point(0, 0, -1)) is None


def test_each_shape_gets_a_distinct_uid():
    a, b = sphere(), Shape(Sphere())
    assert a.uid != b.uid
