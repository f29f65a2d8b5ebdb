import numpy as np
import pytest

from render_core.materials import Material
from render_core.patterns import Pattern, checkers_pattern, gradient_pattern, ring_pattern, stripe_pattern
from render_core.shapes import sphere
from render_core.transforms import BLACK, WHITE, point, scaling, translation


def test_stripe_is_constant_in_y_and_z():
    p = stripe_pattern(WHITE, BLACK)
    for q in (point(0, 0, 0), point(0, 1, 0), point(0, 2, 0), point(0, 0, 1), point(0, 0, 2)):
        assert np.allclose(p.at(q), WHITE)


@pytest.mark.parametrize("x, expected", [(0, WHITE), (0.9, WHITE), (1, BLACK), (-0.1, BLACK), (-1, BLACK), (-1.1, WHITE)])
def test_stripe_alternates_in_x(x, expected):
    assert np.allclose(stripe_pattern(WHITE, BLACK).at(point(x, 0, 0)), expected)


def test_stripe_with_object_transform():
    s = sphere(scaling(2, 2, 2), Material(pattern=stripe_pattern(WHITE, BLACK)))
    assert np.allclose(s.pattern_at(point(1.5, 0, 0)), WHITE)


def test_stripe_with_pattern_transform():
    s = sphere(material=Material(pattern=stripe_pattern(WHITE, BLACK, scaling(2, 2, 2))))
    assert np.allclose(s.pattern_at(point(1.5, 0, 0)), WHITE)


def test_stripe_with_both_transforms():
    s = sphere(scaling(2, 2, 2), Material(pattern=stripe_pattern(WHITE, BLACK, translation(0.5, 0, 0))))
    assert np.allclose(s.pattern_at(point(2.5, 0, 0)), WHITE)


def test_gradient_interpolates():
    p = gradient_pattern(WHITE, BLACK)
    assert np.allclose(p.at(point(0, 0, 0)), WHITE)
    assert np.allclose(p.at(point(0.25, 0, 0)), [0.75, 0.75, 0.75])
    assert np.allclose(p.at(point(0.5, 0, 0)), [0.5, 0.5, 0.5])
    assert np.allclose(p.at(point(0.75, 0, 0)), [0.25, 0.25, 0.25])


def test_ring_extends_in_x_and_z():
    p = ring_pattern(WHITE, BLACK)
    assert np.allclose(p.at(point(0, 0, 0)), WHITE)
    assert np.allclose(p.at(point(1, 0, 0)), BLACK)
    assert np.allclose(p.at(point(0, 0, 1)), BLACK)
    assert np.allclose(p.at(point(0.708, 0, 0.708)), BLACK)


def test_checkers_repeat_on_every_axis():
    p = checkers_pattern(WHITE, BLACK)
    for axis in range(3):
        near, far = [0.0, 0.0, 0.0], [0.0, 0.0, 0.0]
        near[axis], far[axis] = 0.99, 1.01
        assert np.allclose(p.at(point(*near)), WHITE)
        assert np.allclose(p.at(point(*far)), BLACK)


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        Pattern("noise", WHITE, BLACK)


def test_singular_pattern_transform_makes_shape_inert():
    s = sphere(material=Material(pattern=stripe_pattern(WHITE, BLACK, scaling(1, 0, 1))))
    assert s.is_inert
    assert s.pattern_at(point(0, 0, 0)) is None
