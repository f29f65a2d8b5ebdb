import math

import numpy as np

from render_core.transforms import (
    chain,
    cross,
    identity,
    inverse,
    magnitude,
    normalize,
    point,
    reflect,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    vector,
    view_transform,
)


def test_translation_moves_points_not_vectors():
    t = translation(5.0, -3.0, 2.0)
    assert np.allclose(t @ point(-3.0, 4.0, 5.0), point(2.0, 1.0, 7.0))
    assert np.allclose(inverse(t) @ point(-3.0, 4.0, 5.0), point(-8.0, 7.0, 3.0))
    assert np.allclose(t @ vector(-3.0, 4.0, 5.0), vector(-3.0, 4.0, 5.0))


def test_scaling_and_reflection_by_negative_scale():
    assert np.allclose(scaling(2.0, 3.0, 4.0) @ point(-4.0, 6.0, 8.0), point(-8.0, 18.0, 32.0))
    assert np.allclose(scaling(-1.0, 1.0, 1.0) @ point(2.0, 3.0, 4.0), point(-2.0, 3.0, 4.0))


def test_rotations_quarter_turn():
    h = math.sqrt(2.0) / 2.0
    assert np.allclose(rotation_x(math.pi / 4) @ point(0, 1, 0), point(0, h, h))
    assert np.allclose(rotation_y(math.pi / 2) @ point(0, 0, 1), point(1, 0, 0))
    assert np.allclose(rotation_z(math.pi / 2) @ point(0, 1, 0), point(-1, 0, 0))


def test_shearing_x_in_proportion_to_y():
    assert np.allclose(shearing(1, 0, 0, 0, 0, 0) @ point(2, 3, 4), point(5, 3, 4))
    assert np.allclose(shearing(0, 0, 0, 0, 0, 1) @ point(2, 3, 4), point(2, 3, 7))


def test_chain_applies_in_order():
    m = chain(rotation_x(math.pi / 2), scaling(5, 5, 5), translation(10, 5, 7))
    assert np.allclose(m @ point(1, 0, 1), point(15, 0, 7))


def test_inverse_of_singular_matrix_is_none():
    assert inverse(scaling(0.0, 1.0, 1.0)) is None
    assert np.allclose(inverse(identity()), identity())


def test_vector_helpers():
    assert np.isclose(magnitude(normalize(vector(1, 2, 3))), 1.0)
    assert np.allclose(cross(vector(1, 2, 3), vector(2, 3, 4)), vector(-1, 2, -1))
    h = math.sqrt(2.0) / 2.0
    assert np.allclose(reflect(vector(0, -1, 0), vector(h, h, 0)), vector(1, 0, 0))


def test_view_transform_cases():
    assert np.allclose(view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0)), identity())
    assert np.allclose(view_transform(point(0, 0, 0), point(0, 0, 1), vector(0, 1, 0)), scaling(-1, 1, -1))
    assert np.allclose(view_transform(point(0, 0, 8), point(0, 0, 0), vector(0, 1, 0)), translation(0, 0, -8))

    m = view_transform(point(1, 3, 2), point(4, -2, 8), vector(1, 1, 0))
    expected = np.array(
        [
            [-0.50709, 0.50709, 0.67612, -2.36643],
            [0.76772, 0.60609, 0.12122, -2.82843],
            [-0.35857, 0.59761, -0.71714, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    assert np.allclose(m, expected, atol=1e-5)
