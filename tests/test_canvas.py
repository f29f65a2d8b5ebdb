import numpy as np
import pytest

from render_core.canvas import Canvas


def test_new_canvas_is_black():
    c = Canvas(10, 20)
    assert c.pixels.shape == (20, 10, 3)
    assert np.all(c.pixels == 0.0)


def test_write_and_read_pixel():
    c = Canvas(10, 20)
    c.write(2, 3, [1.0, 0.0, 0.0])
    assert np.allclose(c.pixel_at(2, 3), [1.0, 0.0, 0.0])
    assert np.allclose(c.pixels[3, 2], [1.0, 0.0, 0.0])


def test_pixel_at_returns_copy():
    c = Canvas(2, 2)
    px = c.pixel_at(0, 0)
    px[:] = 5.0
    assert np.all(c.pixel_at(0, 0) == 0.0)


def test_linear_index_is_row_major():
    c = Canvas(4, 3)
    c.write_i(9, [0.25, 0.5, 0.75])
    assert np.allclose(c.pixel_at(1, 2), [0.25, 0.5, 0.75])
    assert np.allclose(c.pixel_at_i(9), [0.25, 0.5, 0.75])


def test_values_are_not_clamped():
    c = Canvas(1, 1)
    c.write(0, 0, [1.5, -0.5, 2.0])
    assert np.allclose(c.pixel_at(0, 0), [1.5, -0.5, 2.0])


def test_fill():
    c = Canvas(3, 2)
    c.fill([1.0, 0.8, 0.6])
    assert np.allclose(c.pixels[..., 1], 0.8)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_out_of_range_raises(x, y):
    c = Canvas(4, 3)
    with pytest.raises(IndexError):
        c.write(x, y, [0, 0, 0])
    with pytest.raises(IndexError):
        c.pixel_at(x, y)


def test_bad_size_raises():
    with pytest.raises(ValueError):
        Canvas(0, 5)
    with pytest.raises(ValueError):
        Canvas.from_array(np.zeros((2, 2)))
