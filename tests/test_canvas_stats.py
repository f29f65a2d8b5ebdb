import numpy as np

from analysis.canvas_stats import canvas_summary, luminance
from render_core.canvas import Canvas


def test_luminance_of_white_is_one():
    c = Canvas(2, 2)
    c.fill([1.0, 1.0, 1.0])
    assert np.allclose(luminance(c), 1.0)


def test_summary_counts_clipped_and_black_pixels():
    c = Canvas(2, 2)
    c.write(0, 0, [2.0, 0.0, 0.0])
    c.write(1, 0, [0.5, 0.5, 0.5])
    s = canvas_summary(c)
    assert np.isclose(s["clipped_fraction"], 0.25)
    assert np.isclose(s["black_fraction"], 0.5)
    assert np.isclose(s["max_channel"], 2.0)
    assert np.allclose(s["mean_rgb"], [0.625, 0.125, 0.125])
