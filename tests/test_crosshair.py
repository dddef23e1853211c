import numpy as np
import pytest

from voxelcraft.crosshair import CROSSHAIR_VERTICES, crosshair_projection


def _projected_points():
    it = iter(CROSSHAIR_VERTICES)
    projection = crosshair_projection()
    points = []
    for x, y in zip(it, it):
        clip = projection @ np.array([x, y, 0.0, 1.0])
        points.append((float(clip[0] / clip[3]), float(clip[1] / clip[3])))
    return points


@pytest.mark.parametrize("x, y", [(0.0, 0.0), (0.5, -0.25), (-1.0, 1.0)])
def test_projection_keeps_screen_coordinates(x, y):
    clip = crosshair_projection() @ np.array([x, y, 0.0, 1.0])
    assert clip[0] == pytest.approx(x)
    assert clip[1] == pytest.approx(y)
    assert clip[3] == pytest.approx(1.0)


def test_projection_flips_depth():
    clip = crosshair_projection() @ np.array([0.0, 0.0, 0.5, 1.0])
    assert clip[2] == pytest.approx(-0.5)


def test_two_line_segments_on_screen():
    points = _projected_points()
    assert len(points) == 4
    assert all(abs(x) <= 1.0 and abs(y) <= 1.0 for x, y in points)


def test_segments_are_centred_and_axis_aligned():
    a, b, c, d = _projected_points()
    assert a[0] == pytest.approx(-b[0])
    assert c[1] == pytest.approx(-d[1])
    assert a[1] == pytest.approx(0.0)
    assert b[1] == pytest.approx(0.0)
    assert c[0] == pytest.approx(0.0)
    assert d[0] == pytest.approx(0.0)


def test_arms_have_equal_length():
    a, _, c, _ = _projected_points()
    assert abs(a[0]) == pytest.approx(abs(c[1]))