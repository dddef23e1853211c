import numpy as np
import pytest

from voxelcraft.transforms import look_at, ortho, perspective, strip_translation, translate


def _apply(matrix, point):
    out = matrix @ np.array([*point, 1.0])
    return out[:3] / out[3]


def test_translate_moves_point():
    assert np.allclose(_apply(translate((1, 2, 3)), (4, 5, 6)), [5, 7, 9])


def test_translate_rejects_wrong_length():
    with pytest.raises(ValueError):
        translate((1, 2))


def test_perspective_maps_near_and_far_planes():
    proj = perspective(60.0, 16 / 9, 0.1, 100.0)
    assert _apply(proj, (0, 0, -0.1))[2] == pytest.approx(-1.0)
    assert _apply(proj, (0, 0, -100.0))[2] == pytest.approx(1.0)


def test_perspective_keeps_centre_on_axis():
    proj = perspective(60.0, 1.5, 0.1, 100.0)
    assert np.allclose(_apply(proj, (0, 0, -5))[:2], [0, 0])


def test_perspective_rejects_bad_arguments():
    with pytest.raises(ValueError):
        perspective(60.0, 0.0, 0.1, 100.0)
    with pytest.raises(ValueError):
        perspective(60.0, 1.0, 1.0, 1.0)


def test_look_at_puts_eye_at_origin_and_center_ahead():
    view = look_at((3, 4, 5), (3, 4, 0), (0, 1, 0))
    assert np.allclose(_apply(view, (3, 4, 5)), [0, 0, 0])
    ahead = _apply(view, (3, 4, 0))
    assert np.allclose(ahead[:2], [0, 0])
    assert ahead[2] < 0


def test_look_at_rotation_is_orthonormal():
    view = look_at((1, 2, 3), (4, -1, 7), (0, 1, 0))
    rotation = view[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.identity(3))


def test_look_at_rejects_coincident_points():
    with pytest.raises(ValueError):
        look_at((1, 1, 1), (1, 1, 1), (0, 1, 0))


def test_ortho_maps_bounds_to_unit_square():
    proj = ortho(-2.0, 6.0, 1.0, 5.0)
    assert np.allclose(_apply(proj, (-2, 1, 0))[:2], [-1, -1])
    assert np.allclose(_apply(proj, (6, 5, 0))[:2], [1, 1])


def test_ortho_rejects_empty_area():
    with pytest.raises(ValueError):
        ortho(1.0, 1.0, -1.0, 1.0)


def test_strip_translation_removes_offset_keeps_rotation():
    view = look_at((3, 4, 5), (0, 0, 0), (0, 1, 0))
    stripped = strip_translation(view)
    assert np.allclose(stripped[:3, 3], 0)
    assert np.allclose(stripped[:3, :3], view[:3, :3])
    assert np.allclose(stripped[3], [0, 0, 0, 1])


def test_strip_translation_rejects_wrong_shape():
    with pytest.raises(ValueError):
        strip_translation(np.identity(3))