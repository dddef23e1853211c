from pathlib import Path

from voxelcraft.skybox import SKYBOX_FACES, face_paths
from voxelcraft.textures import DEFAULT_ASSET_DIR


def test_face_order():
    assert face_paths("assets") == [
        Path("assets/skybox/right.bmp"),
        Path("assets/skybox/left.bmp"),
        Path("assets/skybox/top.bmp"),
        Path("assets/skybox/bottom.bmp"),
        Path("assets/skybox/front.bmp"),
        Path("assets/skybox/back.bmp"),
    ]


def test_default_faces_live_under_default_assets():
    paths = face_paths()
    assert paths[0] == Path("../assets/skybox/right.bmp")
    assert all(p.parent == DEFAULT_ASSET_DIR / "skybox" for p in paths)


def test_six_distinct_faces():
    paths = face_paths(Path("x"))
    assert len(set(paths)) == len(SKYBOX_FACES)
    assert [p.stem for p in paths] == list(SKYBOX_FACES)


def test_faces_are_bitmaps():
    assert {p.suffix for p in face_paths(Path("y"))} == {".bmp"}