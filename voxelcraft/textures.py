"""Block texture files and loading them into OpenGL textures."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Dict, Union

from .blocks import BlockType

DEFAULT_ASSET_DIR = Path("..") / "assets"

AssetDir = Union[str, "PathLike[str]"]

_FILE_NAMES: Dict[BlockType, str] = {
    kind: kind.name.lower() for kind in BlockType if kind is not BlockType.AIR
}
_FILE_NAMES[BlockType.EVIL_STONE] = "stone"


def texture_path(block_type: BlockType, asset_dir: AssetDir = DEFAULT_ASSET_DIR) -> Path:
    """Return the image file a block type is drawn with."""
    kind = BlockType(block_type)
    try:
        name = _FILE_NAMES[kind]
    except KeyError:
        raise ValueError(f"{kind.name} has no texture") from None
    return Path(asset_dir) / "blocks" / f"{name}.png"


def load_texture(path: AssetDir) -> int:
    """Create a repeating, nearest-filtered 2D texture from an image file.

    The texture is created even when the image cannot be read; it then
    holds no pixels, and its name is still returned.
    """
    from pyglet import gl, image
    from pyglet.image.codecs import ImageDecodeException

    names = (gl.GLuint * 1)()
    gl.glGenTextures(1, names)
    texture_id = int(names[0])
    gl.glBindTexture(gl.GL_TEXTURE_2D, texture_id)

    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST)

    try:
        picture = image.load(str(path)).get_image_data()
    except (OSError, ImageDecodeException):
        return texture_id

    layout = "RGBA" if len(picture.format) == 4 else "RGB"
    gl_format = gl.GL_RGBA if layout == "RGBA" else gl.GL_RGB
    # Positive pitch yields rows bottom-up, as OpenGL expects.
    pixels = picture.get_data(layout, picture.width * len(layout))
    gl.glPixelStorei(gl.GL_UNPACK_ALIGNMENT, 1)
    gl.glTexImage2D(
        gl.GL_TEXTURE_2D, 0, gl_format, picture.width, picture.height, 0,
        gl_format, gl.GL_UNSIGNED_BYTE, pixels,
    )
    gl.glGenerateMipmap(gl.GL_TEXTURE_2D)
    return texture_id


def load_all_textures(asset_dir: AssetDir = DEFAULT_ASSET_DIR) -> Dict[BlockType, int]:
    """Load a texture for every block type except air."""
    return {kind: load_texture(texture_path(kind, asset_dir)) for kind in _FILE_NAMES}