"""A first-person voxel sandbox: fly over a chunk of blocks, break and place blocks."""

__version__ = "0.1.0"