"""Transforms, PLY meshes, RGB and JPEG images, materials and lights for a small 3D renderer."""

__version__ = "0.1.0"

__all__ = [
    "diagnostics",
    "images",
    "lights",
    "materials",
    "matrices",
    "pixels",
    "ply",
]