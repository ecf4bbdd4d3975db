"""
spritegrid
==========

In-memory pixel and voxel grid containers.

This package models 2D sprites and 3D voxel sprites as fixed-size grids of
RGBA colors, populates them from solid colors, text drawings, color grids or
raster images, and composites sprites onto larger boards.

Key Features:
- One N-dimensional grid core backed by numpy arrays
- Bounds-checked accessors that never raise on out-of-range coordinates
- Premultiplied 16-bit sample conversion with Numba JIT kernels
- Image import through Pillow

Example Usage:
    from spritegrid import Sprite, BLACK

    sprite = Sprite(8, 8)
    sprite.generate_from_string(" rr \\nrggr\\n", mode=1)
    color, found = sprite.get_pixel(1, 0)
    board = [[BLACK] * 16 for _ in range(16)]
    sprite.draw_on_board(2, 2, board)
"""

__version__ = "1.0.0"
__author__ = "spritegrid Team"

from .color import (
    Color, clamp, premultiply, unpremultiply,
    TRANSPARENT, BLACK, WHITE, RED, GREEN, BLUE,
)
from .grid import PixelGrid, Lookup, NOT_FOUND
from .sprite import Sprite
from .voxel import VoxelSprite
from .ingestion import Raster, ImageRaster
from .resources import read_file, write_file, load_text_sprite

__all__ = [
    "Color",
    "clamp",
    "premultiply",
    "unpremultiply",
    "TRANSPARENT",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "PixelGrid",
    "Lookup",
    "NOT_FOUND",
    "Sprite",
    "VoxelSprite",
    "Raster",
    "ImageRaster",
    "read_file",
    "write_file",
    "load_text_sprite",
]
