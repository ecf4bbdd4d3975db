"""
3D Voxel Sprite Container

Same model as Sprite one dimension up: size is (width, height, depth) and
storage is laid out depth-major (z, y, x). Only solid-color generation is
supported; voxel models are built by setting individual voxels.
"""

from .color import Color
from .grid import PixelGrid, Lookup


class VoxelSprite(PixelGrid):
    """
    Fixed-size 3D grid of colors, e.g. a voxel model.

    Coordinate system: X-right, Y-down, Z-back (matching Sprite rows)
    """

    def __init__(self, width: int, height: int, depth: int):
        super().__init__((width, height, depth))

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    @property
    def depth(self) -> int:
        return self.size[2]

    def get_voxel(self, x: int, y: int, z: int) -> Lookup:
        """
        Get voxel color at coordinates.

        Args:
            x, y, z: Voxel coordinates

        Returns:
            Lookup(color, True), or Lookup(TRANSPARENT, False) if out of bounds
        """
        return self._lookup(x, y, z)

    def set_voxel(self, x: int, y: int, z: int, color: Color) -> bool:
        """
        Set a voxel at the given coordinates.

        Args:
            x, y, z: Voxel coordinates
            color: New voxel color

        Returns:
            True if written, False if out of bounds (nothing changes)
        """
        return self._store((x, y, z), color)
