"""
Generic N-Dimensional Color Grid

This module provides:
- Lookup: Result of a bounds-checked cell query
- PixelGrid: Dense grid of RGBA cells shared by Sprite and VoxelSprite

Storage layout: a numpy array of shape reversed(size) + (4,), so the last
coordinate of `size` is the outermost axis. A boolean mask of the same
leading shape records which cells the last generation produced; cells
outside it behave exactly like out-of-range cells.
"""

from typing import Dict, NamedTuple, Optional, Sequence, Tuple
import numpy as np

from .color import Color, TRANSPARENT


class Lookup(NamedTuple):
    """Color found at a cell, and whether the cell exists."""

    color: Color
    found: bool


NOT_FOUND = Lookup(TRANSPARENT, False)


def _to_color(rgba: np.ndarray) -> Color:
    return Color(int(rgba[0]), int(rgba[1]), int(rgba[2]), int(rgba[3]))


class PixelGrid:
    """
    Fixed-size grid of RGBA colors in any number of dimensions.

    The grid holds no cells until one of the generate methods runs; every
    generation discards the previous contents and rebuilds storage from
    the current `size`.

    Attributes:
        size: Declared extent per axis, width first
    """

    def __init__(self, size: Sequence[int]):
        """
        Initialize an empty grid.

        Args:
            size: Extent per axis, e.g. (width, height) or (width, height, depth)
        """
        self.size: Tuple[int, ...] = tuple(int(s) for s in size)
        self._data = np.zeros((0,) * len(self.size) + (4,), dtype=np.uint8)
        self._filled = np.zeros((0,) * len(self.size), dtype=bool)
        self._extent = 0
        self._generated = False

    @property
    def ndim(self) -> int:
        """Number of axes of this grid."""
        return len(self.size)

    @property
    def generated(self) -> bool:
        """True once any generate method has populated the grid."""
        return self._generated

    @property
    def populated_count(self) -> int:
        """Number of cells produced by the last generation."""
        return int(np.count_nonzero(self._filled))

    def _storage_shape(self) -> Tuple[int, ...]:
        # Non-positive dimensions give an empty axis
        return tuple(max(0, s) for s in reversed(self.size))

    def _allocate(self):
        """Discard current cells and allocate empty storage for `size`."""
        shape = self._storage_shape()
        self._data = np.zeros(shape + (4,), dtype=np.uint8)
        self._filled = np.zeros(shape, dtype=bool)
        self._extent = 0
        self._generated = True

    def _load(self, colors: np.ndarray, present: np.ndarray, extent: int):
        """
        Rebuild storage from a block of colors anchored at the origin.

        Args:
            colors: uint8 array of shape present.shape + (4,)
            present: Mask of cells the source actually provided
            extent: Number of outermost slices the source produced
        """
        self._allocate()
        region = tuple(slice(0, n) for n in present.shape)
        self._data[region][present] = colors[present]
        self._filled[region] = present
        self._extent = extent

    def _index(self, coords: Sequence[int]) -> Optional[Tuple[int, ...]]:
        """Storage index for coords, or None when the cell does not exist."""
        if len(coords) != self._filled.ndim:
            return None
        index = tuple(int(c) for c in reversed(coords))
        for i, n in zip(index, self._filled.shape):
            if not 0 <= i < n:
                return None
        if not self._filled[index]:
            return None
        return index

    def _lookup(self, *coords: int) -> Lookup:
        index = self._index(coords)
        if index is None:
            return NOT_FOUND
        return Lookup(_to_color(self._data[index]), True)

    def _store(self, coords: Sequence[int], color: Color) -> bool:
        index = self._index(coords)
        if index is None:
            return False
        self._data[index] = tuple(color)
        return True

    def generate(self, init_color: Color):
        """
        Fill the whole grid with a single color.

        Args:
            init_color: Color written to every cell
        """
        self._allocate()
        self._data[...] = tuple(init_color)
        self._filled[...] = True
        self._extent = self._filled.shape[0] if self._filled.ndim else 0

    def get_colors(self) -> Dict[Color, int]:
        """
        Count occurrences of each distinct color.

        Returns:
            Mapping of color to number of populated cells holding it
        """
        colors = self._data[self._filled]
        if len(colors) == 0:
            return {}
        unique, counts = np.unique(colors, axis=0, return_counts=True)
        return {_to_color(c): int(n) for c, n in zip(unique, counts)}

    def to_array(self) -> np.ndarray:
        """
        Copy of the cell data with unpopulated cells zeroed.

        Returns:
            uint8 array of shape reversed(size) + (4,)
        """
        data = self._data.copy()
        data[~self._filled] = 0
        return data

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={self.size}, "
            f"populated={self.populated_count})"
        )
