"""
2D Sprite Container

A Sprite is a PixelGrid with size (width, height). It can be generated from
a solid color, a text drawing, another grid of color samples, or a raster
image, and composited onto a larger board.

Text drawings:
- binary mode (mode <= 0): tab/space is black, anything else white
- RGB mode (mode >= 1): 'r', 'g', 'b' map to red, green, blue;
  tab/space is black, anything else white

Imports never pad: a source line or row shorter than the sprite width
produces a shorter row.
"""

from typing import Any, List, Sequence, Union
import numpy as np
from PIL import Image

from .color import Color, BLACK, WHITE, RED, GREEN, BLUE, samples_to_colors
from .grid import PixelGrid, Lookup, _to_color
from .ingestion import Raster, as_raster


_RGB_CHARS = {"r": RED, "g": GREEN, "b": BLUE}


def char_color(char: str, mode: int) -> Color:
    """Color of a single text-drawing character in the given mode."""
    if char in ("\t", " "):
        return BLACK
    if mode >= 1:
        return _RGB_CHARS.get(char, WHITE)
    return WHITE


class Sprite(PixelGrid):
    """
    Fixed-size 2D grid of colors.

    Coordinate system: x to the right, y down; row 0 is the first line.
    """

    def __init__(self, width: int, height: int):
        super().__init__((width, height))

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    def _bounds(self):
        return max(0, self.width), max(0, self.height)

    def generate_from_string(self, text: str, mode: int = 0):
        """
        Populate the sprite from a text drawing.

        Args:
            text: Drawing with one line per row
            mode: <= 0 for binary mode, >= 1 for RGB mode
        """
        width, height = self._bounds()
        lines = text.split("\n")[:height]

        colors = np.zeros((len(lines), width, 4), dtype=np.uint8)
        present = np.zeros((len(lines), width), dtype=bool)
        for y, line in enumerate(lines):
            for x, char in enumerate(line[:width]):
                colors[y, x] = char_color(char, mode)
                present[y, x] = True

        self._load(colors, present, len(lines))

    def generate_from_sprite(
        self,
        source: Sequence[Sequence[Any]],
        overwrite_own_size: bool = False
    ):
        """
        Populate the sprite from a 2D grid of color samples.

        Elements only need an `rgba16()` method returning a premultiplied
        16-bit (r, g, b, a) sample, so rows of Color work directly.

        Args:
            source: Rows of color samples
            overwrite_own_size: If True, take (row length, row count) of
                the source as the new size first
        """
        if overwrite_own_size:
            self.size = (len(source[0]) if len(source) else 0, len(source))

        width, height = self._bounds()
        rows = [list(row)[:width] for row in list(source)[:height]]

        samples = np.zeros((len(rows), width, 4), dtype=np.uint32)
        present = np.zeros((len(rows), width), dtype=bool)
        for y, row in enumerate(rows):
            for x, sample in enumerate(row):
                samples[y, x] = sample.rgba16()
                present[y, x] = True

        self._load(samples_to_colors(samples), present, len(rows))

    def generate_from_image(
        self,
        image: Union[Raster, Image.Image, np.ndarray],
        overwrite_own_size: bool = False
    ):
        """
        Populate the sprite from a raster image.

        Args:
            image: Raster, Pillow image, or RGBA array of shape (H, W, 4)
            overwrite_own_size: If True, take the image bounds as the new
                size first
        """
        raster = as_raster(image)
        image_width, image_height = raster.size
        if overwrite_own_size:
            self.size = (image_width, image_height)

        width, height = self._bounds()
        w = min(image_width, width)
        h = min(image_height, height)

        samples = raster.samples(w, h)
        present = np.ones((h, w), dtype=bool)
        self._load(samples_to_colors(samples), present, h)

    def draw_on_board(self, offset_x: int, offset_y: int, board):
        """
        Copy every pixel of this sprite onto a larger board.

        Pixel (x, y) lands on board[offset_y + y][offset_x + x]. Destinations
        outside the board are dropped. The board is modified in place.

        Args:
            offset_x, offset_y: Board position of the sprite's top-left pixel
            board: List of rows of colors, or uint8 array of shape (H, W, 4)

        Returns:
            The same board
        """
        if isinstance(board, np.ndarray):
            self._draw_on_array(offset_x, offset_y, board)
            return board

        for y, x in np.argwhere(self._filled):
            board_y = int(y) + offset_y
            if board_y < 0 or board_y >= len(board):
                continue
            row = board[board_y]
            board_x = int(x) + offset_x
            if board_x < 0 or board_x >= len(row):
                continue
            row[board_x] = _to_color(self._data[y, x])
        return board

    def _draw_on_array(self, offset_x: int, offset_y: int, board: np.ndarray):
        board_h, board_w = board.shape[:2]
        h, w = self._filled.shape

        # Clip the sprite region to what lands on the board
        y0, x0 = max(0, -offset_y), max(0, -offset_x)
        y1, x1 = min(h, board_h - offset_y), min(w, board_w - offset_x)
        if y1 <= y0 or x1 <= x0:
            return

        mask = self._filled[y0:y1, x0:x1]
        target = board[y0 + offset_y:y1 + offset_y, x0 + offset_x:x1 + offset_x]
        target[mask] = self._data[y0:y1, x0:x1][mask]

    def get_pixel(self, x: int, y: int) -> Lookup:
        """
        Get pixel color at coordinates.

        Returns:
            Lookup(color, True), or Lookup(TRANSPARENT, False) when the
            pixel does not exist
        """
        return self._lookup(x, y)

    def set_pixel(self, x: int, y: int, color: Color) -> bool:
        """Write a pixel; returns False (and writes nothing) if it does not exist."""
        return self._store((x, y), color)

    @property
    def row_count(self) -> int:
        """Number of rows produced by the last generation."""
        return self._extent

    def row_length(self, y: int) -> int:
        """Number of pixels in row y (0 for rows that do not exist)."""
        if not 0 <= y < self._filled.shape[0]:
            return 0
        return int(np.count_nonzero(self._filled[y]))

    @property
    def pixels(self) -> List[List[Color]]:
        """Rows of colors as produced by the last generation (may be ragged)."""
        return [
            [self.get_pixel(x, y).color for x in range(self.row_length(y))]
            for y in range(self.row_count)
        ]

    def to_image(self) -> Image.Image:
        """
        Render the sprite as a Pillow RGBA image.

        Missing pixels are fully transparent.
        """
        return Image.fromarray(self.to_array())
