"""
Raster Ingestion Module

This module handles:
- The Raster interface sprites import from (bounds + per-pixel samples)
- Loading images with Pillow into an array-backed raster
- Conversion of straight 8-bit pixels into premultiplied 16-bit samples

Any object implementing `size` and `sample_at` can act as a raster; Pillow
images and RGBA numpy arrays are wrapped automatically.
"""

from pathlib import Path
from typing import Tuple, Union
import numpy as np
from PIL import Image

from .color import Color, premultiply


class Raster:
    """
    Source of premultiplied 16-bit color samples addressed by (x, y).

    Subclasses implement `size` and `sample_at`; `samples` has a generic
    per-pixel implementation that array-backed rasters override.
    """

    @property
    def size(self) -> Tuple[int, int]:
        """Raster bounds as (width, height)."""
        raise NotImplementedError

    def sample_at(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """
        Premultiplied sample at a pixel.

        Args:
            x, y: Pixel coordinates

        Returns:
            (r, g, b, a) with each value in 0..0xffff
        """
        raise NotImplementedError

    def samples(self, width: int, height: int) -> np.ndarray:
        """
        Samples for the top-left width x height region.

        Returns:
            uint32 array of shape (height, width, 4)
        """
        out = np.zeros((height, width, 4), dtype=np.uint32)
        for y in range(height):
            for x in range(width):
                out[y, x] = self.sample_at(x, y)
        return out


class ImageRaster(Raster):
    """
    Raster backed by a straight-alpha RGBA array.

    Pixel art is read as-is: no resampling and no color space conversion.
    """

    def __init__(self, rgba_array: np.ndarray):
        """
        Initialize from an array.

        Args:
            rgba_array: RGBA image array of shape (H, W, 4)
        """
        if rgba_array.ndim != 3 or rgba_array.shape[2] != 4:
            raise ValueError("Color array must have shape (H, W, 4)")
        self._rgba = rgba_array.astype(np.uint8)

    @classmethod
    def load(cls, image_path: Union[str, Path]) -> "ImageRaster":
        """
        Load an image file.

        Args:
            image_path: Path to any image Pillow can read (PNG recommended)

        Returns:
            New ImageRaster
        """
        image_path = Path(image_path)
        if not image_path.exists():
            raise FileNotFoundError(f"Image not found: {image_path}")

        with Image.open(image_path) as img:
            return cls.from_image(img)

    @classmethod
    def from_image(cls, img: Image.Image) -> "ImageRaster":
        """Wrap a Pillow image, converting it to RGBA if needed."""
        if img.mode != "RGBA":
            img = img.convert("RGBA")
        return cls(np.array(img, dtype=np.uint8))

    @property
    def size(self) -> Tuple[int, int]:
        return (self._rgba.shape[1], self._rgba.shape[0])

    @property
    def rgba(self) -> np.ndarray:
        """The straight-alpha RGBA array."""
        return self._rgba

    def sample_at(self, x: int, y: int) -> Tuple[int, int, int, int]:
        r, g, b, a = (int(v) for v in self._rgba[y, x])
        return Color(r, g, b, a).rgba16()

    def samples(self, width: int, height: int) -> np.ndarray:
        region = np.ascontiguousarray(self._rgba[:height, :width])
        h, w = region.shape[:2]
        return premultiply(region.reshape(-1, 4)).reshape(h, w, 4)


def as_raster(source: Union[Raster, Image.Image, np.ndarray]) -> Raster:
    """
    Coerce a supported image source to a Raster.

    Args:
        source: Raster, Pillow image, or RGBA array of shape (H, W, 4)

    Returns:
        Raster view of the source
    """
    if isinstance(source, Raster):
        return source
    if isinstance(source, Image.Image):
        return ImageRaster.from_image(source)
    if isinstance(source, np.ndarray):
        return ImageRaster(source)
    raise TypeError(f"Unsupported image source: {type(source).__name__}")
