"""
Color Module

Handles:
- The Color value type shared by sprites and voxel sprites
- Channel clamping
- Straight <-> premultiplied alpha conversion at 16-bit sample depth

Sample Depth Background:
- Grid cells store straight (non-premultiplied) 8-bit RGBA
- Raster sources hand out premultiplied 16-bit samples (0..0xffff)
- Converting back requires dividing by alpha, which is undefined at alpha 0,
  so fully transparent samples map to transparent black
"""

from typing import NamedTuple, Tuple
import numpy as np
from numba import njit, prange


def clamp(number: int, low: int, high: int) -> int:
    """Clamp number into the closed range [low, high]."""
    if number < low:
        return low
    elif number > high:
        return high
    else:
        return number


class Color(NamedTuple):
    """
    Straight-alpha RGBA color with 8-bit channels.

    Being a NamedTuple, colors compare channel-wise and are hashable,
    so they can key a color census directly.
    """

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def clamped(cls, r: int, g: int, b: int, a: int = 255) -> "Color":
        """Build a color, clamping every channel into 0..255."""
        return cls(
            clamp(int(r), 0, 255),
            clamp(int(g), 0, 255),
            clamp(int(b), 0, 255),
            clamp(int(a), 0, 255),
        )

    def rgba16(self) -> Tuple[int, int, int, int]:
        """
        Premultiplied 16-bit sample of this color.

        Returns:
            (r, g, b, a) with each value in 0..0xffff
        """
        a = self.a * 0x101
        return (
            self.r * 0x101 * self.a // 0xff,
            self.g * 0x101 * self.a // 0xff,
            self.b * 0x101 * self.a // 0xff,
            a,
        )


TRANSPARENT = Color(0, 0, 0, 0)
BLACK = Color(0, 0, 0, 255)
WHITE = Color(255, 255, 255, 255)
RED = Color(255, 0, 0, 255)
GREEN = Color(0, 255, 0, 255)
BLUE = Color(0, 0, 255, 255)


@njit(cache=True, parallel=True)
def unpremultiply(samples: np.ndarray) -> np.ndarray:
    """
    Convert premultiplied 16-bit samples to straight 8-bit colors.

    Args:
        samples: Array of shape (N, 4) with premultiplied RGBA in 0..0xffff

    Returns:
        Array of shape (N, 4) with straight uint8 RGBA
    """
    n = samples.shape[0]
    result = np.zeros((n, 4), dtype=np.uint8)

    for i in prange(n):
        a = np.int64(samples[i, 3])
        if a == 0xffff:
            for c in range(3):
                result[i, c] = np.uint8(np.int64(samples[i, c]) >> 8)
            result[i, 3] = 255
        elif a > 0:
            for c in range(3):
                straight = (np.int64(samples[i, c]) * 0xffff) // a
                result[i, c] = np.uint8(min(straight, 0xffff) >> 8)
            result[i, 3] = np.uint8(a >> 8)
        # a == 0: division by alpha is undefined, stays transparent black

    return result


@njit(cache=True, parallel=True)
def premultiply(colors: np.ndarray) -> np.ndarray:
    """
    Convert straight 8-bit colors to premultiplied 16-bit samples.

    Args:
        colors: Array of shape (N, 4) with straight uint8 RGBA

    Returns:
        Array of shape (N, 4) with uint32 samples in 0..0xffff
    """
    n = colors.shape[0]
    result = np.empty((n, 4), dtype=np.uint32)

    for i in prange(n):
        a = np.int64(colors[i, 3])
        for c in range(3):
            result[i, c] = np.uint32(np.int64(colors[i, c]) * 0x101 * a // 0xff)
        result[i, 3] = np.uint32(a * 0x101)

    return result


def samples_to_colors(samples: np.ndarray) -> np.ndarray:
    """
    Un-premultiply a grid of samples of any leading shape.

    Args:
        samples: Array of shape (..., 4) with premultiplied 16-bit RGBA

    Returns:
        uint8 array of the same shape with straight RGBA
    """
    flat = np.ascontiguousarray(samples, dtype=np.uint32).reshape(-1, 4)
    return unpremultiply(flat).reshape(samples.shape)
