#!/usr/bin/env python3
"""
spritegrid Demo Script

This script demonstrates the sprite containers by:
1. Building sprites from text drawings in both modes
2. Importing a synthetic RGBA image (no external images needed)
3. Compositing sprites onto a board
4. Printing color censuses and a voxel sprite summary

Run with: python examples/demo.py
"""

import sys
from pathlib import Path
import numpy as np

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from spritegrid import Sprite, VoxelSprite, BLACK, RED, TRANSPARENT


HEART = """\
 rr rr
rrrrrrr
rrrrrrr
 rrrrr
  rrr
   r"""


def create_test_image(size: int = 8) -> np.ndarray:
    """
    Create a square RGBA image with a transparent border.

    Returns:
        RGBA array of shape (size, size, 4)
    """
    rgba = np.zeros((size, size, 4), dtype=np.uint8)
    rgba[1:-1, 1:-1] = [100, 150, 200, 255]
    return rgba


def print_census(title: str, sprite) -> None:
    print(f"\n{title}")
    print("-" * 40)
    for color, count in sorted(sprite.get_colors().items(), key=lambda item: -item[1]):
        print(f"  {tuple(color)}: {count}")


def demo_text_sprites():
    heart = Sprite(7, 6)
    heart.generate_from_string(HEART, mode=1)
    print_census("Heart drawing (RGB mode)", heart)
    print(f"  row lengths: {[heart.row_length(y) for y in range(heart.row_count)]}")

    mask = Sprite(7, 6)
    mask.generate_from_string(HEART, mode=0)
    print_census("Heart drawing (binary mode)", mask)
    return heart


def demo_image_sprite():
    sprite = Sprite(0, 0)
    sprite.generate_from_image(create_test_image(), overwrite_own_size=True)
    print_census(f"Image sprite {sprite.size}", sprite)
    return sprite


def demo_board(heart: Sprite):
    board = [[BLACK] * 12 for _ in range(10)]
    heart.draw_on_board(2, 2, board)
    # Overhanging pixels are dropped
    heart.draw_on_board(9, 7, board)

    print("\nBoard")
    print("-" * 40)
    for row in board:
        print("  " + "".join("#" if cell == RED else "." for cell in row))


def demo_voxels():
    voxels = VoxelSprite(4, 4, 4)
    voxels.generate(TRANSPARENT)
    for i in range(4):
        voxels.set_voxel(i, i, i, RED)
    print_census("Voxel diagonal", voxels)
    print(f"  get_voxel(9, 0, 0) -> {voxels.get_voxel(9, 0, 0)}")


def main():
    print("=" * 40)
    print("spritegrid demo")
    print("=" * 40)

    heart = demo_text_sprites()
    demo_image_sprite()
    demo_board(heart)
    demo_voxels()


if __name__ == "__main__":
    main()
