"""
Text resource helpers: reading and writing whole files, and loading
text drawings as sprites.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .sprite import Sprite

logger = logging.getLogger(__name__)


def read_file(path: Union[str, Path]) -> str:
    """
    Read a text file, rebuilding it with every line newline-terminated.

    Args:
        path: File to read

    Returns:
        File content; "\\r\\n" line endings are normalized to "\\n"
    """
    path = Path(path)
    logger.debug(f"Reading {path}")
    content = ""
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            content += line.rstrip("\n") + "\n"
    return content


def write_file(path: Union[str, Path], data: str):
    """Write text to a file, creating it if absent and replacing its content."""
    path = Path(path)
    logger.debug(f"Writing {len(data)} characters to {path}")
    with path.open("w", encoding="utf-8") as handle:
        handle.write(data)


def load_text_sprite(
    path: Union[str, Path],
    width: Optional[int] = None,
    height: Optional[int] = None,
    mode: int = 0
) -> Sprite:
    """
    Load a text drawing from a file as a sprite.

    Args:
        path: Text file, one line per row
        width: Sprite width (default: longest line)
        height: Sprite height (default: number of lines)
        mode: <= 0 for binary mode, >= 1 for RGB mode

    Returns:
        Generated Sprite
    """
    text = read_file(path)
    lines = text.splitlines()
    if width is None:
        width = max((len(line) for line in lines), default=0)
    if height is None:
        height = len(lines)

    sprite = Sprite(width, height)
    sprite.generate_from_string(text, mode)
    return sprite
