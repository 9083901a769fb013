"""
Glyph rasterization for text-framed mazes.

The string is drawn in bold serif glyphs onto a white canvas with Pillow;
dark pixels become the validity mask, one pixel per maze cell.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from mazeframe.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = get_logger(__name__)

CELLS_PER_LETTER = 50
DEFAULT_LETTER_DISTANCE = 5
FONT_CANDIDATES = (
    "DejaVuSerif-Bold.ttf",
    "LiberationSerif-Bold.ttf",
    "Times New Roman Bold.ttf",
    "timesbd.ttf",
)


def _load_font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    for name in FONT_CANDIDATES:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    logger.debug("No bold serif font found, using Pillow's default font")
    return ImageFont.load_default(size=size)


def _font_size(height: int) -> int:
    return max(1, int(height * 0.8))


def letter_spacing(font_size: int, letter_distance: float = DEFAULT_LETTER_DISTANCE) -> float:
    """Extra advance between glyphs; each unit of distance adds 1/30 of the font size."""
    return font_size * ((letter_distance - DEFAULT_LETTER_DISTANCE) / 30 - 0.08)


def text_canvas_width(text: str, height: int = 0, letter_distance: float = DEFAULT_LETTER_DISTANCE) -> int:
    """
    Canvas width for a string: 50 cells per letter, widened for spacing above the default.

    Args:
        text: String to draw
        height: Canvas height in pixels (only used when spacing is widened)
        letter_distance: Letter spacing setting

    Returns:
        Width in cells
    """
    width = CELLS_PER_LETTER * max(len(text), 1)
    if letter_distance > DEFAULT_LETTER_DISTANCE and len(text) > 1:
        extra = _font_size(height) * (letter_distance - DEFAULT_LETTER_DISTANCE) / 30
        width += math.ceil(extra) * (len(text) - 1)
    return width


def rasterize_text(
    text: str,
    height: int,
    width: int | None = None,
    letter_distance: float = DEFAULT_LETTER_DISTANCE,
) -> NDArray[np.bool_]:
    """
    Rasterize a string into a boolean pixel mask.

    Glyphs are drawn at 0.8x the canvas height, vertically centered, starting
    10% in from the left edge. At the default letter distance neighboring
    glyphs overlap slightly; larger distances push them apart.

    Args:
        text: String to draw
        height: Canvas height in pixels (maze rows)
        width: Canvas width in pixels (defaults to ``text_canvas_width``)
        letter_distance: Letter spacing setting

    Returns:
        Mask of shape (height, width); True where a glyph covers the pixel
    """
    if width is None:
        width = text_canvas_width(text, height, letter_distance)

    image = Image.new("L", (width, height), color=255)
    if not text.strip():
        return np.zeros((height, width), dtype=bool)

    draw = ImageDraw.Draw(image)
    font_size = _font_size(height)
    font = _load_font(font_size)

    spacing = letter_spacing(font_size, letter_distance)
    x = width * 0.1
    for letter in text:
        draw.text((x, height / 2), letter, fill=0, font=font, anchor="lm")
        x += draw.textlength(letter, font=font) + spacing

    mask = np.asarray(image) < 128
    logger.debug(f"Rasterized {text!r} to {height}x{width} with {int(mask.sum())} glyph pixels")
    return mask


def text_maze_dimensions(letter_size: float, letter_distance: float, text: str) -> tuple[int, int]:
    """
    Raster size for a glyph height and letter spacing.

    Args:
        letter_size: Glyph height in cells
        letter_distance: Letter spacing setting
        text: String to lay out

    Returns:
        (height, width) in cells
    """
    height = math.floor(letter_size + 0.5)
    width = math.floor(0.65 * (letter_size + letter_size * letter_distance / 30) * len(text) + 0.5)
    return height, width
