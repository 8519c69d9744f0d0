"""Utility modules."""

from ogpgen.utils.color import parse_hex_color, parse_hex_color_or
from ogpgen.utils.dimensions import (
    DEFAULT_AREA_PADDING,
    DEFAULT_END_PROHIBITED,
    DEFAULT_IMAGE_HEIGHT,
    DEFAULT_IMAGE_SIZE,
    DEFAULT_IMAGE_WIDTH,
    DEFAULT_MIN_FONT_SIZE,
    DEFAULT_START_PROHIBITED,
    FONT_SIZE_SHRINK_FACTOR,
    MAX_OVERLAY_DIMENSION,
)

__all__ = [
    "DEFAULT_AREA_PADDING",
    "DEFAULT_END_PROHIBITED",
    "DEFAULT_IMAGE_HEIGHT",
    "DEFAULT_IMAGE_SIZE",
    "DEFAULT_IMAGE_WIDTH",
    "DEFAULT_MIN_FONT_SIZE",
    "DEFAULT_START_PROHIBITED",
    "FONT_SIZE_SHRINK_FACTOR",
    "MAX_OVERLAY_DIMENSION",
    "parse_hex_color",
    "parse_hex_color_or",
]
