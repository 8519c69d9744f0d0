"""Hex color parsing utilities."""

import logging

from ogpgen.types import RGBAColor

logger = logging.getLogger(__name__)

WHITE: RGBAColor = (255, 255, 255, 255)
BLACK: RGBAColor = (0, 0, 0, 255)


def parse_hex_color(value: str) -> RGBAColor:
    """
    Parse a hex color code into an RGBA tuple.

    Accepts "#RRGGBB" and "#RRGGBBAA" (the leading "#" is optional).
    Six-digit colors are fully opaque.

    Args:
        value: Hex color string, e.g. "#FF00FF" or "ff00ff80".

    Returns:
        Tuple of (r, g, b, a) in 0-255 range.

    Raises:
        ValueError: If the string is not a 6 or 8 digit hex color.
    """
    hex_digits = value.strip().removeprefix("#")

    if len(hex_digits) not in (6, 8):
        raise ValueError(
            f"invalid hex color format: {value!r} (expected 6 or 8 characters)"
        )

    # int(x, 16) tolerates "0x" prefixes and underscores, so check explicitly
    if any(c not in "0123456789abcdefABCDEF" for c in hex_digits):
        raise ValueError(f"invalid hex color: {value!r}")

    r = int(hex_digits[0:2], 16)
    g = int(hex_digits[2:4], 16)
    b = int(hex_digits[4:6], 16)
    a = int(hex_digits[6:8], 16) if len(hex_digits) == 8 else 255

    return (r, g, b, a)


def parse_hex_color_or(value: str | None, fallback: RGBAColor) -> RGBAColor:
    """
    Parse a hex color, substituting a fallback when it cannot be parsed.

    Args:
        value: Hex color string (or None).
        fallback: Color to use if parsing fails.

    Returns:
        Parsed color, or fallback.
    """
    if value is None:
        return fallback

    try:
        return parse_hex_color(value)
    except ValueError as e:
        logger.warning(f"Failed to parse color {value!r}, using {fallback}: {e}")
        return fallback
