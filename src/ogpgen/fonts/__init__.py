"""Font face loading."""

import logging
from pathlib import Path

from PIL import ImageFont

logger = logging.getLogger(__name__)

DEFAULT_FONT_SIZE = 64.0


def load_default_font(size: float = DEFAULT_FONT_SIZE) -> ImageFont.FreeTypeFont:
    """
    Get Pillow's built-in scalable font.

    The built-in face only covers Latin text; supply a CJK-capable font
    file for Japanese titles.

    Args:
        size: Font size in pixels.

    Returns:
        Scalable FreeType font.

    Raises:
        RuntimeError: If Pillow was built without FreeType support.
    """
    font = ImageFont.load_default(size=size)
    if not isinstance(font, ImageFont.FreeTypeFont):
        raise RuntimeError("Pillow was built without FreeType; a font file is required")
    return font


def load_font(font_path: str | Path | None, size: float = DEFAULT_FONT_SIZE) -> ImageFont.FreeTypeFont:
    """
    Load a TrueType/OpenType font face.

    Resolution priority:
    1. The given font file
    2. Pillow's built-in scalable font (with a warning if a path was given)

    Args:
        font_path: Path to a .ttf/.otf/.ttc file, or None for the built-in font.
        size: Font size in pixels. Layout derives other sizes with font_variant().

    Returns:
        Loaded font face.
    """
    if font_path is None:
        return load_default_font(size)

    try:
        font = ImageFont.truetype(str(font_path), size)
        logger.info(f"Loaded font {Path(font_path).name} at size {size}")
        return font
    except OSError as e:
        logger.warning(
            f"Failed to load font {font_path}: {e}. Falling back to built-in font."
        )
        return load_default_font(size)
