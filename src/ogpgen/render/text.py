"""Drawing laid-out text blocks onto a Pillow canvas."""

from __future__ import annotations

import logging

from PIL import Image, ImageDraw, ImageFont

from ogpgen.models import Rect, TextLayout, TextStyle
from ogpgen.types import Pixel, RGBAColor
from ogpgen.utils.color import WHITE, parse_hex_color_or
from ogpgen.utils.dimensions import DEBUG_BORDER_THICKNESS
from ogpgen.utils.text import layout_text, measure_char_width

logger = logging.getLogger(__name__)

TITLE_BORDER_COLOR: RGBAColor = (255, 0, 0, 255)
DESCRIPTION_BORDER_COLOR: RGBAColor = (0, 0, 255, 255)


def draw_text_with_spacing(
    draw: ImageDraw.ImageDraw,
    font: ImageFont.FreeTypeFont,
    text: str,
    x: Pixel,
    baseline_y: Pixel,
    fill: RGBAColor,
    letter_spacing: int = 0,
) -> None:
    """
    Draw text one character at a time with custom letter spacing.

    Each character advances the pen by its truncated width plus
    letter_spacing, matching measure_text_width() exactly.

    Args:
        draw: Drawing context for the canvas.
        font: Font face at the final size.
        text: Text to draw.
        x: Left edge of the first character.
        baseline_y: Baseline y coordinate.
        fill: Text color.
        letter_spacing: Extra pixels between characters.
    """
    current_x = x
    for char in text:
        draw.text((current_x, baseline_y), char, font=font, fill=fill, anchor="ls")
        current_x += measure_char_width(font, char) + letter_spacing


def draw_debug_border(canvas: Image.Image, area: Rect, label: str) -> None:
    """
    Outline a text area for debugging and label it.

    Title areas are outlined in red, everything else in blue.

    Args:
        canvas: Canvas to draw on (modified in place).
        area: Area to outline.
        label: Label drawn inside the top-left corner (e.g., "title").
    """
    if area.width <= 0 or area.height <= 0:
        return

    color = TITLE_BORDER_COLOR if label == "title" else DESCRIPTION_BORDER_COLOR
    draw = ImageDraw.Draw(canvas)
    draw.rectangle(
        (area.x, area.y, area.x + area.width - 1, area.y + area.height - 1),
        outline=color,
        width=DEBUG_BORDER_THICKNESS,
    )
    if label:
        offset = DEBUG_BORDER_THICKNESS + 2
        draw.text((area.x + offset, area.y + offset), label, fill=color, font=ImageFont.load_default())


def render_text(
    canvas: Image.Image,
    text: str,
    style: TextStyle,
    label: str = "",
    debug: bool = False,
) -> TextLayout:
    """
    Lay out and draw a text block onto the canvas.

    A line that fails to draw is logged and skipped; the remaining lines are
    still rendered. An unparsable color falls back to white.

    Args:
        canvas: Canvas to draw on (modified in place).
        text: Text to render.
        style: Resolved text style.
        label: Name of the block, used for logging and the debug border.
        debug: Outline the text area.

    Returns:
        The layout that was drawn.
    """
    fill = parse_hex_color_or(style.color, WHITE)
    layout = layout_text(text, style)
    draw = ImageDraw.Draw(canvas)

    for i, line in enumerate(layout.lines):
        try:
            draw_text_with_spacing(
                draw, layout.font, line.text, line.x, line.baseline_y, fill, style.letter_spacing
            )
        except Exception as e:
            logger.warning(f"Failed to draw {label or 'text'} line {i}: {e}")

    logger.debug(
        f"Rendered {label or 'text'}: {len(layout.lines)} line(s) at size {layout.size:.2f}, "
        f"block {layout.width}x{layout.height} at ({layout.x}, {layout.y})"
    )

    if debug:
        draw_debug_border(canvas, style.area, label)

    return layout
