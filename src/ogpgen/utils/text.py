"""Text utilities for line breaking, sizing and layout."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Sequence

from ogpgen.models import PositionedLine, Rect, TextLayout, TextStyle
from ogpgen.utils.dimensions import FONT_SIZE_SHRINK_FACTOR

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from PIL import ImageFont


# ============================================================================
# Measurement
# ============================================================================

def measure_char_width(font: ImageFont.FreeTypeFont, char: str) -> int:
    """
    Measure the advance of a single character in whole pixels.

    Fractional advances are truncated so that greedy line filling and final
    positioning always agree on the same integer widths.

    Args:
        font: Font face at the size being measured.
        char: A single code point.

    Returns:
        Advance width in pixels.
    """
    return int(font.getlength(char))


def measure_text_width(text: str, font: ImageFont.FreeTypeFont, letter_spacing: int = 0) -> int:
    """
    Measure rendered text width including letter spacing.

    Each character is measured individually; letter_spacing is added between
    adjacent characters but not after the last one.

    Args:
        text: Text to measure.
        font: Font face at the size being measured.
        letter_spacing: Extra pixels between characters (may be negative).

    Returns:
        Width in pixels. Empty text measures 0.
    """
    if not text:
        return 0

    total = sum(measure_char_width(font, char) for char in text)
    return total + letter_spacing * (len(text) - 1)


def max_line_width(lines: Iterable[str], font: ImageFont.FreeTypeFont, letter_spacing: int = 0) -> int:
    """Width of the widest line, or 0 for no lines."""
    return max((measure_text_width(line, font, letter_spacing) for line in lines), default=0)


# ============================================================================
# Line Breaking (kinsoku shori + English word boundaries)
# ============================================================================

def is_word_char(char: str) -> bool:
    """
    Check whether a character belongs to an ASCII word.

    Letters, digits, underscore and hyphen are treated as word characters so
    that Latin words and identifiers are not split mid-way.
    """
    return (
        "a" <= char <= "z"
        or "A" <= char <= "Z"
        or "0" <= char <= "9"
        or char in "_-"
    )


def find_word_boundary(chars: Sequence[str], max_pos: int) -> int:
    """
    Search backwards from max_pos for the start of the current word.

    Args:
        chars: Characters of the line being built.
        max_pos: Index to search back from (clamped to the last index).

    Returns:
        Index of the last non-word character before the word that contains
        max_pos, i.e. the position after which the line can break. Returns
        max_pos itself when max_pos is not inside a word, or when the word
        extends to the start of the line.
    """
    if max_pos >= len(chars):
        max_pos = len(chars) - 1

    if max_pos < 0 or not is_word_char(chars[max_pos]):
        return max_pos

    for i in range(max_pos, 0, -1):
        if not is_word_char(chars[i - 1]):
            return i - 1

    # Word runs back to the start of the line: too long to move whole
    return max_pos


class LineBreaker:
    """
    Splits text into lines that fit a pixel width.

    Honors manual newlines, Japanese line breaking prohibitions (characters
    that may not start or end a line) and English word boundaries.
    """

    def __init__(
        self,
        start_prohibited: Iterable[str] = (),
        end_prohibited: Iterable[str] = (),
        letter_spacing: int = 0,
    ) -> None:
        """
        Initialize line breaker.

        Args:
            start_prohibited: Characters that cannot begin a line (e.g., "。", ")").
            end_prohibited: Characters that cannot end a line (e.g., "「", "(").
            letter_spacing: Extra pixels between characters, used for measurement.
        """
        self.start_prohibited = frozenset(start_prohibited)
        self.end_prohibited = frozenset(end_prohibited)
        self.letter_spacing = letter_spacing

    def split(self, text: str, font: ImageFont.FreeTypeFont, max_width: int) -> list[str]:
        """
        Break text into lines no wider than max_width where the rules allow.

        Manual line breaks are applied first and never merged away; each
        segment is then wrapped independently.

        Args:
            text: Text to break. May contain "\\n".
            font: Font face at the size being laid out.
            max_width: Maximum line width in pixels.

        Returns:
            Non-empty lines in order. Empty text returns an empty list.
        """
        if not text:
            return []

        lines: list[str] = []
        for segment in text.split("\n"):
            lines.extend(self._split_segment(segment, font, max_width))
        return lines

    def _split_segment(self, text: str, font: ImageFont.FreeTypeFont, max_width: int) -> list[str]:
        lines: list[str] = []
        current: list[str] = []
        chars = list(text)

        i = 0
        while i < len(chars):
            char = chars[i]
            candidate = "".join(current) + char

            if measure_text_width(candidate, font, self.letter_spacing) <= max_width:
                current.append(char)
                i += 1
                continue

            if char in self.start_prohibited:
                # Keep the prohibited run on this line even though it overflows
                current.append(char)
                i += 1
                while i < len(chars) and chars[i] in self.start_prohibited:
                    current.append(chars[i])
                    i += 1
                lines.append("".join(current))
                current = []

            elif current and current[-1] in self.end_prohibited:
                run_start = self._trailing_end_prohibited_start(current, len(current))
                if run_start > 0:
                    # Carry the opening character(s) over with the pending one
                    lines.append("".join(current[:run_start]))
                    current = current[run_start:] + [char]
                elif len(current) > 1:
                    # Line is all opening characters: each but the last stands alone
                    lines.extend(current[:-1])
                    current = [current[-1], char]
                else:
                    lines.append(current[0])
                    current = [char]
                i += 1

            elif current and is_word_char(char):
                boundary = find_word_boundary(current, len(current) - 1)
                if 0 <= boundary < len(current) - 1:
                    # An opening bracket right before the word travels with it
                    boundary = self._trailing_end_prohibited_start(current, boundary + 1) - 1
                if 0 <= boundary < len(current) - 1:
                    lines.append("".join(current[: boundary + 1]))
                    current = current[boundary + 1 :] + [char]
                else:
                    lines.append("".join(current))
                    current = [char]
                i += 1

            else:
                if current:
                    lines.append("".join(current))
                current = [char]
                i += 1

        if current:
            lines.append("".join(current))

        return lines

    def _trailing_end_prohibited_start(self, chars: Sequence[str], end: int) -> int:
        """Index where the run of end-prohibited characters ending at chars[end - 1] begins."""
        start = end
        while start > 0 and chars[start - 1] in self.end_prohibited:
            start -= 1
        return start


def split_text(
    text: str,
    font: ImageFont.FreeTypeFont,
    max_width: int,
    start_prohibited: Iterable[str] = (),
    end_prohibited: Iterable[str] = (),
    letter_spacing: int = 0,
) -> list[str]:
    """
    Break text into lines. Convenience wrapper around LineBreaker.split().

    Args:
        text: Text to break.
        font: Font face at the size being laid out.
        max_width: Maximum line width in pixels.
        start_prohibited: Characters that cannot begin a line.
        end_prohibited: Characters that cannot end a line.
        letter_spacing: Extra pixels between characters.

    Returns:
        List of non-empty lines.
    """
    breaker = LineBreaker(start_prohibited, end_prohibited, letter_spacing)
    return breaker.split(text, font, max_width)


def line_breaker_for(style: TextStyle) -> LineBreaker:
    """Build the LineBreaker configured by a text style."""
    return LineBreaker(style.start_prohibited, style.end_prohibited, style.letter_spacing)


# ============================================================================
# Font Size Fitting
# ============================================================================

def line_pixel_height(size: float, line_height: float) -> int:
    """Baseline-to-baseline distance in whole pixels."""
    return int(size * line_height)


def fit_text_to_area(
    text: str, style: TextStyle, area: Rect
) -> tuple[float, ImageFont.FreeTypeFont, list[str]]:
    """
    Shrink the font size until the wrapped text fits inside area.

    Starting at style.size, the text is wrapped to area.width. While the block
    is taller than area.height or any line is wider than area.width, the size
    is multiplied by FONT_SIZE_SHRINK_FACTOR and the text re-wrapped. The size
    never goes below the style's minimum; text that still overflows at the
    minimum is returned as-is.

    Args:
        text: Text to lay out.
        style: Resolved text style (font, size, min_size, spacing, rules).
        area: Target area in pixels.

    Returns:
        Tuple of (final_size, font_at_final_size, lines).
    """
    breaker = line_breaker_for(style)
    min_size = style.effective_min_size
    # Sizes below the floor are raised to it, even when they would fit
    size = max(style.size, min_size)

    font = style.font.font_variant(size=size)
    lines = breaker.split(text, font, area.width)

    iterations = 0
    while size > min_size:
        block_height = len(lines) * line_pixel_height(size, style.line_height)
        block_width = max_line_width(lines, font, style.letter_spacing)

        if area.contains(block_width, block_height):
            break

        size = max(size * FONT_SIZE_SHRINK_FACTOR, min_size)
        font = style.font.font_variant(size=size)
        lines = breaker.split(text, font, area.width)
        iterations += 1

    logger.debug(
        f"Fitted {len(lines)} line(s) at size {size:.2f} "
        f"after {iterations} shrink step(s) (min {min_size})"
    )
    return size, font, lines


# ============================================================================
# Positioning
# ============================================================================

def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return int(value / 2)


def calculate_block_position(
    area: Rect, block_position: str, block_width: int, block_height: int
) -> tuple[int, int]:
    """
    Calculate the top-left corner of a text block within its area.

    block_position combines a vertical token (top/middle/bottom) with a
    horizontal one (left/center/right), e.g. "bottom-right". Missing tokens
    default to middle and center.

    Args:
        area: Area the block is anchored in.
        block_position: Anchor such as "top-left" or "middle-center".
        block_width: Block width in pixels.
        block_height: Block height in pixels.

    Returns:
        Tuple of (x, y) for the block's top-left corner.
    """
    if "left" in block_position:
        x = area.x
    elif "right" in block_position:
        x = area.x + area.width - block_width
    else:
        x = area.x + _half(area.width - block_width)

    if "top" in block_position:
        y = area.y
    elif "bottom" in block_position:
        y = area.y + area.height - block_height
    else:
        y = area.y + _half(area.height - block_height)

    return x, y


def calculate_line_x(line_alignment: str, block_x: int, block_width: int, line_width: int) -> int:
    """
    Calculate the x position of one line within its block.

    Args:
        line_alignment: "left", "center" or "right".
        block_x: Left edge of the block.
        block_width: Width of the widest line in the block.
        line_width: Width of this line.

    Returns:
        X coordinate of the line's left edge.
    """
    if line_alignment == "left":
        return block_x
    if line_alignment == "right":
        return block_x + block_width - line_width
    return block_x + _half(block_width - line_width)


def default_line_alignment(block_position: str) -> str:
    """Derive line alignment from a block position's horizontal token."""
    if "left" in block_position:
        return "left"
    if "right" in block_position:
        return "right"
    return "center"


# ============================================================================
# Layout
# ============================================================================

def layout_text(text: str, style: TextStyle) -> TextLayout:
    """
    Break, fit and position a text block.

    With overflow "shrink" the font is reduced until the block fits the area.
    With "clip" the configured size is used and every line is kept, even the
    ones that overflow the area.

    Args:
        text: Text to lay out.
        style: Resolved text style.

    Returns:
        TextLayout with the final size, font and positioned lines.
    """
    area = style.area

    if style.overflow == "shrink":
        size, font, lines = fit_text_to_area(text, style, area)
    else:
        size = style.size
        font = style.font.font_variant(size=size)
        lines = line_breaker_for(style).split(text, font, area.width)

    line_px = line_pixel_height(size, style.line_height)
    widths = [measure_text_width(line, font, style.letter_spacing) for line in lines]
    block_width = max(widths, default=0)
    block_height = len(lines) * line_px

    block_x, block_y = calculate_block_position(
        area, style.block_position, block_width, block_height
    )

    positioned = [
        PositionedLine(
            text=line,
            x=calculate_line_x(style.line_alignment, block_x, block_width, width),
            baseline_y=block_y + line_px * (i + 1),
            width=width,
        )
        for i, (line, width) in enumerate(zip(lines, widths))
    ]

    return TextLayout(
        size=size,
        font=font,
        lines=positioned,
        x=block_x,
        y=block_y,
        width=block_width,
        height=block_height,
    )
