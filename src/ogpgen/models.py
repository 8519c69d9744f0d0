"""Resolved value types consumed by the layout and compositing engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ogpgen.types import BlockPosition, FitMode, LineAlignment, Overflow
from ogpgen.utils.dimensions import (
    DEFAULT_AREA_PADDING,
    DEFAULT_MIN_FONT_SIZE,
)

if TYPE_CHECKING:
    from PIL import Image, ImageFont


@dataclass(frozen=True)
class Rect:
    """Integer pixel rectangle."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Rect size must be non-negative, got {self.width}x{self.height}"
            )

    def contains(self, width: int, height: int) -> bool:
        """
        Check whether a block of the given size fits inside this rectangle.

        Args:
            width: Block width in pixels.
            height: Block height in pixels.

        Returns:
            True if both dimensions fit.
        """
        return width <= self.width and height <= self.height

    def is_empty(self) -> bool:
        """True when every coordinate is zero (an unset area)."""
        return self.x == 0 and self.y == 0 and self.width == 0 and self.height == 0


def default_text_area(canvas_width: int, canvas_height: int) -> Rect:
    """
    Get the area used for text when none is configured.

    Args:
        canvas_width: Canvas width in pixels.
        canvas_height: Canvas height in pixels.

    Returns:
        Rect inset by DEFAULT_AREA_PADDING on every side.
    """
    return Rect(
        x=DEFAULT_AREA_PADDING,
        y=DEFAULT_AREA_PADDING,
        width=max(0, canvas_width - DEFAULT_AREA_PADDING * 2),
        height=max(0, canvas_height - DEFAULT_AREA_PADDING * 2),
    )


@dataclass(frozen=True)
class TextStyle:
    """
    Fully resolved style for one text block (title or description).

    Attributes:
        font: Font face at any size. Must provide getlength() and font_variant().
        size: Font size in pixels.
        min_size: Floor for shrinking. Values <= 0 mean DEFAULT_MIN_FONT_SIZE.
        color: Hex color code for the text.
        area: Rectangle the block is laid out in.
        block_position: Anchor of the whole block within the area.
        line_alignment: Alignment of each line within the block's width.
        overflow: "shrink" reduces the font size to fit, "clip" renders as-is.
        line_height: Baseline-to-baseline multiplier of size.
        letter_spacing: Extra pixels between adjacent characters (may be negative).
        start_prohibited: Characters that may not begin a line.
        end_prohibited: Characters that may not end a line.
    """

    font: ImageFont.FreeTypeFont
    size: float
    area: Rect
    min_size: float = DEFAULT_MIN_FONT_SIZE
    color: str = "#000000"
    block_position: BlockPosition = "middle-center"
    line_alignment: LineAlignment = "center"
    overflow: Overflow = "shrink"
    line_height: float = 1.2
    letter_spacing: int = 0
    start_prohibited: frozenset[str] = field(default_factory=frozenset)
    end_prohibited: frozenset[str] = field(default_factory=frozenset)

    @property
    def effective_min_size(self) -> float:
        """Shrink floor with the default applied for unset values."""
        return self.min_size if self.min_size > 0 else DEFAULT_MIN_FONT_SIZE


@dataclass(frozen=True)
class Placement:
    """Overlay position and optional target size in pixels."""

    x: int = 0
    y: int = 0
    width: int | None = None
    height: int | None = None


@dataclass(frozen=True)
class OverlayStyle:
    """
    Fully resolved overlay: a decoded image plus how to place it.

    Opacity is clamped to [0, 1] when compositing, not here.
    """

    image: Image.Image
    placement: Placement = field(default_factory=Placement)
    fit: FitMode = "contain"
    opacity: float = 1.0


@dataclass(frozen=True)
class PositionedLine:
    """A laid-out line with its left x, baseline y and measured width."""

    text: str
    x: int
    baseline_y: int
    width: int


@dataclass
class TextLayout:
    """
    Result of laying out one text block.

    Attributes:
        size: Final font size after fitting.
        font: Font face at the final size.
        lines: Positioned lines in drawing order.
        x: Left edge of the block.
        y: Top edge of the block.
        width: Width of the widest line.
        height: Total block height (line count × line pixel height).
    """

    size: float
    font: ImageFont.FreeTypeFont
    lines: list[PositionedLine]
    x: int
    y: int
    width: int
    height: int
