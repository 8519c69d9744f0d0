"""Configuration loading and validation."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from ogpgen.models import OverlayStyle, Placement, Rect, TextStyle, default_text_area
from ogpgen.types import BlockPosition, FitMode, LineAlignment, OutputFormat, Overflow, Size
from ogpgen.utils.dimensions import (
    DEFAULT_END_PROHIBITED,
    DEFAULT_IMAGE_SIZE,
    DEFAULT_START_PROHIBITED,
)
from ogpgen.utils.text import default_line_alignment

if TYPE_CHECKING:
    from PIL import Image, ImageFont


class AreaConfig(BaseModel):
    """Rectangle a text block is laid out in. All zeros means "use the default inset area"."""

    x: int = 0
    y: int = 0
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)

    def to_rect(self, canvas_size: Size) -> Rect:
        """
        Resolve to a Rect, substituting the default inset area when unset.

        Args:
            canvas_size: Canvas size as (width, height).

        Returns:
            Resolved Rect.
        """
        rect = Rect(self.x, self.y, self.width, self.height)
        if rect.is_empty():
            return default_text_area(*canvas_size)
        return rect


class LineBreakingConfig(BaseModel):
    """Japanese line breaking rules (kinsoku shori)."""

    start_prohibited: str = DEFAULT_START_PROHIBITED
    """Characters that cannot start a line."""

    end_prohibited: str = DEFAULT_END_PROHIBITED
    """Characters that cannot end a line."""


class TextConfig(BaseModel):
    """
    Settings for one text block.

    Defaults describe the title; see DescriptionConfig for the description.
    """

    visible: bool = True
    """Whether the block is drawn at all."""

    font: str | None = None
    """Path to a font file. None uses the font passed to the renderer."""

    size: float = Field(default=64.0, gt=0)
    """Font size in pixels before fitting."""

    min_size: float = 24.0
    """Smallest size shrinking may reach. <= 0 means 12."""

    color: str = "#000000"
    """Text color as hex (#RRGGBB or #RRGGBBAA)."""

    area: AreaConfig = Field(
        default_factory=lambda: AreaConfig(x=100, y=50, width=1000, height=250)
    )
    """Area the block is laid out in."""

    block_position: BlockPosition = "middle-center"
    """Anchor of the whole block within the area."""

    line_alignment: LineAlignment | None = None
    """Alignment of each line. None follows block_position's horizontal part."""

    overflow: Overflow = "shrink"
    """Either "shrink" (reduce the size to fit the area) or "clip" (keep the configured size)."""

    line_height: float = Field(default=1.2, gt=0)
    """Line spacing multiplier."""

    letter_spacing: int = 1
    """Extra pixels between characters (may be negative)."""

    line_breaking: LineBreakingConfig = Field(default_factory=LineBreakingConfig)

    @property
    def effective_line_alignment(self) -> LineAlignment:
        """Line alignment with the block-position-derived default applied."""
        if self.line_alignment is not None:
            return self.line_alignment
        return default_line_alignment(self.block_position)  # type: ignore[return-value]

    def to_style(self, font: ImageFont.FreeTypeFont, canvas_size: Size = DEFAULT_IMAGE_SIZE) -> TextStyle:
        """
        Resolve into the immutable style consumed by the layout engine.

        Args:
            font: Loaded font face (any size).
            canvas_size: Canvas size, used for the default area.

        Returns:
            TextStyle for this block.
        """
        return TextStyle(
            font=font,
            size=self.size,
            min_size=self.min_size,
            color=self.color,
            area=self.area.to_rect(canvas_size),
            block_position=self.block_position,
            line_alignment=self.effective_line_alignment,
            overflow=self.overflow,
            line_height=self.line_height,
            letter_spacing=self.letter_spacing,
            start_prohibited=frozenset(self.line_breaking.start_prohibited),
            end_prohibited=frozenset(self.line_breaking.end_prohibited),
        )


class DescriptionConfig(TextConfig):
    """Settings for the description block; same fields as TextConfig with smaller defaults."""

    size: float = Field(default=32.0, gt=0)
    min_size: float = 16.0
    color: str = "#666666"
    area: AreaConfig = Field(
        default_factory=lambda: AreaConfig(x=100, y=350, width=1000, height=200)
    )
    block_position: BlockPosition = "top-left"
    line_alignment: LineAlignment | None = "left"
    letter_spacing: int = 0


class PlacementConfig(BaseModel):
    """Overlay position and optional size. Unset sizes are derived from the image."""

    x: int = 50
    y: int = 50
    width: int | None = None
    height: int | None = None


class OverlayConfig(BaseModel):
    """Image composited over the background, beneath the text."""

    visible: bool | None = None
    """Whether the overlay is drawn. None means "visible when an image is set"."""

    image: str | None = None
    """Path to the overlay image. Loading is left to the caller."""

    placement: PlacementConfig = Field(default_factory=PlacementConfig)

    fit: FitMode = "contain"
    """Fit policy: "cover", "contain", "fill" or "none"."""

    opacity: float = 1.0
    """Opacity in 0-1. Out-of-range values are clamped when compositing."""

    @property
    def is_visible(self) -> bool:
        """Visibility with the image-implies-visible default applied."""
        if self.visible is not None:
            return self.visible
        return bool(self.image)

    def to_style(self, image: Image.Image) -> OverlayStyle:
        """
        Resolve into the immutable overlay consumed by the compositor.

        Args:
            image: Decoded overlay image.

        Returns:
            OverlayStyle for this overlay.
        """
        return OverlayStyle(
            image=image,
            placement=Placement(
                x=self.placement.x,
                y=self.placement.y,
                width=self.placement.width,
                height=self.placement.height,
            ),
            fit=self.fit,
            opacity=self.opacity,
        )


class BackgroundConfig(BaseModel):
    """Canvas background."""

    color: str = "#FFFFFF"
    """Solid background color as hex."""

    image: str | None = None
    """
    Path to a background image. Loading is left to the caller, which passes the
    decoded image to render_preview(background_image=...); it then takes
    precedence over color.
    """


class OutputConfig(BaseModel):
    """Encoded output settings."""

    format: OutputFormat = "png"


class PreviewConfig(BaseModel):
    """
    Complete preview configuration with all visual settings.

    All parameters have sensible defaults. Override only what you need using
    Pydantic's model_copy():

        base = PreviewConfig()
        variant = base.model_copy(update={"output": OutputConfig(format="jpg")})
    """

    background: BackgroundConfig = Field(default_factory=BackgroundConfig)
    title: TextConfig = Field(default_factory=TextConfig)
    description: DescriptionConfig = Field(default_factory=DescriptionConfig)
    overlay: OverlayConfig = Field(default_factory=OverlayConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(config_path: Path) -> PreviewConfig:
    """
    Load configuration from TOML file.

    Args:
        config_path: Path to config file.

    Returns:
        Validated PreviewConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        config_dict = tomllib.load(f)

    return PreviewConfig(**config_dict)
