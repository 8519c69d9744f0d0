"""High-level API for programmatic preview image creation."""

import logging
from typing import Iterable

from PIL import Image, ImageFont

from ogpgen.config import PreviewConfig, TextConfig
from ogpgen.errors import ValidationError
from ogpgen.fonts import load_default_font, load_font
from ogpgen.models import OverlayStyle
from ogpgen.render.image import (
    composite_overlay,
    create_background,
    create_background_from_image,
    save_image_to_bytes,
)
from ogpgen.render.text import render_text

logger = logging.getLogger(__name__)


def _font_for(text_config: TextConfig, font: ImageFont.FreeTypeFont | None) -> ImageFont.FreeTypeFont:
    """Pick the face for a text block: its own font file, the shared font, or the built-in one."""
    if text_config.font:
        return load_font(text_config.font, text_config.size)
    if font is not None:
        return font
    return load_default_font(text_config.size)


def render_preview(
    title: str,
    description: str = "",
    config: PreviewConfig | None = None,
    font: ImageFont.FreeTypeFont | None = None,
    background_image: Image.Image | None = None,
    overlay_image: Image.Image | None = None,
    overlays: Iterable[OverlayStyle] = (),
    debug: bool = False,
) -> Image.Image:
    """
    Render a complete preview image.

    Layers are drawn in order: background, configured overlay, extra
    overlays, title, description. An overlay with an invalid target size is
    logged and skipped; the rest of the image is still rendered.

    Args:
        title: Title text. Empty or hidden titles are not drawn.
        description: Description text. Empty or hidden descriptions are not drawn.
        config: Preview configuration. If None, uses PreviewConfig() defaults.
        font: Shared font face for blocks without their own font file.
              If None, Pillow's built-in font is used.
        background_image: Decoded background image. If None, a solid
                          config.background.color canvas of the default size is used.
        overlay_image: Decoded image for config.overlay.
        overlays: Additional resolved overlays composited after config.overlay.
        debug: Outline text areas (red for title, blue for description).

    Returns:
        The rendered RGBA image.

    Example:
        ```python
        from ogpgen import PreviewConfig, load_font, render_preview

        font = load_font("NotoSansJP-Bold.ttf")
        image = render_preview("これは日本語のテスト。", "Short summary", font=font)
        image.save("ogp.png")
        ```
    """
    config = config or PreviewConfig()

    if background_image is not None:
        canvas = create_background_from_image(background_image)
    else:
        canvas = create_background(config.background.color)

    layers = list(overlays)
    if overlay_image is not None and config.overlay.is_visible:
        layers.insert(0, config.overlay.to_style(overlay_image))

    for i, overlay in enumerate(layers):
        try:
            composite_overlay(canvas, overlay)
        except ValidationError as e:
            logger.warning(f"Failed to composite overlay {i}: {e}")

    blocks = (
        ("title", title, config.title),
        ("description", description, config.description),
    )
    for label, text, text_config in blocks:
        if not text_config.visible or not text:
            continue
        style = text_config.to_style(_font_for(text_config, font), canvas.size)
        render_text(canvas, text, style, label=label, debug=debug)

    return canvas


def render_preview_to_bytes(
    title: str,
    description: str = "",
    config: PreviewConfig | None = None,
    **kwargs,
) -> bytes:
    """
    Render a preview image and encode it in the configured output format.

    Args:
        title: Title text.
        description: Description text.
        config: Preview configuration. If None, uses PreviewConfig() defaults.
        **kwargs: Passed through to render_preview().

    Returns:
        Encoded PNG or JPEG bytes.
    """
    config = config or PreviewConfig()
    image = render_preview(title, description, config=config, **kwargs)
    return save_image_to_bytes(image, config.output.format)
