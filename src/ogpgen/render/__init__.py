"""Rendering modules for text drawing and image compositing."""

from ogpgen.render.image import (
    composite_image,
    composite_overlay,
    create_background,
    create_background_from_image,
    crop_center,
    load_image_from_bytes,
    resize_for_fit,
    resolve_target_size,
    save_image_to_bytes,
    validate_target_size,
)
from ogpgen.render.text import draw_debug_border, draw_text_with_spacing, render_text

__all__ = [
    "composite_image",
    "composite_overlay",
    "create_background",
    "create_background_from_image",
    "crop_center",
    "draw_debug_border",
    "draw_text_with_spacing",
    "load_image_from_bytes",
    "render_text",
    "resize_for_fit",
    "resolve_target_size",
    "save_image_to_bytes",
    "validate_target_size",
]
