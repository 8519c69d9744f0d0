"""Social preview (OGP) image generator with Japanese-aware text layout."""

__version__ = "0.1.0"

# High-level Python API
from ogpgen.api import render_preview, render_preview_to_bytes
from ogpgen.config import DescriptionConfig, OverlayConfig, PreviewConfig, TextConfig, load_config
from ogpgen.errors import OGPError, ValidationError
from ogpgen.fonts import load_default_font, load_font
from ogpgen.models import OverlayStyle, Placement, Rect, TextStyle
from ogpgen.render.image import composite_overlay
from ogpgen.render.text import render_text
from ogpgen.utils.text import LineBreaker, fit_text_to_area, layout_text, split_text

__all__ = [
    "DescriptionConfig",
    "LineBreaker",
    "OGPError",
    "OverlayConfig",
    "OverlayStyle",
    "Placement",
    "PreviewConfig",
    "Rect",
    "TextConfig",
    "TextStyle",
    "ValidationError",
    "composite_overlay",
    "fit_text_to_area",
    "layout_text",
    "load_config",
    "load_default_font",
    "load_font",
    "render_preview",
    "render_preview_to_bytes",
    "render_text",
    "split_text",
]
