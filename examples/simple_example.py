#!/usr/bin/env python3
"""
Simple Example: Preview Image with a Logo Overlay

This is the simplest way to create an OGP image programmatically.
"""

from PIL import Image

from ogpgen import PreviewConfig, load_font, render_preview
from ogpgen.config import OverlayConfig, PlacementConfig, TextConfig

# Any CJK-capable font works; None uses Pillow's built-in Latin font
font = load_font(None)

config = PreviewConfig(
    title=TextConfig(color="#1E293B", block_position="bottom-left"),
    overlay=OverlayConfig(
        visible=True,
        placement=PlacementConfig(x=1000, y=480, width=120),
        opacity=0.9,
    ),
)

# Replace with your own logo
logo = Image.new("RGBA", (256, 256), (220, 38, 38, 255))

image = render_preview(
    "Rendering social previews with Pillow",
    "Kinsoku-aware line breaking, auto-shrinking titles and image overlays",
    config=config,
    font=font,
    overlay_image=logo,
)
image.save("ogp.png")

print("✓ Preview saved to: ogp.png")
