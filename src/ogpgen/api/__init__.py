"""High-level rendering API."""

from ogpgen.api.builder import render_preview, render_preview_to_bytes

__all__ = [
    "render_preview",
    "render_preview_to_bytes",
]
