"""Type aliases used across the ogpgen package."""

from typing import Literal, Tuple

# Color types
RGBAColor = Tuple[int, int, int, int]  # RGBA color in 0-255 range

# Measurements
Pixel = int
Size = Tuple[int, int]  # (width, height) in pixels

# Text block anchoring within its area
BlockPosition = Literal[
    "top-left",
    "top-center",
    "top-right",
    "middle-left",
    "middle-center",
    "middle-right",
    "bottom-left",
    "bottom-center",
    "bottom-right",
]

# Alignment of each ragged line within the block's bounding width
LineAlignment = Literal["left", "center", "right"]

# Text overflow options
Overflow = Literal["shrink", "clip"]

# Overlay image fit options
FitMode = Literal["cover", "contain", "fill", "none"]

# Encoded output options
OutputFormat = Literal["png", "jpg"]
