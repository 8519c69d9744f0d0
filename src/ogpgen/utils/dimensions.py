"""Canvas dimensions and layout constants."""

# Standard OGP image dimensions (in pixels)
DEFAULT_IMAGE_WIDTH = 1200
DEFAULT_IMAGE_HEIGHT = 630
DEFAULT_IMAGE_SIZE = (DEFAULT_IMAGE_WIDTH, DEFAULT_IMAGE_HEIGHT)

# Inset used when a text area is left unset (all zeros)
DEFAULT_AREA_PADDING = 50

# Largest overlay side the compositor will allocate
MAX_OVERLAY_DIMENSION = 10000

# Resizes within this many pixels on both axes are skipped
RESIZE_TOLERANCE = 2

# Font fitting
DEFAULT_MIN_FONT_SIZE = 12.0
FONT_SIZE_SHRINK_FACTOR = 0.9

# Debug border thickness around text areas
DEBUG_BORDER_THICKNESS = 2

# Japanese line breaking character sets
DEFAULT_START_PROHIBITED = (
    ".)}]>!?、。，．！？)）］｝〉》」』ー～"
    "ぁぃぅぇぉっゃゅょゎァィゥェォッャュョヮヵヶ々"
)
"""Characters that cannot start a line (closing punctuation, small kana)."""

DEFAULT_END_PROHIBITED = "({[<（［｛〈《「『"
"""Characters that cannot end a line (opening brackets)."""
