"""Image processing utilities using Pillow."""

import logging
from io import BytesIO

from PIL import Image, ImageChops

from ogpgen.errors import ValidationError
from ogpgen.models import OverlayStyle, Placement
from ogpgen.types import FitMode, OutputFormat, Size
from ogpgen.utils.color import BLACK, parse_hex_color_or
from ogpgen.utils.dimensions import (
    DEFAULT_IMAGE_SIZE,
    MAX_OVERLAY_DIMENSION,
    RESIZE_TOLERANCE,
)

logger = logging.getLogger(__name__)


def load_image_from_bytes(image_data: bytes) -> Image.Image:
    """
    Load image from raw bytes.

    Args:
        image_data: Raw image bytes (JPEG, PNG, etc.).

    Returns:
        PIL Image object.
    """
    return Image.open(BytesIO(image_data))


def save_image_to_bytes(img: Image.Image, format: OutputFormat = "png") -> bytes:
    """
    Save PIL Image to bytes.

    Args:
        img: PIL Image object.
        format: "png" or "jpg". JPEG output drops the alpha channel.

    Returns:
        Image as bytes.
    """
    buffer = BytesIO()
    if format == "jpg":
        img.convert("RGB").save(buffer, format="JPEG")
    else:
        img.save(buffer, format="PNG")
    return buffer.getvalue()


# ============================================================================
# Backgrounds
# ============================================================================

def create_background(color: str | None, size: Size = DEFAULT_IMAGE_SIZE) -> Image.Image:
    """
    Create a solid color RGBA canvas.

    Args:
        color: Hex color code. Falls back to black if it cannot be parsed.
        size: Canvas size as (width, height) in pixels.

    Returns:
        New RGBA image.
    """
    return Image.new("RGBA", size, parse_hex_color_or(color, BLACK))


def create_background_from_image(image: Image.Image) -> Image.Image:
    """
    Create an RGBA canvas from a decoded background image.

    The canvas takes the image's own dimensions.

    Args:
        image: Decoded background image in any mode.

    Returns:
        New RGBA image (the source is not modified).
    """
    return image.convert("RGBA")


# ============================================================================
# Overlay Sizing
# ============================================================================

def resolve_target_size(source_size: Size, placement: Placement) -> Size:
    """
    Resolve the final overlay size from the placement and source image.

    If both width and height are given they are used as-is. If only one is
    given the other is derived from the source aspect ratio. If neither is
    given the source's native size is used. Zero counts as not given.

    Args:
        source_size: Source image size as (width, height).
        placement: Overlay placement.

    Returns:
        Target size as (width, height).
    """
    source_width, source_height = source_size
    width = placement.width or None
    height = placement.height or None

    if width is not None and height is not None:
        return width, height
    if width is not None:
        return width, round(width * source_height / source_width)
    if height is not None:
        return round(height * source_width / source_height), height
    return source_width, source_height


def validate_target_size(width: int, height: int) -> None:
    """
    Reject overlay sizes the compositor will not allocate.

    Raises:
        ValidationError: If either side is outside (0, MAX_OVERLAY_DIMENSION].
    """
    for name, value in (("width", width), ("height", height)):
        if not 0 < value <= MAX_OVERLAY_DIMENSION:
            raise ValidationError(
                name, value, f"overlay {name} must be in (0, {MAX_OVERLAY_DIMENSION}]"
            )


def _within_tolerance(current: Size, target: Size) -> bool:
    return (
        abs(target[0] - current[0]) <= RESIZE_TOLERANCE
        and abs(target[1] - current[1]) <= RESIZE_TOLERANCE
    )


def resize_for_fit(img: Image.Image, target_width: int, target_height: int, fit: FitMode) -> Image.Image:
    """
    Resize an image according to a fit policy.

    - "cover": scale to fill the target box, overflowing one axis
    - "contain": scale to fit inside the target box
    - "fill": stretch to the exact target size
    - "none": leave the image untouched

    Resizes that would change both sides by at most RESIZE_TOLERANCE pixels
    are skipped. For "cover" the skip only applies when the image already
    covers the target, so the following crop still reaches the exact size;
    for "contain" only when it already fits inside the target.

    Args:
        img: Source image.
        target_width: Target width in pixels.
        target_height: Target height in pixels.
        fit: Fit policy.

    Returns:
        Resized image, or the source itself when no resize is needed.
    """
    source_width, source_height = img.size

    if fit == "cover":
        scale = max(target_width / source_width, target_height / source_height)
        new_size = (round(source_width * scale), round(source_height * scale))
    elif fit == "contain":
        scale = min(target_width / source_width, target_height / source_height)
        new_size = (round(source_width * scale), round(source_height * scale))
    elif fit == "fill":
        new_size = (target_width, target_height)
    else:
        return img

    # Tiny scale factors can round a side down to nothing
    new_size = (max(1, new_size[0]), max(1, new_size[1]))

    if _within_tolerance(img.size, new_size):
        if fit == "cover":
            keep = source_width >= target_width and source_height >= target_height
        elif fit == "contain":
            keep = source_width <= target_width and source_height <= target_height
        else:
            keep = True
        if keep:
            logger.debug(f"Skipping resize {img.size} -> {new_size} (within tolerance)")
            return img

    logger.debug(f"Resizing overlay {img.size} -> {new_size} ({fit})")
    return img.resize(new_size, Image.Resampling.LANCZOS)


def crop_center(img: Image.Image, target_width: int, target_height: int) -> Image.Image:
    """
    Center crop an image down to the target size.

    Only axes larger than the target are cropped; an image already within
    the target box is returned unchanged.

    Args:
        img: Image to crop.
        target_width: Target width in pixels.
        target_height: Target height in pixels.

    Returns:
        Cropped image.
    """
    width, height = img.size
    if width <= target_width and height <= target_height:
        return img

    crop_width = min(width, target_width)
    crop_height = min(height, target_height)
    left = (width - crop_width) // 2
    top = (height - crop_height) // 2

    return img.crop((left, top, left + crop_width, top + crop_height))


# ============================================================================
# Compositing
# ============================================================================

def composite_image(canvas: Image.Image, img: Image.Image, x: int, y: int, opacity: float = 1.0) -> None:
    """
    Alpha blend an image onto the canvas in place.

    Per pixel, with alpha = src_alpha * opacity / 255:
    - color = src * alpha + dst * (1 - alpha)
    - output alpha = max(src_alpha * opacity, dst_alpha)

    Parts of the image outside the canvas are skipped.

    Args:
        canvas: Destination RGBA image (modified in place).
        img: Source image in any mode.
        x: Left edge of the image on the canvas.
        y: Top edge of the image on the canvas.
        opacity: Overall opacity, clamped to [0, 1].
    """
    if canvas.mode != "RGBA":
        raise ValueError(f"Canvas must be RGBA, got {canvas.mode}")

    opacity = min(max(opacity, 0.0), 1.0)
    if opacity == 0.0:
        return

    # Visible region in canvas coordinates
    left = max(x, 0)
    top = max(y, 0)
    right = min(x + img.width, canvas.width)
    bottom = min(y + img.height, canvas.height)
    if left >= right or top >= bottom:
        return

    src = img.convert("RGBA").crop((left - x, top - y, right - x, bottom - y))
    dst = canvas.crop((left, top, right, bottom))

    # Effective per-pixel alpha in 0-255
    mask = src.getchannel("A").point(lambda a: int(a * opacity))

    blended = Image.composite(src.convert("RGB"), dst.convert("RGB"), mask)
    blended.putalpha(ImageChops.lighter(mask, dst.getchannel("A")))

    canvas.paste(blended, (left, top))


def composite_overlay(canvas: Image.Image, overlay: OverlayStyle) -> None:
    """
    Resize, crop and blend an overlay image onto the canvas.

    Args:
        canvas: Destination RGBA image (modified in place).
        overlay: Resolved overlay with its decoded image.

    Raises:
        ValidationError: If the resolved target size is out of range.
    """
    img = overlay.image
    placement = overlay.placement

    width, height = resolve_target_size(img.size, placement)
    validate_target_size(width, height)

    resized = resize_for_fit(img, width, height, overlay.fit)
    if overlay.fit == "cover":
        resized = crop_center(resized, width, height)

    composite_image(canvas, resized, placement.x, placement.y, overlay.opacity)
