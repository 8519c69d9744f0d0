"""End-to-end tests for the preview builder."""

from PIL import Image, ImageChops

from ogpgen import PreviewConfig, render_preview, render_preview_to_bytes
from ogpgen.config import OutputConfig, OverlayConfig, PlacementConfig, TextConfig
from ogpgen.models import OverlayStyle, Placement

RED = (255, 0, 0, 255)
WHITE = (255, 255, 255, 255)


def ink_bbox(image, color=WHITE):
    blank = Image.new("RGB", image.size, color[:3])
    return ImageChops.difference(image.convert("RGB"), blank).getbbox()


def test_default_preview(real_font):
    image = render_preview("Hello World", "A short summary", font=real_font)

    assert image.mode == "RGBA"
    assert image.size == (1200, 630)
    assert ink_bbox(image) is not None


def test_preview_without_font_uses_builtin():
    image = render_preview("Hello")

    assert image.size == (1200, 630)
    assert ink_bbox(image) is not None


def test_hidden_and_empty_blocks_are_not_drawn(real_font):
    config = PreviewConfig(title=TextConfig(visible=False))

    image = render_preview("Hidden title", "", config=config, font=real_font)

    assert ink_bbox(image) is None


def test_title_stays_in_its_area(real_font):
    image = render_preview("Hello World", font=real_font)

    left, top, right, bottom = ink_bbox(image)
    assert left >= 100 and right <= 1100
    assert top >= 50 and bottom <= 300


def test_configured_overlay_is_composited():
    config = PreviewConfig(
        overlay=OverlayConfig(
            visible=True,
            placement=PlacementConfig(x=0, y=0, width=100, height=100),
            fit="fill",
        )
    )
    overlay_image = Image.new("RGBA", (50, 50), RED)

    image = render_preview("", config=config, overlay_image=overlay_image)

    assert image.getpixel((50, 50)) == RED
    assert image.getpixel((99, 99)) == RED
    assert image.getpixel((150, 150)) == WHITE


def test_overlay_without_image_path_stays_hidden():
    overlay_image = Image.new("RGBA", (50, 50), RED)

    image = render_preview("", overlay_image=overlay_image)

    assert ink_bbox(image) is None


def test_invalid_overlay_is_skipped(caplog):
    bad = OverlayStyle(image=Image.new("RGBA", (10, 10), RED), placement=Placement(width=20000, height=10))
    good = OverlayStyle(image=Image.new("RGBA", (10, 10), RED), placement=Placement(x=5, y=5))

    with caplog.at_level("WARNING"):
        image = render_preview("", overlays=[bad, good])

    assert "Failed to composite overlay 0" in caplog.text
    assert image.getpixel((0, 0)) == WHITE
    assert image.getpixel((10, 10)) == RED


def test_background_image_sets_canvas_size():
    background = Image.new("RGB", (300, 200), (0, 128, 0))

    image = render_preview("", background_image=background)

    assert image.size == (300, 200)
    assert image.getpixel((0, 0)) == (0, 128, 0, 255)


def test_background_image_path_is_loaded_by_caller():
    config = PreviewConfig.model_validate(
        {"background": {"color": "#102030", "image": "/nonexistent/bg.png"}}
    )

    # Without a decoded image the path is not opened; the color is used
    plain = render_preview("", config=config)
    assert plain.size == (1200, 630)
    assert plain.getpixel((0, 0)) == (16, 32, 48, 255)

    # A decoded image takes precedence over the color
    background = Image.new("RGB", (300, 200), (0, 128, 0))
    image = render_preview("", config=config, background_image=background)
    assert image.getpixel((0, 0)) == (0, 128, 0, 255)


def test_background_color():
    config = PreviewConfig.model_validate({"background": {"color": "#102030"}})

    image = render_preview("", config=config)

    assert image.getpixel((600, 300)) == (16, 32, 48, 255)


def test_missing_font_file_falls_back(caplog):
    config = PreviewConfig(title=TextConfig(font="/nonexistent/font.ttf"))

    with caplog.at_level("WARNING"):
        image = render_preview("Hello", config=config)

    assert "Failed to load font" in caplog.text
    assert ink_bbox(image) is not None


def test_debug_outlines_text_areas(real_font):
    image = render_preview("Hi", "There", font=real_font, debug=True)

    assert image.getpixel((100, 50)) == RED
    assert image.getpixel((600, 350)) == (0, 0, 255, 255)


def test_png_bytes_by_default(real_font):
    data = render_preview_to_bytes("Hello", font=real_font)

    assert data.startswith(b"\x89PNG")


def test_jpeg_bytes_when_configured(real_font):
    config = PreviewConfig(output=OutputConfig(format="jpg"))

    data = render_preview_to_bytes("Hello", "World", config=config, font=real_font)

    assert data.startswith(b"\xff\xd8")
