"""Shared fixtures for ogpgen tests."""

import pytest
from PIL import Image

from ogpgen.fonts import load_default_font
from ogpgen.models import Rect, TextStyle
from ogpgen.utils.dimensions import DEFAULT_END_PROHIBITED, DEFAULT_START_PROHIBITED


class FakeFont:
    """
    Deterministic font face for layout tests.

    Latin-1 characters advance half the font size, everything else (CJK) a
    full em, so widths are easy to reason about.
    """

    def __init__(self, size: float = 20.0) -> None:
        self.size = size

    def getlength(self, text: str) -> float:
        return sum(self.size / 2 if ord(c) <= 0xFF else self.size for c in text)

    def font_variant(self, size: float | None = None) -> "FakeFont":
        return FakeFont(self.size if size is None else size)


@pytest.fixture
def fake_font() -> FakeFont:
    return FakeFont(20.0)


@pytest.fixture
def real_font():
    return load_default_font(32)


@pytest.fixture
def make_style():
    """Build a TextStyle with Japanese rules and overridable fields."""

    def _make(font=None, **overrides) -> TextStyle:
        values = dict(
            font=font if font is not None else FakeFont(20.0),
            size=20.0,
            area=Rect(0, 0, 200, 100),
            min_size=12.0,
            line_height=1.0,
            start_prohibited=frozenset(DEFAULT_START_PROHIBITED),
            end_prohibited=frozenset(DEFAULT_END_PROHIBITED),
        )
        values.update(overrides)
        return TextStyle(**values)

    return _make


@pytest.fixture
def canvas() -> Image.Image:
    return Image.new("RGBA", (1200, 630), (255, 255, 255, 255))
