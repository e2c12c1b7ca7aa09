"""Postcard design options and the lookups that depend on them."""

from __future__ import annotations

from enum import IntEnum


class Artwork(IntEnum):
    """Scene shown on the back of a postcard."""

    UNKNOWN = 0
    ATTACHMENT = 1
    CITY = 2
    ISLANDS = 3
    LAKESIDE = 4
    MOUNTAINS = 5


class Style(IntEnum):
    """Rendering style for generated artwork."""

    UNKNOWN = 0
    ILLUSTRATED = 1
    PHOTOGRAPH = 2
    VINTAGE_PHOTO = 3
    PAINTING = 4


class Font(IntEnum):
    """Handwriting font used on the front of a postcard."""

    UNKNOWN = 0
    MARKER = 1
    POLITE = 2
    TYPEWRITER = 3
    MID_CENTURY = 4


class Border(IntEnum):
    """Decoration around the edge of a postcard."""

    UNKNOWN = 0
    STANDARD = 1
    STRIPES = 2
    LINES = 3
    CUBES = 4
    PHOTO = 5


class StampShape(IntEnum):
    """Outline of the postage stamp."""

    UNKNOWN = 0
    RECT = 1
    RECT_CLASSIC = 2
    CIRCLE = 3
    CIRCLE_CLASSIC = 4

    def is_circular(self) -> bool:
        """Whether the stamp uses a round country flag."""
        return self in (StampShape.CIRCLE, StampShape.CIRCLE_CLASSIC)


class Textured(IntEnum):
    """Whether a paper texture is applied."""

    UNKNOWN = 0
    DISABLED = 1
    ENABLED = 2


ACCEPTABLE_BORDERS = (
    Border.STANDARD,
    Border.STRIPES,
    Border.LINES,
    Border.CUBES,
    Border.PHOTO,
)

ACCEPTABLE_ARTWORK = (
    Artwork.CITY,
    Artwork.LAKESIDE,
    Artwork.ISLANDS,
    Artwork.MOUNTAINS,
)

ACCEPTABLE_STAMP_SHAPES = (
    StampShape.RECT,
    StampShape.RECT_CLASSIC,
    StampShape.CIRCLE,
    StampShape.CIRCLE_CLASSIC,
)

ACCEPTABLE_STYLES = (
    Style.PAINTING,
    Style.PHOTOGRAPH,
    Style.VINTAGE_PHOTO,
    Style.ILLUSTRATED,
)

ACCEPTABLE_FONTS = (
    Font.MARKER,
    Font.POLITE,
    Font.MID_CENTURY,
    Font.TYPEWRITER,
)

ACCEPTABLE_TEXTURED = (
    Textured.DISABLED,
    Textured.ENABLED,
)

FONT_NAMES = {
    Font.MARKER: "Fuzzy Bubbles",
    Font.POLITE: "Kavivanar",
    Font.TYPEWRITER: "IM FELL English",
    Font.MID_CENTURY: "Aoboshi One",
}

_STAMP_SHAPE_FILES = {
    StampShape.RECT: "stamp_rect.png",
    StampShape.RECT_CLASSIC: "stamp_classic.png",
    StampShape.CIRCLE: "stamp_circle.png",
    StampShape.CIRCLE_CLASSIC: "stamp_circle_classic.png",
}

_STAMP_SHAPE_PADDING = {
    StampShape.RECT: (38, 38),
    StampShape.RECT_CLASSIC: (40, 40),
    StampShape.CIRCLE: (34, 34),
    StampShape.CIRCLE_CLASSIC: (46, 46),
}


def font_description(font: Font) -> str:
    """Font description string used when rendering text, family plus size."""
    return f"{FONT_NAMES.get(font, '')} 10"


def stamp_shape_path(shape: StampShape) -> str:
    """Resource path of the stamp outline image for ``shape``."""
    try:
        name = _STAMP_SHAPE_FILES[shape]
    except KeyError:
        raise ValueError(f"no stamp image for shape {shape!r}") from None
    return f"res/stamps/{name}"


def stamp_padding(shape: StampShape) -> tuple[int, int]:
    """Padding applied around the country flag inside the stamp."""
    return _STAMP_SHAPE_PADDING.get(shape, (0, 0))