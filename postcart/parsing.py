"""Reading postcard requests out of the plain-text body of an inbound e-mail."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TypeVar

from .models import Params, Person
from .options import Artwork, Border, Font, StampShape, Style, Textured

T = TypeVar("T")

DEFAULT_THRESHOLD = 2

FIELD_KEYS: dict[str, tuple[str, ...]] = {
    "to": ("to:",),
    "from": ("from:",),
    "artwork": ("artwork:",),
    "artstyle": ("style:",),
    "border": ("border:",),
    "font": ("font:",),
    "shape": ("shape:",),
    "country": ("country:",),
    "textured": ("textured:",),
}

ARTWORK_NAMES: dict[str, Artwork] = {
    "attach": Artwork.ATTACHMENT,
    "attached": Artwork.ATTACHMENT,
    "attachment": Artwork.ATTACHMENT,
    "mountains": Artwork.MOUNTAINS,
    "lake": Artwork.LAKESIDE,
    "lakeside": Artwork.LAKESIDE,
    "city": Artwork.CITY,
    "island": Artwork.ISLANDS,
    "islands": Artwork.ISLANDS,
}

STYLE_NAMES: dict[str, Style] = {
    "painting": Style.PAINTING,
    "photo": Style.PHOTOGRAPH,
    "photograph": Style.PHOTOGRAPH,
    "vintage": Style.VINTAGE_PHOTO,
    "vintage photo": Style.VINTAGE_PHOTO,
    "vintage-photo": Style.VINTAGE_PHOTO,
    "illustrated": Style.ILLUSTRATED,
    "illustration": Style.ILLUSTRATED,
    "cartoon": Style.ILLUSTRATED,
}

BORDER_NAMES: dict[str, Border] = {
    "none": Border.STANDARD,
    "classic": Border.STANDARD,
    "default": Border.STANDARD,
    "lines": Border.LINES,
    "cubes": Border.CUBES,
    "stripes": Border.STRIPES,
    "art": Border.PHOTO,
    "artwork": Border.PHOTO,
    "photo": Border.PHOTO,
}

SHAPE_NAMES: dict[str, StampShape] = {
    "classic": StampShape.RECT_CLASSIC,
    "default": StampShape.RECT_CLASSIC,
    "rect": StampShape.RECT,
    "square": StampShape.RECT,
    "circle": StampShape.CIRCLE,
    "circle-classic": StampShape.CIRCLE_CLASSIC,
}

FONT_NAMES: dict[str, Font] = {
    "typewriter": Font.TYPEWRITER,
    "polite": Font.POLITE,
    "marker": Font.MARKER,
    "midcentury": Font.MID_CENTURY,
    "vintage": Font.MID_CENTURY,
}

TEXTURED_NAMES: dict[str, Textured] = {
    "yes": Textured.ENABLED,
    "enabled": Textured.ENABLED,
    "true": Textured.ENABLED,
    "no": Textured.DISABLED,
    "disabled": Textured.DISABLED,
    "false": Textured.DISABLED,
}

ANONYMOUS = "Anonymous"


class ParseError(ValueError):
    """Raised when an e-mail body lacks what a postcard needs."""


class MissingFromError(ParseError):
    """Raised when the body names no sender; ``params`` holds everything else."""

    def __init__(self, params: Params) -> None:
        super().__init__("missing required field: From")
        self.params = params


def nearest_string(s: str, t: str) -> int:
    """Edit distance between ``s`` and ``t`` (insertions, deletions, substitutions)."""
    previous = list(range(len(t) + 1))
    for i, sc in enumerate(s, start=1):
        current = [i]
        for j, tc in enumerate(t, start=1):
            if sc == tc:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def parse_enum(
    value: str,
    mapping: Mapping[str, T],
    default: T,
    threshold: int = DEFAULT_THRESHOLD,
) -> T:
    """The option whose name is closest to ``value``, or ``default`` if none is close enough."""
    if not value:
        return default
    lowered = value.lower()
    best: tuple[int, T] | None = None
    for name, option in mapping.items():
        distance = nearest_string(lowered, name.lower())
        if best is None or distance < best[0]:
            best = (distance, option)
    if best is not None and best[0] <= threshold:
        return best[1]
    return default


def parse_person(value: str) -> Person:
    """Read "Name <address>", a bare address, or a bare name."""
    value = value.strip()
    if "<" in value and ">" in value:
        name, _, email = value.partition("<")
        email = email.strip()
        if email.endswith(">"):
            email = email[:-1]
        return Person(name=name.strip(), email=email)
    if "@" in value:
        return Person(email=value)
    return Person(name=value)


def _match_field(line: str) -> tuple[str, str] | None:
    lowered = line.lower()
    for field_name, keys in FIELD_KEYS.items():
        for key in keys:
            if lowered.startswith(key):
                return field_name, line[len(key):].strip()
    return None


def parse_email_body(
    body: str,
    country_resolver: Callable[[str], str] | None = None,
    fallback_sender: Person | None = None,
) -> Params:
    """Split ``body`` into "key: value" fields and the message that follows them.

    ``country_resolver`` turns the country field into a country code; without
    it the value is kept as written. When no "From:" line is present the
    ``fallback_sender`` is used, and without one :class:`MissingFromError` is
    raised.
    """
    fields: dict[str, str] = {}
    message_lines: list[str] = []
    in_message = False
    for raw_line in body.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        if not in_message:
            matched = _match_field(line)
            if matched is not None:
                fields[matched[0]] = matched[1]
                continue
            in_message = True
        message_lines.append(line)

    if "to" not in fields:
        raise ParseError("missing required field: To")

    country = fields.get("country", "")
    params = Params(
        recipient=parse_person(fields["to"]),
        artwork=parse_enum(fields.get("artwork", ""), ARTWORK_NAMES, Artwork.UNKNOWN),
        border=parse_enum(fields.get("border", ""), BORDER_NAMES, Border.UNKNOWN),
        stamp_shape=parse_enum(fields.get("shape", ""), SHAPE_NAMES, StampShape.UNKNOWN),
        font=parse_enum(fields.get("font", ""), FONT_NAMES, Font.UNKNOWN),
        style=parse_enum(fields.get("artstyle", ""), STYLE_NAMES, Style.UNKNOWN),
        textured=parse_enum(fields.get("textured", ""), TEXTURED_NAMES, Textured.UNKNOWN),
        country=country_resolver(country) if country_resolver is not None else country,
        message="\n".join(message_lines),
    )

    if "from" in fields:
        sender = fields["from"].strip()
        if not sender or "anon" in sender.lower():
            params.sender = Person(name=ANONYMOUS)
        else:
            params.sender = parse_person(sender)
    elif fallback_sender is not None:
        params.sender = Person(name=fallback_sender.name, email=fallback_sender.email)
    else:
        raise MissingFromError(params)

    return params