"""Artwork sources for the picture side: attachments, placeholders and prompts."""

from __future__ import annotations

import base64
import binascii

from .models import EmailAttachment
from .options import Artwork, Style

SUPPORTED_CONTENT_TYPES = frozenset({"image/jpeg", "image/png", "image/webp"})

ARTWORK_PROMPTS: dict[Artwork, str] = {
    Artwork.LAKESIDE: (
        "A large lake on the outskirts of a town, with either mountains or forest "
        "in the background. A few buildings sprinkled in the distance."
    ),
    Artwork.ISLANDS: (
        "Tropical Islands on a nice sunny day. Water should be a focal point but we "
        "should have the perspective from a beach. We should also see the beach and "
        "some other tropical islands in the distance."
    ),
    Artwork.CITY: (
        "A large size city with skyscrapers and a downtown on an average day. The "
        "city should depict a variety of different industries."
    ),
    Artwork.MOUNTAINS: (
        "A nice mountain range between seasons. There should be only a tiny amount of "
        "human intervention in the mountains, maybe one or two houses. There should be "
        "maybe a tiny a bit of snow."
    ),
}

STYLE_PROMPTS: dict[Style, str] = {
    Style.ILLUSTRATED: "an illustrated post-war mid-century",
    Style.PHOTOGRAPH: "an ultra photo-realistic",
    Style.VINTAGE_PHOTO: "a mid 1960s - 1980s vintage photograph",
    Style.PAINTING: "an oil painting with thick, heavy brush strokes",
}

BASE_PROMPT = (
    "You are to create a landscape strictly adhering to {style} style that conforms "
    "to the following parameters: The scene should be of a {scene}. The focal content "
    "of the generated image should take up the full width and height of the frame."
)

_PLACEHOLDERS = {
    Artwork.CITY: "res/artwork/city.png",
    Artwork.ISLANDS: "res/artwork/islands.png",
    Artwork.LAKESIDE: "res/artwork/lakeside.png",
    Artwork.MOUNTAINS: "res/artwork/mountains.png",
}


class ArtworkError(ValueError):
    """Raised when artwork cannot be obtained for a card."""


def validate_content_type(content_type: str) -> None:
    """Raise :class:`ArtworkError` unless the attachment is a JPEG, PNG or WebP image."""
    if content_type.lower() not in SUPPORTED_CONTENT_TYPES:
        raise ArtworkError(f"attachment content type unsupported: {content_type}")


def decode_attachment(attachment: EmailAttachment) -> bytes:
    """Image bytes of an attachment whose content is unpadded standard base64."""
    validate_content_type(attachment.content_type)
    content = attachment.content.replace("\r", "").replace("\n", "")
    if "=" in content:
        raise ArtworkError("attachment content has illegal base64 padding")
    if len(content) % 4 == 1:
        raise ArtworkError("attachment content has a truncated base64 length")
    try:
        return base64.b64decode(content + "=" * (-len(content) % 4), validate=True)
    except binascii.Error as exc:
        raise ArtworkError(f"attachment content is not valid base64: {exc}") from exc


def placeholder_path(artwork: Artwork) -> str:
    """Resource path of the stock picture for ``artwork``; mountains otherwise."""
    return _PLACEHOLDERS.get(artwork, _PLACEHOLDERS[Artwork.MOUNTAINS])


def create_prompt(artwork: Artwork, style: Style) -> str:
    """The image-generation prompt for a scene in a style."""
    try:
        scene = ARTWORK_PROMPTS[artwork]
    except KeyError:
        raise ArtworkError("no prompt found") from None
    try:
        style_text = STYLE_PROMPTS[style]
    except KeyError:
        raise ArtworkError("no style prompt found") from None
    return BASE_PROMPT.format(style=style_text, scene=scene)