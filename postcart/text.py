"""Text placed on the writing side of a postcard image."""

from __future__ import annotations

from dataclasses import dataclass

from .models import Params
from .options import Font, font_description

BREAKUP_THRESHOLD = 20
BLACK = (0, 0, 0, 255)


@dataclass(frozen=True)
class TextBox:
    """Area of the card, in pixels, that a piece of text is fitted into."""

    width: int
    height: int
    x: int
    y: int


RECIPIENT_NAME_BOX = TextBox(width=360, height=45, x=88, y=118)
RECIPIENT_EMAIL_BOX = TextBox(width=360, height=32, x=88, y=169)
SENDER_NAME_BOX = TextBox(width=479, height=51, x=685, y=543)
SENDER_EMAIL_BOX = TextBox(width=479, height=45, x=685, y=648)
MESSAGE_BOX = TextBox(width=534, height=552, x=88, y=227)


@dataclass(frozen=True)
class TextItem:
    """One piece of text to draw, with its font, box and RGBA colour."""

    text: str
    font: str
    box: TextBox
    color: tuple[int, int, int, int] = BLACK


def sanitize_message(msg: str) -> str:
    """Replace angle brackets so the text renderer does not read them as markup."""
    return msg.replace("<", "‹").replace(">", "›")


def _split_word(word: str) -> str:
    if len(word) <= BREAKUP_THRESHOLD:
        return word
    return "-".join(
        word[start : start + BREAKUP_THRESHOLD]
        for start in range(0, len(word), BREAKUP_THRESHOLD)
    )


def message_breakup(msg: str) -> str:
    """Hyphenate words longer than the threshold so they wrap when rendered."""
    return "\n".join(
        " ".join(_split_word(word) for word in line.split()) for line in msg.split("\n")
    )


def front_text_items(params: Params) -> list[TextItem]:
    """Every piece of text to draw on the front, in drawing order."""
    font = font_description(params.font if params.font != Font.UNKNOWN else Font.MARKER)
    items = [
        TextItem(params.recipient.name, font, RECIPIENT_NAME_BOX),
        TextItem(params.recipient.email, font, RECIPIENT_EMAIL_BOX),
    ]
    if params.sender.name:
        items.append(TextItem(params.sender.name, font, SENDER_NAME_BOX))
    if params.sender.email:
        items.append(TextItem(params.sender.email, font, SENDER_EMAIL_BOX))
    if params.message:
        text = message_breakup(sanitize_message(params.message))
        items.append(TextItem(text, font, MESSAGE_BOX))
    return items