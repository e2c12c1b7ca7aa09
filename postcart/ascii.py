"""Plain-text renderings of both sides of a postcard."""

from __future__ import annotations

from dataclasses import dataclass

from .models import Params, Person
from .options import Artwork, Border, StampShape

FRAME_WIDTH = 40
FRAME_HEIGHT = 15

_NO_HYPHEN_AFTER = frozenset(" -\t.,:;")


@dataclass(frozen=True)
class AsciiBorder:
    """Character sequences drawn along each edge of a text frame."""

    top: str
    left: str
    right: str
    bottom: str

    def top_line(self) -> str:
        return self.top * (FRAME_WIDTH // len(self.top))

    def bottom_line(self) -> str:
        return self.bottom * (FRAME_WIDTH // len(self.bottom))

    def blank_line(self) -> str:
        inner = FRAME_WIDTH - (len(self.left) + len(self.right))
        return self.left + " " * inner + self.right


LINES_BORDER = AsciiBorder(top="-", left="||", right="||", bottom="-")
JAGGED_BORDER = AsciiBorder(top="/\\", left="<", right=">", bottom="\\/")
STRIPED_BORDER = AsciiBorder(top="\\ \\ \\", left="\\", right="\\", bottom="\\ \\ \\")
PHOTO_BORDER = AsciiBorder(top="[]", left="[]", right="[]", bottom="[]")
DEFAULT_BORDER = AsciiBorder(top="#", left="#", right="#", bottom="#")

LAKESIDE_ASCII = r"""     .      .     __
    / \    / \   /  \
  / /  \ /  \  \   /  \
/_______. ~   | .______\
-_~_--___\_____/--___---
\__-__--_--_--__--_----/
 \--__--_--___~~_--_~_/
  --~--#---~----~--#--
   \~--~--#--~-#--~-/
    \__##_____#___/"""

ISLAND_ASCII = r"""
      /\/\/\/\
     //\/\/\/\\
      '_\V/_'
         #
         #
         #
         #.a@@a.
       .aa@@@@@@@@@a
    .a@@@@@@@@@@@@@@@@@@aa.
    ~~~~~~~~~~~~~~~~~~~~~~~"""

MOUNTAINS_ASCII = r"""
           /\
          /  \/\
         /   /  \
        /\_/\_/\/\  /\
       /          \/ -\
      /  /     \   \ \ \
     /    /       \ \   \
    /-___--_-___-_-__\###\
    #######################"""

ATTACHMENT_ASCII = (
    r"""                           ___
        _______________   /   \
       |         /\    | |  __
       |    __  /__\   | | |  \
       |   |__|   /\   | | |  |
       |          \/   | | |  |
       |_______________| | |  |
                          \__/"""
    + "\n    "
)

CITY_ASCII = r"""                           __|__
               ~          /  O  \
             ~   ______  |  | |  |
  __|__     ~   | City | | # # # |
  |+|+|  _/|___ |______| |  | |  |
  |+|+| |~~~[]~|   ||    | # _ # |
  ||_|| |~H~~~~|   []    |__|_|__|
  --------------------------------
  - -- -- -- -- -- -- -- -- -- --
  --------------------------------"""

_BACK_ARTWORK = {
    Artwork.ISLANDS: ISLAND_ASCII,
    Artwork.LAKESIDE: LAKESIDE_ASCII,
    Artwork.ATTACHMENT: ATTACHMENT_ASCII,
    Artwork.CITY: CITY_ASCII,
    Artwork.MOUNTAINS: MOUNTAINS_ASCII,
}

_STAMP_TEMPLATES = {
    StampShape.RECT: " ____\n| {0} |\n|____|",
    StampShape.RECT_CLASSIC: "######\n# {0} #\n######",
    StampShape.CIRCLE: "  __\n /  \\\n| {0} |\n \\__/",
    StampShape.CIRCLE_CLASSIC: " ####\n# {0} #\n ####",
}


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def border_for(border: Border) -> AsciiBorder:
    """The text border that stands in for ``border``."""
    if border in (Border.CUBES, Border.PHOTO):
        return PHOTO_BORDER
    if border == Border.LINES:
        return LINES_BORDER
    if border == Border.STRIPES:
        return STRIPED_BORDER
    return DEFAULT_BORDER


def back_artwork_ascii(artwork: Artwork) -> str:
    """Text picture for ``artwork``; mountains when there is none."""
    return _BACK_ARTWORK.get(artwork, MOUNTAINS_ASCII)


def create_back_ascii(artwork: Artwork, border: Border) -> str:
    """The framed text picture for the back of the card."""
    return add_ascii_to_frame(back_artwork_ascii(artwork), border_for(border))


def add_ascii_to_frame(ascii: str, border: AsciiBorder) -> str:
    """Centre ``ascii`` inside a 40 by 15 frame drawn with ``border``."""
    lines = ascii.split("\n")
    max_width = max(len(line) for line in lines)
    x_pad = _trunc_div(38 - max_width, 2)
    y_pad = _trunc_div(FRAME_HEIGHT - 2 - len(lines), 2)
    left_pad = " " * (x_pad - len(border.left))
    blank = border.blank_line()

    rows = [border.top_line()]
    art = iter(lines)
    spacers = 0
    done = False
    for _ in range(FRAME_HEIGHT - 2):
        if spacers < y_pad or done:
            spacers += 1
            rows.append(blank)
            continue
        art_line = next(art, None)
        if art_line is None:
            rows.append(blank)
            done = True
            continue
        start = border.left + left_pad + art_line
        fill = " " * (FRAME_WIDTH - (len(start) + len(border.right)))
        rows.append(start + fill + border.right)
    rows.append(border.bottom_line())
    return "\n".join(rows)


def create_ascii_stamp(shape: StampShape, country: str) -> str:
    """A small text stamp showing the country code."""
    template = _STAMP_TEMPLATES.get(shape, _STAMP_TEMPLATES[StampShape.RECT_CLASSIC])
    return template.format(country)


def content_lines(info: str, max_line_len: int, max_lines: int) -> list[str]:
    """Wrap ``info`` into padded lines, ending with "..." once ``max_lines`` is reached."""
    lines: list[str] = []
    current = ""
    last = len(info) - 1
    for index, char in enumerate(info):
        current += char
        if len(current) == max_line_len - 3 and len(lines) == max_lines - 1:
            lines.append(current + "...")
            break
        if len(current) == max_line_len:
            lines.append(current)
            current = ""
        if index == last:
            lines.append(current + " " * (max_line_len - len(current)))
    return [f" {line} " for line in lines]


def person_ascii(prefix: str, person: Person, side_length: int) -> str:
    """A labelled block naming ``person`` within ``side_length`` columns."""
    top = f"{prefix}:" + " " * (side_length - (len(prefix) + 1))
    width = side_length - 2
    rows = [top]
    if person.name:
        rows.extend(content_lines(person.name, width, 2))
    if person.email:
        rows.extend(content_lines(f"<{person.email}>", width, 2))
    return "\n".join(rows)


def breakup_message(msg: str) -> str:
    """Split ``msg`` into lines of 39 characters, hyphenating broken words."""
    lines: list[str] = []
    current = ""
    last = len(msg) - 1
    for index, char in enumerate(msg):
        current += char
        if len(current) == FRAME_WIDTH - 1:
            if char not in _NO_HYPHEN_AFTER:
                current += "-"
            lines.append(current)
            current = ""
        if index == last:
            lines.append(current)
    return "\n".join(lines)


def _front_left_side(sender: Person, message: str, border_width: int) -> str:
    height = FRAME_HEIGHT - 2
    side_length = 20 - border_width
    space_line = " " * side_length
    rows = person_ascii("From", sender, side_length).split("\n")
    rows.append(space_line)
    max_message_lines = height - 1 - len(rows)
    rows.extend(content_lines(message, side_length - 2, max_message_lines))
    rows.append(space_line)
    return "\n".join(rows)


def _front_right_side(
    recipient: Person, shape: StampShape, country: str, border_width: int
) -> str:
    height = FRAME_HEIGHT - 2
    side_length = 19 - border_width
    space_line = " " * side_length
    rows = [space_line]

    stamp_pad = " " * (side_length // 2 + 1)
    for stamp_line in create_ascii_stamp(shape, country).split("\n"):
        padded = stamp_pad + stamp_line
        rows.append(padded + " " * (side_length - len(padded)))

    recipient_block = person_ascii("To", recipient, side_length)
    recipient_rows = recipient_block.split("\n")
    gap = height - len(rows) - 1 - len(recipient_rows)
    rows.extend([space_line] * max(gap, 0))
    rows.extend(recipient_rows)
    rows.append(space_line)
    return "\n".join(rows)


def _join_front_sides(left: str, right: str, border: AsciiBorder) -> str:
    left_rows = left.split("\n")
    right_rows = right.split("\n")
    if len(right_rows) < len(left_rows):
        raise ValueError("right side of the card is shorter than the left side")
    return "\n".join(
        f"{border.left}{left_row}|{right_row}{border.right}"
        for left_row, right_row in zip(left_rows, right_rows)
    )


def create_front_ascii(params: Params) -> str:
    """The framed text rendering of the card's writing side, followed by the full message."""
    message = params.message.replace("\n", " ")
    border = border_for(params.border)
    left = _front_left_side(params.sender, message, len(border.left))
    right = _front_right_side(
        params.recipient, params.stamp_shape, params.country, len(border.right)
    )
    sides = _join_front_sides(left, right, border)
    return "\n".join(
        [border.top_line(), sides, border.bottom_line(), "", breakup_message(message)]
    )