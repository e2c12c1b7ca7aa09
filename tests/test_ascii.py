import pytest

from postcart.ascii import (
    AsciiBorder,
    add_ascii_to_frame,
    back_artwork_ascii,
    border_for,
    breakup_message,
    content_lines,
    create_ascii_stamp,
    create_back_ascii,
    create_front_ascii,
    person_ascii,
)
from postcart.models import Params, Person
from postcart.options import Artwork, Border, StampShape

LONG_MESSAGE = "word " * 60


def _params(**overrides):
    values = dict(
        id="job-1",
        recipient=Person(name="Grandma", email="grandma@example.com"),
        sender=Person(name="Arthur", email="arthur@example.com"),
        border=Border.STANDARD,
        stamp_shape=StampShape.RECT,
        country="US",
        message=LONG_MESSAGE,
    )
    values.update(overrides)
    return Params(**values)


def _unwrap(lines):
    return "".join(line[1:-1] for line in lines).rstrip()


def test_border_for_mappings():
    assert border_for(Border.CUBES) == border_for(Border.PHOTO)
    assert border_for(Border.UNKNOWN) == border_for(Border.STANDARD)
    assert border_for(Border.LINES).left == "||"
    assert border_for(Border.STRIPES).top == "\\ \\ \\"


def test_back_artwork_defaults_to_mountains():
    assert back_artwork_ascii(Artwork.UNKNOWN) == back_artwork_ascii(Artwork.MOUNTAINS)
    assert "City" in back_artwork_ascii(Artwork.CITY)


@pytest.mark.parametrize("artwork", list(Artwork))
@pytest.mark.parametrize("border", list(Border))
def test_back_frame_dimensions(artwork, border):
    rows = create_back_ascii(artwork, border).split("\n")
    frame = border_for(border)
    assert len(rows) == 15
    assert all(len(row) == 40 for row in rows)
    assert rows[0] == frame.top * (40 // len(frame.top))
    assert rows[-1] == frame.bottom * (40 // len(frame.bottom))
    assert all(row.startswith(frame.left) and row.endswith(frame.right) for row in rows[1:-1])


def test_frame_contains_artwork_lines():
    framed = add_ascii_to_frame(back_artwork_ascii(Artwork.CITY), border_for(Border.STANDARD))
    for line in back_artwork_ascii(Artwork.CITY).split("\n"):
        assert line.strip() in framed


def test_frame_with_custom_border():
    border = AsciiBorder(top="=", left="|", right="|", bottom="=")
    rows = add_ascii_to_frame("hi", border).split("\n")
    assert rows[0] == "=" * 40
    assert sum("hi" in row for row in rows) == 1


def test_stamp_shapes():
    assert create_ascii_stamp(StampShape.RECT, "US") == " ____\n| US |\n|____|"
    assert create_ascii_stamp(StampShape.UNKNOWN, "FR") == create_ascii_stamp(
        StampShape.RECT_CLASSIC, "FR"
    )
    assert "| BR |" in create_ascii_stamp(StampShape.CIRCLE, "BR")
    assert "# PW #" in create_ascii_stamp(StampShape.CIRCLE_CLASSIC, "PW")


def test_content_lines_wrap_and_pad():
    lines = content_lines("hello world", 5, 4)
    assert all(len(line) == 7 for line in lines)
    assert all(line.startswith(" ") and line.endswith(" ") for line in lines)
    assert _unwrap(lines) == "hello world"


def test_content_lines_truncates_with_ellipsis():
    lines = content_lines("x" * 30, 8, 2)
    assert len(lines) == 2
    assert lines[-1].strip().endswith("...")
    assert len(lines[-1]) == 10


def test_content_lines_exact_fill_adds_blank_line():
    assert content_lines("abcd", 4, 3) == [" abcd ", "      "]


def test_content_lines_empty():
    assert content_lines("", 10, 3) == []


def test_person_ascii_wraps_email():
    block = person_ascii("To", Person(name="Ann", email="ann@example.com"), 18)
    rows = block.split("\n")
    assert rows[0].startswith("To:")
    assert len(rows[0]) == 18
    assert rows[1].strip() == "Ann"
    assert _unwrap(rows[2:]) == "<ann@example.com>"


def test_person_ascii_without_details():
    block = person_ascii("From", Person(), 19)
    assert block.startswith("From:")
    assert "\n" not in block


def test_breakup_message_short_is_unchanged():
    assert breakup_message("hello there") == "hello there"
    assert breakup_message("") == ""


def test_breakup_message_hyphenates_mid_word():
    msg = "a" * 39 + "b"
    assert breakup_message(msg) == "a" * 39 + "-\n" + "b"


def test_breakup_message_no_hyphen_after_space():
    msg = "a" * 38 + " b"
    assert breakup_message(msg) == "a" * 38 + " \nb"


def test_breakup_message_preserves_content():
    msg = LONG_MESSAGE
    rows = breakup_message(msg).split("\n")
    assert all(len(row) <= 40 for row in rows)
    rebuilt = "".join(row[:-1] if len(row) == 40 else row for row in rows)
    assert rebuilt == msg


@pytest.mark.parametrize("border", list(Border))
def test_front_ascii_layout(border):
    params = _params(border=border)
    rows = create_front_ascii(params).split("\n")
    frame = border_for(border)
    assert rows[0] == frame.top * (40 // len(frame.top))
    assert all(len(row) == 40 for row in rows[1:14])
    assert rows[14] == frame.bottom * (40 // len(frame.bottom))
    assert rows[15] == ""
    assert "\n".join(rows[16:]) == breakup_message(LONG_MESSAGE)


def test_front_ascii_contents():
    text = create_front_ascii(_params())
    assert "From:" in text
    assert "To:" in text
    assert "| US |" in text
    assert "..." in text
    assert "Grandma" in text


def test_front_ascii_replaces_newlines_in_message():
    params = _params(message="line one\nline two")
    text = create_front_ascii(params)
    assert text.split("\n")[-1] == "line one line two"