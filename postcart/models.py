"""Postcard request data and its conversion to and from queued job records."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .options import (
    ACCEPTABLE_ARTWORK,
    ACCEPTABLE_BORDERS,
    ACCEPTABLE_FONTS,
    ACCEPTABLE_STAMP_SHAPES,
    ACCEPTABLE_STYLES,
    ACCEPTABLE_TEXTURED,
    Artwork,
    Border,
    Font,
    StampShape,
    Style,
    Textured,
)
from .store import JobRecord, Store


@dataclass
class Person:
    """A name and e-mail address pair; either may be empty."""

    name: str = ""
    email: str = ""


@dataclass
class EmailAttachment:
    """An inbound attachment with base64 content."""

    content: str
    content_type: str


@dataclass
class Params:
    """Everything needed to draw and deliver one postcard."""

    id: str = ""
    recipient: Person = field(default_factory=Person)
    sender: Person = field(default_factory=Person)
    artwork: Artwork = Artwork.UNKNOWN
    style: Style = Style.UNKNOWN
    font: Font = Font.UNKNOWN
    border: Border = Border.UNKNOWN
    stamp_shape: StampShape = StampShape.UNKNOWN
    textured: Textured = Textured.UNKNOWN
    country: str = ""
    subject: str = ""
    message: str = ""
    attachment: EmailAttachment | None = None

    def to_job_record(self) -> JobRecord:
        """The record kept in the store while the job waits in the queue."""
        return JobRecord(
            id=self.id,
            to_email=self.recipient.email,
            to_name=self.recipient.name,
            from_email=self.sender.email,
            from_name=self.sender.name,
            artwork=int(self.artwork),
            style=int(self.style),
            font=int(self.font),
            border=int(self.border),
            stamp_shape=int(self.stamp_shape),
            textured=int(self.textured),
            country=self.country,
            subject=self.subject,
            message=self.message,
            attachment_type=self.attachment.content_type if self.attachment else "",
        )

    @classmethod
    def from_job_record(cls, record: JobRecord, store: Store) -> Params:
        """Rebuild parameters from a stored record, reading its attachment file."""
        attachment = None
        if record.attachment_type:
            content = store.attachment_path(record.id).read_text(encoding="utf-8")
            attachment = EmailAttachment(content=content, content_type=record.attachment_type)
        return cls(
            id=record.id,
            recipient=Person(name=record.to_name, email=record.to_email),
            sender=Person(name=record.from_name, email=record.from_email),
            artwork=Artwork(record.artwork),
            style=Style(record.style),
            font=Font(record.font),
            border=Border(record.border),
            stamp_shape=StampShape(record.stamp_shape),
            textured=Textured(record.textured),
            country=record.country,
            subject=record.subject,
            message=record.message,
            attachment=attachment,
        )


def assign_unknown_values(
    params: Params,
    allow_attachments: bool,
    rng: random.Random | None = None,
) -> None:
    """Fill every unset option of ``params`` in place with a random choice."""
    chooser = rng if rng is not None else random.Random()
    if params.border == Border.UNKNOWN:
        params.border = chooser.choice(ACCEPTABLE_BORDERS)
    if params.stamp_shape == StampShape.UNKNOWN:
        params.stamp_shape = chooser.choice(ACCEPTABLE_STAMP_SHAPES)
    if params.artwork == Artwork.UNKNOWN:
        params.artwork = chooser.choice(ACCEPTABLE_ARTWORK)
    if params.artwork == Artwork.ATTACHMENT and not allow_attachments:
        params.artwork = chooser.choice(ACCEPTABLE_ARTWORK)
    if params.style == Style.UNKNOWN:
        params.style = chooser.choice(ACCEPTABLE_STYLES)
    if params.font == Font.UNKNOWN:
        params.font = chooser.choice(ACCEPTABLE_FONTS)
    if params.textured == Textured.UNKNOWN:
        params.textured = chooser.choice(ACCEPTABLE_TEXTURED)