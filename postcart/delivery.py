"""The outgoing postcard e-mail and the mail template it is rendered with."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .models import Params

DELIVERIES_TEMPLATE_ALIAS = "postcart-deliveries-template"
DELIVERIES_TEMPLATE_NAME = "Deliveries Template"

_FONT_STACK = "'Open Sans', Helvetica, Arial, sans-serif"

DELIVERY_HTML_TEMPLATE = f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Your postcard</title>
<style>
  html, body {{ margin: 0; padding: 0; background: #ffffff; color: #51545e; font-family: {_FONT_STACK}; }}
  .card {{ display: block; width: 100%; height: auto; border: 0; }}
  .footer {{ padding: 20px 0; text-align: center; font-size: 13px; }}
</style>
</head>
<body>
<div role="presentation">
  <img class="card" src="{{{{image_url}}}}" alt="postcard">
  <div class="footer">sent with postcart</div>
</div>
</body>
</html>"""

DELIVERY_TEXT_TEMPLATE = "{{ascii_text}}"
DELIVERY_SUBJECT_TEMPLATE = "📪 {{subject}}"

ANONYMOUS = "Anonymous"


@dataclass(frozen=True)
class TemplateArguments:
    """Values filled into the deliveries template."""

    image_url: str
    ascii_text: str
    subject: str

    def to_dict(self) -> dict[str, str]:
        return {
            "image_url": self.image_url,
            "ascii_text": self.ascii_text,
            "subject": self.subject,
        }


def build_subject(params: Params) -> str:
    """Subject line naming the sender unless they are anonymous."""
    name = params.sender.name
    if name and name != ANONYMOUS:
        return f"{name} sent you a postcard: {params.subject}"
    return f"You have a new postcard: {params.subject}"


def build_email(
    params: Params, image_url: str, ascii_text: str, email_domain: str
) -> dict[str, Any]:
    """The templated message that delivers a finished postcard to its recipient."""
    arguments = TemplateArguments(
        image_url=image_url,
        ascii_text=ascii_text,
        subject=build_subject(params),
    )
    return {
        "From": f"Postcards <deliveries@{email_domain}>",
        "To": params.recipient.email,
        "TemplateAlias": DELIVERIES_TEMPLATE_ALIAS,
        "TemplateModel": arguments.to_dict(),
        "Metadata": {"sender_email": params.sender.email},
    }


def deliveries_template() -> dict[str, str]:
    """Definition of the template used for every delivery."""
    return {
        "Name": DELIVERIES_TEMPLATE_NAME,
        "Alias": DELIVERIES_TEMPLATE_ALIAS,
        "HtmlBody": DELIVERY_HTML_TEMPLATE,
        "TextBody": DELIVERY_TEXT_TEMPLATE,
        "Subject": DELIVERY_SUBJECT_TEMPLATE,
    }


def needs_deliveries_template(templates: Iterable[Mapping[str, Any]]) -> bool:
    """Whether none of the listed templates carries the deliveries alias."""
    return not any(t.get("Alias") == DELIVERIES_TEMPLATE_ALIAS for t in templates)