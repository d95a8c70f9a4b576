"""Message attachment value objects."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Field:
    """A title/value pair rendered as a table cell inside an attachment."""

    title: str
    value: str
    short: bool | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"title": self.title, "value": self.value}
        if self.short is not None:
            payload["short"] = self.short
        return payload


@dataclass(frozen=True)
class Attachment:
    """Legacy rich-content block attached to an outbound message.

    Attributes:
        fallback: Plain-text summary for clients that cannot render attachments.
        title: Attachment title.
        color: Hex color or one of "good", "warning", "danger".
    """

    fallback: str
    title: str
    color: str | None = None
    pretext: str | None = None
    author_name: str | None = None
    author_link: str | None = None
    author_icon: str | None = None
    title_link: str | None = None
    text: str | None = None
    fields: tuple[Field, ...] = ()
    image_url: str | None = None
    thumb_url: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Convert to the Web API JSON shape, omitting unset fields."""
        payload: dict[str, Any] = {"fallback": self.fallback, "title": self.title}
        for name in (
            "color",
            "pretext",
            "author_name",
            "author_link",
            "author_icon",
            "title_link",
            "text",
            "image_url",
            "thumb_url",
        ):
            value = getattr(self, name)
            if value is not None:
                payload[name] = value
        if self.fields:
            payload["fields"] = [f.to_payload() for f in self.fields]
        return payload
