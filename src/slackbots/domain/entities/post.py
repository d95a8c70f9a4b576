"""Outbound message parameters and the post response."""

from dataclasses import dataclass
from typing import Any

from slackbots.domain.entities.attachment import Attachment
from slackbots.domain.entities.message import Message


@dataclass(frozen=True)
class PostParams:
    """Per-call overrides for chat.postMessage.

    Every field defaults to None, meaning the server default applies.

    Attributes:
        as_user: Post as the authenticated user instead of as a bot.
        parse: "full" or "none".
        link_names: 1 to turn @names and #channels into links.
        attachments: Rich-content blocks.
        unfurl_links: Unfurl text links.
        unfurl_media: Unfurl media links.
        icon_url: Avatar URL override.
        icon_emoji: Avatar emoji override (e.g. ":robot_face:").
        username: Display name override.
    """

    as_user: bool | None = None
    parse: str | None = None
    link_names: int | None = None
    attachments: tuple[Attachment, ...] | None = None
    unfurl_links: bool | None = None
    unfurl_media: bool | None = None
    icon_url: str | None = None
    icon_emoji: str | None = None
    username: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Return the set fields as chat.postMessage keyword arguments."""
        payload: dict[str, Any] = {}
        for name in (
            "as_user",
            "parse",
            "link_names",
            "unfurl_links",
            "unfurl_media",
            "icon_url",
            "icon_emoji",
            "username",
        ):
            value = getattr(self, name)
            if value is not None:
                payload[name] = value
        if self.attachments is not None:
            payload["attachments"] = [a.to_payload() for a in self.attachments]
        return payload


@dataclass(frozen=True)
class PostResponse:
    """Result of a successful post.

    Attributes:
        ok: Server ok flag.
        ts: Server timestamp of the new message.
        channel: Destination channel ID.
        message: Echo of the posted message.
    """

    ok: bool
    ts: str
    channel: str
    message: Message
