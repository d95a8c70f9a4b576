"""Event and message entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Event:
    """Real-time event received from the platform.

    Attributes:
        type: Event type (e.g. "message", "channel_created").
        channel: Channel ID the event relates to, if any.
        user: User ID that caused the event, if any.
        ts: Slack timestamp string, kept verbatim.
    """

    type: str
    channel: str | None = None
    user: str | None = None
    ts: str | None = None


@dataclass(frozen=True)
class Message(Event):
    """Message event.

    Attributes:
        subtype: Message subtype (e.g. "bot_message"), None for plain messages.
        text: Message text.
    """

    subtype: str | None = None
    text: str = ""
