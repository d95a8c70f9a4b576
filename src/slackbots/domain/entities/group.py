"""Group entity."""

from dataclasses import dataclass
from datetime import datetime

from slackbots.domain.entities.message import Message
from slackbots.domain.entities.property import Property


@dataclass(frozen=True)
class Group:
    """Private multi-party conversation snapshot.

    Same shape as Channel without the is_general / is_member flags.
    """

    id: str
    name: str
    created: datetime | None = None
    creator: str = ""
    is_archived: bool = False
    members: tuple[str, ...] = ()
    topic: Property | None = None
    purpose: Property | None = None
    last_read: str | None = None
    latest: Message | None = None
    unread_count: int = 0
    unread_count_display: int = 0
