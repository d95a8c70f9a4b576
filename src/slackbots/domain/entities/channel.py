"""Channel entity."""

from dataclasses import dataclass
from datetime import datetime

from slackbots.domain.entities.message import Message
from slackbots.domain.entities.property import Property


@dataclass(frozen=True)
class Channel:
    """Public channel snapshot.

    Attributes:
        id: Channel ID, unique within the workspace.
        name: Channel name, unique among non-archived channels.
        created: Creation time.
        creator: ID of the creating user.
        is_archived: Whether the channel is archived.
        is_general: Whether this is the workspace's general channel.
        is_member: Whether the bot is a member.
        members: Member user IDs.
        topic: Channel topic.
        purpose: Channel purpose.
        last_read: Timestamp of the last message read by the bot.
        latest: Latest message.
        unread_count: Unread message count.
        unread_count_display: Unread count shown in the client.
    """

    id: str
    name: str
    created: datetime | None = None
    creator: str = ""
    is_archived: bool = False
    is_general: bool = False
    is_member: bool = False
    members: tuple[str, ...] = ()
    topic: Property | None = None
    purpose: Property | None = None
    last_read: str | None = None
    latest: Message | None = None
    unread_count: int = 0
    unread_count_display: int = 0
