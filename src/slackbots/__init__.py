"""Asyncio Slack bot client: lookups by name and message dispatch."""

from slackbots.application import DirectoryClient
from slackbots.domain.entities import (
    Attachment,
    Channel,
    ChannelList,
    ClientState,
    Destination,
    Event,
    Field,
    Group,
    GroupList,
    Message,
    Namespace,
    PostParams,
    PostResponse,
    Property,
    Session,
    User,
    UserList,
    UserProfile,
)
from slackbots.domain.exceptions import (
    AuthenticationError,
    ConnectionFailedError,
    InvalidStateError,
    NotFoundError,
    RemoteError,
    SlackBotError,
)

__all__ = [
    "Attachment",
    "AuthenticationError",
    "Channel",
    "ChannelList",
    "ClientState",
    "ConnectionFailedError",
    "Destination",
    "DirectoryClient",
    "Event",
    "Field",
    "Group",
    "GroupList",
    "InvalidStateError",
    "Message",
    "Namespace",
    "NotFoundError",
    "PostParams",
    "PostResponse",
    "Property",
    "RemoteError",
    "Session",
    "SlackBotError",
    "User",
    "UserList",
    "UserProfile",
]
