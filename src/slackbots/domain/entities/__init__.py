"""Domain entities."""

from slackbots.domain.entities.attachment import Attachment, Field
from slackbots.domain.entities.channel import Channel
from slackbots.domain.entities.destination import Destination, Namespace
from slackbots.domain.entities.group import Group
from slackbots.domain.entities.listing import ChannelList, GroupList, UserList
from slackbots.domain.entities.message import Event, Message
from slackbots.domain.entities.post import PostParams, PostResponse
from slackbots.domain.entities.property import Property
from slackbots.domain.entities.session import ClientState, Session
from slackbots.domain.entities.user import User, UserProfile

__all__ = [
    "Attachment",
    "Channel",
    "ChannelList",
    "ClientState",
    "Destination",
    "Event",
    "Field",
    "Group",
    "GroupList",
    "Message",
    "Namespace",
    "PostParams",
    "PostResponse",
    "Property",
    "Session",
    "User",
    "UserList",
    "UserProfile",
]
