"""Namespace listing results."""

from dataclasses import dataclass

from slackbots.domain.entities.channel import Channel
from slackbots.domain.entities.group import Group
from slackbots.domain.entities.user import User


@dataclass(frozen=True)
class ChannelList:
    ok: bool
    channels: tuple[Channel, ...]


@dataclass(frozen=True)
class GroupList:
    ok: bool
    groups: tuple[Group, ...]


@dataclass(frozen=True)
class UserList:
    ok: bool
    members: tuple[User, ...]
