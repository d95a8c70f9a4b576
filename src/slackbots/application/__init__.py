"""Application layer."""

from slackbots.application.directory_client import DirectoryClient
from slackbots.application.resolvers import (
    ChannelResolver,
    DirectMessageResolver,
    GroupResolver,
    NameResolver,
    resolve_first,
)

__all__ = [
    "ChannelResolver",
    "DirectMessageResolver",
    "DirectoryClient",
    "GroupResolver",
    "NameResolver",
    "resolve_first",
]
