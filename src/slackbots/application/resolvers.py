"""Name resolution strategies, one per namespace."""

import logging
from collections.abc import Sequence
from typing import Protocol

from slackbots.domain.entities import Channel, Destination, Group, Namespace, User
from slackbots.domain.exceptions import NotFoundError, RemoteError

logger = logging.getLogger(__name__)


class DirectoryLookup(Protocol):
    """Lookups the resolvers are built on."""

    async def get_channel_by_name(self, name: str) -> Channel: ...

    async def get_group_by_name(self, name: str) -> Group: ...

    async def get_user_by_name(self, name: str) -> User: ...

    async def open_direct_message(self, user_id: str) -> str: ...


class NameResolver(Protocol):
    """Resolve a name within a single namespace.

    resolve() raises NotFoundError when the name does not exist there.
    """

    namespace: Namespace

    async def resolve(self, name: str) -> Destination: ...


class ChannelResolver:
    namespace = Namespace.CHANNEL

    def __init__(self, directory: DirectoryLookup) -> None:
        self._directory = directory

    async def resolve(self, name: str) -> Destination:
        channel = await self._directory.get_channel_by_name(name)
        return Destination.channel(name, channel.id)


class GroupResolver:
    namespace = Namespace.GROUP

    def __init__(self, directory: DirectoryLookup) -> None:
        self._directory = directory

    async def resolve(self, name: str) -> Destination:
        group = await self._directory.get_group_by_name(name)
        return Destination.group(name, group.id)


class DirectMessageResolver:
    """Resolve a user name to the direct-message channel with that user.

    The channel is opened on first use.
    """

    namespace = Namespace.USER

    def __init__(self, directory: DirectoryLookup) -> None:
        self._directory = directory

    async def resolve(self, name: str) -> Destination:
        user = await self._directory.get_user_by_name(name)
        channel_id = await self._directory.open_direct_message(user.id)
        return Destination.user(name, user.id, channel_id)


async def resolve_first(resolvers: Sequence[NameResolver], name: str) -> Destination:
    """Try each resolver in order and return the first match.

    A NotFoundError or RemoteError from one namespace is not fatal; the
    next resolver is tried.

    Raises:
        NotFoundError: If no resolver matched.
    """
    for resolver in resolvers:
        try:
            destination = await resolver.resolve(name)
        except NotFoundError:
            logger.debug("%r is not a %s", name, resolver.namespace.value)
            continue
        except RemoteError as e:
            logger.warning(
                "Resolving %r as a %s failed, trying next namespace: %s",
                name,
                resolver.namespace.value,
                e,
            )
            continue
        logger.debug("Resolved %r as %s %s", name, destination.namespace.value, destination.id)
        return destination
    raise NotFoundError(name, *(r.namespace for r in resolvers))
