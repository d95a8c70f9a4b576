"""Directory client façade."""

import asyncio
import logging
from collections.abc import Callable, Iterable
from dataclasses import replace
from typing import Protocol, TypeVar

from slackbots.application.resolvers import (
    ChannelResolver,
    DirectMessageResolver,
    GroupResolver,
    NameResolver,
    resolve_first,
)
from slackbots.config import Config, SlackConfig
from slackbots.domain.entities import (
    Channel,
    ChannelList,
    ClientState,
    Destination,
    Group,
    GroupList,
    Namespace,
    PostParams,
    PostResponse,
    Session,
    User,
    UserList,
)
from slackbots.domain.exceptions import (
    ConnectionFailedError,
    InvalidStateError,
    NotFoundError,
)
from slackbots.domain.services import DirectoryApi, EventListener, RealtimeTransport
from slackbots.infrastructure.cache import LookupCache
from slackbots.infrastructure.events import EventDispatcher, EventLoop, EventQueue
from slackbots.infrastructure.slack import (
    SlackDirectoryApi,
    SlackSocketModeTransport,
    create_web_client,
)

logger = logging.getLogger(__name__)


class _Named(Protocol):
    name: str


T = TypeVar("T", bound=_Named)

# Cache bucket for direct-message channel IDs, keyed by user ID
_DM_BUCKET = "im"


def _first_named(
    entries: Iterable[T],
    name: str,
    is_inactive: Callable[[T], bool],
) -> T | None:
    """Return the first active entry with an exactly matching name."""
    for entry in entries:
        if entry.name == name and not is_inactive(entry):
            return entry
    return None


def _index_by_name(
    entries: Iterable[T], is_inactive: Callable[[T], bool]
) -> dict[str, T]:
    """Map name to the first active entry carrying it, in server order."""
    index: dict[str, T] = {}
    for entry in entries:
        name = entry.name
        if name and name not in index and not is_inactive(entry):
            index[name] = entry
    return index


def _is_archived(entry: Channel | Group) -> bool:
    return entry.is_archived


def _is_deleted(entry: User) -> bool:
    return entry.deleted


class DirectoryClient:
    """Session, directory lookups and message dispatch for one bot.

    Lifecycle: UNAUTHENTICATED -> AUTHENTICATED (login) -> CONNECTED
    (connect). Lookups and posts require a successful login().

    Name lookups resolve against a fresh listing unless a cache is
    configured. Every operation is a coroutine; cancel the awaiting task
    to abandon the in-flight request.
    """

    def __init__(
        self,
        config: SlackConfig,
        api: DirectoryApi,
        transport: RealtimeTransport | None = None,
        cache: LookupCache | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Slack settings. ``name`` is the default post username.
            api: Remote directory and messaging API.
            transport: Real-time transport used by connect().
            cache: Optional lookup cache.
        """
        self._config = config
        self._api = api
        self._transport = transport
        self._cache = cache
        self._state = ClientState.UNAUTHENTICATED
        self._session: Session | None = None

        self._dispatcher = EventDispatcher()
        self._event_queue = EventQueue()
        self._event_loop = EventLoop(self._event_queue, self._dispatcher)
        self._event_task: asyncio.Task[None] | None = None
        self._connect_lock = asyncio.Lock()

        self._resolvers: dict[Namespace, NameResolver] = {
            Namespace.CHANNEL: ChannelResolver(self),
            Namespace.GROUP: GroupResolver(self),
            Namespace.USER: DirectMessageResolver(self),
        }
        # Tie-break when a name exists in several namespaces
        self._priority: tuple[NameResolver, ...] = (
            self._resolvers[Namespace.CHANNEL],
            self._resolvers[Namespace.GROUP],
            self._resolvers[Namespace.USER],
        )

    @classmethod
    def from_config(cls, config: Config) -> "DirectoryClient":
        """Build a client wired to the Slack Web API and Socket Mode."""
        web_client = create_web_client(config.slack)
        transport = None
        if config.slack.app_token:
            transport = SlackSocketModeTransport(config.slack.app_token, web_client)
        cache = None
        if config.cache.enabled:
            cache = LookupCache(ttl_seconds=config.cache.ttl_seconds)
        return cls(
            config.slack,
            SlackDirectoryApi(web_client),
            transport=transport,
            cache=cache,
        )

    @property
    def state(self) -> ClientState:
        return self._state

    @property
    def session(self) -> Session | None:
        """Identity from the last successful login()."""
        return self._session

    def _require_login(self, operation: str) -> None:
        if self._state is ClientState.UNAUTHENTICATED:
            raise InvalidStateError(operation, "a successful login()")

    # Session control

    async def login(self) -> Session:
        """Exchange the configured token for a session.

        Raises:
            AuthenticationError: If the token is rejected.
            RemoteError: If the call fails for another reason.
        """
        session = await self._api.auth_test()
        self._session = session
        if self._state is ClientState.UNAUTHENTICATED:
            self._state = ClientState.AUTHENTICATED
        logger.info("Logged in as %s (%s) on %s", session.user, session.user_id, session.team)
        return session

    async def connect(self) -> None:
        """Open the real-time connection and start delivering events.

        Does nothing when already connected. Concurrent calls are
        serialized, so at most one connection is ever open. Never retries.

        Raises:
            InvalidStateError: If login() has not succeeded.
            ConnectionFailedError: If no transport is configured or the
                connection cannot be opened.
        """
        self._require_login("connect")
        if self._transport is None:
            raise ConnectionFailedError(
                "No real-time transport configured (slack.app_token is not set)"
            )

        async with self._connect_lock:
            if self._state is ClientState.CONNECTED:
                return
            self._event_task = asyncio.create_task(self._event_loop.run())
            try:
                await self._transport.connect(self._event_queue.enqueue)
            except BaseException:
                await self._stop_event_loop()
                raise
            self._state = ClientState.CONNECTED
        logger.info("Connected to real-time transport")

    async def close(self) -> None:
        """Close the real-time connection, keeping the session."""
        async with self._connect_lock:
            if self._state is not ClientState.CONNECTED:
                return
            try:
                if self._transport is not None:
                    await self._transport.close()
            finally:
                await self._stop_event_loop()
                self._state = ClientState.AUTHENTICATED
        logger.info("Disconnected from real-time transport")

    async def _stop_event_loop(self) -> None:
        if self._event_task is not None:
            self._event_task.cancel()
            await asyncio.gather(self._event_task, return_exceptions=True)
            self._event_task = None

    def add_event_handler(
        self, handler: EventListener, event_type: str | None = None
    ) -> None:
        """Register a coroutine called for each received event.

        Events are delivered one at a time, in arrival order.

        Args:
            handler: Coroutine function taking an Event.
            event_type: Restrict delivery to one event type (e.g. "message").
        """
        self._dispatcher.register(handler, event_type)

    def remove_event_handler(self, handler: EventListener) -> None:
        self._dispatcher.unregister(handler)

    # Directory lookups

    async def list_channels(self) -> ChannelList:
        """Fetch every public channel, in server order."""
        self._require_login("list_channels")
        channels = tuple(await self._api.list_channels())
        self._refresh_cache(Namespace.CHANNEL, channels, _is_archived)
        return ChannelList(ok=True, channels=channels)

    async def list_groups(self) -> GroupList:
        """Fetch every private group visible to the bot, in server order."""
        self._require_login("list_groups")
        groups = tuple(await self._api.list_groups())
        self._refresh_cache(Namespace.GROUP, groups, _is_archived)
        return GroupList(ok=True, groups=groups)

    async def list_users(self) -> UserList:
        """Fetch every workspace member, in server order."""
        self._require_login("list_users")
        users = tuple(await self._api.list_users())
        self._refresh_cache(Namespace.USER, users, _is_deleted)
        return UserList(ok=True, members=users)

    def _refresh_cache(
        self,
        namespace: Namespace,
        entries: Iterable[T],
        is_inactive: Callable[[T], bool],
    ) -> None:
        if self._cache is not None:
            self._cache.replace_bucket(
                namespace.value, _index_by_name(entries, is_inactive)
            )

    def _cached(self, namespace: Namespace, name: str) -> object | None:
        if self._cache is None:
            return None
        return self._cache.get(namespace.value, name)

    async def get_channel_by_name(self, name: str) -> Channel:
        """Resolve a channel name.

        The first non-archived channel with exactly this name, in server
        order, wins.

        Raises:
            NotFoundError: If no such channel exists.
        """
        self._require_login("get_channel_by_name")
        if not name:
            raise NotFoundError(name, Namespace.CHANNEL)
        cached = self._cached(Namespace.CHANNEL, name)
        if isinstance(cached, Channel):
            return cached
        listing = await self.list_channels()
        channel = _first_named(listing.channels, name, _is_archived)
        if channel is None:
            raise NotFoundError(name, Namespace.CHANNEL)
        return channel

    async def get_group_by_name(self, name: str) -> Group:
        """Resolve a private group name.

        Raises:
            NotFoundError: If no such group exists.
        """
        self._require_login("get_group_by_name")
        if not name:
            raise NotFoundError(name, Namespace.GROUP)
        cached = self._cached(Namespace.GROUP, name)
        if isinstance(cached, Group):
            return cached
        listing = await self.list_groups()
        group = _first_named(listing.groups, name, _is_archived)
        if group is None:
            raise NotFoundError(name, Namespace.GROUP)
        return group

    async def get_user_by_name(self, name: str) -> User:
        """Resolve a user handle, ignoring deactivated accounts.

        Raises:
            NotFoundError: If no such user exists.
        """
        self._require_login("get_user_by_name")
        if not name:
            raise NotFoundError(name, Namespace.USER)
        cached = self._cached(Namespace.USER, name)
        if isinstance(cached, User):
            return cached
        listing = await self.list_users()
        user = _first_named(listing.members, name, _is_deleted)
        if user is None:
            raise NotFoundError(name, Namespace.USER)
        return user

    async def get_channel_id(self, name: str) -> str:
        return (await self.get_channel_by_name(name)).id

    async def get_group_id(self, name: str) -> str:
        return (await self.get_group_by_name(name)).id

    async def get_user_id(self, name: str) -> str:
        return (await self.get_user_by_name(name)).id

    async def open_direct_message(self, user_id: str) -> str:
        """Open (or reuse) the direct-message channel with a user ID."""
        self._require_login("open_direct_message")
        if self._cache is not None:
            cached = self._cache.get(_DM_BUCKET, user_id)
            if cached is not None:
                return cached
        channel_id = await self._api.open_direct_message(user_id)
        if self._cache is not None:
            self._cache.set(_DM_BUCKET, user_id, channel_id)
        return channel_id

    async def get_direct_message_channel_id(self, name: str) -> str:
        """Resolve a user name to the direct-message channel with them.

        Raises:
            NotFoundError: If the name is not a user.
            RemoteError: If the channel cannot be opened.
        """
        destination = await self.resolve(name, Namespace.USER)
        return destination.channel_id

    def invalidate_cache(self) -> None:
        if self._cache is not None:
            self._cache.invalidate()

    async def resolve(self, name: str, namespace: Namespace | None = None) -> Destination:
        """Resolve a name to a Destination.

        Args:
            name: Channel, group or user name.
            namespace: Namespace to resolve in. None tries channel, then
                group, then user, and returns the first match.

        Raises:
            NotFoundError: If the name does not resolve.
        """
        self._require_login("resolve")
        if namespace is None:
            return await resolve_first(self._priority, name)
        return await self._resolvers[namespace].resolve(name)

    # Message dispatch

    def _with_defaults(self, params: PostParams | None) -> PostParams:
        params = params or PostParams()
        if not params.as_user and params.username is None and self._config.name:
            params = replace(params, username=self._config.name)
        return params

    async def post_message(
        self,
        channel_id: str,
        text: str,
        params: PostParams | None = None,
    ) -> PostResponse:
        """Post a message to a channel ID.

        Unless the caller posts as the user or sets a username, the
        configured bot name is used as the username.

        Raises:
            RemoteError: If the post is rejected.
        """
        self._require_login("post_message")
        response = await self._api.post_message(
            channel_id, text, self._with_defaults(params)
        )
        logger.debug("Posted message %s to %s", response.ts, response.channel)
        return response

    async def send(
        self,
        destination: Destination,
        text: str,
        params: PostParams | None = None,
    ) -> PostResponse:
        """Post a message to an already resolved destination."""
        return await self.post_message(destination.channel_id, text, params)

    async def post_message_to_channel(
        self, name: str, text: str, params: PostParams | None = None
    ) -> PostResponse:
        destination = await self.resolve(name, Namespace.CHANNEL)
        return await self.send(destination, text, params)

    async def post_message_to_group(
        self, name: str, text: str, params: PostParams | None = None
    ) -> PostResponse:
        destination = await self.resolve(name, Namespace.GROUP)
        return await self.send(destination, text, params)

    async def post_message_to_user(
        self, name: str, text: str, params: PostParams | None = None
    ) -> PostResponse:
        """Post a direct message, opening the DM channel if needed."""
        destination = await self.resolve(name, Namespace.USER)
        return await self.send(destination, text, params)

    async def post_to(
        self, name: str, text: str, params: PostParams | None = None
    ) -> PostResponse:
        """Post to whatever ``name`` refers to.

        Channel beats group beats user when the name exists in several
        namespaces.

        Raises:
            NotFoundError: If the name exists in no namespace.
        """
        destination = await self.resolve(name)
        return await self.send(destination, text, params)
