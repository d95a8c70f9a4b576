"""Domain service protocols."""

from collections.abc import Awaitable, Callable
from typing import Protocol

from slackbots.domain.entities import (
    Channel,
    Event,
    Group,
    PostParams,
    PostResponse,
    Session,
    User,
)

# Called once per received event, in arrival order
EventListener = Callable[[Event], Awaitable[None]]


class DirectoryApi(Protocol):
    """Remote directory and messaging API.

    Implementations raise RemoteError for non-ok responses and
    AuthenticationError when the credential is rejected.
    """

    async def auth_test(self) -> Session:
        """Verify the credential and return the bot identity."""
        ...

    async def list_channels(self) -> list[Channel]:
        """Fetch every public channel, in server order."""
        ...

    async def list_groups(self) -> list[Group]:
        """Fetch every private group visible to the bot, in server order."""
        ...

    async def list_users(self) -> list[User]:
        """Fetch every workspace member, in server order."""
        ...

    async def open_direct_message(self, user_id: str) -> str:
        """Open (or fetch) the direct-message channel with a user.

        Returns:
            The direct-message channel ID.
        """
        ...

    async def post_message(
        self,
        channel_id: str,
        text: str,
        params: PostParams | None = None,
    ) -> PostResponse:
        """Post a message to a channel ID."""
        ...


class RealtimeTransport(Protocol):
    """Persistent connection delivering real-time events."""

    async def connect(self, listener: EventListener) -> None:
        """Open the connection and start delivering events to ``listener``.

        Raises:
            ConnectionFailedError: If the connection cannot be opened.
        """
        ...

    async def close(self) -> None:
        """Close the connection."""
        ...
