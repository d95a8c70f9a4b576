"""Slack Web API implementation of DirectoryApi."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import aiohttp
from slack_sdk.errors import SlackApiError, SlackClientError
from slack_sdk.web.async_client import AsyncWebClient

from slackbots.domain.entities import (
    Channel,
    Group,
    PostParams,
    PostResponse,
    Session,
    User,
)
from slackbots.domain.exceptions import AuthenticationError, RemoteError
from slackbots.infrastructure.slack.converters import (
    to_channel,
    to_group,
    to_message,
    to_session,
    to_user,
)

logger = logging.getLogger(__name__)

# Error codes that mean the token itself was rejected
_AUTHENTICATION_ERRORS = frozenset(
    {
        "invalid_auth",
        "not_authed",
        "account_inactive",
        "token_revoked",
        "token_expired",
    }
)

# Code reported when the request never produced an API response
REQUEST_FAILED = "request_failed"


def _error_code(e: SlackApiError) -> str:
    response = e.response
    code = response.get("error", "") if response is not None else ""
    return code or "unknown_error"


class SlackDirectoryApi:
    """Slack implementation of the DirectoryApi protocol.

    Channels and groups are both read with conversations.list, split by
    conversation type. Listings follow cursor pagination to the end.
    """

    def __init__(self, client: AsyncWebClient, page_size: int = 200) -> None:
        """Initialize the API.

        Args:
            client: Slack AsyncWebClient instance.
            page_size: Items requested per page on listing calls.
        """
        self._client = client
        self._page_size = page_size

    async def _call(
        self,
        operation: str,
        method: Callable[..., Awaitable[Any]],
        **kwargs: Any,
    ) -> Any:
        """Invoke a Web API method, translating failures to RemoteError."""
        try:
            return await method(**kwargs)
        except SlackApiError as e:
            raise RemoteError(_error_code(e), operation) from e
        except (SlackClientError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("%s failed: %s", operation, e)
            raise RemoteError(REQUEST_FAILED, operation) from e

    async def _paginate(
        self,
        operation: str,
        method: Callable[..., Awaitable[Any]],
        key: str,
        **kwargs: Any,
    ) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        cursor: str | None = None
        while True:
            if cursor:
                kwargs["cursor"] = cursor
            response = await self._call(
                operation, method, limit=self._page_size, **kwargs
            )
            items.extend(response.get(key, []))
            cursor = (response.get("response_metadata") or {}).get("next_cursor")
            if not cursor:
                return items

    async def auth_test(self) -> Session:
        """Verify the bot token.

        Raises:
            AuthenticationError: If the token is rejected.
            RemoteError: If the call fails for another reason.
        """
        try:
            response = await self._call("auth.test", self._client.auth_test)
        except RemoteError as e:
            if e.code in _AUTHENTICATION_ERRORS:
                raise AuthenticationError(e.code) from e
            raise
        return to_session(response)

    async def list_channels(self) -> list[Channel]:
        data = await self._paginate(
            "conversations.list",
            self._client.conversations_list,
            "channels",
            types="public_channel",
        )
        return [to_channel(item) for item in data]

    async def list_groups(self) -> list[Group]:
        data = await self._paginate(
            "conversations.list",
            self._client.conversations_list,
            "channels",
            types="private_channel",
        )
        return [to_group(item) for item in data]

    async def list_users(self) -> list[User]:
        data = await self._paginate(
            "users.list", self._client.users_list, "members"
        )
        return [to_user(item) for item in data]

    async def open_direct_message(self, user_id: str) -> str:
        """Open the direct-message channel with a user.

        Slack returns the existing channel when one is already open.
        """
        response = await self._call(
            f"conversations.open({user_id})",
            self._client.conversations_open,
            users=user_id,
        )
        return response["channel"]["id"]

    async def post_message(
        self,
        channel_id: str,
        text: str,
        params: PostParams | None = None,
    ) -> PostResponse:
        """Post a message with chat.postMessage.

        Raises:
            RemoteError: If the post is rejected (including is_archived,
                not_in_channel and channel_not_found).
        """
        payload = params.to_payload() if params is not None else {}
        response = await self._call(
            f"chat.postMessage({channel_id})",
            self._client.chat_postMessage,
            channel=channel_id,
            text=text,
            **payload,
        )
        channel = response.get("channel", channel_id)
        return PostResponse(
            ok=response.get("ok", True),
            ts=response.get("ts", ""),
            channel=channel,
            message=to_message(response.get("message") or {"text": text}, channel),
        )
