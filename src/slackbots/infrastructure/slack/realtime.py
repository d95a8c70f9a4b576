"""Socket Mode implementation of RealtimeTransport."""

import logging

import aiohttp
from slack_sdk.errors import SlackClientError
from slack_sdk.socket_mode.aiohttp import SocketModeClient
from slack_sdk.socket_mode.request import SocketModeRequest
from slack_sdk.socket_mode.response import SocketModeResponse
from slack_sdk.web.async_client import AsyncWebClient

from slackbots.domain.exceptions import ConnectionFailedError
from slackbots.domain.services import EventListener
from slackbots.infrastructure.slack.converters import to_event

logger = logging.getLogger(__name__)


class SlackSocketModeTransport:
    """Deliver Events API payloads received over Socket Mode.

    Every envelope is acknowledged. Only ``events_api`` envelopes are
    converted and forwarded; interactive and slash-command envelopes are
    acknowledged and dropped.
    """

    def __init__(self, app_token: str, web_client: AsyncWebClient) -> None:
        """Initialize the transport.

        Args:
            app_token: App-Level Token for Socket Mode.
            web_client: Web client used by Socket Mode to open connections.
        """
        self._app_token = app_token
        self._web_client = web_client
        self._client: SocketModeClient | None = None
        self._listener: EventListener | None = None

    async def connect(self, listener: EventListener) -> None:
        """Open the Socket Mode connection.

        Raises:
            ConnectionFailedError: If the connection cannot be opened.
        """
        self._listener = listener
        client = SocketModeClient(
            app_token=self._app_token,
            web_client=self._web_client,
        )
        client.socket_mode_request_listeners.append(self._on_request)
        try:
            await client.connect()
        except (SlackClientError, aiohttp.ClientError, OSError) as e:
            await client.close()
            raise ConnectionFailedError(f"Socket Mode connection failed: {e}") from e
        self._client = client
        logger.info("Socket Mode connection opened")

    async def close(self) -> None:
        if self._client is None:
            return
        await self._client.close()
        self._client = None
        logger.info("Socket Mode connection closed")

    async def _on_request(
        self, client: SocketModeClient, request: SocketModeRequest
    ) -> None:
        # Forward before acknowledging so events keep arrival order
        if request.type == "events_api" and self._listener is not None:
            data = (request.payload or {}).get("event")
            if data:
                await self._listener(to_event(data))
        await client.send_socket_mode_response(
            SocketModeResponse(envelope_id=request.envelope_id)
        )
