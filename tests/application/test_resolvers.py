"""Tests for the name resolvers."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from slackbots.application.resolvers import (
    ChannelResolver,
    DirectMessageResolver,
    GroupResolver,
    resolve_first,
)
from slackbots.domain.entities import Channel, Destination, Group, Namespace, User
from slackbots.domain.exceptions import InvalidStateError, NotFoundError, RemoteError


class StubResolver:
    """Resolver returning a fixed destination or raising a fixed error."""

    def __init__(
        self,
        namespace: Namespace,
        result: Destination | None = None,
        error: Exception | None = None,
    ) -> None:
        self.namespace = namespace
        self._result = result
        self._error = error
        self.calls: list[str] = []

    async def resolve(self, name: str) -> Destination:
        self.calls.append(name)
        if self._error is not None:
            raise self._error
        if self._result is None:
            raise NotFoundError(name, self.namespace)
        return self._result


class TestNamespaceResolvers:
    """Tests for the per-namespace resolvers."""

    @pytest.fixture
    def directory(self) -> MagicMock:
        directory = MagicMock()
        directory.get_channel_by_name = AsyncMock(return_value=Channel(id="C1", name="ops"))
        directory.get_group_by_name = AsyncMock(return_value=Group(id="G1", name="ops"))
        directory.get_user_by_name = AsyncMock(return_value=User(id="U1", name="ops"))
        directory.open_direct_message = AsyncMock(return_value="D1")
        return directory

    async def test_channel(self, directory: MagicMock) -> None:
        assert await ChannelResolver(directory).resolve("ops") == Destination.channel(
            "ops", "C1"
        )

    async def test_group(self, directory: MagicMock) -> None:
        assert await GroupResolver(directory).resolve("ops") == Destination.group(
            "ops", "G1"
        )

    async def test_user_opens_direct_message(self, directory: MagicMock) -> None:
        destination = await DirectMessageResolver(directory).resolve("ops")

        assert destination == Destination.user("ops", "U1", "D1")
        directory.open_direct_message.assert_awaited_once_with("U1")

    async def test_not_found_propagates(self, directory: MagicMock) -> None:
        directory.get_group_by_name.side_effect = NotFoundError("x", Namespace.GROUP)

        with pytest.raises(NotFoundError):
            await GroupResolver(directory).resolve("x")


class TestResolveFirst:
    """Tests for resolve_first."""

    async def test_first_match_wins(self) -> None:
        channel = StubResolver(Namespace.CHANNEL, Destination.channel("ops", "C1"))
        group = StubResolver(Namespace.GROUP, Destination.group("ops", "G1"))

        destination = await resolve_first([channel, group], "ops")

        assert destination.id == "C1"
        assert group.calls == []

    async def test_falls_through_not_found(self) -> None:
        channel = StubResolver(Namespace.CHANNEL)
        group = StubResolver(Namespace.GROUP)
        user = StubResolver(Namespace.USER, Destination.user("ops", "U1", "D1"))

        destination = await resolve_first([channel, group, user], "ops")

        assert destination.namespace is Namespace.USER
        assert channel.calls == ["ops"]
        assert group.calls == ["ops"]

    async def test_remote_error_is_not_fatal(self) -> None:
        channel = StubResolver(
            Namespace.CHANNEL, error=RemoteError("ratelimited", "conversations.list")
        )
        group = StubResolver(Namespace.GROUP, Destination.group("ops", "G1"))

        destination = await resolve_first([channel, group], "ops")

        assert destination.id == "G1"

    async def test_all_fail(self) -> None:
        resolvers = [
            StubResolver(Namespace.CHANNEL),
            StubResolver(Namespace.GROUP, error=RemoteError("fatal_error", "conversations.list")),
            StubResolver(Namespace.USER),
        ]

        with pytest.raises(NotFoundError) as exc_info:
            await resolve_first(resolvers, "ops")

        assert exc_info.value.namespaces == (
            Namespace.CHANNEL,
            Namespace.GROUP,
            Namespace.USER,
        )

    async def test_other_errors_propagate(self) -> None:
        channel = StubResolver(
            Namespace.CHANNEL, error=InvalidStateError("resolve", "login()")
        )
        group = StubResolver(Namespace.GROUP, Destination.group("ops", "G1"))

        with pytest.raises(InvalidStateError):
            await resolve_first([channel, group], "ops")

        assert group.calls == []
