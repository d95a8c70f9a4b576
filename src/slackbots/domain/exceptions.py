"""Domain exceptions."""

from slackbots.domain.entities.destination import Namespace


class SlackBotError(Exception):
    """Base exception for client errors."""


class InvalidStateError(SlackBotError):
    """Operation attempted before the required lifecycle stage.

    Raised for lookups and posts issued before login(), and for
    connect() before login().
    """

    def __init__(self, operation: str, required: str) -> None:
        self.operation = operation
        self.required = required
        super().__init__(f"{operation} requires {required}")


class AuthenticationError(SlackBotError):
    """The configured credential was rejected."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Authentication failed: {code}")


class ConnectionFailedError(SlackBotError):
    """The real-time transport could not be opened."""


class RemoteError(SlackBotError):
    """The remote API returned a non-ok response or could not be reached.

    Attributes:
        code: Server error code (e.g. "channel_not_found").
        operation: Operation that failed, with its target.
    """

    def __init__(self, code: str, operation: str) -> None:
        self.code = code
        self.operation = operation
        super().__init__(f"{operation} failed: {code}")


class NotFoundError(SlackBotError):
    """A name did not resolve within the queried namespace(s).

    Attributes:
        name: Name that was looked up.
        namespaces: Namespaces that were searched, in order.
    """

    def __init__(self, name: str, *namespaces: Namespace) -> None:
        self.name = name
        self.namespaces = namespaces
        searched = ", ".join(ns.value for ns in namespaces)
        super().__init__(f"No {searched} named {name!r}")

    @property
    def namespace(self) -> Namespace:
        """The first (or only) namespace searched."""
        return self.namespaces[0]
