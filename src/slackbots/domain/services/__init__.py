"""Domain service protocols."""

from slackbots.domain.services.protocols import (
    DirectoryApi,
    EventListener,
    RealtimeTransport,
)

__all__ = ["DirectoryApi", "EventListener", "RealtimeTransport"]
