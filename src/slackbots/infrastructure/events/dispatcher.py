"""Event dispatcher."""

import logging

from slackbots.domain.entities import Event
from slackbots.domain.services import EventListener

logger = logging.getLogger(__name__)


class EventDispatcher:
    """Dispatches events to registered handlers.

    A handler registered without an event type receives every event.
    Handlers run one after another in registration order.
    """

    def __init__(self) -> None:
        self._handlers: list[tuple[str | None, EventListener]] = []

    def register(self, handler: EventListener, event_type: str | None = None) -> None:
        """Register a handler.

        Args:
            handler: Coroutine function taking an Event.
            event_type: Only deliver events of this type (e.g. "message").
                None delivers every event.
        """
        self._handlers.append((event_type, handler))
        logger.debug(
            "Registered handler for %s: %s",
            event_type or "*",
            getattr(handler, "__name__", str(handler)),
        )

    def unregister(self, handler: EventListener) -> None:
        self._handlers = [(t, h) for t, h in self._handlers if h is not handler]

    async def dispatch(self, event: Event) -> None:
        """Dispatch an event to every matching handler.

        A failing handler is logged and does not prevent the others
        from running.
        """
        for event_type, handler in self._handlers:
            if event_type is not None and event_type != event.type:
                continue
            try:
                await handler(event)
            except Exception:
                logger.exception(
                    "Error in event handler %s for event %s",
                    getattr(handler, "__name__", str(handler)),
                    event.type,
                )
