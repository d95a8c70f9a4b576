"""Sequential delivery of queued events to handlers."""

import logging

from slackbots.infrastructure.events.dispatcher import EventDispatcher
from slackbots.infrastructure.events.queue import EventQueue

logger = logging.getLogger(__name__)


class EventLoop:
    """Deliver queued events one at a time, in arrival order.

    run() is meant to be the body of a task owned by the connection; it
    ends when that task is cancelled. Events still queued at that point
    are dropped.
    """

    def __init__(self, queue: EventQueue, dispatcher: EventDispatcher) -> None:
        self._queue = queue
        self._dispatcher = dispatcher
        self._running = False

    async def run(self) -> None:
        """Dispatch events until cancelled.

        A second concurrent run() returns immediately.
        """
        if self._running:
            logger.warning("EventLoop already running")
            return

        self._running = True
        logger.info("EventLoop started")
        try:
            while True:
                event = await self._queue.dequeue()
                logger.debug("Processing event: %s", event.type)
                try:
                    await self._dispatcher.dispatch(event)
                finally:
                    self._queue.mark_done()
        finally:
            self._running = False
            self._queue.clear()
            logger.info("EventLoop stopped")

    @property
    def is_running(self) -> bool:
        return self._running
