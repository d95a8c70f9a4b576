"""FIFO queue of received events."""

import asyncio
import logging

from slackbots.domain.entities import Event

logger = logging.getLogger(__name__)


class EventQueue:
    """Unbounded in-memory queue preserving arrival order.

    Events are delivered at most once: anything still queued when
    clear() is called is dropped.
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue[Event] = asyncio.Queue()

    async def enqueue(self, event: Event) -> None:
        """Add an event to the end of the queue.

        Never suspends, so events enqueued from concurrently scheduled
        tasks keep the order in which those tasks started.
        """
        self._queue.put_nowait(event)

    async def dequeue(self) -> Event:
        """Wait for and return the oldest event."""
        return await self._queue.get()

    def mark_done(self) -> None:
        """Record that the last dequeued event has been handled."""
        self._queue.task_done()

    def clear(self) -> None:
        """Drop every queued event."""
        dropped = 0
        while True:
            try:
                self._queue.get_nowait()
            except asyncio.QueueEmpty:
                break
            self._queue.task_done()
            dropped += 1
        if dropped:
            logger.info("EventQueue cleared, dropped %d events", dropped)

    def __len__(self) -> int:
        return self._queue.qsize()
