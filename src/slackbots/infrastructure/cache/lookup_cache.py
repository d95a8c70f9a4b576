"""In-memory read-through cache for directory lookups."""

import logging
import time
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class LookupCache:
    """Point-in-time snapshots keyed by (bucket, key).

    Buckets separate namespaces ("channel", "group", "user") and derived
    lookups such as direct-message channel IDs. Concurrent writers race
    benignly: the last write wins.
    """

    def __init__(
        self,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            ttl_seconds: Entry lifetime. None keeps entries until invalidated.
            clock: Monotonic time source.
        """
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[tuple[str, str], tuple[float, Any]] = {}

    def get(self, bucket: str, key: str) -> Any | None:
        entry = self._entries.get((bucket, key))
        if entry is None:
            return None
        stored_at, value = entry
        if self._ttl is not None and self._clock() - stored_at >= self._ttl:
            self._entries.pop((bucket, key), None)
            return None
        return value

    def set(self, bucket: str, key: str, value: Any) -> None:
        self._entries[(bucket, key)] = (self._clock(), value)

    def replace_bucket(self, bucket: str, values: dict[str, Any]) -> None:
        """Replace every entry in a bucket with a fresh snapshot."""
        now = self._clock()
        self._entries = {k: v for k, v in self._entries.items() if k[0] != bucket}
        for key, value in values.items():
            self._entries[(bucket, key)] = (now, value)

    def invalidate(self, bucket: str | None = None) -> None:
        """Drop one bucket, or everything when bucket is None."""
        if bucket is None:
            self._entries.clear()
        else:
            self._entries = {k: v for k, v in self._entries.items() if k[0] != bucket}
        logger.debug("Lookup cache invalidated: %s", bucket or "all")

    def __len__(self) -> int:
        return len(self._entries)
