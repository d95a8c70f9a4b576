"""Lookup caching."""

from slackbots.infrastructure.cache.lookup_cache import LookupCache

__all__ = ["LookupCache"]
