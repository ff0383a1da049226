#!/usr/bin/env python3
"""Expiring in-memory cache for location search results"""

import threading
import time
import logging
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 10 * 60


class ExpiringCache:
    """Key -> value store with a fixed per-entry TTL.

    Expired entries are removed lazily when read; there is no background sweep
    and no size limit, so growth is bounded only by key cardinality.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None if absent or expired"""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                logger.debug(f"Cache miss: {key}")
                return None
            if self._clock() >= entry["expires_at"]:
                del self._entries[key]
                logger.debug(f"Cache expired: {key}")
                return None
            logger.debug(f"Cache hit: {key}")
            return entry["data"]

    def set(self, key: str, value: Any) -> None:
        """Store value under key, overwriting and restarting its TTL"""
        now = self._clock()
        with self._lock:
            self._entries[key] = {
                "data": value,
                "timestamp": now,
                "expires_at": now + self.ttl_seconds,
            }

    def clear(self) -> None:
        """Drop every entry"""
        with self._lock:
            self._entries.clear()
        logger.info("Location search cache cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get_cache_stats(self) -> Dict[str, Any]:
        """Entry counts without evicting anything"""
        now = self._clock()
        with self._lock:
            active_entries = sum(1 for e in self._entries.values() if now < e["expires_at"])
            total_entries = len(self._entries)

        return {
            "total_entries": total_entries,
            "active_entries": active_entries,
            "expired_entries": total_entries - active_entries,
            "ttl_seconds": self.ttl_seconds,
        }
