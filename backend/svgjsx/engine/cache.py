"""Optimization result cache — LRU keyed by a SHA-256 of content + options.

Owned by the application (created in the app factory, reached through a
dependency), never a module global. All operations take the lock: a lookup
reorders the LRU list, so reads mutate too.
"""

from __future__ import annotations

import hashlib
import json
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from threading import Lock
from typing import Any, Generic, TypeVar

from svgjsx.models.optimization import OptimizationResult

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


def generate_cache_key(content: str, options: dict[str, Any] | None = None) -> str:
    """Stable key: trimmed content and compact, key-sorted JSON options."""
    normalized_options = json.dumps(options or {}, sort_keys=True, separators=(",", ":"))
    data = f"{content.strip()}|{normalized_options}"
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


class LRUCache(Generic[K, V]):
    """Bounded mapping that evicts the least recently used entry on overflow."""

    def __init__(self, max_size: int = 1000) -> None:
        if max_size < 1:
            raise ValueError("max_size must be >= 1")
        self.max_size = max_size
        self._lock = Lock()
        self._data: OrderedDict[K, V] = OrderedDict()

    def get(self, key: K) -> V | None:
        with self._lock:
            if key not in self._data:
                return None
            self._data.move_to_end(key)
            return self._data[key]

    def set(self, key: K, value: V) -> None:
        with self._lock:
            if key in self._data:
                self._data.move_to_end(key)
            self._data[key] = value
            while len(self._data) > self.max_size:
                evicted, _ = self._data.popitem(last=False)
                logger.debug("Evicted cache entry %s", str(evicted)[:12])

    def has(self, key: K) -> bool:
        with self._lock:
            return key in self._data

    def delete(self, key: K) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def keys(self) -> list[K]:
        """Keys from least to most recently used."""
        with self._lock:
            return list(self._data)

    def __len__(self) -> int:
        return len(self._data)


@dataclass(frozen=True)
class CacheEntry:
    result: OptimizationResult
    timestamp: float


@dataclass(frozen=True)
class CacheStats:
    hits: int
    misses: int
    size: int
    max_size: int
    hit_rate: str


class OptimizationCache:
    """Hit/miss-counting LRU cache of optimization results."""

    def __init__(self, max_size: int = 1000) -> None:
        self._cache: LRUCache[str, CacheEntry] = LRUCache(max_size)
        self._stats_lock = Lock()
        self.hits = 0
        self.misses = 0

    def get(self, content: str, options: dict[str, Any] | None = None) -> CacheEntry | None:
        entry = self._cache.get(generate_cache_key(content, options))
        with self._stats_lock:
            if entry is None:
                self.misses += 1
            else:
                self.hits += 1
        return entry

    def set(self, content: str, options: dict[str, Any] | None, result: OptimizationResult) -> None:
        self._cache.set(generate_cache_key(content, options), CacheEntry(result=result, timestamp=time.time()))

    def has(self, content: str, options: dict[str, Any] | None = None) -> bool:
        return self._cache.has(generate_cache_key(content, options))

    def clear(self) -> None:
        self._cache.clear()
        self.reset_stats()
        logger.info("Optimization cache cleared")

    def reset_stats(self) -> None:
        with self._stats_lock:
            self.hits = 0
            self.misses = 0

    def stats(self) -> CacheStats:
        with self._stats_lock:
            hits, misses = self.hits, self.misses
        total = hits + misses
        hit_rate = hits / total * 100 if total else 0.0
        return CacheStats(
            hits=hits,
            misses=misses,
            size=len(self._cache),
            max_size=self._cache.max_size,
            hit_rate=f"{hit_rate:.1f}%",
        )
