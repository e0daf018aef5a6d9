"""
Disk-based caching for rarely changing lookup lists.

Companies, categories and the list of years with letters are fetched
for every filter panel render; caching them on disk with a short TTL
keeps the panel snappy. Uses the diskcache library, which is
thread-safe and process-safe.
"""

from pathlib import Path
from typing import Callable, TypeVar

import diskcache

from surat_ui.lib import logs

LOG = logs.logger(__file__)

T = TypeVar("T")


class DiskCache:
    """
    Disk-based cache with TTL support.

    Attributes:
        cache_dir: Path to the cache directory.
    """

    def __init__(self, cache_dir: str | Path) -> None:
        """
        Initialize the disk cache.

        Args:
            cache_dir: Directory path for storing cache files.
                       Created if it doesn't exist.
        """
        self.cache_dir = Path(cache_dir)
        self._cache = diskcache.Cache(str(self.cache_dir))

    def get_or_load(
        self,
        key: str,
        loader: Callable[[], T],
        expire: int | None = None,
        keep: Callable[[T], bool] | None = None,
    ) -> T:
        """
        Return the cached value for key, or load and store it.

        Args:
            key: Cache key string.
            loader: Function to call on a cache miss (no arguments).
            expire: TTL in seconds. None means no expiration.
            keep: Optional predicate; a loaded value is only stored when
                  it returns True (failed responses are not cached).

        Returns:
            The cached or freshly loaded value.
        """
        cached = self._cache.get(key, default=None)
        if cached is not None:
            LOG.debug("Cache hit: %s", key[:12])
            return cached

        value = loader()
        if value is not None and (keep is None or keep(value)):
            self._cache.set(key, value, expire=expire)
        return value

    def get(self, key: str) -> T | None:
        """Return the cached value for key, or None."""
        return self._cache.get(key, default=None)

    def set(self, key: str, value: T, expire: int | None = None) -> None:
        """Store a value, optionally expiring after expire seconds."""
        self._cache.set(key, value, expire=expire)

    def delete(self, key: str) -> None:
        """Delete a key from cache."""
        self._cache.delete(key)

    def clear(self) -> None:
        """Clear all entries from the cache."""
        count = self._cache.clear()
        LOG.info("Cleared %s cached lookup entries", count)

    def close(self) -> None:
        """Close the cache and release resources."""
        self._cache.close()
