"""
Memoization of tokenized pointers.

Each Resolver owns one CompileCache. Entries are keyed by the pair
(pointer, delimiter) and hold the immutable token tuple, so that evaluating
the same pointer string repeatedly only tokenizes it once.

The cache is insert-once and never evicts: once `maxsize` entries exist,
further pointers are tokenized on every call but not stored. A lock guards
every read and write, which keeps concurrent evaluation from several threads
safe.
"""

from threading import Lock
from typing import Callable, Literal, Optional, Self

from docpointer.config.settings import appsettings
from docpointer.lib.log import LOG
from docpointer.lib.tokenizer import pointer_check
from docpointer.models.dataModel import UNSET, Sentinel

CacheKey = tuple[str, str]


class CompileCache:
    """Thread-safe, bounded, insert-once token cache."""

    def __init__(
        self: Self, maxsize: Optional[int] | Literal[Sentinel.UNSET] = UNSET
    ) -> None:
        """Initialize the cache.

        Args:
            maxsize: Maximum number of entries. None is unbounded, 0 disables
                caching. Defaults to `appsettings.cacheSize`.

        Raises:
            ValueError: If maxsize is negative
        """
        if maxsize is UNSET:
            maxsize = appsettings.cacheSize
        if maxsize is not None and maxsize < 0:
            raise ValueError("Cache maxsize cannot be negative")

        self.maxsize: Optional[int] = maxsize
        self.hits: int = 0
        self.misses: int = 0
        self._entries: dict[CacheKey, tuple[str, ...]] = {}
        self._lock: Lock = Lock()
        self._full_reported: bool = False

    def __len__(self: Self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self: Self, key: CacheKey) -> bool:
        with self._lock:
            return key in self._entries

    def get_or_tokenize(
        self: Self,
        pointer: str,
        delimiter: str,
        tokenizer: Callable[[str, str], list[str]],
    ) -> tuple[str, ...]:
        """Return the cached tokens for (pointer, delimiter), tokenizing on a miss.

        Tokenizer errors propagate and nothing is stored for that key.
        """
        pointer_check(pointer, delimiter)
        key: CacheKey = (pointer, delimiter)
        with self._lock:
            tokens = self._entries.get(key)
            if tokens is not None:
                self.hits += 1
                return tokens
            self.misses += 1

        tokens = tuple(tokenizer(pointer, delimiter))

        with self._lock:
            if key in self._entries:
                # another thread stored it first
                return self._entries[key]
            if self.maxsize is None or len(self._entries) < self.maxsize:
                self._entries[key] = tokens
            elif not self._full_reported and self.maxsize:
                self._full_reported = True
                LOG(f"Compile cache full at {self.maxsize} entries; no longer storing")
        return tokens

    def clear(self: Self) -> None:
        """Drop all entries and reset the counters."""
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0
            self._full_reported = False
