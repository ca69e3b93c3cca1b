"""Cache port - Injectable caching abstraction."""

from __future__ import annotations

from typing import Callable, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache) - Production
    - adapters/cache/null_cache.py (NullCache) - Testing
    """

    def get(self, key: str) -> Optional[T]:
        """Return the cached value, or None if absent."""
        ...

    def set(self, key: str, value: T) -> None:
        ...

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        Args:
            key: The cache key.
            compute_fn: Function to compute the value if not cached.

        Returns:
            The cached or computed value.
        """
        ...

    def clear(self) -> int:
        """Clear all entries and return how many were removed."""
        ...

    def invalidate(self, key: str) -> bool:
        ...

    def size(self) -> int:
        ...
