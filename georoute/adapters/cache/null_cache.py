"""No-op cache for testing and for disabling caching."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class NullCache(Generic[T]):
    """Cache that never stores anything; every lookup misses."""

    name: str = "null"

    def get(self, key: str) -> Optional[T]:
        return None

    def set(self, key: str, value: T) -> None:
        pass

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        return compute_fn()

    def clear(self) -> int:
        return 0

    def invalidate(self, key: str) -> bool:
        return False

    def size(self) -> int:
        return 0
