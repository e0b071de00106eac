# SPDX-License-Identifier: GPL-3.0-only
"""
Three ways of computing Fibonacci numbers.

F(0) = 0, F(1) = 1 and F(n) = F(n-1) + F(n-2). All implementations take an integer index and
return a float, trading exactness for range once values outgrow 2**53.
"""

import logging
from typing import Optional

from fibcompare.core.config import get_config
from fibcompare.core.errors import NegativeIndex

log = logging.getLogger(__name__)

# returned by fib_recursive_cache when n is past the cache capacity
OUT_OF_RANGE = -1.0
# a cold cache is filled in steps of this many indices to keep the recursion shallow
RECURSION_STEP = 256

_default_cache: Optional["FibCache"] = None


class FibCache:
    """Fixed-capacity store of already computed Fibonacci numbers, indexed by n."""

    def __init__(self, capacity: int) -> None:
        """Initialize FibCache.

        :param capacity: highest index that can be stored
        """
        if capacity < 0:
            raise ValueError(f"cache capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._slots: list[float | None] = [None] * (capacity + 1)
        self.hits = 0
        self.misses = 0

    def __contains__(self, n: int) -> bool:
        return 0 <= n <= self.capacity and self._slots[n] is not None

    def __len__(self) -> int:
        return sum(1 for value in self._slots if value is not None)

    def get(self, n: int) -> float | None:
        """Return the stored F(n), or None if it was not computed yet."""
        value = self._slots[n]
        if value is None:
            self.misses += 1
        else:
            self.hits += 1
        return value

    def put(self, n: int, value: float) -> None:
        self._slots[n] = value


def get_default_cache() -> FibCache:
    """Get the process-wide cache, creating it with the configured capacity on first use."""
    global _default_cache

    if _default_cache is None:
        capacity = get_config().cache_capacity
        log.debug("Creating Fibonacci cache with capacity %d", capacity)
        _default_cache = FibCache(capacity)

    return _default_cache


def _check_index(n: int) -> None:
    if n < 0:
        raise NegativeIndex(n)


def fib_recursive(n: int) -> float:
    """
    Compute F(n) by calling itself for F(n-1) and F(n-2).

    Nothing is remembered between calls, so the number of calls grows like phi**n while the
    call depth only grows linearly. Fine up to n of about 40.

    :raise NegativeIndex: if n < 0
    """
    _check_index(n)
    return _fib_recursive(n)


def _fib_recursive(n: int) -> float:
    if n < 2:
        return float(n)
    return _fib_recursive(n - 1) + _fib_recursive(n - 2)


def fib_recursive_cache(n: int, cache: FibCache | None = None) -> float:
    """
    Compute F(n) recursively, looking up and storing every intermediate result in a cache.

    Each index is computed at most once per cache, repeated calls are O(1). The recursion depth
    is bounded by about RECURSION_STEP frames however large the capacity is.

    :param n: index into the sequence
    :param cache: cache to use, the process-wide one when omitted
    :return: F(n), or OUT_OF_RANGE if n is greater than the cache capacity
    :raise NegativeIndex: if n < 0
    """
    _check_index(n)
    if cache is None:
        cache = get_default_cache()

    if n > cache.capacity:
        log.error("n greater than %d", cache.capacity)
        return OUT_OF_RANGE

    for step in range(RECURSION_STEP, n, RECURSION_STEP):
        if step not in cache:
            _fib_recursive_cache(step, cache)
    return _fib_recursive_cache(n, cache)


def _fib_recursive_cache(n: int, cache: FibCache) -> float:
    if n < 2:
        return float(n)

    value = cache.get(n)
    if value is not None:
        return value

    value = _fib_recursive_cache(n - 1, cache) + _fib_recursive_cache(n - 2, cache)
    cache.put(n, value)
    return value


def fib_iter(n: int) -> float:
    """
    Compute F(n) with a loop carrying the two previous values.

    O(n) time, constant space, no recursion. There is no upper limit on n, but results stop
    being exact integers past F(78).

    :raise NegativeIndex: if n < 0
    """
    _check_index(n)
    if n < 2:
        return float(n)

    n2, n1 = 0.0, 1.0
    for _ in range(2, n + 1):
        n2, n1 = n1, n1 + n2
    return n1
