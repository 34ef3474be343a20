# tagpages/domain/policies/quantile.py
from __future__ import annotations

from tagpages.domain.errors import ConfigurationError


def bucket(value: int, low: int, high: int, num_buckets: int = 5) -> int:
    """
    Map `value` inside the range [low, high] to a 1-based size class.

    The range is split into `num_buckets` classes; anything at or above
    `high` lands in the top class:

        bucket(1, 1, 10)  -> 1
        bucket(5, 1, 10)  -> 2
        bucket(10, 1, 10) -> 5

    A collapsed range (high <= low) puts everything in class 1.
    """
    if num_buckets < 1:
        raise ConfigurationError(f"number of buckets must be positive, got {num_buckets}")
    if high <= low:
        return 1
    if value >= high:
        return num_buckets
    klass = ((value - low) * (num_buckets - 1)) // (high - low) + 1
    return max(1, min(num_buckets, klass))
