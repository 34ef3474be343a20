# tagpages/domain/policies/page_slicer.py
from __future__ import annotations

from typing import Sequence, Tuple, TypeVar

from tagpages.domain.errors import ConfigurationError, PageRangeError

T = TypeVar("T")


def _check_per_page(per_page: int) -> int:
    try:
        n = int(per_page)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"page size must be an integer, got {per_page!r}") from exc
    if n <= 0:
        raise ConfigurationError(f"page size must be positive, got {n}")
    return n


def total_pages(total_items: int, per_page: int) -> int:
    """Number of pages needed for `total_items` (ceil division; 0 items -> 0 pages)."""
    n = _check_per_page(per_page)
    if total_items <= 0:
        return 0
    return -(-total_items // n)


def page_bounds(total_items: int, page_number: int, per_page: int) -> Tuple[int, int]:
    """
    Half-open [start, stop) indices of `page_number` in a collection of
    `total_items`. Page 1 of an empty collection is valid and empty.
    """
    n = _check_per_page(per_page)
    last = max(1, total_pages(total_items, n))
    if page_number < 1 or page_number > last:
        raise PageRangeError(page_number, last)
    start = (page_number - 1) * n
    stop = min(start + n, total_items)
    return start, stop


def slice_page(items: Sequence[T], page_number: int, per_page: int) -> Tuple[T, ...]:
    """Contiguous run of `items` on `page_number`; the last page holds the remainder."""
    start, stop = page_bounds(len(items), page_number, per_page)
    return tuple(items[start:stop])
