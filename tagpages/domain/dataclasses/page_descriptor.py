from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from tagpages.domain.entities.post import PostRef
from tagpages.domain.types import TagEntry


@dataclass(frozen=True)
class PageDescriptor:
    """
    One page of the paginated tag index, ready for template binding.
    Built by tagpages.domain.policies.pager.build_page() and never mutated.

    previous_page is None on page 1, next_page is None on the last page.
    """
    page: int
    per_page: int
    items: Tuple[TagEntry, ...]
    total_items: int
    total_pages: int
    previous_page: Optional[int] = None
    previous_page_path: Optional[str] = None
    next_page: Optional[int] = None
    next_page_path: Optional[str] = None

    @property
    def tags(self) -> Dict[str, Tuple[PostRef, ...]]:
        return dict(self.items)

    @property
    def is_first(self) -> bool:
        return self.previous_page is None

    @property
    def is_last(self) -> bool:
        return self.next_page is None
