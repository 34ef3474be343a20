# tagpages/services/mappers/paginator.py
from __future__ import annotations

from typing import Any, Dict

from tagpages.domain.dataclasses.page_descriptor import PageDescriptor
from tagpages.services.schemas.paginator import PaginatorRead, PostRead


def to_read_schema(desc: PageDescriptor) -> PaginatorRead:
    return PaginatorRead(
        page=desc.page,
        per_page=desc.per_page,
        tags={
            tag: [PostRead.model_validate(p) for p in posts]
            for tag, posts in desc.items
        },
        total_tags=desc.total_items,
        total_pages=desc.total_pages,
        previous_page=desc.previous_page,
        previous_page_path=desc.previous_page_path,
        next_page=desc.next_page,
        next_page_path=desc.next_page_path,
    )

def to_liquid(desc: PageDescriptor) -> Dict[str, Any]:
    """Plain dict for template engines (keys match the paginator hash)."""
    return to_read_schema(desc).model_dump()
