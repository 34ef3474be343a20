# tagpages/domain/policies/pager.py
from __future__ import annotations

from typing import Optional

from tagpages.domain.dataclasses.page_descriptor import PageDescriptor
from tagpages.domain.errors import PageRangeError
from tagpages.domain.policies import paginate_path
from tagpages.domain.policies.page_slicer import slice_page, total_pages as calculate_pages
from tagpages.domain.types import TagAssociations


def build_page(
    associations: TagAssociations,
    page_number: int,
    per_page: int,
    total_pages: Optional[int] = None,
    path_template: str = "/tags/page:num:/",
    first_page_url: Optional[str] = None,
) -> PageDescriptor:
    """
    Build the descriptor for one page of the tag index.

    `total_pages` may be passed when the caller already computed it for the
    whole series; otherwise it is derived from the association count. An
    empty table still has one (empty) page.
    """
    rows = tuple(associations.items())
    needed = max(1, calculate_pages(len(rows), per_page))
    if total_pages is None:
        total_pages = needed

    if page_number < 1 or page_number > total_pages:
        raise PageRangeError(page_number, total_pages)

    # an overridden total may run past the data; those pages are empty
    items = slice_page(rows, page_number, per_page) if page_number <= needed else ()

    previous_page = page_number - 1 if page_number > 1 else None
    next_page = page_number + 1 if page_number < total_pages else None

    return PageDescriptor(
        page=page_number,
        per_page=int(per_page),
        items=items,
        total_items=len(rows),
        total_pages=total_pages,
        previous_page=previous_page,
        previous_page_path=paginate_path.resolve(path_template, previous_page, first_page_url),
        next_page=next_page,
        next_page_path=paginate_path.resolve(path_template, next_page, first_page_url),
    )
