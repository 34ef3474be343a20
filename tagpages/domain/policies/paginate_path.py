# tagpages/domain/policies/paginate_path.py
from __future__ import annotations

import posixpath
from pathlib import PurePosixPath
from typing import Iterable, Optional

from tagpages.domain.entities.output_page import OutputPage
from tagpages.domain.errors import ConfigurationError

PLACEHOLDER = ":num:"


def ensure_leading_slash(path: str) -> str:
    return path if path.startswith("/") else f"/{path}"


def remove_leading_slash(path: str) -> str:
    return ensure_leading_slash(path)[1:]


def resolve(template: str, page_number: Optional[int], first_page_url: Optional[str]) -> Optional[str]:
    """
    Output path of page `page_number` in a paginated series.

    Page 1 is never numbered: it is the template page itself, so its URL is
    returned verbatim (None when no template page exists). Later pages
    substitute the page number into `template`:

        resolve("/tags/page:num:/", 3, "/tags/") -> "/tags/page3/"
    """
    if page_number is None:
        return None
    if page_number <= 1:
        return first_page_url
    if PLACEHOLDER not in template:
        raise ConfigurationError(f"Invalid pagination path: '{template}'. It must include '{PLACEHOLDER}'.")
    return ensure_leading_slash(template.replace(PLACEHOLDER, str(page_number), 1))


def _abs(source: str, rel: str) -> PurePosixPath:
    return PurePosixPath(posixpath.normpath(posixpath.join(posixpath.abspath(source), remove_leading_slash(rel))))


def in_hierarchy(source: str, page_dir: PurePosixPath, paginate_dir: PurePosixPath) -> bool:
    """
    True if `page_dir` is `paginate_dir` or one of its ancestors, without
    climbing above `source`. Walks at most one step per path component.
    """
    stop = PurePosixPath(posixpath.abspath(source)).parent
    cur = paginate_dir
    for _ in range(len(paginate_dir.parts) + 1):
        if cur == cur.parent or cur == stop:
            return False
        if cur == page_dir:
            return True
        cur = cur.parent
    return False


def is_pagination_candidate(
    page: OutputPage,
    source: str,
    paginate_path: str,
    index_filename: str = "index.html",
) -> bool:
    """A page can head the series if it is an index file on the paginate path's directory chain."""
    if page.name != index_filename:
        return False
    page_dir = _abs(source, page.path).parent
    paginate_dir = _abs(source, paginate_path).parent
    return in_hierarchy(source, page_dir, paginate_dir)


def find_template_page(
    pages: Iterable[OutputPage],
    source: str,
    paginate_path: str,
    index_filename: str = "index.html",
) -> Optional[OutputPage]:
    """
    The existing page that acts as page 1 of the tag index. The deepest
    matching page wins; None means pagination stays inactive.
    """
    candidates = [p for p in pages if is_pagination_candidate(p, source, paginate_path, index_filename)]
    if not candidates:
        return None
    return max(candidates, key=lambda p: len(p.path))
