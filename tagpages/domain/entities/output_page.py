# tagpages/domain/entities/output_page.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from tagpages.domain.dataclasses.page_descriptor import PageDescriptor


def _normalize_dir(d: str) -> str:
    d = d or ""
    d = "/" + d.strip("/")
    return d if d == "/" else d + "/"


@dataclass(frozen=True)
class OutputPage:
    """
    A page in the site's output, either already materialized by the build
    or produced by the tagging step.

        dir  "/tag/ruby/"   name "index.html"  ->  path "tag/ruby/index.html"
                                                   url  "/tag/ruby/"
        dir  "/tag/"        name "ruby.html"   ->  path "tag/ruby.html"
                                                   url  "/tag/ruby.html"
    """
    dir: str
    name: str
    data: Dict[str, Any] = field(default_factory=dict)
    pager: Optional[PageDescriptor] = None
    index_filename: str = "index.html"

    def __post_init__(self):
        if not self.name or not str(self.name).strip():
            raise ValueError("OutputPage requires a file name")
        object.__setattr__(self, "dir", _normalize_dir(self.dir))

    @property
    def path(self) -> str:
        """Source-relative path, no leading slash."""
        return f"{self.dir}{self.name}".lstrip("/")

    @property
    def url(self) -> str:
        if self.name == self.index_filename:
            return self.dir
        return f"{self.dir}{self.name}"

    def with_pager(self, pager: PageDescriptor) -> "OutputPage":
        return replace(self, pager=pager)

    def moved_to(self, new_dir: str, pager: PageDescriptor) -> "OutputPage":
        """Copy of this page placed under another directory (page 2..N of a series)."""
        return replace(self, dir=new_dir, data=dict(self.data), pager=pager)
