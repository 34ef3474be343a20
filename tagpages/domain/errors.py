# tagpages/domain/errors.py
from __future__ import annotations


class TaggingError(ValueError):
    """Base class for failures raised while computing tag pages."""


class ConfigurationError(TaggingError):
    """Pagination or cloud configuration that cannot be honoured (bad page size, bad path template)."""


class PageRangeError(TaggingError):
    """A page number outside [1, total_pages] was requested."""

    def __init__(self, page: int, total_pages: int) -> None:
        self.page = page
        self.total_pages = total_pages
        if page < 1:
            msg = f"page number must be at least 1: {page} < 1"
        else:
            msg = f"page number can't be greater than total pages: {page} > {total_pages}"
        super().__init__(msg)
