from __future__ import annotations
from enum import StrEnum

class PageType(StrEnum):
    page = "page"
    feed = "feed"
