from __future__ import annotations
from enum import StrEnum

class PermalinkStyle(StrEnum):
    date = "date"
    pretty = "pretty"
    ordinal = "ordinal"
    none = "none"
