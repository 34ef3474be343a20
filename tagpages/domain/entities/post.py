# tagpages/domain/entities/post.py
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True)
class PostRef:
    """
    Opaque reference to a content item. The tagging step only needs the
    tags and the publication time (for newest-first ordering); everything
    else about the post belongs to the rendering side.
    """
    id: str
    published_at: datetime
    tags: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.id or not str(self.id).strip():
            raise ValueError("PostRef requires a non-empty id")
        # accept any iterable of tags but store a tuple
        object.__setattr__(self, "tags", tuple(self.tags or ()))

    def as_dict(self):
        return asdict(self)
