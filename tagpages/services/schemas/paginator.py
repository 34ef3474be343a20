from __future__ import annotations
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Post as seen by templates
class PostRead(BaseModel):
    id: str
    published_at: datetime
    tags: List[str] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)

# The "paginator" object bound into the tag index template
class PaginatorRead(BaseModel):
    page: int
    per_page: int
    tags: Dict[str, List[PostRead]] = Field(default_factory=dict)
    total_tags: int
    total_pages: int
    previous_page: Optional[int] = None
    previous_page_path: Optional[str] = None
    next_page: Optional[int] = None
    next_page_path: Optional[str] = None
