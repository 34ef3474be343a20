# tagpages/domain/dataclasses/reports.py
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class BaseReport:
    """Common report base:
    - timing: started_at / finished_at
    - helpers: start(), stop(), as_dict()
    """
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    def start(self) -> None:
        if self.started_at is None:
            self.started_at = datetime.now()

    def stop(self) -> None:
        self.finished_at = datetime.now()

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class TagBuildReport(BaseReport):
    tags: int = 0               # active tags after the ignore-list
    tag_pages: int = 0          # per-tag pages across all page types
    cloud_entries: int = 0
    total_pages: int = 0        # pages in the paginated tag index
    paginated_pages: int = 0    # new pages created for 2..total_pages

    # features that were skipped rather than failing the build
    degraded: List[str] = field(default_factory=list)

    def degrade(self, note: str) -> None:
        self.degraded.append(note)

    @property
    def paginated(self) -> bool:
        return self.total_pages > 0
