# tests/conftest.py
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, List

import pytest

from tagpages.common import settings as s
from tagpages.domain.entities.post import PostRef

BASE_TS = datetime(2024, 1, 1, 12, 0, 0)


def _make_post(pid: str, day: int, tags: Iterable[str]) -> PostRef:
    return PostRef(id=pid, published_at=BASE_TS + timedelta(days=day), tags=tuple(tags))


@pytest.fixture()
def make_post():
    return _make_post


@pytest.fixture()
def tagged_posts():
    """n posts, each carrying its own distinct tag t00..t(n-1)."""
    def _build(n: int) -> List[PostRef]:
        return [_make_post(f"p{i}", i, [f"t{i:02d}"]) for i in range(n)]
    return _build


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch, tmp_path):
    # settings are cached; keep each test isolated from a stray .env
    s.get_settings.cache_clear()
    monkeypatch.chdir(tmp_path)
    yield
    s.get_settings.cache_clear()
