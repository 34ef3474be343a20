# tagpages/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, computed_field
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from tagpages.common.strings.splitters import csv_to_list
from tagpages.domain.enums.page_type import PageType
from tagpages.domain.enums.permalink_style import PermalinkStyle


class PageTypeConfig(BaseModel):
    """
    One kind of per-tag output (a listing page, a feed, ...).
    A type without a layout produces no pages.
    """
    type: PageType = PageType.page
    layout: Optional[str] = None
    dir: str = "tag"
    data: Dict[str, Any] = Field(default_factory=dict)

    @computed_field  # type: ignore[misc]
    @property
    def enabled(self) -> bool:
        return bool(self.layout)


class TaggingSettings(BaseSettings):
    # -------- Site --------
    source: str = "/site"
    baseurl: str = ""
    permalink_style: str = PermalinkStyle.date.value
    tag_permalink_style: Optional[str] = None
    index_filename: str = "index.html"
    log_level: str = "INFO"

    # -------- Tags --------
    ignored_tags: Annotated[List[str], NoDecode] = Field(default_factory=list)

    # -------- Per-tag page types --------
    page: PageTypeConfig = PageTypeConfig(type=PageType.page)
    feed: PageTypeConfig = PageTypeConfig(type=PageType.feed)

    # -------- Tag index pagination --------
    tags_paginate: Optional[int] = Field(None, description="Tags per index page; unset disables pagination")
    tags_paginate_path: str = Field("/tags/page:num:/", description="Must contain ':num:'")

    # -------- Tag cloud --------
    tag_cloud_classes: int = Field(5, description="Number of set-N classes in the cloud")
    tag_data_key: str = "tag_data"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("ignored_tags", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)

    @computed_field  # type: ignore[misc]
    @property
    def pretty(self) -> bool:
        return (
            self.permalink_style == PermalinkStyle.pretty
            or self.tag_permalink_style == PermalinkStyle.pretty
        )

    @computed_field  # type: ignore[misc]
    @property
    def pagination_configured(self) -> bool:
        return self.tags_paginate is not None

    def page_types(self) -> List[PageTypeConfig]:
        """Explicit, ordered list of per-tag page type records."""
        return [self.page, self.feed]


@lru_cache(maxsize=1)
def get_settings() -> TaggingSettings:
    """
    Global settings accessor (cached). Builds default to this when no
    settings object is passed in:
        from tagpages.common.settings import get_settings
        cfg = get_settings()
    """
    return TaggingSettings()  # pydantic_settings will read from .env automatically
