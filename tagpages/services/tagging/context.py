# tagpages/services/tagging/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from tagpages.common.settings import PageTypeConfig, TaggingSettings, get_settings
from tagpages.domain.entities.output_page import OutputPage
from tagpages.domain.entities.post import PostRef
from tagpages.domain.enums.page_type import PageType
from tagpages.domain.errors import ConfigurationError

DEFAULT_EXT = ".html"


@dataclass(frozen=True)
class BuildContext:
    """
    Everything the tagging step reads from the surrounding site build.
    Passed explicitly to the builder and to every template helper.

    layouts maps layout name -> output extension (".html", ".xml", ...).
    When it is None every layout renders to DEFAULT_EXT.
    """
    posts: Sequence[PostRef] = field(default_factory=tuple)
    pages: Sequence[OutputPage] = field(default_factory=tuple)
    settings: TaggingSettings = field(default_factory=get_settings)
    layouts: Optional[Dict[str, str]] = None

    @property
    def pretty(self) -> bool:
        return self.settings.pretty

    def layout_ext(self, layout: str) -> str:
        if self.layouts is None:
            return DEFAULT_EXT
        try:
            return self.layouts[layout]
        except KeyError:
            raise ConfigurationError(f"unknown layout '{layout}'") from None

    def page_type(self, type_: PageType | str) -> PageTypeConfig:
        for cfg in self.settings.page_types():
            if cfg.type == type_:
                return cfg
        raise ConfigurationError(f"unknown tag page type '{type_}'")
