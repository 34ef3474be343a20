from tagpages.domain.enums.page_type import PageType
from tagpages.domain.enums.permalink_style import PermalinkStyle
__all__ = [
    "PageType",
    "PermalinkStyle",
]
