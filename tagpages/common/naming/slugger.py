# tagpages/common/naming/slugger.py
from __future__ import annotations

import re
import unicodedata

_ws_re = re.compile(r"\s")


def strip_diacritics(text: str) -> str:
    """Replace accented characters with their unaccented base letters."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def tag_slug(text: object) -> str:
    """
    Slug used for tag page names and tag URLs:
      - diacritics replaced with their ASCII equivalents
      - lowercased
      - every whitespace character becomes a single '-'

    Examples:
      "Ruby on Rails" -> "ruby-on-rails"
      "Café"          -> "cafe"
      "a  b"          -> "a--b"   (no collapsing)
    """
    if text is None:
        return ""
    return _ws_re.sub("-", strip_diacritics(str(text)).lower())
