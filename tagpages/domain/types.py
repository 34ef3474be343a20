# tagpages/domain/types.py
from __future__ import annotations

from typing import Dict, Tuple

from tagpages.domain.entities.post import PostRef

# tag -> posts (newest first); keys in lexicographic order
TagAssociations = Dict[str, Tuple[PostRef, ...]]

# one (tag, posts) row of a TagAssociations, as sliced onto a page
TagEntry = Tuple[str, Tuple[PostRef, ...]]
