# tagpages/domain/policies/tag_aggregator.py
from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from tagpages.domain.entities.post import PostRef
from tagpages.domain.types import TagAssociations


def aggregate(posts: Iterable[PostRef], ignored_tags: Iterable[str] = ()) -> TagAssociations:
    """
    Build the tag -> posts table for one run.

    - ignored tags are dropped entirely
    - a post listed twice under the same tag counts once
    - posts per tag are newest first; equal timestamps keep input order
    - keys come back in lexicographic order so every consumer sees the same sequence
    """
    ignored = set(ignored_tags or ())
    buckets: Dict[str, List[PostRef]] = {}

    for post in posts:
        seen = set()
        for tag in post.tags:
            if tag in ignored or tag in seen:
                continue
            seen.add(tag)
            buckets.setdefault(tag, []).append(post)

    return {
        tag: tuple(sorted(buckets[tag], key=lambda p: p.published_at, reverse=True))
        for tag in sorted(buckets)
    }


def tag_sizes(associations: TagAssociations) -> List[Tuple[str, int]]:
    """(tag, post count) pairs in lexicographic tag order."""
    return [(tag, len(associations[tag])) for tag in sorted(associations)]


def by_post_count(associations: TagAssociations) -> List[Tuple[str, Tuple[PostRef, ...]]]:
    """Rows ordered by ascending post count, ties in tag order."""
    return sorted(associations.items(), key=lambda row: (len(row[1]), row[0]))
