# tagpages/services/helpers/filters.py
from __future__ import annotations

from functools import partial
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import quote

from tagpages.common.naming.slugger import tag_slug
from tagpages.domain.enums.page_type import PageType
from tagpages.domain.policies.tag_aggregator import aggregate, by_post_count
from tagpages.services.tagging.context import BuildContext


def tag_url(ctx: BuildContext, tag: str, page_type: PageType | str = PageType.page) -> str:
    """
    Public URL of a tag's page:
      "/<baseurl>/<type dir>/<slug>/"   (pretty)
      "/<baseurl>/<type dir>/<slug>.html"
    """
    type_dir = ctx.page_type(page_type).dir
    parts = [str(p).strip("/") for p in (ctx.settings.baseurl, type_dir, quote(tag_slug(tag), safe=""))]
    url = "/" + "/".join(p for p in parts if p)
    return url + "/" if ctx.pretty else url + ".html"


def tag_link(tag: str, url: str, html_opts: Optional[Mapping[str, Any]] = None) -> str:
    attrs = ""
    if html_opts:
        attrs = " " + " ".join(f'{k}="{v}"' for k, v in html_opts.items())
    return f'<a href="{url}"{attrs}>{tag}</a>'


def active_tag_data(ctx: BuildContext, tag_data: Iterable[Tuple[str, int]]) -> List[Tuple[str, int]]:
    ignored = set(ctx.settings.ignored_tags)
    return [(tag, klass) for tag, klass in tag_data if tag not in ignored]


def tag_cloud(ctx: BuildContext, tag_data: Iterable[Tuple[str, int]]) -> str:
    return " ".join(
        tag_link(tag, tag_url(ctx, tag), {"class": f"set-{klass}"})
        for tag, klass in active_tag_data(ctx, tag_data)
    )


def _obj_tags(obj: Any) -> List[Any]:
    if isinstance(obj, Mapping):
        return list(obj.get("tags") or [])
    return list(getattr(obj, "tags", None) or [])


def tags(ctx: BuildContext, obj: Any) -> str:
    """Comma-separated rel="tag" links for a post (or any object/dict with tags)."""
    items = _obj_tags(obj)
    if items and isinstance(items[0], (tuple, list)):
        items = [t[0] for t in items]
    links = [tag_link(t, tag_url(ctx, t), {"rel": "tag"}) for t in items if isinstance(t, str)]
    return ", ".join(links)


def keywords(obj: Any) -> str:
    return ",".join(str(t) for t in _obj_tags(obj))


def tag_sort(ctx: BuildContext):
    """Tags with their posts, least used first."""
    return by_post_count(aggregate(ctx.posts))


def template_filters(ctx: BuildContext) -> Dict[str, Callable[..., Any]]:
    """Filters with the build context bound, for registering with a template engine."""
    return {
        "tag_url": partial(tag_url, ctx),
        "tag_link": tag_link,
        "tag_cloud": partial(tag_cloud, ctx),
        "tags": partial(tags, ctx),
        "keywords": keywords,
        "active_tag_data": partial(active_tag_data, ctx),
        "tag_sort": partial(tag_sort, ctx),
    }
