from __future__ import annotations

import logging

import pytest

from tagpages.common.settings import PageTypeConfig, TaggingSettings
from tagpages.domain.entities.output_page import OutputPage
from tagpages.domain.enums.page_type import PageType
from tagpages.domain.errors import ConfigurationError
from tagpages.services.tagging.builder import TagPageSetBuilder
from tagpages.services.tagging.context import BuildContext


def _settings(**kw) -> TaggingSettings:
    base = dict(
        source="/srv/site",
        page=PageTypeConfig(type=PageType.page, layout="tag_page", dir="tag"),
        feed=PageTypeConfig(type=PageType.feed, layout=None, dir="tag"),
    )
    base.update(kw)
    return TaggingSettings(**base)


@pytest.fixture()
def posts(make_post):
    return [
        make_post("a", 1, ["Python", "web"]),
        make_post("b", 2, ["Python"]),
        make_post("c", 3, ["draft", "Python"]),
        make_post("d", 4, ["Data Science"]),
    ]


def test_tag_pages_plain_urls(posts):
    ctx = BuildContext(posts=posts, settings=_settings(ignored_tags=["draft"]))
    result = TagPageSetBuilder(ctx).build()

    assert list(result.associations) == ["Data Science", "Python", "web"]
    assert [p.path for p in result.tag_pages] == [
        "tag/data-science.html",
        "tag/python.html",
        "tag/web.html",
    ]
    python = result.tag_pages[1]
    assert python.data["layout"] == "tag_page"
    assert python.data["tag"] == "Python" and python.data["title"] == "Python"
    assert [p.id for p in python.data["posts"]] == ["c", "b", "a"]
    assert result.report.tags == 3
    assert result.report.tag_pages == 3
    assert result.report.started_at is not None and result.report.finished_at is not None


def test_tag_pages_pretty_urls_and_feed(posts):
    cfg = _settings(
        tag_permalink_style="pretty",
        feed=PageTypeConfig(type=PageType.feed, layout="tag_feed", dir="feeds", data={"kind": "atom"}),
    )
    ctx = BuildContext(posts=posts, settings=cfg, layouts={"tag_page": ".html", "tag_feed": ".xml"})
    result = TagPageSetBuilder(ctx).build()

    paths = [p.path for p in result.tag_pages]
    assert "tag/python/index.html" in paths
    assert "feeds/python/index.xml" in paths
    assert len(paths) == 2 * 4
    feed = next(p for p in result.tag_pages if p.path == "feeds/web/index.xml")
    assert feed.data["kind"] == "atom"
    assert feed.url == "/feeds/web/index.xml"


def test_namer_overrides_slug_source(posts):
    ctx = BuildContext(posts=posts, settings=_settings())
    result = TagPageSetBuilder(ctx, namer=lambda data: f"Topic {data['tag']}").build()
    assert result.tag_pages[0].path == "tag/topic-data-science.html"


def test_unknown_layout_is_configuration_error(posts):
    ctx = BuildContext(posts=posts, settings=_settings(), layouts={"other": ".html"})
    with pytest.raises(ConfigurationError):
        TagPageSetBuilder(ctx).build()


def test_no_layouts_no_tag_pages(posts):
    cfg = _settings(page=PageTypeConfig(type=PageType.page, layout=None))
    result = TagPageSetBuilder(BuildContext(posts=posts, settings=cfg)).build()
    assert result.tag_pages == []


def test_tag_cloud(make_post):
    posts = [make_post(f"p{i}", i, ["big"]) for i in range(10)]
    posts += [make_post("x", 20, ["a"]), make_post("y", 21, ["b"]), make_post("z", 22, ["c"])]
    ctx = BuildContext(posts=posts, settings=_settings())
    result = TagPageSetBuilder(ctx).build()

    assert result.tag_cloud == [("a", 1), ("b", 1), ("big", 5), ("c", 1)]
    assert result.payload() == {"tag_data": result.tag_cloud}
    assert result.report.cloud_entries == 4


def test_tag_cloud_single_tag_and_empty(make_post):
    ctx = BuildContext(posts=[make_post("a", 1, ["only"])], settings=_settings())
    assert TagPageSetBuilder(ctx).build().tag_cloud == [("only", 1)]
    empty = TagPageSetBuilder(BuildContext(posts=[], settings=_settings())).build()
    assert empty.tag_cloud == [] and empty.tag_pages == []


def test_pagination_disabled_without_page_size(tagged_posts):
    pages = [OutputPage(dir="tags", name="index.html")]
    ctx = BuildContext(posts=tagged_posts(12), pages=pages, settings=_settings())
    result = TagPageSetBuilder(ctx).build()
    assert result.template_page is None
    assert result.index_pages == []
    assert result.descriptors == []
    assert result.report.degraded == []


def test_pagination_disabled_without_existing_pages(tagged_posts):
    ctx = BuildContext(posts=tagged_posts(12), pages=[], settings=_settings(tags_paginate=5))
    result = TagPageSetBuilder(ctx).build()
    assert result.descriptors == []


def test_paginates_tag_index(tagged_posts):
    template = OutputPage(dir="tags", name="index.html", data={"layout": "tags"})
    pages = [OutputPage(dir="", name="index.html"), template, OutputPage(dir="blog", name="index.html")]
    ctx = BuildContext(posts=tagged_posts(12), pages=pages, settings=_settings(tags_paginate=5))
    result = TagPageSetBuilder(ctx).build()

    assert result.template_page is not None
    assert result.template_page.path == "tags/index.html"
    assert [p.url for p in result.index_pages] == ["/tags/page2/", "/tags/page3/"]
    assert all(p.name == "index.html" for p in result.index_pages)
    assert result.index_pages[0].data == {"layout": "tags"}

    d1, d2, d3 = result.descriptors
    assert (len(d1.items), len(d2.items), len(d3.items)) == (5, 5, 2)
    assert d1.previous_page is None and d1.next_page == 2 and d1.next_page_path == "/tags/page2/"
    assert d2.previous_page_path == "/tags/" and d2.next_page_path == "/tags/page3/"
    assert d3.next_page is None and d3.previous_page_path == "/tags/page2/"

    assert result.report.total_pages == 3
    assert result.report.paginated_pages == 2
    assert result.new_pages == result.tag_pages + result.index_pages
    # the input page list is left untouched
    assert template.pager is None


def test_exact_multiple_has_no_empty_trailing_page(tagged_posts):
    pages = [OutputPage(dir="tags", name="index.html")]
    ctx = BuildContext(posts=tagged_posts(10), pages=pages, settings=_settings(tags_paginate=5))
    result = TagPageSetBuilder(ctx).build()
    assert [d.page for d in result.descriptors] == [1, 2]
    assert result.descriptors[-1].next_page is None


def test_empty_tag_index_still_gets_one_page():
    pages = [OutputPage(dir="tags", name="index.html")]
    ctx = BuildContext(posts=[], pages=pages, settings=_settings(tags_paginate=5))
    result = TagPageSetBuilder(ctx).build()
    [only] = result.descriptors
    assert only.total_pages == 1 and only.items == ()


def test_missing_template_page_degrades(tagged_posts, caplog):
    pages = [OutputPage(dir="blog", name="index.html")]
    ctx = BuildContext(posts=tagged_posts(12), pages=pages, settings=_settings(tags_paginate=5))
    with caplog.at_level(logging.WARNING):
        result = TagPageSetBuilder(ctx).build()
    assert result.template_page is None
    assert result.descriptors == []
    assert result.report.degraded == ["pagination: no template page"]
    assert len(result.tag_pages) == 12
    assert "no index.html" in caplog.text


def test_bad_paginate_path_aborts(tagged_posts):
    pages = [OutputPage(dir="", name="index.html")]
    ctx = BuildContext(
        posts=tagged_posts(3), pages=pages,
        settings=_settings(tags_paginate=5, tags_paginate_path="/tags/page/"),
    )
    with pytest.raises(ConfigurationError):
        TagPageSetBuilder(ctx).build()


def test_non_positive_page_size_aborts(tagged_posts):
    pages = [OutputPage(dir="tags", name="index.html")]
    ctx = BuildContext(posts=tagged_posts(3), pages=pages, settings=_settings(tags_paginate=0))
    with pytest.raises(ConfigurationError):
        TagPageSetBuilder(ctx).build()


def test_payload_uses_configured_key(make_post):
    ctx = BuildContext(posts=[make_post("a", 1, ["x"])], settings=_settings(tag_data_key="cloud"))
    result = TagPageSetBuilder(ctx).build()
    assert result.payload() == {"cloud": [("x", 1)]}
    assert result.payload("other") == {"other": [("x", 1)]}


def test_bad_paginate_path_aborts_without_template_page(tagged_posts):
    pages = [OutputPage(dir="blog", name="index.html")]
    ctx = BuildContext(
        posts=tagged_posts(3), pages=pages,
        settings=_settings(tags_paginate=5, tags_paginate_path="/tags/page/"),
    )
    with pytest.raises(ConfigurationError):
        TagPageSetBuilder(ctx).build()


def test_non_positive_page_size_aborts_without_template_page(tagged_posts):
    pages = [OutputPage(dir="blog", name="index.html")]
    ctx = BuildContext(posts=tagged_posts(3), pages=pages, settings=_settings(tags_paginate=-2))
    with pytest.raises(ConfigurationError):
        TagPageSetBuilder(ctx).build()
