# tagpages/services/tagging/builder.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from tagpages.common.logging import get_logger
from tagpages.common.naming.slugger import tag_slug
from tagpages.domain.dataclasses.page_descriptor import PageDescriptor
from tagpages.domain.dataclasses.reports import TagBuildReport
from tagpages.domain.entities.output_page import OutputPage
from tagpages.domain.errors import ConfigurationError
from tagpages.domain.policies import paginate_path
from tagpages.domain.policies.page_slicer import total_pages as calculate_pages
from tagpages.domain.policies.pager import build_page
from tagpages.domain.policies.quantile import bucket
from tagpages.domain.policies.tag_aggregator import aggregate, tag_sizes
from tagpages.domain.types import TagAssociations
from tagpages.services.tagging.context import BuildContext

logger = get_logger(__name__)

Namer = Callable[[Dict[str, Any]], Optional[str]]


@dataclass
class TagPageSet:
    """Result of one tagging run, handed to the rendering step."""
    associations: TagAssociations
    tag_pages: List[OutputPage] = field(default_factory=list)
    tag_cloud: List[Tuple[str, int]] = field(default_factory=list)
    template_page: Optional[OutputPage] = None   # page 1 of the index, pager attached
    index_pages: List[OutputPage] = field(default_factory=list)  # pages 2..N
    report: TagBuildReport = field(default_factory=TagBuildReport)
    tag_data_key: str = "tag_data"

    @property
    def descriptors(self) -> List[PageDescriptor]:
        """Pagers for pages 1..N in page order (empty when pagination is inactive)."""
        pages = ([self.template_page] if self.template_page else []) + self.index_pages
        return [p.pager for p in pages if p.pager is not None]

    @property
    def new_pages(self) -> List[OutputPage]:
        """Pages the site build should add to its output."""
        return self.tag_pages + self.index_pages

    def payload(self, key: Optional[str] = None) -> Dict[str, List[Tuple[str, int]]]:
        return {key or self.tag_data_key: list(self.tag_cloud)}


class TagPageSetBuilder:
    """
    Orchestrates a full tagging run over a BuildContext:
      1) aggregate posts by tag (minus ignored tags)
      2) one page per tag per enabled page type
      3) tag cloud size classes
      4) paginated tag index, when configured and a template page exists
    """

    def __init__(self, ctx: BuildContext, namer: Optional[Namer] = None) -> None:
        self.ctx = ctx
        self.cfg = ctx.settings
        self.namer = namer

    # ---------------- public ----------------

    def build(self) -> TagPageSet:
        report = TagBuildReport()
        report.start()

        associations = aggregate(self.ctx.posts, self.cfg.ignored_tags)
        result = TagPageSet(associations=associations, report=report, tag_data_key=self.cfg.tag_data_key)
        report.tags = len(associations)

        result.tag_pages = self.generate_tag_pages(associations)
        report.tag_pages = len(result.tag_pages)

        result.tag_cloud = self.calculate_tag_cloud(associations, self.cfg.tag_cloud_classes)
        report.cloud_entries = len(result.tag_cloud)

        if self.pagination_enabled():
            self.check_pagination_config()
            template = paginate_path.find_template_page(
                self.ctx.pages, self.cfg.source, self.cfg.tags_paginate_path, self.cfg.index_filename
            )
            if template is None:
                logger.warning(
                    "tags_paginate is set but no %s was found on the path to %s; tag index not paginated",
                    self.cfg.index_filename, self.cfg.tags_paginate_path,
                )
                report.degrade("pagination: no template page")
            else:
                result.template_page, result.index_pages = self.paginate(associations, template)
                report.total_pages = len(result.index_pages) + 1
                report.paginated_pages = len(result.index_pages)

        report.stop()
        logger.info(
            "tagging: %d tags, %d tag pages, %d index pages",
            report.tags, report.tag_pages, report.total_pages,
        )
        return result

    def pagination_enabled(self) -> bool:
        return self.cfg.tags_paginate is not None and len(self.ctx.pages) > 0

    def check_pagination_config(self) -> None:
        """Reject a bad page size or paginate path before looking for a template page."""
        path = self.cfg.tags_paginate_path
        if paginate_path.PLACEHOLDER not in path:
            raise ConfigurationError(
                f"Invalid pagination path: '{path}'. It must include '{paginate_path.PLACEHOLDER}'."
            )
        calculate_pages(0, self.cfg.tags_paginate)  # validates the page size

    def generate_tag_pages(self, associations: TagAssociations) -> List[OutputPage]:
        out: List[OutputPage] = []
        for tag, posts in associations.items():
            out.extend(self.new_tag(tag, posts))
        return out

    def new_tag(self, tag: str, posts) -> List[OutputPage]:
        """Pages for one tag, one per page type that has a layout."""
        pages: List[OutputPage] = []
        for type_cfg in self.cfg.page_types():
            if not type_cfg.enabled:
                continue
            data: Dict[str, Any] = {
                "layout": type_cfg.layout,
                "posts": list(posts),
                "tag": tag,
                "title": tag,
            }
            data.update(type_cfg.data or {})

            name = self.namer(data) if self.namer else None
            name = tag_slug(name or tag)

            ext = self.ctx.layout_ext(data["layout"])
            if self.cfg.pretty:
                page = OutputPage(
                    dir=f"{type_cfg.dir}/{name}",
                    name=f"index{ext}",
                    data=data,
                    index_filename=self.cfg.index_filename,
                )
            else:
                page = OutputPage(
                    dir=type_cfg.dir,
                    name=f"{name}{ext}",
                    data=data,
                    index_filename=self.cfg.index_filename,
                )
            logger.debug("tag page %s -> %s", tag, page.path)
            pages.append(page)
        return pages

    def calculate_tag_cloud(self, associations: TagAssociations, num: int = 5) -> List[Tuple[str, int]]:
        """
        [(tag, class), ...] in tag order, class in 1..num, rendered as set-1..set-num.
        """
        sizes = tag_sizes(associations)
        high = 0
        for _, size in sizes:
            if size > high:
                high = size
        return [(tag, bucket(size, 1, high, num)) for tag, size in sizes]

    def paginate(
        self, associations: TagAssociations, template: OutputPage
    ) -> Tuple[OutputPage, List[OutputPage]]:
        """
        Split the tag index over pages. Page 1 reuses the template page;
        pages 2..N are copies of it moved to the numbered paginate path.
        """
        self.check_pagination_config()
        path = self.cfg.tags_paginate_path
        per_page = self.cfg.tags_paginate
        pages = max(1, calculate_pages(len(associations), per_page))
        first_url = template.url

        first: Optional[OutputPage] = None
        rest: List[OutputPage] = []
        for num_page in range(1, pages + 1):
            pager = build_page(
                associations, num_page, per_page,
                total_pages=pages, path_template=path, first_page_url=first_url,
            )
            if num_page == 1:
                first = template.with_pager(pager)
            else:
                rest.append(template.moved_to(paginate_path.resolve(path, num_page, first_url), pager))
        logger.debug("tag index paginated: %d pages of %d from %s", pages, per_page, first_url)
        return first, rest  # type: ignore[return-value]
