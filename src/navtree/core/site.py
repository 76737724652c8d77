"""Site bundle of a resource repository and its navigation tree.

Separates loading sources from rendering: the CLI and the HTTP API both
load a Site once and build a RenderContext per page.
"""

import logging
from dataclasses import dataclass

from navtree.config import Config
from navtree.core.context import DEFAULT_HOME_TITLE, UNLIMITED_DEPTH, RenderContext, Translations
from navtree.core.pagination import flatten_tree, next_link, previous_link
from navtree.core.renderer import tree_to_html
from navtree.core.resources import Resource, ResourceRepository, SourceRepository
from navtree.core.tree import Directory, build_source_tree, load_tree
from navtree.core.types import URLPath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageNavigation:
    """Navigation markup for a single page."""

    html: str
    previous: str
    next: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"html": self.html, "previous": self.previous, "next": self.next}


class Site:
    """Repository, tree and rendering options for one documentation source."""

    def __init__(
        self,
        repository: ResourceRepository,
        tree: Directory,
        *,
        home_title: str = DEFAULT_HOME_TITLE,
        max_depth: float = UNLIMITED_DEPTH,
        hide_directory_index: bool = True,
        translations: dict[str, str] | None = None,
    ) -> None:
        self.repository = repository
        self.tree = tree
        self.home_title = home_title
        self.max_depth = max_depth
        self.hide_directory_index = hide_directory_index
        self._translate = Translations(translations)

    @classmethod
    def load(cls, config: Config) -> "Site":
        """Load a site from configuration.

        Uses the configured tree file when set, otherwise scans the source
        directory.

        Raises:
            FileNotFoundError: If the configured tree file doesn't exist
            ValueError: If the tree file is malformed
        """
        repository = SourceRepository(config.docs.source_dir)
        if config.docs.tree_file is not None:
            tree = load_tree(config.docs.tree_file)
            logger.info(f"Loaded navigation tree from {config.docs.tree_file}")
        else:
            tree = build_source_tree(config.docs.source_dir, config.docs.ignore)

        navigation = config.navigation
        return cls(
            repository,
            tree,
            home_title=navigation.home_title,
            max_depth=navigation.max_depth if navigation.max_depth is not None else UNLIMITED_DEPTH,
            hide_directory_index=navigation.hide_directory_index,
            translations=config.translations,
        )

    def get_page(self, path: str) -> Resource | None:
        return self.repository.find_resource_by_path(path)

    def context_for(self, page: Resource | None) -> RenderContext:
        """Build a render context with the given page as current."""
        return RenderContext(
            repository=self.repository,
            current_page=page,
            translate=self._translate,
            home_title=self.home_title,
        )

    def render_navigation(self, page: Resource | None) -> PageNavigation:
        """Render menu and pagination links for a page.

        Args:
            page: Current page, None to render without an active entry

        Returns:
            PageNavigation with the menu markup and pagination links
        """
        context = self.context_for(page)
        return PageNavigation(
            html=tree_to_html(
                self.tree,
                context,
                max_depth=self.max_depth,
                hide_directory_index=self.hide_directory_index,
            ),
            previous=previous_link(self.tree, context),
            next=next_link(self.tree, context),
        )

    def page_order(self) -> list[URLPath]:
        """Pagination order of all pages in the tree."""
        return flatten_tree(self.tree)
