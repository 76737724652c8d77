"""Tests for the Site bundle."""

from pathlib import Path

import pytest
from navtree.config import Config
from navtree.core.site import Site
from navtree.core.tree import DIRECTORY_INDEX, Directory, Leaf


class TestSiteLoad:
    """Tests for Site.load()."""

    def test__scans_source_dir(self, test_config: Config) -> None:
        site = Site.load(test_config)

        assert set(site.tree.children) == {DIRECTORY_INDEX, "api.md", "guide"}

    def test__uses_tree_file(self, test_config: Config, tmp_path: Path) -> None:
        """Load the tree from the configured file instead of scanning."""
        tree_file = tmp_path / "tree.yml"
        tree_file.write_text("api.md: api.md\n")
        test_config.docs.tree_file = tree_file

        site = Site.load(test_config)

        assert site.tree == Directory({"api.md": Leaf("api.md")})

    def test__missing_tree_file__raises_error(self, test_config: Config, tmp_path: Path) -> None:
        test_config.docs.tree_file = tmp_path / "missing.yml"

        with pytest.raises(FileNotFoundError, match="Tree file not found"):
            Site.load(test_config)

    def test__applies_navigation_config(self, test_config: Config) -> None:
        test_config.navigation.max_depth = 2
        test_config.navigation.home_title = "Start"

        site = Site.load(test_config)

        assert site.max_depth == 2
        assert site.home_title == "Start"


class TestSiteRenderNavigation:
    """Tests for Site.render_navigation()."""

    def test__current_page__renders_menu_and_links(self, test_config: Config) -> None:
        site = Site.load(test_config)

        navigation = site.render_navigation(site.get_page("guide/setup.md"))

        assert '<li class="child active"><a href="/guide/setup.html">Setup</a></li>' in navigation.html
        assert '<li class="parent active">' in navigation.html
        assert navigation.previous == '<a href="/guide/" class="previous">Previous</a>'
        assert navigation.next == '<a href="/guide/usage.html" class="next">Next</a>'

    def test__menu_order__follows_sort_policy(self, test_config: Config) -> None:
        """Put the site index first and sorted pages before unsorted ones."""
        site = Site.load(test_config)

        html = site.render_navigation(None).html

        assert html.index(">Welcome</a>") < html.index(">API</a>") < html.index(">User Guide</a>")
        assert html.index(">Usage</a>") < html.index(">Setup</a>")

    def test__directory_index__hidden_from_nested_list(self, test_config: Config) -> None:
        site = Site.load(test_config)

        html = site.render_navigation(None).html

        assert '<span class="parent-label"><a href="/guide/">User Guide</a></span>' in html
        assert '<li class="child"><a href="/guide/">' not in html

    def test__translations__used_for_labels(self, test_config: Config) -> None:
        test_config.translations = {"next_page": "Weiter"}
        site = Site.load(test_config)

        navigation = site.render_navigation(site.get_page("api.md"))

        assert navigation.next == '<a href="/guide/" class="next">Weiter</a>'

    def test__no_current_page__no_links(self, test_config: Config) -> None:
        site = Site.load(test_config)

        navigation = site.render_navigation(None)

        assert "active" not in navigation.html
        assert navigation.previous == ""
        assert navigation.next == ""


class TestSitePageOrder:
    """Tests for Site.page_order()."""

    def test__lists_pages_depth_first(self, test_config: Config) -> None:
        """Put each directory's index page before its other pages."""
        site = Site.load(test_config)

        assert site.page_order() == [
            "/index.html",
            "/api.html",
            "/guide/index.html",
            "/guide/setup.html",
            "/guide/usage.html",
        ]

    def test__home_page__first_in_pagination(self, test_config: Config) -> None:
        site = Site.load(test_config)

        navigation = site.render_navigation(site.get_page("/"))

        assert navigation.previous == ""
        assert navigation.next == '<a href="/api.html" class="next">Next</a>'


class TestSiteGetPage:
    """Tests for Site.get_page()."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("guide/setup.md", "guide/setup.html"),
            ("/guide/setup.html", "guide/setup.html"),
            ("/", "index.html"),
            ("/guide/", "guide/index.html"),
        ],
    )
    def test__menu_url_or_source_path__resolves(
        self,
        test_config: Config,
        path: str,
        expected: str,
    ) -> None:
        """Resolve both source paths and the URLs the menu links to."""
        site = Site.load(test_config)

        page = site.get_page(path)

        assert page is not None
        assert page.path == expected

    def test__menu_links__resolve_back_to_pages(self, test_config: Config) -> None:
        site = Site.load(test_config)

        html = site.render_navigation(None).html

        assert '<a href="/">Welcome</a>' in html
        assert site.get_page("/") is not None
