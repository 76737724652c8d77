"""Tests for title and link resolution."""

from collections.abc import Callable

from navtree.core.context import RenderContext
from navtree.core.resources import Resource
from navtree.core.titles import (
    discover_title,
    format_directory_name,
    resolve_path,
    title_from_url,
    titleize,
)
from navtree.core.tree import DIRECTORY_INDEX, Leaf

MakeContext = Callable[..., RenderContext]


class TestResolvePath:
    """Tests for resolve_path()."""

    def test__source_path__resolves_resource(self, make_context: MakeContext) -> None:
        page = Resource(path="guide/setup.html")
        context = make_context(page)

        assert resolve_path("guide/setup.md", context) == page

    def test__unknown_path__returns_none(self, make_context: MakeContext) -> None:
        context = make_context(Resource(path="guide/setup.html"))

        assert resolve_path("guide/missing.md", context) is None


class TestDiscoverTitle:
    """Tests for discover_title()."""

    def test__front_matter_title__wins(self, make_context: MakeContext) -> None:
        """Use the front matter title before looking at the body."""
        page = Resource(path="setup.html", title="Setup", body="<h1>Heading</h1>")
        context = make_context(page)

        assert discover_title(page, context) == "Setup"
        assert context.repository.render_calls == []

    def test__h1__used_without_title(self, make_context: MakeContext) -> None:
        """Use the first H1 when there is no front matter title."""
        page = Resource(
            path="setup.html",
            body='<p>Intro</p><h1 id="top">Getting <em>Started</em></h1><h1>Second</h1>',
        )
        context = make_context(page)

        assert discover_title(page, context) == "Getting Started"

    def test__h1__rendered_without_layout_and_images(self, make_context: MakeContext) -> None:
        page = Resource(path="setup.html", body="<h1>Setup</h1>")
        context = make_context(page)

        discover_title(page, context)

        assert context.repository.render_calls == [("setup.html", False, False)]

    def test__h1_entities__unescaped(self, make_context: MakeContext) -> None:
        page = Resource(path="qa.html", body="<h1>Q &amp; A</h1>")
        context = make_context(page)

        assert discover_title(page, context) == "Q & A"

    def test__root_page__uses_home_title(self, make_context: MakeContext) -> None:
        page = Resource(path="index.html")
        context = make_context(page)

        assert discover_title(page, context) == "Home"

    def test__root_page__uses_configured_home_title(self, make_context: MakeContext) -> None:
        page = Resource(path="index.html")
        context = make_context(page, home_title="Start")

        assert discover_title(page, context) == "Start"

    def test__no_title__falls_back_to_filename(self, make_context: MakeContext) -> None:
        """Humanize the last path segment when nothing else is available."""
        page = Resource(path="guide/my-first_page.html", body="<p>No heading</p>")
        context = make_context(page)

        assert discover_title(page, context) == "My First Page"

    def test__directory_index__falls_back_to_directory_name(
        self,
        make_context: MakeContext,
    ) -> None:
        page = Resource(path="getting-started/index.html")
        context = make_context(page)

        assert discover_title(page, context) == "Getting Started"


class TestTitleFromUrl:
    """Tests for title_from_url()."""

    def test__percent_encoded__decodes(self) -> None:
        assert title_from_url("/docs/hello%20world.html") == "Hello World"

    def test__strips_extension(self) -> None:
        assert title_from_url("/release_notes.html") == "Release Notes"


class TestTitleize:
    """Tests for titleize()."""

    def test__capitalizes_each_word(self) -> None:
        assert titleize("sink or swim") == "Sink Or Swim"

    def test__keeps_rest_of_word(self) -> None:
        assert titleize("using the API") == "Using The API"

    def test__keeps_standalone_separators(self) -> None:
        assert titleize("1 - sink or swim") == "1 - Sink Or Swim"


class TestFormatDirectoryName:
    """Tests for format_directory_name()."""

    def test__without_index__formats_key(self, make_context: MakeContext) -> None:
        """Turn encoded spaces, inner hyphens and underscores into spaces."""
        context = make_context()

        label, active = format_directory_name("1%20-%20sink-or_swim", {}, context)

        assert label == "1 - Sink Or Swim"
        assert active is False

    def test__unresolved_index__formats_key(self, make_context: MakeContext) -> None:
        context = make_context()
        children = {DIRECTORY_INDEX: Leaf("guide/index.md")}

        label, active = format_directory_name("user_guide", children, context)

        assert label == "User Guide"
        assert active is False

    def test__key_markup__escaped(self, make_context: MakeContext) -> None:
        context = make_context()

        label, _ = format_directory_name("a<b>", {}, context)

        assert label == "A&lt;b&gt;"

    def test__with_index__links_to_index(self, make_context: MakeContext) -> None:
        index = Resource(path="guide/index.html", title="Guide")
        context = make_context(index)
        children = {DIRECTORY_INDEX: Leaf("guide/index.md")}

        label, active = format_directory_name("guide", children, context)

        assert label == '<a href="/guide/">Guide</a>'
        assert active is False

    def test__with_index__prefers_directory_title(self, make_context: MakeContext) -> None:
        index = Resource(path="guide/index.html", title="Guide", directory_title="User Guide")
        context = make_context(index)
        children = {DIRECTORY_INDEX: Leaf("guide/index.md")}

        label, _ = format_directory_name("guide", children, context)

        assert label == '<a href="/guide/">User Guide</a>'

    def test__current_index__reports_active(self, make_context: MakeContext) -> None:
        index = Resource(path="guide/index.html", title="Guide")
        context = make_context(index, current="guide/index.md")
        children = {DIRECTORY_INDEX: Leaf("guide/index.md")}

        _, active = format_directory_name("guide", children, context)

        assert active is True
