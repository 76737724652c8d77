"""Shared test fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest
from navtree.config import Config, DocsConfig, NavigationConfig, ServerConfig
from navtree.core.context import RenderContext
from navtree.core.resources import Resource, normalize_path


class InMemoryRepository:
    """Repository over a fixed set of resources.

    ``render_body`` returns the resource body unchanged and records the
    options it was called with.
    """

    def __init__(self, resources: tuple[Resource, ...]) -> None:
        self._resources = {resource.path: resource for resource in resources}
        self.render_calls: list[tuple[str, bool, bool]] = []

    def find_resource_by_path(self, path: str) -> Resource | None:
        return self._resources.get(path)

    def render_body(
        self,
        resource: Resource,
        *,
        layout: bool = True,
        images: bool = True,
    ) -> str:
        self.render_calls.append((resource.path, layout, images))
        return resource.body


@pytest.fixture
def make_context() -> Callable[..., RenderContext]:
    """Build a RenderContext over in-memory resources.

    The ``current`` argument is a source path of one of the resources.
    """

    def _make(*resources: Resource, current: str | None = None, **kwargs) -> RenderContext:
        repository = InMemoryRepository(resources)
        current_page = None
        if current is not None:
            current_page = repository.find_resource_by_path(normalize_path(current))
        return RenderContext(repository=repository, current_page=current_page, **kwargs)

    return _make


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create docs directory with sample structure."""
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "index.md").write_text("# Welcome\n\nHome page.")
    (docs / "api.md").write_text("# API\n\nReference.")

    guide = docs / "guide"
    guide.mkdir()
    (guide / "index.md").write_text("---\ndirectory_title: User Guide\n---\n# Guide\n\nOverview.")
    (guide / "setup.md").write_text("# Setup\n\nSteps.")
    (guide / "usage.md").write_text("---\nsort_info: 1\n---\n# Usage\n\nExamples.")

    return docs


@pytest.fixture
def test_config(docs_dir: Path) -> Config:
    """Create a test configuration pointing at the sample docs."""
    return Config(
        server=ServerConfig(),
        docs=DocsConfig(source_dir=docs_dir),
        navigation=NavigationConfig(),
    )
