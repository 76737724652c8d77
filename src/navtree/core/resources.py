"""Page resources and the repository that resolves them.

Resources are looked up by normalized path: leading slash removed, template
extensions stripped and the ``.html`` suffix appended.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import mistune
import yaml

logger = logging.getLogger(__name__)

HTML_SUFFIX = ".html"

TEMPLATE_EXTENSIONS = (".md", ".markdown", ".erb", ".haml", ".slim", ".adoc", ".txt")

SOURCE_EXTENSIONS = (".md", ".markdown", HTML_SUFFIX)

INDEX_FILENAME = "index.html"

LAYOUT_FILENAME = "_layout.html"

LAYOUT_PLACEHOLDER = re.compile(r"\{\{\s*content\s*\}\}")

FRONT_MATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


def normalize_path(path: str) -> str:
    """Normalize a source path to its canonical output path.

    Args:
        path: Source path or URL (e.g., "/guide/setup.md", "guide/setup.html.md"
            or "/guide/")

    Returns:
        Normalized path (e.g., "guide/setup.html" or "guide/index.html")
    """
    if not path or path.endswith("/"):
        path += INDEX_FILENAME
    normalized = path.lstrip("/")
    while normalized.endswith(TEMPLATE_EXTENSIONS):
        normalized = normalized.rsplit(".", 1)[0]
    if not normalized.endswith(HTML_SUFFIX):
        normalized += HTML_SUFFIX
    return normalized


@dataclass(frozen=True)
class Resource:
    """A page known to the repository."""

    path: str
    title: str | None = None
    directory_title: str | None = None
    sort_info: float | None = None
    directory_sort_info: float | None = None
    body: str = ""
    source_file: Path | None = None

    @property
    def url(self) -> str:
        """Public URL, with index pages mapped to their directory."""
        url = f"/{self.path}"
        if url.endswith(f"/{INDEX_FILENAME}"):
            return url[: -len(INDEX_FILENAME)]
        return url


class ResourceRepository(Protocol):
    """Lookup and rendering capability supplied by the content source."""

    def find_resource_by_path(self, path: str) -> Resource | None: ...

    def render_body(
        self,
        resource: Resource,
        *,
        layout: bool = True,
        images: bool = True,
    ) -> str: ...


class _NoImagesRenderer(mistune.HTMLRenderer):
    """HTML renderer that drops image output."""

    def image(self, text: str, url: str, title: str | None = None) -> str:
        return ""


class SourceRepository:
    """Resource repository over a directory of markdown sources.

    Sources are indexed lazily by normalized path. Front matter delimited by
    ``---`` lines is parsed as YAML and supplies page metadata.
    """

    def __init__(self, source_dir: Path) -> None:
        """Initialize repository.

        Args:
            source_dir: Root directory containing page sources
        """
        self._source_dir = source_dir
        self._resources: dict[str, Resource] | None = None
        self._markdown = mistune.create_markdown()
        self._markdown_no_images = mistune.create_markdown(renderer=_NoImagesRenderer())

    @property
    def source_dir(self) -> Path:
        """Root directory containing page sources."""
        return self._source_dir

    def find_resource_by_path(self, path: str) -> Resource | None:
        """Find a resource by path.

        Args:
            path: Page path, normalized or not (e.g., "guide/setup.md")

        Returns:
            Resource if found, None otherwise
        """
        return self._index().get(normalize_path(path))

    def resources(self) -> list[Resource]:
        """All resources ordered by path."""
        return sorted(self._index().values(), key=lambda r: r.path)

    def render_body(
        self,
        resource: Resource,
        *,
        layout: bool = True,
        images: bool = True,
    ) -> str:
        """Render a resource body to HTML.

        Args:
            resource: Resource to render
            layout: Wrap the body in ``_layout.html`` if it exists
            images: Include images in the output

        Returns:
            Rendered HTML
        """
        if resource.source_file is not None and resource.source_file.suffix == HTML_SUFFIX:
            html = resource.body
        else:
            markdown = self._markdown if images else self._markdown_no_images
            html = str(markdown(resource.body))

        if layout:
            layout_path = self._source_dir / LAYOUT_FILENAME
            if layout_path.exists():
                template = layout_path.read_text(encoding="utf-8")
                html = LAYOUT_PLACEHOLDER.sub(lambda _: html, template)

        return html

    def invalidate(self) -> None:
        """Drop the resource index so the next lookup rescans sources."""
        self._resources = None

    def _index(self) -> dict[str, Resource]:
        if self._resources is None:
            self._resources = self._scan()
            logger.info(f"Indexed {len(self._resources)} pages from {self._source_dir}")
        return self._resources

    def _scan(self) -> dict[str, Resource]:
        resources: dict[str, Resource] = {}
        if not self._source_dir.is_dir():
            return resources

        for source_file in sorted(self._source_dir.rglob("*")):
            if not source_file.is_file():
                continue
            relative = source_file.relative_to(self._source_dir)
            if any(part.startswith((".", "_")) for part in relative.parts):
                continue
            if not source_file.name.endswith(SOURCE_EXTENSIONS):
                continue

            resource = _load_resource(source_file, relative.as_posix())
            resources[resource.path] = resource

        return resources


def _load_resource(source_file: Path, relative: str) -> Resource:
    """Read a source file and its front matter into a Resource."""
    text = source_file.read_text(encoding="utf-8")
    metadata, body = parse_front_matter(text)
    if metadata is None:
        logger.warning(f"Ignoring malformed front matter in {source_file}")
        metadata = {}

    return Resource(
        path=normalize_path(relative),
        title=_optional_str(metadata.get("title")),
        directory_title=_optional_str(metadata.get("directory_title")),
        sort_info=_optional_number(metadata.get("sort_info")),
        directory_sort_info=_optional_number(metadata.get("directory_sort_info")),
        body=body,
        source_file=source_file,
    )


def parse_front_matter(text: str) -> tuple[dict | None, str]:
    """Split YAML front matter from a source document.

    Args:
        text: Full document text

    Returns:
        Tuple of (metadata, body). Metadata is empty when the document has no
        front matter and None when the front matter is not a YAML mapping.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if match is None:
        return {}, text

    body = text[match.end() :]
    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError:
        return None, body

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        return None, body
    return data, body


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


def _optional_number(value: object) -> float | None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return value
