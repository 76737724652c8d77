"""Title and link resolution for tree entries.

Titles are discovered in order from:
1) the front matter title,
2) the first H1 of the rendered page,
3) the configured home title for the site root,
4) the humanized file name.
"""

import logging
import re
from html import escape, unescape
from posixpath import splitext
from urllib.parse import unquote

from navtree.core.context import RenderContext
from navtree.core.resources import Resource, normalize_path
from navtree.core.tree import DIRECTORY_INDEX, Leaf, TreeNode

logger = logging.getLogger(__name__)

H1_PATTERN = re.compile(r"<h1(?:\s[^>]*)?>(.*?)</h1>", re.DOTALL | re.IGNORECASE)

TAG_PATTERN = re.compile(r"<[^>]+>")

# Hyphens joining words, as opposed to " - " separators
INNER_HYPHEN_PATTERN = re.compile(r"(?<!\s)-(?!\s)")


def resolve_path(path: str, context: RenderContext) -> Resource | None:
    """Resolve a tree entry to a resource.

    Args:
        path: Page path as found in the tree (e.g., "guide/setup.md")
        context: Render context providing the repository

    Returns:
        Resource if the path resolves, None otherwise
    """
    resource = context.repository.find_resource_by_path(normalize_path(path))
    if resource is None:
        logger.debug(f"Skipping unresolved tree entry: {path}")
    return resource


def discover_title(resource: Resource, context: RenderContext) -> str:
    """Find the display title for a resource.

    Args:
        resource: Resource to title
        context: Render context providing the repository and home title

    Returns:
        Display title
    """
    if resource.title:
        return resource.title

    html = context.repository.render_body(resource, layout=False, images=False)
    match = H1_PATTERN.search(html)
    if match is not None:
        heading = unescape(TAG_PATTERN.sub("", match.group(1))).strip()
        if heading:
            return heading

    if resource.url == "/":
        return context.home_title

    return title_from_url(resource.url)


def title_from_url(url: str) -> str:
    """Derive a title from the last segment of a URL.

    "/guide/getting-started.html" becomes "Getting Started".
    """
    segment = url.rstrip("/").rsplit("/", 1)[-1]
    stem, _ = splitext(unquote(segment))
    return titleize(stem.replace("-", " ").replace("_", " "))


def titleize(text: str) -> str:
    """Capitalize the first letter of every word."""
    return " ".join(word[:1].upper() + word[1:] for word in text.split())


def build_link(title: str, resource: Resource, context: RenderContext) -> str:
    return context.link_to(title, resource)


def format_directory_name(
    key: str,
    children: dict[str, TreeNode],
    context: RenderContext,
) -> tuple[str, bool]:
    """Build the label for a directory node.

    Uses a link to the directory index when it resolves, otherwise a plain
    label derived from the key, e.g. "1%20-%20sink-or_swim" becomes
    "1 - Sink Or Swim".

    Args:
        key: Directory key in the tree
        children: Directory children, possibly holding a directory index
        context: Render context

    Returns:
        Tuple of (label markup, whether the index page is current)
    """
    index = children.get(DIRECTORY_INDEX)
    if isinstance(index, Leaf):
        resource = resolve_path(index.path, context)
        if resource is not None:
            title = resource.directory_title or discover_title(resource, context)
            return build_link(title, resource, context), context.is_current(resource)

    name = key.replace("%20", " ")
    name = INNER_HYPHEN_PATTERN.sub(" ", name)
    name = name.replace("_", " ")
    return escape(titleize(name)), False
