"""Navigation tree structure.

A site tree is a keyless root Directory whose children map keys to either
Leaf nodes (single pages) or nested Directory nodes. The reserved
``directory_index`` key holds a directory's own landing page.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from navtree.core.resources import SOURCE_EXTENSIONS

logger = logging.getLogger(__name__)

DIRECTORY_INDEX = "directory_index"


@dataclass(frozen=True)
class Leaf:
    """Tree node for a single source page."""

    path: str


@dataclass
class Directory:
    """Tree node grouping child nodes under string keys."""

    children: dict[str, "TreeNode"] = field(default_factory=dict)

    @property
    def index(self) -> Leaf | None:
        """Landing page of this directory, if any."""
        node = self.children.get(DIRECTORY_INDEX)
        return node if isinstance(node, Leaf) else None


TreeNode = Leaf | Directory


def tree_from_data(data: object) -> Directory:
    """Build a tree from plain nested data.

    Accepts the shape of a ``tree.yml`` data file: mappings for directories
    and strings for pages.

    Args:
        data: Mapping of keys to strings or nested mappings (None for empty)

    Returns:
        Root Directory

    Raises:
        ValueError: If the data contains anything but mappings and strings
    """
    if data is None:
        return Directory()
    if not isinstance(data, dict):
        raise ValueError("tree root must be a mapping")
    return _directory_from_data(data, "")


def _directory_from_data(data: dict, location: str) -> Directory:
    children: dict[str, TreeNode] = {}
    for key, value in data.items():
        key = str(key)
        child_location = f"{location}/{key}" if location else key
        if isinstance(value, str):
            children[key] = Leaf(value)
        elif isinstance(value, dict):
            if key == DIRECTORY_INDEX:
                raise ValueError(f"{child_location} must be a page path")
            children[key] = _directory_from_data(value, child_location)
        else:
            raise ValueError(f"{child_location} must be a page path or a mapping")
    return Directory(children)


def load_tree(path: Path) -> Directory:
    """Load a tree from a YAML data file.

    Args:
        path: Path to the YAML file

    Returns:
        Root Directory

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file content is not a valid tree
    """
    if not path.exists():
        raise FileNotFoundError(f"Tree file not found: {path}")

    with path.open(encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid tree file {path}: {e}") from e

    return tree_from_data(data)


def build_source_tree(source_dir: Path, ignore: list[str] | None = None) -> Directory:
    """Build a tree by scanning a source directory.

    Markdown files become leaves keyed by file name in name order,
    sub-directories become nested directories, and ``index`` files become
    the directory index, stored first so that pagination reaches a
    directory's landing page before its other pages. Hidden
    files, partials (leading underscore) and ignored names are skipped, and
    directories without navigable content are dropped.

    Args:
        source_dir: Root directory containing page sources
        ignore: File or directory names to skip

    Returns:
        Root Directory (empty if source_dir doesn't exist)
    """
    if not source_dir.is_dir():
        logger.debug(f"Source directory {source_dir} not found, using empty tree")
        return Directory()

    ignored = set(ignore or [])
    return _scan_directory(source_dir, source_dir, ignored) or Directory()


def _scan_directory(path: Path, source_dir: Path, ignored: set[str]) -> Directory | None:
    children: dict[str, TreeNode] = {}

    for entry in sorted(path.iterdir(), key=lambda p: p.name):
        if entry.name.startswith((".", "_")) or entry.name in ignored:
            continue

        if entry.is_dir():
            subtree = _scan_directory(entry, source_dir, ignored)
            if subtree is not None:
                children[entry.name] = subtree
            continue

        if not entry.name.endswith(SOURCE_EXTENSIONS):
            continue

        relative = entry.relative_to(source_dir).as_posix()
        if entry.name.split(".", 1)[0] == "index":
            children[DIRECTORY_INDEX] = Leaf(relative)
        else:
            children[entry.name] = Leaf(relative)

    if not children:
        return None
    if DIRECTORY_INDEX in children:
        children = {DIRECTORY_INDEX: children.pop(DIRECTORY_INDEX), **children}
    return Directory(children)
