"""navtree - Navigation menus and pagination for documentation sites."""

from navtree.core.context import RenderContext, link_to
from navtree.core.pagination import flatten_tree, next_link, position_of, previous_link
from navtree.core.renderer import render, tree_to_html
from navtree.core.resources import Resource, ResourceRepository, SourceRepository
from navtree.core.titles import discover_title, format_directory_name, resolve_path
from navtree.core.tree import DIRECTORY_INDEX, Directory, Leaf, TreeNode

__all__ = [
    "DIRECTORY_INDEX",
    "Directory",
    "Leaf",
    "RenderContext",
    "Resource",
    "ResourceRepository",
    "SourceRepository",
    "TreeNode",
    "discover_title",
    "flatten_tree",
    "format_directory_name",
    "link_to",
    "next_link",
    "position_of",
    "previous_link",
    "render",
    "resolve_path",
    "tree_to_html",
]
