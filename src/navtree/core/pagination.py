"""Previous/next pagination over a flattened site tree.

The page order is the depth-first order in which the tree stores its
children. It does not apply the navigation sort, so it can differ from the
rendered menu when pages carry sort metadata.
"""

from navtree.core.context import RenderContext
from navtree.core.resources import Resource, normalize_path
from navtree.core.titles import resolve_path
from navtree.core.tree import Directory, Leaf, TreeNode
from navtree.core.types import URLPath


def flatten_tree(node: TreeNode) -> list[URLPath]:
    """Flatten a tree into the ordered list of page paths.

    Args:
        node: Tree or subtree to flatten

    Returns:
        Paths with a leading slash (e.g., "/guide/setup.html")
    """
    pages: list[URLPath] = []
    _flatten(node, pages)
    return pages


def _flatten(node: TreeNode, pages: list[URLPath]) -> None:
    match node:
        case Leaf(path=path):
            pages.append(URLPath(f"/{normalize_path(path)}"))
        case Directory(children=children):
            for child in children.values():
                _flatten(child, pages)


def position_of(pagelist: list[URLPath], context: RenderContext) -> int | None:
    """Find the current page in a page list.

    Returns:
        Index of the current page, None if it is not part of the list
    """
    if context.current_page is None:
        return None

    current = f"/{context.current_page.path}"
    for index, page_path in enumerate(pagelist):
        if page_path == current:
            return index
    return None


def is_first_page(pagelist: list[URLPath], context: RenderContext) -> bool:
    return position_of(pagelist, context) == 0


def is_last_page(pagelist: list[URLPath], context: RenderContext) -> bool:
    position = position_of(pagelist, context)
    return position is not None and position == len(pagelist) - 1


def previous_link(tree: TreeNode, context: RenderContext) -> str:
    """Link to the page before the current one.

    Args:
        tree: Site tree
        context: Render context with the current page

    Returns:
        Anchor markup, or an empty string on the first page or when the
        current page is not in the tree
    """
    pagelist = flatten_tree(tree)
    position = position_of(pagelist, context)
    if position is None or position == 0:
        return ""

    label = context.translate("previous_page", "Previous")
    target = _link_target(pagelist[position - 1], context)
    return context.link_to(label, target, css_class="previous")


def next_link(tree: TreeNode, context: RenderContext) -> str:
    """Link to the page after the current one.

    Args:
        tree: Site tree
        context: Render context with the current page

    Returns:
        Anchor markup, or an empty string on the last page or when the
        current page is not in the tree
    """
    pagelist = flatten_tree(tree)
    position = position_of(pagelist, context)
    if position is None or position == len(pagelist) - 1:
        return ""

    label = context.translate("next_page", "Next")
    target = _link_target(pagelist[position + 1], context)
    return context.link_to(label, target, css_class="next")


def _link_target(page_path: URLPath, context: RenderContext) -> Resource | str:
    """Resolve a page path so that links use the public resource URL."""
    return resolve_path(page_path, context) or page_path
