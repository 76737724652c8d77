"""Navigation tree renderer.

Turns a site tree into nested ``<li>``/``<ul>`` markup. Every render returns
the markup together with an active flag so that parents can mark themselves
active when any descendant is the current page.
"""

from navtree.core.context import UNLIMITED_DEPTH, RenderContext
from navtree.core.titles import build_link, discover_title, format_directory_name, resolve_path
from navtree.core.tree import DIRECTORY_INDEX, Directory, Leaf, TreeNode

DEFAULT_SORT_KEY = 1000

INDEX_SORT_KEY = 0


def tree_to_html(
    tree: Directory,
    context: RenderContext,
    *,
    max_depth: float = UNLIMITED_DEPTH,
    hide_directory_index: bool = True,
) -> str:
    """Render a whole site tree to navigation markup.

    Args:
        tree: Root directory of the site tree
        context: Render context
        max_depth: Deepest directory level to render
        hide_directory_index: Leave directory index pages out of nested lists

    Returns:
        Concatenated list items for the top level (may be empty)
    """
    html, _ = render(tree, context, max_depth, hide_directory_index=hide_directory_index)
    return html


def render(
    node: TreeNode,
    context: RenderContext,
    max_depth: float = UNLIMITED_DEPTH,
    key: str | None = None,
    level: int = 0,
    *,
    hide_directory_index: bool = True,
) -> tuple[str, bool]:
    """Recursively render a tree node.

    Args:
        node: Node to render
        context: Render context
        max_depth: Deepest directory level to render
        key: Key of the node in its parent; None for the root
        level: Depth of the node, 0 for the root
        hide_directory_index: Leave directory index pages out of nested lists

    Returns:
        Tuple of (markup, whether the node contains the current page)
    """
    match node:
        case Leaf(path=path):
            return _render_leaf(path, context)
        case Directory(children=children):
            if key is None:
                return _render_children(
                    sort_children(children, context),
                    context,
                    max_depth,
                    level,
                    hide_directory_index,
                )
            if max_depth < level + 1:
                return "", False
            return _render_directory(
                key, children, context, max_depth, level, hide_directory_index
            )
    return "", False


def _render_leaf(path: str, context: RenderContext) -> tuple[str, bool]:
    resource = resolve_path(path, context)
    if resource is None:
        return "", False

    active = context.is_current(resource)
    link = build_link(discover_title(resource, context), resource, context)
    return f'<li class="{_classes("child", active)}">{link}</li>', active


def _render_directory(
    key: str,
    children: dict[str, TreeNode],
    context: RenderContext,
    max_depth: float,
    level: int,
    hide_directory_index: bool,
) -> tuple[str, bool]:
    items = sort_children(children, context)
    if hide_directory_index:
        items = [(k, child) for k, child in items if k != DIRECTORY_INDEX]

    content, children_active = _render_children(
        items, context, max_depth, level, hide_directory_index
    )
    label, label_active = format_directory_name(key, children, context)
    active = children_active or label_active

    html = (
        f'<li class="{_classes("parent", active)}">'
        f'<span class="parent-label">{label}</span>'
        f"<ul>{content}</ul>"
        "</li>"
    )
    return html, active


def _render_children(
    items: list[tuple[str, TreeNode]],
    context: RenderContext,
    max_depth: float,
    level: int,
    hide_directory_index: bool,
) -> tuple[str, bool]:
    parts: list[str] = []
    active = False
    for child_key, child in items:
        html, child_active = render(
            child,
            context,
            max_depth,
            child_key,
            level + 1,
            hide_directory_index=hide_directory_index,
        )
        parts.append(html)
        active = active or child_active
    return "".join(parts), active


def _classes(base: str, active: bool) -> str:
    return f"{base} active" if active else base


def sort_key(key: str, child: TreeNode, context: RenderContext) -> float:
    """Ordering key for a directory child.

    Directories sort by their index page's ``directory_sort_info``, pages by
    their ``sort_info``. Without metadata, index pages come first and
    everything else after explicitly ordered entries.
    """
    match child:
        case Directory() if child.index is not None:
            resource = resolve_path(child.index.path, context)
            if resource is not None and resource.directory_sort_info is not None:
                return resource.directory_sort_info
        case Leaf(path=path):
            resource = resolve_path(path, context)
            if resource is not None and resource.sort_info is not None:
                return resource.sort_info

    if key == DIRECTORY_INDEX:
        return INDEX_SORT_KEY
    return DEFAULT_SORT_KEY


def sort_children(
    children: dict[str, TreeNode],
    context: RenderContext,
) -> list[tuple[str, TreeNode]]:
    """Sort directory children, keeping the stored order for ties."""
    return sorted(children.items(), key=lambda item: sort_key(item[0], item[1], context))
