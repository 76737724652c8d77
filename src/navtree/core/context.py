"""Per-render context passed into every navigation entry point."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from html import escape
from typing import Protocol

from navtree.core.resources import Resource, ResourceRepository

DEFAULT_HOME_TITLE = "Home"

UNLIMITED_DEPTH = math.inf


class LinkBuilder(Protocol):
    def __call__(
        self,
        label: str,
        target: Resource | str,
        *,
        css_class: str | None = None,
    ) -> str: ...


class Translator(Protocol):
    def __call__(self, key: str, default: str) -> str: ...


def link_to(label: str, target: Resource | str, *, css_class: str | None = None) -> str:
    """Build an anchor element.

    Args:
        label: Link content
        target: Resource to link to, or a path
        css_class: Optional class attribute

    Returns:
        HTML anchor
    """
    href = target.url if isinstance(target, Resource) else target
    class_attr = f' class="{escape(css_class)}"' if css_class else ""
    return f'<a href="{escape(href)}"{class_attr}>{escape(label)}</a>'


def default_translate(key: str, default: str) -> str:
    return default


class Translations:
    """Translator backed by a mapping of keys to strings."""

    def __init__(self, strings: Mapping[str, str] | None = None) -> None:
        self._strings = dict(strings or {})

    def __call__(self, key: str, default: str) -> str:
        return self._strings.get(key, default)


@dataclass(frozen=True)
class RenderContext:
    """Everything a navigation render needs besides the tree itself.

    Attributes:
        repository: Resolves tree paths to resources
        current_page: Page being rendered; None when no page is current
        link_to: Builds anchor markup
        translate: Looks up localized labels
        home_title: Title used for the site root when nothing better exists
    """

    repository: ResourceRepository
    current_page: Resource | None = None
    link_to: LinkBuilder = field(default=link_to)
    translate: Translator = field(default=default_translate)
    home_title: str = DEFAULT_HOME_TITLE

    def is_current(self, resource: Resource) -> bool:
        """Check whether a resource is the page being rendered."""
        return self.current_page is not None and resource.path == self.current_page.path
