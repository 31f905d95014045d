from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from typing import Any

from cached_property import cached_property

from .items import Reflection
from .urls import UrlMapping


@dataclasses.dataclass
class NavigationItem:
    """An entry of the navigation tree."""

    title: str
    url: str | None = None
    dedicated_urls: list[Any] | None = None
    """Urls of the standalone documents under this entry."""
    children: list[NavigationItem] = dataclasses.field(default_factory=list)


class NavigationLink:
    """A dedicated url whose title is looked up among the rendered documents when first needed."""

    def __init__(self, url: str, urls: Sequence[UrlMapping]):
        self.url = url
        self._urls = urls

    @cached_property
    def title(self) -> str | None:
        mapping = next((m for m in self._urls if m.url == self.url), None)
        return mapping.model.name if mapping else None

    def __repr__(self) -> str:
        return f"NavigationLink({self.url!r})"


def get_navigation(entry_point: Reflection) -> NavigationItem:
    """Build the navigation tree of an already resolved reflection tree."""
    root = NavigationItem(entry_point.name)
    for child in entry_point.children.values():
        if not child.has_own_document:
            continue
        dedicated_urls = [r.url for r in child.walk() if r.has_own_document]
        root.children.append(NavigationItem(child.name, child.url, dedicated_urls or None))
    return root


def build_summary(navigation: NavigationItem, urls: Sequence[UrlMapping]) -> UrlMapping:
    """Make the `SUMMARY.md` document out of the top-level entries of the navigation."""
    entries = []
    for item in navigation.children:
        dedicated_urls = None
        if item.dedicated_urls:
            dedicated_urls = [NavigationLink(url, urls) for url in item.dedicated_urls]
        entries.append(dataclasses.replace(item, dedicated_urls=dedicated_urls))
    return UrlMapping("SUMMARY.md", {"navigation": entries}, "summary.md")
