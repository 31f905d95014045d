from __future__ import annotations

import dataclasses
import logging
import posixpath
import re
from typing import Any

from .engine import MarkdownEngine, get_anchor_ref
from .items import ProjectReflection, Reflection, ReflectionKind
from .mappings import MappingPolicy

log = logging.getLogger(f"mkdocs.plugins.{__name__}")

URL_PREFIX = re.compile(r"^(http|ftp)s?://")
"""Urls assigned from outside (links to other sites) are never recomputed."""


@dataclasses.dataclass(frozen=True)
class UrlMapping:
    """A document to be rendered: which model goes to which file, with which template."""

    url: str
    model: Any
    template: str


class UrlBuilder:
    def __init__(self, engine: MarkdownEngine, mappings: MappingPolicy):
        """Create a builder for one generation run.

        Each reflection is assigned at most once per builder, even if it's reached twice.
        """
        self.engine = engine
        self.mappings = mappings
        self._assigned: set[int] = set()

    def build_urls(self, reflection: Reflection, urls: list[UrlMapping]) -> list[UrlMapping]:
        """Build the url for the given reflection and all of its children.

        Params:
            reflection: The reflection the url should be created for.
            urls: The list the document mappings are appended to.
        Returns:
            The same `urls` list.
        """
        mapping = self.mappings.get_directive(reflection.kind)
        if mapping:
            if not self._is_assigned(reflection):
                if self.engine is MarkdownEngine.GITHUB_WIKI:
                    url = self.get_url(reflection, separator="-") + ".md"
                else:
                    url = posixpath.join(mapping.directory, self.get_url(reflection) + ".md")
                log.debug("%r -> %s", reflection, url)

                urls.append(UrlMapping(url, reflection, mapping.template))
                reflection.url = url
                reflection.has_own_document = True
                self._assigned.add(id(reflection))

            for child in reflection.children.values():
                # Both conditions fold every child into this document.
                if mapping.is_leaf_group or self.engine is MarkdownEngine.GITHUB_WIKI:
                    self.apply_anchor_url(child, reflection)
                else:
                    self.build_urls(child, urls)
        elif reflection.parent:
            self.apply_anchor_url(reflection, reflection.parent)

        return urls

    def apply_anchor_url(self, reflection: Reflection, container: Reflection) -> None:
        """Assign an anchor url to the given reflection and all of its children.

        Params:
            reflection: The reflection an anchor url should be created for.
            container: The nearest reflection having its own document.
        """
        if not self._is_assigned(reflection):
            anchor = self.get_url(reflection, container, ".")
            if reflection.is_static:
                anchor = "static-" + anchor

            anchor_ref = anchor
            if self.engine is MarkdownEngine.BITBUCKET:
                anchor_prefix = ""
                if reflection.kind is ReflectionKind.OBJECT_LITERAL:
                    anchor_prefix += "object-literal-"
                for flag in reflection.flags:
                    anchor_prefix += f"{flag.value}-"
                prefix_ref = get_anchor_ref(anchor_prefix)
                reflection_ref = get_anchor_ref(reflection.name)
                anchor_ref = f"markdown-header-{prefix_ref}{reflection_ref}"

            reflection.url = (container.url or "") + "#" + anchor_ref
            reflection.anchor = anchor
            reflection.has_own_document = False
            self._assigned.add(id(reflection))

        for child in reflection.children.values():
            self.apply_anchor_url(child, container)

    def get_url(
        self, reflection: Reflection, relative: Reflection | None = None, separator: str = "."
    ) -> str:
        """Return the name of the given reflection, prefixed by the names of its parents.

        Params:
            reflection: The reflection the name should be generated for.
            relative: The parent the chain of names should stop on.
            separator: What to join the names with.
        """
        url = reflection.alias
        if self.engine is MarkdownEngine.GITHUB_WIKI:
            url = url.replace("_", "")

        parent = reflection.parent
        if parent and parent is not relative and not isinstance(parent, ProjectReflection):
            url = self.get_url(parent, relative, separator) + separator + url
        return url

    def _is_assigned(self, reflection: Reflection) -> bool:
        if reflection.url and URL_PREFIX.match(reflection.url):
            return True
        return id(reflection) in self._assigned
