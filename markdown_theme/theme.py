from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from mkdocs.exceptions import PluginError
from mkdocstrings import CollectionError

from .engine import MarkdownEngine
from .items import ProjectReflection, Reflection
from .mappings import MappingPolicy
from .navigation import build_summary, get_navigation
from .renderer import MarkdownRenderer
from .urls import UrlBuilder, UrlMapping

log = logging.getLogger(f"mkdocs.plugins.{__name__}")


class MarkdownTheme:
    def __init__(
        self,
        engine: MarkdownEngine | str = MarkdownEngine.DEFAULT,
        readme: str | None = None,
        entry_point: str | None = None,
        mappings: Mapping[str, Mapping[str, Any] | None] = {},
        custom_templates: str | None = None,
    ):
        """Create a theme that maps a reflection tree to Markdown documents.

        Params:
            engine: The output convention, e.g. `"githubWiki"`.
            readme: `"none"` to leave the readme out of the home document.
            entry_point: Dotted name of the reflection to document instead of the whole project.
            mappings: Overrides of the [directives][markdown_theme.mappings.MappingPolicy.from_config] per kind.
            custom_templates: A directory with templates to use instead of the bundled ones.
        """
        self.engine = MarkdownEngine.from_option(engine)
        self.readme = readme
        self.entry_point = entry_point
        self.mappings = MappingPolicy.from_config(mappings)
        self.renderer = MarkdownRenderer(custom_templates)

    def get_entry_point(self, project: ProjectReflection) -> Reflection:
        if self.entry_point:
            try:
                return project.lookup(self.entry_point)
            except CollectionError as e:
                log.warning(
                    "The entry point %r could not be found (%s), using the project", self.entry_point, e
                )
        return project

    def get_urls(self, project: ProjectReflection) -> list[UrlMapping]:
        """Map the reflections of the given project to the documents they're rendered to.

        The home document is always first; for gitbook, `SUMMARY.md` is always last.
        """
        builder = UrlBuilder(self.engine, self.mappings)
        entry_point = self.get_entry_point(project)

        # Home document with additional context.
        index = IndexView(
            entry_point,
            display_readme=self.readme != "none",
            is_index=True,
            base_heading_level="##",
        )
        urls = [UrlMapping(self.engine.home_url, index, "reflection.md")]

        for child in entry_point.children.values():
            builder.build_urls(child, urls)

        if self.engine is MarkdownEngine.GITBOOK:
            urls.append(build_summary(get_navigation(entry_point), urls))
        return urls

    def generate(self, project: ProjectReflection, output_dir: str) -> list[UrlMapping]:
        """Resolve the documents of the project and write them into `output_dir`.

        Raises:
            PluginError: When `output_dir` has contents that weren't generated by this theme.
        """
        if os.path.isdir(output_dir) and os.listdir(output_dir):
            if not is_output_directory(output_dir):
                raise PluginError(
                    f"The output directory {output_dir!r} exists "
                    "but does not seem to contain generated documentation"
                )
        urls = self.get_urls(project)
        self.renderer.write(urls, output_dir)
        return urls


class IndexView:
    """The model of the home document: the entry point plus a few fields for the template."""

    def __init__(self, reflection: Reflection, **fields: Any):
        self.reflection = reflection
        self.__dict__.update(fields)

    def __getattr__(self, name: str):
        if name == "reflection":
            raise AttributeError(name)
        return getattr(self.reflection, name)

    def __repr__(self) -> str:
        return f"IndexView({self.reflection!r})"


def is_output_directory(path: str) -> bool:
    """Test whether the given directory seems to contain documentation generated by this theme."""
    files = os.listdir(path)
    return (
        os.path.exists(os.path.join(path, "README.md"))
        or os.path.exists(os.path.join(path, "Home.md"))
        or (len(files) == 1 and os.path.splitext(files[0])[1] == ".md")
    )
