from __future__ import annotations

import logging
import os
import posixpath
from collections.abc import Sequence
from typing import TYPE_CHECKING

import jinja2

if TYPE_CHECKING:
    from .urls import UrlMapping

log = logging.getLogger(f"mkdocs.plugins.{__name__}")


class MarkdownRenderer:
    def __init__(self, custom_templates: str | None = None):
        loaders: list[jinja2.BaseLoader] = []
        if custom_templates:
            loaders.append(jinja2.FileSystemLoader(custom_templates))
        loaders.append(jinja2.PackageLoader("markdown_theme", "templates"))

        self.env = jinja2.Environment(loader=jinja2.ChoiceLoader(loaders), autoescape=False)
        self.env.trim_blocks = True
        self.env.lstrip_blocks = True
        self.env.keep_trailing_newline = False
        self.env.undefined = jinja2.StrictUndefined

        self.env.filters["relative_url"] = relative_url

    def render(self, mapping: UrlMapping) -> str:
        template = self.env.get_template(mapping.template)
        return template.render(model=mapping.model, url=mapping.url)

    def write(self, urls: Sequence[UrlMapping], output_dir: str) -> None:
        for mapping in urls:
            path = os.path.join(output_dir, *mapping.url.split("/"))
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(self.render(mapping) + "\n")
        log.info("Wrote %d documents to %s", len(urls), output_dir)


def relative_url(target: str, page: str) -> str:
    """Make a url that is relative to the output root work from the given page, e.g. `../classes/Foo.md#bar`."""
    path, sep, fragment = target.partition("#")
    if path:
        path = posixpath.relpath(path, posixpath.dirname(page) or ".")
    return path + sep + fragment
