from __future__ import annotations

import enum
import logging

from markdown.extensions.toc import slugify

log = logging.getLogger(f"mkdocs.plugins.{__name__}")


class MarkdownEngine(enum.Enum):
    """The output convention that documents and anchors are named after."""

    DEFAULT = "default"
    GITHUB_WIKI = "githubWiki"
    """Flat namespace of documents, as in a GitHub wiki."""
    BITBUCKET = "bitbucket"
    """Anchors addressed by Bitbucket's auto-generated heading ids."""
    GITBOOK = "gitbook"
    """Like the default, plus a `SUMMARY.md` navigation document."""

    @classmethod
    def from_option(cls, value: MarkdownEngine | str | None) -> MarkdownEngine:
        if isinstance(value, cls):
            return value
        if not value:
            return cls.DEFAULT
        try:
            return cls(value)
        except ValueError:
            log.warning("Unknown markdown engine %r, falling back to %r", value, cls.DEFAULT.value)
            return cls.DEFAULT

    @property
    def home_url(self) -> str:
        return "Home.md" if self is MarkdownEngine.GITHUB_WIKI else "README.md"


def get_anchor_ref(text: str) -> str:
    """Normalize text the way a heading is turned into its id, e.g. `Static Foo` -> `static-foo`."""
    return slugify(text, "-")
