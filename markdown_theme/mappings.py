from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from mkdocs.exceptions import PluginError

from .items import ReflectionKind


@dataclasses.dataclass(frozen=True)
class MappingDirective:
    """How reflections of one kind are given their own documents."""

    directory: str
    """The output subfolder for documents of this kind."""
    template: str = "reflection.md"
    """The template the document is rendered with."""
    is_leaf_group: bool = False
    """Whether all descendants are folded into this document as anchors."""


DEFAULT_MAPPINGS: Mapping[ReflectionKind, MappingDirective] = {
    ReflectionKind.CLASS: MappingDirective("classes"),
    ReflectionKind.INTERFACE: MappingDirective("interfaces"),
    ReflectionKind.ENUM: MappingDirective("enums"),
    ReflectionKind.MODULE: MappingDirective("modules"),
    ReflectionKind.EXTERNAL_MODULE: MappingDirective("modules"),
}


class MappingPolicy:
    def __init__(self, directives: Mapping[ReflectionKind, MappingDirective] = DEFAULT_MAPPINGS):
        self.directives = dict(directives)

    @classmethod
    def from_config(cls, config: Mapping[str, Mapping[str, Any] | None]) -> MappingPolicy:
        """Override the default directives, e.g. `{"module": {"directory": "modules", "is_leaf_group": True}}`.

        A `None` value means reflections of that kind never get their own document.

        Raises:
            PluginError: When a kind or a directive field is not recognized.
        """
        directives = dict(DEFAULT_MAPPINGS)
        for name, options in config.items():
            try:
                kind = ReflectionKind[name.upper()]
            except KeyError:
                raise PluginError(f"Unknown reflection kind in mappings: {name!r}") from None
            if options is None:
                directives.pop(kind, None)
                continue
            try:
                directives[kind] = MappingDirective(**options)
            except TypeError as e:
                raise PluginError(f"Invalid mapping for {name!r}: {e}") from None
        return cls(directives)

    def get_directive(self, kind: ReflectionKind) -> MappingDirective | None:
        return self.directives.get(kind)
