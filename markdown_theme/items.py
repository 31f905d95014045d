from __future__ import annotations

import enum
import itertools
import re
from collections.abc import Iterable, Iterator

from cached_property import cached_property
from mkdocstrings import CollectionError


class ReflectionKind(enum.IntEnum):
    """The kind of a reflection, using the numeric codes of the serialized reflection JSON."""

    PROJECT = 0
    EXTERNAL_MODULE = 1
    MODULE = 2
    ENUM = 4
    ENUM_MEMBER = 16
    VARIABLE = 32
    FUNCTION = 64
    CLASS = 128
    INTERFACE = 256
    CONSTRUCTOR = 512
    PROPERTY = 1024
    METHOD = 2048
    CALL_SIGNATURE = 4096
    INDEX_SIGNATURE = 8192
    CONSTRUCTOR_SIGNATURE = 16384
    PARAMETER = 32768
    TYPE_LITERAL = 65536
    TYPE_PARAMETER = 131072
    ACCESSOR = 262144
    GET_SIGNATURE = 524288
    SET_SIGNATURE = 1048576
    OBJECT_LITERAL = 2097152
    TYPE_ALIAS = 4194304
    EVENT = 8388608


class ReflectionFlag(enum.Enum):
    """A qualifier of a reflection. The value is the token used in heading-style anchors."""

    PRIVATE = "private"
    PROTECTED = "protected"
    PUBLIC = "public"
    STATIC = "static"
    EXPORTED = "exported"
    EXPORT_ASSIGNMENT = "export-assignment"
    EXTERNAL = "external"
    OPTIONAL = "optional"
    DEFAULT_VALUE = "default-value"
    REST = "rest"
    CONSTRUCTOR_PROPERTY = "constructor-property"
    ABSTRACT = "abstract"
    CONST = "const"
    LET = "let"


class Reflection:
    """A documentable item: a module, a class, a member...

    The `url`, `anchor` and `has_own_document` attributes are unset until a
    [UrlBuilder][markdown_theme.urls.UrlBuilder] has resolved this item.
    """

    _ids = itertools.count(1)

    parent: Reflection | None = None
    """The item that is the parent namespace for this item."""

    url: str | None = None
    """Where this item is rendered: a document path, possibly followed by `#anchor`."""
    anchor: str | None = None
    """The bare anchor of this item inside its container's document."""
    has_own_document: bool = False
    """Whether this item is the subject of a standalone document."""

    def __init__(
        self,
        name: str,
        kind: ReflectionKind,
        parent: Reflection | None = None,
        flags: Iterable[ReflectionFlag] = (),
        id: int | None = None,
    ):
        self.id = next(self._ids) if id is None else id
        self.name = name
        self.kind = kind
        self.flags = tuple(flags)
        # Keyed by position among the siblings; ids may repeat in the input.
        self.children: dict[int, Reflection] = {}
        self._aliases: set[str] = set()
        self.parent = parent
        if parent is not None:
            parent.children[len(parent.children)] = self

    @property
    def is_static(self) -> bool:
        return ReflectionFlag.STATIC in self.flags

    @property
    def full_name(self) -> str:
        """The path of this item, e.g. `Foo.Bar.baz`."""
        if self.parent is None or isinstance(self.parent, ProjectReflection):
            return self.name
        return self.parent.full_name + "." + self.name

    @cached_property
    def alias(self) -> str:
        """The name of this item made safe for file names, unique among its siblings, e.g. `Foo` or `foo_bar-1`."""
        alias = re.sub(r"[^a-z0-9]", "_", self.name, flags=re.IGNORECASE)
        if not alias:
            alias = f"reflection-{self.id}"
        if self.parent is not None:
            taken = self.parent._aliases
            suffix = ""
            index = 0
            while alias + suffix in taken:
                index += 1
                suffix = f"-{index}"
            alias += suffix
            taken.add(alias)
        return alias

    def walk(self) -> Iterator[Reflection]:
        """Recursively iterate over all items under this item (excl. itself), parents first."""
        for child in self.children.values():
            yield child
            yield from child.walk()

    def lookup(self, identifier: str) -> Reflection:
        """Find an item by its dotted name, relative to this item or any of its parents.

        Raises:
            CollectionError: When an item by that identifier couldn't be found.
        """
        obj = self
        for name in identifier.split("."):
            obj = next((c for c in obj.children.values() if c.name == name), None)
            if obj is None:
                if self.parent:
                    return self.parent.lookup(identifier)
                raise CollectionError(f"{identifier!r} - can't find {name!r}")
        return obj

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name.lower()} {self.full_name!r})"


class ProjectReflection(Reflection):
    """The synthetic root of the tree. It is never assigned a url itself."""

    readme: str | None = None
    """The text of the project's readme, if any."""

    def __init__(self, name: str, readme: str | None = None, id: int | None = 0):
        super().__init__(name, ReflectionKind.PROJECT, id=id)
        self.readme = readme

    @property
    def full_name(self) -> str:
        return ""
