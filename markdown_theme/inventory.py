from __future__ import annotations

import json
import logging
import posixpath
import re
from collections.abc import Iterator, Mapping
from typing import IO, Any

from .items import ProjectReflection, Reflection, ReflectionFlag, ReflectionKind

log = logging.getLogger(f"mkdocs.plugins.{__name__}")


def read(file: IO) -> ProjectReflection:
    """Read a reflection tree from its JSON serialization."""
    return load(json.load(file))


def load(data: Mapping[str, Any]) -> ProjectReflection:
    project = ProjectReflection(data["name"], readme=data.get("readme"), id=data.get("id", 0))
    for child in data.get("children", ()):
        _load_child(child, project)
    return project


def _load_child(data: Mapping[str, Any], parent: Reflection) -> Reflection:
    try:
        kind = ReflectionKind(data["kind"])
    except ValueError:
        raise TypeError(
            "{kind!r} is not a recognized reflection kind (in {name!r})".format_map(data)
        ) from None
    reflection = Reflection(
        data["name"], kind, parent, flags=_load_flags(data.get("flags", {})), id=data.get("id")
    )
    for child in data.get("children", ()):
        _load_child(child, reflection)
    return reflection


def _load_flags(flags: Mapping[str, bool]) -> Iterator[ReflectionFlag]:
    for key, value in flags.items():
        if not value:
            continue
        # "isConstructorProperty" -> "constructor-property"
        token = re.sub(r"(?<!^)(?=[A-Z])", "-", re.sub(r"^is", "", key)).lower()
        try:
            yield ReflectionFlag(token)
        except ValueError:
            log.debug("Skipping unknown flag %r", key)


def list_objects(project: ProjectReflection) -> Iterator[tuple[str, str]]:
    """List the full name and url of every reflection that has been resolved."""
    for obj in project.walk():
        if obj.url:
            yield obj.full_name, obj.url


def list_object_urls(project: ProjectReflection, base_url: str = "") -> Iterator[tuple[str, str]]:
    for full_name, url in list_objects(project):
        yield full_name, posixpath.join(base_url, url)
