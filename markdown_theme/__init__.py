from __future__ import annotations

from . import inventory
from .engine import MarkdownEngine
from .items import ProjectReflection, Reflection, ReflectionFlag, ReflectionKind
from .mappings import MappingDirective, MappingPolicy
from .theme import MarkdownTheme
from .urls import UrlBuilder, UrlMapping

__version__ = "0.1.0"

__all__ = [
    "MappingDirective",
    "MappingPolicy",
    "MarkdownEngine",
    "MarkdownTheme",
    "ProjectReflection",
    "Reflection",
    "ReflectionFlag",
    "ReflectionKind",
    "UrlBuilder",
    "UrlMapping",
    "get_theme",
    "inventory",
]

get_theme = MarkdownTheme
