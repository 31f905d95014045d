import io
import json

import pytest
from mkdocstrings import CollectionError

from markdown_theme import MarkdownTheme, Reflection, ReflectionFlag, ReflectionKind, inventory

DATA = {
    "id": 0,
    "name": "demo",
    "kind": 0,
    "readme": "Some readme.",
    "children": [
        {
            "id": 1,
            "name": "Foo",
            "kind": 2,
            "flags": {"isExported": True},
            "children": [
                {
                    "id": 2,
                    "name": "Bar",
                    "kind": 128,
                    "children": [
                        {
                            "id": 3,
                            "name": "baz",
                            "kind": 1024,
                            "flags": {
                                "isStatic": True,
                                "isConstructorProperty": True,
                                "isWeird": True,
                            },
                        },
                    ],
                },
            ],
        },
    ],
}


def test_read():
    project = inventory.read(io.StringIO(json.dumps(DATA)))

    assert project.name == "demo"
    assert project.readme == "Some readme."
    assert project.full_name == ""
    foo = project.children[0]
    assert foo.kind is ReflectionKind.MODULE
    assert foo.flags == (ReflectionFlag.EXPORTED,)
    baz = project.lookup("Foo.Bar.baz")
    assert baz.id == 3
    assert baz.flags == (ReflectionFlag.STATIC, ReflectionFlag.CONSTRUCTOR_PROPERTY)
    assert baz.is_static
    assert baz.parent is foo.children[0]


def test_unknown_kind():
    with pytest.raises(TypeError, match="'Foo'"):
        inventory.load({"name": "demo", "children": [{"name": "Foo", "kind": 3}]})


def test_lookup():
    project = inventory.load(DATA)
    bar = project.lookup("Foo.Bar")

    assert bar.lookup("baz").full_name == "Foo.Bar.baz"
    # Falls back to the parents.
    assert bar.lookup("Foo").full_name == "Foo"
    with pytest.raises(CollectionError, match="'Qux'"):
        bar.lookup("Foo.Qux")


def test_list_object_urls():
    project = inventory.load(DATA)
    MarkdownTheme().get_urls(project)

    assert dict(inventory.list_object_urls(project, "https://example.com/api")) == {
        "Foo": "https://example.com/api/modules/Foo.md",
        "Foo.Bar": "https://example.com/api/classes/Foo.Bar.md",
        "Foo.Bar.baz": "https://example.com/api/classes/Foo.Bar.md#static-baz",
    }


def test_list_objects_skips_unresolved():
    project = inventory.load(DATA)

    assert list(inventory.list_objects(project)) == []


def test_siblings_with_and_without_ids_are_kept():
    # The id "B" will be given automatically ("M" takes the one before).
    next_id = next(Reflection._ids) + 2
    project = inventory.load(
        {
            "name": "demo",
            "children": [
                {
                    "name": "M",
                    "kind": 2,
                    "children": [
                        {"name": "A", "kind": 128, "id": next_id},
                        {"name": "B", "kind": 128},
                    ],
                },
            ],
        }
    )
    module = project.lookup("M")

    urls = MarkdownTheme().get_urls(project)

    assert [c.name for c in module.children.values()] == ["A", "B"]
    assert [m.url for m in urls] == [
        "README.md",
        "modules/M.md",
        "classes/M.A.md",
        "classes/M.B.md",
    ]
