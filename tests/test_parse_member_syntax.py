"""Tests for reading member signatures."""

import pytest

from docfx_puml.parse_member_syntax import parse_member_syntax


@pytest.mark.parametrize(
    ("content", "name", "expected"),
    [
        ("public string Test { get; set; }", "Test", (True, "string")),
        ("private ClassB _classB", "_classB", (False, "ClassB")),
        ("public void TestMethod()", "TestMethod()", (True, "void")),
        ("public T Get<T>(int id)", "Get<T>(int)", (True, "T")),
        (
            "protected static readonly Dictionary<string, int> Map",
            "Map",
            (False, "Dictionary<string, int>"),
        ),
        ("public const int Max = 10", "Max", (True, "int")),
        ("public Foo Foo { get; }", "Foo", (True, "Foo")),
        ("string TestProperty { get; set; }", "TestProperty", (False, "string")),
    ],
)
def test_parse_member_syntax(
    content: str, name: str, expected: tuple[bool, str]
) -> None:
    """Verify visibility and type are read from the signature."""
    assert parse_member_syntax(content, name) == expected


def test_attribute_lines_are_skipped() -> None:
    """Verify attributes above the declaration are ignored."""
    content = "[Obsolete]\n[JsonIgnore]\npublic int Old { get; }"
    assert parse_member_syntax(content, "Old") == (True, "int")


def test_unmatched_name_has_no_type() -> None:
    """Verify indexers and empty content yield no type."""
    indexer = "public string this[int index] { get; }"
    assert parse_member_syntax(indexer, "this[int]") == (True, None)
    assert parse_member_syntax("", "Anything") == (False, None)
