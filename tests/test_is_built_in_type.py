"""Tests for the built-in type heuristic."""

import pytest

from docfx_puml.is_built_in_type import BUILT_IN_TYPES, is_built_in_type


@pytest.mark.parametrize(
    "name", ["string", "int", "bool", "object", "String", "Int32", "Single"]
)
def test_primitive_names_are_built_in(name: str) -> None:
    """Verify keyword and framework spellings of primitives are built in."""
    assert is_built_in_type(name)


def test_container_prefixes_are_built_in() -> None:
    """Verify generic list, enumerable and dictionary types are built in."""
    assert is_built_in_type("List<Order>")
    assert is_built_in_type("IEnumerable<Customer>")
    assert is_built_in_type("Dictionary<string, Order>")


def test_user_types_are_not_built_in() -> None:
    """Verify user types and unlisted containers are not built in."""
    assert not is_built_in_type("ClassB")
    assert not is_built_in_type("HashSet<int>")
    assert not is_built_in_type("IList<Order>")
    # Prefix match needs the generic bracket.
    assert not is_built_in_type("ListView")
    assert not is_built_in_type("string[]")


def test_built_in_table_is_name_based() -> None:
    """Verify the table holds plain names only, no namespaces."""
    assert all("." not in name for name in BUILT_IN_TYPES)
    assert not is_built_in_type("System.String")
