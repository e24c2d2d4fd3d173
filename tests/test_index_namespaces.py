"""Tests for grouping declarations by namespace."""

from pathlib import Path

from docfx_puml.declaration import Declaration, DeclarationKind
from docfx_puml.index_namespaces import index_namespaces


def decl(name: str, ns: str | None, kind: DeclarationKind) -> Declaration:
    """Create a declaration for testing."""
    return Declaration(
        kind=kind, name=name, source_file=Path(f"/src/{name}.cs"), namespace=ns
    )


def test_groups_classes_and_interfaces_in_order() -> None:
    """Verify insertion order is kept separately for interfaces and classes."""
    packages = index_namespaces(
        [
            decl("B", "N", DeclarationKind.CLASS),
            decl("IB", "N", DeclarationKind.INTERFACE),
            decl("A", "N", DeclarationKind.CLASS),
            decl("IA", "N", DeclarationKind.INTERFACE),
        ]
    )
    assert list(packages) == ["N"]
    assert [d.name for d in packages["N"].classes] == ["B", "A"]
    assert [d.name for d in packages["N"].interfaces] == ["IB", "IA"]


def test_interface_only_and_class_only_namespaces() -> None:
    """Verify a namespace with only one kind still gets a package."""
    packages = index_namespaces(
        [
            decl("IService", "Contracts", DeclarationKind.INTERFACE),
            decl("Service", "Impl", DeclarationKind.CLASS),
        ]
    )
    assert set(packages) == {"Contracts", "Impl"}
    assert packages["Contracts"].classes == []
    assert packages["Impl"].interfaces == []


def test_missing_namespace_goes_to_global() -> None:
    """Verify each declaration is placed under exactly one namespace."""
    packages = index_namespaces([decl("Loose", None, DeclarationKind.CLASS)])
    assert [d.name for d in packages["Global"].classes] == ["Loose"]


def test_empty_input() -> None:
    """Verify no declarations yield no packages."""
    assert index_namespaces([]) == {}
