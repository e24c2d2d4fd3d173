"""Data models for parsed class and interface declarations."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

GLOBAL_NAMESPACE = "Global"


class DeclarationKind(Enum):
    """Kinds of type declarations that appear on the diagram."""

    CLASS = "Class"
    INTERFACE = "Interface"


class MemberKind(Enum):
    """Kinds of members rendered inside an entity."""

    FIELD = "Field"
    PROPERTY = "Property"
    METHOD = "Method"


@dataclass(frozen=True)
class Scope:
    """One lexical scope enclosing a declaration (namespace, class, ...)."""

    kind: str
    name: str


@dataclass
class Member:
    """A field, property or method of a declaration.

    For methods, ``type_name`` holds the return type.
    """

    kind: MemberKind
    name: str
    type_name: str
    is_public: bool = False


@dataclass
class Declaration:
    """A class or interface together with the file it was declared in."""

    kind: DeclarationKind
    name: str
    source_file: Path
    namespace: str | None = None
    scopes: list[Scope] = field(default_factory=list)  # outermost first
    members: list[Member] = field(default_factory=list)
    base_types: list[str] = field(default_factory=list)

    @property
    def is_class(self) -> bool:
        """Return True for class declarations."""
        return self.kind is DeclarationKind.CLASS

    @property
    def is_interface(self) -> bool:
        """Return True for interface declarations."""
        return self.kind is DeclarationKind.INTERFACE
