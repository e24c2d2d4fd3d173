"""Data models for inferred relationships between entities."""

from dataclasses import dataclass, field
from enum import Enum


class EdgeKind(Enum):
    """Kinds of relationship lines."""

    INHERITANCE = "inheritance"
    ASSOCIATION = "association"


@dataclass(frozen=True)
class RelationshipEdge:
    """A relationship line. Equality and hashing use ``text`` only."""

    kind: EdgeKind = field(compare=False)
    text: str

    @classmethod
    def inheritance(cls, derived: str, base: str) -> "RelationshipEdge":
        """Build a ``Derived --|> Base`` edge."""
        return cls(EdgeKind.INHERITANCE, f"{derived} --|> {base}")

    @classmethod
    def association(cls, owner: str, target: str) -> "RelationshipEdge":
        """Build an ``Owner --> Target : has`` edge."""
        return cls(EdgeKind.ASSOCIATION, f"{owner} --> {target} : has")
