"""Data models for per-namespace groupings of declarations."""

from dataclasses import dataclass, field

from docfx_puml.declaration import Declaration


@dataclass
class NamespacePackage:
    """Interfaces and classes of one namespace, in discovery order."""

    name: str
    interfaces: list[Declaration] = field(default_factory=list)
    classes: list[Declaration] = field(default_factory=list)
