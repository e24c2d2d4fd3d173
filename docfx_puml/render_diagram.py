"""Logic for rendering the class diagram document."""

from typing import assert_never

from docfx_puml.declaration import Declaration, Member, MemberKind
from docfx_puml.diagram_styles import (
    ARROW_STYLE_BLOCK,
    CLASS_STYLE_BLOCK,
    CLICKABLE,
    CONFIGURATION_BLOCK,
    END_MARKER,
    INTERFACE_STYLE_BLOCK,
    RELATIONSHIPS_HEADER,
    START_MARKER,
)
from docfx_puml.file_uri import file_uri
from docfx_puml.namespace_package import NamespacePackage
from docfx_puml.relationship_edge import RelationshipEdge

MEMBER_INDENT = "    "


def render_diagram(
    packages: dict[str, NamespacePackage],
    edges: list[RelationshipEdge],
) -> str:
    """Render packages and edges as a PlantUML class diagram."""
    parts: list[str] = [START_MARKER]
    parts += CONFIGURATION_BLOCK
    parts += CLASS_STYLE_BLOCK
    parts += INTERFACE_STYLE_BLOCK
    parts += ARROW_STYLE_BLOCK

    for ns in sorted(packages):
        parts.extend(_render_package(packages[ns]))

    parts.append("")
    parts.append(RELATIONSHIPS_HEADER)
    parts.extend(edge.text for edge in edges)
    parts.append(END_MARKER)
    return "\n".join(parts) + "\n"


def _render_package(package: NamespacePackage) -> list[str]:
    parts = [f"package {package.name} {{"]
    for decl in package.interfaces:
        parts.append(_entity_header("interface", decl))
        for member in decl.members:
            line = _interface_member(member)
            if line:
                parts.append(MEMBER_INDENT + line)
        parts += ["}", ""]
    for decl in package.classes:
        parts.append(_entity_header("class", decl))
        parts.extend(MEMBER_INDENT + _class_member(m) for m in decl.members)
        parts += ["}", ""]
    parts.append("}")
    return parts


def _entity_header(keyword: str, decl: Declaration) -> str:
    return f"{keyword} {decl.name} {CLICKABLE} [[{file_uri(decl.source_file)}]] {{"


def _interface_member(member: Member) -> str | None:
    """Render an interface member; interface fields are not shown."""
    match member.kind:
        case MemberKind.METHOD:
            return f"+ {member.name}()"
        case MemberKind.PROPERTY:
            return f"+ {member.name} : {member.type_name}"
        case MemberKind.FIELD:
            return None
        case _:
            assert_never(member.kind)


def _class_member(member: Member) -> str:
    vis = "+" if member.is_public else "-"
    match member.kind:
        case MemberKind.FIELD | MemberKind.PROPERTY:
            return f"{vis} {member.name} : {member.type_name}"
        case MemberKind.METHOD:
            return f"{vis} {member.name}() : {member.type_name}"
        case _:
            assert_never(member.kind)
