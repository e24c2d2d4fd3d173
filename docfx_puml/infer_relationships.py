"""Logic for inferring inheritance and association edges."""

from collections.abc import Iterable, Iterator
from itertools import chain
from typing import assert_never

from docfx_puml.declaration import Declaration, MemberKind
from docfx_puml.is_built_in_type import is_built_in_type
from docfx_puml.namespace_of import namespace_of
from docfx_puml.relationship_edge import RelationshipEdge


def infer_relationships(declarations: Iterable[Declaration]) -> list[RelationshipEdge]:
    """Return deduplicated relationship edges in first-seen order.

    Inheritance edges come first, in discovery order. Association edges
    follow, visiting classes in the order packages are rendered (namespace
    ascending, then discovery order). Interfaces never originate edges.
    """
    classes = [d for d in declarations if d.is_class]
    in_render_order = sorted(classes, key=namespace_of)

    edges: list[RelationshipEdge] = []
    seen: set[str] = set()
    for edge in chain(_inheritance_edges(classes), _association_edges(in_render_order)):
        if edge.text not in seen:
            seen.add(edge.text)
            edges.append(edge)
    return edges


def _inheritance_edges(classes: list[Declaration]) -> Iterator[RelationshipEdge]:
    for decl in classes:
        for base in decl.base_types:
            yield RelationshipEdge.inheritance(decl.name, base)


def _association_edges(classes: list[Declaration]) -> Iterator[RelationshipEdge]:
    for decl in classes:
        for member in decl.members:
            match member.kind:
                case MemberKind.FIELD | MemberKind.PROPERTY:
                    if not is_built_in_type(member.type_name):
                        yield RelationshipEdge.association(
                            decl.name, member.type_name
                        )
                case MemberKind.METHOD:
                    # Parameters and return types are not inspected.
                    continue
                case _:
                    assert_never(member.kind)
