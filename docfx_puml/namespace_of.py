"""Utility for determining the namespace of a declaration."""

from docfx_puml.declaration import GLOBAL_NAMESPACE, Declaration


def namespace_of(decl: Declaration) -> str:
    """Determine the namespace of a declaration."""
    # Prefer explicit namespace field.
    if decl.namespace:
        return decl.namespace
    # Walk enclosing scopes outward.
    for scope in reversed(decl.scopes):
        if scope.kind.lower() == "namespace" and scope.name:
            return scope.name
    return GLOBAL_NAMESPACE
