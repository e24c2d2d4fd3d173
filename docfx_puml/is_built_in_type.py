"""Predicate for checking if a type name is a built-in or container type."""

# Name-based only: user aliases and generic arguments are not resolved.
BUILT_IN_TYPES = frozenset(
    {
        "string",
        "int",
        "bool",
        "double",
        "float",
        "decimal",
        "char",
        "byte",
        "object",
        "String",
        "Int32",
        "Boolean",
        "Double",
        "Single",
        "Decimal",
        "Char",
        "Byte",
        "Object",
    }
)

BUILT_IN_PREFIXES = ("List<", "IEnumerable<", "Dictionary<")


def is_built_in_type(type_name: str) -> bool:
    """Check if the type name is a primitive or a recognized container."""
    return type_name in BUILT_IN_TYPES or type_name.startswith(BUILT_IN_PREFIXES)
