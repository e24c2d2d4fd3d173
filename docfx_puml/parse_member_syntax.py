"""Logic for reading visibility and type from a C# member signature."""

import re

MODIFIERS = frozenset(
    {
        "public",
        "private",
        "protected",
        "internal",
        "static",
        "readonly",
        "const",
        "virtual",
        "override",
        "abstract",
        "sealed",
        "new",
        "async",
        "extern",
        "unsafe",
        "volatile",
        "partial",
        "required",
        "event",
    }
)


def parse_member_syntax(content: str, name: str) -> tuple[bool, str | None]:
    """Return (is_public, type_name) for a member declaration.

    ``name`` is the member name as listed in metadata; for methods anything
    from the first ``(`` on is ignored. ``type_name`` is None when the
    signature does not contain the name (indexers, operators).
    """
    # Attribute lines precede the declaration itself.
    lines = [ln.strip() for ln in content.splitlines() if ln.strip()]
    decl = next((ln for ln in lines if not ln.startswith("[")), "")

    words = decl.split(" ")
    modifiers = []
    while words and words[0] in MODIFIERS:
        modifiers.append(words.pop(0))
    rest = " ".join(words)

    bare = name.split("(", 1)[0].strip()
    match = re.search(rf"\s{re.escape(bare)}\s*(?:[({{=;]|$)", rest)
    type_name = rest[: match.start()].strip() if match else None
    return "public" in modifiers, type_name or None
