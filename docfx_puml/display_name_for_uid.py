"""Utility for turning DocFX UIDs into short type names."""

import re
from typing import Any

ARITY_RE = re.compile(r"`+\d+")


def display_name_for_uid(uid: str, uid_to_ref: dict[str, dict[str, Any]]) -> str:
    """Return the short name of a type UID.

    Uses the ``name`` of a matching reference when there is one, otherwise
    strips the namespace: ``System.Collections.Generic.List{System.String}``
    becomes ``List<String>``.
    """
    ref = uid_to_ref.get(uid)
    if ref and ref.get("name"):
        return bare_type_name(str(ref["name"]))
    return _short_name(uid)


def bare_type_name(name: str) -> str:
    """Drop enclosing type names: ``Outer.Inner<A.B>`` becomes ``Inner<A.B>``."""
    depth = 0
    start = 0
    for i, ch in enumerate(name):
        if ch in "<{":
            depth += 1
        elif ch in ">}":
            depth -= 1
        elif ch == "." and depth == 0:
            start = i + 1
    return name[start:]


def _short_name(uid: str) -> str:
    head, brace, rest = uid.partition("{")
    head = ARITY_RE.sub("", head).rsplit(".", 1)[-1]
    if not brace:
        return head
    args = _split_type_args(rest[:-1] if rest.endswith("}") else rest)
    return f"{head}<{', '.join(_short_name(a) for a in args)}>"


def _split_type_args(text: str) -> list[str]:
    """Split a generic argument list on top-level commas."""
    args: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(text):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        elif ch == "," and depth == 0:
            args.append(text[start:i].strip())
            start = i + 1
    args.append(text[start:].strip())
    return [a for a in args if a]
