"""Logic for building declarations from DocFX metadata files."""

import logging
import re
from pathlib import Path
from typing import Any

from docfx_puml.declaration import (
    Declaration,
    DeclarationKind,
    Member,
    MemberKind,
)
from docfx_puml.display_name_for_uid import bare_type_name, display_name_for_uid
from docfx_puml.errors import DeclarationSourceError
from docfx_puml.load_managed_reference import load_managed_reference
from docfx_puml.parse_member_syntax import parse_member_syntax

logger = logging.getLogger(__name__)

ROOT_BASE_CLASS = "System.Object"

DECLARATION_KINDS = {k.value.lower(): k for k in DeclarationKind}
MEMBER_KINDS = {k.value.lower(): k for k in MemberKind}

METHOD_NAME_END_RE = re.compile(r"[(<]")

RefIndex = dict[str, dict[str, Any]]


def build_declarations(
    yml_files: list[Path],
    source_root: Path,
    *,
    keep_going: bool = False,
) -> list[Declaration]:
    """Build class and interface declarations from metadata files.

    Files are read in the given order; declarations keep file order, then
    item order. With ``keep_going`` a file that fails to load is skipped
    instead of aborting the run.
    """
    uid_to_decl: dict[str, Declaration] = {}
    uid_to_implements: dict[str, list[str]] = {}
    pending_bases: list[tuple[Declaration, dict[str, Any], RefIndex]] = []
    pending_members: list[tuple[str, dict[str, Any], RefIndex]] = []

    for f in yml_files:
        try:
            doc = load_managed_reference(f)
        except DeclarationSourceError:
            if not keep_going:
                raise
            logger.warning("Skipping unreadable metadata file: %s", f, exc_info=True)
            continue

        uid_to_ref = _references(doc)
        for it in _iter_items(doc):
            kind = str(it.get("type") or "").strip().lower()
            if kind in DECLARATION_KINDS:
                decl = _declaration_from_item(
                    it, DECLARATION_KINDS[kind], f, source_root
                )
                uid_to_decl[str(it["uid"])] = decl
                uid_to_implements[str(it["uid"])] = _implements(it)
                if decl.is_class:
                    pending_bases.append((decl, it, uid_to_ref))
            elif kind in MEMBER_KINDS and it.get("parent"):
                pending_members.append((str(it["parent"]), it, uid_to_ref))

    # Bases and members may be declared in a different file.
    for decl, it, uid_to_ref in pending_bases:
        decl.base_types = [
            display_name_for_uid(uid, uid_to_ref)
            for uid in _declared_bases(it, uid_to_implements)
        ]

    for parent_uid, it, uid_to_ref in pending_members:
        parent = uid_to_decl.get(parent_uid)
        if parent is None:
            continue
        parent.members.append(_member_from_item(it, parent, uid_to_ref))

    logger.info(
        "Loaded %d declarations from %d metadata files",
        len(uid_to_decl),
        len(yml_files),
    )
    return list(uid_to_decl.values())


def _iter_items(doc: dict[str, Any]) -> list[dict[str, Any]]:
    return [
        it for it in doc.get("items") or [] if isinstance(it, dict) and it.get("uid")
    ]


def _references(doc: dict[str, Any]) -> dict[str, dict[str, Any]]:
    return {
        str(ref["uid"]): ref
        for ref in doc.get("references") or []
        if isinstance(ref, dict) and ref.get("uid")
    }


def _declaration_from_item(
    it: dict[str, Any],
    kind: DeclarationKind,
    yml_file: Path,
    source_root: Path,
) -> Declaration:
    uid = str(it["uid"])
    # Nested types are listed as ``Outer.Inner``.
    name = bare_type_name(str(it.get("name") or uid.rsplit(".", 1)[-1]))
    ns = it.get("namespace")

    source = it.get("source") or {}
    rel_path = source.get("path") if isinstance(source, dict) else None
    source_file = (source_root / rel_path) if rel_path else yml_file

    logger.debug("Found %s %s in %s", kind.value, uid, yml_file)
    return Declaration(
        kind=kind,
        name=name,
        source_file=source_file.absolute(),
        namespace=str(ns) if ns else None,
    )


def _implements(it: dict[str, Any]) -> list[str]:
    return [str(x) for x in it.get("implements") or []]


def _declared_bases(
    it: dict[str, Any],
    uid_to_implements: dict[str, list[str]],
) -> list[str]:
    """Return the base uids a class lists itself.

    DocFX flattens ``implements``: it also holds the interfaces of the base
    class and of other implemented interfaces. Those are dropped when the
    declaration that contributes them is known.
    """
    inheritance = [str(x) for x in it.get("inheritance") or []]
    # DocFX lists the chain from the root down to the immediate base.
    bases = []
    if inheritance and inheritance[-1] != ROOT_BASE_CLASS:
        bases.append(inheritance[-1])

    implements = _implements(it)
    inherited: set[str] = set()
    for uid in bases + implements:
        inherited.update(uid_to_implements.get(uid, ()))
    bases.extend(uid for uid in implements if uid not in inherited)
    return bases


def _member_from_item(
    it: dict[str, Any],
    parent: Declaration,
    uid_to_ref: dict[str, dict[str, Any]],
) -> Member:
    kind = MEMBER_KINDS[str(it["type"]).strip().lower()]
    raw_name = str(it.get("name") or str(it["uid"]).rsplit(".", 1)[-1])
    if kind is MemberKind.METHOD:
        name = METHOD_NAME_END_RE.split(raw_name, maxsplit=1)[0]
    else:
        name = raw_name

    syntax = it.get("syntax") or {}
    is_public, type_name = parse_member_syntax(
        str(syntax.get("content") or ""), raw_name
    )
    if not type_name:
        returned = (syntax.get("return") or {}).get("type")
        if returned:
            type_name = display_name_for_uid(str(returned), uid_to_ref)
        else:
            type_name = "void" if kind is MemberKind.METHOD else "object"

    return Member(
        kind=kind,
        name=name,
        type_name=type_name,
        is_public=is_public or parent.is_interface,
    )
