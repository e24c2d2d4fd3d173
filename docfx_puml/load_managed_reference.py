"""Logic for loading DocFX ManagedReference YAML files."""

import re
from pathlib import Path
from typing import Any

import yaml

from docfx_puml.errors import DeclarationSourceError

YAML_MIME_PREFIX = "### YamlMime:"
VB_EQUALS_RE = re.compile(r"^(\s*[\w\.]+\.vb:\s+)(=$)", flags=re.MULTILINE)


def load_managed_reference(path: Path) -> dict[str, Any]:
    """Load and parse one metadata file, raising DeclarationSourceError on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DeclarationSourceError(path, str(e)) from e

    lines = text.splitlines()
    if lines and lines[0].startswith(YAML_MIME_PREFIX):
        text = "\n".join(lines[1:])
    # PyYAML reads a bare "=" in VB operator names as a value token
    text = VB_EQUALS_RE.sub(r"\1'='", text)

    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DeclarationSourceError(path, str(e)) from e
    if doc is None:
        return {}
    if not isinstance(doc, dict):
        raise DeclarationSourceError(path, "top level is not a mapping")
    return doc
