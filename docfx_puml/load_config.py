"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from docfx_puml.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "output": {
        "directory": "diagrams",
        "file_name": "ClassDiagrams.puml",
    },
    "sources": {
        "pattern": "*.yml",
        "keep_going": False,
    },
    "roots": {
        "use_git": True,
        "markers": [".csproj", ".sln"],
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                raise SystemExit(f"Config file must contain a mapping: {p}")
            config = deep_merge(config, user_config)
    return config
