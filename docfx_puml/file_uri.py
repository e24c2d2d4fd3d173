"""Utility for turning source file paths into clickable file URIs."""

import os
from pathlib import Path


def file_uri(path: Path | str) -> str:
    """Return the absolute ``file://`` URI for a path."""
    # abspath normalizes '..' without following symlinks.
    return Path(os.path.abspath(path)).as_uri()
