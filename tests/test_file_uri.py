"""Tests for clickable file links."""

import os
from pathlib import Path

from docfx_puml.file_uri import file_uri


def test_absolute_path(tmp_path: Path) -> None:
    """Verify an absolute path becomes a file URI."""
    uri = file_uri(tmp_path / "Widget.cs")
    assert uri == (tmp_path / "Widget.cs").as_uri()
    assert uri.startswith("file:///")


def test_normalizes_parent_segments(tmp_path: Path) -> None:
    """Verify '..' segments are collapsed."""
    assert file_uri(tmp_path / "a" / ".." / "B.cs") == (tmp_path / "B.cs").as_uri()


def test_relative_path_is_made_absolute() -> None:
    """Verify relative paths resolve against the working directory."""
    uri = file_uri("src/Widget.cs")
    assert uri == Path(os.getcwd(), "src", "Widget.cs").as_uri()


def test_spaces_are_escaped(tmp_path: Path) -> None:
    """Verify the URI is percent-encoded."""
    assert "My%20Project" in file_uri(tmp_path / "My Project" / "A.cs")
