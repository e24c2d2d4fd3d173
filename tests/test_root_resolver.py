"""Tests for project root discovery."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from docfx_puml.errors import UnresolvableRootError
from docfx_puml.root_resolver import ProjectRootResolver


def test_finds_nearest_marker_directory(tmp_path: Path) -> None:
    """Verify the walk stops at the first directory with a marker file."""
    (tmp_path / "App.sln").write_text("", encoding="utf-8")
    project = tmp_path / "src" / "App"
    nested = project / "Models"
    nested.mkdir(parents=True)
    (project / "App.csproj").write_text("", encoding="utf-8")

    resolver = ProjectRootResolver(use_git=False)
    assert resolver.resolve(nested) == project.resolve()
    assert resolver.resolve(tmp_path / "src") == tmp_path.resolve()


def test_markers_without_dot(tmp_path: Path) -> None:
    """Verify custom markers may omit the leading dot."""
    (tmp_path / "Lib.fsproj").write_text("", encoding="utf-8")
    resolver = ProjectRootResolver(["fsproj"], use_git=False)
    assert resolver.resolve(tmp_path) == tmp_path.resolve()


def test_marker_directories_do_not_count(tmp_path: Path) -> None:
    """Verify only files act as markers."""
    (tmp_path / "Fake.onlydir").mkdir()
    resolver = ProjectRootResolver([".onlydir"], use_git=False)
    with pytest.raises(UnresolvableRootError):
        resolver.resolve(tmp_path)


def test_unresolvable_root(tmp_path: Path) -> None:
    """Verify a missing root raises UnresolvableRootError."""
    resolver = ProjectRootResolver([".nothing-has-this-marker"], use_git=False)
    with pytest.raises(UnresolvableRootError):
        resolver.resolve(tmp_path)


def test_git_root_preferred(tmp_path: Path) -> None:
    """Verify the git work tree root is used when git reports one."""
    (tmp_path / "App.sln").write_text("", encoding="utf-8")
    completed = MagicMock(stdout="/work/repo\n")
    with patch(
        "docfx_puml.root_resolver.subprocess.run", return_value=completed
    ) as run:
        root = ProjectRootResolver().resolve(tmp_path)
    assert root == Path("/work/repo")
    args, kwargs = run.call_args
    assert args[0] == ["git", "rev-parse", "--show-toplevel"]
    assert kwargs["cwd"] == tmp_path.resolve()


def test_git_failure_falls_back_to_markers(tmp_path: Path) -> None:
    """Verify git errors fall back to the marker walk."""
    (tmp_path / "App.csproj").write_text("", encoding="utf-8")
    error = subprocess.CalledProcessError(128, ["git"])
    with patch("docfx_puml.root_resolver.subprocess.run", side_effect=error):
        assert ProjectRootResolver().resolve(tmp_path) == tmp_path.resolve()
    with patch(
        "docfx_puml.root_resolver.subprocess.run", side_effect=FileNotFoundError
    ):
        assert ProjectRootResolver().resolve(tmp_path) == tmp_path.resolve()
