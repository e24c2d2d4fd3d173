"""Error types raised at the boundaries of diagram generation."""

from pathlib import Path


class DiagramError(Exception):
    """Base class for errors that abort a diagram run."""


class UnresolvableRootError(DiagramError):
    """Raised when no project root can be found from a starting directory."""

    def __init__(self, start: Path) -> None:
        """Record the directory the search started from."""
        super().__init__(f"Project root not found from: {start}")
        self.start = start


class DeclarationSourceError(DiagramError):
    """Raised when a declaration metadata file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        """Record the offending file and a short reason."""
        super().__init__(f"Could not load declarations from {path}: {reason}")
        self.path = path


class OutputWriteError(DiagramError):
    """Raised when the finished diagram cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        """Record the target file and a short reason."""
        super().__init__(f"Could not write diagram to {path}: {reason}")
        self.path = path
