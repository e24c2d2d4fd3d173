"""Logic for locating the project root that holds the C# sources."""

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from docfx_puml.errors import UnresolvableRootError

logger = logging.getLogger(__name__)

DEFAULT_MARKERS = (".sln", ".csproj")


class RootResolver(Protocol):
    """Anything that can find a project root from a starting directory."""

    def resolve(self, start: Path) -> Path:
        """Return the project root for ``start``."""
        ...


class ProjectRootResolver:
    """Finds the git work tree root, else the nearest solution/project dir."""

    def __init__(
        self,
        markers: list[str] | tuple[str, ...] = DEFAULT_MARKERS,
        *,
        use_git: bool = True,
    ) -> None:
        """Initialize with the file suffixes that mark a project root."""
        self.markers = {m if m.startswith(".") else f".{m}" for m in markers}
        self.use_git = use_git

    def resolve(self, start: Path) -> Path:
        """Return the project root, raising UnresolvableRootError if none."""
        start = start.resolve()
        if self.use_git:
            git_root = self._git_root(start)
            if git_root is not None:
                return git_root

        for directory in (start, *start.parents):
            if self._has_marker(directory):
                logger.info("Using project root with markers: %s", directory)
                return directory
        raise UnresolvableRootError(start)

    def _git_root(self, start: Path) -> Path | None:
        try:
            proc = subprocess.run(
                ["git", "rev-parse", "--show-toplevel"],
                cwd=start,
                capture_output=True,
                text=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError):
            logger.debug("No git work tree found from %s", start)
            return None
        root = proc.stdout.strip()
        if not root:
            return None
        logger.info("Using git work tree root: %s", root)
        return Path(root)

    def _has_marker(self, directory: Path) -> bool:
        try:
            return any(
                p.is_file() and p.suffix in self.markers for p in directory.iterdir()
            )
        except OSError:
            return False
