"""Generate a PlantUML class diagram from DocFX ManagedReference metadata.

Classes and interfaces are grouped into one package per namespace,
inheritance and field/property associations are drawn between them, and
every entity links back to its source file. The result is written to
``ClassDiagrams.puml`` and fully replaced on every run.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from docfx_puml.errors import DiagramError
from docfx_puml.run_generation import run_generation


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    ap = argparse.ArgumentParser(
        description="Render DocFX ManagedReference YAML as a PlantUML class diagram.",
    )
    ap.add_argument(
        "yml_dir",
        type=Path,
        help="Directory containing DocFX *.yml (ManagedReference) files",
    )
    ap.add_argument(
        "--source-root",
        type=Path,
        help="Directory that source paths in the metadata are relative to "
        "(default: git root or nearest .sln/.csproj directory)",
    )
    ap.add_argument(
        "--out-dir",
        type=Path,
        help="Output directory (default: <source root>/diagrams)",
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument(
        "--keep-going",
        action="store_true",
        help="Skip metadata files that fail to load instead of aborting",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the diagram instead of writing it",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the diagram generation."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_generation(args)
    except DiagramError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
