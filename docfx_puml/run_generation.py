"""Orchestration logic for turning DocFX metadata into a class diagram."""

import argparse
import logging
from pathlib import Path
from typing import Any

from docfx_puml.build_declarations import build_declarations
from docfx_puml.generate_diagram import generate_diagram
from docfx_puml.load_config import load_config
from docfx_puml.root_resolver import ProjectRootResolver, RootResolver
from docfx_puml.write_diagram import write_diagram

logger = logging.getLogger(__name__)


def run_generation(
    args: argparse.Namespace, root_resolver: RootResolver | None = None
) -> int:
    """Execute the full generation pipeline."""
    config = load_config(args.config)
    pattern = config["sources"]["pattern"]
    keep_going = bool(args.keep_going or config["sources"]["keep_going"])

    yml_files = sorted(args.yml_dir.rglob(pattern))
    if not yml_files:
        msg = f"No {pattern} files found under: {args.yml_dir}"
        raise SystemExit(msg)

    source_root, out_dir = _resolve_locations(args, config, root_resolver)
    logger.info(
        "Reading %d metadata files, sources under %s", len(yml_files), source_root
    )

    declarations = build_declarations(yml_files, source_root, keep_going=keep_going)
    content = generate_diagram(declarations)

    if args.dry_run:
        print(content, end="")
        return 0

    out_file = write_diagram(content, out_dir, config["output"]["file_name"])
    print(f"Wrote class diagram with {len(declarations)} types into: {out_file}")
    return 0


def _resolve_locations(
    args: argparse.Namespace,
    config: dict[str, Any],
    root_resolver: RootResolver | None,
) -> tuple[Path, Path]:
    """Pick the source root and output directory, discovering the root if needed."""
    source_root: Path | None = args.source_root
    out_dir: Path | None = args.out_dir
    if source_root is None:
        if root_resolver is None:
            roots = config["roots"]
            root_resolver = ProjectRootResolver(
                roots["markers"], use_git=roots["use_git"]
            )
        source_root = root_resolver.resolve(Path.cwd())
    if out_dir is None:
        out_dir = source_root / config["output"]["directory"]
    return source_root.resolve(), out_dir.resolve()
