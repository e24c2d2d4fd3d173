"""Main orchestration script for generating DocFX metadata and the class diagram."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run metadata extraction (optional) and diagram generation."""
    parser = argparse.ArgumentParser(
        description="Generate DocFX metadata and a PlantUML class diagram."
    )
    parser.add_argument(
        "--docfx",
        action="store_true",
        help="Run 'dotnet docfx metadata' before generating the diagram",
    )
    parser.add_argument(
        "--yml-dir",
        type=Path,
        help="Directory with DocFX metadata (default: ./api)",
    )
    parser.add_argument("--source-root", help="Root the metadata source paths refer to")
    parser.add_argument("--out-dir", help="Directory for ClassDiagrams.puml")
    parser.add_argument("--config", help="Path to configuration file")
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Skip unreadable metadata files instead of aborting",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the diagram without writing files",
    )
    args = parser.parse_args()

    root_dir = Path.cwd()

    if args.docfx:
        print("--- Step 1: Generating DocFX metadata ---")
        # docfx looks for docfx.json in the current directory by default
        run_command(["dotnet", "docfx", "metadata"], cwd=root_dir)

    print("\n--- Step 2: Rendering class diagram ---")
    yml_dir = args.yml_dir or root_dir / "api"

    cmd: list[str | Path] = [sys.executable, "-m", "docfx_puml.docfx_to_puml", yml_dir]
    if args.source_root:
        cmd.extend(["--source-root", args.source_root])
    if args.out_dir:
        cmd.extend(["--out-dir", args.out_dir])
    if args.config:
        cmd.extend(["--config", args.config])
    if args.keep_going:
        cmd.append("--keep-going")
    if args.dry_run:
        cmd.append("--dry-run")

    run_command(cmd)

    print("\nSUCCESS: Class diagram generated")


if __name__ == "__main__":
    main()
