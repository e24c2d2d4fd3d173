"""Logic for writing the finished diagram document to disk."""

from pathlib import Path

from docfx_puml.errors import OutputWriteError

DEFAULT_FILE_NAME = "ClassDiagrams.puml"


def write_diagram(
    content: str, out_dir: Path, file_name: str = DEFAULT_FILE_NAME
) -> Path:
    """Write the document, replacing any previous one, and return its path."""
    out_file = out_dir / file_name
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        out_file.write_text(content, encoding="utf-8", newline="\n")
    except OSError as e:
        raise OutputWriteError(out_file, str(e)) from e
    return out_file
