from pathlib import Path

import typer


def read_source(path: Path | None, code: str | None) -> str:
    """Return the schema text given either a file path or an inline ``--code`` string."""
    if code is not None:
        return code
    if path is None:
        raise typer.BadParameter("Provide a schema file path or --code.")
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise typer.BadParameter(f"File not found: {path}") from None
