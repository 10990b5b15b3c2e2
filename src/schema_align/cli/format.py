from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console

from schema_align.cli.source import read_source
from schema_align.config import load_settings
from schema_align.core import FormatError, format_block
from schema_align.core.text import offset_at

console = Console(stderr=True)


def format_command(
    path: Annotated[Path | None, typer.Argument(help="Path to a schema file.")] = None,
    code: Annotated[str | None, typer.Option(help="Schema source string to format instead of a file.")] = None,
    offset: Annotated[int | None, typer.Option(help="Character offset inside the block to format.")] = None,
    line: Annotated[int | None, typer.Option(help="1-based line inside the block to format.")] = None,
    column: Annotated[int, typer.Option(help="0-based column on --line.")] = 0,
    indent_level: Annotated[int | None, typer.Option(help="Spaces before each field (default 2).")] = None,
    write: Annotated[bool, typer.Option("--write", help="Rewrite the file in place.")] = False,
    check: Annotated[bool, typer.Option("--check", help="Exit with status 1 if the block is not aligned.")] = False,
) -> None:
    """Align the field columns of the block enclosing a position."""
    source = read_source(path, code)
    if write and path is None:
        raise typer.BadParameter("--write needs a file path.")
    if offset is None and line is None:
        raise typer.BadParameter("Provide --offset or --line to choose a block.")
    try:
        position = offset if offset is not None else offset_at(source, line or 1, column)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from None

    try:
        settings = load_settings(indent_level)
    except ValidationError as exc:
        console.print(f"[red]Invalid settings:[/red] {exc}")
        raise typer.Exit(code=2) from None

    try:
        result = format_block(source, position, settings)
    except FormatError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from None

    if check:
        if result.changed:
            console.print(f"[yellow]Block {result.block_name} is not aligned[/yellow] ({result.edits} edit(s))")
            raise typer.Exit(code=1)
        console.print(f"[green]Block {result.block_name} is aligned[/green]")
        return

    if write and path is not None:
        if result.changed:
            path.write_text(result.text, encoding="utf-8")
        console.print(f"[green]Formatted[/green] block {result.block_name} ({result.edits} edit(s))")
        return

    typer.echo(result.text, nl=False)
