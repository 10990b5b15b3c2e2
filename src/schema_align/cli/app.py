import logging
from typing import Annotated

import typer

from schema_align.cli.format import format_command
from schema_align.cli.inspect import blocks, tree

app = typer.Typer(
    name="schema-align",
    help="schema-align: align field columns in Prisma-style schema blocks.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("format")(format_command)
app.command("blocks")(blocks)
app.command("tree")(tree)


@app.callback()
def configure_logging(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    app()
