from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from schema_align.cli.source import read_source
from schema_align.config import load_settings
from schema_align.core import SyntaxTree, list_blocks, parse_schema
from schema_align.models import Node

console = Console()


def blocks(
    path: Annotated[Path | None, typer.Argument(help="Path to a schema file.")] = None,
    code: Annotated[str | None, typer.Option(help="Schema source string instead of a file.")] = None,
) -> None:
    """List the blocks that can be aligned."""
    summaries = list_blocks(read_source(path, code), load_settings())
    table = Table(show_lines=False)
    for header in ("kind", "name", "line", "rows", "chunks"):
        table.add_column(header)
    for summary in summaries:
        table.add_row(summary.kind, summary.name, str(summary.line), str(summary.rows), str(summary.chunks))
    console.print(table)
    console.print(f"({len(summaries)} blocks)")


def _add_node(tree: SyntaxTree, branch: Tree, node: Node) -> None:
    label = f"{node.type} [dim]{node.start}-{node.end}[/dim]"
    if not node.children:
        label += f" {escape(repr(tree.text(node)))}"
    child_branch = branch.add(label)
    for child in node.children:
        _add_node(tree, child_branch, child)


def tree(
    path: Annotated[Path | None, typer.Argument(help="Path to a schema file.")] = None,
    code: Annotated[str | None, typer.Option(help="Schema source string instead of a file.")] = None,
) -> None:
    """Print the parsed syntax tree."""
    syntax_tree = SyntaxTree.parse(read_source(path, code), parse_schema)
    root = Tree(f"{syntax_tree.root.type} [dim]0-{syntax_tree.root.end}[/dim]")
    for child in syntax_tree.root.children:
        _add_node(syntax_tree, root, child)
    console.print(root)
