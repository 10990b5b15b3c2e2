"""Align the field declarations of one model-like block.

Each row's edits are applied as one batch and the text is parsed again before
the next row is looked at, so every offset is read from the current snapshot.
"""

import logging
from collections.abc import Sequence

from schema_align.config import FormatterSettings
from schema_align.core import node_types as nt
from schema_align.core.align import gap_edit
from schema_align.core.chunks import chunk_of
from schema_align.core.errors import NoEnclosingBlockError
from schema_align.core.parser import parse_schema
from schema_align.core.ports.parser import SchemaParser
from schema_align.core.rows import declaration_rows, is_declaration_row, is_eligible_row, row_tokens
from schema_align.core.text import Edit, apply_edits, line_start
from schema_align.core.tree import SyntaxTree
from schema_align.models import BlockSummary, FormatResult, Node

logger = logging.getLogger(__name__)

# Column boundaries that get aligned: name|type and type|first attribute.
ALIGNED_BOUNDARIES = (0, 1)


def find_enclosing_block(tree: SyntaxTree, offset: int, block_types: Sequence[str]) -> Node:
    """Return the nearest model-like block around ``offset``.

    The block node holds the declaration's name and its rows as direct children.
    """
    block = tree.find_nearest_ancestor(tree.node_at(offset), lambda n: n.type in block_types)
    if block is None:
        raise NoEnclosingBlockError(offset)
    return block


def block_name(tree: SyntaxTree, block: Node) -> str:
    name = next((c for c in block.children if c.type == nt.IDENTIFIER), None)
    return tree.text(name) if name is not None else ""


def _path_to(tree: SyntaxTree, node: Node) -> list[int]:
    path: list[int] = []
    current = node
    parent = tree.parent(current)
    while parent is not None:
        path.append(next(i for i, c in enumerate(parent.children) if c is current))
        current, parent = parent, tree.parent(parent)
    return path[::-1]


def _node_at_path(tree: SyntaxTree, path: Sequence[int]) -> Node:
    node = tree.root
    for index in path:
        node = node.child_at(index)
    return node


def row_edits(tree: SyntaxTree, row: Node, indent_level: int) -> list[Edit]:
    """Reindent ``row`` and align its aligned column boundaries."""
    tokens = row_tokens(row)
    edits: list[Edit] = []

    start = line_start(tree.source, tokens[0].start)
    prefix = tree.source[start : tokens[0].start]
    if prefix.strip():
        logger.debug("Not reindenting line %d: row does not start its line", row.start_point.row + 1)
    elif prefix != " " * indent_level:
        edits.append(Edit(offset=start, delete_length=len(prefix), text=" " * indent_level))

    for k in ALIGNED_BOUNDARIES:
        if len(tokens) < k + 2:
            break
        edit = gap_edit(tree, row, k)
        if edit is not None:
            edits.append(edit)
    return edits


def format_block(
    source: str,
    offset: int,
    settings: FormatterSettings | None = None,
    parser: SchemaParser = parse_schema,
) -> FormatResult:
    """Align the declaration rows of the block enclosing ``offset``.

    Raises ``NoEnclosingBlockError`` without touching the text when ``offset``
    is not inside a model-like declaration.
    """
    settings = settings or FormatterSettings()
    tree = SyntaxTree.parse(source, parser)
    block = find_enclosing_block(tree, offset, settings.block_types)
    name = block_name(tree, block)
    path = _path_to(tree, block)
    row_indices = [i for i, child in enumerate(block.children) if is_declaration_row(child)]

    applied = 0
    for index in row_indices:
        row = block.child_at(index)
        edits = row_edits(tree, row, settings.indent_level)
        if not edits:
            continue
        logger.debug("Applying %d edit(s) to line %d", len(edits), row.start_point.row + 1)
        tree = SyntaxTree.parse(apply_edits(tree.source, edits), parser)
        block = _node_at_path(tree, path)
        applied += len(edits)

    logger.info("Formatted block %r: %d row(s), %d edit(s)", name, len(row_indices), applied)
    return FormatResult(text=tree.source, block_name=name, rows=len(row_indices), edits=applied)


def count_chunks(tree: SyntaxTree, block: Node) -> int:
    chunks = 0
    seen: set[int] = set()
    for child in block.children:
        if not is_eligible_row(child) or id(child) in seen:
            continue
        seen.update(id(row) for row in chunk_of(tree, child))
        chunks += 1
    return chunks


def list_blocks(
    source: str,
    settings: FormatterSettings | None = None,
    parser: SchemaParser = parse_schema,
) -> list[BlockSummary]:
    """Summarize every top-level block the formatter can align."""
    settings = settings or FormatterSettings()
    tree = SyntaxTree.parse(source, parser)
    return [
        BlockSummary(
            kind=nt.block_kind(block.type),
            name=block_name(tree, block),
            line=block.start_point.row + 1,
            rows=len(declaration_rows(block)),
            chunks=count_chunks(tree, block),
        )
        for block in tree.root.children
        if block.type in settings.block_types
    ]
