"""Partition a block's rows into chunks.

A chunk is a maximal run of adjacent declaration and comment rows with no blank
line between one row's end and the next row's start. Rows in different chunks
are aligned independently.
"""

from schema_align.core.rows import is_eligible_row
from schema_align.core.text import contains_blank_line
from schema_align.core.tree import SyntaxTree
from schema_align.models import Node


def chunk_of(tree: SyntaxTree, row: Node) -> list[Node]:
    """Return the chunk containing ``row``, in source order."""
    first = row
    sibling = tree.prev_sibling(first)
    while (
        sibling is not None
        and is_eligible_row(sibling)
        and not contains_blank_line(tree.source, sibling.end, first.start)
    ):
        first = sibling
        sibling = tree.prev_sibling(first)

    last = row
    sibling = tree.next_sibling(last)
    while (
        sibling is not None
        and is_eligible_row(sibling)
        and not contains_blank_line(tree.source, last.end, sibling.start)
    ):
        last = sibling
        sibling = tree.next_sibling(last)

    chunk = [first]
    node: Node | None = first
    while node is not last and (node := tree.next_sibling(node)) is not None:
        chunk.append(node)
    return chunk
