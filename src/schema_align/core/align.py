import logging

from schema_align.core.chunks import chunk_of
from schema_align.core.errors import MalformedRowError
from schema_align.core.rows import is_declaration_row, row_tokens
from schema_align.core.text import Edit
from schema_align.core.tree import SyntaxTree
from schema_align.models import Node

logger = logging.getLogger(__name__)


def width_of_column(tree: SyntaxTree, chunk: list[Node], k: int) -> int:
    """Longest sub-token ``k`` among the chunk's declaration rows.

    Comment rows and rows without a token at ``k`` do not contribute.
    """
    widths = [
        len(tree.text(tokens[k]))
        for tokens in (row_tokens(row) for row in chunk if is_declaration_row(row))
        if len(tokens) > k
    ]
    return max(widths, default=0)


def gap_edit(tree: SyntaxTree, row: Node, k: int) -> Edit | None:
    """Edit that makes the gap after sub-token ``k`` line up across the row's chunk.

    Returns ``None`` when the gap already has the required width.
    """
    tokens = row_tokens(row)
    if len(tokens) < k + 2:
        raise MalformedRowError(len(tokens), k)

    max_width = width_of_column(tree, chunk_of(tree, row), k)
    word_len = len(tree.text(tokens[k]))
    gap_len = tokens[k + 1].start - tokens[k].end
    needed_gap = max_width - word_len + 1
    delta = needed_gap - gap_len
    logger.debug(
        "Boundary %d at line %d: width=%d gap=%d needed=%d",
        k,
        row.start_point.row + 1,
        max_width,
        gap_len,
        needed_gap,
    )

    if delta > 0:
        return Edit(offset=tokens[k + 1].start, text=" " * delta)
    if delta < 0:
        return Edit(offset=tokens[k + 1].start + delta, delete_length=-delta)
    return None
