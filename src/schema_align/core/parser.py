"""Parse Prisma schema text with tree-sitter and snapshot the result.

Tree-sitter reports UTF-8 byte offsets. The formatter edits Python strings, so
spans and point columns are converted to character offsets while copying.
Only named nodes are copied: keywords and braces never appear as rows.
"""

from typing import cast

from tree_sitter import Node as TsNode
from tree_sitter_language_pack import SupportedLanguage, get_parser

from schema_align.core.text import line_start
from schema_align.models import Node, Position

LANGUAGE = cast(SupportedLanguage, "prisma")


def _char_offsets(source: str) -> list[int]:
    """Map every UTF-8 byte offset of ``source`` to its character offset."""
    offsets: list[int] = []
    for index, char in enumerate(source):
        offsets.extend([index] * len(char.encode("utf-8")))
    offsets.append(len(source))
    return offsets


def parse_schema(source: str) -> Node:
    """Parse schema ``source`` into an immutable node tree rooted at ``source_file``.

    Malformed input never raises; tree-sitter wraps what it cannot match in
    ``ERROR`` nodes.
    """
    source_bytes = source.encode("utf-8")
    tree = get_parser(LANGUAGE).parse(source_bytes)
    char_at = _char_offsets(source)

    def position(row: int, offset: int) -> Position:
        return Position(row=row, column=offset - line_start(source, offset))

    def node_to_model(node: TsNode) -> Node:
        start = char_at[node.start_byte]
        end = char_at[node.end_byte]
        return Node(
            type=node.type,
            start=start,
            end=end,
            start_point=position(node.start_point[0], start),
            end_point=position(node.end_point[0], end),
            children=tuple(node_to_model(child) for child in node.named_children),
        )

    return node_to_model(tree.root_node)
