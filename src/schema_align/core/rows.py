from schema_align.core import node_types as nt
from schema_align.models import Node


def is_declaration_row(node: Node) -> bool:
    return node.type == nt.MODEL_FIELD


def is_comment_row(node: Node) -> bool:
    return node.type in nt.COMMENT_TYPES


def is_eligible_row(node: Node) -> bool:
    return is_declaration_row(node) or is_comment_row(node)


def row_tokens(row: Node) -> list[Node]:
    """Sub-tokens of a declaration row in order: name, type, then attributes."""
    return [child for child in row.children if child.type not in nt.COMMENT_TYPES]


def declaration_rows(block: Node) -> list[Node]:
    return [child for child in block.children if is_declaration_row(child)]
