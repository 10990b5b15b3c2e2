# Node type names produced by the tree-sitter Prisma grammar.

SOURCE_FILE = "source_file"
ERROR = "ERROR"

IDENTIFIER = "identifier"
FIELD_TYPE = "field_type"

COMMENT = "comment"
DOCUMENT_COMMENT = "document_comment"

MODEL_BLOCK = "model_block"
VIEW_BLOCK = "view_block"
TYPE_BLOCK = "type_block"
ENUM_BLOCK = "enum_block"

MODEL_FIELD = "model_field"
MODEL_SINGLE_ATTRIBUTE = "model_single_attribute"
MODEL_MULTI_ATTRIBUTE = "model_multi_attribute"

COMMENT_TYPES = frozenset({COMMENT, DOCUMENT_COMMENT})


def block_kind(block_type: str) -> str:
    """``model_block`` -> ``model``."""
    return block_type.removesuffix("_block")
