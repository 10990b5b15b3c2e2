from schema_align.core.align import gap_edit, width_of_column
from schema_align.core.chunks import chunk_of
from schema_align.core.errors import FormatError, MalformedRowError, NoEnclosingBlockError
from schema_align.core.formatter import find_enclosing_block, format_block, list_blocks
from schema_align.core.parser import parse_schema
from schema_align.core.text import Edit, apply_edits
from schema_align.core.tree import SyntaxTree

__all__ = [
    "Edit",
    "FormatError",
    "MalformedRowError",
    "NoEnclosingBlockError",
    "SyntaxTree",
    "apply_edits",
    "chunk_of",
    "find_enclosing_block",
    "format_block",
    "gap_edit",
    "list_blocks",
    "parse_schema",
    "width_of_column",
]
