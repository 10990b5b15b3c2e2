"""Unit tests for the tree-sitter schema snapshot."""

from collections.abc import Sequence

from schema_align.core.parser import parse_schema
from schema_align.core.rows import row_tokens
from schema_align.models import Node
from tests.conftest import block_rows, parse_tree

SOURCE = "model User {\n  id Int @id // c\n  // hi\n\n  name String?\n  @@index([a])\n}"


def _types(nodes: Sequence[Node]) -> list[str]:
    return [n.type for n in nodes]


class TestTopLevel:
    def test_empty_source(self) -> None:
        root = parse_schema("")
        assert root.type == "source_file"
        assert root.children == ()

    def test_blocks(self, full_schema: str) -> None:
        tree = parse_tree(full_schema)
        blocks = [n for n in tree.root.children if n.type == "model_block"]
        assert [tree.text(b).split()[1] for b in blocks] == ["User", "Post"]
        assert "enum_block" in _types(tree.root.children)

    def test_only_named_nodes_are_kept(self) -> None:
        tree = parse_tree(SOURCE)
        types = {n.type for n in tree.walk()}
        assert not types & {"model", "{", "}", "@", "@@", "(", ")"}

    def test_malformed_input_does_not_raise(self) -> None:
        root = parse_schema("model {{ = ]\n")
        assert root.type == "source_file"


class TestModelBlock:
    def test_block_children(self) -> None:
        tree = parse_tree(SOURCE)
        block = tree.root.children[0]
        assert block.type == "model_block"
        assert tree.text(block.children[0]) == "User"
        assert _types(block_rows(tree)) == [
            "model_field",
            "comment",
            "comment",
            "model_field",
            "model_multi_attribute",
        ]
        assert [tree.text(n) for n in block_rows(tree)[1:3]] == ["// c", "// hi"]

    def test_row_tokens(self) -> None:
        tree = parse_tree(SOURCE)
        first, last = block_rows(tree)[0], block_rows(tree)[3]
        assert _types(row_tokens(first)) == ["identifier", "field_type", "model_single_attribute"]
        assert [tree.text(t) for t in row_tokens(first)] == ["id", "Int", "@id"]
        assert [tree.text(t) for t in row_tokens(last)] == ["name", "String?"]

    def test_attribute_arguments_stay_whole(self, user_schema: str) -> None:
        tree = parse_tree(user_schema)
        tokens = row_tokens(block_rows(tree)[0])
        assert [tree.text(t) for t in tokens] == ["id", "Int", "@id", "@default(autoincrement())"]

    def test_positions(self, user_schema: str) -> None:
        tree = parse_tree(user_schema)
        row = block_rows(tree)[1]
        assert row.start_point.row == 2
        assert row.start_point.column == 4
        assert row.start == user_schema.index("email")


class TestCharacterOffsets:
    def test_offsets_count_characters_not_bytes(self) -> None:
        source = "model A {\n  // héllo wörld\n  id Int\n}\n"
        tree = parse_tree(source)
        row = block_rows(tree)[1]
        assert row.type == "model_field"
        assert row.start == source.index("id Int")
        assert tree.text(row) == "id Int"

    def test_columns_count_characters(self) -> None:
        source = "model A {\n  label String @default(\"ü\") @map(\"x\")\n}\n"
        tree = parse_tree(source)
        tokens = row_tokens(block_rows(tree)[0])
        assert tree.text(tokens[-1]) == '@map("x")'
        assert tokens[-1].start_point.column == source.split("\n")[1].index("@map")
