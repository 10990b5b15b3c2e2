"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from schema_align.core.parser import parse_schema
from schema_align.core.rows import declaration_rows, row_tokens
from schema_align.core.tree import SyntaxTree
from schema_align.models import Node, Position

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def parse_tree(source: str) -> SyntaxTree:
    return SyntaxTree.parse(source, parse_schema)


def block_rows(tree: SyntaxTree, index: int = 0) -> tuple[Node, ...]:
    """Children of top-level block ``index`` after its name."""
    return tree.root.children[index].children[1:]


def make_node(type_: str, start: int, end: int, *children: Node) -> Node:
    """Build a node on line 0, for hand-made trees the grammar would not produce."""
    return Node(
        type=type_,
        start=start,
        end=end,
        start_point=Position(row=0, column=start),
        end_point=Position(row=0, column=end),
        children=children,
    )


def token_columns(source: str, boundary: int) -> dict[int, int]:
    """Map 1-based line number to the column where sub-token ``boundary + 1`` starts."""
    tree = parse_tree(source)
    columns: dict[int, int] = {}
    for block in tree.root.children:
        for row in declaration_rows(block):
            tokens = row_tokens(row)
            if len(tokens) > boundary + 1:
                columns[row.start_point.row + 1] = tokens[boundary + 1].start_point.column
    return columns


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def user_schema() -> str:
    """A model whose four fields are indented and spaced inconsistently."""
    return (
        "model User {\n"
        "id Int @id @default(autoincrement())\n"
        "    email    String @unique\n"
        "  name String?\n"
        "  posts   Post[]\n"
        "}\n"
    )


@pytest.fixture
def post_schema() -> str:
    """A model whose fields form three blank-line separated chunks."""
    return (
        "model Post {\n"
        "  id     Int @id\n"
        "\n"
        "  title String\n"
        "  content String?\n"
        "  published Boolean   @default(false)\n"
        "\n"
        "  author User @relation(fields: [authorId], references: [id])\n"
        "  authorId Int\n"
        "}\n"
    )


@pytest.fixture
def full_schema(user_schema: str, post_schema: str) -> str:
    return (
        'datasource db {\n  provider = "postgresql"\n  url      = env("DATABASE_URL")\n}\n\n'
        + 'generator client {\n  provider = "prisma-client-js"\n}\n\n'
        + user_schema
        + "\n"
        + post_schema
        + "\nenum Role {\n  USER\n  ADMIN @map(\"admin\")\n}\n"
    )
