from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int
    column: int


class Node(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    start: int
    end: int
    start_point: Position
    end_point: Position
    children: tuple[Node, ...] = ()

    @property
    def child_count(self) -> int:
        return len(self.children)

    def child_at(self, index: int) -> Node:
        return self.children[index]


Node.model_rebuild()  # necessary for recursive types


class BlockSummary(BaseModel):
    kind: str
    name: str
    line: int
    rows: int
    chunks: int


class FormatResult(BaseModel):
    text: str
    block_name: str
    rows: int
    edits: int

    @property
    def changed(self) -> bool:
        return self.edits > 0
