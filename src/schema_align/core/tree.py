from __future__ import annotations

from collections.abc import Callable, Iterator

from schema_align.core.ports.parser import SchemaParser
from schema_align.models import Node


class SyntaxTree:
    """One immutable parse of a source text.

    Nodes carry no parent links, so the tree keeps an index from each node to
    its parent and its position among the parent's children.
    """

    def __init__(self, source: str, root: Node) -> None:
        self.source = source
        self.root = root
        self._parents: dict[int, tuple[Node, int]] = {}
        for node in self.walk():
            for index, child in enumerate(node.children):
                self._parents[id(child)] = (node, index)

    @classmethod
    def parse(cls, source: str, parser: SchemaParser) -> SyntaxTree:
        return cls(source, parser(source))

    def walk(self, node: Node | None = None) -> Iterator[Node]:
        """Yield ``node`` (default: the root) and its descendants in source order."""
        stack = [node if node is not None else self.root]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    def text(self, node: Node) -> str:
        return self.source[node.start : node.end]

    def parent(self, node: Node) -> Node | None:
        entry = self._parents.get(id(node))
        return entry[0] if entry else None

    def _sibling(self, node: Node, step: int) -> Node | None:
        entry = self._parents.get(id(node))
        if entry is None:
            return None
        parent, index = entry
        index += step
        if 0 <= index < parent.child_count:
            return parent.child_at(index)
        return None

    def prev_sibling(self, node: Node) -> Node | None:
        return self._sibling(node, -1)

    def next_sibling(self, node: Node) -> Node | None:
        return self._sibling(node, 1)

    def node_at(self, offset: int) -> Node:
        """Return the deepest node whose span contains ``offset``."""
        node = self.root
        while True:
            child = next((c for c in node.children if c.start <= offset < c.end), None)
            if child is None:
                return node
            node = child

    def find_nearest_ancestor(self, node: Node, predicate: Callable[[Node], bool]) -> Node | None:
        """Return ``node`` or its closest ancestor satisfying ``predicate``."""
        current: Node | None = node
        while current is not None:
            if predicate(current):
                return current
            current = self.parent(current)
        return None

    def find_first_descendant_of_type(self, node: Node, type_: str) -> Node | None:
        return next((n for n in self.walk(node) if n is not node and n.type == type_), None)
