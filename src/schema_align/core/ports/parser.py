from typing import Protocol

from schema_align.models import Node


class SchemaParser(Protocol):
    def __call__(self, source: str) -> Node: ...
