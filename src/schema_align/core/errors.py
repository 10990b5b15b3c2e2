class FormatError(Exception):
    """Base class for errors raised while formatting a block."""


class NoEnclosingBlockError(FormatError):
    def __init__(self, offset: int) -> None:
        super().__init__(f"No model-like block encloses offset {offset}")
        self.offset = offset


class MalformedRowError(FormatError):
    def __init__(self, token_count: int, boundary: int) -> None:
        super().__init__(f"Row has {token_count} sub-token(s); column boundary {boundary} needs {boundary + 2}")
        self.token_count = token_count
        self.boundary = boundary
