from typing import Optional

from .base import DiffIndentError


class ScanLimitExceeded(DiffIndentError):
    """
    The character scanner ran out of its step budget or stopped making progress.

    `format_markdown` catches this and returns the document unchanged.
    """

    def __init__(self, message: str, *, steps: int = 0, limit: int = 0, position: Optional[int] = None):
        super().__init__(message)
        self.steps = steps
        self.limit = limit
        self.position = position
