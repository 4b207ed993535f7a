from .blocks import BLANK, CHANGED, CONTEXT, HEADER, BodyLine, DiffBlock
from .fence import CLOSE, OPEN, Fence

__all__ = [
    "DiffBlock",
    "BodyLine",
    "Fence",
    "HEADER",
    "CHANGED",
    "CONTEXT",
    "BLANK",
    "OPEN",
    "CLOSE",
]
