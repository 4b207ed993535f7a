from dataclasses import dataclass

OPEN = "open"
CLOSE = "close"


@dataclass(frozen=True)
class Fence:
    """A line recognized as a diff fence opener or a fence closer."""
    kind: str             # OPEN or CLOSE
    indent: int           # length of the whitespace run before the backticks
    info: str             # text after the backticks on that line, stripped
    line_no: int          # 0-based line index
    line_start: int       # abs index of start of the fence's line
    line_end: int         # abs index of '\n' ending the fence's line (or len(text))
