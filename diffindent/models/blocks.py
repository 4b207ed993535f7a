from dataclasses import dataclass

from .fence import Fence

HEADER = "header"
CHANGED = "changed"
CONTEXT = "context"
BLANK = "blank"


@dataclass(frozen=True)
class DiffBlock:
    """
    A ```diff fence region of the source text.

    `body_start`/`body_end` delimit the lines strictly between the fences,
    including the newline that ends the last body line.
    """

    opener: Fence
    closer: Fence
    body_start: int
    body_end: int

    @property
    def fence_indent(self) -> int:
        return self.opener.indent

    @property
    def start_offset(self) -> int:
        return self.opener.line_start

    @property
    def end_offset(self) -> int:
        return self.closer.line_end

    @property
    def start_line(self) -> int:
        return self.opener.line_no

    @property
    def end_line(self) -> int:
        return self.closer.line_no

    @property
    def body_start_line(self) -> int:
        return self.opener.line_no + 1

    @property
    def body_end_line(self) -> int:
        """Exclusive: the index of the closing fence's line."""
        return self.closer.line_no

    def body(self, text: str) -> str:
        return text[self.body_start:self.body_end]


@dataclass(frozen=True)
class BodyLine:
    """One line of a block body together with its classification."""

    text: str
    kind: str  # HEADER, CHANGED, CONTEXT or BLANK
