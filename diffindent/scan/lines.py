# diffindent/scan/lines.py
from __future__ import annotations

import re

from .._logging import resolve_logger
from ..models import CLOSE, OPEN, DiffBlock, Fence

# ```diff at the start of a line; anything after the tag must be separated by whitespace.
OPEN_FENCE_RE = re.compile(r"(?P<indent>[ \t]*)```diff(?:\s.*)?")
# Bare ``` with nothing but whitespace (a stray '\r' included) after it.
CLOSE_FENCE_RE = re.compile(r"(?P<indent>[ \t]*)```\s*")

_OUTSIDE = "OUTSIDE"
_IN_BLOCK = "IN_BLOCK"


def scan_lines(text: str, *, logger=None, log: bool = False) -> list[DiffBlock]:
    """
    Find ```diff blocks with a two-state machine over the document's lines.

    While a block is open, another ```diff line is plain body text. A block
    whose closing fence never arrives is not reported.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)

    blocks: list[DiffBlock] = []
    state = _OUTSIDE
    opener: Fence | None = None

    pos = 0
    for line_no, line in enumerate(text.split("\n")):
        line_start = pos
        line_end = pos + len(line)
        pos = line_end + 1

        if state == _OUTSIDE:
            m = OPEN_FENCE_RE.fullmatch(line)
            if m:
                indent = len(m.group("indent"))
                opener = Fence(
                    kind=OPEN,
                    indent=indent,
                    info=line[indent + 3:].strip(),
                    line_no=line_no,
                    line_start=line_start,
                    line_end=line_end,
                )
                state = _IN_BLOCK
            continue

        m = CLOSE_FENCE_RE.fullmatch(line)
        if m:
            closer = Fence(
                kind=CLOSE,
                indent=len(m.group("indent")),
                info="",
                line_no=line_no,
                line_start=line_start,
                line_end=line_end,
            )
            blocks.append(
                DiffBlock(
                    opener=opener,
                    closer=closer,
                    body_start=opener.line_end + 1,
                    body_end=line_start,
                )
            )
            opener = None
            state = _OUTSIDE

    if opener is not None:
        log.debug(f"Unterminated ```diff fence at line {opener.line_no}; leaving it as text.")
    log.debug(f"Line scan found {len(blocks)} diff block(s).")
    return blocks
