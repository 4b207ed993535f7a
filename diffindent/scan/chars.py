# diffindent/scan/chars.py
#
# Character-level recursive-descent scanner for the grammar
#
#   Document       -> (AnyChar | DiffBlock)*
#   DiffBlock      -> DiffBlockStart BodyChar* DiffBlockEnd
#   DiffBlockStart -> Spaces "```diff" RestOfLine Newline      (at a line start)
#   DiffBlockEnd   -> Spaces "```" Whitespace (Newline | EOF)  (at a line start)
#
# Every examined character is charged against a budget proportional to the
# input length, so malformed input cannot make the scan loop or go quadratic.
from __future__ import annotations

from typing import Optional

from .._logging import resolve_logger
from ..config import SCAN_BUDGET_FACTOR
from ..errors import ScanLimitExceeded
from ..models import CLOSE, OPEN, DiffBlock, Fence

_OPEN_TAG = "```diff"
_FENCE = "```"
_SPACES = " \t"


class _CharScanner:
    def __init__(self, text: str, budget_factor: int):
        self.text = text
        self.n = len(text)
        self.limit = budget_factor * (self.n + 1)
        self.steps = 0

    # ---------- bookkeeping ----------

    def _charge(self, pos: int, count: int = 1) -> None:
        self.steps += count
        if self.steps > self.limit:
            raise ScanLimitExceeded(
                f"Scan budget of {self.limit} steps exhausted at offset {pos}.",
                steps=self.steps,
                limit=self.limit,
                position=pos,
            )

    def _advance(self, pos: int) -> int:
        """AnyChar: consume exactly one character."""
        self._charge(pos)
        return pos + 1

    def _check_progress(self, before: int, after: int) -> None:
        """Each loop iteration must move the cursor forward."""
        if after <= before:
            raise ScanLimitExceeded(
                f"Scanner made no progress at offset {before}.",
                steps=self.steps,
                limit=self.limit,
                position=before,
            )

    def _at_line_start(self, pos: int) -> bool:
        return pos == 0 or self.text[pos - 1] == "\n"

    def _line_end(self, pos: int) -> int:
        eol = self.text.find("\n", pos)
        if eol == -1:
            eol = self.n
        self._charge(pos, eol - pos)
        return eol

    # ---------- productions ----------

    def _spaces(self, pos: int) -> int:
        while pos < self.n and self.text[pos] in _SPACES:
            self._charge(pos)
            pos += 1
        return pos

    def _literal(self, pos: int, lit: str) -> bool:
        self._charge(pos)
        return self.text.startswith(lit, pos)

    def _block_start(self, pos: int, line_no: int) -> Optional[Fence]:
        """DiffBlockStart at `pos`, or None (caller backtracks to `pos`)."""
        fence_pos = self._spaces(pos)
        if not self._literal(fence_pos, _OPEN_TAG):
            return None
        tag_end = fence_pos + len(_OPEN_TAG)
        eol = self._line_end(tag_end)
        if eol == self.n:
            # Newline is required after the opening fence.
            return None
        if eol > tag_end and not self.text[tag_end].isspace():
            return None  # e.g. ```diffstat
        return Fence(
            kind=OPEN,
            indent=fence_pos - pos,
            info=self.text[fence_pos + len(_FENCE):eol].strip(),
            line_no=line_no,
            line_start=pos,
            line_end=eol,
        )

    def _block_end(self, pos: int, line_no: int) -> Optional[Fence]:
        """DiffBlockEnd at `pos`, or None."""
        fence_pos = self._spaces(pos)
        if not self._literal(fence_pos, _FENCE):
            return None
        after = fence_pos + len(_FENCE)
        eol = self._line_end(after)
        if self.text[after:eol].strip():
            return None
        return Fence(
            kind=CLOSE,
            indent=fence_pos - pos,
            info="",
            line_no=line_no,
            line_start=pos,
            line_end=eol,
        )

    def _block_body(self, opener: Fence) -> Optional[DiffBlock]:
        """Consume body characters up to a DiffBlockEnd; None if EOF comes first."""
        body_start = opener.line_end + 1
        pos = body_start
        line_no = opener.line_no + 1
        while pos <= self.n:
            if self._at_line_start(pos):
                closer = self._block_end(pos, line_no)
                if closer is not None:
                    return DiffBlock(opener=opener, closer=closer, body_start=body_start, body_end=pos)
            if pos == self.n:
                break
            if self.text[pos] == "\n":
                line_no += 1
            next_pos = self._advance(pos)
            self._check_progress(pos, next_pos)
            pos = next_pos
        return None

    def scan(self) -> tuple[list[DiffBlock], Optional[Fence]]:
        blocks: list[DiffBlock] = []
        pos = 0
        line_no = 0
        while pos < self.n:
            if self._at_line_start(pos):
                opener = self._block_start(pos, line_no)
                if opener is not None:
                    block = self._block_body(opener)
                    if block is None:
                        # Unterminated: everything from here on is plain text.
                        return blocks, opener
                    blocks.append(block)
                    next_pos = block.closer.line_end + 1
                    self._check_progress(pos, next_pos)
                    pos = next_pos
                    line_no = block.closer.line_no + 1
                    continue
            if self.text[pos] == "\n":
                line_no += 1
            next_pos = self._advance(pos)
            self._check_progress(pos, next_pos)
            pos = next_pos
        return blocks, None


def scan_chars(
    text: str,
    *,
    budget_factor: int = SCAN_BUDGET_FACTOR,
    logger=None,
    log: bool = False,
) -> list[DiffBlock]:
    """
    Find ```diff blocks by scanning character by character.

    Reports the same blocks as `scan_lines`. Raises ScanLimitExceeded when
    the step budget (`budget_factor * (len(text) + 1)`) runs out.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    scanner = _CharScanner(text, budget_factor)
    blocks, unterminated = scanner.scan()
    if unterminated is not None:
        log.debug(f"Unterminated ```diff fence at line {unterminated.line_no}; leaving it as text.")
    log.debug(
        f"Character scan found {len(blocks)} diff block(s) in {scanner.steps}/{scanner.limit} steps."
    )
    return blocks
