# diffindent/assemble.py
from __future__ import annotations

from typing import Sequence, Tuple

from .errors import InvariantViolation
from .models import DiffBlock

__all__ = ["assemble", "render_body", "check_spans"]


def render_body(lines: list[str], terminated: bool) -> str:
    """Inverse of `utils.text.split_body`."""
    if not lines:
        return ""
    return "\n".join(lines) + ("\n" if terminated else "")


def check_spans(text: str, blocks: Sequence[DiffBlock]) -> None:
    """
    Raise InvariantViolation unless every block lies inside `text` with
    start <= body_start <= body_end <= end, and blocks are ordered and disjoint.
    """
    prev_end = -1
    for i, blk in enumerate(blocks):
        if not (0 <= blk.start_offset <= blk.body_start <= blk.body_end <= blk.end_offset <= len(text)):
            raise InvariantViolation(
                f"Block {i} span [{blk.start_offset}, {blk.end_offset}) with body "
                f"[{blk.body_start}, {blk.body_end}) is out of bounds for a document of {len(text)} chars."
            )
        if blk.fence_indent < 0:
            raise InvariantViolation(f"Block {i} has negative fence indent {blk.fence_indent}.")
        if blk.start_offset <= prev_end:
            raise InvariantViolation(
                f"Block {i} starts at {blk.start_offset}, overlapping the previous block ending at {prev_end}."
            )
        prev_end = blk.end_offset


def assemble(text: str, replacements: Sequence[Tuple[DiffBlock, str]]) -> str:
    """
    Replace each block's body span with its new body text.

    Fence lines and everything outside the bodies are kept byte for byte.
    Splicing runs from the last block to the first so earlier offsets stay valid.
    """
    if not replacements:
        return text
    check_spans(text, [blk for blk, _ in replacements])

    pieces: list[str] = []
    tail = len(text)
    for blk, new_body in reversed(replacements):
        pieces.append(text[blk.body_end:tail])
        pieces.append(new_body)
        tail = blk.body_start
    pieces.append(text[:tail])
    return "".join(reversed(pieces))
