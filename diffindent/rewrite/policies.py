# diffindent/rewrite/policies.py
from __future__ import annotations

from typing import Iterable

from .._logging import resolve_logger
from ..config import MAX_INDENT, POLICY_BASELINE, POLICY_CHANGED
from ..errors import ValidationError
from ..models import BLANK, CHANGED, HEADER
from ..utils.limits import validate_indent
from ..utils.text import leading_spaces
from .classify import classify_body, classify_line

__all__ = [
    "split_marker",
    "calculate_min_code_indent",
    "rewrite_changed_lines",
    "rewrite_baseline",
    "rewrite_body",
]


def split_marker(line: str) -> tuple[str, str]:
    """
    Split a changed line into its marker and the rest.

    The marker is the '-'/'+' sign plus the single space that conventionally
    separates it from the content, when present.
    """
    if line[1:2] == " ":
        return line[:2], line[2:]
    return line[:1], line[1:]


def calculate_min_code_indent(lines: Iterable[str]) -> int:
    """Smallest leading-space count over lines that are neither blank nor diff headers."""
    indents = [
        leading_spaces(line)
        for line in lines
        if classify_line(line) not in (BLANK, HEADER)
    ]
    return min(indents) if indents else 0


def rewrite_changed_lines(lines: list[str], fence_indent: int) -> list[str]:
    """
    Move each changed line's marker to column `fence_indent`.

    Up to `fence_indent` spaces found right after the marker are taken away, so
    indentation that was typed after the sign ends up in front of it. Every
    other line is returned untouched.
    """
    prefix = " " * fence_indent
    out: list[str] = []
    for body_line in classify_body(lines):
        if body_line.kind != CHANGED:
            out.append(body_line.text)
            continue
        marker, rest = split_marker(body_line.text)
        k = min(fence_indent, leading_spaces(rest))
        out.append(prefix + marker + rest[k:])
    return out


def rewrite_baseline(lines: list[str], fence_indent: int) -> list[str]:
    """
    Shift the block so its least-indented code line sits at `fence_indent`.

    Header and blank lines neither count toward the baseline nor move. Blocks
    already at or beyond the fence indent are left alone.
    """
    pad = max(fence_indent - calculate_min_code_indent(lines), 0)
    if not pad:
        return list(lines)
    prefix = " " * pad
    return [
        b.text if b.kind in (BLANK, HEADER) else prefix + b.text
        for b in classify_body(lines)
    ]


_POLICIES = {
    POLICY_BASELINE: rewrite_baseline,
    POLICY_CHANGED: rewrite_changed_lines,
}


def rewrite_body(
    lines: list[str],
    fence_indent: int,
    policy: str = POLICY_BASELINE,
    *,
    max_indent: int = MAX_INDENT,
    logger=None,
    log: bool = False,
) -> list[str]:
    """
    Re-indent the body lines of one diff block.

    Raises:
        ValidationError: `fence_indent` is not an int in [0, max_indent], or
            `policy` is unknown.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    validate_indent(fence_indent, max_indent)
    try:
        rewrite = _POLICIES[policy]
    except KeyError:
        raise ValidationError(
            f"Unknown indent policy {policy!r}; expected one of {', '.join(_POLICIES)}."
        ) from None

    new_lines = rewrite(lines, fence_indent)
    changed = sum(1 for old, new in zip(lines, new_lines) if old != new)
    log.debug(f"policy={policy} fence_indent={fence_indent}: {changed}/{len(lines)} line(s) re-indented")
    return new_lines
