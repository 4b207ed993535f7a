# diffindent/rewrite/classify.py
from __future__ import annotations

from ..models import BLANK, CHANGED, CONTEXT, HEADER, BodyLine

# Unified-diff metadata lines. Checked after stripping leading whitespace.
DIFF_HEADER_PREFIXES = ("diff ", "---", "+++", "@@", "index ")
CHANGE_MARKERS = ("-", "+")


def is_diff_header(line: str) -> bool:
    return line.lstrip().startswith(DIFF_HEADER_PREFIXES)


def classify_line(line: str) -> str:
    """
    Classify one body line as header, changed, context or blank.

    A changed line carries its marker in the very first column; once a line
    has been indented it reads as context.
    """
    if not line.strip():
        return BLANK
    if is_diff_header(line):
        return HEADER
    if line.startswith(CHANGE_MARKERS):
        return CHANGED
    return CONTEXT


def classify_body(lines: list[str]) -> list[BodyLine]:
    return [BodyLine(text=line, kind=classify_line(line)) for line in lines]
