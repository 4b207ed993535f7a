# diffindent/utils/text.py
from __future__ import annotations


def leading_spaces(s: str) -> int:
    """Number of ' ' characters at the start of `s` (tabs are not spaces)."""
    return len(s) - len(s.lstrip(" "))


def split_body(body: str) -> tuple[list[str], bool]:
    """
    Split a block body into lines without their '\\n' terminators.

    The second value tells whether the body ended with a newline, which is
    always the case for a non-empty body taken from between two fences.
    """
    if not body:
        return [], False
    lines = body.split("\n")
    terminated = body.endswith("\n")
    if terminated:
        lines.pop()
    return lines, terminated
