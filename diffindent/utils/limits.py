# diffindent/utils/limits.py
from __future__ import annotations

from ..errors import ValidationError

# Worst case for UTF-8 is four bytes per code point.
_MAX_UTF8_WIDTH = 4


def validate_document(document: object, max_bytes: int) -> str:
    """Return `document` if it is a str of at most `max_bytes` UTF-8 bytes."""
    if not isinstance(document, str):
        raise ValidationError(
            f"Document must be str, got {type(document).__name__}."
        )
    if len(document) > max_bytes:
        size = len(document)
    elif len(document) * _MAX_UTF8_WIDTH <= max_bytes:
        return document
    else:
        size = len(document.encode("utf-8", errors="surrogatepass"))
    if size > max_bytes:
        raise ValidationError(
            f"Document is too large ({size} bytes or more); the limit is {max_bytes} bytes."
        )
    return document


def validate_indent(fence_indent: object, max_indent: int) -> int:
    """Return `fence_indent` if it is an int in [0, max_indent]."""
    if isinstance(fence_indent, bool) or not isinstance(fence_indent, int):
        raise ValidationError(
            f"fence_indent must be an int, got {type(fence_indent).__name__}."
        )
    if fence_indent < 0:
        raise ValidationError(f"fence_indent must not be negative, got {fence_indent}.")
    if fence_indent > max_indent:
        raise ValidationError(
            f"fence_indent {fence_indent} exceeds the limit of {max_indent}."
        )
    return fence_indent
