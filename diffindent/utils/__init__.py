# diffindent/utils/__init__.py
from .limits import validate_document, validate_indent
from .text import leading_spaces, split_body

__all__ = [
    "leading_spaces",
    "split_body",
    "validate_document",
    "validate_indent",
]
