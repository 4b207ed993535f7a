from .classify import DIFF_HEADER_PREFIXES, classify_body, classify_line, is_diff_header
from .policies import (
    calculate_min_code_indent,
    rewrite_baseline,
    rewrite_body,
    rewrite_changed_lines,
    split_marker,
)

__all__ = [
    "DIFF_HEADER_PREFIXES",
    "classify_line",
    "classify_body",
    "is_diff_header",
    "calculate_min_code_indent",
    "rewrite_baseline",
    "rewrite_changed_lines",
    "rewrite_body",
    "split_marker",
]
