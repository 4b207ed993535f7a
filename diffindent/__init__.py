from .assemble import assemble, render_body
from .config import DEFAULT_CONFIG, POLICY_BASELINE, POLICY_CHANGED, FormatConfig
from .core import format_block, format_markdown
from .errors import (
    DiffIndentError,
    InvariantViolation,
    ScanLimitExceeded,
    ValidationError,
)
from .models import BodyLine, DiffBlock, Fence
from .rewrite import (
    calculate_min_code_indent,
    classify_line,
    rewrite_baseline,
    rewrite_body,
    rewrite_changed_lines,
)
from .scan import find_diff_blocks, scan_chars, scan_lines

__all__ = [
    "format_markdown",
    "format_block",
    "find_diff_blocks",
    "scan_lines",
    "scan_chars",
    "rewrite_body",
    "rewrite_baseline",
    "rewrite_changed_lines",
    "calculate_min_code_indent",
    "classify_line",
    "assemble",
    "render_body",
    "FormatConfig",
    "DEFAULT_CONFIG",
    "POLICY_BASELINE",
    "POLICY_CHANGED",
    "DiffBlock",
    "BodyLine",
    "Fence",
    "DiffIndentError",
    "ValidationError",
    "ScanLimitExceeded",
    "InvariantViolation",
]
