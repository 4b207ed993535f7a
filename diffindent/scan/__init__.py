from __future__ import annotations

from typing import Optional

from ..config import DEFAULT_CONFIG, SCANNER_CHARS, FormatConfig
from ..models import DiffBlock
from .chars import scan_chars
from .lines import CLOSE_FENCE_RE, OPEN_FENCE_RE, scan_lines

__all__ = ["find_diff_blocks", "scan_lines", "scan_chars", "OPEN_FENCE_RE", "CLOSE_FENCE_RE"]


def find_diff_blocks(
    text: str,
    config: Optional[FormatConfig] = None,
    *,
    logger=None,
    log: bool = False,
) -> list[DiffBlock]:
    """Return the ```diff blocks of `text` in document order, using the configured scanner."""
    config = (config or DEFAULT_CONFIG).validate()
    if config.scanner == SCANNER_CHARS:
        return scan_chars(text, budget_factor=config.scan_budget_factor, logger=logger, log=log)
    return scan_lines(text, logger=logger, log=log)
