# diffindent/core.py
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ._logging import resolve_logger
from .assemble import assemble, render_body
from .config import DEFAULT_CONFIG, MAX_INDENT, POLICY_BASELINE, FormatConfig
from .errors import ScanLimitExceeded, ValidationError
from .models import DiffBlock
from .rewrite import rewrite_body
from .scan import find_diff_blocks
from .utils.limits import validate_document
from .utils.text import split_body

__all__ = ["format_markdown", "format_block"]


def format_markdown(
    document: str,
    config: Optional[FormatConfig] = None,
    *,
    logger=None,
    log: bool = False,
) -> str:
    """
    Re-indent the body of every ```diff block in a Markdown document.

    Returns a new string; text outside block bodies, fence lines included, is
    unchanged. If the scanner gives up (ScanLimitExceeded) the document is
    returned as-is rather than risk rewriting it wrongly.

    Raises:
        ValidationError: `document` is not a str, is larger than
            `config.max_document_bytes`, or a block's indent is over `config.max_indent`.
        InvariantViolation: a block span does not fit the document.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    config = (config or DEFAULT_CONFIG).validate()
    validate_document(document, config.max_document_bytes)

    try:
        blocks = find_diff_blocks(document, config, logger=log)
    except ScanLimitExceeded as e:
        log.warning(f"Scan aborted, returning document unchanged: {e}")
        return document

    if not blocks:
        return document

    replacements: List[Tuple[DiffBlock, str]] = []
    for blk in blocks:
        body = blk.body(document)
        lines, terminated = split_body(body)
        new_lines = rewrite_body(
            lines,
            blk.fence_indent,
            config.policy,
            max_indent=config.max_indent,
            logger=log,
        )
        new_body = render_body(new_lines, terminated)
        if new_body != body:
            log.debug(f"Block at lines {blk.start_line}-{blk.end_line} re-indented.")
            replacements.append((blk, new_body))

    return assemble(document, replacements)


def format_block(
    block_lines: List[str],
    fence_indent: int,
    policy: str = POLICY_BASELINE,
    *,
    max_indent: int = MAX_INDENT,
) -> List[str]:
    """
    Format one block given as its full list of lines, both fences included.

    The first and last lines are treated as the fences and returned untouched.
    """
    if len(block_lines) < 2:
        raise ValidationError(
            f"A block needs an opening and a closing fence line, got {len(block_lines)} line(s)."
        )
    body = rewrite_body(block_lines[1:-1], fence_indent, policy, max_indent=max_indent)
    return [block_lines[0], *body, block_lines[-1]]
