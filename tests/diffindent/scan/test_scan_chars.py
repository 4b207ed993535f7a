import pytest

from diffindent.config import FormatConfig
from diffindent.errors import ScanLimitExceeded
from diffindent.scan import find_diff_blocks, scan_chars, scan_lines
from diffindent.scan.chars import _CharScanner

DOCUMENTS = [
    "",
    "plain text only\n",
    "```diff\n-a\n```\n",
    "```diff\n-a\n```",
    "  ```diff\n- old\n+ new\n  ```\n",
    "```diff\n- x\n```diff\n+ y\n```\n",
    "before\n```diff\n- x\n+ y\n",
    "```diff",
    "```diff\n",
    "```diff\n```",
    "```diff\n```\n",
    "```diffstat\n-a\n```\n",
    "```diff extra words\n-a\n```\n",
    "```diff\r\n-a\r\n```\r\n",
    "\t```diff\n-a\n\t```\n",
    "text ```diff\n-a\n```\n",
    "```diff\n-a\n``` trailing\n````\n```\n",
    "````\n```diff\n-a\n```\n````\n",
    "``````````````\n`````\n```\n``\n`\n",
    "```diff\n\n\n   \n```\n\n```diff\n+b\n   ```   \n",
    "- list item\n  ```diff\n  - a\n  + b\n  ```\n- next\n",
    "```diff\n-a\n```\n```diff\n-b\n",
    "\n\n```diff\n-a\n```\n\n",
    "```diff\x00\n-\x00\n```\n",
]


@pytest.mark.parametrize("text", DOCUMENTS)
def test_char_scanner_matches_line_scanner(text):
    assert scan_chars(text) == scan_lines(text)


def test_stray_backticks_do_not_open_blocks():
    text = "`" * 500 + "\n" + "```" * 100 + "\n"
    assert scan_chars(text) == []


def test_opening_fence_at_eof_needs_newline():
    assert scan_chars("intro\n```diff") == []


def test_budget_exhaustion_raises():
    text = "a\nb\nc\nd\n"
    with pytest.raises(ScanLimitExceeded) as exc:
        scan_chars(text, budget_factor=1)
    err = exc.value
    assert err.limit == len(text) + 1
    assert err.steps > err.limit
    assert 0 <= err.position <= len(text)


def test_default_budget_is_enough_for_pathological_input():
    # Lots of near-miss fences, all whitespace-led.
    text = ("   ```dif\n" * 200) + ("\t \t```\n" * 200) + "```diff\n" + ("    ``` x\n" * 200) + "```"
    blocks = scan_chars(text)
    assert len(blocks) == 1
    assert blocks == scan_lines(text)


def test_find_diff_blocks_dispatches_on_scanner():
    text = "```diff\n-a\n```\n"
    lines_cfg = FormatConfig(scanner="lines")
    chars_cfg = FormatConfig(scanner="chars")
    assert find_diff_blocks(text, lines_cfg) == find_diff_blocks(text, chars_cfg)


def test_find_diff_blocks_uses_budget_from_config():
    with pytest.raises(ScanLimitExceeded):
        find_diff_blocks("a\nb\nc\nd\n", FormatConfig(scanner="chars", scan_budget_factor=1))


@pytest.mark.parametrize("text", ["ab\n", "```diff\nab\n```\n"])
def test_stalled_cursor_raises(monkeypatch, text):
    # A cursor that stops moving must fail fast instead of spinning on the budget.
    monkeypatch.setattr(_CharScanner, "_advance", lambda self, pos: pos)
    with pytest.raises(ScanLimitExceeded, match="no progress") as exc:
        scan_chars(text)
    assert exc.value.steps < exc.value.limit
