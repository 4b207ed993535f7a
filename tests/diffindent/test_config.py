import dataclasses

import pytest

from diffindent import format_markdown
from diffindent.config import DEFAULT_CONFIG, MAX_DOCUMENT_BYTES, MAX_INDENT, FormatConfig
from diffindent.errors import ValidationError


def test_defaults():
    assert DEFAULT_CONFIG.policy == "baseline"
    assert DEFAULT_CONFIG.scanner == "lines"
    assert DEFAULT_CONFIG.max_indent == MAX_INDENT == 1000
    assert DEFAULT_CONFIG.max_document_bytes == MAX_DOCUMENT_BYTES == 100 * 1024 * 1024
    assert DEFAULT_CONFIG.validate() is DEFAULT_CONFIG


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.policy = "changed"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"policy": "sideways"},
        {"scanner": "regex"},
        {"max_document_bytes": 0},
        {"max_indent": -3},
        {"max_document_bytes": "big"},
        {"scan_budget_factor": True},
    ],
)
def test_validate_rejects_bad_values(kwargs):
    with pytest.raises(ValidationError):
        FormatConfig(**kwargs).validate()


def test_from_options_skips_none():
    cfg = FormatConfig.from_options(policy="changed", scanner=None, max_indent=None)
    assert cfg == FormatConfig(policy="changed")


def test_from_options_rejects_unknown_names():
    with pytest.raises(ValidationError, match="verbose"):
        FormatConfig.from_options(verbose=True)


def test_max_indent_zero_allows_only_flush_fences():
    cfg = FormatConfig(max_indent=0)
    assert cfg.validate() is cfg
    assert format_markdown("```diff\n-a\n```\n", cfg) == "```diff\n-a\n```\n"
    with pytest.raises(ValidationError, match="exceeds the limit of 0"):
        format_markdown(" ```diff\n-a\n ```\n", cfg)
