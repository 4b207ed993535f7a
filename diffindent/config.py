# diffindent/config.py
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

from .errors import ValidationError

POLICY_BASELINE = "baseline"
POLICY_CHANGED = "changed"
POLICIES = (POLICY_BASELINE, POLICY_CHANGED)

SCANNER_LINES = "lines"
SCANNER_CHARS = "chars"
SCANNERS = (SCANNER_LINES, SCANNER_CHARS)

MAX_INDENT = 1000
MAX_DOCUMENT_BYTES = 100 * 1024 * 1024
SCAN_BUDGET_FACTOR = 8


@dataclass(frozen=True)
class FormatConfig:
    """Everything a formatting pass needs besides the document itself."""

    policy: str = POLICY_BASELINE
    scanner: str = SCANNER_LINES
    max_indent: int = MAX_INDENT
    max_document_bytes: int = MAX_DOCUMENT_BYTES
    scan_budget_factor: int = SCAN_BUDGET_FACTOR

    def validate(self) -> "FormatConfig":
        """Raise ValidationError for unknown names or unusable limits; return self."""
        if self.policy not in POLICIES:
            raise ValidationError(
                f"Unknown indent policy {self.policy!r}; expected one of {', '.join(POLICIES)}."
            )
        if self.scanner not in SCANNERS:
            raise ValidationError(
                f"Unknown scanner {self.scanner!r}; expected one of {', '.join(SCANNERS)}."
            )
        # max_indent 0 admits only flush-left fences.
        for name, lowest in (("max_indent", 0), ("max_document_bytes", 1), ("scan_budget_factor", 1)):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < lowest:
                raise ValidationError(f"{name} must be an integer >= {lowest}, got {value!r}.")
        return self

    @classmethod
    def from_options(cls, **options: Any) -> "FormatConfig":
        """
        Build a validated config from keyword options, skipping those set to None.
        Unknown option names are rejected.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValidationError(f"Unknown config option(s): {', '.join(unknown)}.")
        given = {k: v for k, v in options.items() if v is not None}
        return replace(DEFAULT_CONFIG, **given).validate()


DEFAULT_CONFIG = FormatConfig()
