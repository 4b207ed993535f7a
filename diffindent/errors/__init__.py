from .base import DiffIndentError
from .invariant import InvariantViolation
from .scan import ScanLimitExceeded
from .validation import ValidationError

__all__ = ["DiffIndentError", "ValidationError", "ScanLimitExceeded", "InvariantViolation"]
