from .base import DiffIndentError


class InvariantViolation(DiffIndentError, AssertionError):
    """A computed block span is inconsistent with the document. Indicates a bug."""
