from .base import DiffIndentError


class ValidationError(DiffIndentError, ValueError):
    """Malformed call into the formatter: bad input type, indent or size."""
