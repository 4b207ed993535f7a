class DiffIndentError(Exception):
    """Base class for every error raised by diffindent."""
