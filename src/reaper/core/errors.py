class ReaperException(Exception):
    """Raised when repair segments cannot be planned for a ring."""
