class InvalidTransitionError(Exception):
    """Raised when a page record is moved to a status it cannot reach."""
