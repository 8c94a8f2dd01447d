class SealError(Exception):
    """Raised when a page cannot be sealed."""


class SealNetworkError(SealError):
    """Raised when the remote sealing service cannot be reached."""
