class RosterError(Exception):
    """Base exception for roster and key-file errors."""


class ParseError(RosterError):
    """Raised when tabular input cannot be decoded or is not row-shaped."""
