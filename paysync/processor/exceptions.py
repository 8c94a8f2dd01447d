class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class PreconditionError(ProcessorError):
    """Raised when a stage starts without the state it requires."""
