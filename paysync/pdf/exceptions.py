class PdfError(Exception):
    """Base exception for all PDF engine errors."""


class DocumentError(PdfError):
    """Raised when source bytes are not a readable PDF or none are loaded."""


class PageRangeError(PdfError):
    """Raised when a page number falls outside [1, page_count]."""


class PdfEncryptionError(PdfError):
    """Raised when a page cannot be written as an encrypted PDF."""
