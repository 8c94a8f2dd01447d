from abc import ABC, abstractmethod

from paysync.pdf.models import SealPermissions


class BasePdfEngine(ABC):
    """Contract for all PDF engine adapters."""

    @abstractmethod
    def page_count(self, pdf_bytes: bytes) -> int:
        """Return the number of pages in a PDF.

        Raises:
            DocumentError: if the bytes are not a readable PDF.
        """

    @abstractmethod
    def extract_page(self, pdf_bytes: bytes, page_number: int) -> bytes:
        """Copy one page (1-indexed) into a new single-page PDF.

        The source bytes are never modified and the same input always
        yields byte-identical output.

        Raises:
            DocumentError: if the bytes are not a readable PDF.
            PageRangeError: if page_number is outside [1, page_count].
        """

    @abstractmethod
    def encrypt(
        self,
        pdf_bytes: bytes,
        *,
        user_password: str,
        owner_password: str,
        permissions: SealPermissions,
    ) -> bytes:
        """Return an AES-256 encrypted copy of a PDF.

        Raises:
            PdfEncryptionError: if the input is malformed or writing fails.
        """
