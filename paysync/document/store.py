from paysync.logging.logger import Log
from paysync.pdf.base import BasePdfEngine
from paysync.pdf.exceptions import DocumentError


class DocumentStore:
    """Single-slot holder of the source document for one workflow session.

    Loading replaces the previous document entirely. The stored bytes are
    immutable and every extraction reopens them, so concurrent
    ``extract_page`` calls need no locking.
    """

    def __init__(self, engine: BasePdfEngine) -> None:
        self._engine = engine
        self._pdf_bytes: bytes | None = None
        self._page_count = 0
        self._file_name = ""

    @property
    def is_loaded(self) -> bool:
        return self._pdf_bytes is not None

    @property
    def page_count(self) -> int:
        return self._page_count

    @property
    def file_name(self) -> str:
        return self._file_name

    def load(self, pdf_bytes: bytes, file_name: str = "") -> int:
        """Store a new source document and return its page count.

        Raises:
            DocumentError: if the bytes are empty or not a readable PDF.
        """
        if not pdf_bytes:
            raise DocumentError("Document is empty")
        page_count = self._engine.page_count(bytes(pdf_bytes))
        self._pdf_bytes = bytes(pdf_bytes)
        self._page_count = page_count
        self._file_name = file_name
        Log.info(
            f"Stored document '{file_name}' ({len(pdf_bytes)} bytes, {page_count} pages)"
        )
        return page_count

    def extract_page(self, page_number: int) -> bytes:
        """Return page ``page_number`` (1-indexed) as a single-page PDF.

        Raises:
            DocumentError: if no document is loaded.
            PageRangeError: if the page number is out of range.
        """
        if self._pdf_bytes is None:
            raise DocumentError("No document loaded. Load a PDF first.")
        page = self._engine.extract_page(self._pdf_bytes, page_number)
        Log.debug(f"Extracted page {page_number} ({len(page)} bytes)")
        return page

    def clear(self) -> None:
        self._pdf_bytes = None
        self._page_count = 0
        self._file_name = ""
