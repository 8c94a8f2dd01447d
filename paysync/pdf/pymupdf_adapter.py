import threading

import pymupdf

from paysync.pdf.base import BasePdfEngine
from paysync.pdf.exceptions import DocumentError, PageRangeError, PdfEncryptionError
from paysync.pdf.models import SealPermissions


def _to_pymupdf_permissions(permissions: SealPermissions) -> int:
    flags = 0
    if permissions.print_high_resolution:
        flags |= pymupdf.PDF_PERM_PRINT | pymupdf.PDF_PERM_PRINT_HQ
    if permissions.copy_content:
        flags |= pymupdf.PDF_PERM_COPY
    if permissions.modify_content:
        flags |= pymupdf.PDF_PERM_MODIFY
    if permissions.annotate:
        flags |= pymupdf.PDF_PERM_ANNOTATE
    if permissions.fill_forms:
        flags |= pymupdf.PDF_PERM_FORM
    if permissions.accessibility:
        flags |= pymupdf.PDF_PERM_ACCESSIBILITY
    if permissions.assemble_document:
        flags |= pymupdf.PDF_PERM_ASSEMBLE
    return flags


# MuPDF keeps process-wide state and does not support concurrent use.
_MUPDF_LOCK = threading.Lock()


class PyMuPdfAdapter(BasePdfEngine):
    """Page copy and encryption using PyMuPDF."""

    def page_count(self, pdf_bytes: bytes) -> int:
        try:
            with _MUPDF_LOCK, pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.needs_pass:
                    raise DocumentError("Document is password protected")
                return int(doc.page_count)
        except DocumentError:
            raise
        except Exception as exc:
            raise DocumentError(f"pymupdf could not read document: {exc}") from exc

    def extract_page(self, pdf_bytes: bytes, page_number: int) -> bytes:
        try:
            with _MUPDF_LOCK, pymupdf.open(stream=pdf_bytes, filetype="pdf") as source:  # type: ignore[no-untyped-call]
                count = source.page_count
                if page_number < 1 or page_number > count:
                    raise PageRangeError(
                        f"Page {page_number} does not exist. PDF has {count} pages."
                    )
                with pymupdf.open() as single:  # type: ignore[no-untyped-call]
                    single.insert_pdf(
                        source, from_page=page_number - 1, to_page=page_number - 1
                    )
                    # No fresh /ID keeps repeated extractions byte-identical.
                    return bytes(single.tobytes(garbage=3, deflate=True, no_new_id=True))
        except PageRangeError:
            raise
        except Exception as exc:
            raise DocumentError(
                f"pymupdf could not extract page {page_number}: {exc}"
            ) from exc

    def encrypt(
        self,
        pdf_bytes: bytes,
        *,
        user_password: str,
        owner_password: str,
        permissions: SealPermissions,
    ) -> bytes:
        try:
            with _MUPDF_LOCK, pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return bytes(
                    doc.tobytes(
                        garbage=3,
                        deflate=True,
                        encryption=pymupdf.PDF_ENCRYPT_AES_256,
                        owner_pw=owner_password,
                        user_pw=user_password,
                        permissions=_to_pymupdf_permissions(permissions),
                    )
                )
        except Exception as exc:
            raise PdfEncryptionError(f"pymupdf encryption failed: {exc}") from exc
