import io
from collections.abc import Callable

import pikepdf
import pytest

from paysync.pdf.exceptions import DocumentError, PageRangeError, PdfEncryptionError
from paysync.pdf.models import DEFAULT_PERMISSIONS
from paysync.pdf.pikepdf_adapter import PikePdfAdapter


class TestPageCount:
    def test_counts_pages(self, make_pdf: Callable[[int], bytes]) -> None:
        assert PikePdfAdapter().page_count(make_pdf(4)) == 4

    def test_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(DocumentError):
            PikePdfAdapter().page_count(b"not a pdf")


class TestExtractPage:
    def test_returns_single_page_pdf(self, three_page_pdf_bytes: bytes) -> None:
        page = PikePdfAdapter().extract_page(three_page_pdf_bytes, 2)

        with pikepdf.open(io.BytesIO(page)) as pdf:
            assert len(pdf.pages) == 1

    def test_repeated_extraction_is_byte_identical(self, three_page_pdf_bytes: bytes) -> None:
        adapter = PikePdfAdapter()
        assert adapter.extract_page(three_page_pdf_bytes, 3) == adapter.extract_page(
            three_page_pdf_bytes, 3
        )

    def test_source_bytes_untouched(self, three_page_pdf_bytes: bytes) -> None:
        original = bytes(three_page_pdf_bytes)
        PikePdfAdapter().extract_page(three_page_pdf_bytes, 1)
        assert three_page_pdf_bytes == original

    @pytest.mark.parametrize("page_number", [0, -1, 4])
    def test_raises_for_out_of_range_page(
        self, three_page_pdf_bytes: bytes, page_number: int
    ) -> None:
        with pytest.raises(PageRangeError, match="PDF has 3 pages"):
            PikePdfAdapter().extract_page(three_page_pdf_bytes, page_number)

    def test_raises_document_error_on_invalid_bytes(self) -> None:
        with pytest.raises(DocumentError):
            PikePdfAdapter().extract_page(b"not a pdf", 1)


class TestEncrypt:
    def _encrypt(self, pdf_bytes: bytes) -> bytes:
        return PikePdfAdapter().encrypt(
            pdf_bytes,
            user_password="ID100001",
            owner_password="owner-secret",
            permissions=DEFAULT_PERMISSIONS,
        )

    def test_requires_user_password(self, sample_pdf_bytes: bytes) -> None:
        sealed = self._encrypt(sample_pdf_bytes)

        with pytest.raises(pikepdf.PasswordError):
            pikepdf.open(io.BytesIO(sealed))
        with pikepdf.open(io.BytesIO(sealed), password="ID100001") as pdf:
            assert len(pdf.pages) == 1
            assert pdf.is_encrypted

    def test_owner_password_opens_document(self, sample_pdf_bytes: bytes) -> None:
        sealed = self._encrypt(sample_pdf_bytes)
        with pikepdf.open(io.BytesIO(sealed), password="owner-secret") as pdf:
            assert pdf.owner_password_matched

    def test_embeds_permission_policy(self, sample_pdf_bytes: bytes) -> None:
        sealed = self._encrypt(sample_pdf_bytes)

        with pikepdf.open(io.BytesIO(sealed), password="ID100001") as pdf:
            allow = pdf.allow
            assert allow.print_highres
            assert allow.print_lowres
            assert allow.modify_form
            assert allow.accessibility
            assert not allow.extract
            assert not allow.modify_other
            assert not allow.modify_annotation
            assert not allow.modify_assembly

    def test_raises_on_malformed_input(self) -> None:
        with pytest.raises(PdfEncryptionError):
            self._encrypt(b"garbage")
