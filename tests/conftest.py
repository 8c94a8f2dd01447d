import io
from collections.abc import Callable

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas


def build_payslip_pdf(page_texts: list[str]) -> bytes:
    """Generate a PDF with one page per text, drawn at the top of the page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4, invariant=1)
    for text in page_texts:
        c.drawString(72, 760, text)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def make_pdf() -> Callable[[int], bytes]:
    """Factory for an n-page payslip PDF."""

    def _make(pages: int) -> bytes:
        return build_payslip_pdf([f"Payslip page {i}" for i in range(1, pages + 1)])

    return _make


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """A single-page PDF with known text content."""
    return build_payslip_pdf(["Hello PDF World"])


@pytest.fixture()
def three_page_pdf_bytes() -> bytes:
    return build_payslip_pdf(["Payslip for John", "Payslip for Jane", "Payslip for Michael"])


@pytest.fixture()
def roster_rows() -> list[dict[str, object]]:
    """Roster rows as decoded from a spreadsheet, with messy identity values."""
    return [
        {"First_Name": "John", "Last_Name": "Smith", "ID_Number": "ID100001\n"},
        {"First_Name": "Jane", "Last_Name": "Johnson", "ID_Number": "  ID100002  "},
        {"First_Name": "Michael", "Last_Name": "Williams", "ID_Number": "ID 100 003"},
    ]


@pytest.fixture()
def key_file_rows() -> list[dict[str, object]]:
    return [
        {"employee_id": "ID100001"},
        {"employee_id": "ID100002"},
        {"employee_id": "ID100003"},
    ]
