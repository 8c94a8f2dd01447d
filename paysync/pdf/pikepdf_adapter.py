import io

import pikepdf

from paysync.pdf.base import BasePdfEngine
from paysync.pdf.exceptions import DocumentError, PageRangeError, PdfEncryptionError
from paysync.pdf.models import SealPermissions


def _to_pikepdf_permissions(permissions: SealPermissions) -> pikepdf.Permissions:
    return pikepdf.Permissions(
        print_lowres=permissions.print_high_resolution,
        print_highres=permissions.print_high_resolution,
        extract=permissions.copy_content,
        modify_other=permissions.modify_content,
        modify_annotation=permissions.annotate,
        modify_form=permissions.fill_forms,
        accessibility=permissions.accessibility,
        modify_assembly=permissions.assemble_document,
    )


class PikePdfAdapter(BasePdfEngine):
    """Page copy and encryption using pikepdf (qpdf)."""

    def page_count(self, pdf_bytes: bytes) -> int:
        try:
            with pikepdf.open(io.BytesIO(pdf_bytes)) as pdf:
                return len(pdf.pages)
        except Exception as exc:
            raise DocumentError(f"pikepdf could not read document: {exc}") from exc

    def extract_page(self, pdf_bytes: bytes, page_number: int) -> bytes:
        try:
            with pikepdf.open(io.BytesIO(pdf_bytes)) as source:
                count = len(source.pages)
                if page_number < 1 or page_number > count:
                    raise PageRangeError(
                        f"Page {page_number} does not exist. PDF has {count} pages."
                    )
                with pikepdf.new() as single:
                    single.pages.append(source.pages[page_number - 1])
                    buf = io.BytesIO()
                    single.save(buf, deterministic_id=True)
                    return buf.getvalue()
        except PageRangeError:
            raise
        except Exception as exc:
            raise DocumentError(
                f"pikepdf could not extract page {page_number}: {exc}"
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
            with pikepdf.open(io.BytesIO(pdf_bytes)) as pdf:
                buf = io.BytesIO()
                pdf.save(
                    buf,
                    encryption=pikepdf.Encryption(
                        owner=owner_password,
                        user=user_password,
                        allow=_to_pikepdf_permissions(permissions),
                        aes=True,
                        R=6,
                    ),
                )
                return buf.getvalue()
        except Exception as exc:
            raise PdfEncryptionError(f"pikepdf encryption failed: {exc}") from exc
