from paysync.config.settings import Settings
from paysync.pdf.base import BasePdfEngine
from paysync.pdf.pikepdf_adapter import PikePdfAdapter
from paysync.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfEngineFactory:
    """Creates the correct PDF engine based on settings."""

    ADAPTERS: dict[str, type[BasePdfEngine]] = {
        "pikepdf": PikePdfAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfEngine:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
