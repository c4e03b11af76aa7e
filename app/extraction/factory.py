from app.config.settings import Settings
from app.extraction.base import BaseDocumentExtractor
from app.extraction.docx_adapter import DocxAdapter
from app.extraction.pdfplumber_adapter import PdfPlumberAdapter
from app.extraction.pymupdf_adapter import PyMuPdfAdapter
from app.extraction.text_extractor import TextExtractor


class TextExtractorFactory:
    """Creates a TextExtractor wired with the configured PDF engine."""

    PDF_ADAPTERS: dict[str, type[BaseDocumentExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> TextExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return TextExtractor(pdf_extractor=adapter_cls(), docx_extractor=DocxAdapter())
