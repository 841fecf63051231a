# core/pdf_text.py
import fitz
from core.entities import PdfDocumentText
from util.errors import PdfDecodeError
from util.timing import timed
import logging

logger = logging.getLogger(__name__)

PAGE_JOINER = "\n\n"


def extract_document_text(file_bytes: bytes) -> PdfDocumentText:
    """
    Decode a PDF into one text blob plus its page count.
    Page boundaries are not kept; see core/segmenter.py for how pages are
    re-derived. Raises PdfDecodeError when the bytes are not a readable PDF.
    """
    try:
        texts = []
        with timed(logger, "pdf.open", bytes=len(file_bytes)):
            with fitz.open(stream=file_bytes, filetype="pdf") as doc:
                pages = doc.page_count
                with timed(logger, "pdf.parse", pages=pages):
                    for i in range(pages):
                        page = doc.load_page(i)
                        texts.append(page.get_text("text") or "")
    except Exception as e:
        # do not log payloads
        logger.error("pdf.parse.error", exc_info=True)
        raise PdfDecodeError("Failed to parse PDF") from e

    if not texts:
        logger.warning("pdf.pages.empty")
        raise PdfDecodeError("PDF has no pages")

    full_text = PAGE_JOINER.join(texts)
    logger.info("pdf.text pages=%d chars=%d", len(texts), len(full_text))
    return PdfDocumentText(text=full_text, page_count=len(texts))
