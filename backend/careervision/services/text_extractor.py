"""
Text extraction from uploaded resume files (PDF, DOCX, legacy DOC).
In-memory only: callers hand over the raw bytes and a declared media type.
"""
import io
import logging
import re
import unicodedata
from typing import Optional

import fitz  # PyMuPDF
from docx import Document

logger = logging.getLogger(__name__)

MEDIA_TYPE_PDF = "pdf"
MEDIA_TYPE_DOCX = "docx"
MEDIA_TYPE_DOC = "doc"
SUPPORTED_MEDIA_TYPES = (MEDIA_TYPE_PDF, MEDIA_TYPE_DOCX, MEDIA_TYPE_DOC)

MIME_TO_MEDIA_TYPE = {
    "application/pdf": MEDIA_TYPE_PDF,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": MEDIA_TYPE_DOCX,
    "application/msword": MEDIA_TYPE_DOC,
}


class TextExtractionError(Exception):
    """Infrastructure failure while turning a document into text."""


class UnsupportedFormatError(TextExtractionError):
    pass


class ExtractionFailureError(TextExtractionError):
    pass


def media_type_for_mime(mime_type: str) -> Optional[str]:
    """Map an upload MIME type to a declared media type, or None if not allowed."""
    return MIME_TO_MEDIA_TYPE.get((mime_type or "").lower().strip())


def _clean_text(text: str) -> str:
    """Normalize unicode (NFC) and squeeze whitespace; line breaks are kept."""
    if not text or not text.strip():
        return ""
    t = unicodedata.normalize("NFC", text)
    t = t.replace("\x00", "")
    t = re.sub(r"[ \t\f\v]+", " ", t)
    t = re.sub(r"\n\s*\n\s*\n", "\n\n", t)
    return t.strip()


def _extract_pdf(data: bytes) -> str:
    """Extract text from PDF pages using PyMuPDF."""
    try:
        pdf_document = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        raise ExtractionFailureError(f"Could not open PDF: {e}") from e

    try:
        parts = []
        for page in pdf_document:
            page_text = page.get_text("text")
            if page_text:
                parts.append(page_text)
        return "\n".join(parts)
    except Exception as e:
        raise ExtractionFailureError(f"Could not read PDF text: {e}") from e
    finally:
        pdf_document.close()


def _extract_docx(data: bytes) -> str:
    """Extract paragraph and table text from DOCX using python-docx."""
    try:
        doc = Document(io.BytesIO(data))
    except Exception as e:
        raise ExtractionFailureError(f"Could not open DOCX: {e}") from e

    parts = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            for cell in row.cells:
                if cell.text.strip():
                    parts.append(cell.text)
    return "\n".join(parts)


def _extract_doc(data: bytes) -> str:
    # No safe decoder for the legacy binary format; coerce bytes to text.
    # Garbled output is a field-extraction quality problem, not an error here.
    return data.decode("utf-8", errors="replace")


_EXTRACTORS = {
    MEDIA_TYPE_PDF: _extract_pdf,
    MEDIA_TYPE_DOCX: _extract_docx,
    MEDIA_TYPE_DOC: _extract_doc,
}


def extract_text(data: bytes, media_type: str) -> str:
    """
    Render a document as plain text.

    Args:
        data: Raw file bytes
        media_type: One of "pdf", "docx", "doc"

    Returns:
        Cleaned text, possibly empty

    Raises:
        UnsupportedFormatError: media_type is not supported
        ExtractionFailureError: the decoder could not read the file
    """
    extractor = _EXTRACTORS.get((media_type or "").lower())
    if extractor is None:
        raise UnsupportedFormatError(f"Unsupported file type: {media_type}")

    logger.info("Extracting text from %s document (%d bytes)", media_type, len(data))
    text = _clean_text(extractor(data))
    logger.info("Text extraction successful, length: %d", len(text))
    return text
