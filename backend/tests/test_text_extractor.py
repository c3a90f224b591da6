import io

import fitz
import pytest
from docx import Document

from careervision.services.text_extractor import (
    ExtractionFailureError, TextExtractionError, UnsupportedFormatError,
    extract_text, media_type_for_mime
)


def make_pdf(*lines):
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "\n".join(lines))
    data = doc.tobytes()
    doc.close()
    return data


def make_docx(paragraphs, cells=()):
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    if cells:
        table = doc.add_table(rows=1, cols=len(cells))
        for cell, text in zip(table.rows[0].cells, cells):
            cell.text = text
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


def test_pdf_text_is_extracted():
    text = extract_text(make_pdf("Jane Doe", "Python developer"), "pdf")
    assert "Jane Doe" in text
    assert "Python developer" in text


def test_docx_includes_table_cells_after_paragraphs():
    data = make_docx(["Jane Doe", "Skills"], cells=["Python", "Docker"])
    text = extract_text(data, "docx")
    assert text.splitlines()[0] == "Jane Doe"
    assert text.index("Skills") < text.index("Python") < text.index("Docker")


def test_corrupt_pdf_raises_extraction_failure():
    with pytest.raises(ExtractionFailureError):
        extract_text(b"this is not a pdf", "pdf")


def test_corrupt_docx_raises_extraction_failure():
    with pytest.raises(ExtractionFailureError):
        extract_text(b"PK-not-a-zip", "docx")


def test_unsupported_media_type():
    with pytest.raises(UnsupportedFormatError) as exc_info:
        extract_text(b"hello", "rtf")
    assert isinstance(exc_info.value, TextExtractionError)
    assert "rtf" in str(exc_info.value)


def test_doc_falls_back_to_lossy_decoding():
    text = extract_text(b"Jane Doe\n\xff\xfePython", "doc")
    assert text.startswith("Jane Doe")
    assert "Python" in text


def test_whitespace_is_normalised():
    text = extract_text(b"  Jane\t\tDoe  \n\n\n\n\nPython  ", "doc")
    assert text == "Jane Doe \n\nPython"


def test_empty_document_gives_empty_text():
    assert extract_text(b"   \n  ", "doc") == ""


@pytest.mark.parametrize("mime, media_type", [
    ("application/pdf", "pdf"),
    ("application/msword", "doc"),
    ("application/vnd.openxmlformats-officedocument.wordprocessingml.document", "docx"),
    ("text/plain", None),
])
def test_media_type_for_mime(mime, media_type):
    assert media_type_for_mime(mime) == media_type
