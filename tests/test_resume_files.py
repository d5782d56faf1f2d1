from __future__ import annotations

from io import BytesIO

import docx
import fitz
import pytest

from core.errors import ResumeExtractionError
from utils import resume_files
from utils.resume_files import extract_resume_text


class _Upload(BytesIO):
    """Mimics Streamlit's ``UploadedFile``."""

    def __init__(self, data: bytes, name: str) -> None:
        super().__init__(data)
        self.name = name


def _reason(file: object, name: str | None = None) -> str:
    with pytest.raises(ResumeExtractionError) as excinfo:
        extract_resume_text(file, name)
    assert excinfo.value.message
    return excinfo.value.reason


def test_plain_text_upload_drops_blank_lines() -> None:
    upload = _Upload(b"Ada Okafor\n\n  Python developer  \n", "resume.txt")

    assert extract_resume_text(upload) == "Ada Okafor\nPython developer"


def test_latin1_text_is_still_readable() -> None:
    assert extract_resume_text("José Martínez".encode("latin-1"), "cv.TXT") == "José Martínez"


def test_docx_paragraphs_and_tables() -> None:
    document = docx.Document()
    document.add_paragraph("Ada Okafor")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Skills"
    table.rows[0].cells[1].text = "Python, SQL"
    buffer = BytesIO()
    document.save(buffer)

    text = extract_resume_text(_Upload(buffer.getvalue(), "resume.docx"))

    assert text == "Ada Okafor\nSkills | Python, SQL"


def test_pdf_upload() -> None:
    pdf = fitz.open()
    page = pdf.new_page()
    page.insert_text((72, 72), "Ada Okafor")
    data = pdf.tobytes()
    pdf.close()

    assert "Ada Okafor" in extract_resume_text(_Upload(data, "resume.pdf"))


def test_pdf_without_text_layer_is_reported_as_scanned() -> None:
    pdf = fitz.open()
    pdf.new_page()
    data = pdf.tobytes()
    pdf.close()

    assert _reason(_Upload(data, "scan.pdf")) == "scanned_pdf"


def test_failures_carry_a_reason() -> None:
    assert _reason(b"", "resume.txt") == "empty"
    assert _reason(_Upload(b"not a pdf", "resume.pdf")) == "unreadable"
    assert _reason(_Upload(b"hello", "resume.odt")) == "unsupported"
    assert _reason(b"hello") == "unsupported"
    assert _reason(_Upload(b"\n  \n", "resume.txt")) == "no_text"


def test_oversized_upload_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(resume_files, "MAX_RESUME_BYTES", 4)

    assert _reason(b"hello", "resume.txt") == "too_large"


def test_extraction_errors_are_value_errors() -> None:
    with pytest.raises(ValueError, match="empty"):
        extract_resume_text(b"", "resume.txt")
