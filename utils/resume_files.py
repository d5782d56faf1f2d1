"""Reading uploaded resumes into plain text for the profile assistant."""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Any

import docx
import fitz  # PyMuPDF

from core.errors import ResumeExtractionError

logger = logging.getLogger("hiring_wizards.ingest")

SUPPORTED_RESUME_EXTENSIONS: tuple[str, ...] = (".pdf", ".docx", ".txt")
MAX_RESUME_BYTES = 5 * 1024 * 1024

EMPTY_FILE_MESSAGE = "That file is empty."
TOO_LARGE_MESSAGE = "Resumes must be smaller than 5 MB."
UNSUPPORTED_MESSAGE = "Please upload a PDF, Word (.docx) or text resume."
UNREADABLE_MESSAGE = "We could not open that file. It may be damaged or password protected."
NO_TEXT_MESSAGE = "We could not find any text in that resume."
SCANNED_PDF_MESSAGE = "That PDF looks like a scanned image. Please upload a version with selectable text."


def _read_upload(file: Any, name: str | None) -> tuple[bytes, str]:
    if hasattr(file, "getvalue"):
        return file.getvalue(), name or getattr(file, "name", "")
    if hasattr(file, "read"):
        return file.read(), name or getattr(file, "name", "")
    return file or b"", name or ""


def _extension(filename: str) -> str:
    lowered = filename.lower()
    for extension in SUPPORTED_RESUME_EXTENSIONS:
        if lowered.endswith(extension):
            return extension
    return ""


def _pdf_text(data: bytes) -> str:
    with fitz.open(stream=data, filetype="pdf") as document:
        text = "\n".join(page.get_text() for page in document)
        if not text.strip() and document.page_count:
            raise ResumeExtractionError(SCANNED_PDF_MESSAGE, reason="scanned_pdf")
    return text


def _docx_text(data: bytes) -> str:
    document = docx.Document(BytesIO(data))
    parts = [paragraph.text for paragraph in document.paragraphs]
    # Resume templates often lay out contact details and skills in tables.
    for table in document.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                parts.append(" | ".join(dict.fromkeys(cells)))
    return "\n".join(parts)


def _plain_text(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def extract_resume_text(file: Any, name: str | None = None) -> str:
    """Return the text of an uploaded resume with blank lines removed.

    ``file`` is a Streamlit ``UploadedFile`` or raw bytes; ``name`` overrides
    the filename used to pick the reader.

    Raises:
        ResumeExtractionError: With a user-facing message and a ``reason`` of
            ``empty``, ``too_large``, ``unsupported``, ``unreadable``,
            ``scanned_pdf`` or ``no_text``.
    """

    data, filename = _read_upload(file, name)
    if not data:
        raise ResumeExtractionError(EMPTY_FILE_MESSAGE, reason="empty")
    if len(data) > MAX_RESUME_BYTES:
        raise ResumeExtractionError(TOO_LARGE_MESSAGE, reason="too_large")
    extension = _extension(filename)
    if not extension:
        raise ResumeExtractionError(UNSUPPORTED_MESSAGE, reason="unsupported")

    try:
        if extension == ".pdf":
            text = _pdf_text(data)
        elif extension == ".docx":
            text = _docx_text(data)
        else:
            text = _plain_text(data)
    except ResumeExtractionError:
        raise
    except Exception as exc:
        logger.warning("Could not read resume '%s': %s", filename, exc)
        raise ResumeExtractionError(UNREADABLE_MESSAGE, reason="unreadable") from exc

    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ResumeExtractionError(NO_TEXT_MESSAGE, reason="no_text")
    logger.info("Extracted %d lines from %s resume", len(lines), extension)
    return "\n".join(lines)


__all__ = ["MAX_RESUME_BYTES", "SUPPORTED_RESUME_EXTENSIONS", "extract_resume_text"]
