"""
Résumé file intake.

Reads the text of an uploaded résumé so the heuristic parser can work
on it.  PDFs go through ``pdfplumber`` and Word files through
``python-docx``; anything else is read as UTF-8 text.  A PDF that
yields no text (scanned images, corrupt files) raises
:class:`PDFParseError` here, before the parser is invoked.
"""

from __future__ import annotations

import logging
import os
import re

import docx  # type: ignore
import pdfplumber  # type: ignore

logger = logging.getLogger(__name__)


_CID_RE = re.compile(r"\(cid:\d+\)")
TEXT_EXTENSIONS = {".txt", ".md", ".text", ""}


class DocumentError(Exception):
    """Raised when a résumé file cannot be turned into text."""


class PDFParseError(DocumentError):
    """Raised when a PDF is unreadable or contains no text."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse PDF {path}: {reason}")


def extract_text_from_pdf(file_path: str) -> str:
    """Return the text of every page of a PDF, joined by newlines.

    Raises:
        PDFParseError: If the file cannot be opened or has no text.
    """
    try:
        with pdfplumber.open(file_path) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as exc:  # noqa: BLE001
        raise PDFParseError(file_path, str(exc)) from exc
    text = _CID_RE.sub("", "\n".join(pages))
    if not text.strip():
        raise PDFParseError(file_path, "PDF contains no readable text or is corrupted")
    logger.debug("Extracted %d characters from %s", len(text), file_path)
    return text


def extract_text_from_docx(file_path: str) -> str:
    """Return the paragraph text of a Word document.

    Raises:
        DocumentError: If the file is not a readable ``.docx`` package.
    """
    try:
        document = docx.Document(file_path)
    except Exception as exc:  # noqa: BLE001
        raise DocumentError(f"Failed to read DOCX {file_path}: {exc}") from exc
    return "\n".join(p.text for p in document.paragraphs)


def extract_text_from_file(file_path: str) -> str:
    """Extract text from a résumé file regardless of format.

    Args:
        file_path: Path to the résumé file.

    Returns:
        A single string containing the extracted text.

    Raises:
        FileNotFoundError: If the file does not exist.
        PDFParseError: If a PDF has no readable text.
        DocumentError: If the extension is not supported or a Word
            file cannot be opened.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(file_path)
    ext = os.path.splitext(file_path)[1].lower()
    if ext == ".pdf":
        return extract_text_from_pdf(file_path)
    if ext == ".docx":
        return extract_text_from_docx(file_path)
    if ext in TEXT_EXTENSIONS:
        with open(file_path, "r", encoding="utf-8", errors="ignore") as f:
            return f.read()
    raise DocumentError(f"Unsupported résumé file type: {ext}")
