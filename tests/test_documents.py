"""Tests for résumé file intake.

``pdfplumber.open`` is monkeypatched with small fakes so the PDF path can
be exercised without binary fixtures.  Word documents are generated on
the fly with ``python-docx``.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import docx  # type: ignore
import pytest  # type: ignore

from tailorflow.resume import documents
from tailorflow.resume.documents import (
    DocumentError,
    PDFParseError,
    extract_text_from_file,
)
from tailorflow.resume.parse_resume import parse_resume


class FakePage:
    def __init__(self, text: Optional[str]) -> None:
        self._text = text

    def extract_text(self) -> Optional[str]:
        return self._text


class FakePDF:
    def __init__(self, pages: List[FakePage]) -> None:
        self.pages = pages

    def __enter__(self) -> "FakePDF":
        return self

    def __exit__(self, *exc: object) -> bool:
        return False


@pytest.fixture
def pdf_path(tmp_path: Path) -> Path:
    path = tmp_path / "resume.pdf"
    path.write_bytes(b"%PDF-1.4 placeholder")
    return path


def test_text_file(tmp_path: Path) -> None:
    path = tmp_path / "resume.txt"
    path.write_text("Jane Doe\nSKILLS\nPython", encoding="utf-8")
    assert extract_text_from_file(str(path)) == "Jane Doe\nSKILLS\nPython"


def test_docx_file(tmp_path: Path) -> None:
    path = tmp_path / "resume.docx"
    document = docx.Document()
    document.add_paragraph("Jane Doe")
    document.add_paragraph("EDUCATION")
    document.add_paragraph("Bachelor of Arts, Smith College 2012")
    document.save(str(path))
    resume = parse_resume(str(path))
    assert resume.contact_info.name == "Jane Doe"
    assert resume.education[0].year == "2012"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        extract_text_from_file(str(tmp_path / "nope.txt"))


def test_unsupported_extension(tmp_path: Path) -> None:
    path = tmp_path / "resume.rtf"
    path.write_text("{\\rtf1 Jane}", encoding="utf-8")
    with pytest.raises(DocumentError):
        extract_text_from_file(str(path))


def test_pdf_pages_are_joined(monkeypatch: pytest.MonkeyPatch, pdf_path: Path) -> None:
    pages = [FakePage("Jane Doe(cid:3)"), FakePage(None), FakePage("SKILLS\nPython")]
    monkeypatch.setattr(documents.pdfplumber, "open", lambda path: FakePDF(pages))
    assert extract_text_from_file(str(pdf_path)) == "Jane Doe\n\nSKILLS\nPython"


def test_pdf_without_text(monkeypatch: pytest.MonkeyPatch, pdf_path: Path) -> None:
    monkeypatch.setattr(documents.pdfplumber, "open", lambda path: FakePDF([FakePage(None)]))
    with pytest.raises(PDFParseError) as excinfo:
        parse_resume(str(pdf_path))
    assert excinfo.value.path == str(pdf_path)
    assert "no readable text" in str(excinfo.value)


def test_corrupt_pdf(monkeypatch: pytest.MonkeyPatch, pdf_path: Path) -> None:
    def broken(path: str) -> FakePDF:
        raise ValueError("No /Root object! - Is this really a PDF?")

    monkeypatch.setattr(documents.pdfplumber, "open", broken)
    with pytest.raises(PDFParseError) as excinfo:
        extract_text_from_file(str(pdf_path))
    assert isinstance(excinfo.value, DocumentError)
    assert "No /Root object" in excinfo.value.reason


def test_corrupt_docx(tmp_path: Path) -> None:
    path = tmp_path / "resume.docx"
    path.write_bytes(b"not a zip")
    with pytest.raises(DocumentError) as excinfo:
        extract_text_from_file(str(path))
    assert not isinstance(excinfo.value, PDFParseError)
    assert str(path) in str(excinfo.value)
