"""Tests for PDF text extraction."""
import fitz
import pytest

from fakes import make_pdf

from routes.upload import FILE_ERROR, error_message_for
from services.pdf_service import PdfExtractionError, clean_text, extract_document


def test_extract_document_counts_pages_and_words(tmp_path):
    path = tmp_path / "doc.pdf"
    path.write_bytes(make_pdf("Introduction\nQuizzes help recall.", "Results\nThey work well."))

    document = extract_document(str(path))

    assert document.page_count == 2
    assert "Quizzes help recall." in document.text
    assert "They work well." in document.text
    assert document.word_count == 8


def test_extract_document_rejects_garbage(tmp_path):
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"this is not a pdf at all")
    with pytest.raises(PdfExtractionError):
        extract_document(str(path))


def test_extract_document_missing_file(tmp_path):
    with pytest.raises(PdfExtractionError) as excinfo:
        extract_document(str(tmp_path / "missing.pdf"))
    assert error_message_for(excinfo.value) == FILE_ERROR


def test_extract_document_rejects_password_protected(tmp_path):
    doc = fitz.open()
    doc.new_page().insert_text((72, 72), "Secret results.")
    path = tmp_path / "locked.pdf"
    path.write_bytes(
        doc.tobytes(encryption=fitz.PDF_ENCRYPT_AES_256, owner_pw="owner-pass", user_pw="user-pass")
    )
    doc.close()

    with pytest.raises(PdfExtractionError, match="password"):
        extract_document(str(path))


def test_clean_text_replaces_ligatures_and_control_chars():
    assert clean_text("eﬃcient ﬁle\x00\x07 ok\n") == "efficient file ok\n"
