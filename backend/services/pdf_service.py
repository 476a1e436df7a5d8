import logging
import re
import unicodedata

import fitz  # PyMuPDF

from models.schemas import ExtractedDocument

logger = logging.getLogger(__name__)

# Dehyphenate words split across lines and keep layout whitespace so the
# heading heuristic still sees one heading per line.
_EXTRACT_FLAGS = fitz.TEXT_PRESERVE_WHITESPACE | fitz.TEXT_DEHYPHENATE

# Ligature glyphs some PDF fonts emit instead of plain letters, including the
# Private Use Area slots older LaTeX toolchains use.
_LIGATURE_CHAR_MAP: dict[str, str] = {
    '\ufb00': 'ff',
    '\ufb01': 'fi',
    '\ufb02': 'fl',
    '\ufb03': 'ffi',
    '\ufb04': 'ffl',
    '\ufb05': 'st',
    '\ufb06': 'st',
    '\uf000': 'ff',
    '\uf001': 'fi',
    '\uf002': 'fl',
    '\uf003': 'ffi',
    '\uf004': 'ffl',
}

_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')


class PdfExtractionError(ValueError):
    """The uploaded file could not be read as a PDF."""


def clean_text(text: str) -> str:
    """Replaces ligatures, NFKC-normalises, and strips control characters (keeps \\t \\n \\r)."""
    for char, replacement in _LIGATURE_CHAR_MAP.items():
        if char in text:
            text = text.replace(char, replacement)
    text = unicodedata.normalize('NFKC', text)
    return _CONTROL_CHARS.sub('', text)


def count_words(text: str) -> int:
    return len(text.split())


def extract_document(file_path: str) -> ExtractedDocument:
    """
    Opens a PDF with PyMuPDF and returns its cleaned text with word and page counts.

    Pages are joined by a blank line. Raises PdfExtractionError when the file
    is not a readable PDF.
    """
    try:
        doc = fitz.open(file_path)
    except (FileNotFoundError, fitz.FileNotFoundError, fitz.FileDataError) as e:
        raise PdfExtractionError(f"Unreadable PDF: {e}") from e

    try:
        if not doc.is_pdf:
            raise PdfExtractionError("Uploaded file is not a PDF")
        if doc.needs_pass:
            raise PdfExtractionError("PDF is password protected")
        page_count = len(doc)
        pages = [clean_text(page.get_text(flags=_EXTRACT_FLAGS)) for page in doc]
    finally:
        # Release the handle before the caller deletes the temp file.
        doc.close()

    text = "\n\n".join(pages)
    word_count = count_words(text)
    logger.info("Extracted PDF: %d pages, %d words", page_count, word_count)
    return ExtractedDocument(text=text, word_count=word_count, page_count=page_count)
