"""
Resume text extraction.

PDF text comes from PyMuPDF and DOCX text from docx2txt. Any failure
yields an empty string so the candidate can still fill in their details
by hand.
"""
import logging
from pathlib import Path

import docx2txt
import fitz  # pymupdf

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

SUPPORTED_TYPES = {
    PDF_CONTENT_TYPE: ".pdf",
    DOCX_CONTENT_TYPE: ".docx",
}


def validate_file_type(filename: str, content_type: str = "") -> bool:
    """Only PDF and DOCX resumes are accepted."""
    if content_type in SUPPORTED_TYPES:
        return True
    return Path(filename or "").suffix.lower() in SUPPORTED_TYPES.values()


def _parse_pdf(file_path: Path) -> str:
    text = ""
    with fitz.open(str(file_path)) as doc:
        for page in doc:
            text += page.get_text() + "\n"
    return text


def _parse_docx(file_path: Path) -> str:
    return docx2txt.process(str(file_path)) or ""


def parse_resume(file_path) -> str:
    """
    Extract the plain text of a resume file.

    Args:
        file_path: Path to a .pdf or .docx file

    Returns:
        Extracted text, or "" for unsupported or unreadable files
    """
    path = Path(file_path)
    suffix = path.suffix.lower()

    try:
        if suffix == ".pdf":
            return _parse_pdf(path)
        if suffix == ".docx":
            return _parse_docx(path)
    except Exception as e:
        logger.warning(f"Resume text extraction failed for {path.name}: {e}")
        return ""

    logger.info(f"No text extractor for {path.name}")
    return ""
