"""
Byte-level PDF I/O for the course-file core.

Thin wrappers around fitz (PyMuPDF) that load documents from memory,
copy pages between documents and serialize the result.  Nothing in
here touches the file system.
"""

import logging

import fitz  # PyMuPDF

from core.errors import ParseError

logger = logging.getLogger(__name__)


def load_pdf_bytes(data: bytes) -> fitz.Document:
    """
    Open a PDF document from an in-memory buffer.

    Args:
        data: Raw PDF bytes.

    Returns:
        An open fitz.Document.  The caller is responsible for closing it.

    Raises:
        ParseError: If the buffer is empty, is not a PDF, is password
            protected, or has no pages.
    """
    if not data:
        raise ParseError("Empty PDF buffer")

    try:
        doc = fitz.open(stream=bytes(data), filetype="pdf")
    except Exception as e:
        raise ParseError(f"Failed to open PDF: {e}") from e

    if doc.needs_pass:
        doc.close()
        raise ParseError("Document is encrypted")

    if not doc.is_pdf or doc.page_count == 0:
        doc.close()
        raise ParseError("Document has no pages")

    logger.debug("Loaded PDF: %d pages, %d bytes", doc.page_count, len(data))
    return doc


def new_document() -> fitz.Document:
    """Create an empty PDF document."""
    return fitz.open()


def append_all_pages(dest: fitz.Document, src: fitz.Document) -> int:
    """
    Copy every page of *src* to the end of *dest*, preserving order.

    Returns:
        Number of pages appended.
    """
    count = src.page_count
    dest.insert_pdf(src)
    return count


def save_pdf_bytes(doc: fitz.Document) -> bytes:
    """Serialize *doc* into a standalone PDF byte string."""
    return doc.tobytes(garbage=3, deflate=True)


def page_count(data: bytes) -> int:
    """Return the number of pages in a PDF byte buffer."""
    doc = load_pdf_bytes(data)
    try:
        return doc.page_count
    finally:
        doc.close()
