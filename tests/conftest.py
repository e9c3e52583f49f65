"""
Shared fixtures: small in-memory PDFs whose pages carry a text marker
(``"<label>-<n>"``) so tests can check page order after composition.
"""

from typing import List, Tuple

import fitz
import pytest

A4 = (595.28, 841.89)
LETTER = (612.0, 792.0)


def make_pdf(pages: int, label: str = "page", size: Tuple[float, float] = A4) -> bytes:
    doc = fitz.open()
    for i in range(1, pages + 1):
        page = doc.new_page(width=size[0], height=size[1])
        page.insert_text((72, 72), f"{label}-{i}", fontsize=12)
    data = doc.tobytes()
    doc.close()
    return data


def page_texts(data: bytes) -> List[str]:
    """Extracted text of every page, stripped."""
    doc = fitz.open(stream=data, filetype="pdf")
    try:
        return [page.get_text().strip() for page in doc]
    finally:
        doc.close()


def page_sizes(data: bytes) -> List[Tuple[float, float]]:
    doc = fitz.open(stream=data, filetype="pdf")
    try:
        return [(page.rect.width, page.rect.height) for page in doc]
    finally:
        doc.close()


@pytest.fixture
def pdf_factory():
    return make_pdf


def fixed_width_measure(text: str, font_size: float) -> float:
    """Every character is 10 units wide, regardless of font size."""
    return len(text) * 10.0


@pytest.fixture
def mono_measure():
    return fixed_width_measure


def make_encrypted_pdf(pages: int, password: str = "secret") -> bytes:
    doc = fitz.open(stream=make_pdf(pages), filetype="pdf")
    data = doc.tobytes(
        encryption=fitz.PDF_ENCRYPT_AES_256,
        owner_pw=password + "-owner",
        user_pw=password,
    )
    doc.close()
    return data


def title_spans(data: bytes, page_index: int = 0) -> List[dict]:
    """Text spans (font, size, text) drawn on one page."""
    doc = fitz.open(stream=data, filetype="pdf")
    try:
        blocks = doc[page_index].get_text("dict")["blocks"]
        return [
            span
            for block in blocks
            for line in block.get("lines", [])
            for span in line["spans"]
            if span["text"].strip()
        ]
    finally:
        doc.close()
