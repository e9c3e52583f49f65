"""
Cover-page composition for uploaded section PDFs.

Usage::

    from coursefile.cover import compose_cover

    covered = compose_cover(pdf_bytes, "Question Bank")
"""

import logging
from typing import Optional

from core.document import append_all_pages, load_pdf_bytes, new_document, save_pdf_bytes

from .layout.title_page import CoverStyle, draw_title_page

logger = logging.getLogger(__name__)


def compose_cover(
    source: bytes,
    title: str,
    style: Optional[CoverStyle] = None,
) -> bytes:
    """
    Prepend a generated cover page to a PDF.

    The cover is an A4 page carrying only *title*, wrapped onto at most
    two lines and centred.  All pages of *source* follow in their
    original order.  A document that already starts with a cover gets a
    second one; existing covers are not detected.

    Args:
        source: Raw bytes of the PDF to cover.
        title:  Cover title text.
        style:  Page geometry and font settings (default :class:`CoverStyle`).

    Returns:
        Bytes of a new standalone PDF with ``1 + source pages`` pages.

    Raises:
        ParseError: If *source* is not a loadable PDF.
    """
    style = style or CoverStyle()
    src = load_pdf_bytes(source)
    out = new_document()
    try:
        draw_title_page(out, style.cover_spec(title), style)
        copied = append_all_pages(out, src)
        logger.debug("Cover '%s' + %d source pages", title, copied)
        return save_pdf_bytes(out)
    finally:
        out.close()
        src.close()
