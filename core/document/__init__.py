"""PDF document loading, composition and serialization."""

from .pdf_io import (
    append_all_pages,
    load_pdf_bytes,
    new_document,
    page_count,
    save_pdf_bytes,
)

__all__ = [
    "load_pdf_bytes",
    "new_document",
    "append_all_pages",
    "save_pdf_bytes",
    "page_count",
]
