"""Tests for byte-level PDF loading and serialization."""

import pytest

from core.document import append_all_pages, load_pdf_bytes, new_document, page_count, save_pdf_bytes
from core.errors import CourseFileError, ParseError

from .conftest import make_encrypted_pdf, make_pdf, page_texts


def test_load_and_count():
    data = make_pdf(4)
    doc = load_pdf_bytes(data)
    try:
        assert doc.page_count == 4
    finally:
        doc.close()
    assert page_count(data) == 4


def test_parse_error_is_course_file_error():
    with pytest.raises(ParseError) as exc:
        load_pdf_bytes(b"\x00\x01\x02 definitely not a pdf")
    assert isinstance(exc.value, CourseFileError)


def test_empty_buffer_rejected():
    with pytest.raises(ParseError):
        load_pdf_bytes(b"")


def test_append_and_save_round_trip():
    out = new_document()
    a = load_pdf_bytes(make_pdf(2, "a"))
    b = load_pdf_bytes(make_pdf(1, "b"))
    try:
        assert append_all_pages(out, a) == 2
        assert append_all_pages(out, b) == 1
        data = save_pdf_bytes(out)
    finally:
        for doc in (out, a, b):
            doc.close()

    assert page_texts(data) == ["a-1", "a-2", "b-1"]


def test_encrypted_pdf_rejected():
    with pytest.raises(ParseError, match="encrypted"):
        load_pdf_bytes(make_encrypted_pdf(2))
