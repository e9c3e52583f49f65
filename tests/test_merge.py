"""Tests for merging section PDFs into one course file."""

import pytest

from core.errors import MergeError, ParseError
from coursefile.merge import SectionSlots, merge_sections

from .conftest import make_encrypted_pdf, make_pdf, page_texts, title_spans

TITLE = "CS301 — Data Structures"


def test_merge_scenario_order_and_count():
    sections = {
        1: make_pdf(3, "s1"),
        5: make_pdf(2, "s5"),
        23: make_pdf(1, "s23"),
    }
    texts = page_texts(merge_sections(sections, TITLE))

    assert len(texts) == 1 + 3 + 2 + 1
    assert "CS301" in texts[0]
    assert texts[1:] == ["s1-1", "s1-2", "s1-3", "s5-1", "s5-2", "s23-1"]


def test_merge_order_ignores_insertion_order():
    sections = {
        23: make_pdf(1, "s23"),
        2: make_pdf(1, "s2"),
        9: make_pdf(1, "s9"),
    }
    texts = page_texts(merge_sections(sections, TITLE))
    assert texts[1:] == ["s2-1", "s9-1", "s23-1"]


def test_merge_accepts_pairs_with_absent_entries():
    pairs = [(3, make_pdf(2, "s3")), (4, None), (1, make_pdf(1, "s1"))]
    texts = page_texts(merge_sections(pairs, TITLE))
    assert texts[1:] == ["s1-1", "s3-1", "s3-2"]


def test_merge_without_sections_is_title_page_only():
    texts = page_texts(merge_sections({}, TITLE))
    assert len(texts) == 1
    assert "Data Structures" in texts[0]


def test_merge_all_23_sections():
    slots = SectionSlots()
    for i in range(1, 24):
        slots[i] = make_pdf(1, f"s{i}")
    texts = page_texts(merge_sections(slots, TITLE))
    assert texts[1:] == [f"s{i}-1" for i in range(1, 24)]


def test_bad_section_aborts_merge():
    sections = {1: make_pdf(1, "s1"), 5: b"garbage", 7: make_pdf(1, "s7")}
    with pytest.raises(MergeError) as exc:
        merge_sections(sections, TITLE)

    assert exc.value.section_index == 5
    assert isinstance(exc.value.cause, ParseError)
    assert "section 5" in str(exc.value)


def test_empty_bytes_count_as_present_and_fail():
    with pytest.raises(MergeError) as exc:
        merge_sections({2: b""}, TITLE)
    assert exc.value.section_index == 2


@pytest.mark.parametrize("index", [0, 24, -1])
def test_out_of_range_index_rejected(index):
    with pytest.raises(ValueError):
        merge_sections({index: make_pdf(1)}, TITLE)


def test_section_slots_basics():
    slots = SectionSlots.coerce({7: b"x", 2: b"y"})
    assert len(slots) == 23
    assert slots.present() == [2, 7]
    assert slots[7] == b"x"
    assert slots[8] is None
    assert [i for i, _ in slots] == list(range(1, 24))
    assert SectionSlots.coerce(slots) is slots


def test_merged_title_drawn_at_20pt_bold():
    out = merge_sections({1: make_pdf(1, "s1")}, TITLE)
    spans = title_spans(out, 0)
    assert spans
    for span in spans:
        assert span["size"] == pytest.approx(20.0)
        assert "Bold" in span["font"]


def test_encrypted_section_aborts_merge():
    with pytest.raises(MergeError) as exc:
        merge_sections({3: make_encrypted_pdf(1)}, TITLE)
    assert exc.value.section_index == 3
    assert isinstance(exc.value.cause, ParseError)


@pytest.mark.parametrize("index", [True, False, "1", 1.0])
def test_non_integer_index_rejected(index):
    slots = SectionSlots()
    with pytest.raises(ValueError):
        slots[index] = b"x"
