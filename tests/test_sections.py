"""Tests for the section catalogue."""

import pytest

from coursefile.sections import (
    SECTION_COUNT,
    SECTION_NAMES,
    clamp_section_index,
    merged_title,
    section_filename,
    section_title,
)


def test_catalogue_has_23_sections():
    assert SECTION_COUNT == 23
    assert SECTION_NAMES[0] == "Academic Calendar"
    assert SECTION_NAMES[12] == "Question Bank"
    assert SECTION_NAMES[-1] == "Record of Attainment of Course Outcomes"


@pytest.mark.parametrize(
    "value, expected",
    [(1, 1), (13, 13), ("7", 7), (0, 1), (-4, 1), (24, 23), ("99", 23)],
)
def test_clamp_section_index(value, expected):
    assert clamp_section_index(value) == expected


@pytest.mark.parametrize("value", ["abc", None, "1.5"])
def test_clamp_rejects_non_numbers(value):
    with pytest.raises(ValueError):
        clamp_section_index(value)


def test_section_title_lookup():
    assert section_title(13) == "Question Bank"
    assert section_title("19") == "Result Analysis"
    assert section_title(100) == "Record of Attainment of Course Outcomes"


def test_filenames_and_merged_title():
    assert section_filename(5) == "section-5.pdf"
    assert merged_title("CS301", "Data Structures") == "CS301 — Data Structures"


def test_every_index_has_a_name():
    assert [section_title(i) for i in range(1, SECTION_COUNT + 1)] == SECTION_NAMES
