"""
The fixed catalogue of course-file sections.

Every course file has 23 numbered sections (1-based).  Uploaded PDFs
are stored as ``section-<N>.pdf`` and merged in ascending order.
"""

from typing import Union

SECTION_NAMES = [
    "Academic Calendar",
    "Test Schedules",
    "List of Holidays",
    "Subject Allocation",
    "IndividualClass Time Table",
    "List of Registered Students",
    "Course Syllabus along with Text Books and References",
    "Micro-Level Lesson Plan including Topics Planned Beyond Syllabus and Tutorials",
    "Unit-Wise Handouts",
    "Unit-Wise Lecture notes",
    "Content of Topics Beyond the Syllabus",
    "Tutorial Scripts",
    "Question Bank",
    "Previous Question papers of Sem End Examination",
    "Internal Evaluation 1",
    "Internal Evaluation 2",
    "Overall Internal Evaluation Marks",
    "Semester End Examination Question Paper",
    "Result Analysis",
    "Innovative Methods Employed in Teaching learning Process",
    "Record of Attendance and Assessment",
    "Student Feedback Report",
    "Record of Attainment of Course Outcomes",
]

SECTION_COUNT = len(SECTION_NAMES)

MERGED_FILENAME = "merged.pdf"


def clamp_section_index(value: Union[int, str]) -> int:
    """
    Coerce *value* to a section index in ``1..SECTION_COUNT``.

    Out-of-range numbers are clamped to the nearest valid index.

    Raises:
        ValueError: If *value* is not an integer.
    """
    try:
        index = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid section index: {value!r}")
    return max(1, min(SECTION_COUNT, index))


def section_title(index: Union[int, str]) -> str:
    """Cover title for a section, e.g. ``13`` -> ``"Question Bank"``."""
    return SECTION_NAMES[clamp_section_index(index) - 1]


def section_filename(index: int) -> str:
    return f"section-{index}.pdf"


def merged_title(subject_code: str, subject_name: str) -> str:
    """Title for a merged course file, e.g. ``"CS301 — Data Structures"``."""
    return f"{subject_code} — {subject_name}"
