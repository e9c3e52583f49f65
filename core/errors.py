"""
Exception types raised by the course-file document core.

Callers catch :class:`CourseFileError` to map any core failure to a
generic "processing failed" outcome.
"""

from typing import Optional


class CourseFileError(Exception):
    """Base class for every error raised by the document core."""


class ParseError(CourseFileError):
    """Input bytes could not be loaded as a PDF document."""


class MergeError(CourseFileError):
    """
    A section document could not be merged.

    The whole merge is aborted; no partial output exists.

    Attributes:
        section_index: 1-based section slot that failed.
        cause:         The underlying exception (usually a ParseError).
    """

    def __init__(self, section_index: int, cause: Optional[BaseException] = None):
        self.section_index = section_index
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to merge section {section_index}{detail}")
