"""
Document core for course-file assembly.
Byte-level PDF loading, page copying and serialization, plus the error types.
"""

from .errors import CourseFileError, MergeError, ParseError

__all__ = [
    "CourseFileError",
    "ParseError",
    "MergeError",
]
