"""
Course-file PDF assembly.

Cover pages for uploaded section PDFs, and merging of the 23 fixed
coursework sections into one document behind a title page.
"""

from .cover import compose_cover
from .merge import SectionSlots, merge_sections
from .pipeline import CourseFileConfig, CourseFilePipeline, MergeResult, SectionResult

__all__ = [
    "compose_cover",
    "merge_sections",
    "SectionSlots",
    "CourseFileConfig",
    "CourseFilePipeline",
    "MergeResult",
    "SectionResult",
]
