"""
Course-file pipeline: uploaded PDFs → covered sections → merged file.

File-level glue around the byte-level core:

1. **Section upload**: read an uploaded PDF, prepend a cover page with
   the section's title, and store it as ``section-<N>.pdf`` in the
   subject directory.
2. **Merge**: collect the stored ``section-*.pdf`` files in ascending
   order and write a single merged PDF behind a title page.

Usage::

    from coursefile.pipeline import CourseFileConfig, CourseFilePipeline

    pipeline = CourseFilePipeline(CourseFileConfig())
    pipeline.add_section("upload.pdf", "uploads/CS301", 13)
    result = pipeline.merge("uploads/CS301", "CS301", "Data Structures")
    print(result.summary())
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from tqdm import tqdm

from core.document import page_count

from .cover import compose_cover
from .layout.title_page import CoverStyle
from .merge import SectionSlots, merge_sections
from .sections import (
    MERGED_FILENAME,
    SECTION_COUNT,
    clamp_section_index,
    merged_title,
    section_filename,
    section_title,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ------------------------------------------------------------------
# Configuration
# ------------------------------------------------------------------


@dataclass
class CourseFileConfig:
    """
    Tuneable parameters for the course-file pipeline.

    Attributes:
        cover_style:      Geometry and font of generated title pages.
        max_upload_mb:    Largest accepted upload, in megabytes.
        disable_tqdm:     Suppress progress bars.
    """

    cover_style: CoverStyle = field(default_factory=CoverStyle)
    max_upload_mb: float = 25.0
    disable_tqdm: bool = False


# ------------------------------------------------------------------
# Results
# ------------------------------------------------------------------


@dataclass
class SectionResult:
    """Outcome of storing one covered section."""

    section: int
    title: str
    output_path: str
    source_pages: int = 0
    total_pages: int = 0


@dataclass
class MergeResult:
    """Summary returned after a merge completes."""

    output_path: str = ""
    title: str = ""
    sections_present: List[int] = field(default_factory=list)
    total_pages: int = 0
    file_size_mb: float = 0.0
    elapsed_seconds: float = 0.0

    def summary(self) -> str:
        """Format a human-readable summary of the merge."""
        present = ", ".join(str(i) for i in self.sections_present) or "none"
        return (
            f"{'=' * 60}\n"
            f"MERGE COMPLETE\n"
            f"{'=' * 60}\n"
            f"  Output:    {self.output_path}\n"
            f"  Title:     {self.title}\n"
            f"  Sections:  {len(self.sections_present)} / {SECTION_COUNT} ({present})\n"
            f"  Pages:     {self.total_pages}\n"
            f"  File size: {self.file_size_mb:.2f} MB\n"
            f"  Wall time: {self.elapsed_seconds:.2f}s\n"
            f"{'=' * 60}"
        )


# ------------------------------------------------------------------
# Pipeline
# ------------------------------------------------------------------


class CourseFilePipeline:
    """
    Stores covered section PDFs in a subject directory and merges them.

    The pipeline owns only the file I/O; covers and merges are built by
    :func:`compose_cover` and :func:`merge_sections`.
    """

    def __init__(self, config: Optional[CourseFileConfig] = None):
        self.config = config or CourseFileConfig()

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def add_section(
        self, upload_path: PathLike, subject_dir: PathLike, section: Union[int, str]
    ) -> SectionResult:
        """
        Cover an uploaded PDF and store it as ``section-<N>.pdf``.

        The section index is clamped to 1..23.  An existing file for the
        same section is replaced.  *upload_path* itself is not modified.

        Raises:
            ValueError: If the upload is not a ``.pdf`` or exceeds the
                size limit, or *section* is not a number.
            FileNotFoundError: If *upload_path* does not exist.
            ParseError: If the upload is not a loadable PDF.
        """
        upload = Path(upload_path)
        if upload.suffix.lower() != ".pdf":
            raise ValueError(f"Only PDF files are allowed: {upload.name}")
        if not upload.exists():
            raise FileNotFoundError(f"Upload not found: {upload}")

        size_mb = upload.stat().st_size / (1024 * 1024)
        if size_mb > self.config.max_upload_mb:
            raise ValueError(
                f"Upload is {size_mb:.1f} MB; limit is {self.config.max_upload_mb:g} MB"
            )

        index = clamp_section_index(section)
        title = section_title(index)
        data = upload.read_bytes()

        covered = compose_cover(data, title, self.config.cover_style)

        out_dir = Path(subject_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        out_path = out_dir / section_filename(index)
        out_path.write_bytes(covered)

        total = page_count(covered)
        logger.debug("Stored section %d (%s): %d pages -> %s", index, title, total, out_path)
        return SectionResult(
            section=index,
            title=title,
            output_path=str(out_path),
            source_pages=total - 1,
            total_pages=total,
        )

    def remove_section(self, subject_dir: PathLike, section: Union[int, str]) -> bool:
        """Delete a stored section.  Returns ``False`` if it did not exist."""
        index = clamp_section_index(section)
        path = Path(subject_dir) / section_filename(index)
        if not path.exists():
            logger.debug("Section %d not stored in %s", index, subject_dir)
            return False
        path.unlink()
        logger.info("Removed section %d: %s", index, path)
        return True

    def list_sections(self, subject_dir: PathLike) -> List[Path]:
        """All PDF files in *subject_dir*, sorted by name."""
        d = Path(subject_dir)
        if not d.is_dir():
            return []
        return sorted(p for p in d.iterdir() if p.suffix.lower() == ".pdf")

    def collect_sections(self, subject_dir: PathLike) -> SectionSlots:
        """Load every stored ``section-<N>.pdf`` into section slots."""
        d = Path(subject_dir)
        slots = SectionSlots()
        pbar = tqdm(
            range(1, SECTION_COUNT + 1),
            desc="Collecting sections",
            unit="section",
            disable=self.config.disable_tqdm,
        )
        for index in pbar:
            path = d / section_filename(index)
            if path.exists():
                slots[index] = path.read_bytes()
        logger.debug("Collected sections: %s", slots.present())
        return slots

    # ------------------------------------------------------------------
    # Merge
    # ------------------------------------------------------------------

    def merge(
        self,
        subject_dir: PathLike,
        subject_code: str,
        subject_name: str,
        output_path: Optional[PathLike] = None,
    ) -> MergeResult:
        """
        Merge every stored section into one PDF.

        Writes to *output_path* when given, otherwise to
        ``<subject_dir>/merged.pdf``.

        Raises:
            MergeError: If any stored section cannot be loaded; no output
                file is written in that case.
        """
        t0 = time.perf_counter()
        title = merged_title(subject_code, subject_name)
        slots = self.collect_sections(subject_dir)

        data = merge_sections(slots, title, self.config.cover_style)

        out = Path(output_path) if output_path is not None else Path(subject_dir) / MERGED_FILENAME
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_bytes(data)

        result = MergeResult(
            output_path=str(out),
            title=title,
            sections_present=slots.present(),
            total_pages=page_count(data),
            file_size_mb=len(data) / (1024 * 1024),
        )

        result.elapsed_seconds = time.perf_counter() - t0
        logger.info(
            "Merged %d sections (%d pages) in %.2fs",
            len(result.sections_present),
            result.total_pages,
            result.elapsed_seconds,
        )
        return result
