"""
Merging of per-section PDFs into a single course file.

Output order is fixed: the overall title page, then every present
section's pages in ascending section index (1..23).  Each section PDF
is expected to already carry its own cover page.

Usage::

    from coursefile.merge import merge_sections

    merged = merge_sections({1: calendar_pdf, 13: question_bank_pdf},
                            "CS301 — Data Structures")
"""

import logging
from typing import Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from core.document import append_all_pages, load_pdf_bytes, new_document, save_pdf_bytes
from core.errors import MergeError

from .layout.title_page import CoverStyle, draw_title_page
from .sections import SECTION_COUNT

logger = logging.getLogger(__name__)


class SectionSlots:
    """
    Fixed-size table of optional section documents, indexed 1..23.

    Iteration always yields ``(index, data)`` in ascending index order,
    including empty slots (``data is None``).
    """

    def __init__(self, size: int = SECTION_COUNT):
        self._slots: List[Optional[bytes]] = [None] * size

    @classmethod
    def coerce(
        cls,
        sections: Union["SectionSlots", Mapping[int, Optional[bytes]], Iterable[Tuple[int, Optional[bytes]]]],
    ) -> "SectionSlots":
        """Build slots from a mapping or an iterable of ``(index, data)`` pairs."""
        if isinstance(sections, SectionSlots):
            return sections
        items = sections.items() if isinstance(sections, Mapping) else sections
        slots = cls()
        for index, data in items:
            slots[index] = data
        return slots

    def _check(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError(f"Section index must be an integer: {index!r}")
        if not 1 <= index <= len(self._slots):
            raise ValueError(
                f"Section index {index!r} out of range (1..{len(self._slots)})"
            )
        return index - 1

    def __getitem__(self, index: int) -> Optional[bytes]:
        return self._slots[self._check(index)]

    def __setitem__(self, index: int, data: Optional[bytes]) -> None:
        self._slots[self._check(index)] = data

    def __iter__(self) -> Iterator[Tuple[int, Optional[bytes]]]:
        for i, data in enumerate(self._slots, start=1):
            yield i, data

    def __len__(self) -> int:
        return len(self._slots)

    def present(self) -> List[int]:
        """Indices of slots holding a document, ascending."""
        return [i for i, data in self if data is not None]

    def __repr__(self) -> str:
        return f"SectionSlots(present={self.present()})"


def merge_sections(
    sections: Union[SectionSlots, Mapping[int, Optional[bytes]], Iterable[Tuple[int, Optional[bytes]]]],
    overall_title: str,
    style: Optional[CoverStyle] = None,
) -> bytes:
    """
    Concatenate section PDFs behind a generated title page.

    Args:
        sections:      Section documents keyed by index 1..23; missing or
                       ``None`` entries are skipped without a placeholder.
        overall_title: Text for the title page (drawn at the smaller
                       merged-title font size).
        style:         Page geometry and font settings.

    Returns:
        Bytes of the merged PDF: ``1 + sum(section pages)`` pages.

    Raises:
        MergeError: If any present section fails to load.  Nothing is
            returned for a partially merged document.
        ValueError: If a section index is outside 1..23.
    """
    style = style or CoverStyle()
    slots = SectionSlots.coerce(sections)

    out = new_document()
    try:
        draw_title_page(out, style.merged_title_spec(overall_title), style)

        for index, data in slots:
            if data is None:
                continue
            try:
                src = load_pdf_bytes(data)
            except Exception as e:
                raise MergeError(index, e) from e
            try:
                copied = append_all_pages(out, src)
            except Exception as e:
                raise MergeError(index, e) from e
            finally:
                src.close()
            logger.debug("Section %d: appended %d pages", index, copied)

        logger.debug(
            "Merged %d sections into %d pages", len(slots.present()), out.page_count
        )
        return save_pdf_bytes(out)
    finally:
        out.close()
