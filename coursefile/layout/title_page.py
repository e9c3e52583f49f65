"""
Title-page layout and rendering.

Computes a centred :class:`LineBlock` for a title and draws it onto a
new A4 page of a fitz document.  Used for per-section cover pages and
for the title page of a merged course file.

Layout happens in PDF user space (origin bottom-left, as in the PDF
spec); fitz addresses pages from the top-left, so baselines are flipped
only at draw time.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

import fitz  # PyMuPDF

from .models import (
    A4_HEIGHT,
    A4_WIDTH,
    COVER_FONT_SIZE,
    COVER_MARGIN,
    LINE_SPACING,
    MERGED_TITLE_FONT_SIZE,
    LineBlock,
    PlacedLine,
    TitleSpec,
)
from .wrap import MeasureFn, wrap_text_to_lines

logger = logging.getLogger(__name__)


@dataclass
class CoverStyle:
    """
    Tuneable appearance of generated title pages.

    Attributes:
        page_width:       Page width in points (A4 portrait by default).
        page_height:      Page height in points.
        margin:           Horizontal margin on each side; sets the wrap width.
        cover_font_size:  Font size for per-section cover pages.
        title_font_size:  Font size for the merged document's title page.
        line_spacing:     Line height as a multiple of the font size.
        fontname:         PyMuPDF base-14 font code (``"hebo"`` = Helvetica Bold).
        color:            RGB text colour, components in 0..1.
    """

    page_width: float = A4_WIDTH
    page_height: float = A4_HEIGHT
    margin: float = COVER_MARGIN
    cover_font_size: float = COVER_FONT_SIZE
    title_font_size: float = MERGED_TITLE_FONT_SIZE
    line_spacing: float = LINE_SPACING
    fontname: str = "hebo"
    color: Tuple[float, float, float] = (0, 0, 0)

    def cover_spec(self, text: str) -> TitleSpec:
        return self._spec(text, self.cover_font_size)

    def merged_title_spec(self, text: str) -> TitleSpec:
        return self._spec(text, self.title_font_size)

    def _spec(self, text: str, font_size: float) -> TitleSpec:
        return TitleSpec(
            text=text,
            page_width=self.page_width,
            page_height=self.page_height,
            margin=self.margin,
            font_size=font_size,
        )


@lru_cache(maxsize=8)
def get_font(fontname: str = "hebo") -> fitz.Font:
    """Return a cached fitz.Font for a base-14 font code."""
    return fitz.Font(fontname)


def font_measure(fontname: str = "hebo") -> MeasureFn:
    """Build a ``measure(text, size)`` callable backed by real font metrics."""
    font = get_font(fontname)

    def measure(text: str, font_size: float) -> float:
        return font.text_length(text, fontsize=font_size)

    return measure


def layout_title(
    spec: TitleSpec,
    measure: MeasureFn,
    line_spacing: float = LINE_SPACING,
) -> LineBlock:
    """
    Wrap and position a title on its page.

    The block is centred vertically as a whole: the first baseline sits at
    ``(page_height + block_height) / 2 - line_height`` and each following
    line is one ``line_height`` lower.  Every line is centred horizontally
    on its own measured width.
    """
    texts = wrap_text_to_lines(spec.text, measure, spec.font_size, spec.max_width)
    line_height = spec.font_size * line_spacing
    block_height = len(texts) * line_height

    y = (spec.page_height + block_height) / 2 - line_height
    lines = []
    for text in texts:
        width = measure(text, spec.font_size)
        x = (spec.page_width - width) / 2
        lines.append(PlacedLine(text=text, width=width, x=x, y=y))
        y -= line_height

    logger.debug("Title laid out in %d line(s): %s", len(lines), texts)
    return LineBlock(lines=lines, font_size=spec.font_size, line_height=line_height)


def draw_title_page(
    doc: fitz.Document,
    spec: TitleSpec,
    style: Optional[CoverStyle] = None,
) -> LineBlock:
    """
    Append a new page to *doc* and draw the centred title onto it.

    Args:
        doc:   Destination document; the page is added at the end.
        spec:  Title text, page size, margin and font size.
        style: Font, colour and spacing (defaults to :class:`CoverStyle`).

    Returns:
        The :class:`LineBlock` that was drawn.
    """
    style = style or CoverStyle()
    font = get_font(style.fontname)
    block = layout_title(spec, font_measure(style.fontname), style.line_spacing)

    page = doc.new_page(width=spec.page_width, height=spec.page_height)
    drawable = [line for line in block.lines if line.text]
    if drawable:
        writer = fitz.TextWriter(page.rect)
        for line in drawable:
            # PDF baseline (bottom-left origin) -> fitz point (top-left origin)
            origin = fitz.Point(line.x, spec.page_height - line.y)
            writer.append(origin, line.text, font=font, fontsize=block.font_size)
        writer.write_text(page, color=style.color)

    return block
