"""Title-page text layout and rendering."""

from .models import (
    A4_HEIGHT,
    A4_WIDTH,
    COVER_FONT_SIZE,
    COVER_MARGIN,
    MERGED_TITLE_FONT_SIZE,
    LineBlock,
    PlacedLine,
    TitleSpec,
)
from .title_page import CoverStyle, draw_title_page, font_measure, layout_title
from .wrap import ELLIPSIS, wrap_text_to_lines

__all__ = [
    "A4_WIDTH",
    "A4_HEIGHT",
    "COVER_MARGIN",
    "COVER_FONT_SIZE",
    "MERGED_TITLE_FONT_SIZE",
    "TitleSpec",
    "PlacedLine",
    "LineBlock",
    "CoverStyle",
    "ELLIPSIS",
    "wrap_text_to_lines",
    "layout_title",
    "draw_title_page",
    "font_measure",
]
