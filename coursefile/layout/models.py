"""
Data models for title-page layout.

A TitleSpec describes what to lay out and where; a LineBlock is the
result: 1-2 measured, positioned lines ready to be drawn.

Coordinates are PDF user-space points with the origin at the
**bottom-left** of the page (y grows upward).
"""

from dataclasses import dataclass, field
from typing import List

# A4 portrait, in points
A4_WIDTH = 595.28
A4_HEIGHT = 841.89

COVER_MARGIN = 64.0
COVER_FONT_SIZE = 24.0
MERGED_TITLE_FONT_SIZE = 20.0
LINE_SPACING = 1.3
MAX_TITLE_LINES = 2


@dataclass(frozen=True)
class TitleSpec:
    """Title text plus the page geometry it is laid out on."""

    text: str
    page_width: float = A4_WIDTH
    page_height: float = A4_HEIGHT
    margin: float = COVER_MARGIN
    font_size: float = COVER_FONT_SIZE
    max_lines: int = MAX_TITLE_LINES

    @property
    def max_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def line_height(self) -> float:
        return self.font_size * LINE_SPACING

    @classmethod
    def for_cover(cls, text: str) -> "TitleSpec":
        """Per-section cover page (24 pt)."""
        return cls(text=text, font_size=COVER_FONT_SIZE)

    @classmethod
    def for_merged_title(cls, text: str) -> "TitleSpec":
        """Title page of a merged course file (20 pt)."""
        return cls(text=text, font_size=MERGED_TITLE_FONT_SIZE)


@dataclass(frozen=True)
class PlacedLine:
    """A single line of title text with its measured width and baseline origin."""

    text: str
    width: float
    x: float
    y: float

    def __repr__(self) -> str:
        return f"PlacedLine('{self.text}', w={self.width:.1f}, x={self.x:.1f}, y={self.y:.1f})"


@dataclass
class LineBlock:
    """Vertically centred block of 1-2 lines."""

    lines: List[PlacedLine] = field(default_factory=list)
    font_size: float = COVER_FONT_SIZE
    line_height: float = COVER_FONT_SIZE * LINE_SPACING

    @property
    def block_height(self) -> float:
        return len(self.lines) * self.line_height

    @property
    def texts(self) -> List[str]:
        return [line.text for line in self.lines]

    def __len__(self) -> int:
        return len(self.lines)
