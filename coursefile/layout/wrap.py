"""
Two-line greedy text wrapping for cover-page titles.

Titles get at most two lines.  Words are packed onto line 1 until one
overflows; from then on they go to line 2.  When line 2 overflows it is
cut back character by character until it fits with a trailing ellipsis,
and every remaining word is dropped.  Long titles are truncated, never
wrapped onto a third line.
"""

import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

# (text, font_size) -> rendered width in points
MeasureFn = Callable[[str, float], float]

ELLIPSIS = "…"


def _truncate_to_fit(text: str, measure: MeasureFn, font_size: float, max_width: float) -> str:
    """
    Cut *text* from the end until ``text + "…"`` fits.

    Always returns something: if not even the bare ellipsis fits, the
    ellipsis is returned on its own.
    """
    truncated = text
    while truncated and measure(truncated + ELLIPSIS, font_size) > max_width:
        truncated = truncated[:-1]
    if not truncated:
        logger.debug("Title overflow: nothing fits before the ellipsis")
    return truncated + ELLIPSIS


def wrap_text_to_lines(
    text: str,
    measure: MeasureFn,
    font_size: float,
    max_width: float,
) -> List[str]:
    """
    Split *text* into one or two lines no wider than *max_width*.

    Args:
        text:      Title text; whitespace runs are collapsed.
        measure:   Font metrics provider, ``measure(text, size) -> width``.
        font_size: Font size in points.
        max_width: Maximum rendered line width in points.

    Returns:
        ``[line1]`` if the whole title fits on one line, otherwise
        ``[line1, line2]`` where line 2 may end in ``"…"``.  An empty
        title yields ``[""]``.  The first word is never truncated, even
        when it alone is wider than *max_width*.
    """
    words = str(text).split()
    if not words:
        return [""]

    line1 = words[0]
    rest = words[1:]

    # Line 1: pack until the first word that doesn't fit
    consumed = 0
    for word in rest:
        candidate = f"{line1} {word}"
        if measure(candidate, font_size) > max_width:
            break
        line1 = candidate
        consumed += 1

    overflow = rest[consumed:]
    if not overflow:
        return [line1]

    # Line 2: same constraint; first overflow truncates and stops
    line2 = ""
    for word in overflow:
        candidate = f"{line2} {word}" if line2 else word
        if measure(candidate, font_size) <= max_width:
            line2 = candidate
            continue
        line2 = _truncate_to_fit(candidate, measure, font_size, max_width)
        break

    return [line1, line2]
