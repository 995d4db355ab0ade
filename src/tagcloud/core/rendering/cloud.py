from __future__ import annotations

"""
HTML Tag Cloud Rendering.

Transforms the ranked selection into the lines of an HTML document. Each
word becomes one <span> whose CSS class 'f<size>' encodes a font size
scaled linearly between the configured bounds:

    size = (count - min) * (fmax - fmin) // (max - min) + fmin

where min/max are the lowest and highest counts among the selected words.
When every selected word shares one count the scale is undefined and all
words are rendered at fmax.
"""

import html
import logging
from typing import List, Sequence, Tuple

from tagcloud.domain.constants import DEFAULT_STYLESHEETS, FONT_MAX, FONT_MIN
from tagcloud.domain.models import RankedEntry

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SCALING
# -----------------------------------------------------------------------------

def count_bounds(entries: Sequence[RankedEntry]) -> Tuple[int, int]:
    """
    Return the (min, max) counts of a non-empty selection.

    Raises:
        ValueError: If the selection is empty.
    """
    if not entries:
        raise ValueError("count_bounds() requires at least one entry.")
    counts = [e.count for e in entries]
    return min(counts), max(counts)


def font_size(
        count: int,
        min_count: int,
        max_count: int,
        fmin: int = FONT_MIN,
        fmax: int = FONT_MAX,
) -> int:
    """
    Scale a count linearly onto the [fmin, fmax] font size range.

    Args:
        count: Occurrences of the word being rendered.
        min_count: Lowest count among the selected words.
        max_count: Highest count among the selected words.
        fmin: Font size of the least frequent selected word.
        fmax: Font size of the most frequent selected word.

    Returns:
        int: Font size in [fmin, fmax].
    """
    if max_count == min_count:
        return fmax
    return (count - min_count) * (fmax - fmin) // (max_count - min_count) + fmin


# -----------------------------------------------------------------------------
# MARKUP
# -----------------------------------------------------------------------------

def render_word(entry: RankedEntry, size: int) -> str:
    """Render a single cloud element."""
    return (
        f'<span style="cursor:default" class="f{size}" '
        f'title="count: {entry.count}">{html.escape(entry.word)}</span>'
    )


def render_cloud_body(
        entries: Sequence[RankedEntry],
        fmin: int = FONT_MIN,
        fmax: int = FONT_MAX,
) -> List[str]:
    """
    Render the cloud paragraph for entries already in presentation order.

    An empty selection produces an empty paragraph and no scaling.
    """
    lines = ['<div class="cdiv">', '<p class="cbox">']

    if entries:
        min_count, max_count = count_bounds(entries)
        if min_count == max_count:
            logger.debug(f"All selected words occur {max_count} times; rendering at size {fmax}.")
        for entry in entries:
            size = font_size(entry.count, min_count, max_count, fmin, fmax)
            lines.append(render_word(entry, size))

    lines.extend(["</p>", "</div>"])
    return lines


def render_cloud(
        entries: Sequence[RankedEntry],
        n: int,
        input_label: str,
        *,
        fmin: int = FONT_MIN,
        fmax: int = FONT_MAX,
        stylesheets: Sequence[str] = tuple(DEFAULT_STYLESHEETS),
) -> List[str]:
    """
    Render the complete HTML document for a tag cloud.

    Args:
        entries: Selected words in alphabetical order.
        n: Requested number of words, used in the title and heading.
        input_label: Name of the input as given by the user.
        fmin: Font size of the least frequent selected word.
        fmax: Font size of the most frequent selected word.
        stylesheets: Stylesheet hrefs linked from the document head.

    Returns:
        List[str]: Document lines, without trailing newlines.
    """
    title = f"Top {n} words in {html.escape(input_label)}"

    lines = [
        "<html>",
        "<head>",
        f"<title>{title}</title>",
    ]
    for href in stylesheets:
        lines.append(f'<link href="{html.escape(href)}" rel="stylesheet" type="text/css">')
    lines.extend([
        "</head>",
        "<body>",
        f"<h2>{title}</h2>",
        "<hr>",
    ])

    lines.extend(render_cloud_body(entries, fmin, fmax))

    lines.extend([
        "</body>",
        "</html>",
    ])
    return lines
