from __future__ import annotations

"""
Unit tests for the HTML tag cloud renderer.

Verifies:
1. Linear font size scaling and its boundaries.
2. The degenerate (single frequency) scale policy.
3. Document structure, per-word markup and escaping.
"""

import re

import pytest

from tagcloud.core.rendering.cloud import (
    count_bounds,
    font_size,
    render_cloud,
    render_cloud_body,
    render_word,
)
from tagcloud.domain.models import RankedEntry

SPAN_RE = re.compile(r'<span style="cursor:default" class="f(\d+)" title="count: (\d+)">([^<]*)</span>')


def _spans(lines):
    return [SPAN_RE.fullmatch(line) for line in lines if line.startswith("<span")]


# -----------------------------------------------------------------------------
# SCALING
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("count, expected", [(2, 11), (6, 29), (10, 48)])
def test_font_size_scaling_boundaries(count: int, expected: int) -> None:
    """min=2, max=10 maps onto [11, 48] with floor division."""
    assert font_size(count, 2, 10, 11, 48) == expected


def test_font_size_degenerate_scale_uses_max() -> None:
    assert font_size(5, 5, 5, 11, 48) == 48


def test_font_size_custom_bounds() -> None:
    assert font_size(1, 1, 3, 10, 20) == 10
    assert font_size(2, 1, 3, 10, 20) == 15
    assert font_size(3, 1, 3, 10, 20) == 20


def test_count_bounds() -> None:
    entries = [RankedEntry("a", 4), RankedEntry("b", 9), RankedEntry("c", 2)]
    assert count_bounds(entries) == (2, 9)
    with pytest.raises(ValueError):
        count_bounds([])


# -----------------------------------------------------------------------------
# MARKUP
# -----------------------------------------------------------------------------

def test_render_word_markup() -> None:
    line = render_word(RankedEntry("cat", 2), 29)
    assert line == '<span style="cursor:default" class="f29" title="count: 2">cat</span>'


def test_render_word_escapes_text() -> None:
    assert "a&amp;b" in render_word(RankedEntry("a&b", 1), 11)


def test_body_every_word_same_count_renders_at_max() -> None:
    entries = [RankedEntry(w, 5) for w in ("apple", "kiwi", "pear")]
    sizes = [int(m.group(1)) for m in _spans(render_cloud_body(entries))]
    assert sizes == [48, 48, 48]


def test_body_single_word_renders_at_max() -> None:
    sizes = [int(m.group(1)) for m in _spans(render_cloud_body([RankedEntry("solo", 1)]))]
    assert sizes == [48]


def test_body_empty_selection() -> None:
    assert render_cloud_body([]) == ['<div class="cdiv">', '<p class="cbox">', "</p>", "</div>"]


def test_render_cloud_document_structure() -> None:
    entries = [RankedEntry("cat", 2), RankedEntry("mat", 1), RankedEntry("the", 3)]
    lines = render_cloud(entries, 3, "story.txt", stylesheets=["a.css", "b.css"])

    assert lines[0] == "<html>"
    assert lines[-1] == "</html>"
    assert "<title>Top 3 words in story.txt</title>" in lines
    assert "<h2>Top 3 words in story.txt</h2>" in lines
    assert '<link href="a.css" rel="stylesheet" type="text/css">' in lines
    assert '<link href="b.css" rel="stylesheet" type="text/css">' in lines
    assert lines.index("</head>") < lines.index("<body>") < lines.index("<hr>")

    spans = _spans(lines)
    assert all(spans)
    assert [m.group(3) for m in spans] == ["cat", "mat", "the"]
    assert [(int(m.group(1)), int(m.group(2))) for m in spans] == [(29, 2), (11, 1), (48, 3)]


def test_render_cloud_empty_selection_keeps_chrome() -> None:
    lines = render_cloud([], 10, "empty.txt")
    assert "<h2>Top 10 words in empty.txt</h2>" in lines
    assert not any(line.startswith("<span") for line in lines)


def test_render_cloud_escapes_label() -> None:
    lines = render_cloud([], 1, "<notes>.txt")
    assert "<h2>Top 1 words in &lt;notes&gt;.txt</h2>" in lines


def test_render_cloud_default_stylesheets() -> None:
    lines = render_cloud([], 1, "x")
    links = [line for line in lines if line.startswith("<link")]
    assert len(links) == 2
    assert 'href="tagcloud.css"' in links[1]
