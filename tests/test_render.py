"""Unit tests for font-size mapping and HTML rendering."""

from __future__ import annotations

from tagcloud.cloud.render import (
    TagCloudEntry,
    font_size,
    render_span,
    render_tag_cloud,
    scale_entries,
)
from tagcloud.constants import DEFAULT_STYLESHEET


# ---------------------------------------------------------------------------
# font size mapping


def test_font_size_spans_full_range() -> None:
    assert [font_size(count, 10, 30) for count in (10, 20, 30)] == [11, 24, 37]


def test_font_size_floors_fractional_steps() -> None:
    # 1/3 * 26 = 8.67
    assert font_size(2, 1, 4) == 19


def test_font_size_exact_steps_are_not_rounded_down() -> None:
    # 15 / 26 * 26 is exactly 15
    assert font_size(16, 1, 27) == 26
    assert [font_size(count, 1, 27) for count in range(1, 28)] == list(range(11, 38))


def test_scale_entries_exact_middle_step() -> None:
    scaled = scale_entries([("alpha", 1), ("beta", 16), ("gamma", 27)])
    assert [entry.font_size for entry in scaled] == [11, 26, 37]


def test_font_size_degenerate_range() -> None:
    assert font_size(7, 7, 7) == 11


def test_scale_entries_uses_true_min_and_max() -> None:
    scaled = scale_entries([("alpha", 30), ("beta", 10), ("gamma", 20)])
    assert [entry.font_size for entry in scaled] == [37, 11, 24]


def test_scale_entries_equal_counts() -> None:
    scaled = scale_entries([("alpha", 4), ("beta", 4), ("gamma", 4)])
    assert {entry.font_size for entry in scaled} == {11}


def test_scale_entries_empty() -> None:
    assert scale_entries([]) == []


# ---------------------------------------------------------------------------
# HTML rendering


def test_render_span_markup() -> None:
    span = render_span(TagCloudEntry("cloud", 12, 24))
    assert span == '<span style="cursor:default" class="f24" title="count:12">cloud</span>'


def test_render_document_structure() -> None:
    html = render_tag_cloud([("alpha", 10), ("beta", 20), ("gamma", 30)], "input.txt")
    lines = html.splitlines()

    assert lines[0] == "<html>"
    assert "<title>Top 3 words in input.txt</title>" in lines
    assert "<h2>Top 3 words in input.txt</h2>" in lines
    assert f'<link href="{DEFAULT_STYLESHEET}" rel="stylesheet" type="text/css">' in lines
    assert lines[-1] == "</html>"
    assert html.endswith("\n")

    spans = [line for line in lines if line.startswith("<span")]
    assert spans == [
        '<span style="cursor:default" class="f11" title="count:10">alpha</span>',
        '<span style="cursor:default" class="f24" title="count:20">beta</span>',
        '<span style="cursor:default" class="f37" title="count:30">gamma</span>',
    ]


def test_render_keeps_received_order() -> None:
    html = render_tag_cloud([("zulu", 1), ("alpha", 2)], "x")
    assert html.index(">zulu<") < html.index(">alpha<")


def test_render_escapes_text() -> None:
    html = render_tag_cloud([("<b>&co", 2)], "a<b>.txt", stylesheet="style.css")
    assert "&lt;b&gt;&amp;co</span>" in html
    assert "<title>Top 1 words in a&lt;b&gt;.txt</title>" in html
    assert '<link href="style.css"' in html
