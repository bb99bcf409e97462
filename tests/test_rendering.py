from __future__ import annotations

import pytest

from conftest import make_component
from obsolescence_report.analysis import aggregate_by_category, find_obsolete_components
from obsolescence_report.catalog import CategoryMetadata
from obsolescence_report.rendering import (
    EMPTY_STATE,
    RenderError,
    build_sections,
    compose_report,
    render_bar_chart,
)
from obsolescence_report.rendering.pdf import NO_ANALYSIS

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


@pytest.fixture()
def items(metadata):
    catalog = [
        make_component(1, "2024-03-05", category="A", name="Java 8 <runtime>"),
        make_component(2, "2024-03-10", category=None, name="Tape Library"),
        make_component(3, "2024-03-20", category="B", name="Windows Server 2012"),
    ]
    return find_obsolete_components(catalog, "2024-03-01", "2024-03-31", metadata)


def test_render_bar_chart_returns_png(items):
    png = render_bar_chart(aggregate_by_category(items), dpi=50)
    assert png.startswith(PNG_MAGIC)


def test_render_bar_chart_falls_back_for_bad_colors():
    metadata = CategoryMetadata(colors={"A": {"bgColor": "not-a-color"}})
    items = find_obsolete_components(
        [make_component(1, "2024-03-05", category="A")], "2024-03-01", "2024-03-31", metadata
    )
    assert render_bar_chart(aggregate_by_category(items), dpi=50).startswith(PNG_MAGIC)


def test_render_bar_chart_empty():
    assert render_bar_chart({}, dpi=50).startswith(PNG_MAGIC)


def test_render_bar_chart_bad_default_color_raises_render_error():
    metadata = CategoryMetadata()
    plain = find_obsolete_components(
        [make_component(1, "2024-03-05", category="Q")], "2024-03-01", "2024-03-31", metadata
    )
    with pytest.raises(RenderError):
        render_bar_chart(aggregate_by_category(plain), dpi=50, default_color="nope")


def test_sections_with_items(items):
    definition = build_sections(items, b"png", "Plan upgrades.", "2024-03-01", "2024-03-31")
    assert (definition.start_date, definition.end_date) == ("2024-03-01", "2024-03-31")
    chart, table, analysis = definition.sections
    assert chart.kind == "chart" and chart.body == b"png"
    assert table.kind == "table"
    assert table.body[0] == ["Obsolescence Date", "Category", "IT Component"]
    assert table.body[2] == ["2024-03-10", "Not defined", "Tape Library"]
    assert analysis.kind == "text" and analysis.body == "Plan upgrades."


def test_empty_state_shown_in_chart_and_table():
    definition = build_sections([], None, "", "2024-03-01", "2024-03-31")
    chart, table, analysis = definition.sections
    assert (chart.kind, chart.body) == ("empty", EMPTY_STATE)
    assert (table.kind, table.body) == ("empty", EMPTY_STATE)
    assert EMPTY_STATE == "No obsolete it components during this period..."
    assert (analysis.kind, analysis.body) == ("empty", NO_ANALYSIS)


def test_blank_analysis_uses_placeholder(items):
    definition = build_sections(items, b"png", "   \n", "2024-03-01", "2024-03-31")
    assert definition.sections[2].body == NO_ANALYSIS


def test_sections_require_chart_when_items_present(items):
    with pytest.raises(RenderError):
        build_sections(items, None, "", "2024-03-01", "2024-03-31")


def test_compose_report_with_items(items):
    png = render_bar_chart(aggregate_by_category(items), dpi=50)
    pdf = compose_report(items, png, "Line one\nLine <two> & more", "2024-03-01", "2024-03-31")
    assert pdf.startswith(b"%PDF")
    assert len(pdf) > 1000


def test_compose_report_empty():
    pdf = compose_report([], None, "", "2024-03-01", "2024-03-31")
    assert pdf.startswith(b"%PDF")
