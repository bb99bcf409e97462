from __future__ import annotations

from datetime import date

import pytest

from conftest import make_component
from obsolescence_report.analysis import (
    InvalidDateWindowError,
    LifecyclePhase,
    MalformedDateError,
    find_obsolete_components,
)
from obsolescence_report.analysis.models import NOT_DEFINED_LABEL

MARCH = ("2024-03-01", "2024-03-31")


def test_example_scenario_drops_null_lifecycle_and_lower_bound(metadata):
    catalog = [
        make_component(1, "2024-03-15", category="A"),
        make_component(2, category=None, phases=False),
        make_component(3, "2024-03-01", category="A"),
    ]
    result = find_obsolete_components(catalog, *MARCH, metadata)
    assert [item.id for item in result] == ["1"]
    assert result[0].obsolescence_date == "2024-03-15"
    assert result[0].category.key == "A"
    assert result[0].category.label == "Category A"


def test_null_lifecycle_is_never_obsolete(metadata):
    catalog = [make_component(i, category="A", phases=False) for i in range(5)]
    assert find_obsolete_components(catalog, "1900-01-01", "2999-12-31", metadata) == []


def test_missing_end_of_life_phase_is_never_obsolete(metadata):
    catalog = [
        make_component(1, phases=[LifecyclePhase("active", "2024-03-10")]),
        make_component(2, phases=[LifecyclePhase("phaseOut", "2024-03-12")]),
        make_component(3, phases=[LifecyclePhase("endOfLife", None)]),
        make_component(4, phases=[LifecyclePhase("endOfLife", "")]),
    ]
    assert find_obsolete_components(catalog, *MARCH, metadata) == []


def test_window_bounds_are_exclusive(metadata):
    catalog = [
        make_component("start", "2024-03-01"),
        make_component("inside-low", "2024-03-02"),
        make_component("inside-high", "2024-03-30"),
        make_component("end", "2024-03-31"),
        make_component("after", "2024-04-01"),
        make_component("before", "2024-02-29"),
    ]
    result = find_obsolete_components(catalog, *MARCH, metadata)
    assert [item.id for item in result] == ["inside-low", "inside-high"]
    for item in result:
        assert "2024-03-01" < item.obsolescence_date < "2024-03-31"


def test_sorted_by_date_and_stable_for_ties(metadata):
    catalog = [
        make_component("c", "2024-03-20"),
        make_component("a1", "2024-03-05"),
        make_component("b", "2024-03-10"),
        make_component("a2", "2024-03-05"),
        make_component("a3", "2024-03-05", category="B"),
    ]
    result = find_obsolete_components(catalog, *MARCH, metadata)
    assert [item.id for item in result] == ["a1", "a2", "a3", "b", "c"]
    dates = [item.obsolescence_date for item in result]
    assert dates == sorted(dates)


def test_null_category_falls_back_to_not_defined(metadata):
    result = find_obsolete_components([make_component(1, "2024-03-15", category=None)], *MARCH, metadata)
    descriptor = result[0].category
    assert descriptor.key is None
    assert descriptor.label == NOT_DEFINED_LABEL == "Not defined"
    assert descriptor.bg_color is None
    assert descriptor.color is None


def test_category_colors_come_from_metadata(metadata):
    result = find_obsolete_components([make_component(1, "2024-03-15", category="B")], *MARCH, metadata)
    assert result[0].category.bg_color == "#445566"
    assert result[0].category.color == "#000000"


def test_unknown_category_code_has_no_colors(metadata):
    result = find_obsolete_components([make_component(1, "2024-03-15", category="Z")], *MARCH, metadata)
    descriptor = result[0].category
    assert descriptor.key == "Z"
    assert descriptor.label == "Z"
    assert (descriptor.bg_color, descriptor.color) == (None, None)


def test_descriptor_is_built_per_component(metadata):
    catalog = [make_component(1, "2024-03-15"), make_component(2, "2024-03-16")]
    first, second = find_obsolete_components(catalog, *MARCH, metadata)
    assert first.category == second.category
    assert first.category is not second.category


def test_extra_fields_are_passed_through(metadata):
    component = make_component(1, "2024-03-15", description="Mainframe", tags=["legacy"])
    (item,) = find_obsolete_components([component], *MARCH, metadata)
    assert item.extra == {"description": "Mainframe", "tags": ["legacy"]}
    payload = item.to_dict()
    assert payload["obsolescenceDate"] == "2024-03-15"
    assert payload["description"] == "Mainframe"
    assert "lifecycle" not in payload


def test_extra_fields_are_copied_from_the_catalog(metadata):
    component = make_component(1, "2024-03-15", description="Mainframe")
    (item,) = find_obsolete_components([component], *MARCH, metadata)
    item.extra["description"] = "changed"
    assert component.extra == {"description": "Mainframe"}


def test_malformed_end_of_life_date_fails_the_run(metadata):
    catalog = [make_component(1, "2024-03-15"), make_component(2, "15/03/2024")]
    with pytest.raises(MalformedDateError) as excinfo:
        find_obsolete_components(catalog, *MARCH, metadata)
    assert excinfo.value.value == "15/03/2024"


def test_malformed_date_outside_window_still_fails(metadata):
    catalog = [make_component(1, "not-a-date")]
    with pytest.raises(MalformedDateError):
        find_obsolete_components(catalog, "2030-01-01", "2030-01-02", metadata)


@pytest.mark.parametrize("start,end", [("2024-13-01", "2024-03-31"), ("2024-03-01", "31.03.2024")])
def test_malformed_window_date(metadata, start, end):
    with pytest.raises(MalformedDateError):
        find_obsolete_components([], start, end, metadata)


def test_inverted_window_is_rejected(metadata):
    with pytest.raises(InvalidDateWindowError):
        find_obsolete_components([], "2024-03-31", "2024-03-01", metadata)


def test_window_accepts_date_objects(metadata):
    catalog = [make_component(1, "2024-03-15")]
    result = find_obsolete_components(catalog, date(2024, 3, 1), date(2024, 3, 31), metadata)
    assert len(result) == 1


def test_empty_catalog_gives_empty_result(metadata):
    assert find_obsolete_components([], *MARCH, metadata) == []


def test_sample_snapshot(sample_components, sample_metadata):
    result = find_obsolete_components(sample_components, "2026-10-01", "2026-12-31", sample_metadata)
    assert [item.name for item in result] == [
        "Dell PowerEdge R730",
        "Oracle Database 12c",
        "Internal SMTP Relay",
    ]
    assert [item.category.label for item in result] == ["Hardware", "Software", "Not defined"]
