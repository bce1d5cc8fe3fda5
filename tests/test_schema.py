"""Tests for pattern and element validation."""

import pytest
from pydantic import ValidationError

from notebook_layouts.patterns import EditableElement, ElementKind, LayoutPattern, PatternCategory, create_pattern
from notebook_layouts.patterns.pattern_schema import slugify
from tests.conftest import SMALL_SVG


def _pattern(**overrides):
    fields = dict(
        name="Daily Page",
        category=PatternCategory.PLANNING,
        keywords=["Daily", "Planner"],
        tags=["daily"],
        artwork=SMALL_SVG,
    )
    fields.update(overrides)
    return create_pattern(**fields)


class TestEditableElement:
    def test_select_requires_options(self):
        with pytest.raises(ValidationError):
            EditableElement(id="mood", kind="select", x=0, y=0, width=10, height=10)

    def test_options_only_on_select(self):
        with pytest.raises(ValidationError):
            EditableElement(id="notes", kind="text", x=0, y=0, width=10, height=10, options=["a"])

    def test_rejects_negative_position(self):
        with pytest.raises(ValidationError):
            EditableElement(id="notes", kind="text", x=-1, y=0, width=10, height=10)

    def test_rejects_zero_size(self):
        with pytest.raises(ValidationError):
            EditableElement(id="notes", kind="text", x=0, y=0, width=0, height=10)

    def test_edges(self):
        e = EditableElement(id="notes", kind=ElementKind.TEXTAREA, x=10, y=20, width=30, height=40)
        assert (e.right, e.bottom) == (40, 60)


class TestLayoutPattern:
    def test_keywords_lowercased(self):
        assert _pattern().keywords == ("daily", "planner")

    def test_requires_keywords_and_tags(self):
        with pytest.raises(ValidationError):
            _pattern(keywords=[])
        with pytest.raises(ValidationError):
            _pattern(tags=[])

    def test_popularity_range(self):
        with pytest.raises(ValidationError):
            _pattern(popularity=101)

    def test_duplicate_element_ids(self):
        elements = [
            {"id": "date", "kind": "date", "x": 0, "y": 0, "width": 10, "height": 10},
            {"id": "date", "kind": "text", "x": 0, "y": 20, "width": 10, "height": 10},
        ]
        with pytest.raises(ValidationError):
            _pattern(elements=elements)

    def test_frozen(self):
        pattern = _pattern()
        with pytest.raises(ValidationError):
            pattern.name = "Other"

    def test_id_derived_from_name(self):
        assert _pattern().id == "daily-page"
        assert _pattern(pattern_id="custom").id == "custom"

    def test_unknown_category(self):
        with pytest.raises(ValidationError):
            LayoutPattern(id="x", name="x", category="cooking", keywords=("x",), tags=("x",), artwork="")


def test_slugify():
    assert slugify("Mood Tracker & Journal") == "mood-tracker-journal"
    assert slugify("!!!") == "pattern"
