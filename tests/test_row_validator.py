#!/usr/bin/env python3
"""
Tests for schema-aware row validation: structural errors, row warnings and
typed row construction for all three job types.
"""

import json

import pytest

from bulkcontent import (
    CategoryRow,
    CmsRow,
    FilterRow,
    JobType,
    RowValidator,
    parse_category_csv,
    parse_cms_csv,
    parse_filter_csv,
)


@pytest.fixture
def validator():
    """Fixture providing a RowValidator instance."""
    return RowValidator()


class TestStructuralErrors:
    """Whole-file rejections."""

    @pytest.mark.parametrize("text", ["", "   \n\n", "name,keywords", "name,keywords\n\n  \n"])
    def test_too_few_records(self, validator, text):
        outcome = validator.parse(text, "category")
        assert outcome.accepted is False
        assert outcome.rows == []
        assert outcome.errors == ["file must contain a header row and at least one data row"]
        assert outcome.warnings == []

    def test_missing_required_column(self, validator):
        outcome = validator.parse("name\nfoo", "category")
        assert outcome.accepted is False
        assert outcome.rows == []
        assert outcome.errors == ["Missing required column: keywords"]

    def test_every_missing_column_is_reported_in_schema_order(self, validator):
        outcome = validator.parse("keywords\nfoo", "filter")
        assert outcome.accepted is False
        assert outcome.errors == [
            "Missing required column: url_path",
            "Missing required column: category_id",
        ]

    def test_valid_rows_are_not_returned_when_a_column_is_missing(self, validator):
        outcome = validator.parse("identifier,keywords\nhome,a\nabout,b", "cms")
        assert outcome.accepted is False
        assert outcome.rows == []


class TestHeaderHandling:
    """Header normalization."""

    def test_header_case_and_whitespace_insensitive(self, validator):
        loose = validator.parse(" Name , KEYWORDS \nTegel,tegels", "category")
        strict = validator.parse("name,keywords\nTegel,tegels", "category")
        assert loose == strict
        assert loose.rows == [CategoryRow(name="Tegel", keywords="tegels")]

    def test_column_order_does_not_matter(self, validator):
        outcome = validator.parse("keywords,category_id,name\nkw,12,Tegel", "category")
        assert outcome.rows == [CategoryRow(name="Tegel", keywords="kw", category_id="12")]

    def test_duplicate_header_last_occurrence_wins(self, validator):
        outcome = validator.parse("name,keywords,name\nFirst,kw,Second", "category")
        assert outcome.rows[0].name == "Second"


class TestRowWarnings:
    """Row-level warnings."""

    def test_empty_row_key_drops_row(self, validator):
        outcome = validator.parse("name,keywords\n,foo", "category")
        assert outcome.accepted is True
        assert outcome.rows == []
        assert outcome.warnings == ["Row 2: 'name' is empty, row skipped"]

    def test_empty_soft_required_keeps_row(self, validator):
        outcome = validator.parse("name,keywords\nTegel,", "category")
        assert outcome.accepted is True
        assert outcome.rows == [CategoryRow(name="Tegel", keywords="")]
        assert outcome.warnings == ["Row 2: 'keywords' is empty for \"Tegel\""]

    def test_row_numbers_count_only_non_blank_lines(self, validator):
        text = "name,keywords\nA,a\n\n,b\nC,"
        outcome = validator.parse(text, "category")
        assert [row.name for row in outcome.rows] == ["A", "C"]
        assert outcome.warnings == [
            "Row 3: 'name' is empty, row skipped",
            "Row 4: 'keywords' is empty for \"C\"",
        ]

    def test_warned_rows_are_tracked_by_record_number(self, validator):
        outcome = validator.parse("name,keywords\nTegel,\n,x\nTegel,ok", "category")
        assert outcome.row_numbers == [2, 4]
        assert outcome.warned_rows == [2, 3]
        assert [outcome.has_warning(i) for i in range(len(outcome.rows))] == [True, False]

    def test_only_empty_data_rows_are_accepted_without_rows(self, validator):
        outcome = validator.parse("name,keywords\n,\n , ", "category")
        assert outcome.accepted is True
        assert outcome.rows == []
        assert len(outcome.warnings) == 2

    def test_ragged_row_missing_trailing_fields(self, validator):
        outcome = validator.parse("url_path,category_id,keywords\nkranen/kleur/chroom", "filter")
        assert outcome.accepted is True
        assert outcome.rows == [FilterRow(url_path="kranen/kleur/chroom", category_id="", keywords="")]
        assert outcome.warnings == ["Row 2: 'category_id' is empty for \"kranen/kleur/chroom\""]


class TestTypedRows:
    """Typed row construction per job type."""

    def test_category_optional_fields(self):
        outcome = parse_category_csv(
            'name,keywords,context,category_id\nWandtegels,"wand, tegels",Modern,123\nVloer,vloer,,'
        )
        assert outcome.rows == [
            CategoryRow(name="Wandtegels", keywords="wand, tegels", context="Modern", category_id="123"),
            CategoryRow(name="Vloer", keywords="vloer", context=None, category_id=None),
        ]

    def test_filter_rows(self):
        outcome = parse_filter_csv(
            "url_path,category_id,parent_category_name,keywords,tweakwise_template\n"
            "kranen/regendouche/kleur/chroom,262,regendouche,chroom,TEMPLATE_KRANEN"
        )
        row = outcome.rows[0]
        assert isinstance(row, FilterRow)
        assert row.key == "kranen/regendouche/kleur/chroom"
        assert row.parent_category_name == "regendouche"
        assert row.tweakwise_template == "TEMPLATE_KRANEN"
        assert outcome.job_type is JobType.FILTER

    def test_cms_soft_required_is_content_heading(self):
        outcome = parse_cms_csv("identifier,content_heading,keywords\nhome,,kw")
        assert outcome.rows == [CmsRow(identifier="home", content_heading="", keywords="kw")]
        assert outcome.warnings == ["Row 2: 'content_heading' is empty for \"home\""]

    def test_unknown_columns_are_ignored(self):
        outcome = parse_cms_csv("identifier,content_heading,keywords,extra\nhome,Home,kw,zzz")
        assert outcome.rows == [CmsRow(identifier="home", content_heading="Home", keywords="kw")]


def test_outcome_to_json(validator):
    outcome = validator.parse("name,keywords\nTegel,", "category")
    data = json.loads(outcome.to_json())
    assert data["accepted"] is True
    assert data["job_type"] == "category"
    assert data["rows"] == [{"name": "Tegel", "keywords": "", "context": None, "category_id": None}]
    assert len(data["warnings"]) == 1


def test_independent_calls_do_not_share_state(validator):
    first = validator.parse("name,keywords\n,x", "category")
    second = validator.parse("name,keywords\nA,a", "category")
    assert first.warnings and not second.warnings
    assert first.rows == [] and len(second.rows) == 1


@pytest.mark.parametrize("row, key", [
    (CategoryRow(name="Tegel", keywords="kw"), "Tegel"),
    (FilterRow(url_path="kranen/kleur/chroom", category_id="1", keywords="kw"), "kranen/kleur/chroom"),
    (CmsRow(identifier="home", content_heading="Home", keywords="kw"), "home"),
])
def test_row_key_and_dict(row, key):
    assert row.key == key
    assert "key_column" not in row.to_dict()
    assert "job_type" not in row.to_dict()
