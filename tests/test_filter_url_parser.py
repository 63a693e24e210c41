#!/usr/bin/env python3
"""
Tests for filter URL segmentation into category path and attribute pairs.
"""

import pytest

from bulkcontent import FilterUrlParser, ParsedFilterUrl, TweakwiseAttribute
from bulkcontent.filter_url_parser import format_attribute, format_value


@pytest.fixture
def url_parser():
    """Fixture providing a FilterUrlParser with the packaged attribute keys."""
    return FilterUrlParser()


def test_single_attribute_pair(url_parser):
    parsed = url_parser.parse_filter_url("kranen/regendouche/kleur/chroom")
    assert parsed.category_path == "kranen/regendouche"
    assert parsed.attributes == (TweakwiseAttribute(attribute="kleur", value="Chroom"),)
    assert parsed.search_attributes_string == "kleur:Chroom"


def test_no_known_attribute_is_pure_category(url_parser):
    parsed = url_parser.parse_filter_url("badkamermeubels/massief-eiken")
    assert parsed.category_path == "badkamermeubels/massief-eiken"
    assert parsed.attributes == ()
    assert parsed.search_attributes_string == ""


def test_attribute_as_last_segment_is_pure_category(url_parser):
    parsed = url_parser.parse_filter_url("kranen/regendouche/kleur")
    assert parsed.category_path == "kranen/regendouche/kleur"
    assert parsed.attributes == ()


def test_multiple_pairs_keep_encounter_order(url_parser):
    parsed = url_parser.parse_filter_url("tegels/kleur/wit/afmeting/60x60-cm")
    assert parsed.category_path == "tegels"
    assert parsed.search_attributes_string == "kleur:Wit|afmeting:60x60 cm"


def test_dangling_segment_is_dropped(url_parser):
    parsed = url_parser.parse_filter_url("kranen/kleur/chroom/merk")
    assert [a.attribute for a in parsed.attributes] == ["kleur"]
    assert parsed.search_attributes_string == "kleur:Chroom"


def test_segments_after_boundary_are_paired_even_if_not_known(url_parser):
    parsed = url_parser.parse_filter_url("kranen/kleur/chroom/onbekend/waarde")
    assert parsed.search_attributes_string == "kleur:Chroom|onbekend:Waarde"


def test_empty_segments_are_ignored(url_parser):
    parsed = url_parser.parse_filter_url("/kranen//regendouche/kleur/chroom/")
    assert parsed.category_path == "kranen/regendouche"
    assert parsed.original_path == "/kranen//regendouche/kleur/chroom/"


def test_attribute_match_is_case_insensitive(url_parser):
    parsed = url_parser.parse_filter_url("Kranen/Diameter-Regendouche/30-cm")
    assert parsed.category_path == "Kranen"
    assert parsed.attributes == (TweakwiseAttribute(attribute="diameter regendouche", value="30 cm"),)


def test_attribute_at_first_segment_gives_empty_category(url_parser):
    parsed = url_parser.parse_filter_url("kleur/chroom")
    assert parsed.category_path == ""
    assert parsed.search_attributes_string == "kleur:Chroom"


def test_empty_path(url_parser):
    parsed = url_parser.parse_filter_url("")
    assert parsed == ParsedFilterUrl(original_path="", category_path="")


def test_custom_attribute_keys():
    url_parser = FilterUrlParser(known_attributes=["Finish"])
    parsed = url_parser.parse_filter_url("kranen/finish/mat-zwart")
    assert parsed.search_attributes_string == "finish:Mat zwart"


def test_search_attributes_follow_attributes():
    parsed = ParsedFilterUrl(
        original_path="x",
        category_path="x",
        attributes=(TweakwiseAttribute("merk", "Grohe"), TweakwiseAttribute("vorm", "Rond")),
    )
    assert parsed.search_attributes_string == "merk:Grohe|vorm:Rond"
    assert parsed.to_dict()["search_attributes"] == "merk:Grohe|vorm:Rond"


@pytest.mark.parametrize("raw, expected", [
    ("chroom", "Chroom"),
    ("30-cm", "30 cm"),
    ("Mat-zwart", "Mat zwart"),
    ("ëxtra", "ëxtra"),
    ("", ""),
])
def test_format_value(raw, expected):
    assert format_value(raw) == expected


def test_format_attribute():
    assert format_attribute("Diameter-Regendouche") == "diameter regendouche"
