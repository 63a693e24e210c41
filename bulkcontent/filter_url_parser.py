#!/usr/bin/env python3
"""
Filter URL parser for Tweakwise search attributes.

Splits a slash-delimited filter page path into the category path and an
ordered list of attribute/value pairs. The attribute section starts at the
first segment that names a known attribute and is read in pairs:

    kranen/regendouche/kleur/chroom
    -> category_path "kranen/regendouche", kleur:Chroom

    tegels/diameter-regendouche/30-cm
    -> category_path "tegels", "diameter regendouche:30 cm"
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Tuple

from .dictionary_loader import DictionaryLoader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TweakwiseAttribute:
    """A single attribute/value pair in display form."""
    attribute: str
    value: str

    def render(self) -> str:
        return f"{self.attribute}:{self.value}"


@dataclass(frozen=True)
class ParsedFilterUrl:
    """Structured result of parsing a filter page path."""
    original_path: str
    category_path: str
    attributes: Tuple[TweakwiseAttribute, ...] = ()

    @property
    def search_attributes_string(self) -> str:
        """Attributes joined as 'attr:Value|attr:Value' in encounter order."""
        return '|'.join(attr.render() for attr in self.attributes)

    def to_dict(self) -> dict:
        return {
            "original_path": self.original_path,
            "category_path": self.category_path,
            "attributes": [
                {"attribute": a.attribute, "value": a.value} for a in self.attributes
            ],
            "search_attributes": self.search_attributes_string,
        }


def format_attribute(raw: str) -> str:
    """Lowercase and replace dashes with spaces ("Diameter-Regendouche" -> "diameter regendouche")."""
    return raw.lower().replace('-', ' ')


def format_value(raw: str) -> str:
    """Replace dashes with spaces and capitalize a leading lowercase letter ("30-cm" -> "30 cm")."""
    formatted = raw.replace('-', ' ')
    if formatted and 'a' <= formatted[0] <= 'z':
        return formatted[0].upper() + formatted[1:]
    return formatted


class FilterUrlParser:
    """Parser that separates category segments from attribute/value pairs."""

    def __init__(self, known_attributes: Optional[Iterable[str]] = None):
        """
        Initialize parser with the known attribute keys.

        Args:
            known_attributes: Optional override; defaults to the packaged
                              'known_attributes' dictionary section.
        """
        if known_attributes is None:
            known_attributes = DictionaryLoader.get_section('known_attributes')
            if known_attributes is None:
                logger.warning("No known_attributes dictionary section; every path is a category path")
                known_attributes = []
        self.known_attributes: FrozenSet[str] = frozenset(a.lower() for a in known_attributes)

    def parse_filter_url(self, path: str) -> ParsedFilterUrl:
        """
        Parse a filter page path.

        Args:
            path: Slash-delimited URL path; empty segments are ignored

        Returns:
            ParsedFilterUrl with category path and attribute pairs
        """
        segments = [segment for segment in path.split('/') if segment]

        boundary = self._find_attribute_start(segments)
        if boundary is None or boundary >= len(segments) - 1:
            return ParsedFilterUrl(original_path=path, category_path='/'.join(segments))

        attribute_segments = segments[boundary:]
        attributes: List[TweakwiseAttribute] = []

        # Consecutive pairs; a trailing unpaired segment is dropped
        for i in range(0, len(attribute_segments) - 1, 2):
            attributes.append(TweakwiseAttribute(
                attribute=format_attribute(attribute_segments[i]),
                value=format_value(attribute_segments[i + 1]),
            ))

        logger.debug("Parsed %r: boundary at segment %s, %s attribute(s)", path, boundary, len(attributes))
        return ParsedFilterUrl(
            original_path=path,
            category_path='/'.join(segments[:boundary]),
            attributes=tuple(attributes),
        )

    def _find_attribute_start(self, segments: List[str]) -> Optional[int]:
        """Index of the first segment naming a known attribute, or None."""
        for idx, segment in enumerate(segments):
            if segment.lower() in self.known_attributes:
                return idx
        return None
