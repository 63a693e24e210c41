#!/usr/bin/env python3
"""
Typed rows produced by the row validator.

A TypedRow is one of CategoryRow, FilterRow or CmsRow. Each variant carries
a class-level job_type tag; consumers dispatch on the variant with
isinstance and raise on anything else.
"""

import json
from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Union

from .schemas import JobType


class RowMixin:
    """Shared accessors for the row variants; key_column names the row key."""
    key_column: ClassVar[str]

    @property
    def key(self) -> str:
        return getattr(self, self.key_column)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CategoryRow(RowMixin):
    """Category page row."""
    job_type: ClassVar[JobType] = JobType.CATEGORY
    key_column: ClassVar[str] = 'name'

    name: str
    keywords: str
    context: Optional[str] = None
    category_id: Optional[str] = None


@dataclass(frozen=True)
class FilterRow(RowMixin):
    """Filter (attribute landing) page row."""
    job_type: ClassVar[JobType] = JobType.FILTER
    key_column: ClassVar[str] = 'url_path'

    url_path: str
    category_id: str
    keywords: str
    parent_category_name: Optional[str] = None
    tweakwise_template: Optional[str] = None


@dataclass(frozen=True)
class CmsRow(RowMixin):
    """CMS page row."""
    job_type: ClassVar[JobType] = JobType.CMS
    key_column: ClassVar[str] = 'identifier'

    identifier: str
    content_heading: str
    keywords: str
    context: Optional[str] = None


TypedRow = Union[CategoryRow, FilterRow, CmsRow]


def _optional(values: Mapping[str, str], column: str) -> Optional[str]:
    return values.get(column) or None


def build_row(job_type: JobType, values: Mapping[str, str]) -> TypedRow:
    """
    Construct the typed row for a job type from header-aligned values.

    Non-optional fields default to ''. Optional fields that are missing or
    empty become None.
    """
    if job_type is JobType.CATEGORY:
        return CategoryRow(
            name=values.get('name', ''),
            keywords=values.get('keywords', ''),
            context=_optional(values, 'context'),
            category_id=_optional(values, 'category_id'),
        )
    if job_type is JobType.FILTER:
        return FilterRow(
            url_path=values.get('url_path', ''),
            category_id=values.get('category_id', ''),
            keywords=values.get('keywords', ''),
            parent_category_name=_optional(values, 'parent_category_name'),
            tweakwise_template=_optional(values, 'tweakwise_template'),
        )
    if job_type is JobType.CMS:
        return CmsRow(
            identifier=values.get('identifier', ''),
            content_heading=values.get('content_heading', ''),
            keywords=values.get('keywords', ''),
            context=_optional(values, 'context'),
        )
    raise TypeError(f"Unhandled job type: {job_type!r}")


@dataclass
class ParseOutcome:
    """Result of validating one CSV document."""
    job_type: JobType
    accepted: bool
    rows: List[TypedRow] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    # Original record number of each entry in rows, and every record that drew a warning
    row_numbers: List[int] = field(default_factory=list)
    warned_rows: List[int] = field(default_factory=list)

    def has_warning(self, index: int) -> bool:
        """Whether rows[index] drew a warning."""
        return self.row_numbers[index] in self.warned_rows

    def to_json(self) -> str:
        """Convert outcome to JSON format."""
        return json.dumps({
            "job_type": self.job_type.value,
            "accepted": self.accepted,
            "rows": [row.to_dict() for row in self.rows],
            "errors": self.errors,
            "warnings": self.warnings,
        }, ensure_ascii=False)
