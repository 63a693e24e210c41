#!/usr/bin/env python3
"""
Schema registry for the three bulk job types.

Each schema lists its required columns, all known columns in display order,
the row-key column (rows without it are skipped) and the soft-required
column (rows without it are kept with a warning).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union


class UnknownJobTypeError(ValueError):
    """Raised when a job-type tag does not name a known schema."""


class JobType(str, Enum):
    """Bulk job-type discriminator."""
    CATEGORY = 'category'
    FILTER = 'filter'
    CMS = 'cms'

    @classmethod
    def coerce(cls, value: Union['JobType', str]) -> 'JobType':
        """Accept a JobType or a tag string (case-insensitive, trimmed)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownJobTypeError(
                f"Unknown job type '{value}' (expected one of: "
                f"{', '.join(t.value for t in cls)})"
            ) from None


@dataclass(frozen=True)
class BulkSchema:
    """Immutable column layout for one job type."""
    job_type: JobType
    required_columns: Tuple[str, ...]
    all_columns: Tuple[str, ...]
    row_key: str
    soft_required: str


class SchemaRegistry:
    """Lookup of the fixed bulk job schemas."""

    SCHEMAS: Dict[JobType, BulkSchema] = {
        JobType.CATEGORY: BulkSchema(
            job_type=JobType.CATEGORY,
            required_columns=('name', 'keywords'),
            all_columns=('name', 'keywords', 'context', 'category_id'),
            row_key='name',
            soft_required='keywords',
        ),
        JobType.FILTER: BulkSchema(
            job_type=JobType.FILTER,
            required_columns=('url_path', 'category_id', 'keywords'),
            all_columns=('url_path', 'category_id', 'parent_category_name', 'keywords', 'tweakwise_template'),
            row_key='url_path',
            soft_required='category_id',
        ),
        JobType.CMS: BulkSchema(
            job_type=JobType.CMS,
            required_columns=('identifier', 'content_heading', 'keywords'),
            all_columns=('identifier', 'content_heading', 'keywords', 'context'),
            row_key='identifier',
            soft_required='content_heading',
        ),
    }

    @classmethod
    def get(cls, job_type: Union[JobType, str]) -> BulkSchema:
        return cls.SCHEMAS[JobType.coerce(job_type)]

    @classmethod
    def required_columns(cls, job_type: Union[JobType, str]) -> Tuple[str, ...]:
        return cls.get(job_type).required_columns

    @classmethod
    def all_columns(cls, job_type: Union[JobType, str]) -> Tuple[str, ...]:
        return cls.get(job_type).all_columns
