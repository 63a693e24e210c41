#!/usr/bin/env python3
"""
Export of processed bulk items.

Turns completed bulk items (a typed row plus the page texts produced for it
by an external generator) into per-job-type export records and serializes
them as CSV, JSON or an Excel workbook.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .csv_tokenizer import CsvTokenizer
from .excel_writer import sheet_from_records, write_excel_workbook
from .filter_export import DEFAULT_ACTIVE, DEFAULT_STORE_IDS, FilterExportComposer
from .rows import CategoryRow, CmsRow, FilterRow, TypedRow
from .schemas import JobType

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ('csv', 'json', 'xlsx')


class ItemStatus(str, Enum):
    """Execution state of a bulk item, owned by the job runner."""
    PENDING = 'pending'
    PROCESSING = 'processing'
    COMPLETED = 'completed'
    FAILED = 'failed'


@dataclass
class BulkItem:
    """A typed row together with the texts generated for it."""
    row: TypedRow
    status: ItemStatus = ItemStatus.PENDING
    content_main: str = ''
    content_side: str = ''
    meta_title: str = ''
    meta_description: str = ''
    error: Optional[str] = None


class ExportWriter:
    """Build export records for completed items and write them to disk."""

    def __init__(
        self,
        composer: Optional[FilterExportComposer] = None,
        tokenizer: Optional[CsvTokenizer] = None,
    ):
        self.composer = composer or FilterExportComposer()
        self.tokenizer = tokenizer or CsvTokenizer()

    def build_records(self, items: Sequence[BulkItem]) -> List[Dict[str, str]]:
        """Export records for the completed items, in input order."""
        completed = [item for item in items if item.status is ItemStatus.COMPLETED]
        logger.debug("Exporting %s of %s items", len(completed), len(items))
        return [self.build_record(item) for item in completed]

    def build_record(self, item: BulkItem) -> Dict[str, str]:
        row = item.row
        if isinstance(row, CategoryRow):
            return {
                "name": row.name,
                "category_id": row.category_id or '',
                "description_bottom_extra": item.content_main,
                "description_bottom": item.content_side,
                "meta_title": item.meta_title,
                "meta_description": item.meta_description,
            }
        if isinstance(row, FilterRow):
            return self.composer.compose(
                url_path=row.url_path,
                category_id=row.category_id,
                name=row.parent_category_name or '',
                meta_title=item.meta_title,
                meta_description=item.meta_description,
                description=item.content_main,
                tweakwise_template=row.tweakwise_template,
            ).to_dict()
        if isinstance(row, CmsRow):
            return {
                "identifier": row.identifier,
                "store_ids": DEFAULT_STORE_IDS,
                "is_active": DEFAULT_ACTIVE,
                "content_heading": row.content_heading,
                "title": item.meta_title or row.content_heading,
                "meta_title": item.meta_title,
                "meta_description": item.meta_description,
                "content": item.content_main,
            }
        raise TypeError(f"Unsupported row type: {type(row).__name__}")

    def render(self, records: Sequence[Dict[str, str]], export_format: str) -> str:
        """Serialize records as 'csv' or 'json' text."""
        if export_format == 'csv':
            headers = list(records[0].keys()) if records else []
            return self.tokenizer.to_csv(headers, records)
        if export_format == 'json':
            return json.dumps(list(records), indent=2, ensure_ascii=False)
        raise ValueError(f"Unsupported export format '{export_format}' (expected csv or json)")

    @staticmethod
    def export_filename(job_type: JobType | str, export_format: str, timestamp: Optional[int] = None) -> str:
        if timestamp is None:
            timestamp = int(time.time() * 1000)
        return f"export_{JobType.coerce(job_type).value}_{timestamp}.{export_format}"

    def write(
        self,
        items: Sequence[BulkItem],
        job_type: JobType | str,
        export_format: str,
        output_dir: Path | str,
    ) -> Optional[Path]:
        """
        Write the completed items to an export file.

        Returns:
            Path of the written file, or None when nothing was completed
        """
        if export_format not in EXPORT_FORMATS:
            raise ValueError(f"Unsupported export format '{export_format}' (expected one of {EXPORT_FORMATS})")

        records = self.build_records(items)
        if not records:
            logger.info("No completed items to export")
            return None

        output_path = Path(output_dir) / self.export_filename(job_type, export_format)
        if export_format == 'xlsx':
            write_excel_workbook(output_path, [sheet_from_records("Export", records)])
        else:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(self.render(records, export_format), encoding='utf-8')

        logger.info("Exported %s items to %s", len(records), output_path)
        return output_path
