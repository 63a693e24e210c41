#!/usr/bin/env python3
"""
Row validator module for bulk content CSV uploads.

Tokenizes a CSV document, checks the header against the job type's schema
and turns every data record into a typed row. Structural problems (too few
records, missing required columns) reject the whole file; row-level problems
produce warnings only.
"""

import logging
from typing import List, Optional, Union

from .csv_tokenizer import CsvTokenizer, align_record
from .rows import ParseOutcome, build_row
from .schemas import BulkSchema, JobType, SchemaRegistry

logger = logging.getLogger(__name__)

TOO_FEW_RECORDS = 'file must contain a header row and at least one data row'
MISSING_COLUMN = 'Missing required column: {column}'
ROW_KEY_EMPTY = "Row {row}: '{column}' is empty, row skipped"
SOFT_REQUIRED_EMPTY = "Row {row}: '{column}' is empty for \"{key}\""


class RowValidator:
    """Schema-aware validator producing typed rows plus diagnostics."""

    def __init__(self, tokenizer: Optional[CsvTokenizer] = None):
        self.tokenizer = tokenizer or CsvTokenizer()

    def parse(self, text: str, job_type: Union[JobType, str]) -> ParseOutcome:
        """
        Validate a CSV document for a job type.

        Args:
            text: Raw CSV content
            job_type: 'category', 'filter' or 'cms'

        Returns:
            ParseOutcome with rows, structural errors and row warnings
        """
        schema = SchemaRegistry.get(job_type)
        records = self.tokenizer.tokenize(text)

        # Step 1: A header plus at least one data record
        if len(records) < 2:
            logger.debug("Rejected %s CSV: %s record(s)", schema.job_type.value, len(records))
            return ParseOutcome(job_type=schema.job_type, accepted=False, errors=[TOO_FEW_RECORDS])

        # Step 2: Header index and required columns
        header = [name.strip().lower() for name in records[0]]
        errors = [
            MISSING_COLUMN.format(column=column)
            for column in schema.required_columns
            if column not in header
        ]
        if errors:
            logger.debug("Rejected %s CSV: %s", schema.job_type.value, "; ".join(errors))
            return ParseOutcome(job_type=schema.job_type, accepted=False, errors=errors)

        # Step 3: Data records, numbered by their position in the file
        outcome = ParseOutcome(job_type=schema.job_type, accepted=True)
        for row_number, record in enumerate(records[1:], start=2):
            self._process_record(schema, header, record, row_number, outcome)

        logger.debug(
            "Parsed %s CSV: %s rows, %s warnings",
            schema.job_type.value, len(outcome.rows), len(outcome.warnings)
        )
        return outcome

    def _process_record(
        self,
        schema: BulkSchema,
        header: List[str],
        record: List[str],
        row_number: int,
        outcome: ParseOutcome,
    ) -> None:
        """Apply the row-key and soft-required rules to one record."""
        values = align_record(header, record)

        key = values.get(schema.row_key, '')
        if not key:
            outcome.warnings.append(ROW_KEY_EMPTY.format(row=row_number, column=schema.row_key))
            outcome.warned_rows.append(row_number)
            return

        if not values.get(schema.soft_required, ''):
            outcome.warnings.append(
                SOFT_REQUIRED_EMPTY.format(row=row_number, column=schema.soft_required, key=key)
            )
            outcome.warned_rows.append(row_number)

        outcome.rows.append(build_row(schema.job_type, values))
        outcome.row_numbers.append(row_number)


def parse_category_csv(text: str) -> ParseOutcome:
    return RowValidator().parse(text, JobType.CATEGORY)


def parse_filter_csv(text: str) -> ParseOutcome:
    return RowValidator().parse(text, JobType.FILTER)


def parse_cms_csv(text: str) -> ParseOutcome:
    return RowValidator().parse(text, JobType.CMS)
