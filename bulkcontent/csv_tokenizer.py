#!/usr/bin/env python3
"""
CSV tokenizer module for bulk content uploads.
Splits raw CSV text into records and fields. Fields may be wrapped in double
quotes, in which case commas are literal and a doubled quote decodes to a
single quote character. Also provides the reverse encoding used by exports.
"""

import logging
import re
from typing import Dict, List, Mapping, Sequence

logger = logging.getLogger(__name__)

RawRecord = List[str]


class CsvTokenizer:
    """Tokenizer for comma-separated text with double-quote escaping."""

    DELIMITER = ','
    QUOTE = '"'

    # Bare and carriage-return-prefixed line terminators
    LINE_SPLIT = re.compile(r'\r?\n')

    def tokenize(self, text: str) -> List[RawRecord]:
        """
        Tokenize CSV text into records of trimmed field values.

        Blank and whitespace-only lines are dropped. An unterminated quote
        stays open until the end of its line.

        Args:
            text: Raw CSV document

        Returns:
            List of records, each a list of field strings
        """
        records: List[RawRecord] = []
        for line in self.LINE_SPLIT.split(text or ''):
            if not line.strip():
                continue
            records.append(self._split_line(line))

        logger.debug("Tokenized %s records", len(records))
        return records

    def _split_line(self, line: str) -> RawRecord:
        """Split one physical line into fields, honoring quotes."""
        fields: RawRecord = []
        current: List[str] = []
        in_quotes = False

        i = 0
        while i < len(line):
            char = line[i]

            if char == self.QUOTE:
                if in_quotes and i + 1 < len(line) and line[i + 1] == self.QUOTE:
                    current.append(self.QUOTE)
                    i += 1  # skip escaped quote
                else:
                    in_quotes = not in_quotes
            elif char == self.DELIMITER and not in_quotes:
                fields.append(''.join(current).strip())
                current = []
            else:
                current.append(char)
            i += 1

        fields.append(''.join(current).strip())
        return fields

    def encode_field(self, value: str) -> str:
        """
        Encode a single value as a CSV field.

        Values containing a comma, quote or line break are wrapped in quotes
        with embedded quotes doubled; everything else passes through.
        """
        value = '' if value is None else str(value)
        if any(c in value for c in (self.DELIMITER, self.QUOTE, '\n', '\r')):
            return self.QUOTE + value.replace(self.QUOTE, self.QUOTE * 2) + self.QUOTE
        return value

    def encode_record(self, values: Sequence[str]) -> str:
        """Encode a sequence of values as one CSV line."""
        return self.DELIMITER.join(self.encode_field(v) for v in values)

    def to_csv(self, headers: Sequence[str], rows: Sequence[Mapping[str, str]]) -> str:
        """
        Render a header line plus one line per mapping.

        Args:
            headers: Ordered column names
            rows: Mappings keyed by column name; missing keys become empty

        Returns:
            CSV document joined with '\\n'
        """
        lines = [self.encode_record(headers)]
        for row in rows:
            lines.append(self.encode_record([self._cell(row, h) for h in headers]))
        return '\n'.join(lines)

    @staticmethod
    def _cell(row: Mapping[str, str], header: str) -> str:
        value = row.get(header)
        return '' if value is None else str(value)


def align_record(header: Sequence[str], record: RawRecord) -> Dict[str, str]:
    """
    Map header names to field values by position.

    Missing trailing fields map to an empty string. When a header name
    repeats, the last occurrence wins.
    """
    mapped: Dict[str, str] = {}
    for idx, name in enumerate(header):
        mapped[name] = record[idx] if idx < len(record) else ''
    return mapped
