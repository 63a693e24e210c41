"""
Bulk content pipeline package.

This package contains the CSV ingestion and filter URL modules:
- csv_tokenizer: Record/field splitting with double-quote escaping
- schemas: Column layouts for the category, filter and cms job types
- rows: Typed rows and the parse outcome
- row_validator: Schema-aware validation with errors and warnings
- template_generator: Downloadable CSV templates
- filter_url_parser: Category path and attribute/value pairs from filter paths
- template_resolver: Tweakwise template lookup by category prefix
- filter_export: Filter page export records
- export_writer: CSV/JSON/xlsx export of completed bulk items
- dictionary_loader: Packaged lookup dictionaries with schema validation
"""

# Explicit imports make the public API clear and prevent namespace pollution
from .csv_tokenizer import CsvTokenizer
from .schemas import BulkSchema, JobType, SchemaRegistry, UnknownJobTypeError
from .rows import CategoryRow, CmsRow, FilterRow, ParseOutcome, TypedRow
from .row_validator import RowValidator, parse_category_csv, parse_cms_csv, parse_filter_csv
from .template_generator import TemplateGenerator
from .filter_url_parser import FilterUrlParser, ParsedFilterUrl, TweakwiseAttribute
from .template_resolver import TweakwiseTemplateResolver
from .filter_export import FilterExportComposer, FilterPageExportRecord
from .export_writer import BulkItem, ExportWriter, ItemStatus
from .dictionary_loader import DictionaryLoader

__all__ = [
    'CsvTokenizer',
    'BulkSchema',
    'JobType',
    'SchemaRegistry',
    'UnknownJobTypeError',
    'CategoryRow',
    'CmsRow',
    'FilterRow',
    'ParseOutcome',
    'TypedRow',
    'RowValidator',
    'parse_category_csv',
    'parse_cms_csv',
    'parse_filter_csv',
    'TemplateGenerator',
    'FilterUrlParser',
    'ParsedFilterUrl',
    'TweakwiseAttribute',
    'TweakwiseTemplateResolver',
    'FilterExportComposer',
    'FilterPageExportRecord',
    'BulkItem',
    'ExportWriter',
    'ItemStatus',
    'DictionaryLoader',
]
