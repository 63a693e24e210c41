#!/usr/bin/env python3
"""
Command line entry point for the bulk content pipeline.

Commands:
    validate CSV_FILE --type T   Validate a bulk upload and report diagnostics
    template --type T            Print or write the CSV template for a job type
    parse-url PATH [PATH ...]    Show the Tweakwise decomposition of filter paths
    validate-dictionaries        Check the packaged dictionaries against their schemas
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .dictionary_loader import DictionaryLoader
from .excel_writer import ExcelSheetData, write_excel_workbook
from .filter_url_parser import FilterUrlParser
from .row_validator import RowValidator
from .rows import ParseOutcome
from .schemas import JobType, SchemaRegistry
from .template_generator import TemplateGenerator
from .template_resolver import TweakwiseTemplateResolver

logger = logging.getLogger(__name__)

JOB_TYPES = [t.value for t in JobType]


def read_text(path: Path) -> str:
    """Read a CSV file as UTF-8, tolerating a byte order mark."""
    return path.read_text(encoding='utf-8-sig')


def build_report_sheets(outcome: ParseOutcome) -> List[ExcelSheetData]:
    """Rows sheet (rows with a warning highlighted) plus a diagnostics sheet."""
    headers = list(SchemaRegistry.all_columns(outcome.job_type))
    rows_sheet = ExcelSheetData(
        name="Rows",
        headers=headers,
        rows=[[row.to_dict().get(h) or '' for h in headers] for row in outcome.rows],
        highlighted_rows=[outcome.has_warning(idx) for idx in range(len(outcome.rows))],
    )
    diagnostics = [["error", message] for message in outcome.errors]
    diagnostics += [["warning", message] for message in outcome.warnings]
    diagnostics_sheet = ExcelSheetData(
        name="Diagnostics",
        headers=["severity", "message"],
        rows=diagnostics,
        highlighted_rows=[severity == "error" for severity, _ in diagnostics],
    )
    return [rows_sheet, diagnostics_sheet]


def cmd_validate(args: argparse.Namespace) -> int:
    try:
        text = read_text(args.csv_file)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Could not read {args.csv_file}: {exc}", file=sys.stderr)
        return 2

    outcome = RowValidator().parse(text, args.type)

    if args.json:
        print(outcome.to_json())
    else:
        status = "accepted" if outcome.accepted else "rejected"
        print(f"{args.csv_file}: {status}, {len(outcome.rows)} row(s)")
        for error in outcome.errors:
            print(f"  error: {error}")
        for warning in outcome.warnings:
            print(f"  warning: {warning}")

    if args.report:
        path = write_excel_workbook(args.report, build_report_sheets(outcome))
        logger.info("Wrote validation report to %s", path)

    return 0 if outcome.accepted else 1


def cmd_template(args: argparse.Namespace) -> int:
    generator = TemplateGenerator()
    content = generator.generate_template(args.type)
    if args.output is None:
        print(content)
        return 0

    output_path = Path(args.output) / generator.template_filename(args.type)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding='utf-8')
    print(f"Wrote {output_path}")
    return 0


def cmd_parse_url(args: argparse.Namespace) -> int:
    url_parser = FilterUrlParser()
    resolver = TweakwiseTemplateResolver()
    results = []
    for path in args.paths:
        parsed = url_parser.parse_filter_url(path)
        data = parsed.to_dict()
        data["tweakwise_template"] = resolver.resolve(parsed.category_path)
        results.append(data)
    print(json.dumps(results, indent=2, ensure_ascii=False))
    return 0


def cmd_validate_dictionaries(args: argparse.Namespace) -> int:
    failures = DictionaryLoader.validate()
    if failures:
        print("Dictionary validation failed:")
        for failure in failures:
            print(f" - {failure}")
        return 1

    print("All dictionaries validated successfully.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='bulkcontent',
        description='Validate bulk content CSV uploads and parse filter page URLs',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    validate = subparsers.add_parser('validate', help='Validate a bulk upload CSV')
    validate.add_argument('csv_file', type=Path, help='CSV file to validate')
    validate.add_argument('-t', '--type', required=True, choices=JOB_TYPES, help='Bulk job type')
    validate.add_argument('--report', type=Path, help='Optional path to write an Excel report')
    validate.add_argument('--json', action='store_true', help='Print the outcome as JSON')
    validate.set_defaults(func=cmd_validate)

    template = subparsers.add_parser('template', help='Print or write a CSV template')
    template.add_argument('-t', '--type', required=True, choices=JOB_TYPES, help='Bulk job type')
    template.add_argument('-o', '--output', type=Path, help='Directory to write template_<type>.csv to')
    template.set_defaults(func=cmd_template)

    parse_url = subparsers.add_parser('parse-url', help='Parse filter page URL paths')
    parse_url.add_argument('paths', nargs='+', help='Filter page paths, e.g. kranen/kleur/chroom')
    parse_url.set_defaults(func=cmd_parse_url)

    dictionaries = subparsers.add_parser('validate-dictionaries', help='Validate packaged dictionaries')
    dictionaries.set_defaults(func=cmd_validate_dictionaries)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
