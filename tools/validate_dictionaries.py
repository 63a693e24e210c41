#!/usr/bin/env python3
"""Validate the packaged lookup dictionaries against JSON Schemas and custom rules."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from bulkcontent.dictionary_loader import DictionaryLoader  # noqa: E402


def check_templates(templates, known_attributes) -> List[str]:
    """Category prefixes must not collide with attribute keys."""
    errors: List[str] = []
    attribute_keys = {str(a).lower() for a in known_attributes or []}
    for prefix in templates or {}:
        if prefix.lower() in attribute_keys:
            errors.append(
                f"templates: prefix '{prefix}' is also a known attribute and would never resolve"
            )
    return errors


def main() -> int:
    failures: List[str] = []

    failures.extend(DictionaryLoader.validate())
    failures.extend(check_templates(
        DictionaryLoader.get_section('templates', use_cache=False),
        DictionaryLoader.get_section('known_attributes', use_cache=False),
    ))

    if failures:
        print("Dictionary validation failed:")
        for failure in failures:
            print(f" - {failure}")
        return 1

    print("All dictionaries validated successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
