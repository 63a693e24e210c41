#!/usr/bin/env python3
"""
Dictionary loader utility for centralized dictionary loading and caching.

Provides a single point of access for the packaged lookup dictionaries
(known filter attributes, Tweakwise templates) with error handling, caching
to avoid redundant file reads, and JSON Schema validation.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from jsonschema import Draft7Validator

logger = logging.getLogger(__name__)

TWEAKWISE_DICTIONARY = "tweakwise.json"


class DictionaryLoader:
    """Centralized dictionary loader with caching support."""

    # Cache for loaded dictionaries to avoid redundant file reads
    _cache: Dict[str, Any] = {}

    @staticmethod
    def get_dictionary_path(dictionary_name: str = TWEAKWISE_DICTIONARY) -> Path:
        """
        Get the absolute path to a dictionary file.

        Args:
            dictionary_name: Name of the dictionary file

        Returns:
            Absolute path to the dictionary file
        """
        return Path(__file__).resolve().parent / "dictionaries" / dictionary_name

    @classmethod
    def load_dictionary(
        cls,
        dictionary_name: str = TWEAKWISE_DICTIONARY,
        use_cache: bool = True
    ) -> Optional[Any]:
        """
        Load a dictionary from the dictionaries folder.

        Args:
            dictionary_name: Name of the dictionary file to load
            use_cache: Whether to use cached version if available

        Returns:
            Dictionary contents, or None if loading fails
        """
        if use_cache and dictionary_name in cls._cache:
            return cls._cache[dictionary_name]

        dictionary_path = cls.get_dictionary_path(dictionary_name)

        try:
            with open(dictionary_path, 'r', encoding='utf-8') as f:
                dictionary = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError, OSError) as exc:
            logger.warning("Could not load dictionary %s: %s", dictionary_path, exc)
            return None

        if use_cache:
            cls._cache[dictionary_name] = dictionary

        return dictionary

    @classmethod
    def get_section(
        cls,
        section_name: str,
        dictionary_name: str = TWEAKWISE_DICTIONARY,
        use_cache: bool = True
    ) -> Any:
        """
        Load a specific section from a dictionary.

        Args:
            section_name: Name of the section to retrieve (e.g., 'templates')
            dictionary_name: Name of the dictionary file
            use_cache: Whether to use cached version if available

        Returns:
            The requested section, or None if not found
        """
        dictionary = cls.load_dictionary(dictionary_name, use_cache)
        if not isinstance(dictionary, dict):
            return None

        return dictionary.get(section_name)

    @classmethod
    def clear_cache(cls, dictionary_name: Optional[str] = None) -> None:
        """
        Clear the dictionary cache.

        Args:
            dictionary_name: Specific dictionary to clear, or None to clear all
        """
        if dictionary_name:
            cls._cache.pop(dictionary_name, None)
        else:
            cls._cache.clear()

    @classmethod
    def preload_all(cls) -> None:
        """Preload every packaged dictionary into the cache."""
        cls.load_dictionary(TWEAKWISE_DICTIONARY, use_cache=True)

    @classmethod
    def validate(
        cls,
        dictionary_name: str = TWEAKWISE_DICTIONARY,
        schema_name: Optional[str] = None,
    ) -> List[str]:
        """
        Validate a dictionary against its JSON Schema.

        The schema defaults to '<name>.schema.json' next to the dictionary.

        Returns:
            Human-readable error messages (empty when valid)
        """
        label = dictionary_name.rsplit('.', 1)[0]
        schema_name = schema_name or f"{label}.schema.json"

        data = cls.load_dictionary(dictionary_name, use_cache=False)
        if data is None:
            return [f"{label}: dictionary is missing or unreadable"]

        schema = cls.load_dictionary(schema_name, use_cache=False)
        if schema is None:
            return [f"{label}: schema {schema_name} is missing or unreadable"]

        validator = Draft7Validator(schema)
        errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])

        messages = []
        for error in errors:
            location = " > ".join(str(p) for p in error.absolute_path) or "root"
            messages.append(f"{label}: {location}: {error.message}")
        return messages
