#!/usr/bin/env python3
"""Resolve Tweakwise template ids from the first segment of a category path."""

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from .dictionary_loader import DictionaryLoader

logger = logging.getLogger(__name__)


class TweakwiseTemplateResolver:
    """Map category prefixes (e.g. 'kranen') to template ids (e.g. 'TEMPLATE_KRANEN')."""

    def __init__(self, templates: Optional[Mapping[str, str]] = None):
        if templates is None:
            templates = DictionaryLoader.get_section('templates')
            if templates is None:
                logger.warning("No templates dictionary section; no template will resolve")
                templates = {}
        self.templates: Mapping[str, str] = MappingProxyType(
            {prefix.lower(): template for prefix, template in templates.items()}
        )

    def resolve(self, category_path: str) -> Optional[str]:
        """
        Look up the template for a category path.

        Args:
            category_path: e.g. "tegels/wandtegels"

        Returns:
            Template id, or None when the prefix is unknown
        """
        first_segment = (category_path or '').split('/')[0].lower()
        return self.templates.get(first_segment)
