#!/usr/bin/env python3
"""
Filter page export composition.

Combines a parsed filter URL, its resolved Tweakwise template and the
caller's page texts into the flat record consumed by the Magento import.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from .filter_url_parser import FilterUrlParser
from .template_resolver import TweakwiseTemplateResolver

DEFAULT_STORE_IDS = '1,3'  # NL + Zeewolde
DEFAULT_ACTIVE = '1'
FILTER_PAGE_TYPE = 'filter API 2026'
HIDE_SELECTED_FILTER_GROUP = '1'


@dataclass(frozen=True)
class FilterPageExportRecord:
    """One filter page line of the export."""
    store_ids: str
    active: str
    url_path: str
    category_id: str
    type: str
    search_attributes: str
    hide_selected_filter_group: str
    tweakwise_template: Optional[str]
    name: str
    meta_title: str
    meta_description: str
    description: str

    def to_dict(self) -> Dict[str, str]:
        """Ordered mapping for serialization; a missing template becomes ''."""
        return {
            "store_ids": self.store_ids,
            "active": self.active,
            "url_path": self.url_path,
            "category_id": self.category_id,
            "type": self.type,
            "search_attributes": self.search_attributes,
            "hide_selected_filter_group": self.hide_selected_filter_group,
            "tweakwise_template": self.tweakwise_template or '',
            "name": self.name,
            "meta_title": self.meta_title,
            "meta_description": self.meta_description,
            "description": self.description,
        }


class FilterExportComposer:
    """Build FilterPageExportRecord values from URL paths plus page texts."""

    def __init__(
        self,
        url_parser: Optional[FilterUrlParser] = None,
        template_resolver: Optional[TweakwiseTemplateResolver] = None,
    ):
        self.url_parser = url_parser or FilterUrlParser()
        self.template_resolver = template_resolver or TweakwiseTemplateResolver()

    def compose(
        self,
        url_path: str,
        category_id: str,
        name: str,
        meta_title: str,
        meta_description: str,
        description: str,
        tweakwise_template: Optional[str] = None,
    ) -> FilterPageExportRecord:
        """
        Compose the export record for one filter page.

        Args:
            url_path: Filter page path, e.g. "kranen/regendouche/kleur/chroom"
            category_id: Magento category id
            name: Page name
            meta_title: Meta title text
            meta_description: Meta description text
            description: Page body text
            tweakwise_template: Explicit template; wins over the resolved one when non-empty

        Returns:
            FilterPageExportRecord
        """
        parsed = self.url_parser.parse_filter_url(url_path)
        template = tweakwise_template or self.template_resolver.resolve(parsed.category_path)

        return FilterPageExportRecord(
            store_ids=DEFAULT_STORE_IDS,
            active=DEFAULT_ACTIVE,
            url_path=url_path,
            category_id=category_id,
            type=FILTER_PAGE_TYPE,
            search_attributes=parsed.search_attributes_string,
            hide_selected_filter_group=HIDE_SELECTED_FILTER_GROUP,
            tweakwise_template=template,
            name=name,
            meta_title=meta_title,
            meta_description=meta_description,
            description=description,
        )
