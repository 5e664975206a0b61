"""
menuUI → Shopify CSV conversion entry points.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from src.models import MenuUiDocument, OptionsConfig
from src.parser import MenuUiParser
from src.products import ProductBuilder
from src.shopify_csv import ShopifyCSVGenerator
from config import DEFAULT_OPTIONS, PREVIEW_LINES, SHOPIFY_DEFAULTS

logger = logging.getLogger(__name__)

DocumentInput = Union[MenuUiDocument, Dict[str, Any]]
OptionsInput = Union[OptionsConfig, Dict[str, Any], None]


def _as_document(doc: DocumentInput) -> MenuUiDocument:
    if isinstance(doc, MenuUiDocument):
        return doc
    return MenuUiParser().parse_data(doc)


def _as_options(cfg: OptionsInput) -> OptionsConfig:
    if isinstance(cfg, OptionsConfig):
        return cfg
    return OptionsConfig.from_dict(cfg)


def convert(doc: DocumentInput, cfg: OptionsInput = None) -> str:
    """
    Convert a menuUI document to Shopify CSV text.

    Args:
        doc: Typed document, or decoded JSON (validated before any row is built)
        cfg: OptionsConfig or a dict of options (camelCase or snake_case keys)

    Returns:
        CSV text: header plus one row per variant

    Raises:
        SchemaViolationError: If decoded JSON does not follow the menuUI structure
    """
    document = _as_document(doc)
    options = _as_options(cfg)

    products = ProductBuilder(options).build_products(document)
    return ShopifyCSVGenerator(options).generate_shopify_csv(products)


def convert_json_to_csv(data: DocumentInput, cfg: OptionsInput = None) -> str:
    """Convert with the options form defaults filled in for anything cfg leaves empty"""
    options = OptionsConfig.from_dict(DEFAULT_OPTIONS).merged_with(_as_options(cfg))
    return convert(data, options)


def available_products(doc: DocumentInput) -> List[str]:
    """Entry labels, in source order; the valid choices for primary_product"""
    return _as_document(doc).labels()


def export_filename(cfg: OptionsInput = None) -> str:
    handle = _as_options(cfg).handle or SHOPIFY_DEFAULTS['fallback_handle']
    return f"{handle}_products_export.csv"


@dataclass
class CsvPreview:
    """Leading lines of a CSV plus counts for the rest"""
    text: str
    has_more: bool
    remaining_count: int
    total_rows: int

    def summary(self) -> str:
        if not self.has_more:
            return f"Total rows: {self.total_rows}"
        noun = 'line' if self.remaining_count == 1 else 'lines'
        return f"... and {self.remaining_count} more {noun}\nTotal rows: {self.total_rows}"


def preview_csv(csv_text: str, lines: Optional[int] = None) -> CsvPreview:
    """
    First `lines` lines of csv_text (default PREVIEW_LINES).

    total_rows counts data rows, i.e. every line after the header.
    """
    if lines is None:
        lines = PREVIEW_LINES
    all_lines = csv_text.split('\n')
    remaining = max(len(all_lines) - lines, 0)
    return CsvPreview(
        text='\n'.join(all_lines[:lines]),
        has_more=remaining > 0,
        remaining_count=remaining,
        total_rows=len(all_lines) - 1,
    )
