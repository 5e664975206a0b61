"""
Module 2: Product Builder
Turns each menuUI entry into one Shopify product with its variants.
"""
import logging
import re
from typing import List, Optional

from src.models import MenuUiDocument, MenuUiEntry, OptionsConfig, Product, ProductVariant
from config import SHOPIFY_DEFAULTS

logger = logging.getLogger(__name__)


class ProductBuilder:
    """
    Build products from menuUI entries.

    One entry becomes one product. Variants come from the entry's
    variant sources (baseMaps of the first option for material entries,
    the options themselves for everything else).

    Example:
    - "variant change" (material, baseMaps Amber/Bitmore)
      → handle "custom-product-variant-change", 2 variants named "Variant Change"
    - "Handle Change" (model, options "handle 1"/"handle 2")
      → handle "custom-product-handle-change", 2 variants named "Handle Change"
    """

    def __init__(self, options: Optional[OptionsConfig] = None):
        self.options = options or OptionsConfig()

    def build_products(self, document: MenuUiDocument) -> List[Product]:
        """
        Build one product per entry, in source order.

        Args:
            document: Validated menuUI document

        Returns:
            List of Product objects, each with at least one variant
        """
        products = []
        for entry in document.menu_ui:
            product = self.build_product(entry)
            products.append(product)
            logger.debug(f"  {product}")
        return products

    def build_product(self, entry: MenuUiEntry) -> Product:
        product = Product(
            handle=self.create_handle(entry.label),
            title=self.product_title(entry),
            label=entry.label,
            type=entry.type,
        )
        product.variants = self.extract_variants(entry)
        return product

    def extract_variants(self, entry: MenuUiEntry) -> List[ProductVariant]:
        """
        Extract variants for an entry.

        Entries without any variant source get the single
        "Title / Default Title" variant Shopify expects.
        """
        option_name = self.create_option_name(entry.label)
        variants = [
            ProductVariant(
                option_name=option_name,
                option_value=source.label,
                icon=source.icon,
                id=source.id,
            )
            for source in entry.variant_sources()
        ]

        if not variants:
            logger.debug(f"  No variants for '{entry.label}', using default variant")
            variants.append(ProductVariant(
                option_name=SHOPIFY_DEFAULTS["default_option_name"],
                option_value=SHOPIFY_DEFAULTS["default_option_value"],
            ))

        return variants

    def create_handle(self, label: str) -> str:
        """
        Convert an entry label to a Shopify handle.

        Examples (base handle "custom-product"):
        "Variant Change!" → "custom-product-variant-change"
        "  Leg -- Type  " → "custom-product-leg-type"
        "   " → "custom-product"
        """
        handle = label.lower().strip()

        # Remove everything except letters, digits, whitespace and hyphens
        handle = re.sub(r'[^a-z0-9\s-]', '', handle)

        # Replace spaces with hyphens
        handle = re.sub(r'\s+', '-', handle)

        # Collapse multiple hyphens
        handle = re.sub(r'-+', '-', handle)

        # Remove leading/trailing hyphens
        handle = handle.strip('-')

        prefix = self.options.handle
        if prefix:
            handle = f"{prefix}-{handle}" if handle else prefix

        return handle or SHOPIFY_DEFAULTS["fallback_handle"]

    def create_option_name(self, label: str) -> str:
        """
        Convert an entry label to a Title Case option name.

        "handle change" → "Handle Change"
        "variant  change!" → "Variant Change"
        """
        name = label.lower().strip()
        name = re.sub(r'[^a-z0-9\s]', '', name)
        name = re.sub(r'\s+', ' ', name)
        return re.sub(r'\b\w', lambda m: m.group(0).upper(), name)

    def product_title(self, entry: MenuUiEntry) -> str:
        """
        Title for an entry's product.

        The primary product carries the base title unchanged; every other
        entry is framed as "<base title> - <label>".
        """
        primary = self.options.primary_product
        title = self.options.title

        if primary and entry.label == primary:
            result = title or primary
            logger.debug(f"Using primary product title for '{entry.label}': {result}")
            return result

        result = f"{title} - {entry.label}" if title else entry.label
        logger.debug(f"Using non-primary product title for '{entry.label}': {result}")
        return result
