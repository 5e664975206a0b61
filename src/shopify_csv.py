"""
Module 3: Shopify CSV Generator
Generate the Shopify product import CSV from built products.
"""
import logging
import csv
import pandas as pd
from typing import List, Dict, Optional

from src.models import OptionsConfig, Product, ProductVariant
from config import SHOPIFY_DEFAULTS

logger = logging.getLogger(__name__)


class ShopifyCSVGenerator:
    """
    Generate Shopify-compliant CSV from products.

    Layout:
    - One header row, then one row per variant
    - Product-level fields only on a product's first row; later rows
      repeat the Handle alone
    - Image fields only on a product's first row, and only when its first
      variant has an icon; Image Position counts across the whole document
    - Minimal RFC-4180 quoting, "\\n" between rows, no trailing newline
    """

    # Shopify CSV column order (matching the import template)
    SHOPIFY_COLUMNS = [
        'Handle', 'Title', 'Body (HTML)', 'Vendor', 'Product Category', 'Type', 'Tags', 'Published',
        'Option1 Name', 'Option1 Value', 'Option2 Name', 'Option2 Value', 'Option3 Name', 'Option3 Value',
        'Variant SKU', 'Variant Grams', 'Variant Inventory Tracker', 'Variant Inventory Qty',
        'Variant Inventory Policy', 'Variant Fulfillment Service', 'Variant Price', 'Variant Compare At Price',
        'Variant Requires Shipping', 'Variant Taxable', 'Variant Barcode', 'Image Src', 'Image Position',
        'Image Alt Text', 'Gift Card', 'SEO Title', 'SEO Description', 'Google Shopping / Google Product Category',
        'Google Shopping / Gender', 'Google Shopping / Age Group', 'Google Shopping / MPN',
        'Google Shopping / Condition', 'Google Shopping / Custom Product', 'Variant Image',
        'Variant Weight Unit', 'Variant Tax Code', 'Cost per item', 'Included / United States',
        'Price / United States', 'Compare At Price / United States', 'Included / International',
        'Price / International', 'Compare At Price / International', 'Status'
    ]

    def __init__(self, options: Optional[OptionsConfig] = None):
        self.options = options or OptionsConfig()
        self.images_assigned = 0

    def generate_shopify_csv(self, products: List[Product]) -> str:
        """
        Generate Shopify CSV from products.

        Args:
            products: List of Product objects, each with at least one variant

        Returns:
            CSV string (header included, no trailing newline)
        """
        logger.info("\n" + "=" * 80)
        logger.info("GENERATING SHOPIFY CSV")
        logger.info("=" * 80)

        rows = self.build_rows(products)

        # Create DataFrame with fixed column order
        df = pd.DataFrame(rows, columns=self.SHOPIFY_COLUMNS, dtype=str)

        # Header plus one record per row, joined with "\n"
        records = [self._to_record(df.iloc[:0], header=True)]
        records.extend(self._to_record(df.iloc[i:i + 1]) for i in range(len(df)))
        csv_string = '\n'.join(records)

        logger.info(f"\n✓ CSV generation complete:")
        logger.info(f"  Products:        {len(products)}")
        logger.info(f"  CSV rows:        {len(rows)}")
        logger.info(f"  Images assigned: {self.images_assigned}")

        return csv_string

    @staticmethod
    def _to_record(frame: pd.DataFrame, header: bool = False) -> str:
        """
        Serialize a single CSV record without its terminator.

        The writer only quotes characters found in its line terminator, so
        "\\r\\n" is used to get cells holding either "\\r" or "\\n" quoted;
        the trailing terminator is then dropped.
        """
        record = frame.to_csv(
            index=False,
            header=header,
            lineterminator='\r\n',
            quoting=csv.QUOTE_MINIMAL
        )
        return record[:-2]

    def build_rows(self, products: List[Product]) -> List[Dict[str, str]]:
        """
        Build one row dict per variant.

        Image Position is a local counter threaded through every product,
        so separate calls never share numbering.
        """
        rows = []
        image_position = 1

        for product in products:
            for variant_idx, variant in enumerate(product.variants):
                row, image_position = self._create_variant_row(
                    product, variant, variant_idx, image_position
                )
                rows.append(row)

        self.images_assigned = image_position - 1
        return rows

    def _create_variant_row(
        self,
        product: Product,
        variant: ProductVariant,
        variant_idx: int,
        image_position: int
    ):
        """Create a single CSV row for a variant; returns (row, next image position)"""
        row = {col: '' for col in self.SHOPIFY_COLUMNS}
        is_first = (variant_idx == 0)

        row['Handle'] = product.handle

        # First variant gets full product info
        if is_first:
            row.update(self._product_fields(product))

        # Option fields (single option dimension)
        row['Option1 Name'] = variant.option_name
        row['Option1 Value'] = self._text(variant.option_value)

        # Variant fields
        row['Variant SKU'] = f"{product.handle}-{variant_idx + 1}"
        row['Variant Grams'] = SHOPIFY_DEFAULTS['grams']
        row['Variant Inventory Tracker'] = SHOPIFY_DEFAULTS['inventory_tracker']
        row['Variant Inventory Qty'] = SHOPIFY_DEFAULTS['inventory_qty']
        row['Variant Inventory Policy'] = SHOPIFY_DEFAULTS['inventory_policy']
        row['Variant Fulfillment Service'] = SHOPIFY_DEFAULTS['fulfillment_service']
        row['Variant Price'] = self.options.base_price or SHOPIFY_DEFAULTS['price']
        row['Variant Requires Shipping'] = 'TRUE'
        row['Variant Taxable'] = 'TRUE'

        # Image (first variant with an icon only)
        if is_first and variant.icon:
            row['Image Src'] = SHOPIFY_DEFAULTS['placeholder_image_url']
            row['Image Position'] = str(image_position)
            row['Image Alt Text'] = f"{product.title} - {self._text(variant.option_value)}"
            image_position += 1

        row['Gift Card'] = 'FALSE'

        # Market inclusion
        row['Included / United States'] = 'TRUE'
        row['Included / International'] = 'TRUE'

        row['Status'] = SHOPIFY_DEFAULTS['status']

        return row, image_position

    def _product_fields(self, product: Product) -> Dict[str, str]:
        """Product-level values written on a product's first row"""
        return {
            'Title': product.title,
            'Body (HTML)': SHOPIFY_DEFAULTS['body_html'],
            'Vendor': self.options.vendor or SHOPIFY_DEFAULTS['vendor'],
            'Product Category': self.options.product_category or SHOPIFY_DEFAULTS['product_category'],
            'Type': product.type or '',
            'Tags': self._product_tags(product),
            'Published': 'TRUE',
        }

    def _product_tags(self, product: Product) -> str:
        """Common tags followed by the lower-cased entry label"""
        label_tag = product.label.lower()
        common_tags = self.options.tags
        if common_tags and label_tag:
            return f"{common_tags}, {label_tag}"
        return common_tags or label_tag

    @staticmethod
    def _text(value) -> str:
        return '' if value is None else str(value)
