#!/usr/bin/env python3
"""
Shopify Export Validation
Re-reads a generated CSV and checks Shopify import requirements:
1. Column schema
2. Product Categories (Standard Taxonomy)
3. Option Name Consistency
4. Option Name/Value Pairing
5. Required Fields
6. SKUs and Image Positions
"""
import sys
from typing import List, Tuple

import pandas as pd

from config import VALIDATION_RULES
from src.shopify_csv import ShopifyCSVGenerator


def load_export(csv_file) -> pd.DataFrame:
    """Read an exported CSV keeping every cell as a string"""
    return pd.read_csv(csv_file, dtype=str, keep_default_na=False, encoding='utf-8')


def check_export(df: pd.DataFrame) -> Tuple[List[str], List[str]]:
    """
    Run all checks on an exported CSV.

    Returns:
        (errors, warnings)
    """
    errors = []
    warnings = []

    # === VALIDATION 1: Column schema ===
    print("\n📋 VALIDATION 1: Column Schema")
    print("-" * 80)

    expected = ShopifyCSVGenerator.SHOPIFY_COLUMNS
    if list(df.columns) != expected:
        missing = [c for c in expected if c not in df.columns]
        extra = [c for c in df.columns if c not in expected]
        print(f"  ✗ Columns differ (missing: {missing}, unexpected: {extra})")
        errors.append("Column schema does not match the Shopify template")
        return errors, warnings
    print(f"  ✓ All {len(expected)} columns present in template order")

    rows = df.to_dict('records')
    handles = {}
    for row in rows:
        handles.setdefault(row['Handle'], []).append(row)

    # === VALIDATION 2: Product Categories ===
    print("\n📋 VALIDATION 2: Product Category Format")
    print("-" * 80)

    separator = VALIDATION_RULES['category_separator']
    categories = set(r['Product Category'] for r in rows if r['Product Category'])
    for cat in sorted(categories):
        if separator in cat:
            print(f"  ✓ {cat}")
        else:
            print(f"  ✗ {cat} - Missing '{separator}' separator (not Shopify Standard Taxonomy)")
            errors.append(f"Invalid category format: {cat}")

    if not categories:
        warnings.append("No product categories assigned")

    # === VALIDATION 3: Option Name Consistency ===
    print("\n📋 VALIDATION 3: Option Name Consistency")
    print("-" * 80)

    option_errors = 0
    for handle, variants in handles.items():
        for opt_num in range(1, 4):
            names = set(v[f'Option{opt_num} Name'] for v in variants)
            names.discard('')
            if len(names) > 1:
                print(f"  ✗ {handle[:60]}: Option{opt_num} Names {names}")
                option_errors += 1
                errors.append(f"Inconsistent option names: {handle}")

    if option_errors == 0:
        print(f"  ✓ All {len(handles)} products have consistent option names")

    # === VALIDATION 4: Option Name/Value Pairing ===
    print("\n📋 VALIDATION 4: Option Name/Value Pairing")
    print("-" * 80)

    value_errors = 0
    for i, row in enumerate(rows, 1):
        for opt_num in range(1, 4):
            name = row[f'Option{opt_num} Name']
            value = row[f'Option{opt_num} Value']
            if value and not name:
                print(f"  ✗ Row {i}: Option{opt_num} has value '{value}' but no name")
                value_errors += 1
                errors.append(f"Row {i}: Empty Option{opt_num} Name with value")

    if value_errors == 0:
        print(f"  ✓ All {len(rows)} rows have valid option name/value pairs")

    # === VALIDATION 5: Required Fields ===
    print("\n📋 VALIDATION 5: Required Fields")
    print("-" * 80)

    missing_count = 0
    for handle, variants in handles.items():
        first = variants[0]
        missing = [f for f in VALIDATION_RULES['required_first_row_fields'] if not first.get(f)]
        if missing:
            print(f"  ✗ {handle[:60]}: first row missing {', '.join(missing)}")
            missing_count += 1
            errors.append(f"{handle}: Missing product fields")
        if len(handle) > VALIDATION_RULES['handle_max_length']:
            errors.append(f"{handle[:60]}: Handle longer than {VALIDATION_RULES['handle_max_length']}")
        if len(first.get('Title', '')) > VALIDATION_RULES['title_max_length']:
            warnings.append(f"{handle}: Title longer than {VALIDATION_RULES['title_max_length']}")

    for i, row in enumerate(rows, 1):
        missing = [f for f in VALIDATION_RULES['required_row_fields'] if not row.get(f)]
        if missing:
            print(f"  ✗ Row {i}: Missing {', '.join(missing)}")
            missing_count += 1
            errors.append(f"Row {i}: Missing required fields")

    if missing_count == 0:
        print(f"  ✓ All rows have required fields")

    # === VALIDATION 6: SKUs and Image Positions ===
    print("\n📋 VALIDATION 6: SKUs and Image Positions")
    print("-" * 80)

    skus = [r['Variant SKU'] for r in rows if r['Variant SKU']]
    duplicates = sorted(set(s for s in skus if skus.count(s) > 1))
    for sku in duplicates:
        print(f"  ✗ Duplicate SKU: {sku}")
        errors.append(f"Duplicate SKU: {sku}")

    positions = [int(r['Image Position']) for r in rows if r['Image Position']]
    if positions != list(range(1, len(positions) + 1)):
        print(f"  ✗ Image positions not sequential: {positions}")
        errors.append("Image positions are not sequential")

    if not duplicates and positions == list(range(1, len(positions) + 1)):
        print(f"  ✓ {len(skus)} unique SKUs, {len(positions)} sequential image positions")

    return errors, warnings


def validate_export(csv_file) -> int:
    """Complete validation for Shopify import readiness"""
    df = load_export(csv_file)

    print("=" * 80)
    print("SHOPIFY EXPORT VALIDATION")
    print("=" * 80)

    errors, warnings = check_export(df)

    # === SUMMARY ===
    print("\n" + "=" * 80)
    print("VALIDATION SUMMARY")
    print("=" * 80)
    print(f"Total products: {df['Handle'].nunique() if 'Handle' in df.columns else 0}")
    print(f"Total rows: {len(df)}")
    print(f"Errors: {len(errors)}")
    print(f"Warnings: {len(warnings)}")

    if errors:
        print("\n❌ VALIDATION FAILED")
        print("\nErrors found:")
        for error in errors:
            print(f"  - {error}")
        return 1

    if warnings:
        print("\n⚠️  WARNINGS (CSV will import but review recommended):")
        for warning in warnings:
            print(f"  - {warning}")

    print("\n✅ CSV IS READY FOR SHOPIFY IMPORT")
    return 0


if __name__ == '__main__':
    csv_file = sys.argv[1] if len(sys.argv) > 1 else 'data/output/custom-product_products_export.csv'
    sys.exit(validate_export(csv_file))
