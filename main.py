"""
menuUI → Shopify CSV Converter - Main Entry Point

Usage:
    python main.py <input_json> [output_csv] [options]

Example:
    python main.py data/input/menu.json --handle desk --title "Standing Desk"
"""
import sys
import argparse
import logging
import logging.config
from pathlib import Path

from config import LOGGING_CONFIG, INPUT_DIR, OUTPUT_DIR, DEFAULT_OPTIONS, PREVIEW_LINES
from src.converter import available_products, export_filename, preview_csv
from src.exceptions import MalformedInputError
from src.models import OptionsConfig
from src.parser import MenuUiParser
from src.pipeline import ConversionPipeline
from src.sample import sample_json


def setup_logging():
    """Configure logging"""
    try:
        logging.config.dictConfig(LOGGING_CONFIG)
    except Exception as e:
        print(f"⚠ Logging setup failed: {e}", file=sys.stderr)
        # Setup basic logging as fallback
        logging.basicConfig(
            level=logging.INFO,
            format='%(levelname)s - %(message)s'
        )


def parse_arguments(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description='Convert menuUI JSON to a Shopify product import CSV',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py menu.json                      (CSV to stdout)
  python main.py menu.json shopify.csv
  python main.py menu.json --save               (data/output/<handle>_products_export.csv)
  python main.py --sample --preview
  python main.py --sample sample.csv
  python main.py menu.json --list-products
  python main.py menu.json --validate-only

Option defaults come from the environment (.env):
  SHOPIFY_HANDLE, SHOPIFY_TITLE, SHOPIFY_TAGS, SHOPIFY_VENDOR,
  SHOPIFY_PRODUCT_CATEGORY, SHOPIFY_BASE_PRICE, SHOPIFY_PRIMARY_PRODUCT
        """
    )

    parser.add_argument(
        'input_file',
        type=str,
        nargs='?',
        default=None,
        help='Path to menuUI JSON file (relative paths also searched in data/input)'
    )

    parser.add_argument(
        'output_file',
        type=str,
        nargs='?',
        default=None,
        help='Path to output CSV (default: print to stdout)'
    )

    parser.add_argument('--sample', action='store_true', help='Convert the built-in sample document')
    parser.add_argument('--save', action='store_true',
                        help='Write to data/output/<handle>_products_export.csv')
    parser.add_argument('--preview', action='store_true',
                        help=f'Print only the first {PREVIEW_LINES} CSV lines')
    parser.add_argument('--list-products', action='store_true',
                        help='List entry labels usable as --primary-product and exit')
    parser.add_argument('--validate-only', action='store_true',
                        help='Validate the input and exit')

    parser.add_argument('--handle', default=DEFAULT_OPTIONS['handle'], help='Base handle prefix')
    parser.add_argument('--title', default=DEFAULT_OPTIONS['title'], help='Base product title')
    parser.add_argument('--tags', default=DEFAULT_OPTIONS['tags'], help='Common tags for every product')
    parser.add_argument('--vendor', default=DEFAULT_OPTIONS['vendor'], help='Product vendor')
    parser.add_argument('--category', default=DEFAULT_OPTIONS['product_category'],
                        help='Shopify product category')
    parser.add_argument('--primary-product', default=DEFAULT_OPTIONS['primary_product'],
                        help='Entry label that keeps the base title unchanged')
    parser.add_argument('--base-price', default=DEFAULT_OPTIONS['base_price'], help='Variant price')

    args = parser.parse_args(argv)
    if args.sample:
        # With --sample the only positional is the output file
        if args.output_file:
            parser.error('--sample takes no input_file; pass only the output path')
        args.input_file, args.output_file = None, args.input_file
    elif not args.input_file:
        parser.error('input_file is required unless --sample is given')
    return args


def build_options(args) -> OptionsConfig:
    return OptionsConfig(
        handle=args.handle,
        title=args.title,
        vendor=args.vendor,
        product_category=args.category,
        tags=args.tags,
        primary_product=args.primary_product,
        base_price=args.base_price,
    )


def resolve_input(input_file: str) -> Path:
    """Resolve input path: as given, then relative to INPUT_DIR"""
    path = Path(input_file)
    if not path.is_absolute() and not path.exists():
        path = INPUT_DIR / path
    return path


def main(argv=None):
    """Main entry point"""
    setup_logging()
    logger = logging.getLogger(__name__)

    args = parse_arguments(argv)
    options = build_options(args)

    try:
        if args.sample:
            input_path = None
            text = sample_json()
        else:
            input_path = resolve_input(args.input_file)
            if not input_path.exists():
                logger.error(f"Input file not found: {input_path}")
                return 1
            text = input_path.read_text(encoding='utf-8-sig')

        parser = MenuUiParser()

        if args.validate_only:
            is_valid, message = parser.validate(text)
            if is_valid:
                print("✓ Valid JSON structure detected")
                return 0
            print(f"Validation Error: {message or 'empty input'}", file=sys.stderr)
            return 2

        if args.list_products:
            for label in available_products(parser.parse_text(text)):
                print(label)
            return 0

        pipeline = ConversionPipeline(options)

        output_file = args.output_file
        if args.save and not output_file:
            output_file = str(OUTPUT_DIR / export_filename(options))

        if output_file and input_path is not None:
            success, _ = pipeline.run(str(input_path), output_file)
            return 0 if success else 1

        csv_text = pipeline.convert_text(text)
        if output_file:
            Path(output_file).write_text(csv_text, encoding='utf-8', newline='')
            logger.info(f"✓ Wrote {pipeline.stats.csv_rows_generated} rows to {output_file}")
            return 0

        if args.preview:
            preview = preview_csv(csv_text, PREVIEW_LINES)
            print(preview.text)
            print(preview.summary())
        else:
            print(csv_text)
        return 0

    except MalformedInputError as e:
        logger.error(f"❌ Invalid input: {str(e)}")
        return 2

    except KeyboardInterrupt:
        logger.warning("\n\n⚠️  Conversion interrupted by user")
        return 130

    except Exception as e:
        logger.error(f"\n❌ Unexpected error: {str(e)}", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
