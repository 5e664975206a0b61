"""
Pipeline Orchestrator
Coordinates parsing, product building and CSV generation for one input.
"""
import logging
import time
from datetime import datetime
from typing import Optional, Tuple
from pathlib import Path

from src.exceptions import MalformedInputError
from src.models import ConversionStats, OptionsConfig
from src.parser import MenuUiParser
from src.products import ProductBuilder
from src.shopify_csv import ShopifyCSVGenerator

logger = logging.getLogger(__name__)


class ConversionPipeline:
    """
    Main pipeline orchestrator.

    Coordinates all modules to:
    1. Parse and validate menuUI JSON
    2. Build one product per menu entry
    3. Generate Shopify CSV
    4. Write the CSV file

    Invalid input stops the run before anything is written.
    """

    def __init__(self, options: Optional[OptionsConfig] = None):
        self.options = options or OptionsConfig()

        # Initialize all modules
        self.parser = MenuUiParser()
        self.builder = ProductBuilder(self.options)
        self.csv_gen = ShopifyCSVGenerator(self.options)

        self.stats = ConversionStats()

        logger.debug(f"Pipeline initialized with options: {self.options.to_dict()}")

    def convert_text(self, text: str) -> str:
        """
        Convert raw JSON text to CSV text.

        Raises:
            MalformedInputError: If the text is not a valid menuUI document
        """
        self.stats = ConversionStats()
        self.stats.start_time = datetime.now().isoformat()
        start_time = time.time()

        # Step 1: Parse input JSON
        logger.info("\n--- STEP 1: PARSING menuUI JSON ---")
        document = self.parser.parse_text(text)
        self.stats.menu_entries = len(document)
        logger.info(f"✓ Parsed {len(document)} menu entries: {self.parser.summarize(document)['labels']}")

        # Step 2: Build products
        logger.info("\n--- STEP 2: BUILDING PRODUCTS ---")
        products = self.builder.build_products(document)
        self.stats.total_products = len(products)
        self.stats.total_variants = sum(len(p) for p in products)
        self.stats.default_variants = sum(
            1 for entry in document.menu_ui if not entry.variant_sources()
        )
        logger.info(f"✓ Built {self.stats.total_products} products with {self.stats.total_variants} variants")

        # Step 3: Generate CSV
        logger.info("\n--- STEP 3: GENERATING CSV ---")
        csv_text = self.csv_gen.generate_shopify_csv(products)
        self.stats.total_images = self.csv_gen.images_assigned
        self.stats.csv_rows_generated = self.stats.total_variants

        self.stats.end_time = datetime.now().isoformat()
        self.stats.processing_time_sec = time.time() - start_time
        return csv_text

    def run(self, input_file: str, output_file: str) -> Tuple[bool, ConversionStats]:
        """
        Run the complete pipeline.

        Args:
            input_file: Path to menuUI JSON file
            output_file: Path to output Shopify CSV

        Returns:
            Tuple of (success: bool, stats: ConversionStats)

        Raises:
            MalformedInputError: If the input is not a valid menuUI document
        """
        logger.info("\n" + "=" * 80)
        logger.info("menuUI → SHOPIFY CSV CONVERSION START")
        logger.info("=" * 80)
        logger.info(f"Input:  {input_file}")
        logger.info(f"Output: {output_file}")

        try:
            text = Path(input_file).read_text(encoding='utf-8-sig')
        except OSError as e:
            logger.error(f"Failed to read input: {str(e)}")
            self.stats = ConversionStats()
            self.stats.add_error(str(e))
            return False, self.stats

        try:
            csv_text = self.convert_text(text)
        except MalformedInputError as e:
            logger.error(f"Invalid menuUI input: {str(e)}")
            self.stats.add_error(str(e))
            raise

        # Step 4: Write output
        logger.info("\n--- STEP 4: WRITING OUTPUT ---")
        try:
            output_path = Path(output_file)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(csv_text, encoding='utf-8', newline='')
        except OSError as e:
            logger.error(f"Failed to write output: {str(e)}")
            self.stats.add_error(str(e))
            return False, self.stats

        self.stats.output_file = str(output_path)
        logger.info(f"✓ Wrote {self.stats.csv_rows_generated} rows to {output_path}")

        self.stats.print_report()
        return True, self.stats
