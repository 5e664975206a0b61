"""
Configuration settings for the menuUI → Shopify CSV converter
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Project paths
PROJECT_ROOT = Path(__file__).parent
DATA_DIR = PROJECT_ROOT / "data"
INPUT_DIR = DATA_DIR / "input"
OUTPUT_DIR = DATA_DIR / "output"
LOGS_DIR = PROJECT_ROOT / "logs"

# Create directories if they don't exist
for directory in [INPUT_DIR, OUTPUT_DIR, LOGS_DIR]:
    directory.mkdir(parents=True, exist_ok=True)

# Fixed values written into every Shopify row.
# The converter never reads the environment for these, so the same input
# always yields the same CSV.
SHOPIFY_DEFAULTS = {
    "vendor": "Delta's Integration",
    "product_category": "Furniture > Office Furniture > Workspace Tables",
    "price": "3000",
    "body_html": "<p></p>",
    "grams": "0",
    "inventory_tracker": "shopify",
    "inventory_qty": "10",
    "inventory_policy": "deny",
    "fulfillment_service": "manual",
    "status": "active",
    # Image Src is always this asset, not the variant icon
    "placeholder_image_url": "https://res.cloudinary.com/dicnuc6ox/image/upload/v1706617512/samples/chair.png",
    "default_option_name": "Title",
    "default_option_value": "Default Title",
    "fallback_handle": "product",
}

# Options form defaults (CLI flags start from these)
DEFAULT_OPTIONS = {
    "handle": os.getenv("SHOPIFY_HANDLE", "custom-product"),
    "title": os.getenv("SHOPIFY_TITLE", "Custom Product"),
    "tags": os.getenv("SHOPIFY_TAGS", "custom-product"),
    "vendor": os.getenv("SHOPIFY_VENDOR", SHOPIFY_DEFAULTS["vendor"]),
    "product_category": os.getenv("SHOPIFY_PRODUCT_CATEGORY", SHOPIFY_DEFAULTS["product_category"]),
    "base_price": os.getenv("SHOPIFY_BASE_PRICE", SHOPIFY_DEFAULTS["price"]),
    "primary_product": os.getenv("SHOPIFY_PRIMARY_PRODUCT", ""),
}

# Number of CSV lines shown by --preview
PREVIEW_LINES = int(os.getenv("PREVIEW_LINES", 5))

# Logging Configuration
LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "detailed": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S"
        },
        "simple": {
            "format": "%(levelname)s - %(message)s"
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
            "stream": "ext://sys.stderr"
        },
        "file": {
            "class": "logging.FileHandler",
            "level": "DEBUG",
            "formatter": "detailed",
            "filename": str(LOGS_DIR / "converter.log"),
            "mode": "a"
        }
    },
    "loggers": {
        "": {  # Root logger
            "level": "DEBUG",
            "handlers": ["console", "file"]
        }
    }
}

# Export validation rules (validate_export.py)
VALIDATION_RULES = {
    "handle_max_length": 255,
    "title_max_length": 255,
    "category_separator": ">",
    "required_first_row_fields": ["Handle", "Title", "Vendor", "Published"],
    "required_row_fields": ["Handle", "Option1 Name", "Option1 Value", "Variant SKU", "Variant Price"],
}
