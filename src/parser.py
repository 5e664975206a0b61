"""
Module 1: menuUI Parser
Parses pasted JSON text and checks the menuUI structure before conversion.
"""
import logging
import json
from typing import Any, Dict, Tuple

from src.exceptions import MalformedInputError, MalformedJsonError, SchemaViolationError
from src.models import MenuUiDocument

logger = logging.getLogger(__name__)


class MenuUiParser:
    """
    Parse and validate menuUI JSON.

    Expected structure:
    - object with key "menuUI" (required, non-empty array)
    - each item has "label" (non-empty string), "type" (non-empty string)
      and "options" (array, may be empty)

    "target" and "visibilityConfig" are editor-only and pass through untouched.
    """

    def parse_text(self, text: str) -> MenuUiDocument:
        """
        Parse raw JSON text into a typed document.

        Raises:
            MalformedJsonError: If text is blank or not valid JSON
            SchemaViolationError: If the menuUI structure is wrong
        """
        if text is None or not text.strip():
            raise MalformedJsonError("Please enter JSON data to convert")

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedJsonError(f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e

        return self.parse_data(data)

    def parse_data(self, data: Any) -> MenuUiDocument:
        """
        Validate already decoded JSON and build the typed document.

        Raises:
            SchemaViolationError: If the menuUI structure is wrong
        """
        self.check_structure(data)
        document = MenuUiDocument.from_dict(data)
        logger.debug(f"Parsed menuUI document with {len(document)} entries")
        return document

    def check_structure(self, data: Any):
        """Raise SchemaViolationError for the first structural problem found"""
        if not isinstance(data, dict) or not isinstance(data.get("menuUI"), list):
            raise SchemaViolationError('JSON must contain a "menuUI" array', field="menuUI")

        items = data["menuUI"]
        if not items:
            raise SchemaViolationError("menuUI array cannot be empty", field="menuUI")

        for idx, item in enumerate(items, 1):
            self._check_item(item, idx)

    def _check_item(self, item: Any, idx: int):
        if not isinstance(item, dict):
            raise SchemaViolationError(f"Menu item {idx} must be an object", item_index=idx)

        for key in ("label", "type"):
            value = item.get(key)
            if not value:
                raise SchemaViolationError(
                    f'Menu item {idx} missing required "{key}" field', item_index=idx, field=key
                )
            if not isinstance(value, str):
                raise SchemaViolationError(
                    f'Menu item {idx} "{key}" field must be a string', item_index=idx, field=key
                )

        if not isinstance(item.get("options"), list):
            raise SchemaViolationError(
                f'Menu item {idx} missing required "options" array', item_index=idx, field="options"
            )

    def validate(self, text: str) -> Tuple[bool, str]:
        """
        Check text without raising.

        Returns:
            (is_valid, error_message). Blank text is invalid with an empty
            message so nothing is reported before the user types.
        """
        if text is None or not text.strip():
            return False, ""
        try:
            self.parse_text(text)
        except MalformedInputError as e:
            return False, str(e)
        return True, ""

    def summarize(self, document: MenuUiDocument) -> Dict[str, Any]:
        """Entry summary used in log output"""
        return {
            "entries": len(document),
            "labels": document.labels(),
            "types": [entry.type for entry in document.menu_ui],
        }
