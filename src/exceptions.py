"""
Errors raised while reading a menuUI document.
"""
from typing import Optional


class MalformedInputError(ValueError):
    """Input cannot be converted; raised before any CSV row is built."""


class MalformedJsonError(MalformedInputError):
    """Input text is not parseable JSON"""


class SchemaViolationError(MalformedInputError):
    """
    JSON parsed but does not follow the menuUI structure.

    item_index is 1-based (None for document-level problems) and field
    names the missing or invalid key.
    """

    def __init__(self, message: str, item_index: Optional[int] = None, field: Optional[str] = None):
        super().__init__(message)
        self.item_index = item_index
        self.field = field
