"""
Record data error classifications.

These exceptions describe product data that cannot be turned into a
ProductRecord, either while loading seed data or while editing the buffer.
"""

from typing import Optional, Dict, Any


class CatalogError(Exception):
    """Base class for all catalog editor errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MalformedRecordError(CatalogError):
    """Record data exists but cannot be coerced to the record's field types."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
