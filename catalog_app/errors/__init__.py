"""
Error classification for the catalog editor.

Normal editing never raises: guards refuse invalid transitions and the store
treats unknown ids as no-ops. These exceptions cover malformed record data,
broken configuration and programmer mistakes at the action boundary.
"""

from .record_errors import (
    CatalogError,
    MalformedRecordError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
    UnknownActionError,
)

__all__ = [
    "CatalogError",
    "MalformedRecordError",
    "SystemFailureError",
    "ConfigurationError",
    "UnknownActionError",
]
