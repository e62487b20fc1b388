"""
System failure error classifications.

These exceptions represent faults that editing cannot recover from: a
configuration that failed validation or a caller asking for an action the
editor does not have.
"""

from typing import Optional, Any

from .record_errors import CatalogError


class SystemFailureError(CatalogError):
    """Base class for unrecoverable failures."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, **kwargs)
        self.recoverable = False


class ConfigurationError(SystemFailureError):
    """Configuration failed validation."""

    def __init__(self, message: str, issues: Optional[list[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.issues = issues or []


class UnknownActionError(SystemFailureError):
    """Action name is not one of the editor actions."""

    def __init__(self, message: str, action_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.action_name = action_name
