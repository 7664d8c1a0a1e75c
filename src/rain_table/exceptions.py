"""Exceptions for rain-table."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class RainTableError(Exception):
    """
    Base exception for all rain-table errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(RainTableError):
    """
    Base exception for caller configuration errors.

    These indicate a bug in how the renderer was called (bad options,
    unusable input) rather than a problem with the data being rendered.
    Malformed cell content is never reported this way; it is repaired.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class ValidationError(ConfigurationError):
    """
    Raised when an option or input value is invalid.

    Attributes:
        field: Name of the offending option or argument
        value: The rejected value
        reason: Human readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class SortKeyError(ConfigurationError):
    """
    Raised when rows cannot be sorted by the configured ``sort_by``.

    Attributes:
        key: The ``sort_by`` value (a column key or a callable)
        reason: Human readable explanation
    """

    def __init__(self, key: Any, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Cannot sort by {key!r}: {reason}")
