"""Domain-specific exceptions."""

from __future__ import annotations


class FieldLengthError(ValueError):
    """Raised when a TLV value does not fit the two-digit length prefix."""
