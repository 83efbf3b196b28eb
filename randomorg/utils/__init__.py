"""Utility functions for randomorg."""

from randomorg.utils.exceptions import (
    RandomOrgError,
    ValidationError,
    StructuralMismatchError,
    TransportError,
    DecodeError,
    ServiceError,
    ErrorCategory,
    sanitize_error_message,
)

__all__ = [
    "RandomOrgError",
    "ValidationError",
    "StructuralMismatchError",
    "TransportError",
    "DecodeError",
    "ServiceError",
    "ErrorCategory",
    "sanitize_error_message",
]
