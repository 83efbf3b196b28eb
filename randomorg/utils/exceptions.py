"""
Exception hierarchy for randomorg.

Provides:
- Custom exception classes with error codes
- Error categorization (validation, transport, decode)
- Safe error message formatting (no API key leak)
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from randomorg.validation.violations import Violation


class ErrorCategory(Enum):
    """Error categories for classification."""
    VALIDATION = "validation"
    STRUCTURAL = "structural"
    TRANSPORT = "transport"
    DECODE = "decode"
    SERVICE = "service"


class RandomOrgError(Exception):
    """Base exception for all randomorg errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.DECODE,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ValidationError(RandomOrgError):
    """One or more parameters violate the service constraints."""

    def __init__(
        self,
        violations: list[Violation],
        *,
        message: str | None = None,
        code: str = "VALIDATION_ERROR",
        category: ErrorCategory = ErrorCategory.VALIDATION,
    ):
        self.violations = list(violations)
        if message is None:
            message = "; ".join(v.message for v in self.violations) or "invalid parameters"
        super().__init__(
            message,
            code=code,
            category=category,
            details={"violations": [v.to_dict() for v in self.violations]},
        )

    @property
    def field_names(self) -> list[str]:
        names: list[str] = []
        for violation in self.violations:
            names.extend(violation.field_names)
        return names


class StructuralMismatchError(ValidationError):
    """Sequence parameters were given with inconsistent Uniform/Multiform shapes."""

    def __init__(self, violations: list[Violation]):
        fields = ", ".join(name for v in violations for name in v.field_names)
        super().__init__(
            violations,
            message=f"mismatched parameter variants: {fields}",
            code="MISMATCHED_PARAMETER_VARIANTS",
            category=ErrorCategory.STRUCTURAL,
        )


class TransportError(RandomOrgError):
    """Network or HTTP-level failure during the single round trip."""

    def __init__(self, message: str, *, status_code: int | None = None, endpoint: str | None = None):
        super().__init__(
            message,
            code="TRANSPORT_ERROR",
            category=ErrorCategory.TRANSPORT,
            details={"status_code": status_code, "endpoint": endpoint},
        )
        self.status_code = status_code


class DecodeError(RandomOrgError):
    """Response body is malformed or does not match the expected payload shape."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "DECODE_ERROR",
        category: ErrorCategory = ErrorCategory.DECODE,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, category=category, details=details)


class ServiceError(DecodeError):
    """The service answered with a JSON-RPC error object instead of a result."""

    def __init__(self, service_code: int | None, message: str, data: Any = None):
        super().__init__(
            f"service error {service_code}: {message}",
            code="SERVICE_ERROR",
            category=ErrorCategory.SERVICE,
            details={"service_code": service_code, "data": data},
        )
        self.service_code = service_code


_API_KEY_PATTERN = re.compile(r"(['\"]?api[_-]?key['\"]?\s*[=:]\s*)['\"]?[^\s'\",}]+['\"]?", re.IGNORECASE)
_BEARER_PATTERN = re.compile(r"bearer\s+[a-zA-Z0-9\-._~+/]+=*", re.IGNORECASE)


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove credentials from messages before they reach logs."""
    sanitized = _API_KEY_PATTERN.sub(lambda m: f"{m.group(1)}{replacement}", message)
    return _BEARER_PATTERN.sub(replacement, sanitized)
