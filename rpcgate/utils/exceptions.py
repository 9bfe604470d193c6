"""
Exception hierarchy and error handling utilities for rpcgate.

Provides:
- Custom exception classes with error codes
- Error categorization (validation, not found, fatal)
- JSON-RPC faults bound to the error catalog
- Safe error message formatting (no sensitive data leak)
"""

from __future__ import annotations

import asyncio
import json
import re
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rpcgate.api.rpc.error_catalog import CatalogEntry


class ErrorCategory(Enum):
    """Error categories for classification."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    FATAL = "fatal"


class RpcGateError(Exception):
    """Base exception for all rpcgate errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.FATAL,
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


class ServiceLoadError(RpcGateError):
    """Service module could not be imported or exposes no methods."""

    def __init__(self, target: str, message: str):
        super().__init__(
            f"Cannot load service '{target}': {message}",
            code="SERVICE_LOAD_ERROR",
            category=ErrorCategory.FATAL,
            details={"target": target},
        )


class RpcFault(RpcGateError):
    """A JSON-RPC failure bound to one entry of the error catalog."""

    catalog_name = "InternalError"
    category = ErrorCategory.FATAL

    def __init__(self, message: str | None = None, *, req_id: Any = None, data: Any = None):
        entry = self.entry
        super().__init__(
            message or entry.message,
            code=entry.name,
            category=type(self).category,
            details={"rpc_code": entry.code},
        )
        self.req_id = req_id
        self.data = data

    @property
    def entry(self) -> "CatalogEntry":
        from rpcgate.api.rpc.error_catalog import ERROR_CATALOG

        return ERROR_CATALOG[self.catalog_name]


class ParseError(RpcFault):
    """Payload is not parseable as JSON."""
    catalog_name = "ParseError"
    category = ErrorCategory.VALIDATION


class InvalidRequestError(RpcFault):
    """Request object fails structural validation."""
    catalog_name = "InvalidRequest"
    category = ErrorCategory.VALIDATION


class MethodNotFoundError(RpcFault):
    """Unknown method, or the method raised while being invoked."""
    catalog_name = "MethodNotFound"
    category = ErrorCategory.NOT_FOUND


class InvalidParamsError(RpcFault):
    """Argument count does not match the declared arity."""
    catalog_name = "InvalidParams"
    category = ErrorCategory.VALIDATION


class InternalRpcError(RpcFault):
    """Deferred result was rejected."""
    catalog_name = "InternalError"
    category = ErrorCategory.FATAL


_SECRET_PATTERNS = (
    re.compile(r"\b(api[_-]?key|token|secret|passw(or)?d|auth)\s*[=:]\s*['\"]?[^\s'\",]+['\"]?", re.IGNORECASE),
    re.compile(r"\bbearer\s+[\w\-.~+/]+=*", re.IGNORECASE),
    re.compile(r"(?<=://)[^/\s:@]+:[^/\s@]+(?=@)"),  # URL userinfo
    re.compile(r"\b[a-z]{2,5}[-_][A-Za-z0-9]{20,}\b"),  # prefixed keys: sk-..., ghp_...
    re.compile(r"[A-Za-z0-9]{32,}"),
)

MAX_LOGGED_MESSAGE = 500


def sanitize_error_message(
    message: str,
    replacement: str = "[REDACTED]",
    max_length: int | None = MAX_LOGGED_MESSAGE,
) -> str:
    """Redact credentials from a service method's error text and cap its length for logs."""
    for pattern in _SECRET_PATTERNS:
        message = pattern.sub(replacement, message)
    if max_length and len(message) > max_length:
        message = message[:max_length] + "..."
    return message


def classify_exception(exc: BaseException) -> tuple[str, ErrorCategory]:
    """
    Classify an exception raised by a service method.

    Returns:
        Tuple of (error_code, category)
    """
    if isinstance(exc, RpcGateError):
        return exc.code, exc.category

    if isinstance(exc, (asyncio.TimeoutError, asyncio.CancelledError)):
        return "TIMEOUT", ErrorCategory.TIMEOUT

    if isinstance(exc, json.JSONDecodeError):
        return "JSON_PARSE_ERROR", ErrorCategory.VALIDATION

    if isinstance(exc, (ValueError, TypeError, KeyError)):
        return type(exc).__name__.upper(), ErrorCategory.VALIDATION

    if isinstance(exc, LookupError):
        return "NOT_FOUND", ErrorCategory.NOT_FOUND

    return "INTERNAL_ERROR", ErrorCategory.FATAL
