"""Utility functions for rpcgate."""

from rpcgate.utils.exceptions import (
    RpcGateError,
    ServiceLoadError,
    RpcFault,
    ParseError,
    InvalidRequestError,
    MethodNotFoundError,
    InvalidParamsError,
    InternalRpcError,
    ErrorCategory,
    classify_exception,
    sanitize_error_message,
)

__all__ = [
    "RpcGateError",
    "ServiceLoadError",
    "RpcFault",
    "ParseError",
    "InvalidRequestError",
    "MethodNotFoundError",
    "InvalidParamsError",
    "InternalRpcError",
    "ErrorCategory",
    "classify_exception",
    "sanitize_error_message",
]
