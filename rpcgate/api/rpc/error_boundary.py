"""Common RPC error-boundary helpers for server dispatch."""

from __future__ import annotations

from typing import Any, Callable

from rpcgate.api.rpc.context_models import RpcReply
from rpcgate.api.rpc.error_catalog import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    CatalogEntry,
)
from rpcgate.api.rpc.response_builder import build_error_response
from rpcgate.utils.exceptions import RpcFault, classify_exception, sanitize_error_message


def error_reply(version: str, entry: CatalogEntry, req_id: Any = None, data: Any = None) -> RpcReply:
    """Error envelope sent with the catalog's HTTP status."""
    return RpcReply(body=build_error_response(version, entry, req_id, data), status=entry.http_status)


def fault_result(*, version: str, fault: RpcFault) -> RpcReply:
    """Map a raised RpcFault to its reply."""
    return error_reply(version, fault.entry, fault.req_id, fault.data)


def unknown_method_result(
    *,
    version: str,
    method: str,
    req_id: Any,
    log_info: Callable[[str, Any], None],
) -> RpcReply:
    """Build standardized unknown-method response."""
    log_info("RPC unknown method {}", method)
    return error_reply(version, METHOD_NOT_FOUND, req_id)


def arity_mismatch_result(
    *,
    version: str,
    method: str,
    req_id: Any,
    expected: int,
    received: int,
    log_info: Callable[[str, Any, Any, Any], None],
) -> RpcReply:
    """Build standardized invalid-params response for an argument count mismatch."""
    log_info("RPC method {} expects {} params, got {}", method, expected, received)
    return error_reply(version, INVALID_PARAMS, req_id)


def invocation_failure_result(
    *,
    version: str,
    method: str,
    req_id: Any,
    exc: BaseException,
    split_invocation_errors: bool,
    log_exception: Callable[[str, Any, Any, Any], None],
) -> RpcReply:
    """Map a synchronous fault raised by a method.

    Reported as MethodNotFound unless `split_invocation_errors` is set. A raised
    RpcFault picks its own catalog entry.
    """
    code, _ = classify_exception(exc)
    log_exception("RPC method {} raised [{}]: {}", method, code, sanitize_error_message(str(exc)))
    if isinstance(exc, RpcFault):
        return error_reply(version, exc.entry, req_id, exc.data)
    entry = INTERNAL_ERROR if split_invocation_errors else METHOD_NOT_FOUND
    return error_reply(version, entry, req_id)


def rejected_result(
    *,
    version: str,
    method: str,
    req_id: Any,
    exc: BaseException,
    log_warning: Callable[[str, Any, Any, Any], None],
) -> RpcReply:
    """Map a rejected deferred result to standardized INTERNAL_ERROR responses."""
    code, _ = classify_exception(exc)
    log_warning("RPC method {} rejected [{}]: {}", method, code, sanitize_error_message(str(exc)))
    if isinstance(exc, RpcFault):
        return error_reply(version, exc.entry, req_id, exc.data)
    return error_reply(version, INTERNAL_ERROR, req_id)


def unencodable_result(
    *,
    version: str,
    method: str,
    req_id: Any,
    exc: BaseException,
    log_exception: Callable[[str, Any, Any], None],
) -> RpcReply:
    """Map a result that cannot be serialized to INTERNAL_ERROR."""
    log_exception("RPC method {} returned an unencodable result: {}", method, sanitize_error_message(str(exc)))
    return error_reply(version, INTERNAL_ERROR, req_id)
