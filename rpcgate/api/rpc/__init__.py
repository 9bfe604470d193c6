"""JSON-RPC protocol engine: validation, binding, dispatch and response shaping."""

from rpcgate.api.rpc.context_models import RpcReply, RpcRequest
from rpcgate.api.rpc.engine import RpcEngine
from rpcgate.api.rpc.error_catalog import (
    ERROR_CATALOG,
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    CatalogEntry,
)
from rpcgate.api.rpc.response_builder import VERSION_1, VERSION_2, build_error_response, build_response

__all__ = [
    "RpcEngine",
    "RpcReply",
    "RpcRequest",
    "CatalogEntry",
    "ERROR_CATALOG",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "VERSION_1",
    "VERSION_2",
    "build_response",
    "build_error_response",
]
