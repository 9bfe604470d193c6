"""Structural validation of candidate JSON-RPC requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rpcgate.api.rpc.context_models import RpcReply, RpcRequest
from rpcgate.api.rpc.error_catalog import INVALID_REQUEST
from rpcgate.api.rpc.response_builder import VERSION_2, build_error_response


@dataclass(slots=True)
class RpcValidationResult:
    """Either a validated request or the InvalidRequest reply to send."""

    request: RpcRequest | None
    error: RpcReply | None

    @property
    def ok(self) -> bool:
        return self.error is None


def _invalid(version: str, req_id: Any) -> RpcValidationResult:
    body = build_error_response(version, INVALID_REQUEST, req_id)
    return RpcValidationResult(request=None, error=RpcReply(body=body, status=INVALID_REQUEST.http_status))


def params_shape_allowed(params: Any, version: str) -> bool:
    """1.0 takes positional params only; 2.0 also takes a named object."""
    if isinstance(params, list):
        return True
    return version == VERSION_2 and isinstance(params, dict)


def validate_request(candidate: Any, version: str) -> RpcValidationResult:
    """Check method, params and id presence and the params shape for `version`."""
    if not isinstance(candidate, dict):
        return _invalid(version, None)

    req_id = candidate.get("id")
    method = candidate.get("method")
    if not isinstance(method, str) or not method:
        return _invalid(version, req_id)
    if candidate.get("params") is None:
        return _invalid(version, req_id)
    if "id" not in candidate:
        return _invalid(version, None)

    params = candidate["params"]
    if not params_shape_allowed(params, version):
        return _invalid(version, req_id)

    request = RpcRequest(method=method, params=params, id=req_id, version=version)
    return RpcValidationResult(request=request, error=None)
