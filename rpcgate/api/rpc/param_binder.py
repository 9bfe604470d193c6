"""Named-to-positional parameter binding for JSON-RPC 2.0."""

from __future__ import annotations

from typing import Any, Mapping

from rpcgate.api.rpc.context_models import RpcRequest
from rpcgate.api.rpc.response_builder import VERSION_2
from rpcgate.service.registry import ServiceMethod

# Placeholder for a declared parameter the caller did not name.
MISSING_VALUE = None


def params_to_positional(params: Mapping[str, Any], parameter_names: tuple[str, ...]) -> list[Any]:
    """Order named params by the declared parameter names; undeclared keys are dropped."""
    return [params.get(name, MISSING_VALUE) for name in parameter_names]


def bind_named_params(request: RpcRequest, registry: Mapping[str, ServiceMethod]) -> RpcRequest:
    """Rewrite a 2.0 named-params request in place to positional order.

    Skipped when the method is unknown; the dispatcher reports that.
    """
    if request.version != VERSION_2 or not isinstance(request.params, dict):
        return request
    method = registry.get(request.method)
    if method is None:
        return request
    request.params = params_to_positional(request.params, method.parameter_names)
    return request
