"""JSON-RPC engine: decode, validate, bind, dispatch and shape one request."""

from __future__ import annotations

import json
from typing import Any, Mapping

from loguru import logger

from rpcgate.api.rpc.context_models import RpcReply
from rpcgate.api.rpc.dispatcher import Dispatcher
from rpcgate.api.rpc.error_boundary import fault_result
from rpcgate.api.rpc.param_binder import bind_named_params
from rpcgate.api.rpc.request_validator import validate_request
from rpcgate.api.rpc.response_builder import SUPPORTED_VERSIONS
from rpcgate.service.registry import ServiceMethod
from rpcgate.utils.exceptions import ParseError

_NO_ID = object()


def decode_body(payload: bytes | str) -> Any:
    """Parse a POST body into a candidate request."""
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError() from e
    try:
        return json.loads(payload)
    except (json.JSONDecodeError, TypeError) as e:
        raise ParseError() from e


def decode_query(method: str, params_text: str | None, req_id: Any = _NO_ID) -> dict[str, Any]:
    """Build a candidate request from GET fields; `params` is JSON text."""
    if params_text is None:
        raise ParseError()
    try:
        params = json.loads(params_text)
    except json.JSONDecodeError as e:
        raise ParseError() from e
    candidate: dict[str, Any] = {"method": method, "params": params}
    if req_id is not _NO_ID:
        candidate["id"] = req_id
    return candidate


class RpcEngine:
    """Processes one request per call against a read-only service registry."""

    def __init__(
        self,
        registry: Mapping[str, ServiceMethod],
        *,
        version: str = "2.0",
        split_invocation_errors: bool = False,
        pending_timeout: float | None = None,
    ) -> None:
        if version not in SUPPORTED_VERSIONS:
            raise ValueError(f"unsupported JSON-RPC version: {version!r}")
        self.registry = registry
        self.version = version
        self.dispatcher = Dispatcher(
            registry,
            version=version,
            split_invocation_errors=split_invocation_errors,
            pending_timeout=pending_timeout,
        )

    async def handle_payload(self, payload: bytes | str) -> RpcReply:
        """POST-style entry: a single serialized request body."""
        try:
            candidate = decode_body(payload)
        except ParseError as fault:
            logger.info("RPC parse error on {} byte payload", len(payload or b""))
            return fault_result(version=self.version, fault=fault)
        return await self.handle_request(candidate)

    async def handle_query(self, method: str, params_text: str | None, req_id: Any = _NO_ID) -> RpcReply:
        """GET-style entry: method, serialized params and id as separate fields."""
        try:
            candidate = decode_query(method, params_text, req_id)
        except ParseError as fault:
            logger.info("RPC parse error in query params for {}", method)
            return fault_result(version=self.version, fault=fault)
        return await self.handle_request(candidate)

    async def handle_request(self, candidate: Any) -> RpcReply:
        """Validate, bind and dispatch a decoded candidate request."""
        validation = validate_request(candidate, self.version)
        if not validation.ok:
            logger.info("RPC invalid request: {}", _summarize(candidate))
            return validation.error
        request = bind_named_params(validation.request, self.registry)
        return await self.dispatcher.dispatch(request)


def _summarize(candidate: Any) -> str:
    if isinstance(candidate, dict):
        return f"keys={sorted(str(k) for k in candidate)}"
    return f"type={type(candidate).__name__}"
