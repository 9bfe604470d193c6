"""Method lookup, arity check, invocation and outcome classification."""

from __future__ import annotations

import asyncio
import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping, Union

from loguru import logger

from rpcgate.api.rpc.context_models import RpcReply, RpcRequest
from rpcgate.api.rpc.error_boundary import (
    arity_mismatch_result,
    invocation_failure_result,
    rejected_result,
    unencodable_result,
    unknown_method_result,
)
from rpcgate.api.rpc.response_builder import build_response
from rpcgate.service.registry import ServiceMethod


@dataclass(frozen=True, slots=True)
class Success:
    value: Any


@dataclass(frozen=True, slots=True)
class Failure:
    reason: BaseException


@dataclass(frozen=True, slots=True)
class Pending:
    awaitable: Awaitable[Any]


DispatchOutcome = Union[Success, Failure, Pending]


def invoke(method: ServiceMethod, args: list[Any]) -> DispatchOutcome:
    """Call the handler and classify what it produced."""
    try:
        value = method.handler(*args)
    except Exception as e:
        return Failure(e)
    if inspect.isawaitable(value):
        return Pending(value)
    return Success(value)


async def settle(
    pending: Pending,
    *,
    on_fulfilled: Callable[[Any], RpcReply],
    on_rejected: Callable[[BaseException], RpcReply],
    timeout: float | None = None,
) -> RpcReply:
    """Register both continuations on the deferred result and wait for one to fire."""
    future = asyncio.ensure_future(pending.awaitable)
    settled: asyncio.Future[RpcReply] = asyncio.get_running_loop().create_future()

    def _continue(done: asyncio.Future[Any]) -> None:
        if settled.done():
            return
        if done.cancelled():
            settled.set_result(on_rejected(asyncio.CancelledError()))
            return
        exc = done.exception()
        if exc is not None:
            settled.set_result(on_rejected(exc))
        else:
            settled.set_result(on_fulfilled(done.result()))

    future.add_done_callback(_continue)
    if timeout is None:
        return await settled
    try:
        return await asyncio.wait_for(asyncio.shield(settled), timeout)
    except asyncio.TimeoutError as e:
        future.cancel()
        if not settled.done():
            settled.set_result(on_rejected(e))
        return settled.result()


class Dispatcher:
    """Resolves a bound request against the registry and shapes the reply."""

    def __init__(
        self,
        registry: Mapping[str, ServiceMethod],
        *,
        version: str,
        split_invocation_errors: bool = False,
        pending_timeout: float | None = None,
    ) -> None:
        self.registry = registry
        self.version = version
        self.split_invocation_errors = split_invocation_errors
        self.pending_timeout = pending_timeout

    def _success(self, request: RpcRequest, value: Any) -> RpcReply:
        if request.is_notification:
            return RpcReply.empty()
        reply = RpcReply(body=build_response(self.version, result=value, req_id=request.id), status=200)
        try:
            reply.content()
        except (TypeError, ValueError) as e:
            return unencodable_result(
                version=self.version,
                method=request.method,
                req_id=request.id,
                exc=e,
                log_exception=logger.opt(exception=e).warning,
            )
        return reply

    def _rejected(self, request: RpcRequest, exc: BaseException) -> RpcReply:
        return rejected_result(
            version=self.version,
            method=request.method,
            req_id=request.id,
            exc=exc,
            log_warning=logger.warning,
        )

    async def dispatch(self, request: RpcRequest) -> RpcReply:
        """Lookup, arity check, invoke and classify; `request.params` must be positional."""
        method = self.registry.get(request.method)
        if method is None:
            return unknown_method_result(
                version=self.version,
                method=request.method,
                req_id=request.id,
                log_info=logger.info,
            )

        args = list(request.params)
        if len(args) != method.arity:
            return arity_mismatch_result(
                version=self.version,
                method=request.method,
                req_id=request.id,
                expected=method.arity,
                received=len(args),
                log_info=logger.info,
            )

        logger.debug("RPC dispatch {} id={} args={}", method.name, request.id, len(args))
        outcome = invoke(method, args)

        if isinstance(outcome, Failure):
            return invocation_failure_result(
                version=self.version,
                method=method.name,
                req_id=request.id,
                exc=outcome.reason,
                split_invocation_errors=self.split_invocation_errors,
                log_exception=logger.opt(exception=outcome.reason).warning,
            )
        if isinstance(outcome, Pending):
            return await settle(
                outcome,
                on_fulfilled=lambda value: self._success(request, value),
                on_rejected=lambda exc: self._rejected(request, exc),
                timeout=self.pending_timeout,
            )
        return self._success(request, outcome.value)
