"""FastAPI server exposing an RpcEngine over HTTP.

One route accepts both transport styles: GET with `method`, `params` and `id`
query fields, or a POST body holding the serialized request.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import Response
from loguru import logger

from rpcgate import __version__
from rpcgate.api.rpc.context_models import RpcReply
from rpcgate.api.rpc.engine import RpcEngine


def to_http_response(reply: RpcReply) -> Response:
    """Write an RpcReply with its status and headers."""
    if reply.status == 204:
        return Response(status_code=204, headers=reply.headers)
    return Response(
        content=reply.content(),
        status_code=reply.status,
        headers=reply.headers,
    )


def create_app(engine: RpcEngine, *, path: str = "/") -> FastAPI:
    """Build the ASGI app bound to one engine (and so one protocol version)."""
    app = FastAPI(title="rpcgate", version=__version__)
    app.state.engine = engine
    rpc_path = "/" + path.strip("/") if path.strip("/") else "/"

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {
            "ok": True,
            "service": "rpcgate",
            "version": __version__,
            "protocol": engine.version,
            "methods": len(engine.registry),
        }

    @app.api_route(rpc_path, methods=["GET", "POST"])
    async def rpc_endpoint(request: Request) -> Response:
        query = request.query_params
        if request.method == "GET" and query.get("method"):
            if "id" in query:
                reply = await engine.handle_query(query["method"], query.get("params"), query["id"])
            else:
                reply = await engine.handle_query(query["method"], query.get("params"))
        else:
            reply = await engine.handle_payload(await request.body())
        logger.debug("RPC {} {} -> {}", request.method, rpc_path, reply.status)
        return to_http_response(reply)

    return app
