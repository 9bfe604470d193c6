"""Shared dataclass models for one request/response cycle."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

JSON_RPC_CONTENT_TYPE = "application/json-rpc"
NOTIFICATION_HEADERS = {"Connection": "close"}


@dataclass(slots=True)
class RpcRequest:
    """A validated JSON-RPC request. `params` becomes a list once bound."""

    method: str
    params: list[Any] | dict[str, Any]
    id: Any
    version: str

    @property
    def is_notification(self) -> bool:
        return self.id is None


@dataclass(slots=True)
class RpcReply:
    """Envelope plus the HTTP status and headers it is sent with."""

    body: dict[str, Any] | None
    status: int
    headers: dict[str, str] = field(default_factory=lambda: {"Content-Type": JSON_RPC_CONTENT_TYPE})

    @classmethod
    def empty(cls) -> "RpcReply":
        """204 reply for a successful notification."""
        return cls(body=None, status=204, headers=dict(NOTIFICATION_HEADERS))

    def content(self) -> bytes:
        """Serialized body; empty for notifications. Raises on values JSON cannot carry (sets, NaN)."""
        if self.body is None:
            return b""
        return json.dumps(self.body, ensure_ascii=False, allow_nan=False).encode("utf-8")
