"""Fixed JSON-RPC error catalog: (code, message, HTTP status) per error class."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """One JSON-RPC error class."""

    name: str
    code: int
    message: str
    http_status: int

    def error_object(self, data: Any = None) -> dict[str, Any]:
        """Build the `error` member of a response envelope."""
        err: dict[str, Any] = {"code": self.code, "message": self.message}
        if data is not None:
            err["data"] = data
        return err


PARSE_ERROR = CatalogEntry("ParseError", -32700, "Parse error.", 500)
INVALID_REQUEST = CatalogEntry("InvalidRequest", -32600, "Invalid Request.", 400)
METHOD_NOT_FOUND = CatalogEntry("MethodNotFound", -32601, "Method not found.", 404)
INVALID_PARAMS = CatalogEntry("InvalidParams", -32602, "Invalid params.", 500)
INTERNAL_ERROR = CatalogEntry("InternalError", -32603, "Internal error.", 500)

ERROR_CATALOG: dict[str, CatalogEntry] = {
    entry.name: entry
    for entry in (PARSE_ERROR, INVALID_REQUEST, METHOD_NOT_FOUND, INVALID_PARAMS, INTERNAL_ERROR)
}
