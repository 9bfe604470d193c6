"""Version-correct JSON-RPC response envelopes."""

from __future__ import annotations

from typing import Any

from rpcgate.api.rpc.error_catalog import CatalogEntry

VERSION_1 = "1.0"
VERSION_2 = "2.0"
SUPPORTED_VERSIONS = (VERSION_1, VERSION_2)


def build_response(
    version: str,
    result: Any = None,
    error: dict[str, Any] | None = None,
    req_id: Any = None,
) -> dict[str, Any]:
    """
    Shape a result or error into the envelope of the given protocol version.

    2.0 carries exactly one of `result`/`error`; 1.0 always carries both keys
    with the inapplicable one set to null.
    """
    if version == VERSION_2:
        envelope: dict[str, Any] = {"jsonrpc": VERSION_2}
        if error is not None:
            envelope["error"] = error
        else:
            envelope["result"] = result
        envelope["id"] = req_id
        return envelope
    return {
        "result": None if error is not None else result,
        "error": error,
        "id": req_id,
    }


def build_error_response(
    version: str,
    entry: CatalogEntry,
    req_id: Any = None,
    data: Any = None,
) -> dict[str, Any]:
    """Envelope for a catalog error."""
    return build_response(version, error=entry.error_object(data), req_id=req_id)
