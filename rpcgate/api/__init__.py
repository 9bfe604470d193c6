"""HTTP transport and JSON-RPC engine."""
