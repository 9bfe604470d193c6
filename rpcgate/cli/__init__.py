"""CLI module for rpcgate."""
