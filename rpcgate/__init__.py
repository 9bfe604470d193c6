"""
rpcgate - JSON-RPC 1.0/2.0 over HTTP for a registry of Python callables.
"""

__version__ = "0.1.0"
__logo__ = "⇄"
