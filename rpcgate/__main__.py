"""
Entry point for running rpcgate as a module: python -m rpcgate
"""

from rpcgate.cli.commands import app

if __name__ == "__main__":
    app()
