"""CLI commands for rpcgate.

The CLI is the single entry point: `serve` loads a service module and starts
the HTTP server, `methods` shows what a service module would expose.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from rpcgate import __logo__, __version__
from rpcgate.cli.shared.logging_utils import configure_console_logging, ensure_rotating_log_file
from rpcgate.cli.shared.network_utils import is_port_in_use
from rpcgate.utils.exceptions import RpcGateError

app = typer.Typer(
    name="rpcgate",
    help=f"{__logo__} rpcgate - JSON-RPC over HTTP for Python services",
    no_args_is_help=True,
)

console = Console()


def _load_config(config_path: Optional[Path]):
    from rpcgate.config.loader import load_config

    try:
        return load_config(config_path)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _load_registry(target: str):
    from rpcgate.service.loader import load_service_registry

    try:
        return load_service_registry(target)
    except RpcGateError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)


@app.command()
def serve(
    service: str = typer.Argument("", help="Service module: dotted name or ./path/to/service"),
    version: Optional[str] = typer.Option(None, "--version", "-V", help="JSON-RPC version: 1.0 or 2.0"),
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Bind host"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file (default ~/.rpcgate/config.json)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Load a service module and serve its methods over JSON-RPC."""
    import uvicorn

    from rpcgate.api.rpc.engine import RpcEngine
    from rpcgate.api.rpc.response_builder import SUPPORTED_VERSIONS
    from rpcgate.api.server import create_app
    from rpcgate.config.loader import get_data_dir

    config = _load_config(config_path)
    target = service or config.service
    if not target:
        console.print("[red]No service module given.[/red] Pass it as an argument or set [cyan]service[/cyan] in the config.")
        raise typer.Exit(1)

    protocol_version = version or config.protocol.version
    if protocol_version not in SUPPORTED_VERSIONS:
        console.print(f"[red]Unsupported JSON-RPC version {protocol_version!r}.[/red] Use 1.0 or 2.0.")
        raise typer.Exit(1)
    bind_host = host or config.server.host
    bind_port = port or config.server.port

    if is_port_in_use(bind_host, bind_port):
        console.print(
            f"[red]Port {bind_port} is already in use.[/red] "
            f"Close the process using it, or pass [cyan]--port[/cyan] (current: {bind_host}:{bind_port})."
        )
        raise typer.Exit(1)

    level = "DEBUG" if verbose else config.logging.level
    configure_console_logging(level)
    if config.logging.file_enabled:
        log_path = ensure_rotating_log_file("serve", get_data_dir(), config.logging, level=level)
        console.print(f"[dim]Logs: {log_path}[/dim]")

    registry = _load_registry(target)
    engine = RpcEngine(
        registry,
        version=protocol_version,
        split_invocation_errors=config.dispatch.split_invocation_errors,
        pending_timeout=config.dispatch.pending_timeout_seconds,
    )
    console.print(
        f"{__logo__} Serving [bold]{target}[/bold] ({len(registry)} methods) "
        f"as JSON-RPC {protocol_version} on http://{bind_host}:{bind_port}{config.server.path}"
    )
    uvicorn.run(
        create_app(engine, path=config.server.path),
        host=bind_host,
        port=bind_port,
        log_level="debug" if verbose else "info",
    )


@app.command()
def methods(
    service: str = typer.Argument(..., help="Service module: dotted name or ./path/to/service"),
):
    """List the methods a service module exposes."""
    registry = _load_registry(service)
    table = Table(title=f"{service}")
    table.add_column("Method", style="cyan")
    table.add_column("Arity", justify="right")
    table.add_column("Parameters")
    for entry in registry.describe():
        table.add_row(entry["name"], str(entry["arity"]), ", ".join(entry["parameters"]) or "-")
    console.print(table)


@app.command()
def init(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Where to write (default ~/.rpcgate/config.json)"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
):
    """Write a default config file."""
    from rpcgate.config.loader import get_config_path, save_config
    from rpcgate.config.schema import Config

    path = config_path or get_config_path()
    if path.exists() and not force:
        console.print(f"[yellow]Config already exists at {path}[/yellow] (use [cyan]--force[/cyan] to overwrite)")
        raise typer.Exit(1)
    written = save_config(Config(), path)
    console.print(f"[green]✓[/green] Wrote config to {written}")


@app.command("version")
def show_version():
    """Show rpcgate version."""
    console.print(f"{__logo__} rpcgate v{__version__}")


if __name__ == "__main__":
    app()
