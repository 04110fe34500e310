"""HTTP server CLI command."""

import click
from rich.console import Console

from cli.config import load_config_model

console = Console()


@click.command()
@click.option("--host", help="Bind address (default from config)")
@click.option("--port", type=int, help="Port (default from config or $PORT)")
def serve(host: str | None, port: int | None):
    """Serve the JSON API with uvicorn."""
    import uvicorn

    config = load_config_model()
    host = host or config.server.host
    port = port or config.server.port

    console.print(f"[green]Listening[/] on http://{host}:{port}")
    uvicorn.run("web.app:app", host=host, port=port, log_config=None)
