"""Typer CLI root application with serve command."""

import typer

from reach_api.core.config import get_settings
from reach_api.core.logging import setup_logging

app = typer.Typer(name="reach-api", help="Outreach visit collection and dashboard CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("127.0.0.1", "--host", help="Bind host"),
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "reach_api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from reach_api.cli.dashboard_cmd import dashboard_app
    from reach_api.cli.db_cmd import db_app
    from reach_api.cli.visits_cmd import visits_app

    app.add_typer(db_app, name="db", help="Database migration commands")
    app.add_typer(visits_app, name="visits", help="Visit (map pin) commands")
    app.add_typer(dashboard_app, name="dashboard", help="Dashboard statistics commands")


_register_subcommands()
