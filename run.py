#!/usr/bin/env python3
"""
Personal Space backend launcher.

Usage:
    python run.py --help
    python run.py serve --reload -v
    python run.py config
    python run.py test unit
"""

import subprocess
import sys
from pathlib import Path

import click

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from modules.backend.core.config import get_app_config  # noqa: E402
from modules.backend.core.logging import get_logger, log_with_source, setup_logging  # noqa: E402

logger = get_logger("run")

TEST_PATHS = {
    "all": "tests/",
    "unit": "tests/unit",
    "integration": "tests/integration",
}


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable INFO level logging.")
@click.option("--debug", "-d", is_flag=True, help="Enable DEBUG level logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """Run the API server, inspect configuration or run the tests."""
    if not (PROJECT_ROOT / ".project_root").exists():
        raise click.ClickException(".project_root not found. Run from the project root.")

    level = "DEBUG" if debug else "INFO" if verbose else "WARNING"
    setup_logging(level=level, format_type="console")

    if ctx.invoked_subcommand is None:
        ctx.invoke(info)


@cli.command()
@click.option("--host", default=None, help="Bind address (defaults to application.yaml).")
@click.option("--port", default=None, type=int, help="Port (defaults to application.yaml).")
@click.option("--reload", is_flag=True, help="Restart on code changes.")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Start the API server under uvicorn."""
    server = get_app_config().application.server
    host = host or server.host
    port = port or server.port

    log_with_source(logger, "cli", "info", "Starting server", host=host, port=port, reload=reload)

    cmd = [
        sys.executable, "-m", "uvicorn", "modules.backend.main:app",
        "--host", host, "--port", str(port),
    ]
    if reload:
        cmd.append("--reload")

    click.echo(f"Serving on http://{host}:{port} (Ctrl+C to stop)")
    try:
        subprocess.run(cmd, check=True)
    except KeyboardInterrupt:
        log_with_source(logger, "cli", "info", "Server stopped")
    except subprocess.CalledProcessError as e:
        log_with_source(logger, "cli", "error", "Server exited", exit_code=e.returncode)
        sys.exit(e.returncode)


@cli.command()
def config() -> None:
    """Print every configuration section. Secrets from .env are never shown."""
    try:
        app_config = get_app_config()
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(f"Error loading configuration: {e}") from e

    for section in ("application", "logging", "features", "security", "storage"):
        click.secho(f"\n[{section}]", bold=True)
        for key, value in getattr(app_config, section).model_dump().items():
            click.echo(f"  {key}: {value}")


@cli.command()
@click.argument("suite", type=click.Choice(sorted(TEST_PATHS)), default="all")
def test(suite: str) -> None:
    """Run a test suite with pytest."""
    cmd = [sys.executable, "-m", "pytest", "-v", TEST_PATHS[suite]]
    log_with_source(logger, "cli", "info", "Running tests", suite=suite)
    sys.exit(subprocess.run(cmd).returncode)


@cli.command()
def info() -> None:
    """Show the application name, version and commands."""
    application = get_app_config().application
    click.echo(f"{application.name} {application.version}")
    click.echo(application.description)
    click.echo()
    click.echo("Commands: serve, config, test, info (see --help)")


if __name__ == "__main__":
    cli()
