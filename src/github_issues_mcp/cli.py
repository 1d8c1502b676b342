"""Command-line entry point for the GitHub issues MCP server.

Usage:
    github-issues-mcp                                  # stdio transport
    github-issues-mcp --env-file config/.env           # custom env file
    github-issues-mcp --transport http --port 9000     # streamable HTTP
    github-issues-mcp --log-file /tmp/issues-mcp.log   # JSON logs to a file
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click

from github_issues_mcp import __version__
from github_issues_mcp.config import ENV_FILENAME, Settings, load_env_file
from github_issues_mcp.errors import ConfigurationError
from github_issues_mcp.logging import setup_logging
from github_issues_mcp.mcp_server import DEFAULT_HOST, DEFAULT_PORT, run_http, run_stdio


def _load_settings(env_file: Path) -> Settings:
    """Read the repository identity, exiting with status 1 if any part is missing."""
    load_env_file(env_file)
    try:
        return Settings.from_env()
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.version_option(version=__version__, prog_name="github-issues-mcp")
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=ENV_FILENAME,
    show_default=True,
    help="Dotenv file to read GITHUB_OWNER / GITHUB_REPO / GITHUB_TOKEN from (skipped if absent)",
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "http"]),
    default="stdio",
    show_default=True,
    help="stdio for local MCP clients, http for streamable HTTP",
)
@click.option("--host", default=DEFAULT_HOST, show_default=True, help="Bind address (http transport)")
@click.option("--port", default=DEFAULT_PORT, show_default=True, type=int, help="Port (http transport)")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write JSON logs here instead of stderr",
)
def cli(env_file: Path, transport: str, host: str, port: int, log_file: Path | None) -> None:
    """Serve the issues of one GitHub repository over MCP."""
    settings = _load_settings(env_file)
    logger = setup_logging(log_file)

    if transport == "http":
        click.echo(f"github-issues-mcp: http://{host}:{port}/mcp", err=True)
        run_http(settings, host=host, port=port, logger=logger)
    else:
        asyncio.run(run_stdio(settings, logger=logger))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
