"""github-issues-mcp: MCP server for the issues of a single GitHub repository."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("github-issues-mcp")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

from github_issues_mcp.config import Settings
from github_issues_mcp.github_client import IssueClient

__all__ = ["IssueClient", "Settings", "__version__"]
