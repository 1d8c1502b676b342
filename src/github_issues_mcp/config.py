"""Startup configuration for the GitHub issues MCP server.

The repository identity (owner, repo, token) is read once from the process
environment, optionally seeded from a ``.env`` file, and then passed around
as an immutable :class:`Settings` value.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from github_issues_mcp.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
ENV_FILENAME = ".env"

OWNER_VAR = "GITHUB_OWNER"
REPO_VAR = "GITHUB_REPO"
TOKEN_VAR = "GITHUB_TOKEN"
API_URL_VAR = "GITHUB_API_URL"

REQUIRED_VARS = (OWNER_VAR, REPO_VAR, TOKEN_VAR)


@dataclass(frozen=True)
class Settings:
    """Repository identity and API location, fixed for the process lifetime."""

    owner: str
    repo: str
    token: str = field(repr=False)
    api_url: str = DEFAULT_API_URL

    @property
    def repo_url(self) -> str:
        """Base URL of the repository's REST endpoints (``/repos/{owner}/{repo}``)."""
        return f"{self.api_url.rstrip('/')}/repos/{self.owner}/{self.repo}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (defaults to ``os.environ``).

        Raises ConfigurationError naming every required variable that is
        unset or blank.
        """
        env = os.environ if environ is None else environ
        values = {name: env.get(name, "").strip() for name in REQUIRED_VARS}
        missing = [name for name, value in values.items() if not value]
        if missing:
            msg = f"{', '.join(missing)} must be set in the environment"
            raise ConfigurationError(msg)
        return cls(
            owner=values[OWNER_VAR],
            repo=values[REPO_VAR],
            token=values[TOKEN_VAR],
            api_url=env.get(API_URL_VAR, "").strip() or DEFAULT_API_URL,
        )


def load_env_file(path: Path) -> bool:
    """Load *path* into ``os.environ`` without overriding existing variables.

    Returns True when the file existed and was read.
    """
    if not path.is_file():
        logger.debug("No env file at %s", path)
        return False
    load_dotenv(path, override=False)
    logger.debug("Loaded environment from %s", path)
    return True
