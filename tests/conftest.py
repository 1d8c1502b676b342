"""Shared pytest fixtures for github-issues-mcp tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
from click.testing import CliRunner

from github_issues_mcp.config import Settings
from github_issues_mcp.dispatcher import Dispatcher
from github_issues_mcp.github_client import IssueClient
from tests._github_fake import OWNER, REPO, TOKEN, FakeGitHub


@pytest.fixture
def settings() -> Settings:
    return Settings(owner=OWNER, repo=REPO, token=TOKEN)


@pytest.fixture
def github() -> FakeGitHub:
    """Fake upstream pre-populated with two open issues (#1, #2) and one closed (#3)."""
    fake = FakeGitHub()
    fake.add_issue(1, "First bug", labels=["bug"])
    fake.add_issue(2, "Second bug")
    fake.add_issue(3, "Old bug", state="closed")
    return fake


@pytest.fixture
async def client(settings: Settings, github: FakeGitHub) -> AsyncGenerator[IssueClient, None]:
    async with IssueClient(settings, transport=github.transport) as c:
        yield c


@pytest.fixture
def dispatcher(client: IssueClient) -> Dispatcher:
    return Dispatcher(client)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Click CLI test runner."""
    return CliRunner()
