"""Verify the shape of the capability registries."""

import httpx
from mcp.types import Prompt, Resource, Tool

from github_issues_mcp.capabilities import prompts, resources, tools
from github_issues_mcp.config import Settings
from github_issues_mcp.github_client import IssueClient


def _client() -> IssueClient:
    # MockTransport holds no sockets, so the client needs no closing.
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))
    return IssueClient(Settings(owner="o", repo="r", token="t"), transport=transport)


def test_tools_register_shape() -> None:
    """register() returns (list[Tool], dict[str, Callable]) with matching keys."""
    defs, handlers = tools.register(_client())
    assert all(isinstance(t, Tool) for t in defs)
    assert all(callable(fn) for fn in handlers.values())
    names = [t.name for t in defs]
    assert len(names) == len(set(names)), "duplicate tool name"
    assert set(names) == set(handlers), f"tool/handler mismatch: {set(names) ^ set(handlers)}"


def test_prompts_register_shape() -> None:
    defs, handlers = prompts.register()
    assert all(isinstance(p, Prompt) for p in defs)
    names = [p.name for p in defs]
    assert len(names) == len(set(names)), "duplicate prompt name"
    assert set(names) == set(handlers)


def test_resources_register_shape() -> None:
    defs, handlers = resources.register(_client())
    assert all(isinstance(r, Resource) for r in defs)
    assert set(handlers) == {resources.LIST_URI, resources.ISSUE_URI_TEMPLATE}
    assert [t.uriTemplate for t in resources.templates()] == [resources.ISSUE_URI_TEMPLATE]


def test_issue_uri_pattern() -> None:
    assert resources.ISSUE_URI_PATTERN.fullmatch("resource://issues/42")
    assert not resources.ISSUE_URI_PATTERN.fullmatch("resource://issues/list")
    # Only ASCII decimal digits count.
    assert not resources.ISSUE_URI_PATTERN.fullmatch("resource://issues/٤٢")


def test_public_names() -> None:
    assert tools.CREATE_ISSUE == "tool://create-issue"
    assert tools.COMMENT_ISSUE == "tool://comment-issue"
    assert prompts.CREATE_ISSUE == "prompt://create-issue"
    assert prompts.COMMENT_ISSUE == "prompt://comment-issue"
