"""MCP resources: read-only JSON views of the repository's issues."""

from __future__ import annotations

import re
from collections.abc import Awaitable, Callable
from typing import Any

from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import Resource, ResourceTemplate

from github_issues_mcp.capabilities.common import JSON_MIME_TYPE, _to_json
from github_issues_mcp.github_client import IssueClient

LIST_URI = "resource://issues/list"
ISSUE_URI_TEMPLATE = "resource://issues/{number}"

# One captured run of decimal digits, nothing else after the prefix.
ISSUE_URI_PATTERN = re.compile(r"resource://issues/(\d+)", re.ASCII)

ResourceHandler = Callable[..., Awaitable[list[ReadResourceContents]]]


def _json_contents(data: Any) -> list[ReadResourceContents]:
    return [ReadResourceContents(content=_to_json(data), mime_type=JSON_MIME_TYPE)]


def templates() -> list[ResourceTemplate]:
    return [
        ResourceTemplate(
            uriTemplate=ISSUE_URI_TEMPLATE,
            name="Issue by Number",
            description="Fetch a specific issue",
            mimeType=JSON_MIME_TYPE,
        ),
    ]


def register(client: IssueClient) -> tuple[list[Resource], dict[str, ResourceHandler]]:
    """Return (resource_definitions, handler_map) keyed by literal URI or URI template."""
    resources = [
        Resource(
            uri=LIST_URI,  # type: ignore[arg-type]
            name="List Open Issues",
            description="Fetches the latest open issues from the configured GitHub repo",
            mimeType=JSON_MIME_TYPE,
        ),
        # Constructed without validation: AnyUrl would percent-encode the template braces.
        Resource.model_construct(
            uri=ISSUE_URI_TEMPLATE,
            name="Get Single Issue",
            description="Retrieve a single GitHub issue by its number",
            mimeType=JSON_MIME_TYPE,
        ),
    ]

    async def _read_issue_list() -> list[ReadResourceContents]:
        return _json_contents(await client.list_open_issues())

    async def _read_issue(number: int) -> list[ReadResourceContents]:
        return _json_contents(await client.get_issue(number))

    handlers: dict[str, ResourceHandler] = {
        LIST_URI: _read_issue_list,
        ISSUE_URI_TEMPLATE: _read_issue,
    }
    return resources, handlers
