"""MCP tools: the two mutating actions, each a single upstream write."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, NotRequired, TypedDict

from mcp.types import TextContent, Tool

from github_issues_mcp.capabilities.common import _issue_number, _parse_args, _text
from github_issues_mcp.github_client import IssueClient

CREATE_ISSUE = "tool://create-issue"
COMMENT_ISSUE = "tool://comment-issue"

ToolHandler = Callable[[dict[str, Any]], Awaitable[list[TextContent]]]


class CreateIssueArgs(TypedDict):
    title: str
    body: str
    labels: NotRequired[list[str]]


class CommentIssueArgs(TypedDict):
    issue_number: int | float
    comment: str


def register(client: IssueClient) -> tuple[list[Tool], dict[str, ToolHandler]]:
    """Return (tool_definitions, handler_map) for the issue tools."""
    tools = [
        Tool(
            name=CREATE_ISSUE,
            description="Create a new GitHub issue",
            inputSchema={
                "type": "object",
                "properties": {
                    "title": {"type": "string", "description": "Issue title"},
                    "body": {"type": "string", "description": "Issue body (Markdown)"},
                    "labels": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Labels to attach; must already exist in the repository",
                    },
                },
                "required": ["title", "body"],
            },
        ),
        Tool(
            name=COMMENT_ISSUE,
            description="Add a comment to an existing GitHub issue",
            inputSchema={
                "type": "object",
                "properties": {
                    "issue_number": {"type": "number", "description": "Target issue number"},
                    "comment": {"type": "string", "description": "Comment text (Markdown)"},
                },
                "required": ["issue_number", "comment"],
            },
        ),
    ]

    async def _handle_create_issue(arguments: dict[str, Any]) -> list[TextContent]:
        args = _parse_args(arguments, CreateIssueArgs)
        created = await client.create_issue(args["title"], args["body"], args.get("labels"))
        return _text(created)

    async def _handle_comment_issue(arguments: dict[str, Any]) -> list[TextContent]:
        args = _parse_args(arguments, CommentIssueArgs)
        number = _issue_number(args["issue_number"])
        created = await client.add_comment(number, args["comment"])
        return _text(created)

    handlers: dict[str, ToolHandler] = {
        CREATE_ISSUE: _handle_create_issue,
        COMMENT_ISSUE: _handle_comment_issue,
    }
    return tools, handlers
