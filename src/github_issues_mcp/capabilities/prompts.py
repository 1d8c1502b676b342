"""MCP prompts: natural-language requests that ask the model to use the tools.

Rendering a prompt never touches the network. Arguments are embedded in the
message text verbatim; only the optional label list is serialised, as a JSON
array.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from mcp.types import GetPromptResult, Prompt, PromptArgument, PromptMessage, TextContent

from github_issues_mcp.errors import InvalidArgumentsError

CREATE_ISSUE = "prompt://create-issue"
COMMENT_ISSUE = "prompt://comment-issue"

PromptHandler = Callable[[dict[str, Any]], GetPromptResult]


def _require(prompt: Prompt, arguments: dict[str, Any]) -> None:
    missing = [a.name for a in prompt.arguments or [] if a.required and arguments.get(a.name) in (None, "")]
    if missing:
        msg = f"Missing required argument(s) for {prompt.name}: {', '.join(missing)}"
        raise InvalidArgumentsError(msg)


def _coerce_labels(raw: Any) -> list[str] | None:
    """Accept labels as a list, a JSON array string, or a comma-separated string.

    MCP transports prompt arguments as strings, so a client may send
    ``'["bug"]'`` or ``"bug, ui"`` as well as a real list.
    """
    if raw is None:
        return None
    if isinstance(raw, list):
        return [str(item) for item in raw]
    text = str(raw).strip()
    if text.startswith("["):
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, list):
            return [str(item) for item in parsed]
    labels = [part.strip() for part in text.split(",") if part.strip()]
    return labels or None


def _user_message(text: str) -> PromptMessage:
    return PromptMessage(role="user", content=TextContent(type="text", text=text))


def render_create_issue(title: Any, body: Any, labels: list[str] | None = None) -> str:
    clause = f" and labels {json.dumps(labels)}" if labels is not None else ""
    return f'Please create an issue titled "{title}" with description "{body}"{clause}.'


def render_comment_issue(issue_number: Any, comment: Any) -> str:
    return f'Please add a comment to issue #{issue_number}: "{comment}".'


def register() -> tuple[list[Prompt], dict[str, PromptHandler]]:
    """Return (prompt_definitions, handler_map) for the issue prompts."""
    create_prompt = Prompt(
        name=CREATE_ISSUE,
        description="Generate a prompt to create a GitHub issue",
        arguments=[
            PromptArgument(name="title", description="Issue title", required=True),
            PromptArgument(name="body", description="Issue body/content", required=True),
            PromptArgument(name="labels", description="Optional labels", required=False),
        ],
    )
    comment_prompt = Prompt(
        name=COMMENT_ISSUE,
        description="Generate a prompt to comment on a GitHub issue",
        arguments=[
            PromptArgument(name="issue_number", description="Target issue number", required=True),
            PromptArgument(name="comment", description="Comment text", required=True),
        ],
    )

    def _handle_create_issue(arguments: dict[str, Any]) -> GetPromptResult:
        _require(create_prompt, arguments)
        text = render_create_issue(arguments["title"], arguments["body"], _coerce_labels(arguments.get("labels")))
        return GetPromptResult(description=create_prompt.description, messages=[_user_message(text)])

    def _handle_comment_issue(arguments: dict[str, Any]) -> GetPromptResult:
        _require(comment_prompt, arguments)
        text = render_comment_issue(arguments["issue_number"], arguments["comment"])
        return GetPromptResult(description=comment_prompt.description, messages=[_user_message(text)])

    handlers: dict[str, PromptHandler] = {
        CREATE_ISSUE: _handle_create_issue,
        COMMENT_ISSUE: _handle_comment_issue,
    }
    return [create_prompt, comment_prompt], handlers
