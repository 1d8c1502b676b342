"""Routes MCP requests to the capability handlers.

The dispatcher owns no mutable state: it builds the resource, prompt and
tool tables once from an :class:`IssueClient` and then only looks handlers
up by exact key (or, for single issues, by the numeric URI pattern).
"""

from __future__ import annotations

import logging
import time
from typing import Any

from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import GetPromptResult, Prompt, Resource, ResourceTemplate, TextContent, Tool

from github_issues_mcp.capabilities import prompts, resources, tools
from github_issues_mcp.errors import NotFoundError
from github_issues_mcp.github_client import IssueClient


class Dispatcher:
    """Stateless request router over the issue capabilities."""

    def __init__(self, client: IssueClient, *, logger: logging.Logger | None = None) -> None:
        self.client = client
        self._logger = logger
        self._resources, self._resource_handlers = resources.register(client)
        self._templates = resources.templates()
        self._prompts, self._prompt_handlers = prompts.register()
        self._tools, self._tool_handlers = tools.register(client)

    # -- resources -----------------------------------------------------------

    async def list_resources(self) -> list[Resource]:
        return list(self._resources)

    async def list_resource_templates(self) -> list[ResourceTemplate]:
        return list(self._templates)

    async def read_resource(self, uri: Any) -> list[ReadResourceContents]:
        """Read ``resource://issues/list`` or ``resource://issues/{number}``.

        The literal URI is tried first, then the numeric pattern. Anything
        else, including non-digit issue segments, is not found.
        """
        key = str(uri)
        if key == resources.LIST_URI:
            return await self._resource_handlers[resources.LIST_URI]()
        match = resources.ISSUE_URI_PATTERN.fullmatch(key)
        if match:
            return await self._resource_handlers[resources.ISSUE_URI_TEMPLATE](int(match.group(1)))
        raise NotFoundError("resource", key)

    # -- prompts -------------------------------------------------------------

    async def list_prompts(self) -> list[Prompt]:
        return list(self._prompts)

    async def get_prompt(self, name: str, arguments: dict[str, Any] | None = None) -> GetPromptResult:
        handler = self._prompt_handlers.get(name)
        if handler is None:
            raise NotFoundError("prompt", name)
        return handler(arguments or {})

    # -- tools ---------------------------------------------------------------

    async def list_tools(self) -> list[Tool]:
        return list(self._tools)

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> list[TextContent]:
        handler = self._tool_handlers.get(name)
        if handler is None:
            raise NotFoundError("tool", name)
        arguments = arguments or {}
        t0 = time.monotonic()

        try:
            result = await handler(arguments)
        except Exception as exc:
            if self._logger:
                self._logger.error(
                    "tool_error",
                    extra={"tool": name, "args_data": arguments, "error": getattr(exc, "code", type(exc).__name__)},
                    exc_info=True,
                )
            raise
        else:
            duration_ms = round((time.monotonic() - t0) * 1000, 1)
            if self._logger:
                self._logger.info("tool_call", extra={"tool": name, "args_data": arguments, "duration_ms": duration_ms})
            return result
