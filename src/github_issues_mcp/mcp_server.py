"""MCP server exposing the issues of one GitHub repository.

Wires a :class:`~github_issues_mcp.dispatcher.Dispatcher` into the low-level
``mcp`` server and runs it over stdio (newline-delimited JSON-RPC) or
streamable HTTP.

Usage:
    github-issues-mcp                          # stdio, reads GITHUB_* from env / .env
    github-issues-mcp --transport http         # streamable HTTP on 127.0.0.1:8377/mcp
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import AsyncIterator, Iterable
from typing import Any

from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    ErrorData,
    GetPromptResult,
    Prompt,
    Resource,
    ResourceTemplate,
    TextContent,
    Tool,
)

from github_issues_mcp import __version__
from github_issues_mcp.config import Settings
from github_issues_mcp.dispatcher import Dispatcher
from github_issues_mcp.errors import InvalidArgumentsError, IssuesMcpError, NotFoundError, UpstreamError
from github_issues_mcp.github_client import IssueClient

SERVER_NAME = "github-issues-mcp"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8377

# MCP reserves -32002 for "resource not found".
RESOURCE_NOT_FOUND = -32002


def _to_mcp_error(exc: IssuesMcpError) -> McpError:
    """Translate a domain error into a JSON-RPC error response."""
    if isinstance(exc, NotFoundError):
        code = RESOURCE_NOT_FOUND if exc.kind == "resource" else INVALID_PARAMS
        return McpError(ErrorData(code=code, message=str(exc), data={"code": exc.code, exc.kind: exc.key}))
    if isinstance(exc, InvalidArgumentsError):
        return McpError(ErrorData(code=INVALID_PARAMS, message=str(exc), data={"code": exc.code}))
    if isinstance(exc, UpstreamError):
        return McpError(
            ErrorData(
                code=INTERNAL_ERROR,
                message=str(exc),
                data={"code": exc.code, "status_code": exc.status_code, "url": exc.url},
            )
        )
    return McpError(ErrorData(code=INTERNAL_ERROR, message=str(exc), data={"code": exc.code}))


def create_server(dispatcher: Dispatcher) -> Server:
    """Build a low-level MCP server whose handlers all delegate to *dispatcher*."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_resources()  # type: ignore[untyped-decorator,no-untyped-call]
    async def list_resources() -> list[Resource]:
        return await dispatcher.list_resources()

    @server.list_resource_templates()  # type: ignore[untyped-decorator,no-untyped-call]
    async def list_resource_templates() -> list[ResourceTemplate]:
        return await dispatcher.list_resource_templates()

    @server.read_resource()  # type: ignore[untyped-decorator,no-untyped-call]
    async def read_resource(uri: Any) -> Iterable[ReadResourceContents]:
        try:
            return await dispatcher.read_resource(uri)
        except IssuesMcpError as exc:
            raise _to_mcp_error(exc) from exc

    @server.list_prompts()  # type: ignore[untyped-decorator,no-untyped-call]
    async def list_prompts() -> list[Prompt]:
        return await dispatcher.list_prompts()

    @server.get_prompt()  # type: ignore[untyped-decorator,no-untyped-call]
    async def get_prompt(name: str, arguments: dict[str, str] | None = None) -> GetPromptResult:
        try:
            return await dispatcher.get_prompt(name, arguments)
        except IssuesMcpError as exc:
            raise _to_mcp_error(exc) from exc

    @server.list_tools()  # type: ignore[untyped-decorator,no-untyped-call]
    async def list_tools() -> list[Tool]:
        return await dispatcher.list_tools()

    # Exceptions raised here come back to the client as an isError tool result.
    @server.call_tool()  # type: ignore[untyped-decorator]
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        return await dispatcher.call_tool(name, arguments)

    return server


# ---------------------------------------------------------------------------
# HTTP transport factory
# ---------------------------------------------------------------------------


class _McpAsgiApp:
    """ASGI callable forwarding every request to the streamable-HTTP session manager."""

    def __init__(self, session_manager: Any) -> None:
        self._session_manager = session_manager

    async def __call__(self, scope: Any, receive: Any, send: Any) -> None:
        try:
            await self._session_manager.handle_request(scope, receive, send)
        except RuntimeError:
            # Session manager not started (lifespan not entered).
            from starlette.responses import JSONResponse

            resp = JSONResponse(
                {"error": "MCP session manager not initialized", "code": "unavailable"},
                status_code=503,
            )
            await resp(scope, receive, send)


def create_mcp_app(server: Server) -> tuple[Any, Any]:
    """Create an ASGI app + lifespan hook for MCP streamable-HTTP.

    Returns ``(asgi_app, lifespan_context_manager)``; the lifespan must be
    entered before the first request so the session manager's task group
    is running.
    """
    from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

    session_manager = StreamableHTTPSessionManager(
        app=server,
        json_response=True,
        stateless=True,
    )
    return _McpAsgiApp(session_manager), session_manager.run


def create_http_app(dispatcher: Dispatcher, *, logger: logging.Logger | None = None) -> Any:
    """Starlette app serving the MCP endpoint at ``/mcp``.

    The dispatcher's HTTP client is closed when the app shuts down.
    """
    from starlette.applications import Starlette
    from starlette.routing import Route

    mcp_handler, mcp_lifespan = create_mcp_app(create_server(dispatcher))

    @contextlib.asynccontextmanager
    async def _lifespan(app: Starlette) -> AsyncIterator[None]:
        async with mcp_lifespan():
            if logger:
                logger.info("mcp_server_start", extra={"tool": "server", "args_data": {"transport": "http"}})
            try:
                yield
            finally:
                await dispatcher.client.aclose()

    return Starlette(routes=[Route("/mcp", endpoint=mcp_handler)], lifespan=_lifespan)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


async def run_stdio(settings: Settings, *, logger: logging.Logger | None = None) -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    async with IssueClient(settings) as client:
        server = create_server(Dispatcher(client, logger=logger))
        if logger:
            logger.info(
                "mcp_server_start",
                extra={"tool": "server", "args_data": {"transport": "stdio", "repo": f"{settings.owner}/{settings.repo}"}},
            )
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())


def run_http(
    settings: Settings,
    *,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    logger: logging.Logger | None = None,
) -> None:
    """Serve MCP streamable-HTTP with uvicorn (blocks until shutdown)."""
    import uvicorn

    dispatcher = Dispatcher(IssueClient(settings), logger=logger)
    app = create_http_app(dispatcher, logger=logger)
    uvicorn.run(app, host=host, port=port, log_level="warning")
