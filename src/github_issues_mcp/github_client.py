"""Thin async client for the issue endpoints of one GitHub repository.

Every public method performs exactly one HTTP request. There is no retry,
pagination or rate-limit handling: any non-2xx answer becomes an
:class:`~github_issues_mcp.errors.UpstreamError`.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from github_issues_mcp import __version__
from github_issues_mcp.config import Settings
from github_issues_mcp.errors import UpstreamError
from github_issues_mcp.types import CreatedComment, CreatedIssue, Issue

logger = logging.getLogger(__name__)

GITHUB_MEDIA_TYPE = "application/vnd.github+json"
GITHUB_API_VERSION = "2022-11-28"

# Cap on how much of a non-JSON error body is echoed back to the caller.
_MAX_ERROR_TEXT = 200


def _error_detail(response: httpx.Response) -> str:
    """Extract a human-readable error from a GitHub error response."""
    try:
        data = response.json()
    except ValueError:
        return response.text[:_MAX_ERROR_TEXT] if response.text else response.reason_phrase
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return str(data)[:_MAX_ERROR_TEXT]


class IssueClient:
    """Issue API client bound to ``/repos/{owner}/{repo}``."""

    def __init__(self, settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.settings = settings
        self._http = httpx.AsyncClient(
            base_url=settings.repo_url,
            headers={
                "Authorization": f"Bearer {settings.token}",
                "Accept": GITHUB_MEDIA_TYPE,
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
                "User-Agent": f"github-issues-mcp/{__version__}",
            },
            transport=transport,
        )

    async def __aenter__(self) -> IssueClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.RequestError as exc:
            raise UpstreamError(None, str(exc) or type(exc).__name__, method=method, url=str(exc.request.url)) from exc
        if not response.is_success:
            detail = _error_detail(response)
            logger.debug("GitHub %s %s failed: %d %s", method, path, response.status_code, detail)
            raise UpstreamError(response.status_code, detail, method=method, url=str(response.request.url))
        return response.json()

    # -- reads ---------------------------------------------------------------

    async def list_open_issues(self) -> list[Issue]:
        """Return the repository's open issues (first page only)."""
        result: list[Issue] = await self._request("GET", "/issues", params={"state": "open"})
        return result

    async def get_issue(self, number: int) -> Issue:
        result: Issue = await self._request("GET", f"/issues/{number}")
        return result

    # -- writes --------------------------------------------------------------

    async def create_issue(self, title: str, body: str, labels: list[str] | None = None) -> CreatedIssue:
        """Open a new issue; ``labels`` is sent only when given."""
        payload: dict[str, Any] = {"title": title, "body": body}
        if labels is not None:
            payload["labels"] = labels
        data = await self._request("POST", "/issues", json=payload)
        return CreatedIssue(issue_number=data["number"], url=data["html_url"])

    async def add_comment(self, number: int, text: str) -> CreatedComment:
        data = await self._request("POST", f"/issues/{number}/comments", json={"body": text})
        return CreatedComment(comment_url=data["html_url"])
