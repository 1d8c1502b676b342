"""Error taxonomy shared by the client, the dispatcher and the server."""

from __future__ import annotations


class IssuesMcpError(Exception):
    """Base class for all github-issues-mcp errors."""

    code = "error"


class ConfigurationError(IssuesMcpError):
    """A required configuration value is missing at startup."""

    code = "configuration_error"


class NotFoundError(IssuesMcpError):
    """No resource, prompt or tool is registered under the requested key."""

    code = "not_found"

    def __init__(self, kind: str, key: str) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"{kind.capitalize()} not found: {key}")


class InvalidArgumentsError(IssuesMcpError):
    """A prompt was requested without one of its required arguments."""

    code = "invalid_arguments"


class UpstreamError(IssuesMcpError):
    """The GitHub API answered with a non-success status, or could not be reached.

    ``status_code`` is ``None`` for transport failures (DNS, connection reset).
    A 404 is reported as-is; callers inspect ``status_code`` to tell it apart.
    """

    code = "upstream_error"

    def __init__(self, status_code: int | None, message: str, *, method: str = "", url: str = "") -> None:
        self.status_code = status_code
        self.message = message
        self.method = method
        self.url = url
        prefix = f"GitHub API error {status_code}" if status_code is not None else "GitHub API unreachable"
        target = f" ({method} {url})" if method else ""
        super().__init__(f"{prefix}{target}: {message}")
