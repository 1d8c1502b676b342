"""TypedDicts for tool handler responses."""

from __future__ import annotations

from typing import Any, TypedDict

# Upstream issue payloads are passed through untouched.
Issue = dict[str, Any]


class CreatedIssue(TypedDict):
    """Result of ``tool://create-issue``: the new issue's number and web URL."""

    issue_number: int
    url: str


class CreatedComment(TypedDict):
    """Result of ``tool://comment-issue``."""

    comment_url: str
