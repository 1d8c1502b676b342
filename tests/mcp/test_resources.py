"""Resource listing and URI routing through the dispatcher."""

from __future__ import annotations

import json

import pytest

from github_issues_mcp.dispatcher import Dispatcher
from github_issues_mcp.errors import NotFoundError, UpstreamError
from tests._github_fake import FakeGitHub


class TestListResources:
    async def test_two_fixed_resources(self, dispatcher: Dispatcher) -> None:
        resources = await dispatcher.list_resources()
        assert [r.name for r in resources] == ["List Open Issues", "Get Single Issue"]
        assert str(resources[0].uri) == "resource://issues/list"
        assert all(r.mimeType == "application/json" for r in resources)

    async def test_template_resource_keeps_braces(self, dispatcher: Dispatcher) -> None:
        resources = await dispatcher.list_resources()
        assert str(resources[1].uri) == "resource://issues/{number}"

    async def test_one_template(self, dispatcher: Dispatcher) -> None:
        templates = await dispatcher.list_resource_templates()
        assert len(templates) == 1
        assert templates[0].uriTemplate == "resource://issues/{number}"
        assert templates[0].name == "Issue by Number"

    async def test_listing_is_idempotent(self, dispatcher: Dispatcher) -> None:
        first = await dispatcher.list_resources()
        await dispatcher.read_resource("resource://issues/list")
        second = await dispatcher.list_resources()
        assert first == second
        assert await dispatcher.list_resource_templates() == await dispatcher.list_resource_templates()

    async def test_listing_never_calls_upstream(self, dispatcher: Dispatcher, github: FakeGitHub) -> None:
        await dispatcher.list_resources()
        await dispatcher.list_resource_templates()
        assert github.requests == []


class TestReadResource:
    async def test_read_issue_list(self, dispatcher: Dispatcher, github: FakeGitHub) -> None:
        contents = await dispatcher.read_resource("resource://issues/list")
        assert len(contents) == 1
        assert contents[0].mime_type == "application/json"
        issues = json.loads(contents[0].content)
        assert [i["number"] for i in issues] == [1, 2]
        assert len(github.requests) == 1

    async def test_read_single_issue(self, dispatcher: Dispatcher, github: FakeGitHub) -> None:
        contents = await dispatcher.read_resource("resource://issues/2")
        issue = json.loads(contents[0].content)
        assert issue["number"] == 2
        assert issue["title"] == "Second bug"
        assert github.requests[0].url.path.endswith("/issues/2")

    async def test_content_is_pretty_printed(self, dispatcher: Dispatcher) -> None:
        contents = await dispatcher.read_resource("resource://issues/1")
        assert '\n  "number": 1' in contents[0].content

    async def test_unreachable_issue_is_upstream_error(self, dispatcher: Dispatcher) -> None:
        with pytest.raises(UpstreamError) as exc_info:
            await dispatcher.read_resource("resource://issues/42")
        assert exc_info.value.status_code == 404

    @pytest.mark.parametrize(
        "uri",
        [
            "resource://issues/abc",
            "resource://issues/",
            "resource://issues/12/comments",
            "resource://issues/-1",
            "resource://issues/1.5",
            "resource://issues/{number}",
            "resource://pulls/1",
            "issues/1",
            "",
        ],
    )
    async def test_unknown_uri_not_found(self, dispatcher: Dispatcher, github: FakeGitHub, uri: str) -> None:
        with pytest.raises(NotFoundError, match="Resource not found"):
            await dispatcher.read_resource(uri)
        assert github.requests == []
