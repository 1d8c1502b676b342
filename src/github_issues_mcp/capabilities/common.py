"""Pure helpers shared across the capability modules."""

from __future__ import annotations

import json
from typing import Any, TypeVar, cast

from mcp.types import TextContent

from github_issues_mcp.errors import InvalidArgumentsError

_T = TypeVar("_T")

JSON_MIME_TYPE = "application/json"


def _parse_args(arguments: dict[str, Any], cls: type[_T]) -> _T:
    """Cast MCP arguments to a typed dict for static analysis.

    The MCP SDK validates tool arguments against the tool's JSON Schema
    before the handler runs. This cast() provides mypy narrowing only.
    """
    return cast(_T, arguments)


def _to_json(content: object) -> str:
    return json.dumps(content, indent=2, default=str)


def _text(content: object) -> list[TextContent]:
    if isinstance(content, str):
        return [TextContent(type="text", text=content)]
    return [TextContent(type="text", text=_to_json(content))]


def _issue_number(value: Any) -> int:
    """Normalise an issue number received as a JSON ``number``.

    ``7.0`` becomes ``7``; anything non-integral is rejected.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    msg = f"issue_number must be an integer, got {value!r}"
    raise InvalidArgumentsError(msg)
