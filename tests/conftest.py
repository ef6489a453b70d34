"""Shared pytest fixtures for fastapi-tempdata tests."""

from __future__ import annotations

from typing import Any

import pytest
from starlette.requests import Request


@pytest.fixture
def make_request() -> Any:
    """Factory for creating mock Starlette Request objects."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        query_string: str = "",
        client: tuple[str, int] | None = None,
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
            "client": client,
        }
        return Request(scope)

    return _make


@pytest.fixture
def session_request(make_request: Any) -> Any:
    """Factory for requests carrying a session cookie."""

    def _make(session: str = "abc", **kwargs: Any) -> Request:
        headers = dict(kwargs.pop("headers", None) or {})
        headers["cookie"] = f"session={session}"
        result: Request = make_request(headers=headers, **kwargs)
        return result

    return _make
