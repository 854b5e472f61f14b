"""Fake implementations for testing the client."""

import json
from collections.abc import Mapping
from typing import Any

from tumblr_api.protocols import Response


class FakeClient:
    """In-memory fake for TumblrApi.

    Stores predefined responses and records all calls for assertions.
    """

    def __init__(self) -> None:
        self.responses: dict[str, Response] = {}
        self.calls: list[tuple[str, dict[str, Any] | None]] = []

    def add_response(
        self,
        path: str,
        data: Any = None,
        *,
        body: bytes | None = None,
        headers: Mapping[str, str] | None = None,
        status: int = 200,
    ) -> None:
        """Register a response for a given API path, from JSON data or raw bytes."""
        if body is None:
            body = b"" if data is None else json.dumps(data).encode("utf-8")
        self.responses[path] = Response(body=body, headers=dict(headers or {}), status=status)

    def get(self, path: str) -> Response:
        """Return the predefined response and record the call."""
        self.calls.append((path, None))
        return self._lookup(path)

    def get_with_params(self, path: str, params: Mapping[str, Any]) -> Response:
        """Return the predefined response and record the call with its params."""
        self.calls.append((path, dict(params)))
        return self._lookup(path)

    def _lookup(self, path: str) -> Response:
        if path not in self.responses:
            msg = f"FakeClient: no response registered for {path!r}"
            raise KeyError(msg)
        return self.responses[path]
