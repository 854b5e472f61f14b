"""Protocols for dependency injection of the HTTP client."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from requests.structures import CaseInsensitiveDict


@dataclass(frozen=True)
class Response:
    """Raw HTTP response handed back by a client.

    Headers are stored case-insensitively, so ``headers["location"]`` and
    ``headers["Location"]`` are the same lookup.
    """

    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=CaseInsensitiveDict)
    status: int = 200

    def __post_init__(self) -> None:
        if not isinstance(self.headers, CaseInsensitiveDict):
            object.__setattr__(self, "headers", CaseInsensitiveDict(self.headers))


@runtime_checkable
class ClientProtocol(Protocol):
    """Protocol for Tumblr API clients."""

    def get(self, path: str) -> Response:
        """Issue a GET request for an API path."""
        ...

    def get_with_params(self, path: str, params: Mapping[str, Any]) -> Response:
        """Issue a GET request for an API path with query parameters."""
        ...
