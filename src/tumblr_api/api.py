"""Tumblr API client over requests."""

from collections.abc import Mapping
from typing import Any

import requests
from loguru import logger

from tumblr_api import config
from tumblr_api.config import (
    API_BASE_URL,
    API_KEY_ENV,
    REQUEST_TIMEOUT,
    resolve_api_key,
)
from tumblr_api.errors import TransportError
from tumblr_api.protocols import Response


class TumblrApi:
    """Authenticates with an API key and returns raw responses.

    Redirects are not followed: the avatar endpoint answers with one and the
    caller wants its ``Location``.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self.api_key = api_key or resolve_api_key()
        if not self.api_key:
            msg = (
                f"Cannot find Tumblr API key, set {API_KEY_ENV} "
                f"or create one of {config.API_KEY_FILES!r}"
            )
            raise RuntimeError(msg)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.sess = requests.Session()
        logger.debug("API ready: base_url {!r}, timeout {!r}", self.base_url, self.timeout)

    def get(self, path: str) -> Response:
        """Issue a GET request for an API path."""
        return self.get_with_params(path, {})

    def get_with_params(self, path: str, params: Mapping[str, Any]) -> Response:
        """Issue a GET request for an API path with query parameters."""
        url = f"{self.base_url}{path}"
        logger.debug("Making request: {!r} {}", path, repr(dict(params))[:64])
        try:
            r = self.sess.get(
                url,
                params={**params, "api_key": self.api_key},
                timeout=self.timeout,
                allow_redirects=False,
            )
        except requests.RequestException as e:
            msg = f"Request failed: {path!r} -> {e}"
            raise TransportError(msg) from e

        if r.status_code >= 400:
            msg = f"API call failed: {path!r} -> ({r.status_code}, {_error_message(r)!r})"
            raise TransportError(msg, status=r.status_code)

        return Response(body=r.content, headers=r.headers, status=r.status_code)


def _error_message(r: requests.Response) -> str:
    """Pull ``meta.msg`` out of a Tumblr error body, falling back to the reason."""
    try:
        meta = r.json().get("meta", {})
        return str(meta.get("msg") or r.reason)
    except (ValueError, AttributeError):
        return str(r.reason)
