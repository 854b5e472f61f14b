"""Blog queries: one request, one decoded entity."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from loguru import logger

from tumblr_api.config import BLOG_AVATAR_PATH, BLOG_INFO_PATH, BLOG_POSTS_PATH
from tumblr_api.decode import decode_blog_info, decode_posts, parse_envelope
from tumblr_api.errors import AvatarNotFoundError
from tumblr_api.models import Blog, Posts
from tumblr_api.paths import blog_path
from tumblr_api.protocols import ClientProtocol


def get_posts(
    client: ClientProtocol, name: str, params: Mapping[str, Any] | None = None
) -> Posts:
    """Fetch one page of a blog's posts.

    Args:
        client: Client used for the request.
        name: Blog name or full domain.
        params: Query parameters as documented by Tumblr (``type``, ``tag``,
            ``id``, ``limit``, ``offset``, ``npf``, ...).
    """
    response = client.get_with_params(blog_path(BLOG_POSTS_PATH, name), dict(params or {}))
    posts = decode_posts(parse_envelope(response.body))
    logger.debug("Decoded {} of {} posts for {}", len(posts.posts), posts.total_posts, name)
    return posts


def get_blog_info(client: ClientProtocol, name: str) -> Blog:
    """Fetch a blog's metadata."""
    response = client.get(blog_path(BLOG_INFO_PATH, name))
    return decode_blog_info(parse_envelope(response.body))


def get_avatar(client: ClientProtocol, name: str, size: int | None = None) -> str:
    """Return the URL of a blog's avatar.

    Tumblr answers with a redirect whose ``Location`` is the image. The body
    is only consulted when that header is missing.
    """
    path = blog_path(BLOG_AVATAR_PATH, name)
    if size is not None:
        path = f"{path}/{size}"
    response = client.get(path)

    location = response.headers.get("Location")
    if location:
        return location

    if response.body.strip():
        result = parse_envelope(response.body).get("response")
        if isinstance(result, dict):
            body_location = result.get("location")
            if isinstance(body_location, str) and body_location:
                return body_location

    msg = f"avatar location not found for {name!r}"
    raise AvatarNotFoundError(msg)


@dataclass(frozen=True)
class BlogRef:
    """Handle on a blog by name, for issuing follow-up queries."""

    name: str

    def get_info(self, client: ClientProtocol) -> Blog:
        return get_blog_info(client, self.name)

    def get_posts(self, client: ClientProtocol, params: Mapping[str, Any] | None = None) -> Posts:
        return get_posts(client, self.name, params)

    def get_avatar(self, client: ClientProtocol, size: int | None = None) -> str:
        return get_avatar(client, self.name, size)
