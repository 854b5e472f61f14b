"""Client library for the Tumblr v2 API."""

from tumblr_api.api import TumblrApi
from tumblr_api.decode import decode_media_container, decode_media_json
from tumblr_api.errors import (
    AvatarNotFoundError,
    DecodeError,
    FieldNotFoundError,
    TransportError,
    TumblrError,
)
from tumblr_api.models import Blog, Post, Posts, to_json
from tumblr_api.paths import blog_path, normalize_blog_name
from tumblr_api.protocols import ClientProtocol, Response
from tumblr_api.queries import BlogRef, get_avatar, get_blog_info, get_posts

__all__ = [
    "AvatarNotFoundError",
    "Blog",
    "BlogRef",
    "ClientProtocol",
    "DecodeError",
    "FieldNotFoundError",
    "Post",
    "Posts",
    "Response",
    "TransportError",
    "TumblrApi",
    "TumblrError",
    "blog_path",
    "decode_media_container",
    "decode_media_json",
    "get_avatar",
    "get_blog_info",
    "get_posts",
    "normalize_blog_name",
    "to_json",
]
