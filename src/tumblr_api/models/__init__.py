"""Typed entities for Tumblr API responses."""

from tumblr_api.models.blog import Blog, BlogMiniInfo
from tumblr_api.models.npf import (
    BrokenBlog,
    Formatting,
    MediaCollection,
    NpfContent,
    NpfMedia,
    NpfMediaContainer,
    NpfTrail,
    SingleMedia,
    TrailPost,
)
from tumblr_api.models.post import Note, Post, Posts, Reblog
from tumblr_api.models.stringify import to_json

__all__ = [
    "Blog",
    "BlogMiniInfo",
    "BrokenBlog",
    "Formatting",
    "MediaCollection",
    "Note",
    "NpfContent",
    "NpfMedia",
    "NpfMediaContainer",
    "NpfTrail",
    "Post",
    "Posts",
    "Reblog",
    "SingleMedia",
    "TrailPost",
    "to_json",
]
