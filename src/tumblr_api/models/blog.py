"""Blog entities."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from tumblr_api.models.stringify import to_json


@dataclass(frozen=True)
class BlogMiniInfo:
    """Short blog description embedded in trails and mentions."""

    name: str = ""
    title: str = ""
    description: str = ""
    url: str = ""
    updated: int = 0
    uuid: str = ""


@dataclass(frozen=True)
class Blog:
    """Blog (tumblelog) metadata as returned by ``/blog/{host}/info``."""

    name: str = ""
    url: str = ""
    title: str = ""
    posts: int = 0
    ask: bool = False
    ask_anon: bool = False
    ask_page_title: str = ""
    can_send_fan_mail: bool = False
    can_submit: bool = False
    can_subscribe: bool = False
    description: str = ""
    followed: bool = False
    is_blocked_from_primary: bool = False
    is_nsfw: bool = False
    share_likes: bool = False
    submission_page_title: str = ""
    subscribed: bool = False
    total_posts: int = 0
    updated: int = 0
    uuid: str = ""
    # Decoded envelope the blog came from, kept for fields not modeled here.
    response: Mapping[str, Any] = field(
        default_factory=dict, compare=False, repr=False, metadata={"wire": False}
    )

    def __str__(self) -> str:
        return to_json(self)
