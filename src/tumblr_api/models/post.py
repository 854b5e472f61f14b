"""Post entities."""

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field, fields
from operator import attrgetter
from typing import Any

from tumblr_api.errors import FieldNotFoundError
from tumblr_api.models.npf import NpfContent, NpfTrail
from tumblr_api.models.stringify import to_json


@dataclass(frozen=True)
class Reblog:
    comment: str = ""
    tree_html: str = ""


@dataclass(frozen=True)
class Note:
    """A like, reblog or reply on a post."""

    type: str = ""
    timestamp: int = 0
    blog_name: str = ""
    blog_uuid: str = ""
    blog_url: str = ""
    followed: bool = False
    avatar_shape: str = ""
    # reply notes
    reply_text: str = ""
    # reblog notes
    post_id: str = ""
    reblog_parent_blog_name: str = ""


@dataclass(frozen=True)
class Post:
    """A post in either legacy or NPF format.

    Carries the union of fields Tumblr emits across post types; fields that
    do not apply to a given post stay at their zero value.
    """

    id: int = 0
    type: str = ""
    blog_name: str = ""
    reblog_key: str = ""
    body: str = ""
    can_like: bool = False
    can_reblog: bool = False
    can_reply: bool = False
    can_send_in_message: bool = False
    caption: str = ""
    date: str = ""
    display_avatar: bool = False
    followed: bool = False
    format: str = ""
    highlighted: tuple[Any, ...] = ()
    liked: bool = False
    note_count: int = 0
    permalink_url: str = ""
    post_url: str = ""
    reblog: Reblog = field(default_factory=Reblog)
    notes: tuple[Note, ...] = ()
    recommended_color: str = ""
    recommended_source: bool = False
    short_url: str = ""
    slug: str = ""
    source_title: str = ""
    source_url: str = ""
    state: str = ""
    summary: str = ""
    tags: tuple[str, ...] = ()
    timestamp: int = 0
    featured_timestamp: int = field(default=0, metadata={"omitempty": True})
    track_name: str = field(default="", metadata={"omitempty": True})
    content: tuple[NpfContent, ...] = ()
    trail: tuple[NpfTrail, ...] = ()

    def __str__(self) -> str:
        return to_json(self)

    def get_property(self, key: str) -> Any:
        """Look up a field by name, for callers probing type-specific fields."""
        try:
            getter = _POST_ACCESSORS[key]
        except KeyError:
            msg = f"Property {key} does not exist"
            raise FieldNotFoundError(msg) from None
        return getter(self)


_POST_ACCESSORS: dict[str, Callable[[Post], Any]] = {
    f.name: attrgetter(f.name) for f in fields(Post)
}


@dataclass(frozen=True)
class Posts:
    """A page of posts from ``/blog/{host}/posts``."""

    posts: tuple[Post, ...] = ()
    total_posts: int = 0
    response: Mapping[str, Any] = field(
        default_factory=dict, compare=False, repr=False, metadata={"wire": False}
    )

    def __str__(self) -> str:
        return to_json(self)

    def __iter__(self) -> Iterator[Post]:
        return iter(self.posts)

    def __len__(self) -> int:
        return len(self.posts)
