"""Neue Post Format (NPF) content blocks, media and reblog trails."""

from dataclasses import dataclass, field
from typing import ClassVar, TypeAlias

from tumblr_api.models.blog import BlogMiniInfo


@dataclass(frozen=True)
class NpfMedia:
    """A single media asset: image, video or audio rendition."""

    type: str = ""
    url: str = ""
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class SingleMedia:
    """Media field that arrived as one JSON object."""

    media: NpfMedia = field(default_factory=NpfMedia)

    is_array: ClassVar[bool] = False

    @property
    def media_collection(self) -> tuple[NpfMedia, ...]:
        return ()


@dataclass(frozen=True)
class MediaCollection:
    """Media field that arrived as a JSON array (e.g. several sizes of an image)."""

    media_collection: tuple[NpfMedia, ...] = ()

    is_array: ClassVar[bool] = True

    @property
    def media(self) -> NpfMedia:
        return NpfMedia()


NpfMediaContainer: TypeAlias = SingleMedia | MediaCollection


@dataclass(frozen=True)
class Formatting:
    """Inline formatting range of a text block."""

    type: str = ""
    # link formatting
    url: str = ""
    # mention formatting
    blog: BlogMiniInfo = field(default_factory=BlogMiniInfo)


@dataclass(frozen=True)
class NpfContent:
    """One NPF content block.

    Flattened over the block types: text blocks fill ``text``/``formatting``,
    image blocks fill ``media``/``alt_text``, link blocks fill the link fields
    (and sometimes ``poster``). Fields irrelevant to the block type stay empty.
    """

    type: str = ""
    subtype: str = ""
    text: str = ""
    formatting: tuple[Formatting, ...] = ()
    media: NpfMediaContainer | None = None
    alt_text: str = ""
    url: str = ""
    display_url: str = ""
    title: str = ""
    description: str = ""
    author: str = ""
    site_name: str = ""
    poster: NpfMediaContainer | None = None


@dataclass(frozen=True)
class TrailPost:
    id: str = ""


@dataclass(frozen=True)
class BrokenBlog:
    name: str = ""


@dataclass(frozen=True)
class NpfTrail:
    """One ancestor in a reblog chain.

    When the ancestor post is gone, Tumblr sends ``broken_blog`` instead of
    ``post``/``blog``. Which case applies is only known from the data.
    """

    post: TrailPost = field(default_factory=TrailPost)
    blog: BlogMiniInfo = field(default_factory=BlogMiniInfo)
    content: tuple[NpfContent, ...] = ()
    broken_blog: BrokenBlog = field(default_factory=BrokenBlog)

    @property
    def is_broken(self) -> bool:
        return bool(self.broken_blog.name)
