"""Decode Tumblr API JSON into typed entities.

Decoding is lenient in the same way the API is: missing keys and ``null``
become zero values and unknown keys are ignored. A key holding a value of the
wrong JSON type is an error, as is a media field that is neither an object
nor an array.
"""

import json
from collections.abc import Callable
from typing import Any, TypeVar

from tumblr_api.errors import DecodeError
from tumblr_api.models import (
    Blog,
    BlogMiniInfo,
    BrokenBlog,
    Formatting,
    MediaCollection,
    Note,
    NpfContent,
    NpfMedia,
    NpfMediaContainer,
    NpfTrail,
    Post,
    Posts,
    Reblog,
    SingleMedia,
    TrailPost,
)

T = TypeVar("T")

MEDIA_SHAPE_ERROR = "unexpected value shape for media field"

# Insignificant whitespace per RFC 8259.
_JSON_WHITESPACE = " \t\r\n"


def parse_envelope(body: bytes | str) -> dict[str, Any]:
    """Parse a response body into the top-level JSON object."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        msg = f"invalid JSON in response body: {e}"
        raise DecodeError(msg) from e
    if not isinstance(data, dict):
        msg = f"expected a JSON object at top level, got {_json_type(data)}"
        raise DecodeError(msg)
    return data


# --- field helpers ---


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _mismatch(key: str, expected: str, value: Any) -> DecodeError:
    return DecodeError(f"field {key!r}: expected {expected}, got {_json_type(value)}")


def _str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _mismatch(key, "string", value)
    return value


def _int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise _mismatch(key, "integer", value)
    return value


def _uint(data: dict[str, Any], key: str) -> int:
    value = _int(data, key)
    if value < 0:
        raise _mismatch(key, "unsigned integer", value)
    return value


def _bool(data: dict[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise _mismatch(key, "boolean", value)
    return value


def _object(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise _mismatch(key, "object", value)
    return value


def _array(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise _mismatch(key, "array", value)
    return value


def _objects(
    data: dict[str, Any], key: str, decode: Callable[[dict[str, Any]], T]
) -> tuple[T, ...]:
    """Decode an array of objects; ``null`` elements become zero entities."""
    items: list[T] = []
    for item in _array(data, key):
        if item is None:
            item = {}
        elif not isinstance(item, dict):
            raise _mismatch(f"{key}[]", "object", item)
        items.append(decode(item))
    return tuple(items)


def _strings(data: dict[str, Any], key: str) -> tuple[str, ...]:
    items = _array(data, key)
    for item in items:
        if not isinstance(item, str):
            raise _mismatch(f"{key}[]", "string", item)
    return tuple(items)


# --- media ---


def decode_media(data: dict[str, Any]) -> NpfMedia:
    return NpfMedia(
        type=_str(data, "type"),
        url=_str(data, "url"),
        width=_int(data, "width"),
        height=_int(data, "height"),
    )


def decode_media_container(value: Any) -> NpfMediaContainer:
    """Decode an already parsed media value by its shape.

    Tumblr sends one object for a single asset and an array when it lists
    several (typically the renditions of one image), so the shape decides.
    """
    if isinstance(value, list):
        return MediaCollection(_objects({"media": value}, "media", decode_media))
    if isinstance(value, dict):
        return SingleMedia(decode_media(value))
    raise DecodeError(MEDIA_SHAPE_ERROR)


def decode_media_json(raw: bytes | str) -> NpfMediaContainer:
    """Decode raw media JSON, dispatching on its first non-whitespace byte."""
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            msg = f"invalid UTF-8 in media field: {e}"
            raise DecodeError(msg) from e
    text = raw.lstrip(_JSON_WHITESPACE)
    if text[:1] not in ("[", "{"):
        raise DecodeError(MEDIA_SHAPE_ERROR)
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"invalid JSON in media field: {e}"
        raise DecodeError(msg) from e
    return decode_media_container(value)


def _optional_media(data: dict[str, Any], key: str) -> NpfMediaContainer | None:
    value = data.get(key)
    if value is None:
        return None
    try:
        return decode_media_container(value)
    except DecodeError as e:
        msg = f"field {key!r}: {e}"
        raise DecodeError(msg) from e


# --- NPF ---


def decode_blog_mini_info(data: dict[str, Any]) -> BlogMiniInfo:
    return BlogMiniInfo(
        name=_str(data, "name"),
        title=_str(data, "title"),
        description=_str(data, "description"),
        url=_str(data, "url"),
        updated=_uint(data, "updated"),
        uuid=_str(data, "uuid"),
    )


def decode_formatting(data: dict[str, Any]) -> Formatting:
    return Formatting(
        type=_str(data, "type"),
        url=_str(data, "url"),
        blog=decode_blog_mini_info(_object(data, "blog")),
    )


def decode_npf_content(data: dict[str, Any]) -> NpfContent:
    return NpfContent(
        type=_str(data, "type"),
        subtype=_str(data, "subtype"),
        text=_str(data, "text"),
        formatting=_objects(data, "formatting", decode_formatting),
        media=_optional_media(data, "media"),
        alt_text=_str(data, "alt_text"),
        url=_str(data, "url"),
        display_url=_str(data, "display_url"),
        title=_str(data, "title"),
        description=_str(data, "description"),
        author=_str(data, "author"),
        site_name=_str(data, "site_name"),
        poster=_optional_media(data, "poster"),
    )


def decode_npf_trail(data: dict[str, Any]) -> NpfTrail:
    # Live trails name an unavailable ancestor with a flat "broken_blog_name".
    broken_name = _str(_object(data, "broken_blog"), "name") or _str(data, "broken_blog_name")
    return NpfTrail(
        post=TrailPost(id=_str(_object(data, "post"), "id")),
        blog=decode_blog_mini_info(_object(data, "blog")),
        content=_objects(data, "content", decode_npf_content),
        broken_blog=BrokenBlog(name=broken_name),
    )


# --- posts ---


def decode_note(data: dict[str, Any]) -> Note:
    return Note(
        type=_str(data, "type"),
        timestamp=_uint(data, "timestamp"),
        blog_name=_str(data, "blog_name"),
        blog_uuid=_str(data, "blog_uuid"),
        blog_url=_str(data, "blog_url"),
        followed=_bool(data, "followed"),
        avatar_shape=_str(data, "avatar_shape"),
        reply_text=_str(data, "reply_text"),
        post_id=_str(data, "post_id"),
        reblog_parent_blog_name=_str(data, "reblog_parent_blog_name"),
    )


def decode_post(data: dict[str, Any]) -> Post:
    reblog = _object(data, "reblog")
    return Post(
        id=_uint(data, "id"),
        type=_str(data, "type"),
        blog_name=_str(data, "blog_name"),
        reblog_key=_str(data, "reblog_key"),
        body=_str(data, "body"),
        can_like=_bool(data, "can_like"),
        can_reblog=_bool(data, "can_reblog"),
        can_reply=_bool(data, "can_reply"),
        can_send_in_message=_bool(data, "can_send_in_message"),
        caption=_str(data, "caption"),
        date=_str(data, "date"),
        display_avatar=_bool(data, "display_avatar"),
        followed=_bool(data, "followed"),
        format=_str(data, "format"),
        highlighted=tuple(_array(data, "highlighted")),
        liked=_bool(data, "liked"),
        note_count=_uint(data, "note_count"),
        permalink_url=_str(data, "permalink_url"),
        post_url=_str(data, "post_url"),
        reblog=Reblog(comment=_str(reblog, "comment"), tree_html=_str(reblog, "tree_html")),
        notes=_objects(data, "notes", decode_note),
        recommended_color=_str(data, "recommended_color"),
        recommended_source=_bool(data, "recommended_source"),
        short_url=_str(data, "short_url"),
        slug=_str(data, "slug"),
        source_title=_str(data, "source_title"),
        source_url=_str(data, "source_url"),
        state=_str(data, "state"),
        summary=_str(data, "summary"),
        tags=_strings(data, "tags"),
        timestamp=_uint(data, "timestamp"),
        featured_timestamp=_uint(data, "featured_timestamp"),
        track_name=_str(data, "track_name"),
        content=_objects(data, "content", decode_npf_content),
        trail=_objects(data, "trail", decode_npf_trail),
    )


def decode_blog(data: dict[str, Any], *, response: dict[str, Any] | None = None) -> Blog:
    return Blog(
        name=_str(data, "name"),
        url=_str(data, "url"),
        title=_str(data, "title"),
        posts=_int(data, "posts"),
        ask=_bool(data, "ask"),
        ask_anon=_bool(data, "ask_anon"),
        ask_page_title=_str(data, "ask_page_title"),
        can_send_fan_mail=_bool(data, "can_send_fan_mail"),
        can_submit=_bool(data, "can_submit"),
        can_subscribe=_bool(data, "can_subscribe"),
        description=_str(data, "description"),
        followed=_bool(data, "followed"),
        is_blocked_from_primary=_bool(data, "is_blocked_from_primary"),
        is_nsfw=_bool(data, "is_nsfw"),
        share_likes=_bool(data, "share_likes"),
        submission_page_title=_str(data, "submission_page_title"),
        subscribed=_bool(data, "subscribed"),
        total_posts=_int(data, "total_posts"),
        updated=_int(data, "updated"),
        uuid=_str(data, "uuid"),
        response=response or {},
    )


# --- envelopes ---


def decode_posts(envelope: dict[str, Any]) -> Posts:
    """Decode ``{"response": {"posts": [...], "total_posts": N}}``."""
    payload = _object(envelope, "response")
    return Posts(
        posts=_objects(payload, "posts", decode_post),
        total_posts=_int(payload, "total_posts"),
        response=envelope,
    )


def decode_blog_info(envelope: dict[str, Any]) -> Blog:
    """Decode ``{"response": {"blog": {...}}}``."""
    payload = _object(envelope, "response")
    return decode_blog(_object(payload, "blog"), response=envelope)
