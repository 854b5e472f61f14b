"""Sample Tumblr API payloads shared by the tests."""

from typing import Any


def _media(mime: str, url: str, width: int, height: int) -> dict[str, Any]:
    return {"type": mime, "url": url, "width": width, "height": height}


BLOG_INFO_ENVELOPE: dict[str, Any] = {
    "meta": {"status": 200, "msg": "OK"},
    "response": {
        "blog": {
            "name": "staff",
            "title": "Tumblr Staff",
            "url": "https://staff.tumblr.com/",
            "posts": 4321,
            "total_posts": 4321,
            "ask": True,
            "ask_anon": False,
            "ask_page_title": "Ask me anything",
            "can_subscribe": True,
            "description": "Official news",
            "is_nsfw": False,
            "share_likes": True,
            "updated": 1700000000,
            "uuid": "t:abc123",
            "theme": {"avatar_shape": "square"},
        }
    },
}

NPF_POST: dict[str, Any] = {
    "id": 7001,
    "type": "blocks",
    "blog_name": "staff",
    "reblog_key": "rk1",
    "note_count": 12,
    "tags": ["news", "photos"],
    "timestamp": 1700000100,
    "content": [
        {
            "type": "text",
            "text": "Look at this",
            "formatting": [
                {"type": "link", "url": "https://example.com"},
                {"type": "mention", "blog": {"name": "david", "uuid": "t:d"}},
            ],
        },
        {
            "type": "image",
            "media": [
                _media("image/jpeg", "https://64.media/a_1280.jpg", 1280, 720),
                _media("image/jpeg", "https://64.media/a_640.jpg", 640, 360),
            ],
            "alt_text": "a cat",
        },
        {
            "type": "video",
            "media": _media("video/mp4", "https://va.media/v.mp4", 480, 270),
            "poster": [_media("image/jpeg", "https://64.media/p.jpg", 480, 270)],
        },
        {
            "type": "link",
            "url": "https://example.com/story",
            "title": "A story",
            "site_name": "Example",
            "poster": _media("image/png", "https://64.media/l.png", 100, 100),
        },
    ],
    "trail": [
        {
            "post": {"id": "6001"},
            "blog": {"name": "original", "title": "Original"},
            "content": [{"type": "text", "text": "first!"}],
        },
        {"broken_blog": {"name": "gone-blog"}, "content": []},
    ],
    "notes": [
        {"type": "like", "blog_name": "fan", "timestamp": 1700000200},
        {"type": "reply", "blog_name": "chatty", "reply_text": "nice"},
        {
            "type": "reblog",
            "blog_name": "sharer",
            "post_id": "7002",
            "reblog_parent_blog_name": "staff",
        },
    ],
}
