"""Configuration constants for the Tumblr API client."""

import os
from pathlib import Path

API_BASE_URL: str = "https://api.tumblr.com/v2"

# Appended to bare blog names ("staff" -> "staff.tumblr.com").
DEFAULT_BLOG_DOMAIN: str = "tumblr.com"

# Path templates. Each takes a single %s, the normalized blog host name.
BLOG_INFO_PATH: str = "/blog/%s/info"
BLOG_POSTS_PATH: str = "/blog/%s/posts"
BLOG_AVATAR_PATH: str = "/blog/%s/avatar"

# Seconds, passed through to requests.
REQUEST_TIMEOUT: float = 30.0

# API key location. The environment variable wins, then the first file found is used.
API_KEY_ENV: str = "TUMBLR_API_KEY"
API_KEY_FILES: list[Path] = [
    Path("~/.config/tumblr-api-key.txt").expanduser(),
    Path("~/.config/secret/tumblr-api-key.txt").expanduser(),
]


def resolve_api_key() -> str | None:
    """Return the API key from the environment or the first readable key file."""
    from_env = os.environ.get(API_KEY_ENV, "").strip()
    if from_env:
        return from_env
    for key_path in API_KEY_FILES:
        try:
            key = key_path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            continue
        if key:
            return key
    return None
