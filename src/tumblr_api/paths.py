"""Blog name normalization and API path building."""

from tumblr_api.config import DEFAULT_BLOG_DOMAIN


def normalize_blog_name(name: str) -> str:
    """Turn a bare blog name into its host name.

    Anything containing a dot is taken to be a full domain already
    (``staff.tumblr.com``, ``blog.example.com``) and returned unchanged.
    """
    if "." not in name:
        return f"{name}.{DEFAULT_BLOG_DOMAIN}"
    return name


def blog_path(template: str, name: str) -> str:
    """Substitute the normalized blog name into a single-``%s`` path template."""
    return template % normalize_blog_name(name)
