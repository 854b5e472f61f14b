"""Exceptions raised by the Tumblr API client."""


class TumblrError(Exception):
    """Base error for the client library."""


class TransportError(TumblrError):
    """The HTTP request failed or the server answered with an error status."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class DecodeError(TumblrError, ValueError):
    """Response bytes could not be decoded into the expected entity."""


class FieldNotFoundError(TumblrError, AttributeError):
    """A dynamic property lookup named a field the entity does not have."""


class AvatarNotFoundError(TumblrError):
    """Neither the redirect header nor the body carried an avatar location."""
