"""Exceptions raised by the picture gallery.

All of them are recoverable: the UI turns them into a transient notice and
the session carries on.
"""

from .models import Picture


class GalleryError(Exception):
    """Base class for gallery errors."""

    pass


class DuplicateEntryError(GalleryError):
    """A picture with the same id or url is already in the gallery.

    The message is intended to be displayed directly to the user.
    """

    def __init__(self, picture: Picture, message: str | None = None):
        self.picture = picture
        super().__init__(message or f"Picture {picture.id} ({picture.url}) already exists")


class ImageFetchError(GalleryError):
    """An image could not be downloaded or decoded."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(reason)
