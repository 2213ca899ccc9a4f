"""Picture Gallery - single-screen image gallery with author search."""

__version__ = "0.1.0"

from picturegallery.core.config import GalleryConfig, config
from picturegallery.core.gallery_store import GalleryStore
from picturegallery.core.models import DisplayMode, Picture

__all__ = [
    "DisplayMode",
    "GalleryConfig",
    "GalleryStore",
    "Picture",
    "config",
]
