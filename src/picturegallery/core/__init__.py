"""Core functionality for the picture gallery.

This package holds everything that does not depend on the UI toolkit:

- **Picture / DisplayMode / AddResult**: Data models (models.py)
- **GalleryStore**: In-memory collection with filter, add, remove and clear
- **GalleryError** and subclasses: Recoverable gallery errors
- **GalleryConfig**: Configuration management using Pydantic Settings
- **config**: Global configuration instance (loads from environment variables)

Usage Example
-------------
    from picturegallery.core import GalleryStore

    store = GalleryStore(notify=print)
    store.set_filter_text("a")
    [p.author for p in store.filtered_view()]  # ['Alice', 'Carol', 'Dave']

    result = store.add_generated()
    result.picture.id  # 6
"""

from picturegallery.core.config import GalleryConfig, config
from picturegallery.core.errors import DuplicateEntryError, GalleryError, ImageFetchError
from picturegallery.core.gallery_store import GalleryStore, filter_pictures
from picturegallery.core.models import (
    SAMPLE_PICTURES,
    AddOutcome,
    AddResult,
    DisplayMode,
    Picture,
    generate_sample_pictures,
)

__all__ = [
    "AddOutcome",
    "AddResult",
    "DisplayMode",
    "DuplicateEntryError",
    "GalleryConfig",
    "GalleryError",
    "GalleryStore",
    "ImageFetchError",
    "Picture",
    "SAMPLE_PICTURES",
    "config",
    "filter_pictures",
    "generate_sample_pictures",
]
