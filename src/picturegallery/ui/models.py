"""Data models for the gallery UI session state."""

import logging
from dataclasses import dataclass, field
from typing import Any

from picturegallery.core.models import DisplayMode, Picture

logger = logging.getLogger(__name__)


@dataclass
class UIState:
    """Session state for the Gradio UI.

    Each browser session gets its own UIState, so every user works on an
    independent gallery.

    Attributes
    ----------
    store : Any | None
        GalleryStore instance holding the pictures
    image_loader : Any | None
        ImageLoader instance, or None when images are passed to the browser as urls
    rendered_pictures : list[Picture]
        Pictures in the order they were last rendered; gallery selection
        indexes refer to this list
    image_cache : dict[str, Any]
        Rendered image per url for this session, including placeholders for
        urls that failed, so each url is fetched and reported at most once
    """

    store: Any | None = None  # GalleryStore instance
    image_loader: Any | None = None  # ImageLoader instance
    rendered_pictures: list[Picture] = field(default_factory=list)
    image_cache: dict[str, Any] = field(default_factory=dict)  # url -> PIL image

    def is_initialized(self) -> bool:
        """Check if the gallery store has been created.

        Returns:
            True if the store is available
        """
        return self.store is not None

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"UIState(initialized={self.is_initialized()}, "
            f"pictures={len(self.store) if self.store is not None else 0}, "
            f"rendered={len(self.rendered_pictures)})"
        )


# Label of the mode button names the mode it switches to
MODE_BUTTON_LABELS = {
    DisplayMode.GRID: "☰ List view",
    DisplayMode.LIST: "▦ Grid view",
}

SEARCH_LABEL = "Search by author"
EMPTY_MESSAGE = "### Empty"
