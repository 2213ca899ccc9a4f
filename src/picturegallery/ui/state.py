"""State management utilities for the gallery UI.

This module handles the initialization and cleanup of per-session UI state:
the gallery store and the image loader.
"""

import logging

from picturegallery.core.config import config
from picturegallery.core.gallery_store import GalleryStore

from .components import show_notice
from .images import ImageLoader
from .models import UIState

logger = logging.getLogger(__name__)


def initialize_ui_state(state: UIState | None = None) -> UIState:
    """Initialize or ensure UI state is ready.

    If state is None or uninitialized, a gallery store seeded with the
    sample pictures is created, together with an image loader when
    server-side image fetching is enabled.

    Args:
        state: Existing UIState or None

    Returns:
        Initialized UIState instance
    """
    if state is None:
        logger.info("Creating new UIState")
        state = UIState()

    if state.is_initialized():
        logger.debug("UIState already initialized")
        return state

    logger.info("Initializing UIState components...")

    state.store = GalleryStore(
        new_author=config.new_author,
        url_template=config.generated_url_template,
        notify=show_notice,
    )

    if config.fetch_images:
        state.image_loader = ImageLoader.from_config(config)
    else:
        logger.info("Server-side image fetching disabled, urls are passed to the browser")
        state.image_loader = None

    state.rendered_pictures = []
    state.image_cache = {}

    logger.info(f"UIState initialization complete: {state}")
    return state


def cleanup_ui_state(state: UIState) -> None:
    """Clean up UI state resources.

    This should be called when a session ends. The gallery is discarded,
    nothing is persisted.

    Args:
        state: UI state to clean up
    """
    logger.info("Cleaning up UIState resources")

    state.store = None
    state.image_loader = None
    state.rendered_pictures = []
    state.image_cache = {}

    logger.info("UIState cleanup complete")
