"""Shared pytest fixtures for Picture Gallery tests."""

from io import BytesIO

import pytest
from PIL import Image

from picturegallery.core.config import GalleryConfig
from picturegallery.core.gallery_store import GalleryStore
from picturegallery.ui.models import UIState


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, millis: int = 1) -> None:
        self.now += millis


@pytest.fixture
def test_config() -> GalleryConfig:
    """Create a test configuration that ignores any local .env file.

    Returns:
        GalleryConfig instance for testing
    """
    return GalleryConfig(
        _env_file=None,
        fetch_images=False,
        grid_columns=3,
    )


@pytest.fixture
def clock() -> FakeClock:
    """Controllable clock for picture generation."""
    return FakeClock()


@pytest.fixture
def notices() -> list[str]:
    """Collects notices emitted by a store."""
    return []


@pytest.fixture
def store(clock: FakeClock, notices: list[str]) -> GalleryStore:
    """Create a store seeded with the sample pictures.

    Returns:
        GalleryStore with a fake clock and a notice recorder
    """
    return GalleryStore(clock=clock, notify=notices.append)


@pytest.fixture
def ui_state() -> UIState:
    """Create empty UI state for testing.

    Returns:
        UIState instance
    """
    return UIState()


@pytest.fixture
def initialized_state(store: GalleryStore) -> UIState:
    """UI state with a store and url pass-through rendering.

    Returns:
        UIState instance ready for handlers
    """
    state = UIState()
    state.store = store
    state.image_loader = None
    return state


@pytest.fixture
def png_bytes() -> bytes:
    """A small valid PNG image.

    Returns:
        Encoded PNG content
    """
    buffer = BytesIO()
    Image.new("RGB", (4, 3), (255, 0, 0)).save(buffer, format="PNG")
    return buffer.getvalue()
