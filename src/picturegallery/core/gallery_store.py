"""In-memory gallery store.

The store owns the ordered picture collection, the current filter text and
the display mode. The UI never touches the collection directly: it calls the
mutation methods below and re-reads ``filtered_view()`` afterwards.

The collection is kept newest first:

- generated pictures are inserted at the front
- ids and urls are unique within the collection (checked on insert)
- removal is by value, so removing a picture that is already gone is a no-op

Notices (duplicate picture, image fetch failure) are pushed through an
optional ``notify`` callback supplied by the UI.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Sequence

from .errors import DuplicateEntryError
from .models import (
    AddOutcome,
    AddResult,
    DisplayMode,
    Picture,
    generate_sample_pictures,
)

logger = logging.getLogger(__name__)

DEFAULT_NEW_AUTHOR = "New Author"
DEFAULT_URL_TEMPLATE = "https://picsum.photos/seed/{timestamp}/600/400"

DUPLICATE_NOTICE = "This picture already exists (same id or url)."
FETCH_FAILURE_NOTICE = "Failed to load image: {message}"


def _current_millis() -> int:
    return int(time.time() * 1000)


def filter_pictures(items: Sequence[Picture], filter_text: str) -> list[Picture]:
    """Filter pictures by author.

    Args:
        items: Source pictures.
        filter_text: Text to look for in the author, case-insensitively.
            Blank text (empty or whitespace only) disables the filter.

    Returns:
        Matching pictures in their original order.
    """
    if not filter_text.strip():
        return list(items)

    needle = filter_text.lower()
    return [picture for picture in items if needle in picture.author.lower()]


class GalleryStore:
    """Ordered picture collection plus filter text and display mode.

    Args:
        items: Initial pictures. Defaults to the seed set.
        new_author: Author label for generated pictures.
        url_template: Url template for generated pictures, formatted with
            ``timestamp`` (milliseconds from ``clock``).
        clock: Callable returning the current time in milliseconds.
        notify: Callable receiving one-shot user notices.
    """

    def __init__(
        self,
        items: Iterable[Picture] | None = None,
        *,
        new_author: str = DEFAULT_NEW_AUTHOR,
        url_template: str = DEFAULT_URL_TEMPLATE,
        clock: Callable[[], int] | None = None,
        notify: Callable[[str], None] | None = None,
    ):
        self.new_author = new_author
        self.url_template = url_template
        self.clock = clock or _current_millis
        self.notify = notify

        self._items: list[Picture] = []
        self._filter_text = ""
        self._display_mode = DisplayMode.GRID

        self.initialize()
        if items is not None:
            self._items = list(items)

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def items(self) -> tuple[Picture, ...]:
        """Snapshot of all pictures, newest first."""
        return tuple(self._items)

    @property
    def filter_text(self) -> str:
        return self._filter_text

    @property
    def display_mode(self) -> DisplayMode:
        return self._display_mode

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return (
            f"GalleryStore(items={len(self._items)}, "
            f"filter={self._filter_text!r}, "
            f"mode={self._display_mode.value})"
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Reset to the seed pictures, no filter and grid mode."""
        self._items = generate_sample_pictures()
        self._filter_text = ""
        self._display_mode = DisplayMode.GRID
        logger.debug(f"Gallery initialized with {len(self._items)} sample pictures")

    def set_filter_text(self, text: str) -> None:
        """Replace the filter text. Blank text means no filter."""
        self._filter_text = text

    def toggle_display_mode(self) -> DisplayMode:
        """Flip between grid and list mode.

        Returns:
            The new display mode
        """
        self._display_mode = self._display_mode.toggled()
        logger.debug(f"Display mode switched to {self._display_mode.value}")
        return self._display_mode

    def clear(self) -> None:
        """Remove every picture. Filter text and display mode are kept."""
        removed = len(self._items)
        self._items.clear()
        logger.info(f"Cleared gallery ({removed} pictures removed)")

    def generate_picture(self) -> Picture:
        """Build the picture the next add would insert.

        The id is one more than the largest id in the whole collection (not
        just the filtered view), and the url embeds the current timestamp.
        """
        next_id = max((picture.id for picture in self._items), default=0) + 1
        url = self.url_template.format(timestamp=self.clock())
        return Picture(id=next_id, author=self.new_author, url=url)

    def insert(self, picture: Picture) -> None:
        """Insert a picture at the front of the collection.

        Args:
            picture: Picture to insert

        Raises:
            DuplicateEntryError: If a picture with the same id or url exists.
                The collection is left unchanged.
        """
        if any(p.id == picture.id or p.url == picture.url for p in self._items):
            raise DuplicateEntryError(picture, DUPLICATE_NOTICE)

        self._items.insert(0, picture)

    def add_generated(self) -> AddResult:
        """Generate a new picture and insert it at the front.

        Returns:
            AddResult with ``ADDED`` and the new picture, or ``DUPLICATE`` and
            the rejected candidate. A duplicate also emits a notice.
        """
        picture = self.generate_picture()

        try:
            self.insert(picture)
        except DuplicateEntryError as e:
            logger.warning(f"Rejected duplicate picture id={picture.id} url={picture.url}")
            self._emit(str(e))
            return AddResult(AddOutcome.DUPLICATE, picture)

        logger.info(f"Added picture id={picture.id} url={picture.url}")
        return AddResult(AddOutcome.ADDED, picture)

    def remove(self, picture: Picture) -> bool:
        """Remove the first picture equal to ``picture`` (id, author and url).

        Args:
            picture: Picture as observed by the caller

        Returns:
            True if a picture was removed, False if it was no longer present
        """
        try:
            self._items.remove(picture)
        except ValueError:
            logger.debug(f"Picture id={picture.id} already removed, nothing to do")
            return False

        logger.info(f"Removed picture id={picture.id}")
        return True

    # ------------------------------------------------------------------
    # Queries and notices
    # ------------------------------------------------------------------

    def filtered_view(self) -> list[Picture]:
        """Pictures matching the current filter text, in collection order."""
        return filter_pictures(self._items, self._filter_text)

    def report_fetch_failure(self, message: str) -> None:
        """Pass an image loading failure from the UI on to the notice channel."""
        logger.warning(f"Image fetch failed: {message}")
        self._emit(FETCH_FAILURE_NOTICE.format(message=message))

    def _emit(self, message: str) -> None:
        if self.notify is not None:
            self.notify(message)
