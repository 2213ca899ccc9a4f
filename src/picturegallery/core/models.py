"""Data models for the picture gallery.

Pictures are immutable value objects: two instances with the same id, author
and url compare equal. Removal from the gallery relies on this, because the
UI removes the exact picture the user saw rather than looking it up by id.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Picture:
    """A single gallery entry.

    Attributes
    ----------
    id : int
        Identifier, unique within a gallery (enforced at insertion)
    author : str
        Author label, used for filtering
    url : str
        Image locator, unique within a gallery (enforced at insertion)
    """

    id: int
    author: str
    url: str


class DisplayMode(str, Enum):
    """Layout used to render the gallery. Has no effect on the data."""

    GRID = "grid"
    LIST = "list"

    def toggled(self) -> "DisplayMode":
        """Return the other display mode."""
        return DisplayMode.LIST if self is DisplayMode.GRID else DisplayMode.GRID


class AddOutcome(str, Enum):
    """Result of trying to add a generated picture."""

    ADDED = "added"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class AddResult:
    """Outcome of an add together with the picture that was (or would have been) added."""

    outcome: AddOutcome
    picture: Picture

    @property
    def added(self) -> bool:
        return self.outcome is AddOutcome.ADDED


# Fixed seed set shown when a session starts
SAMPLE_PICTURES: tuple[Picture, ...] = (
    Picture(1, "Alice", "https://commons.wikimedia.org/wiki/Special:FilePath/Cat03.jpg"),
    Picture(2, "Bob", "https://commons.wikimedia.org/wiki/Special:FilePath/Red_Kitten_01.jpg"),
    Picture(3, "Carol", "https://commons.wikimedia.org/wiki/Special:FilePath/June_odd-eyed-cat.jpg"),
    Picture(4, "Dave", "https://commons.wikimedia.org/wiki/Special:FilePath/Cat_poster_1.jpg"),
    Picture(5, "Erin", "https://commons.wikimedia.org/wiki/Special:FilePath/Siam_lilacpoint.jpg"),
)


def generate_sample_pictures() -> list[Picture]:
    """Return a fresh list holding the seed pictures in their fixed order."""
    return list(SAMPLE_PICTURES)
