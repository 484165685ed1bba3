"""
Detail view navigation over the currently filtered rating list.

The navigator holds at most one selected rating and steps to the previous
or next rating of whatever list it is handed, wrapping at both ends. The
list is always the live output of the catalog query engine, so navigation
follows the user's current filters and sort.

When the selected rating is no longer part of that list (a filter changed
while the detail view was open) the view is closed.
"""

import logging
from enum import Enum
from typing import Any, Optional, Sequence

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Relative navigation step."""

    PREV = "prev"
    NEXT = "next"


class DetailNavigator:
    """
    Tracks the rating shown in the detail view.

    Ratings are matched by ``id``; the navigator never mutates the lists
    it is given.

    Example:
        >>> navigator = DetailNavigator()
        >>> navigator.open(filtered[0])
        >>> navigator.navigate(Direction.NEXT, filtered)  # filtered[1]
        >>> navigator.navigate("prev", filtered)          # back to filtered[0]
    """

    def __init__(self):
        self._selected: Optional[Any] = None

    @property
    def selected(self) -> Optional[Any]:
        return self._selected

    @property
    def is_open(self) -> bool:
        return self._selected is not None

    def open(self, rating: Any) -> None:
        self._selected = rating

    def close(self) -> None:
        self._selected = None

    @staticmethod
    def index_of(rating: Any, ratings: Sequence[Any]) -> Optional[int]:
        for index, candidate in enumerate(ratings):
            if candidate.id == rating.id:
                return index
        return None

    def navigate(self, direction, ratings: Sequence[Any]) -> Optional[Any]:
        """
        Move the selection one step through ``ratings``.

        Args:
            direction: Direction.PREV/NEXT or the strings "prev"/"next"
            ratings: The currently filtered and sorted list

        Returns:
            The new selection, or None if nothing is (or remains) selected

        Raises:
            ValueError: If direction is not prev/next
        """
        direction = Direction(direction)

        if self._selected is None:
            return None

        current = self.index_of(self._selected, ratings)
        if current is None:
            logger.debug(
                "Selected rating %s is filtered out, closing detail view",
                self._selected.id,
            )
            self.close()
            return None

        count = len(ratings)
        if direction is Direction.NEXT:
            target = (current + 1) % count
        else:
            target = (current - 1 + count) % count

        self._selected = ratings[target]
        return self._selected

    def sync(self, ratings: Sequence[Any]) -> None:
        """Close the view if the selection dropped out of ``ratings``."""
        if self._selected is not None and self.index_of(self._selected, ratings) is None:
            self.close()
