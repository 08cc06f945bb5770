"""Outcome types for nearest-tile search.

A search either finds a tile (SearchResult) or does not (NOT_FOUND). Both
expose `found`, and NOT_FOUND is falsy, so callers can write `if result:`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from herotactics.board.types import Coordinate, Direction, Tile


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Nearest matching tile and how to get there.

    Fields:
        tile: The matching tile.
        direction: First step to take from the start.
        distance: Steps from the start to the tile (>= 1).
        coord: Absolute coordinate of the tile.
        path: Coordinates visited after the start, ending at coord.
    """

    tile: Tile
    direction: Direction
    distance: int
    coord: Coordinate
    path: tuple[Coordinate, ...]

    @property
    def found(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class NotFound:
    """No tile satisfied the search."""

    @property
    def found(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return False


NOT_FOUND: Final = NotFound()

SearchOutcome = SearchResult | NotFound


def closer(a: SearchOutcome, b: SearchOutcome) -> SearchResult | None:
    """Return whichever outcome is strictly nearer, None on a tie.

    A found result is always nearer than NOT_FOUND; two misses tie.
    """
    match a, b:
        case SearchResult(), NotFound():
            return a
        case NotFound(), SearchResult():
            return b
        case SearchResult(), SearchResult() if a.distance != b.distance:
            return a if a.distance < b.distance else b
    return None
