"""Breadth-first search for the nearest tile matching a predicate.

The search walks the 4-connected grid outward from a start coordinate. Every
neighbor of an expanded node is tested against the predicate, including
tiles that cannot be walked through (heroes, mines, wells), so occupied
targets can be found. Only unoccupied tiles are expanded further.

Tie-breaking: neighbors are expanded North, East, South, West. Among several
targets at the same distance, the first one reached in that order wins.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from typing import TYPE_CHECKING

from herotactics.board.types import DIRECTIONS, Coordinate, Direction, Tile
from herotactics.search.result import NOT_FOUND, SearchOutcome, SearchResult

if TYPE_CHECKING:
    from herotactics.board.grid import Board

logger = logging.getLogger(__name__)

TilePredicate = Callable[[Tile], bool]

_ROOT = -1


def _matches(predicate: TilePredicate, tile: Tile) -> bool:
    """Evaluate predicate, counting any exception as a miss."""
    try:
        return bool(predicate(tile))
    except Exception as exc:  # noqa: BLE001
        logger.debug("Predicate failed on tile %s: %r", tuple(tile.coord), exc)
        return False


def search(
    board: Board,
    start: tuple[int, int],
    predicate: TilePredicate,
    *,
    max_nodes: int | None = None,
) -> SearchOutcome:
    """Find the nearest tile satisfying predicate.

    Args:
        board: Snapshot to search.
        start: Coordinate to search from. The start tile itself is not tested.
        predicate: Target test. Exceptions raised by it count as False.
        max_nodes: Cap on queued nodes. Defaults to the board's tile count.

    Returns:
        SearchResult for the nearest match, or NOT_FOUND if nothing
        reachable matches (or start is off the board).
    """
    origin = Coordinate(*start)
    if not board.is_valid(origin):
        return NOT_FOUND

    limit = board.size * board.size if max_nodes is None else max_nodes

    # Node table indexed by node id. Node 0 is the start and is the only
    # node without an entry in steps.
    coords: list[Coordinate] = [origin]
    parents: list[int] = [_ROOT]
    steps: dict[int, Direction] = {}

    visited: set[Coordinate] = {origin}
    frontier: deque[int] = deque([0])

    while frontier:
        node = frontier.popleft()
        here = coords[node]

        for direction in DIRECTIONS:
            tile = board.neighbor(here, direction)
            if tile is None or tile.coord in visited:
                continue

            if _matches(predicate, tile):
                return _build_result(tile, direction, node, coords, parents, steps)

            if tile.is_traversable and len(coords) < limit:
                visited.add(tile.coord)
                steps[len(coords)] = direction
                coords.append(tile.coord)
                parents.append(node)
                frontier.append(len(coords) - 1)

    return NOT_FOUND


def _build_result(
    tile: Tile,
    last_step: Direction,
    node: int,
    coords: list[Coordinate],
    parents: list[int],
    steps: dict[int, Direction],
) -> SearchResult:
    """Walk parent links from node back to the start and package the result."""
    path = [tile.coord]
    first_step = last_step

    while parents[node] != _ROOT:
        path.append(coords[node])
        first_step = steps[node]
        node = parents[node]

    path.reverse()
    return SearchResult(
        tile=tile,
        direction=first_step,
        distance=len(path),
        coord=tile.coord,
        path=tuple(path),
    )
