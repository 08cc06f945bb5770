"""Diamond-shaped area scan around a coordinate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from herotactics.board.types import Coordinate

if TYPE_CHECKING:
    from herotactics.board.grid import Board
    from herotactics.board.types import Tile, TileKind


def diamond(center: tuple[int, int], radius: int, size: int | None = None) -> list[Coordinate]:
    """All coordinates within Manhattan distance radius of center, row-major.

    The rows run from center.row - radius to center.row + radius and each row
    is 2 cells narrower per step away from the center row.

    Args:
        center: Middle of the diamond.
        radius: Manhattan radius.
        size: Side length of a board to clip to. None keeps coordinates off
            the board; callers filter.
    """
    row, col = center
    top, bottom = row - radius, row + radius
    if size is not None:
        top, bottom = max(0, top), min(size - 1, bottom)

    cells: list[Coordinate] = []
    for r in range(top, bottom + 1):
        half_width = radius - abs(r - row)
        left, right = col - half_width, col + half_width
        if size is not None:
            left, right = max(0, left), min(size - 1, right)
        cells.extend(Coordinate(r, c) for c in range(left, right + 1))
    return cells


def scan(board: Board, center: tuple[int, int], kind: TileKind, range: int) -> tuple[Tile, ...]:  # noqa: A002
    """Tiles of the given kind within `range` steps of center.

    Work is bounded by the board's tile count: no two tiles are farther apart
    than 2 * (size - 1), so larger ranges are clamped to that.

    Returns an empty tuple when range <= 0 or center is off the board.
    """
    if range <= 0 or not board.is_valid(center):
        return ()
    radius = min(range, 2 * (board.size - 1))
    return tuple(tile for tile in map(board.tile, diamond(center, radius, board.size)) if tile.kind == kind)
