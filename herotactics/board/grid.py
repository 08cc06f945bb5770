"""Immutable square board for a single turn."""

from __future__ import annotations

from typing import TYPE_CHECKING

from herotactics.board.types import Coordinate, Direction, Tile, TileKind

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


class Board:
    """N x N matrix of tiles, indexed tiles[row][col].

    A new Board is built every turn; nothing mutates it afterwards.

    Raises:
        ValueError: If the rows are empty, not square, or a tile's stored
            coordinate disagrees with its position.
    """

    __slots__ = ("_tiles",)

    def __init__(self, tiles: Sequence[Sequence[Tile]]) -> None:
        rows = tuple(tuple(row) for row in tiles)
        size = len(rows)
        if size == 0:
            raise ValueError("Board needs at least one row")

        for r, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f"Board is not square: row {r} has {len(row)} tiles, expected {size}")
            for c, tile in enumerate(row):
                if tile.coord != (r, c):
                    raise ValueError(f"Tile at position ({r}, {c}) claims coordinate {tuple(tile.coord)}")

        self._tiles = rows

    @property
    def size(self) -> int:
        """Side length N."""
        return len(self._tiles)

    def is_valid(self, coord: tuple[int, int]) -> bool:
        row, col = coord
        return 0 <= row < self.size and 0 <= col < self.size

    def tile(self, coord: tuple[int, int]) -> Tile:
        """Tile at coord.

        Raises:
            IndexError: If coord is off the board.
        """
        if not self.is_valid(coord):
            raise IndexError(f"Coordinate {tuple(coord)} is off a {self.size}x{self.size} board")
        row, col = coord
        return self._tiles[row][col]

    def neighbor(self, coord: tuple[int, int], direction: Direction | str) -> Tile | None:
        """Tile one step from coord in direction, or None past the edge.

        Raises:
            InvalidDirectionError: If direction is not a cardinal direction.
        """
        step = Coordinate(*coord).step(Direction.parse(direction))
        if not self.is_valid(step):
            return None
        return self._tiles[step.row][step.col]

    def find_hero(self, hero_id: int) -> Tile | None:
        """First hero tile carrying hero_id, scanning row by row."""
        for tile in self:
            if tile.kind is TileKind.HERO and tile.hero_id == hero_id:
                return tile
        return None

    def __iter__(self) -> Iterator[Tile]:
        for row in self._tiles:
            yield from row

    def __repr__(self) -> str:
        return f"Board(size={self.size})"
