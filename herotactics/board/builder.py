"""Fluent builder for assembling boards tile by tile."""

from __future__ import annotations

from typing import Self

from herotactics.board.grid import Board
from herotactics.board.types import Coordinate, Owner, Tile, TileKind


class BoardBuilder:
    """Build a Board by placing pieces on an otherwise empty grid.

    Example:
        board = (
            BoardBuilder(5)
            .with_hero(2, 2, hero_id=0, team=0, health=100)
            .with_health_well(0, 2)
            .with_mine(4, 4, owner=Owner(hero_id=3, team=1))
            .build()
        )

    Later placements overwrite earlier ones on the same coordinate.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"Board size must be positive, got {size}")
        self._size = size
        self._placed: dict[Coordinate, Tile] = {}

    def _place(self, tile: Tile) -> Self:
        if not (0 <= tile.coord.row < self._size and 0 <= tile.coord.col < self._size):
            raise ValueError(f"{tuple(tile.coord)} is off a {self._size}x{self._size} board")
        self._placed[tile.coord] = tile
        return self

    def with_hero(
        self,
        row: int,
        col: int,
        *,
        hero_id: int,
        team: int,
        health: int = 100,
        dead: bool = False,
    ) -> Self:
        return self._place(
            Tile(
                coord=Coordinate(row, col),
                kind=TileKind.HERO,
                hero_id=hero_id,
                team=team,
                health=health,
                dead=dead,
            )
        )

    def with_mine(self, row: int, col: int, *, owner: Owner | None = None) -> Self:
        return self._place(Tile(coord=Coordinate(row, col), kind=TileKind.DIAMOND_MINE, owner=owner))

    def with_health_well(self, row: int, col: int) -> Self:
        return self._place(Tile(coord=Coordinate(row, col), kind=TileKind.HEALTH_WELL))

    def with_obstacle(self, row: int, col: int) -> Self:
        return self._place(Tile(coord=Coordinate(row, col), kind=TileKind.IMPASSABLE))

    def build(self) -> Board:
        return Board(
            [
                [
                    self._placed.get(Coordinate(r, c)) or Tile(coord=Coordinate(r, c))
                    for c in range(self._size)
                ]
                for r in range(self._size)
            ]
        )
