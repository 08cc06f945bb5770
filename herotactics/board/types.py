"""Core value types for one turn of the hero game.

Coordinates are (row, col) with row 0 at the top of the board, matching the
game's distanceFromTop/distanceFromLeft convention. North decreases the row.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple


class InvalidDirectionError(ValueError):
    """Raised when a direction token is not one of North/East/South/West."""


class Action(StrEnum):
    """The five tokens the game accepts as a move."""

    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"
    STAY = "Stay"


class Direction(StrEnum):
    """Cardinal directions, in search expansion order."""

    NORTH = "North"
    EAST = "East"
    SOUTH = "South"
    WEST = "West"

    @classmethod
    def parse(cls, token: Direction | str) -> Direction:
        """Convert a token to a Direction.

        Raises:
            InvalidDirectionError: If the token names no direction.
        """
        try:
            return cls(token)
        except ValueError:
            raise InvalidDirectionError(f"Unknown direction: {token!r}") from None

    @property
    def delta(self) -> tuple[int, int]:
        """(row, col) offset of one step in this direction."""
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def action(self) -> Action:
        return Action(self.value)


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

# Search expansion order; fixes tie-breaking between equidistant targets.
DIRECTIONS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)


class TileKind(StrEnum):
    """What occupies a tile. Only UNOCCUPIED tiles can be walked through."""

    UNOCCUPIED = "Unoccupied"
    HERO = "Hero"
    DIAMOND_MINE = "DiamondMine"
    HEALTH_WELL = "HealthWell"
    IMPASSABLE = "Impassable"


class Coordinate(NamedTuple):
    """Board position as (row, col)."""

    row: int
    col: int

    def step(self, direction: Direction) -> Coordinate:
        """Coordinate one step away. May fall off the board."""
        dr, dc = direction.delta
        return Coordinate(self.row + dr, self.col + dc)


@dataclass(frozen=True, slots=True)
class Owner:
    """Identity of a hero, as recorded on the mines it owns."""

    hero_id: int
    team: int
    dead: bool = False


@dataclass(frozen=True, slots=True)
class Tile:
    """One cell of the board.

    Hero attributes (hero_id, team, health, dead) are only meaningful on HERO
    tiles; owner is only meaningful on DIAMOND_MINE tiles (None = unclaimed).
    """

    coord: Coordinate
    kind: TileKind = TileKind.UNOCCUPIED
    hero_id: int | None = None
    team: int | None = None
    health: int = 0
    dead: bool = False
    owner: Owner | None = None

    @property
    def is_traversable(self) -> bool:
        return self.kind is TileKind.UNOCCUPIED

    @property
    def identity(self) -> Owner | None:
        """Owner view of a hero tile, None for any other kind."""
        if self.kind is not TileKind.HERO or self.hero_id is None or self.team is None:
            return None
        return Owner(hero_id=self.hero_id, team=self.team, dead=self.dead)


@dataclass(frozen=True, slots=True)
class HeroView:
    """The acting hero, as handed to the decision code each turn."""

    hero_id: int
    team: int
    health: int
    coord: Coordinate

    @classmethod
    def from_tile(cls, tile: Tile) -> HeroView:
        """Build a view from a hero tile.

        Raises:
            ValueError: If the tile does not hold a hero.
        """
        identity = tile.identity
        if identity is None:
            raise ValueError(f"Tile at {tile.coord} is {tile.kind}, not a hero")
        return cls(
            hero_id=identity.hero_id,
            team=identity.team,
            health=tile.health,
            coord=tile.coord,
        )
