"""Named tactical queries for the acting hero.

Each query is a nearest-match search with a domain predicate, or an area
scan, evaluated from the hero's own tile. Queries never raise when nothing
qualifies: they return NOT_FOUND (or an empty tally) instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from herotactics.board.types import HeroView, Tile, TileKind
from herotactics.search.nearest import TilePredicate, search
from herotactics.search.scan import scan

if TYPE_CHECKING:
    from herotactics.board.grid import Board
    from herotactics.search.result import SearchOutcome

DEFAULT_TALLY_RANGE = 5


class Target(StrEnum):
    """Kinds of thing a hero can ask for the nearest instance of."""

    ENEMY = "enemy"
    WEAKER_ENEMY = "weaker_enemy"
    ALLY = "ally"
    HEALTH_WELL = "health_well"
    CAPTURABLE_MINE = "capturable_mine"
    UNOWNED_MINE = "unowned_mine"
    TEAM_MINE = "team_mine"
    FOREIGN_MINE = "foreign_mine"


@dataclass(frozen=True, slots=True)
class MineTally:
    """Mine ownership counts around the hero.

    Attributes:
        team: Mines owned by a hero of our team.
        other: Every other mine (unowned or owned by another team).
        total: team + other.
    """

    team: int = 0
    other: int = 0
    total: int = 0


# --- Predicates ---


def is_enemy(hero: HeroView) -> TilePredicate:
    """Living hero of another team."""

    def predicate(tile: Tile) -> bool:
        return tile.kind is TileKind.HERO and tile.team != hero.team and not tile.dead

    return predicate


def is_weaker_enemy(hero: HeroView) -> TilePredicate:
    """Living enemy with strictly less health than us."""
    enemy = is_enemy(hero)

    def predicate(tile: Tile) -> bool:
        return enemy(tile) and tile.health < hero.health

    return predicate


def is_ally(hero: HeroView) -> TilePredicate:
    """Hero of our team other than ourselves."""

    def predicate(tile: Tile) -> bool:
        return tile.kind is TileKind.HERO and tile.team == hero.team and tile.hero_id != hero.hero_id

    return predicate


def is_health_well(tile: Tile) -> bool:
    return tile.kind is TileKind.HEALTH_WELL


def is_capturable_mine(hero: HeroView) -> TilePredicate:
    """Mine that is unowned, owned by another team, or owned by a dead hero.

    Mines of dead owners are capturable even when the owner was a teammate.
    """

    def predicate(tile: Tile) -> bool:
        if tile.kind is not TileKind.DIAMOND_MINE:
            return False
        owner = tile.owner
        return owner is None or owner.dead or owner.team != hero.team

    return predicate


def is_unowned_mine(tile: Tile) -> bool:
    return tile.kind is TileKind.DIAMOND_MINE and tile.owner is None


def is_team_mine(hero: HeroView) -> TilePredicate:
    """Mine held by a living hero of our team (ourselves included)."""

    def predicate(tile: Tile) -> bool:
        owner = tile.owner
        return (
            tile.kind is TileKind.DIAMOND_MINE
            and owner is not None
            and not owner.dead
            and owner.team == hero.team
        )

    return predicate


def is_foreign_mine(hero: HeroView) -> TilePredicate:
    """Mine that we do not own personally, whoever else holds it."""

    def predicate(tile: Tile) -> bool:
        if tile.kind is not TileKind.DIAMOND_MINE:
            return False
        return tile.owner is None or tile.owner.hero_id != hero.hero_id

    return predicate


# --- Query facade ---


class TacticalQueries:
    """Query facade bound to one board and one hero for a single turn.

    Args:
        board: Current snapshot.
        hero: The acting hero; searches start from hero.coord.
    """

    def __init__(self, board: Board, hero: HeroView) -> None:
        self.board = board
        self.hero = hero

    def _nearest(self, predicate: TilePredicate) -> SearchOutcome:
        return search(self.board, self.hero.coord, predicate)

    def nearest_enemy(self) -> SearchOutcome:
        return self._nearest(is_enemy(self.hero))

    def nearest_weaker_enemy(self) -> SearchOutcome:
        return self._nearest(is_weaker_enemy(self.hero))

    def nearest_ally(self) -> SearchOutcome:
        return self._nearest(is_ally(self.hero))

    def nearest_health_well(self) -> SearchOutcome:
        return self._nearest(is_health_well)

    def nearest_capturable_mine(self) -> SearchOutcome:
        return self._nearest(is_capturable_mine(self.hero))

    def nearest_unowned_mine(self) -> SearchOutcome:
        return self._nearest(is_unowned_mine)

    def nearest_team_mine(self) -> SearchOutcome:
        return self._nearest(is_team_mine(self.hero))

    def nearest_foreign_mine(self) -> SearchOutcome:
        return self._nearest(is_foreign_mine(self.hero))

    def nearest(self, target: Target | str) -> SearchOutcome:
        """Dispatch to the query for target.

        Raises:
            ValueError: If target is not a known Target.
        """
        match Target(target):
            case Target.ENEMY:
                return self.nearest_enemy()
            case Target.WEAKER_ENEMY:
                return self.nearest_weaker_enemy()
            case Target.ALLY:
                return self.nearest_ally()
            case Target.HEALTH_WELL:
                return self.nearest_health_well()
            case Target.CAPTURABLE_MINE:
                return self.nearest_capturable_mine()
            case Target.UNOWNED_MINE:
                return self.nearest_unowned_mine()
            case Target.TEAM_MINE:
                return self.nearest_team_mine()
            case Target.FOREIGN_MINE:
                return self.nearest_foreign_mine()

    def mine_tally(self, range: int = DEFAULT_TALLY_RANGE) -> MineTally:  # noqa: A002
        """Count mines within range of the hero by ownership."""
        team = 0
        other = 0
        for tile in scan(self.board, self.hero.coord, TileKind.DIAMOND_MINE, range):
            if tile.owner is not None and tile.owner.team == self.hero.team:
                team += 1
            else:
                other += 1
        return MineTally(team=team, other=other, total=team + other)
