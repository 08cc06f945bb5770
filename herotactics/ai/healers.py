"""Strategies built around health wells and teammates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from herotactics.ai.base import Strategy
from herotactics.ai.utils import toward

if TYPE_CHECKING:
    from herotactics.board.grid import Board
    from herotactics.board.types import Action, HeroView
    from herotactics.tactics.queries import TacticalQueries


class HealthNut(Strategy):
    """Keep health high; capture mines only while above heal_at."""

    def __init__(self, heal_at: int = 75) -> None:
        self.heal_at = heal_at

    def choose(self, hero: HeroView, board: Board, queries: TacticalQueries) -> Action:
        if hero.health <= self.heal_at:
            return toward(queries.nearest_health_well())
        return toward(queries.nearest_capturable_mine())

    @property
    def name(self) -> str:
        return "HealthNut"


class Priest(Strategy):
    """Walk into the nearest teammate to heal them.

    Moving into an ally restores the ally's health, so a healthy priest keeps
    stepping toward its team and tops itself up at a well otherwise.
    """

    def __init__(self, heal_below: int = 60) -> None:
        self.heal_below = heal_below

    def choose(self, hero: HeroView, board: Board, queries: TacticalQueries) -> Action:
        if hero.health < self.heal_below:
            return toward(queries.nearest_health_well())
        return toward(queries.nearest_ally())

    @property
    def name(self) -> str:
        return "Priest"


class Coward(Strategy):
    """Always head for the nearest health well."""

    def choose(self, hero: HeroView, board: Board, queries: TacticalQueries) -> Action:
        return toward(queries.nearest_health_well())

    @property
    def name(self) -> str:
        return "Coward"
