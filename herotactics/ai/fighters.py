"""Strategies that hunt enemy heroes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from herotactics.ai.base import Strategy
from herotactics.ai.utils import toward

if TYPE_CHECKING:
    from herotactics.board.grid import Board
    from herotactics.board.types import Action, HeroView
    from herotactics.tactics.queries import TacticalQueries


class Aggressor(Strategy):
    """Attack the nearest enemy; retreat to a well at or below heal_at health."""

    def __init__(self, heal_at: int = 30) -> None:
        self.heal_at = heal_at

    def choose(self, hero: HeroView, board: Board, queries: TacticalQueries) -> Action:
        if hero.health <= self.heal_at:
            return toward(queries.nearest_health_well())
        return toward(queries.nearest_enemy())

    @property
    def name(self) -> str:
        return "Aggressor"


class UnwiseAssassin(Strategy):
    """Chase the nearest enemy no matter what, healing only below heal_below."""

    def __init__(self, heal_below: int = 30) -> None:
        self.heal_below = heal_below

    def choose(self, hero: HeroView, board: Board, queries: TacticalQueries) -> Action:
        if hero.health < self.heal_below:
            return toward(queries.nearest_health_well())
        return toward(queries.nearest_enemy())

    @property
    def name(self) -> str:
        return "UnwiseAssassin"


class CarefulAssassin(Strategy):
    """Only chase enemies weaker than ourselves.

    Stays put when no weaker enemy is reachable.
    """

    def __init__(self, heal_below: int = 50) -> None:
        self.heal_below = heal_below

    def choose(self, hero: HeroView, board: Board, queries: TacticalQueries) -> Action:
        if hero.health < self.heal_below:
            return toward(queries.nearest_health_well())
        return toward(queries.nearest_weaker_enemy())

    @property
    def name(self) -> str:
        return "CarefulAssassin"
