"""Diamond-mine capturing strategies.

Capturing a mine costs health, so both miners heal first when low, and top
up opportunistically when a well is right next to them.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from herotactics.ai.base import Strategy
from herotactics.ai.utils import toward
from herotactics.search.result import SearchResult

if TYPE_CHECKING:
    from herotactics.board.grid import Board
    from herotactics.board.types import Action, HeroView
    from herotactics.search.result import SearchOutcome
    from herotactics.tactics.queries import TacticalQueries


class _Miner(Strategy):
    def __init__(self, heal_below: int = 40, top_up_below: int = 100) -> None:
        self.heal_below = heal_below
        self.top_up_below = top_up_below

    @abstractmethod
    def _target(self, queries: TacticalQueries) -> SearchOutcome: ...

    def choose(self, hero: HeroView, board: Board, queries: TacticalQueries) -> Action:
        well = queries.nearest_health_well()
        if hero.health < self.heal_below:
            return toward(well)
        if hero.health < self.top_up_below and isinstance(well, SearchResult) and well.distance == 1:
            return toward(well)
        return toward(self._target(queries))


class SafeMiner(_Miner):
    """Capture mines that are not held by a living teammate."""

    def _target(self, queries: TacticalQueries) -> SearchOutcome:
        return queries.nearest_capturable_mine()

    @property
    def name(self) -> str:
        return "SafeMiner"


class SelfishMiner(_Miner):
    """Capture any mine we do not own ourselves, teammates' included."""

    def _target(self, queries: TacticalQueries) -> SearchOutcome:
        return queries.nearest_foreign_mine()

    @property
    def name(self) -> str:
        return "SelfishMiner"
