"""Balanced strategy: heal when hurt, hold mines, pick off weaker enemies."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from herotactics.ai.base import Strategy
from herotactics.ai.utils import toward
from herotactics.board.types import Action
from herotactics.search.result import SearchResult, closer
from herotactics.tactics.queries import DEFAULT_TALLY_RANGE

if TYPE_CHECKING:
    from herotactics.board.grid import Board
    from herotactics.board.types import HeroView
    from herotactics.search.result import SearchOutcome
    from herotactics.tactics.queries import TacticalQueries

logger = logging.getLogger(__name__)


def _no_farther(well: SearchOutcome, *others: SearchResult) -> bool:
    """True if a well was found and it is at most as far as every other target."""
    return isinstance(well, SearchResult) and all(well.distance <= o.distance for o in others)


class Balanced(Strategy):
    """Hybrid of healing, mining, and opportunistic fighting.

    Decision order:
    1. At or below critical_health: go heal.
    2. Both a team mine and a capturable mine in reach: heal if low and the
       well is no farther than either mine; if the team mine is strictly
       closer, the area is ours, so fight a weaker enemy (or heal, or wait);
       otherwise capture.
    3. Only a capturable mine: heal if low and the well is no farther, else
       capture.
    4. Nothing to capture: fight a weaker enemy, healing first when low
       unless the enemy is strictly closer than the well.

    Args:
        critical_health: Heal unconditionally at or below this.
        low_health: Prefer a nearby well at or below this.
        tally_range: Radius of the mine tally reported in debug logs.
    """

    def __init__(
        self,
        critical_health: int = 50,
        low_health: int = 70,
        tally_range: int = DEFAULT_TALLY_RANGE,
    ) -> None:
        self.critical_health = critical_health
        self.low_health = low_health
        self.tally_range = tally_range

    def choose(self, hero: HeroView, board: Board, queries: TacticalQueries) -> Action:
        well = queries.nearest_health_well()
        if hero.health <= self.critical_health:
            return toward(well)

        capturable = queries.nearest_capturable_mine()
        team_mine = queries.nearest_team_mine()
        weaker = queries.nearest_weaker_enemy()
        low = hero.health <= self.low_health

        if logger.isEnabledFor(logging.DEBUG):
            tally = queries.mine_tally(self.tally_range)
            logger.debug(
                "hero %d: health=%d mines in range team=%d other=%d",
                hero.hero_id,
                hero.health,
                tally.team,
                tally.other,
            )

        if isinstance(capturable, SearchResult) and isinstance(team_mine, SearchResult):
            if low and _no_farther(well, capturable, team_mine):
                return toward(well)
            if closer(team_mine, capturable) is team_mine:
                if weaker:
                    return toward(weaker)
                return toward(well)
            return toward(capturable)

        if isinstance(capturable, SearchResult):
            if low and _no_farther(well, capturable):
                return toward(well)
            return toward(capturable)

        if low and isinstance(well, SearchResult):
            if isinstance(weaker, SearchResult) and weaker.distance < well.distance:
                return toward(weaker)
            return toward(well)
        if weaker:
            return toward(weaker)
        if well:
            return toward(well)
        return Action.STAY

    @property
    def name(self) -> str:
        return "Balanced"
