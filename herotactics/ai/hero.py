"""Per-turn decision boundary: board + hero in, one action out."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from herotactics.ai.utils import sanitize_action
from herotactics.tactics.queries import TacticalQueries

if TYPE_CHECKING:
    from herotactics.ai.base import Strategy
    from herotactics.ai.config import StrategyConfigBase
    from herotactics.board.grid import Board
    from herotactics.board.types import Action, HeroView

logger = logging.getLogger(__name__)


class Hero:
    """Drives one hero with a single strategy chosen at construction.

    Args:
        strategy: The active strategy. Never swapped at runtime; build a new
            Hero to play differently.
    """

    def __init__(self, strategy: Strategy) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    def decide(self, board: Board, hero: HeroView) -> Action:
        """Pick this turn's action.

        Raises:
            ValueError: If the hero's coordinate is not on the board.
            InvalidDirectionError: Propagated from neighbor lookups.
        """
        if not board.is_valid(hero.coord):
            raise ValueError(f"Hero {hero.hero_id} at {tuple(hero.coord)} is off a {board.size}x{board.size} board")

        queries = TacticalQueries(board, hero)
        action = sanitize_action(self._strategy.choose(hero, board, queries))
        logger.debug("%s: hero %d at %s -> %s", self._strategy.name, hero.hero_id, tuple(hero.coord), action)
        return action

    @property
    def name(self) -> str:
        return f"Hero({self._strategy.name})"


def build_hero(config: StrategyConfigBase) -> Hero:
    """Build a Hero driven by the strategy described by config."""
    return Hero(config.build())


def decide(board: Board, hero: HeroView, strategy: Strategy | None = None) -> Action:
    """One-shot decision. Uses the balanced strategy when none is given."""
    if strategy is None:
        from herotactics.ai.balanced import Balanced

        strategy = Balanced()
    return Hero(strategy).decide(board, hero)
