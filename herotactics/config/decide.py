"""Top-level config for a single decision: board, strategy, and acting hero.

Example YAML (configs/decide.yaml):
    defaults:
      - board: duel_5x5
      - strategy: balanced
      - _self_
    active_hero: 0
"""

from __future__ import annotations

from typing import Self

from pydantic import model_validator

from herotactics.ai.config import StrategyConfig  # noqa: TC001
from herotactics.board.types import Coordinate, HeroView
from herotactics.config.base import StrictBaseModel
from herotactics.config.board import BoardConfig


class DecideConfig(StrictBaseModel):
    """Everything needed to compute one action."""

    board: BoardConfig
    strategy: StrategyConfig
    active_hero: int

    @model_validator(mode="after")
    def check_active_hero(self) -> Self:
        """The acting hero must be placed on the board and alive."""
        placement = next((h for h in self.board.heroes if h.id == self.active_hero), None)
        if placement is None:
            raise ValueError(f"active_hero {self.active_hero} is not among the board's heroes")
        if placement.dead:
            raise ValueError(f"active_hero {self.active_hero} is dead")
        return self

    def view(self) -> HeroView:
        """HeroView for the acting hero."""
        placement = next(h for h in self.board.heroes if h.id == self.active_hero)
        return HeroView(
            hero_id=placement.id,
            team=placement.team,
            health=placement.health,
            coord=Coordinate(placement.row, placement.col),
        )
