"""Strategies that ignore the board."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from herotactics.ai.base import Strategy
from herotactics.ai.utils import random_direction
from herotactics.board.types import Action

if TYPE_CHECKING:
    from herotactics.board.grid import Board
    from herotactics.board.types import HeroView
    from herotactics.tactics.queries import TacticalQueries


class Northerner(Strategy):
    """Walk North. Always."""

    def choose(self, hero: HeroView, board: Board, queries: TacticalQueries) -> Action:
        return Action.NORTH

    @property
    def name(self) -> str:
        return "Northerner"


class BlindMan(Strategy):
    """Random walk: one of the four directions, uniformly, every turn.

    Args:
        seed: Seed for the move generator. None draws fresh entropy.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def choose(self, hero: HeroView, board: Board, queries: TacticalQueries) -> Action:
        return random_direction(self._rng).action

    @property
    def name(self) -> str:
        return "BlindMan"
