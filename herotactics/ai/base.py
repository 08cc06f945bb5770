"""Base class for hero strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from herotactics.board.grid import Board
    from herotactics.board.types import Action, HeroView
    from herotactics.tactics.queries import TacticalQueries


class Strategy(ABC):
    """Base class for hero strategies.

    A strategy maps the current turn's observations to one action. It keeps
    no memory between turns: the same inputs give the same action, unless
    the strategy is explicitly randomized.
    """

    @abstractmethod
    def choose(self, hero: HeroView, board: Board, queries: TacticalQueries) -> Action:
        """Select an action for this turn.

        Args:
            hero: The acting hero. DO NOT modify this.
            board: Current board snapshot.
            queries: Tactical queries bound to this board and hero.

        Returns:
            One of the five Action tokens.
        """
        ...

    @property
    def name(self) -> str:
        """Human-readable name for this strategy."""
        return self.__class__.__name__
