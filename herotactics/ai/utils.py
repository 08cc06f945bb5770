"""Utility functions for strategies."""

from __future__ import annotations

import logging

import numpy as np

from herotactics.board.types import DIRECTIONS, Action, Direction
from herotactics.search.result import SearchOutcome, SearchResult

logger = logging.getLogger(__name__)


def toward(result: SearchOutcome) -> Action:
    """First step toward a search result, STAY if nothing was found."""
    if isinstance(result, SearchResult):
        return result.direction.action
    return Action.STAY


def sanitize_action(value: object) -> Action:
    """Coerce a strategy's answer to a legal Action.

    Anything that is not one of the five tokens becomes STAY, which is also
    how the game itself treats an unknown move.
    """
    if isinstance(value, str):
        try:
            return Action(value)
        except ValueError:
            pass
    logger.warning("Strategy returned %r, substituting Stay", value)
    return Action.STAY


def random_direction(rng: np.random.Generator | None = None) -> Direction:
    """Draw one of the four directions uniformly.

    Args:
        rng: Optional numpy Generator for reproducible draws.
    """
    integers = rng.integers if rng is not None else np.random.default_rng().integers
    return DIRECTIONS[int(integers(len(DIRECTIONS)))]
