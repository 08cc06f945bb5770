"""Domain queries built on the search primitives."""

from herotactics.tactics.queries import (
    DEFAULT_TALLY_RANGE,
    MineTally,
    TacticalQueries,
    Target,
    is_ally,
    is_capturable_mine,
    is_enemy,
    is_foreign_mine,
    is_health_well,
    is_team_mine,
    is_unowned_mine,
    is_weaker_enemy,
)

__all__ = [
    "DEFAULT_TALLY_RANGE",
    "MineTally",
    "TacticalQueries",
    "Target",
    "is_ally",
    "is_capturable_mine",
    "is_enemy",
    "is_foreign_mine",
    "is_health_well",
    "is_team_mine",
    "is_unowned_mine",
    "is_weaker_enemy",
]
