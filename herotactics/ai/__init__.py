"""Hero strategies and the per-turn decision boundary."""

from herotactics.ai.balanced import Balanced
from herotactics.ai.base import Strategy
from herotactics.ai.config import (
    AggressorConfig,
    BalancedConfig,
    BlindManConfig,
    CarefulAssassinConfig,
    CowardConfig,
    HealthNutConfig,
    NorthernerConfig,
    PriestConfig,
    SafeMinerConfig,
    SelfishMinerConfig,
    StrategyConfig,
    StrategyConfigBase,
    UnwiseAssassinConfig,
)
from herotactics.ai.fighters import Aggressor, CarefulAssassin, UnwiseAssassin
from herotactics.ai.healers import Coward, HealthNut, Priest
from herotactics.ai.hero import Hero, build_hero, decide
from herotactics.ai.miners import SafeMiner, SelfishMiner
from herotactics.ai.wanderers import BlindMan, Northerner

__all__ = [
    "Aggressor",
    "AggressorConfig",
    "Balanced",
    "BalancedConfig",
    "BlindMan",
    "BlindManConfig",
    "CarefulAssassin",
    "CarefulAssassinConfig",
    "Coward",
    "CowardConfig",
    "HealthNut",
    "HealthNutConfig",
    "Hero",
    "Northerner",
    "NorthernerConfig",
    "Priest",
    "PriestConfig",
    "SafeMiner",
    "SafeMinerConfig",
    "SelfishMiner",
    "SelfishMinerConfig",
    "Strategy",
    "StrategyConfig",
    "StrategyConfigBase",
    "UnwiseAssassin",
    "UnwiseAssassinConfig",
    "build_hero",
    "decide",
]
