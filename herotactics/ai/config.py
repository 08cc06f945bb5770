"""Strategy configuration with discriminated union pattern.

Each config type inherits from StrategyConfigBase and implements `build()`.
Use Pydantic's discriminator on the `variant` field for automatic dispatch.

Example YAML:
    strategy:
      variant: balanced
      critical_health: 50
      low_health: 70

    strategy:
      variant: blind_man
      seed: 7
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import Field

from herotactics.config.base import StrictBaseModel

if TYPE_CHECKING:
    from herotactics.ai.base import Strategy

Health = Annotated[int, Field(ge=0)]


class StrategyConfigBase(StrictBaseModel):
    """Base class for strategy configurations.

    All strategy configs must implement the `build()` method that constructs
    the corresponding Strategy instance.
    """

    @abstractmethod
    def build(self) -> Strategy:
        """Build the strategy from this configuration."""
        ...


class AggressorConfig(StrategyConfigBase):
    """Attack the nearest enemy, heal at or below heal_at."""

    variant: Literal["aggressor"] = "aggressor"
    heal_at: Health = 30

    def build(self) -> Strategy:
        from herotactics.ai.fighters import Aggressor

        return Aggressor(heal_at=self.heal_at)


class UnwiseAssassinConfig(StrategyConfigBase):
    """Chase the nearest enemy, heal below heal_below."""

    variant: Literal["unwise_assassin"] = "unwise_assassin"
    heal_below: Health = 30

    def build(self) -> Strategy:
        from herotactics.ai.fighters import UnwiseAssassin

        return UnwiseAssassin(heal_below=self.heal_below)


class CarefulAssassinConfig(StrategyConfigBase):
    """Chase the nearest weaker enemy, heal below heal_below."""

    variant: Literal["careful_assassin"] = "careful_assassin"
    heal_below: Health = 50

    def build(self) -> Strategy:
        from herotactics.ai.fighters import CarefulAssassin

        return CarefulAssassin(heal_below=self.heal_below)


class HealthNutConfig(StrategyConfigBase):
    """Heal at or below heal_at, otherwise capture mines."""

    variant: Literal["health_nut"] = "health_nut"
    heal_at: Health = 75

    def build(self) -> Strategy:
        from herotactics.ai.healers import HealthNut

        return HealthNut(heal_at=self.heal_at)


class PriestConfig(StrategyConfigBase):
    """Support teammates, heal below heal_below."""

    variant: Literal["priest"] = "priest"
    heal_below: Health = 60

    def build(self) -> Strategy:
        from herotactics.ai.healers import Priest

        return Priest(heal_below=self.heal_below)


class CowardConfig(StrategyConfigBase):
    """Always go to the nearest health well."""

    variant: Literal["coward"] = "coward"

    def build(self) -> Strategy:
        from herotactics.ai.healers import Coward

        return Coward()


class SafeMinerConfig(StrategyConfigBase):
    """Capture mines not held by living teammates."""

    variant: Literal["safe_miner"] = "safe_miner"
    heal_below: Health = 40
    top_up_below: Health = 100

    def build(self) -> Strategy:
        from herotactics.ai.miners import SafeMiner

        return SafeMiner(heal_below=self.heal_below, top_up_below=self.top_up_below)


class SelfishMinerConfig(StrategyConfigBase):
    """Capture any mine not owned by ourselves."""

    variant: Literal["selfish_miner"] = "selfish_miner"
    heal_below: Health = 40
    top_up_below: Health = 100

    def build(self) -> Strategy:
        from herotactics.ai.miners import SelfishMiner

        return SelfishMiner(heal_below=self.heal_below, top_up_below=self.top_up_below)


class BalancedConfig(StrategyConfigBase):
    """Hybrid healing/mining/fighting decision tree."""

    variant: Literal["balanced"] = "balanced"
    critical_health: Health = 50
    low_health: Health = 70
    tally_range: int = Field(default=5, gt=0)

    def build(self) -> Strategy:
        from herotactics.ai.balanced import Balanced

        return Balanced(
            critical_health=self.critical_health,
            low_health=self.low_health,
            tally_range=self.tally_range,
        )


class NorthernerConfig(StrategyConfigBase):
    """Always walk North."""

    variant: Literal["northerner"] = "northerner"

    def build(self) -> Strategy:
        from herotactics.ai.wanderers import Northerner

        return Northerner()


class BlindManConfig(StrategyConfigBase):
    """Random walk, reproducible when seeded."""

    variant: Literal["blind_man"] = "blind_man"
    seed: int | None = None

    def build(self) -> Strategy:
        from herotactics.ai.wanderers import BlindMan

        return BlindMan(seed=self.seed)


# Discriminated union using Pydantic's Annotated + Field(discriminator=...)
StrategyConfig = Annotated[
    AggressorConfig
    | UnwiseAssassinConfig
    | CarefulAssassinConfig
    | HealthNutConfig
    | PriestConfig
    | CowardConfig
    | SafeMinerConfig
    | SelfishMinerConfig
    | BalancedConfig
    | NorthernerConfig
    | BlindManConfig,
    Field(discriminator="variant"),
]
