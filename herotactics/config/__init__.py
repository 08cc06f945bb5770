"""Configuration module with strict validation and Hydra integration.

This module provides:
- StrictBaseModel: Base class for all configs with extra='forbid'
- BoardConfig: Text-map board description that builds a Board
- load_config(): Hydra-based config loading with Pydantic validation

DecideConfig lives in herotactics.config.decide; it depends on the strategy
configs and is imported from there directly.
"""

from __future__ import annotations

from herotactics.config.base import StrictBaseModel
from herotactics.config.board import BoardConfig, HeroPlacement, MineOwnership
from herotactics.config.display import format_config_summary
from herotactics.config.loader import load_config, load_raw_config, split_config_path

__all__ = [
    "BoardConfig",
    "HeroPlacement",
    "MineOwnership",
    "StrictBaseModel",
    "format_config_summary",
    "load_config",
    "load_raw_config",
    "split_config_path",
]
