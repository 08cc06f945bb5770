"""Hydra-based config loading with Pydantic validation.

Flow: Hydra resolves defaults → DictConfig → plain dict → Pydantic validates

Usage:
    config = load_config(DecideConfig, "configs", "decide")
    config = load_config(DecideConfig, "configs", "decide", overrides=["strategy=aggressor"])
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar

from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from omegaconf import OmegaConf
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def split_config_path(config_arg: str | Path) -> tuple[str, str]:
    """Split a CLI config argument into (config_dir, config_name) for Hydra.

    'configs/decide.yaml' -> ('configs', 'decide')
    'configs/board/duel_5x5' -> ('configs/board', 'duel_5x5')
    'decide' -> ('.', 'decide')
    """
    config_path = Path(config_arg)
    config_dir = str(config_path.parent) if config_path.parent.name else "."
    return config_dir, config_path.stem


def load_raw_config(
    config_path: str | Path,
    config_name: str,
    overrides: list[str] | None = None,
) -> dict[str, Any]:
    """Compose a config with Hydra and return it as a plain dict.

    Args:
        config_path: Directory holding the YAML files (relative or absolute).
        config_name: File name without .yaml; may include a group subdir.
        overrides: Hydra-style overrides, e.g. ["strategy=aggressor"].

    Returns:
        Config with defaults and interpolations resolved.
    """
    config_dir = Path(config_path).resolve()

    # Hydra keeps global state; clear it around every compose. Not thread-safe.
    GlobalHydra.instance().clear()
    try:
        initialize_config_dir(config_dir=str(config_dir), version_base=None)
        cfg = compose(config_name=config_name, overrides=overrides or [])
        return OmegaConf.to_container(cfg, resolve=True)  # type: ignore[return-value]
    finally:
        GlobalHydra.instance().clear()


def load_config(
    model_class: type[T],
    config_path: str | Path,
    config_name: str,
    overrides: list[str] | None = None,
) -> T:
    """Load a config with Hydra and validate it against model_class.

    Raises:
        pydantic.ValidationError: If the composed config does not fit the model.
    """
    return model_class.model_validate(load_raw_config(config_path, config_name, overrides))
