"""Tests for Hydra config loading."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from herotactics.ai.config import SafeMinerConfig
from herotactics.config.board import BoardConfig
from herotactics.config.loader import load_config, load_raw_config, split_config_path

PROJECT_ROOT = Path(__file__).parent.parent.parent

SMALL_BOARD = {
    "rows": ["W..", "...", "..M"],
    "heroes": [{"id": 0, "team": 0, "row": 1, "col": 1}],
}


class TestLoadConfig:
    """load_config composes with Hydra and validates with Pydantic."""

    def test_loads_board(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            (config_dir / "small.yaml").write_text(yaml.dump(SMALL_BOARD))

            config = load_config(BoardConfig, config_dir, "small")
            assert config.size == 3
            assert config.heroes[0].health == 100

    def test_validation_errors_surface(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            (config_dir / "ragged.yaml").write_text(yaml.dump({"rows": ["...", ".."]}))

            with pytest.raises(ValidationError):
                load_config(BoardConfig, config_dir, "ragged")

    def test_rejects_extra_fields(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            (config_dir / "extra.yaml").write_text(yaml.dump({**SMALL_BOARD, "walls": 3}))

            with pytest.raises(ValidationError):
                load_config(BoardConfig, config_dir, "extra")

    def test_supports_overrides(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            (config_dir / "miner.yaml").write_text(yaml.dump({"variant": "safe_miner", "heal_below": 40}))

            config = load_config(SafeMinerConfig, config_dir, "miner", overrides=["heal_below=25"])
            assert config.heal_below == 25

    def test_loads_project_board_preset(self) -> None:
        configs_dir = PROJECT_ROOT / "configs" / "board"
        if not configs_dir.exists():
            pytest.skip("Project config files not found")

        config = load_config(BoardConfig, configs_dir, "duel_5x5")
        assert config.size == 5
        assert len(config.heroes) == 2


class TestLoadRawConfig:
    """load_raw_config returns plain dicts without validation."""

    def test_returns_dict(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            (config_dir / "small.yaml").write_text(yaml.dump(SMALL_BOARD))

            result = load_raw_config(config_dir, "small")
            assert isinstance(result, dict)
            assert result["rows"] == SMALL_BOARD["rows"]

    def test_no_validation(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            (config_dir / "loose.yaml").write_text(yaml.dump({"rows": ["?"], "anything": "goes"}))

            result = load_raw_config(config_dir, "loose")
            assert result["anything"] == "goes"

    def test_interpolation_is_resolved(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            (config_dir / "interp.yaml").write_text("base: 40\nheal_below: ${base}\n")

            result = load_raw_config(config_dir, "interp")
            assert result["heal_below"] == 40

    def test_defaults_composition(self) -> None:
        """Group defaults nest under the group's name."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            group_dir = config_dir / "strategy"
            group_dir.mkdir()
            (group_dir / "coward.yaml").write_text(yaml.dump({"variant": "coward"}))
            (config_dir / "main.yaml").write_text("defaults:\n  - strategy: coward\n  - _self_\n\nactive_hero: 2\n")

            result = load_raw_config(config_dir, "main")
            assert result["active_hero"] == 2
            assert result["strategy"] == {"variant": "coward"}

    def test_repeated_loads_do_not_leak_state(self) -> None:
        """Hydra's global state is cleared between loads."""
        with tempfile.TemporaryDirectory() as first, tempfile.TemporaryDirectory() as second:
            (Path(first) / "cfg.yaml").write_text(yaml.dump({"value": 1}))
            (Path(second) / "cfg.yaml").write_text(yaml.dump({"value": 2}))

            assert load_raw_config(first, "cfg")["value"] == 1
            assert load_raw_config(second, "cfg")["value"] == 2


class TestSplitConfigPath:
    """CLI paths become (dir, name) pairs."""

    @pytest.mark.parametrize(
        ("arg", "expected"),
        [
            ("configs/decide.yaml", ("configs", "decide")),
            ("configs/board/duel_5x5", ("configs/board", "duel_5x5")),
            ("decide", (".", "decide")),
            ("decide.yaml", (".", "decide")),
        ],
    )
    def test_split(self, arg: str, expected: tuple[str, str]) -> None:
        assert split_config_path(arg) == expected

    def test_accepts_path(self) -> None:
        assert split_config_path(Path("configs") / "decide.yaml") == ("configs", "decide")
