"""Tests for BoardConfig validation and board building."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from herotactics.board import TileKind
from herotactics.config.board import BoardConfig


def _config(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "rows": ["..W", ".#.", "M.M"],
        "heroes": [
            {"id": 0, "team": 0, "row": 0, "col": 0, "health": 80},
            {"id": 1, "team": 1, "row": 1, "col": 2, "health": 0, "dead": True},
        ],
        "owners": [{"row": 2, "col": 2, "hero": 1}],
    }
    data.update(overrides)
    return data


class TestBoardConfigValidation:
    """Layout checks."""

    def test_accepts_valid_layout(self) -> None:
        config = BoardConfig.model_validate(_config())
        assert config.size == 3
        assert config.cell(1, 1) == "#"

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValidationError):
            BoardConfig.model_validate({"rows": []})

    def test_rejects_non_square(self) -> None:
        with pytest.raises(ValidationError, match="must be square"):
            BoardConfig.model_validate(_config(rows=["..W", ".#.."]))

    def test_rejects_unknown_symbol(self) -> None:
        with pytest.raises(ValidationError, match="unknown symbols"):
            BoardConfig.model_validate(_config(rows=["..W", ".X.", "M.M"]))

    def test_rejects_duplicate_hero_ids(self) -> None:
        heroes = [{"id": 0, "team": 0, "row": 0, "col": 0}, {"id": 0, "team": 1, "row": 0, "col": 1}]
        with pytest.raises(ValidationError, match="unique"):
            BoardConfig.model_validate(_config(heroes=heroes, owners=[]))

    def test_rejects_hero_off_board(self) -> None:
        heroes = [{"id": 0, "team": 0, "row": 3, "col": 0}]
        with pytest.raises(ValidationError, match="off a 3x3 board"):
            BoardConfig.model_validate(_config(heroes=heroes, owners=[]))

    def test_rejects_hero_on_terrain(self) -> None:
        heroes = [{"id": 0, "team": 0, "row": 1, "col": 1}]
        with pytest.raises(ValidationError, match="must stand on an unoccupied cell"):
            BoardConfig.model_validate(_config(heroes=heroes, owners=[]))

    def test_rejects_owner_not_on_mine(self) -> None:
        with pytest.raises(ValidationError, match="does not point at a mine"):
            BoardConfig.model_validate(_config(owners=[{"row": 0, "col": 1, "hero": 0}]))

    def test_rejects_owner_unknown_hero(self) -> None:
        with pytest.raises(ValidationError, match="unknown hero 7"):
            BoardConfig.model_validate(_config(owners=[{"row": 2, "col": 0, "hero": 7}]))

    def test_rejects_negative_health(self) -> None:
        heroes = [{"id": 0, "team": 0, "row": 0, "col": 0, "health": -5}]
        with pytest.raises(ValidationError):
            BoardConfig.model_validate(_config(heroes=heroes, owners=[]))


class TestBoardConfigBuild:
    """build() turns the text map into tiles."""

    def test_terrain(self) -> None:
        board = BoardConfig.model_validate(_config()).build()
        assert board.size == 3
        assert board.tile((0, 2)).kind is TileKind.HEALTH_WELL
        assert board.tile((1, 1)).kind is TileKind.IMPASSABLE
        assert board.tile((2, 0)).kind is TileKind.DIAMOND_MINE
        assert board.tile((2, 1)).kind is TileKind.UNOCCUPIED

    def test_heroes(self) -> None:
        board = BoardConfig.model_validate(_config()).build()
        alive = board.tile((0, 0))
        assert alive.kind is TileKind.HERO
        assert (alive.hero_id, alive.team, alive.health, alive.dead) == (0, 0, 80, False)
        assert board.tile((1, 2)).dead

    def test_owner_inherits_team_and_dead_flag(self) -> None:
        board = BoardConfig.model_validate(_config()).build()
        owned = board.tile((2, 2)).owner
        assert owned is not None
        assert (owned.hero_id, owned.team, owned.dead) == (1, 1, True)
        assert board.tile((2, 0)).owner is None

    def test_terrain_only(self) -> None:
        board = BoardConfig(rows=["#"]).build()
        assert board.size == 1
        assert board.tile((0, 0)).kind is TileKind.IMPASSABLE
