"""Tests for Board construction, coordinate checks, and neighbor lookup."""

from __future__ import annotations

import pytest

from herotactics.board import (
    Action,
    Board,
    BoardBuilder,
    Coordinate,
    Direction,
    HeroView,
    InvalidDirectionError,
    Owner,
    Tile,
    TileKind,
)


def _empty_rows(size: int) -> list[list[Tile]]:
    return [[Tile(coord=Coordinate(r, c)) for c in range(size)] for r in range(size)]


class TestBoardConstruction:
    """Board enforces its shape and coordinate invariants."""

    def test_accepts_square_rows(self) -> None:
        board = Board(_empty_rows(3))
        assert board.size == 3
        assert len(list(board)) == 9

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValueError, match="at least one row"):
            Board([])

    def test_rejects_non_square(self) -> None:
        rows = _empty_rows(3)
        rows[1] = rows[1][:2]
        with pytest.raises(ValueError, match="not square"):
            Board(rows)

    def test_rejects_misplaced_tile(self) -> None:
        """A tile's stored coordinate must equal its matrix position."""
        rows = _empty_rows(2)
        rows[0][1] = Tile(coord=Coordinate(1, 1))
        with pytest.raises(ValueError, match="claims coordinate"):
            Board(rows)

    def test_copies_input(self) -> None:
        """Mutating the source rows afterwards does not change the board."""
        rows = _empty_rows(2)
        board = Board(rows)
        rows[0][0] = Tile(coord=Coordinate(0, 0), kind=TileKind.HEALTH_WELL)
        assert board.tile((0, 0)).kind is TileKind.UNOCCUPIED


class TestIsValid:
    """Coordinate validity is 0 <= row, col < N."""

    @pytest.mark.parametrize("coord", [(0, 0), (4, 4), (0, 4), (2, 3)])
    def test_inside(self, coord: tuple[int, int]) -> None:
        assert BoardBuilder(5).build().is_valid(coord)

    @pytest.mark.parametrize("coord", [(-1, 0), (0, -1), (5, 0), (0, 5), (5, 5)])
    def test_outside(self, coord: tuple[int, int]) -> None:
        assert not BoardBuilder(5).build().is_valid(coord)

    def test_tile_off_board_raises(self) -> None:
        with pytest.raises(IndexError):
            BoardBuilder(3).build().tile((3, 0))


class TestNeighbor:
    """Neighbor lookup applies unit offsets and respects the edges."""

    def test_offsets(self) -> None:
        board = BoardBuilder(3).build()
        center = Coordinate(1, 1)
        assert board.neighbor(center, Direction.NORTH).coord == (0, 1)  # type: ignore[union-attr]
        assert board.neighbor(center, Direction.SOUTH).coord == (2, 1)  # type: ignore[union-attr]
        assert board.neighbor(center, Direction.EAST).coord == (1, 2)  # type: ignore[union-attr]
        assert board.neighbor(center, Direction.WEST).coord == (1, 0)  # type: ignore[union-attr]

    def test_accepts_string_tokens(self) -> None:
        board = BoardBuilder(3).build()
        tile = board.neighbor((1, 1), "North")
        assert tile is not None
        assert tile.coord == (0, 1)

    def test_edge_returns_none(self) -> None:
        board = BoardBuilder(3).build()
        assert board.neighbor((0, 0), Direction.NORTH) is None
        assert board.neighbor((0, 0), Direction.WEST) is None
        assert board.neighbor((2, 2), Direction.SOUTH) is None
        assert board.neighbor((2, 2), Direction.EAST) is None

    @pytest.mark.parametrize("token", ["north", "Up", "Stay", "", 3])
    def test_unknown_direction_raises(self, token: object) -> None:
        board = BoardBuilder(3).build()
        with pytest.raises(InvalidDirectionError):
            board.neighbor((1, 1), token)  # type: ignore[arg-type]

    def test_invalid_direction_is_value_error(self) -> None:
        assert issubclass(InvalidDirectionError, ValueError)


class TestDirection:
    """Direction helpers."""

    def test_opposites(self) -> None:
        assert Direction.NORTH.opposite is Direction.SOUTH
        assert Direction.EAST.opposite is Direction.WEST
        for direction in Direction:
            assert direction.opposite.opposite is direction

    def test_action_tokens(self) -> None:
        assert Direction.WEST.action is Action.WEST
        assert [d.action.value for d in Direction] == ["North", "East", "South", "West"]


class TestBoardBuilder:
    """Fluent builder places pieces on an empty grid."""

    def test_places_pieces(self) -> None:
        owner = Owner(hero_id=7, team=1)
        board = (
            BoardBuilder(4)
            .with_hero(1, 1, hero_id=0, team=0, health=80)
            .with_health_well(0, 3)
            .with_mine(3, 3, owner=owner)
            .with_obstacle(2, 0)
            .build()
        )
        hero = board.tile((1, 1))
        assert hero.kind is TileKind.HERO
        assert hero.health == 80
        assert board.tile((0, 3)).kind is TileKind.HEALTH_WELL
        assert board.tile((3, 3)).owner == owner
        assert board.tile((2, 0)).kind is TileKind.IMPASSABLE
        assert not board.tile((2, 0)).is_traversable
        assert board.tile((0, 0)).is_traversable

    def test_rejects_off_board_placement(self) -> None:
        with pytest.raises(ValueError):
            BoardBuilder(3).with_health_well(3, 0)

    def test_find_hero(self) -> None:
        board = BoardBuilder(3).with_hero(2, 1, hero_id=5, team=1).build()
        tile = board.find_hero(5)
        assert tile is not None
        assert tile.coord == (2, 1)
        assert board.find_hero(6) is None


class TestHeroView:
    """HeroView is derived from hero tiles only."""

    def test_from_tile(self) -> None:
        board = BoardBuilder(3).with_hero(0, 2, hero_id=4, team=1, health=65).build()
        view = HeroView.from_tile(board.tile((0, 2)))
        assert view == HeroView(hero_id=4, team=1, health=65, coord=Coordinate(0, 2))

    def test_from_non_hero_tile_raises(self) -> None:
        with pytest.raises(ValueError, match="not a hero"):
            HeroView.from_tile(Tile(coord=Coordinate(0, 0)))
