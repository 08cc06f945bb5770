"""Board snapshot: tiles, coordinates, and neighbor lookup."""

from herotactics.board.builder import BoardBuilder
from herotactics.board.grid import Board
from herotactics.board.types import (
    DIRECTIONS,
    Action,
    Coordinate,
    Direction,
    HeroView,
    InvalidDirectionError,
    Owner,
    Tile,
    TileKind,
)

__all__ = [
    "DIRECTIONS",
    "Action",
    "Board",
    "BoardBuilder",
    "Coordinate",
    "Direction",
    "HeroView",
    "InvalidDirectionError",
    "Owner",
    "Tile",
    "TileKind",
]
