"""Board configuration: an ASCII terrain map plus hero and ownership lists.

Example YAML:
    rows:
      - "..W.."
      - "....."
      - "....."
      - ".#..."
      - "M...M"
    heroes:
      - {id: 0, team: 0, row: 2, col: 2, health: 100}
      - {id: 1, team: 1, row: 2, col: 4, health: 50}
    owners:
      - {row: 4, col: 4, hero: 1}

Legend: `.` unoccupied, `#` impassable, `W` health well, `M` diamond mine.
Heroes are placed on top of `.` cells. Mine owners refer to hero ids; a
mine's owner inherits that hero's team and dead flag.
"""

from __future__ import annotations

from typing import Self

from pydantic import Field, model_validator

from herotactics.board.builder import BoardBuilder
from herotactics.board.grid import Board
from herotactics.board.types import Owner
from herotactics.config.base import StrictBaseModel

LEGEND = frozenset(".#WM")


class HeroPlacement(StrictBaseModel):
    """A hero standing on the board."""

    id: int
    team: int
    row: int = Field(ge=0)
    col: int = Field(ge=0)
    health: int = Field(default=100, ge=0)
    dead: bool = False


class MineOwnership(StrictBaseModel):
    """Which hero holds the mine at (row, col)."""

    row: int = Field(ge=0)
    col: int = Field(ge=0)
    hero: int


class BoardConfig(StrictBaseModel):
    """Square board described as text rows."""

    rows: list[str] = Field(min_length=1)
    heroes: list[HeroPlacement] = Field(default_factory=list)
    owners: list[MineOwnership] = Field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.rows)

    def cell(self, row: int, col: int) -> str:
        return self.rows[row][col]

    @model_validator(mode="after")
    def check_layout(self) -> Self:
        """Ensure the map is square, uses the legend, and references resolve."""
        size = self.size
        for r, line in enumerate(self.rows):
            if len(line) != size:
                raise ValueError(f"rows[{r}] has {len(line)} cells, expected {size} (board must be square)")
            unknown = set(line) - LEGEND
            if unknown:
                raise ValueError(f"rows[{r}] uses unknown symbols {sorted(unknown)}; legend is {sorted(LEGEND)}")

        ids = [h.id for h in self.heroes]
        if len(ids) != len(set(ids)):
            raise ValueError(f"hero ids must be unique, got {ids}")

        for h in self.heroes:
            if h.row >= size or h.col >= size:
                raise ValueError(f"hero {h.id} at ({h.row}, {h.col}) is off a {size}x{size} board")
            if self.cell(h.row, h.col) != ".":
                raise ValueError(f"hero {h.id} at ({h.row}, {h.col}) must stand on an unoccupied cell")

        for o in self.owners:
            if o.row >= size or o.col >= size or self.cell(o.row, o.col) != "M":
                raise ValueError(f"owner entry at ({o.row}, {o.col}) does not point at a mine")
            if o.hero not in ids:
                raise ValueError(f"mine at ({o.row}, {o.col}) is owned by unknown hero {o.hero}")

        return self

    def build(self) -> Board:
        """Build the Board this config describes."""
        heroes = {h.id: h for h in self.heroes}
        owners = {
            (o.row, o.col): Owner(hero_id=o.hero, team=heroes[o.hero].team, dead=heroes[o.hero].dead)
            for o in self.owners
        }

        builder = BoardBuilder(self.size)
        for r, line in enumerate(self.rows):
            for c, symbol in enumerate(line):
                match symbol:
                    case "#":
                        builder.with_obstacle(r, c)
                    case "W":
                        builder.with_health_well(r, c)
                    case "M":
                        builder.with_mine(r, c, owner=owners.get((r, c)))

        for h in self.heroes:
            builder.with_hero(h.row, h.col, hero_id=h.id, team=h.team, health=h.health, dead=h.dead)

        return builder.build()
