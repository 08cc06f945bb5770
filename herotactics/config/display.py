"""Config display utilities for readable run summaries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pydantic import BaseModel


def format_config_summary(*sections: tuple[str, BaseModel | None]) -> str:
    """Format config sections into a readable multi-line summary.

    Each section is a (label, config) pair. The label is the header and the
    config's scalar fields go on one indented line beneath it.

    Auto-detects special fields:
    - variant → appended to the header (excluded from content)
    - rows → board size appended to the header as "NxN", the map itself
      is printed one row per line

    Lists of records are shown as a count plus one line per record.

    Example output:
        Strategy: balanced
          critical_health: 50, low_health: 70, tally_range: 5
        Board: 5x5
          ..W..
          .....
          .....
          heroes: 2
            id: 0, team: 0, row: 2, col: 2, health: 100, dead: false
            id: 1, team: 1, row: 2, col: 4, health: 50, dead: false
    """
    lines: list[str] = []

    for label, config in sections:
        if config is None:
            continue

        data = config.model_dump()
        header = f"{label}:"
        if "variant" in data:
            header += f" {data.pop('variant')}"
        board_rows: list[str] = data.pop("rows", None) or []
        if board_rows:
            header += f" {len(board_rows)}x{len(board_rows)}"
        lines.append(header)

        scalars = [
            f"{key}: {_format_value(value)}"
            for key, value in data.items()
            if value is not None and not isinstance(value, list | dict)
        ]
        if scalars:
            lines.append(f"  {', '.join(scalars)}")

        lines.extend(f"  {row}" for row in board_rows)

        for key, value in data.items():
            if isinstance(value, dict):
                lines.append(f"  {key}: {_format_record(value)}")
            elif isinstance(value, list) and value:
                lines.append(f"  {key}: {len(value)}")
                lines.extend(f"    {_format_record(item)}" for item in value)

    return "\n".join(lines)


def _format_record(item: Any) -> str:
    """Format a dict as `key: value, ...`; anything else via str()."""
    if not isinstance(item, dict):
        return str(item)
    return ", ".join(f"{k}: {_format_value(v)}" for k, v in item.items() if v is not None)


def _format_value(value: Any) -> str:
    """Format a single value for display."""
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)
