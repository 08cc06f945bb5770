"""Command-line entry point: compute one action from a YAML config.

Usage:
    herotactics-decide configs/decide.yaml
    herotactics-decide configs/decide.yaml --override strategy=aggressor
    herotactics-decide configs/decide.yaml --override active_hero=1 --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from herotactics.ai.hero import build_hero
from herotactics.config.decide import DecideConfig
from herotactics.config.display import format_config_summary
from herotactics.config.loader import load_config, split_config_path

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Pick the hero's move for one board snapshot.")
    parser.add_argument("config", type=Path, help="Path to a decide YAML config (Hydra defaults allowed)")
    parser.add_argument(
        "--override",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Hydra-style override, repeatable (e.g. strategy=coward)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log config summary and decision trace")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if not args.config.exists():
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1

    config_dir, config_name = split_config_path(args.config)
    try:
        config = load_config(DecideConfig, config_dir, config_name, overrides=args.override)
    except ValidationError as exc:
        print(f"Error: Invalid config {args.config}:\n{exc}", file=sys.stderr)
        return 1

    logger.info("\n%s", format_config_summary(("Strategy", config.strategy), ("Board", config.board)))

    hero = build_hero(config.strategy)
    action = hero.decide(config.board.build(), config.view())
    print(action)
    return 0


if __name__ == "__main__":
    sys.exit(main())
