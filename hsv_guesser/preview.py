#!/usr/bin/env python3
from __future__ import annotations

"""CLI entry point that dumps the upcoming-seed table as JSON."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from hsv_guesser.color_deriver import grid_shape, parse_difficulty, slider_increments
from hsv_guesser.round_session import preview_rounds


def build_report(difficulty_name: str, seed: int, rows: int) -> Dict[str, Any]:
    """Collect the table plus the grid facts a front end needs for its sliders."""
    difficulty = parse_difficulty(difficulty_name)
    hue_increment, sv_increment = slider_increments(difficulty)
    table: List[Dict[str, Any]] = preview_rounds(difficulty, seed, rows)
    return {
        "difficulty": difficulty.name.lower(),
        "seed": seed,
        "grid": dict(zip(("hue", "saturation", "value"), grid_shape(difficulty))),
        "sliderIncrements": {"hue": hue_increment, "saturationValue": sv_increment},
        "rows": table,
    }


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Print the colors derived from a run of seeds.")
    parser.add_argument("--difficulty", default="easy", help="easy, medium or hard.")
    parser.add_argument("--seed", type=int, default=0, help="First seed of the table.")
    parser.add_argument("--rows", type=int, default=10, help="Number of seeds to list.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    if args.rows < 0:
        parser.error("--rows must be non-negative")
    try:
        report = build_report(args.difficulty, args.seed, args.rows)
    except ValueError as exc:
        parser.error(str(exc))
    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()
