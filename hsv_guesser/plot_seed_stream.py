#!/usr/bin/env python3
from __future__ import annotations

"""Plotting utility that visualises the colors a seed stream produces."""

import argparse
import colorsys
import sys
from collections import Counter
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from hsv_guesser.color_deriver import Difficulty, HSVColor, derive_hsv, grid_shape, parse_difficulty
from hsv_guesser.seed_stepper import seed_stream

SWATCHES_PER_ROW = 32


def to_rgb(color: HSVColor) -> Tuple[float, float, float]:
    """Convert a degree/percent HSV color to an RGB triple in [0, 1]."""
    return colorsys.hsv_to_rgb(color.hue / 360.0, color.saturation / 100.0, color.value / 100.0)


def hue_bucket_counts(difficulty: Difficulty, colors: Sequence[HSVColor]) -> List[int]:
    """Count how often each hue level of the grid appears in ``colors``."""
    hue_levels = grid_shape(difficulty)[0]
    width = 360.0 / hue_levels
    counts = Counter(int(round(c.hue / width)) % hue_levels for c in colors)
    return [counts.get(i, 0) for i in range(hue_levels)]


def swatch_grid(colors: Sequence[HSVColor], per_row: int = SWATCHES_PER_ROW) -> List[List[Tuple[float, float, float]]]:
    """Lay colors out row by row, padding the last row with white."""
    rows: List[List[Tuple[float, float, float]]] = []
    for start in range(0, len(colors), per_row):
        row = [to_rgb(c) for c in colors[start:start + per_row]]
        row.extend([(1.0, 1.0, 1.0)] * (per_row - len(row)))
        rows.append(row)
    return rows


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Plot the colors derived from a run of seeds.")
    parser.add_argument("--difficulty", default="hard", help="easy, medium or hard.")
    parser.add_argument("--seed", type=int, default=0, help="First seed of the run.")
    parser.add_argument("--count", type=int, default=256, help="Number of seeds to plot.")
    parser.add_argument("--output", required=True, help="Path to save the figure (PNG/SVG).")
    args = parser.parse_args(argv)

    if args.count <= 0:
        parser.error("--count must be positive")
    try:
        difficulty = parse_difficulty(args.difficulty)
    except ValueError as exc:
        parser.error(str(exc))

    colors = [derive_hsv(difficulty, s) for s in seed_stream(args.seed, args.count)]

    fig, axes = plt.subplots(2, 1, figsize=(12, 9))

    ax0 = axes[0]
    ax0.imshow(swatch_grid(colors), aspect="auto", interpolation="nearest")
    ax0.set_xticks([])
    ax0.set_yticks([])
    ax0.set_title(f"{args.count} targets from seed {args.seed} ({difficulty.name.lower()})")

    ax1 = axes[1]
    counts = hue_bucket_counts(difficulty, colors)
    levels = range(len(counts))
    bar_colors = [colorsys.hsv_to_rgb(i / len(counts), 1.0, 1.0) for i in levels]
    ax1.bar(levels, counts, color=bar_colors, edgecolor="#334155", linewidth=0.5)
    ax1.set_xlabel("Hue level")
    ax1.set_ylabel("Targets")
    ax1.set_title("Hue coverage of the seed stream")

    fig.tight_layout()
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    print(f"Saved seed stream plot to {output_path}")


if __name__ == "__main__":
    main()
