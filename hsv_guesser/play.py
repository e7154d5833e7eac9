#!/usr/bin/env python3
from __future__ import annotations

"""Text-mode driver that plays the color guesser on stdin/stdout."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from hsv_guesser.color_deriver import (
    Difficulty,
    HSVColor,
    color_from_steps,
    grid_shape,
    parse_difficulty,
)
from hsv_guesser.round_session import (
    Round,
    RoundStateError,
    Session,
    advance_round,
    check_color,
    new_session,
    preview_rounds,
    start_round,
)

QUIT_COMMANDS = {"q", "quit", "exit"}
NEXT_COMMANDS = {"", "n", "next"}


def parse_guess(line: str, difficulty: Difficulty) -> HSVColor:
    """Turn ``"h s v"`` grid indices into a guess color."""
    parts = line.replace(",", " ").split()
    if len(parts) != 3:
        raise ValueError("Enter three grid indices: hue saturation value")
    try:
        hue_step, sat_step, val_step = (int(p) for p in parts)
    except ValueError:
        raise ValueError(f"Grid indices must be integers, got {line.strip()!r}") from None
    return color_from_steps(difficulty, hue_step, sat_step, val_step)


def format_color(color: HSVColor) -> str:
    return f"hue={color.hue:.0f} sat={color.saturation:.0f} val={color.value:.0f}"


def play(
    session: Session,
    lines: Iterable[str],
    emit: Callable[[str], None] = print,
    debug_rows: int = 0,
) -> Tuple[Session, Round]:
    """Run the guess/reveal loop until input ends or a quit command arrives."""
    round_ = start_round(session.difficulty, session.seed)
    hue_levels, sat_levels, val_levels = grid_shape(session.difficulty)
    emit(
        f"Difficulty {session.difficulty.name.lower()}: hue 0-{hue_levels - 1}, "
        f"saturation 0-{sat_levels - 1}, value 0-{val_levels - 1}"
    )
    _show_upcoming(session, round_, emit, debug_rows)

    for raw in lines:
        command = raw.strip().lower()
        if command in QUIT_COMMANDS:
            break
        try:
            if command in NEXT_COMMANDS:
                round_ = advance_round(session, round_)
                emit("Next round.")
                _show_upcoming(session, round_, emit, debug_rows)
                continue
            guess = parse_guess(command, session.difficulty)
            previous_score = session.score
            session, round_ = check_color(session, round_, guess)
        except RoundStateError as exc:
            emit(f"! {exc}")
            continue
        except ValueError as exc:
            emit(f"? {exc}")
            continue
        verdict = "Correct!" if session.score > previous_score else "Missed."
        emit(f"{verdict} You guessed {format_color(guess)}; target was {format_color(round_.color)}.")
        emit(f"Guessed: {session.guessed}  Score: {session.score}")
    return session, round_


def _show_upcoming(session: Session, round_: Round, emit: Callable[[str], None], rows: int) -> None:
    if rows <= 0:
        return
    for row in preview_rounds(session.difficulty, round_.seed, rows):
        emit(f"  {row['seed']:>5}  {row['hue']:>9.3f}  {row['saturation']:>7.3f}  {row['value']:>7.3f}")


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Play the HSV color guesser in the terminal.")
    parser.add_argument("--difficulty", default="easy", help="easy, medium or hard.")
    parser.add_argument("--seed", type=int, help="16-bit starting seed (defaults to the clock).")
    parser.add_argument("--debug-rows", type=int, default=0, help="Show this many upcoming seeds per round.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        difficulty = parse_difficulty(args.difficulty)
    except ValueError as exc:
        parser.error(str(exc))

    session = new_session(difficulty, args.seed)
    session, _ = play(session, sys.stdin, debug_rows=args.debug_rows)
    print(json.dumps(session.to_dict(), indent=2))


if __name__ == "__main__":
    main()
