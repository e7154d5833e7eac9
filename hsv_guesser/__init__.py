"""Deterministic HSV color-guessing core."""

from .seed_stepper import next_seed, initial_seed, seed_stream
from .color_deriver import Difficulty, HSVColor, derive_hsv, color_from_steps, parse_difficulty
from .round_session import (
    Session,
    Round,
    RoundStateError,
    new_session,
    start_round,
    check_guess,
    check_color,
    advance_round,
    preview_rounds,
)

__all__ = [
    "next_seed",
    "initial_seed",
    "seed_stream",
    "Difficulty",
    "HSVColor",
    "derive_hsv",
    "color_from_steps",
    "parse_difficulty",
    "Session",
    "Round",
    "RoundStateError",
    "new_session",
    "start_round",
    "check_guess",
    "check_color",
    "advance_round",
    "preview_rounds",
]
