from __future__ import annotations

"""Round/session state machine for the color guesser.

Sessions and rounds are immutable values: every operation returns fresh
objects and leaves its arguments alone, so the driving loop owns all state.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Tuple

from hsv_guesser.color_deriver import Difficulty, HSVColor, derive_hsv
from hsv_guesser.seed_stepper import UINT16_MAX, initial_seed, next_seed, seed_stream


logger = logging.getLogger(__name__)


class RoundStateError(ValueError):
    """Raised when a round operation is invoked in the wrong phase."""


@dataclass(frozen=True)
class Session:
    guessed: int
    score: int
    difficulty: Difficulty
    seed: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "guessed": self.guessed,
            "score": self.score,
            "difficulty": self.difficulty.name.lower(),
            "seed": self.seed,
        }


@dataclass(frozen=True)
class Round:
    color: HSVColor
    seed: int
    checking: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "color": self.color.to_dict(),
            "seed": self.seed,
            "checking": self.checking,
        }


def new_session(difficulty: Difficulty = Difficulty.EASY, seed: Optional[int] = None) -> Session:
    """Open a session with no guesses; the seed defaults to the wall clock."""
    if seed is None:
        seed = initial_seed()
    return Session(guessed=0, score=0, difficulty=Difficulty(difficulty), seed=seed & UINT16_MAX)


def start_round(difficulty: Difficulty, seed: int) -> Round:
    """Derive the target for ``seed`` and carry the stepped seed forward."""
    color = derive_hsv(difficulty, seed)
    carried = next_seed(seed)
    logger.debug("round started: seed=%d next=%d target=%s", seed, carried, color.as_tuple())
    return Round(color=color, seed=carried, checking=False)


def check_guess(
    session: Session,
    round_: Round,
    hue: float,
    saturation: float,
    value: float,
) -> Tuple[Session, Round]:
    """Score one guess and reveal the round.

    The guess counts only on exact equality of all three components, so
    guesses should be built with :func:`color_from_steps`.
    """
    if round_.checking:
        logger.warning("check_guess called while round is already checking")
        raise RoundStateError("Round has already been checked; advance to the next round first")

    target = round_.color
    hit = hue == target.hue and saturation == target.saturation and value == target.value
    updated = replace(
        session,
        guessed=session.guessed + 1,
        score=session.score + (1 if hit else 0),
    )
    logger.debug(
        "guess %s against %s: %s (score %d/%d)",
        (hue, saturation, value),
        target.as_tuple(),
        "hit" if hit else "miss",
        updated.score,
        updated.guessed,
    )
    return updated, replace(round_, checking=True)


def check_color(session: Session, round_: Round, guess: HSVColor) -> Tuple[Session, Round]:
    """Convenience wrapper around :func:`check_guess` for an HSVColor guess."""
    return check_guess(session, round_, guess.hue, guess.saturation, guess.value)


def advance_round(session: Session, round_: Round) -> Round:
    """Replace a checked round with the next one.

    ``session.seed`` is left where it is; only the round's carried seed moves.
    """
    if not round_.checking:
        logger.warning("advance_round called before the round was checked")
        raise RoundStateError("Round has not been checked yet; submit a guess first")
    return start_round(session.difficulty, round_.seed)


def preview_rounds(difficulty: Difficulty, seed: int, count: int = 10) -> List[Dict[str, Any]]:
    """Rows of the upcoming-seed table: each seed and the color it derives."""
    rows: List[Dict[str, Any]] = []
    for current in seed_stream(seed, count):
        color = derive_hsv(difficulty, current)
        rows.append(
            {
                "seed": current,
                "hue": color.hue,
                "saturation": color.saturation,
                "value": color.value,
            }
        )
    return rows
