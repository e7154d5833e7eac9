"""Seed to HSV derivation on the discrete per-difficulty color grid."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import IntEnum
from typing import Dict, Tuple


HUE_SPAN = 360.0
SV_SPAN = 100.0


class Difficulty(IntEnum):
    EASY = 0
    MEDIUM = 1
    HARD = 2


@dataclass(frozen=True)
class HSVColor:
    hue: float
    saturation: float
    value: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.hue, self.saturation, self.value)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class ChannelField:
    """Bit field of a seed plus the grid it is quantised onto."""

    mask: int
    shift: int
    divisor: int
    buckets: int
    span: float

    def step(self, seed: int) -> int:
        """Return the grid index encoded in ``seed`` (may exceed ``buckets``)."""
        return ((seed & self.mask) >> self.shift) // self.divisor

    def scale(self, step: int) -> float:
        return (self.span / self.buckets) * step


@dataclass(frozen=True)
class DifficultyProfile:
    hue: ChannelField
    saturation: ChannelField
    value: ChannelField
    hue_slider_steps: int
    sv_slider_steps: int


PROFILES: Dict[Difficulty, DifficultyProfile] = {
    # 6 hues, 4 saturations, 4 values
    Difficulty.EASY: DifficultyProfile(
        hue=ChannelField(0xFF00, 8, 6, 6, HUE_SPAN),
        saturation=ChannelField(0xF0, 4, 4, 4, SV_SPAN),
        value=ChannelField(0x0F, 0, 4, 4, SV_SPAN),
        hue_slider_steps=7,
        sv_slider_steps=5,
    ),
    # 16 hues, 8 saturations, 8 values; both sat and val read bits 4-7
    Difficulty.MEDIUM: DifficultyProfile(
        hue=ChannelField(0xFF00, 8, 16, 16, HUE_SPAN),
        saturation=ChannelField(0xF0, 4, 2, 8, SV_SPAN),
        value=ChannelField(0xF0, 4, 2, 8, SV_SPAN),
        hue_slider_steps=17,
        sv_slider_steps=9,
    ),
    # 64 hues (7-bit field wraps twice), 16 saturations, 16 values
    Difficulty.HARD: DifficultyProfile(
        hue=ChannelField(0x7F00, 8, 1, 64, HUE_SPAN),
        saturation=ChannelField(0xF0, 4, 1, 16, SV_SPAN),
        value=ChannelField(0x0F, 0, 1, 16, SV_SPAN),
        hue_slider_steps=65,
        sv_slider_steps=17,
    ),
}


def parse_difficulty(name: str) -> Difficulty:
    """Map a CLI-style name (``easy``/``medium``/``hard``) to a Difficulty."""
    try:
        return Difficulty[name.strip().upper()]
    except KeyError:
        choices = ", ".join(d.name.lower() for d in Difficulty)
        raise ValueError(f"Unknown difficulty {name!r}; expected one of: {choices}") from None


def derive_hsv(difficulty: Difficulty, seed: int) -> HSVColor:
    """Return the target color that ``seed`` encodes at ``difficulty``."""
    profile = PROFILES[Difficulty(difficulty)]
    return _compose(
        profile,
        profile.hue.step(seed),
        profile.saturation.step(seed),
        profile.value.step(seed),
    )


def color_from_steps(
    difficulty: Difficulty, hue_step: int, sat_step: int, val_step: int
) -> HSVColor:
    """Build a guess from grid indices using the derivation's own arithmetic.

    Going through the same scale and modulo as :func:`derive_hsv` keeps the
    exact float comparison in scoring reliable.
    """
    profile = PROFILES[Difficulty(difficulty)]
    for label, field, step in (
        ("hue", profile.hue, hue_step),
        ("saturation", profile.saturation, sat_step),
        ("value", profile.value, val_step),
    ):
        if not 0 <= step < field.buckets:
            raise ValueError(
                f"{label} step {step} outside 0..{field.buckets - 1} for {Difficulty(difficulty).name}"
            )
    return _compose(profile, hue_step, sat_step, val_step)


def grid_shape(difficulty: Difficulty) -> Tuple[int, int, int]:
    """Number of distinct (hue, saturation, value) levels at ``difficulty``."""
    profile = PROFILES[Difficulty(difficulty)]
    return (profile.hue.buckets, profile.saturation.buckets, profile.value.buckets)


def slider_increments(difficulty: Difficulty) -> Tuple[float, float]:
    """Return the (hue, saturation/value) slider increments for a difficulty."""
    profile = PROFILES[Difficulty(difficulty)]
    return (HUE_SPAN / profile.hue_slider_steps, SV_SPAN / profile.sv_slider_steps)


def _compose(profile: DifficultyProfile, hue_step: int, sat_step: int, val_step: int) -> HSVColor:
    return HSVColor(
        hue=profile.hue.scale(hue_step) % HUE_SPAN,
        saturation=profile.saturation.scale(sat_step),
        value=profile.value.scale(val_step),
    )
