"""Phonemizer settings, with defaults overridable from the environment."""

import os
from dataclasses import dataclass
from enum import Enum

from korcv.timing import CODA_TAIL, CONSONANT_DURATION, CodaTiming

HINT_SPACING = 120  # ticks between tokens of a [bracket] hint


class NonHangulPolicy(Enum):
    """What to do with non-Hangul characters inside a Hangul lyric."""
    LITERAL = "literal"     # emit the character as its own label
    SKIP = "skip"


@dataclass
class PhonemizerConfig:
    """Tunable timing and classification behaviour."""
    consonant_duration: int = CONSONANT_DURATION
    hint_spacing: int = HINT_SPACING
    non_hangul: NonHangulPolicy = NonHangulPolicy.LITERAL
    coda_timing: CodaTiming = CodaTiming.FIXED
    coda_tail: int = CODA_TAIL

    @classmethod
    def from_env(cls, environ=None) -> "PhonemizerConfig":
        """Build a config from KORCV_* environment variables.

        Unset variables keep their defaults. Raises ValueError on values
        that do not parse.
        """
        env = os.environ if environ is None else environ
        config = cls()
        if "KORCV_CONSONANT_DURATION" in env:
            config.consonant_duration = _ticks(env, "KORCV_CONSONANT_DURATION")
        if "KORCV_HINT_SPACING" in env:
            config.hint_spacing = _ticks(env, "KORCV_HINT_SPACING")
        if "KORCV_CODA_TAIL" in env:
            config.coda_tail = _ticks(env, "KORCV_CODA_TAIL")
        if "KORCV_NON_HANGUL" in env:
            config.non_hangul = _choice(env, "KORCV_NON_HANGUL", NonHangulPolicy)
        if "KORCV_CODA_TIMING" in env:
            config.coda_timing = _choice(env, "KORCV_CODA_TIMING", CodaTiming)
        return config


def _ticks(env, name: str) -> int:
    raw = env[name]
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def _choice(env, name: str, enum_cls):
    raw = env[name].strip().lower()
    try:
        return enum_cls(raw)
    except ValueError:
        options = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"{name} must be one of {options}, got {raw!r}") from None
