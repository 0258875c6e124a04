"""Core data types for korcv."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

# Voicebank availability query: True when a sample exists for the label.
Oracle = Callable[[str], bool]


class TokenKind(Enum):
    """Which part of a syllable a phoneme token came from."""
    ONSET = "onset"
    NUCLEUS = "nucleus"
    GLIDE = "glide"         # second half of a diphthong fallback pair
    CODA = "coda"
    LITERAL = "literal"     # hint, Latin passthrough or non-Hangul character


@dataclass
class PhonemeToken:
    """A phoneme label placed at a tick offset from the note start."""
    label: str
    offset: int = 0                     # ticks
    kind: TokenKind = TokenKind.LITERAL
    hold: int | None = None             # fixed ticks before the next token


@dataclass(frozen=True)
class Fallback:
    """Two-phone substitution for a diphthong missing from the voicebank."""
    first: str
    second: str
    first_duration: int     # ticks


@dataclass(frozen=True)
class VowelForm:
    """A nucleus vowel with its position-dependent labels."""
    jamo: str
    label: str              # plain vowel letter, e.g. "wa"
    initial: str            # boundary-marked, e.g. "- wa"
    final: str              # "wa -" for diphthongs, plain label otherwise
    diphthong: bool = False
    fallback: Fallback | None = None

    def form(self, is_initial: bool, is_final: bool = True) -> str:
        if is_initial:
            return self.initial
        return self.final if is_final else self.label


@dataclass(frozen=True)
class Syllable:
    """One precomposed Hangul block split into onset, nucleus and coda."""
    char: str
    onset: str | None       # boundary-marked label, None when silent
    nucleus: VowelForm
    coda: str | None        # raw coda jamo, resolved later


@dataclass
class Note:
    """A host note carrying a lyric."""
    lyric: str
    duration: int           # ticks
    position: int = 0       # ticks from sequence start
    pitch: int | None = None

    @property
    def end(self) -> int:
        return self.position + self.duration
