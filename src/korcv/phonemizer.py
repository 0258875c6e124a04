"""Korean C+V phonemizer: lyric text in, timed voicebank labels out."""

import logging
import re
from collections.abc import Sequence
from enum import Enum

from korcv.config import NonHangulPolicy, PhonemizerConfig
from korcv.hangul import decompose, is_syllable
from korcv.syllable import phonemize_syllable
from korcv.timing import allocate, fit_offsets
from korcv.types import Note, Oracle, PhonemeToken
from korcv.voicebank import never_available

logger = logging.getLogger(__name__)

_LATIN = re.compile(r"[A-Za-z \-]*")


class LyricKind(Enum):
    HINT = "hint"                   # "[g a]": labels written by hand
    CONTINUATION = "continuation"   # "+", "+1": extends the previous vowel
    LATIN = "latin"                 # labels separated by spaces
    HANGUL = "hangul"


def classify(lyric: str) -> LyricKind:
    """Decide how a lyric is read. Checked in order: hint, continuation, Latin."""
    if len(lyric) >= 2 and lyric.startswith("[") and lyric.endswith("]"):
        return LyricKind.HINT
    if lyric.startswith("+"):
        return LyricKind.CONTINUATION
    if _LATIN.fullmatch(lyric):
        return LyricKind.LATIN
    return LyricKind.HANGUL


def _hint_tokens(lyric: str, duration: int, spacing: int) -> list[PhonemeToken]:
    labels = lyric[1:-1].split()
    offsets = fit_offsets([i * spacing for i in range(len(labels))], duration)
    return [PhonemeToken(label, offset) for label, offset in zip(labels, offsets)]


def _hangul_tokens(
    lyric: str, oracle: Oracle, policy: NonHangulPolicy,
) -> list[PhonemeToken]:
    last = max((i for i, char in enumerate(lyric) if is_syllable(char)), default=-1)
    tokens = []
    for i, char in enumerate(lyric):
        if is_syllable(char):
            # Only the very first sound of the lyric starts from rest
            tokens.extend(phonemize_syllable(
                decompose(char), not tokens, oracle, is_final=i == last,
            ))
        elif char.isspace():
            continue
        elif policy is NonHangulPolicy.LITERAL:
            tokens.append(PhonemeToken(char))
        else:
            logger.debug(f"Skipping non-Hangul character {char!r} in {lyric!r}")
    return tokens


def phonemize(
    lyric: str,
    duration: int,
    oracle: Oracle | None = None,
    config: PhonemizerConfig | None = None,
) -> list[PhonemeToken]:
    """Phonemize one note's lyric.

    Args:
        lyric: The note's lyric text.
        duration: Total note length in ticks.
        oracle: Voicebank availability query. None behaves like an empty
            voicebank, so every fallback path is taken.
        config: Timing and classification settings.

    Returns:
        Tokens ordered by non-decreasing offset. The last one is meant to be
        stretched by the host to the end of the note.
    """
    if oracle is None:
        oracle = never_available
    config = config or PhonemizerConfig()

    kind = classify(lyric)
    if kind is LyricKind.HINT:
        return _hint_tokens(lyric, duration, config.hint_spacing)
    if kind is LyricKind.CONTINUATION:
        return []
    if kind is LyricKind.LATIN:
        tokens = [PhonemeToken(label) for label in lyric.split()]
    else:
        tokens = _hangul_tokens(lyric, oracle, config.non_hangul)

    return allocate(
        tokens, duration,
        consonant_duration=config.consonant_duration,
        coda_timing=config.coda_timing,
        coda_tail=config.coda_tail,
    )


class KoreanCVPhonemizer:
    """Host-facing adapter: one instance per track, one voicebank at a time."""

    NAME = "Korean C+V Phonemizer"
    TAG = "KO C+V"
    LANGUAGE = "KO"

    def __init__(self, oracle: Oracle | None = None, config: PhonemizerConfig | None = None):
        self.oracle = oracle
        self.config = config or PhonemizerConfig()

    def set_oracle(self, oracle: Oracle | None) -> None:
        """Switch voicebank. None means no voicebank is loaded."""
        self.oracle = oracle

    def process(
        self,
        notes: Sequence[Note],
        prev: Note | None = None,
        next: Note | None = None,
    ) -> list[PhonemeToken]:
        """Phonemize a note group: the lyric note followed by its extension notes.

        The lyric comes from the first note; its phonemes may span the whole
        group. Neighbouring notes are accepted for host compatibility but do
        not affect the result.
        """
        if not notes:
            return []
        total = sum(note.duration for note in notes)
        return phonemize(notes[0].lyric, total, self.oracle, self.config)
