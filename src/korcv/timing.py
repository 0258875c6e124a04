"""Place a note's phonemes in time."""

from dataclasses import replace
from enum import Enum

from korcv.types import PhonemeToken, TokenKind

CONSONANT_DURATION = 60     # ticks
CODA_TAIL = 120             # ticks


class CodaTiming(Enum):
    """Where a note-final coda is placed."""
    FIXED = "fixed"         # one consonant step after the vowel
    NOTE_END = "note-end"   # coda_tail ticks before the note ends


def fit_offsets(offsets: list[int], total_duration: int) -> list[int]:
    """Scale non-decreasing offsets down so the last one lies within the note."""
    total = max(total_duration, 0)
    span = offsets[-1] if offsets else 0
    if span <= total:
        return offsets
    return [offset * total // span for offset in offsets]


def allocate(
    tokens: list[PhonemeToken],
    total_duration: int,
    consonant_duration: int = CONSONANT_DURATION,
    coda_timing: CodaTiming = CodaTiming.FIXED,
    coda_tail: int = CODA_TAIL,
) -> list[PhonemeToken]:
    """Assign note-relative offsets to a note's tokens.

    Every token but the last gets a fixed length (its own hold, or the
    consonant duration); the last token is left to fill the rest of the note.
    If the fixed lengths overrun a short note, all offsets are scaled down
    so the last one still lands inside the note.

    Returns new tokens; the input list is not modified.
    """
    if consonant_duration < 0:
        raise ValueError(f"consonant_duration must be non-negative, got {consonant_duration}")
    if not tokens:
        return []

    offsets = []
    cursor = 0
    for token in tokens:
        offsets.append(cursor)
        cursor += token.hold if token.hold is not None else consonant_duration

    total = max(total_duration, 0)
    if (coda_timing is CodaTiming.NOTE_END
            and len(tokens) > 1
            and tokens[-1].kind is TokenKind.CODA):
        offsets[-1] = max(offsets[-1], total - coda_tail)

    offsets = fit_offsets(offsets, total)
    return [replace(token, offset=offset) for token, offset in zip(tokens, offsets)]
