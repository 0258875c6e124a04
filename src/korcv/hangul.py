"""Decompose precomposed Hangul syllable blocks into onset, nucleus and coda."""

from korcv.tables import CODA_ORDER, NUCLEI, NUCLEUS_ORDER, ONSET_ORDER, ONSETS
from korcv.types import Syllable

SYLLABLE_BASE = 0xAC00
SYLLABLE_LAST = 0xD7A3
NUCLEUS_COUNT = 21
CODA_COUNT = 28     # 27 codas plus "no coda"
ONSET_SPAN = NUCLEUS_COUNT * CODA_COUNT


def is_syllable(char: str) -> bool:
    """Return True if char is a single precomposed Hangul syllable block."""
    return len(char) == 1 and SYLLABLE_BASE <= ord(char) <= SYLLABLE_LAST


def decompose_indices(char: str) -> tuple[int, int, int]:
    """Return the (onset, nucleus, coda) jamo indices of a syllable block.

    A coda index of 0 means the syllable has no coda.
    """
    if not is_syllable(char):
        raise ValueError(f"Not a precomposed Hangul syllable: {char!r}")
    offset = ord(char) - SYLLABLE_BASE
    return (
        offset // ONSET_SPAN,
        (offset % ONSET_SPAN) // CODA_COUNT,
        offset % CODA_COUNT,
    )


def compose(onset: int, nucleus: int, coda: int = 0) -> str:
    """Build the syllable block for the given jamo indices."""
    if not (0 <= onset < len(ONSET_ORDER)
            and 0 <= nucleus < NUCLEUS_COUNT
            and 0 <= coda < CODA_COUNT):
        raise ValueError(f"Jamo indices out of range: ({onset}, {nucleus}, {coda})")
    return chr(SYLLABLE_BASE + onset * ONSET_SPAN + nucleus * CODA_COUNT + coda)


def syllable_from_indices(onset: int, nucleus: int, coda: int) -> Syllable:
    """Resolve jamo indices to their symbolic forms."""
    char = compose(onset, nucleus, coda)
    onset_label = ONSETS[ONSET_ORDER[onset]]
    return Syllable(
        char=char,
        onset=onset_label or None,
        nucleus=NUCLEI[NUCLEUS_ORDER[nucleus]],
        coda=CODA_ORDER[coda - 1] if coda else None,
    )


def decompose(char: str) -> Syllable:
    """Decompose one syllable block, e.g. "간" -> onset "- g", nucleus ㅏ, coda ㄴ."""
    return syllable_from_indices(*decompose_indices(char))
