"""Turn one decomposed syllable into an ordered phoneme list."""

from korcv.resolve import resolve_coda, resolve_nucleus
from korcv.types import Oracle, PhonemeToken, Syllable, TokenKind


def phonemize_syllable(
    syllable: Syllable, is_initial: bool, oracle: Oracle, is_final: bool = True,
) -> list[PhonemeToken]:
    """Onset, then nucleus, then coda. Offsets are syllable-relative.

    is_initial only affects the nucleus when the syllable has no onset:
    a vowel after a consonant never starts from rest. Likewise a vowel
    only ends into rest when it is the last sound of the lyric.
    """
    tokens = []
    if syllable.onset:
        tokens.append(PhonemeToken(syllable.onset, 0, TokenKind.ONSET))
        is_initial = False

    ends_lyric = is_final and not syllable.coda
    tokens.extend(resolve_nucleus(syllable.nucleus, is_initial, oracle, ends_lyric))

    if syllable.coda:
        tokens.append(resolve_coda(syllable.coda, syllable.nucleus.label, oracle))
    return tokens
