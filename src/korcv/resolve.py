"""Resolve nucleus and coda jamo into voicebank labels.

Both resolvers query the voicebank oracle for the richest label first
and fall back to something the voicebank is more likely to have:
diphthongs split into two plain vowels, VC codas collapse to their
neutralized release class.
"""

import logging

from korcv.tables import CODA_CLASSES, VC_TEMPLATES, boundary
from korcv.types import Oracle, PhonemeToken, TokenKind, VowelForm

logger = logging.getLogger(__name__)


def coda_class(coda: str) -> str:
    """Neutralized release class of a coda jamo, e.g. ㄺ -> "K"."""
    try:
        return CODA_CLASSES[coda]
    except KeyError:
        raise ValueError(f"Not a coda jamo: {coda!r}") from None


def vc_label(vowel: str, cls: str) -> str:
    """Combined vowel+coda label, e.g. ("a", "N") -> "a N"."""
    return VC_TEMPLATES[cls].format(vowel=vowel)


def resolve_nucleus(
    vowel: VowelForm, is_initial: bool, oracle: Oracle, is_final: bool = True,
) -> list[PhonemeToken]:
    """Produce the nucleus token(s) for a vowel.

    Simple vowels never query the oracle. Diphthongs are looked up in their
    position-dependent form, ending into rest only when is_final and not
    initial. A missing diphthong with a fallback rule becomes a short first
    vowel followed by a glide at the rule's fixed offset.
    """
    if not vowel.diphthong:
        label = vowel.initial if is_initial else vowel.label
        return [PhonemeToken(label, 0, TokenKind.NUCLEUS)]

    native = vowel.form(is_initial, is_final)
    if oracle(native):
        return [PhonemeToken(native, 0, TokenKind.NUCLEUS)]

    fallback = vowel.fallback
    if fallback is None:
        logger.warning(
            f"No sample for diphthong {native!r} ({vowel.jamo}) and no fallback; "
            f"keeping native label"
        )
        return [PhonemeToken(native, 0, TokenKind.NUCLEUS)]

    logger.debug(f"Diphthong {native!r} unavailable, using {fallback.first}+{fallback.second}")
    first = boundary(fallback.first) if is_initial else fallback.first
    return [
        PhonemeToken(first, 0, TokenKind.NUCLEUS, hold=fallback.first_duration),
        PhonemeToken(fallback.second, fallback.first_duration, TokenKind.GLIDE),
    ]


def resolve_coda(coda: str, vowel: str, oracle: Oracle) -> PhonemeToken:
    """Produce the coda token: VC label when sampled, bare class otherwise."""
    cls = coda_class(coda)
    combined = vc_label(vowel, cls)
    if oracle(combined):
        return PhonemeToken(combined, 0, TokenKind.CODA)
    return PhonemeToken(cls, 0, TokenKind.CODA)
