"""Jamo-to-phoneme symbol tables for Korean C+V voicebanks.

All tables are built once at import time and never modified afterwards.
Labels follow the common Korean CV naming: a leading "- " marks a sample
that starts from rest, a trailing " -" marks one that ends into rest, and
upper-case labels are neutralized coda releases.
"""

from types import MappingProxyType

from korcv.types import Fallback, VowelForm

BOUNDARY = "-"


def boundary(label: str) -> str:
    """Mark a label as starting from rest: "a" -> "- a"."""
    return f"{BOUNDARY} {label}"


def ending(label: str) -> str:
    """Mark a label as ending into rest: "a" -> "a -"."""
    return f"{label} {BOUNDARY}"


# Unicode ordering of the jamo inside precomposed syllable blocks
ONSET_ORDER = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)
NUCLEUS_ORDER = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ", "ㅗ", "ㅘ", "ㅙ",
    "ㅚ", "ㅛ", "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ", "ㅡ", "ㅢ", "ㅣ",
)
CODA_ORDER = (
    "ㄱ", "ㄲ", "ㄳ", "ㄴ", "ㄵ", "ㄶ", "ㄷ", "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ",
    "ㄾ", "ㄿ", "ㅀ", "ㅁ", "ㅂ", "ㅄ", "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅊ", "ㅋ",
    "ㅌ", "ㅍ", "ㅎ",
)

# Onsets always start from rest; ㅇ is silent and produces nothing.
ONSETS = MappingProxyType({
    "ㄱ": "- g", "ㄲ": "- kk", "ㄴ": "- n", "ㄷ": "- d", "ㄸ": "- tt",
    "ㄹ": "- r", "ㅁ": "- m", "ㅂ": "- b", "ㅃ": "- pp", "ㅅ": "- s",
    "ㅆ": "- ss", "ㅇ": "", "ㅈ": "- j", "ㅉ": "- jj", "ㅊ": "- ch",
    "ㅋ": "- k", "ㅌ": "- t", "ㅍ": "- p", "ㅎ": "- h",
})

# ㅐ and ㅔ are sung identically
SIMPLE_VOWELS = MappingProxyType({
    "ㅏ": "a", "ㅐ": "e", "ㅓ": "eo", "ㅔ": "e",
    "ㅗ": "o", "ㅜ": "u", "ㅡ": "eu", "ㅣ": "i",
})

# ㅙ, ㅚ and ㅞ share one sample
DIPHTHONGS = MappingProxyType({
    "ㅑ": "ya", "ㅒ": "yae", "ㅕ": "yeo", "ㅖ": "ye", "ㅘ": "wa",
    "ㅙ": "we", "ㅚ": "we", "ㅛ": "yo", "ㅝ": "wo", "ㅞ": "we",
    "ㅟ": "wi", "ㅠ": "yu", "ㅢ": "ui",
})

# Glides most often missing from a voicebank, split into two short vowels
FALLBACKS = MappingProxyType({
    "ㅖ": Fallback("i", "e", 30),
    "ㅢ": Fallback("eu", "i", 60),
    "ㅘ": Fallback("o", "a", 20),
    "ㅟ": Fallback("u", "i", 20),
    "ㅝ": Fallback("u", "eo", 30),
})


def _build_nuclei() -> dict[str, VowelForm]:
    nuclei = {}
    for jamo, label in SIMPLE_VOWELS.items():
        nuclei[jamo] = VowelForm(
            jamo=jamo, label=label, initial=boundary(label), final=label,
        )
    for jamo, label in DIPHTHONGS.items():
        nuclei[jamo] = VowelForm(
            jamo=jamo, label=label,
            initial=boundary(label), final=ending(label),
            diphthong=True, fallback=FALLBACKS.get(jamo),
        )
    return nuclei


NUCLEI = MappingProxyType(_build_nuclei())

CODA_CLASS_LABELS = ("K", "N", "T", "L", "M", "P", "NG")

# Coda neutralization, clusters included
CODA_CLASSES = MappingProxyType({
    "ㄱ": "K", "ㄲ": "K", "ㅋ": "K",
    "ㄴ": "N",
    "ㄷ": "T", "ㅅ": "T", "ㅆ": "T", "ㅈ": "T", "ㅊ": "T", "ㅌ": "T", "ㅎ": "T",
    "ㄹ": "L",
    "ㅁ": "M",
    "ㅂ": "P", "ㅍ": "P",
    "ㅇ": "NG",
    "ㄳ": "K", "ㄵ": "N", "ㄶ": "N", "ㄺ": "K", "ㄻ": "M",
    "ㄼ": "L", "ㄽ": "L", "ㄾ": "L", "ㄿ": "P", "ㅀ": "L", "ㅄ": "P",
})

VC_TEMPLATES = MappingProxyType({
    cls: "{vowel} " + cls for cls in CODA_CLASS_LABELS
})
