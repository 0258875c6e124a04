"""Korean C+V phonemizer for singing voice synthesis."""

from korcv.config import NonHangulPolicy, PhonemizerConfig
from korcv.phonemizer import KoreanCVPhonemizer, classify, phonemize
from korcv.timing import CodaTiming
from korcv.types import Note, PhonemeToken, TokenKind

__all__ = [
    "CodaTiming",
    "KoreanCVPhonemizer",
    "NonHangulPolicy",
    "Note",
    "PhonemeToken",
    "PhonemizerConfig",
    "TokenKind",
    "classify",
    "phonemize",
]
