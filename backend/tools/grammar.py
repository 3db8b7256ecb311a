"""
Odia Phonetic Grammar Tables
============================

Static Latin -> Odia mappings used by the transliteration engine.

Families:
- VOWELS:       standalone vowel letters (ଅ, ଆ, ଇ ...)
- VOWEL_SIGNS:  matras attached after a consonant ("a" is the inherent
                vowel and maps to the empty string)
- CONSONANTS:   base consonants, including the kssa/jnya conjuncts
- SPECIAL:      danda, double danda, OM and digits
- NASALS:       anusvara (M), visarga (H), chandrabindu (~)

Patterns are case-sensitive: "T" (retroflex) and "ta" (dental) are
different letters. The engine falls back to the lowercased chunk for
consonants and vowels only.

All tables are read-only views; nothing may mutate them at runtime.
"""

from types import MappingProxyType
from typing import Mapping, FrozenSet


# ==========================================
#  VOWELS (standalone)
# ==========================================

VOWELS: Mapping[str, str] = MappingProxyType({
    "a": "ଅ",
    "aa": "ଆ",
    "A": "ଆ",
    "i": "ଇ",
    "ii": "ଈ",
    "I": "ଈ",
    "u": "ଉ",
    "uu": "ଊ",
    "U": "ଊ",
    "ru": "ଋ",
    "ruu": "ୠ",
    "e": "ଏ",
    "ai": "ଐ",
    "o": "ଓ",
    "au": "ଔ",
})


# ==========================================
#  VOWEL SIGNS (matras, after a consonant)
# ==========================================

VOWEL_SIGNS: Mapping[str, str] = MappingProxyType({
    "a": "",   # inherent vowel
    "aa": "ା",
    "A": "ା",
    "i": "ି",
    "ii": "ୀ",
    "I": "ୀ",
    "u": "ୁ",
    "uu": "ୂ",
    "U": "ୂ",
    "ru": "ୃ",
    "ruu": "ୄ",
    "e": "େ",
    "ai": "ୈ",
    "o": "ୋ",
    "au": "ୌ",
})


# ==========================================
#  CONSONANTS
# ==========================================

CONSONANTS: Mapping[str, str] = MappingProxyType({
    # Velars
    "k": "କ",
    "kh": "ଖ",
    "g": "ଗ",
    "gh": "ଘ",
    "ng": "ଙ",
    "nG": "ଙ",

    # Palatals
    "ch": "ଚ",
    "chh": "ଛ",
    "j": "ଜ",
    "jh": "ଝ",
    "ny": "ଞ",
    "JN": "ଞ",

    # Retroflex
    "t": "ଟ",
    "T": "ଟ",
    "th": "ଠ",
    "Th": "ଠ",
    "d": "ଡ",
    "D": "ଡ",
    "dh": "ଢ",
    "Dh": "ଢ",
    "N": "ଣ",

    # Dentals
    "ta": "ତ",
    "tha": "ଥ",
    "da": "ଦ",
    "dha": "ଧ",
    "n": "ନ",
    "na": "ନ",

    # Labials
    "p": "ପ",
    "ph": "ଫ",
    "f": "ଫ",
    "b": "ବ",
    "bh": "ଭ",
    "m": "ମ",

    # Approximants
    "y": "ଯ",
    "Y": "ୟ",
    "r": "ର",
    "l": "ଲ",
    "L": "ଳ",
    "w": "ୱ",
    "v": "ଵ",

    # Sibilants
    "sh": "ଶ",
    "Sh": "ଷ",
    "shh": "ଷ",
    "s": "ସ",
    "h": "ହ",

    # Conjunct letters
    "x": "କ୍ଷ",
    "ksh": "କ୍ଷ",
    "gy": "ଜ୍ଞ",
    "gn": "ଜ୍ଞ",
    "jn": "ଜ୍ଞ",
})


# ==========================================
#  SPECIAL SYMBOLS
# ==========================================

SPECIAL: Mapping[str, str] = MappingProxyType({
    ".": "।",
    "..": "॥",
    "om": "ଓଁ",
    "OM": "ଓଁ",
    "0": "୦",
    "1": "୧",
    "2": "୨",
    "3": "୩",
    "4": "୪",
    "5": "୫",
    "6": "୬",
    "7": "୭",
    "8": "୮",
    "9": "୯",
})


# ==========================================
#  NASALS / VISARGA
# ==========================================

NASALS: Mapping[str, str] = MappingProxyType({
    "M": "ଂ",  # anusvara
    "H": "ଃ",  # visarga
    "~": "ଁ",  # chandrabindu
})


# ==========================================
#  HALANT
# ==========================================

HALANT = "୍"

# Both characters suppress the inherent vowel; they are aliases.
HALANT_TRIGGERS: FrozenSet[str] = frozenset({"_", "^"})

# Longest pattern in any family
MAX_PATTERN_LENGTH = 4

# Longest vowel sign the consonant lookahead will consume
MAX_VOWEL_SIGN_LOOKAHEAD = 2


def odia_digits() -> str:
    """Return the ten Odia numerals in order ୦..୯."""
    return "".join(SPECIAL[str(d)] for d in range(10))
