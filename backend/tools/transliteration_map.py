"""
Transliteration Map - Longest-Match Odia Engine
===============================================

Converts romanized (Latin) input into Odia Unicode.

Pipeline:
1. Whole-word dictionary shortcut (case-insensitive)
2. Left-to-right scan. At every position try pattern lengths 4 -> 1;
   at each length try the matchers in fixed order:
       special -> nasal -> consonant -> vowel
   First hit wins.
3. Anything unmatched is copied through verbatim (already-Odia text,
   whitespace, stray punctuation).

Consonant rules:
- "k_" / "k^"  -> କ୍   (halant, prepares a conjunct)
- "ki"         -> କି   (consonant + vowel sign, lookahead of 2 then 1)
- "k"          -> କ    (inherent vowel, also at end of input)

A bare vowel right after a halant or bare consonant attaches as a vowel
sign when it has one; otherwise the standalone letter is written.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .grammar import (
    CONSONANTS,
    HALANT,
    HALANT_TRIGGERS,
    MAX_PATTERN_LENGTH,
    MAX_VOWEL_SIGN_LOOKAHEAD,
    NASALS,
    SPECIAL,
    VOWEL_SIGNS,
    VOWELS,
)
from .word_dictionary import WordDictionary, get_dictionary

logger = logging.getLogger(__name__)


# ==========================================
#  SCAN STATE
# ==========================================

@dataclass
class TransliterationState:
    """Accumulator threaded through one transliterate() call."""
    text: str
    position: int = 0
    output: str = ""
    last_was_consonant: bool = False

    @property
    def done(self) -> bool:
        return self.position >= len(self.text)

    def chunk(self, length: int) -> str:
        return self.text[self.position:self.position + length]

    def apply(self, match: "GraphemeMatch") -> None:
        self.output += match.output
        self.position += match.consumed
        self.last_was_consonant = match.last_was_consonant


@dataclass(frozen=True)
class GraphemeMatch:
    """What a matcher consumed and what it emits."""
    family: str
    consumed: int
    output: str
    last_was_consonant: bool


Matcher = Callable[[TransliterationState, str], Optional[GraphemeMatch]]


# ==========================================
#  MATCHERS
# ==========================================

def match_special(state: TransliterationState, chunk: str) -> Optional[GraphemeMatch]:
    """Danda, OM and digits - exact case only."""
    glyph = SPECIAL.get(chunk)
    if glyph is None:
        return None
    return GraphemeMatch("special", len(chunk), glyph, False)


def match_nasal(state: TransliterationState, chunk: str) -> Optional[GraphemeMatch]:
    """Anusvara / visarga / chandrabindu - exact case only."""
    glyph = NASALS.get(chunk)
    if glyph is None:
        return None
    return GraphemeMatch("nasal", len(chunk), glyph, False)


def _vowel_sign_after(text: str, start: int) -> Tuple[str, int]:
    """Find a vowel sign at text[start:], trying length 2 then 1."""
    for length in range(MAX_VOWEL_SIGN_LOOKAHEAD, 0, -1):
        vchunk = text[start:start + length]
        if len(vchunk) == length and vchunk in VOWEL_SIGNS:
            return VOWEL_SIGNS[vchunk], length
    return "", 0


def match_consonant(state: TransliterationState, chunk: str) -> Optional[GraphemeMatch]:
    """
    Consonant with its halant / vowel-sign lookahead.

    Exact case first ("T" is retroflex), then the lowercased chunk.
    """
    consonant = CONSONANTS.get(chunk) or CONSONANTS.get(chunk.lower())
    if consonant is None:
        return None

    after = state.position + len(chunk)

    if state.text[after:after + 1] in HALANT_TRIGGERS:
        return GraphemeMatch("consonant", len(chunk) + 1, consonant + HALANT, True)

    sign, sign_length = _vowel_sign_after(state.text, after)
    if sign_length:
        return GraphemeMatch("consonant", len(chunk) + sign_length, consonant + sign, False)

    # Inherent vowel stays, even at end of input
    return GraphemeMatch("consonant", len(chunk), consonant, True)


def match_vowel(state: TransliterationState, chunk: str) -> Optional[GraphemeMatch]:
    """Standalone vowel, or its sign when it follows a consonant."""
    vowel = VOWELS.get(chunk) or VOWELS.get(chunk.lower())
    if vowel is None:
        return None

    sign = VOWEL_SIGNS.get(chunk)
    if state.last_was_consonant and sign:
        return GraphemeMatch("vowel", len(chunk), sign, False)
    return GraphemeMatch("vowel", len(chunk), vowel, False)


# Order is a contract: "om" must be OM before it can be o + m,
# "M" must be anusvara before it can be m.
MATCHERS: Tuple[Matcher, ...] = (
    match_special,
    match_nasal,
    match_consonant,
    match_vowel,
)


def match_at(state: TransliterationState) -> Optional[GraphemeMatch]:
    """Longest match at the current position, or None."""
    remaining = len(state.text) - state.position
    for length in range(min(MAX_PATTERN_LENGTH, remaining), 0, -1):
        chunk = state.chunk(length)
        for matcher in MATCHERS:
            match = matcher(state, chunk)
            if match is not None:
                return match
    return None


# ==========================================
#  MAIN API
# ==========================================

def transliterate(text: str, dictionary: Optional[WordDictionary] = None) -> str:
    """
    Transliterate romanized input to Odia.

    Total over all strings: unknown characters pass through unchanged,
    "" returns "".
    """
    if not text:
        return ""

    dictionary = dictionary if dictionary is not None else get_dictionary()

    shortcut = dictionary.lookup(text)
    if shortcut is not None:
        logger.debug(f"[TRANSLIT] Dictionary hit: '{text}' -> {shortcut}")
        return shortcut

    state = TransliterationState(text)
    while not state.done:
        match = match_at(state)
        if match is None:
            match = GraphemeMatch("passthrough", 1, state.chunk(1), False)
        state.apply(match)

    return state.output


def explain(text: str, dictionary: Optional[WordDictionary] = None) -> List[GraphemeMatch]:
    """
    Return the sequence of matches transliterate() makes for text.

    Used by the console tester to show which rule fired where.
    A dictionary hit is reported as a single "dictionary" match.
    """
    if not text:
        return []

    dictionary = dictionary if dictionary is not None else get_dictionary()

    shortcut = dictionary.lookup(text)
    if shortcut is not None:
        return [GraphemeMatch("dictionary", len(text), shortcut, False)]

    steps: List[GraphemeMatch] = []
    state = TransliterationState(text)
    while not state.done:
        match = match_at(state) or GraphemeMatch("passthrough", 1, state.chunk(1), False)
        steps.append(match)
        state.apply(match)
    return steps
