"""
Typing hints - which Latin spellings reach which Odia letters.

Shown under the editor while a consonant family is being typed.
"""

from typing import Dict

TYPING_HINTS: Dict[str, str] = {
    'k': 'ka=କ, kh=ଖ, ksh=କ୍ଷ',
    'g': 'ga=ଗ, gh=ଘ, gy=ଜ୍ଞ',
    'c': 'ch=ଚ, chh=ଛ',
    'j': 'ja=ଜ, jh=ଝ, jn=ଜ୍ଞ',
    't': 'ta=ତ/ଟ, th=ଥ/ଠ',
    'd': 'da=ଦ/ଡ, dh=ଧ/ଢ',
    'n': 'na=ନ, N=ଣ, ng=ଙ, ny=ଞ',
    'p': 'pa=ପ, ph=ଫ',
    'b': 'ba=ବ, bh=ଭ',
    's': 'sa=ସ, sh=ଶ, Sh=ଷ',
}


def get_typing_hint(text: str) -> str:
    """Hint for the last character typed, or "" if there is none."""
    if not text:
        return ""
    return TYPING_HINTS.get(text[-1].lower(), "")
