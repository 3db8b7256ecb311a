"""
Word-boundary helpers: the "current word" under the caret and word counts.
"""

import re

_WHITESPACE_RE = re.compile(r'\s')
_LATIN_WORD_RE = re.compile(r'[a-zA-Z]+')


def clamp_cursor(buffer: str, cursor: int) -> int:
    """Force cursor into 0..len(buffer)."""
    return max(0, min(cursor, len(buffer)))


def extract_current_word(buffer: str, cursor: int) -> str:
    """
    Return the Latin word being typed just before `cursor`, or "".

    Takes the last whitespace-separated segment before the caret and
    accepts it only if it is made entirely of ASCII letters, so a segment
    that already holds Odia (or digits, punctuation) is never treated as
    in-progress input.
    """
    before = buffer[:clamp_cursor(buffer, cursor)]
    last = _WHITESPACE_RE.split(before)[-1]
    if _LATIN_WORD_RE.fullmatch(last):
        return last
    return ""


def count_words(text: str) -> int:
    """Whitespace-separated word count, as shown in the status bar."""
    return len(text.split())
