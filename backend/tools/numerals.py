"""
Odia numerals and script detection.
"""

import re
from typing import List, Optional

from .grammar import odia_digits

ODIA_DIGITS = odia_digits()

_FROM_ODIA = str.maketrans(ODIA_DIGITS, "0123456789")

# ASCII only: \d would also take Devanagari and other scripts' digits
_LEADING_DIGITS_RE = re.compile(r"\s*([0-9]+)")

# Odia Unicode block U+0B00..U+0B7F
_ODIA_RE = re.compile(r"[\u0B00-\u0B7F]")


def to_odia_numeral(n: int) -> str:
    """
    12 -> "୧୨". Digit by digit, so there is no upper bound on n.

    Negative numbers keep a leading "-".
    """
    if n < 0:
        return "-" + to_odia_numeral(-n)

    digits: List[str] = []
    while True:
        n, d = divmod(n, 10)
        digits.append(ODIA_DIGITS[d])
        if n == 0:
            break
    return "".join(reversed(digits))


def from_odia_numeral(text: str) -> Optional[int]:
    """
    "୧୨" -> 12. ASCII digits are accepted too, even mixed in.

    Reads the leading run of digits after any whitespace and ignores the
    rest ("୧୨ଟି" -> 12). Returns None if the text does not start with a
    digit. Signs, separators and other scripts' digits are not digits.
    """
    match = _LEADING_DIGITS_RE.match(text.translate(_FROM_ODIA))
    if match is None:
        return None

    value = 0
    for ch in match.group(1):
        value = value * 10 + ord(ch) - ord("0")
    return value


def contains_odia(text: str) -> bool:
    """True if any character falls in the Odia block."""
    return _ODIA_RE.search(text) is not None
