"""
Suggestion Engine
=================

Ranked completions for a partially typed romanized word.

Priority:
1. Direct transliteration (only if it changed something)
2. Dictionary words whose key starts with the partial
3. Dictionary words whose key contains the partial elsewhere

First occurrence of a value wins; later duplicates are dropped.
No state is kept between calls.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .transliteration_map import transliterate
from .word_dictionary import WordDictionary, get_dictionary

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5


@dataclass(frozen=True)
class Suggestion:
    """One candidate; key is its rank (0-based), quick-pick digit is key + 1."""
    text: str
    key: int


def _extend(suggestions: List[str], candidates: Iterable[str], limit: int) -> None:
    for value in candidates:
        if len(suggestions) >= limit:
            return
        if value not in suggestions:
            suggestions.append(value)


def get_suggestions(
    partial: str,
    limit: int = DEFAULT_LIMIT,
    dictionary: Optional[WordDictionary] = None,
) -> List[str]:
    """
    Return up to `limit` Odia candidates for `partial`, best first.
    """
    if not partial or limit <= 0:
        return []

    dictionary = dictionary if dictionary is not None else get_dictionary()
    suggestions: List[str] = []

    direct = transliterate(partial, dictionary)
    if direct and direct != partial:
        suggestions.append(direct)

    _extend(suggestions, dictionary.prefix_matches(partial), limit)

    if len(suggestions) < limit:
        _extend(suggestions, dictionary.substring_matches(partial), limit)

    logger.debug(f"[SUGGEST] '{partial}' -> {len(suggestions[:limit])} candidates")
    return suggestions[:limit]


def rank_suggestions(
    partial: str,
    limit: int = DEFAULT_LIMIT,
    dictionary: Optional[WordDictionary] = None,
) -> List[Suggestion]:
    """get_suggestions() wrapped with stable rank keys for numbered quick-pick."""
    return [
        Suggestion(text=text, key=idx)
        for idx, text in enumerate(get_suggestions(partial, limit, dictionary))
    ]
