"""
Tools package for the Odia IME engine
"""

from .transliteration_map import transliterate
from .suggestions import get_suggestions, rank_suggestions, Suggestion
from .word_boundary import extract_current_word, count_words
from .numerals import to_odia_numeral, from_odia_numeral, contains_odia
from .typing_hints import get_typing_hint
from .word_dictionary import WordDictionary, get_dictionary, install_dictionary

__all__ = [
    'transliterate',
    'get_suggestions',
    'rank_suggestions',
    'Suggestion',
    'extract_current_word',
    'count_words',
    'to_odia_numeral',
    'from_odia_numeral',
    'contains_odia',
    'get_typing_hint',
    'WordDictionary',
    'get_dictionary',
    'install_dictionary',
]
