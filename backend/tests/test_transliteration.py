"""
Unit Tests for the Transliteration Engine
=========================================

Test Categories:
1. Consonant / vowel-sign composition
2. Longest match and family order
3. Halant and conjuncts
4. Dictionary shortcut
5. Passthrough of non-Latin text
"""

import pytest

from tools.grammar import CONSONANTS, HALANT, NASALS, SPECIAL, VOWELS
from tools.transliteration_map import (
    TransliterationState,
    explain,
    match_at,
    transliterate,
)
from tools.word_dictionary import COMMON_WORDS, WordDictionary


# ==========================================
#  COMPOSITION
# ==========================================

class TestComposition:

    def test_empty_input(self):
        assert transliterate("") == ""

    def test_consonant_with_inherent_a(self):
        assert transliterate("ka") == "କ"

    def test_consonant_with_vowel_sign(self):
        assert transliterate("ki") == "କି"

    def test_bare_consonant_keeps_inherent_vowel(self):
        assert transliterate("k") == "କ"

    def test_long_vowel_sign(self):
        assert transliterate("kaa") == "କା"
        assert transliterate("kA") == "କା"

    def test_two_letter_vowel_sign_after_consonant(self):
        assert transliterate("kru") == "କୃ"
        assert transliterate("kai") == "କୈ"

    @pytest.mark.parametrize("latin, odia", [
        ("a", "ଅ"),
        ("aa", "ଆ"),
        ("i", "ଇ"),
        ("ai", "ଐ"),
        ("au", "ଔ"),
        ("e", "ଏ"),
    ])
    def test_standalone_vowels(self, latin, odia):
        assert transliterate(latin) == odia

    def test_case_selects_retroflex_vs_dental(self):
        assert transliterate("T") == "ଟ"
        assert transliterate("ta") == "ତ"
        assert transliterate("N") == "ଣ"
        assert transliterate("n") == "ନ"

    def test_consonant_falls_back_to_lowercase(self):
        assert transliterate("K") == "କ"
        assert transliterate("KI") == "କୀ"

    def test_nasal_marks(self):
        assert transliterate("kaM") == "କଂ"
        assert transliterate("kaH") == "କଃ"
        assert transliterate("ka~") == "କଁ"

    def test_specials(self):
        assert transliterate(".") == "।"
        assert transliterate("..") == "॥"
        assert transliterate("om") == "ଓଁ"
        assert transliterate("OM") == "ଓଁ"
        assert transliterate("2024") == "୨୦୨୪"


# ==========================================
#  LONGEST MATCH
# ==========================================

class TestLongestMatch:

    def test_three_letter_consonant_beats_two(self):
        assert transliterate("chh") == "ଛ"
        assert transliterate("chh") != "ଚh"

    def test_two_letter_consonants(self):
        assert transliterate("kh") == "ଖ"
        assert transliterate("bh") == "ଭ"
        assert transliterate("sh") == "ଶ"

    def test_shh_is_ssa(self):
        assert transliterate("shh") == "ଷ"

    def test_ksh_and_x_are_kssa(self):
        assert transliterate("ksh") == "କ୍ଷ"
        assert transliterate("x") == "କ୍ଷ"

    def test_special_wins_over_vowel_at_same_length(self):
        # "om" is OM, not o + m
        state = TransliterationState("om")
        match = match_at(state)
        assert match.family == "special"
        assert match.consumed == 2

    def test_nasal_wins_over_consonant_fallback(self):
        # "M" would lowercase to m (ମ) but anusvara is tried first
        assert transliterate("M") == "ଂ"
        assert transliterate("H") == "ଃ"

    def test_output_is_appended_in_order(self):
        assert transliterate("kakhaga") == "କଖଗ"


# ==========================================
#  HALANT
# ==========================================

class TestHalant:

    def test_underscore_trigger(self):
        result = transliterate("k_sh")
        assert result == "କ" + HALANT + "ଶ"

    def test_caret_is_an_alias(self):
        assert transliterate("k^sh") == transliterate("k_sh")

    def test_halant_consumes_trigger(self):
        steps = explain("s_ta")
        assert steps[0].consumed == 2
        assert steps[0].output == "ସ" + HALANT
        assert steps[0].last_was_consonant is True

    def test_conjunct_word(self):
        # na (dental n) + m with halant + s + T-e
        assert transliterate("nam_ste") == "ନମ" + HALANT + "ସଟେ"

    def test_vowel_sign_after_halant_consonant(self):
        # "s_te": the second consonant takes the e-sign
        assert transliterate("s_te") == "ସ" + HALANT + "ଟେ"


# ==========================================
#  DICTIONARY SHORTCUT
# ==========================================

class TestDictionaryShortcut:

    def test_namaste_uses_dictionary(self):
        assert transliterate("namaste") == "ନମସ୍ତେ"

    @pytest.mark.parametrize("key, value", list(COMMON_WORDS.items()))
    def test_every_key_maps_to_its_value(self, key, value):
        assert transliterate(key) == value
        assert transliterate(key.upper()) == value
        assert transliterate(key.title()) == value

    def test_dictionary_beats_composition(self):
        custom = WordDictionary(entries={"ka": "XYZ"})
        assert transliterate("ka", custom) == "XYZ"
        assert transliterate("ki", custom) == "କି"

    def test_explain_reports_dictionary_hit(self, dictionary):
        steps = explain("Odisha", dictionary)
        assert len(steps) == 1
        assert steps[0].family == "dictionary"
        assert steps[0].output == "ଓଡ଼ିଶା"


# ==========================================
#  PASSTHROUGH
# ==========================================

class TestPassthrough:

    @pytest.mark.parametrize("odia", ["ଓଡ଼ିଆ", "ନମସ୍ତେ", "ଜଗନ୍ନାଥ", "ଓଡ଼ିଶା ସରକାର"])
    def test_pure_odia_is_unchanged(self, odia):
        assert transliterate(odia) == odia

    def test_mixed_input_passes_non_latin_through(self):
        assert transliterate("ka ଓ") == "କ ଓ"

    def test_unknown_latin_passes_through(self):
        assert transliterate("q") == "q"
        assert transliterate("z!") == "z!"

    def test_passthrough_clears_consonant_state(self):
        # "k" then "-" breaks the chain, so "i" is standalone
        assert transliterate("k-i") == "କ-ଇ"


# ==========================================
#  TABLES
# ==========================================

class TestTables:

    @pytest.mark.parametrize("table", [VOWELS, CONSONANTS, SPECIAL, NASALS])
    def test_tables_are_read_only(self, table):
        with pytest.raises(TypeError):
            table["zz"] = "x"

    def test_patterns_fit_the_scan_window(self):
        for table in (VOWELS, CONSONANTS, SPECIAL, NASALS):
            assert all(1 <= len(p) <= 4 for p in table)
