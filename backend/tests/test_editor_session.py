"""
Unit Tests for the editor commit helpers and suggestion list navigation
"""

import pytest

from editor_session import SuggestionList, commit_word


# ==========================================
#  COMMIT
# ==========================================

def test_namaste_then_space(dictionary):
    result = commit_word("namaste", 7, dictionary=dictionary)
    assert result.buffer == "ନମସ୍ତେ "
    assert result.cursor == len("ନମସ୍ତେ ")
    assert result.word == "namaste"
    assert result.inserted == "ନମସ୍ତେ "


def test_commit_preserves_text_around_word(dictionary):
    buffer = "ଆଜି namaste ଓଡ଼ିଶା"
    cursor = len("ଆଜି namaste")
    result = commit_word(buffer, cursor, dictionary=dictionary)
    assert result.buffer == "ଆଜି ନମସ୍ତେ  ଓଡ଼ିଶା"
    assert result.buffer[:result.cursor] == "ଆଜି ନମସ୍ତେ "


def test_commit_with_replacement_is_verbatim(dictionary):
    result = commit_word("od", 2, replacement="ଓଡ଼ିଶା", trailing="", dictionary=dictionary)
    assert result.buffer == "ଓଡ଼ିଶା"
    assert result.cursor == len("ଓଡ଼ିଶା")


def test_nothing_to_commit(dictionary):
    result = commit_word("ନମସ୍ତେ ", 7, dictionary=dictionary)
    assert result.buffer == "ନମସ୍ତେ "
    assert result.word == ""
    assert result.inserted == ""


def test_commit_clamps_cursor(dictionary):
    result = commit_word("ki", 99, dictionary=dictionary)
    assert result.buffer == "କି "


# ==========================================
#  SUGGESTION LIST
# ==========================================

@pytest.fixture
def session(dictionary):
    s = SuggestionList(dictionary=dictionary)
    s.refresh("od", 2)
    return s


def test_refresh_populates_list(session):
    assert session.word == "od"
    assert session.visible is True
    assert [s.text for s in session.suggestions] == ["ଓଡ", "ଓଡ଼ିଶା", "ଓଡ଼ିଆ", "ମୂଳ ବିଷୟ"]
    assert session.active_suggestion.key == 0


def test_refresh_without_word_hides(session):
    session.refresh("ଓଡ଼ିଶା ", 7)
    assert session.suggestions == []
    assert session.visible is False
    assert session.active_suggestion is None


def test_arrows_wrap(session):
    assert session.move_up() == 3
    assert session.move_down() == 0
    assert session.move_down() == 1


@pytest.mark.parametrize("digit, expected", [
    (1, "ଓଡ"),
    (2, "ଓଡ଼ିଶା"),
    (4, "ମୂଳ ବିଷୟ"),
    (5, None),
    (6, None),
    (0, None),
])
def test_quick_pick(session, digit, expected):
    picked = session.quick_pick(digit)
    assert (picked.text if picked else None) == expected


def test_dismiss_keeps_candidates(session):
    session.dismiss()
    assert session.visible is False
    assert session.active_suggestion is None
    assert len(session.suggestions) == 4


def test_commit_pick_resets_session(session):
    picked = session.quick_pick(3)
    result = session.commit("od", 2, picked)
    assert result.buffer == "ଓଡ଼ିଆ"
    assert session.word == ""
    assert session.suggestions == []
    assert session.visible is False
