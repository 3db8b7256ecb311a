"""
Editor Session Helpers
======================

Host-side glue between the editor buffer and the IME engine. Designed to
be UI-agnostic so the API server and the console tester share it.

TWO COMMIT PATHS:

1. Space / Enter
   - The current Latin word is transliterated by the engine
   - A trailing space is kept: "namaste" + space -> "ନମସ୍ତେ "

2. Suggestion pick (quick-pick 1-5, arrow + Enter, or click)
   - The chosen candidate replaces the word verbatim, no trailing space

USAGE:
    from editor_session import SuggestionList, commit_word

    session = SuggestionList()
    session.refresh(buffer, cursor)
    picked = session.quick_pick(2)
    if picked:
        result = commit_word(buffer, cursor, replacement=picked.text, trailing="")
"""

from dataclasses import dataclass, field
from typing import List, Optional

from tools.suggestions import DEFAULT_LIMIT, Suggestion, rank_suggestions
from tools.transliteration_map import transliterate
from tools.word_boundary import clamp_cursor, extract_current_word
from tools.word_dictionary import WordDictionary

QUICK_PICK_KEYS = range(1, 6)


@dataclass
class CommittedText:
    """Buffer after a commit, with the caret placed after the inserted text."""
    buffer: str
    cursor: int
    word: str       # Latin word that was replaced ("" if nothing to commit)
    inserted: str   # What went in its place, trailing text included


def commit_word(
    buffer: str,
    cursor: int,
    replacement: Optional[str] = None,
    trailing: str = " ",
    dictionary: Optional[WordDictionary] = None,
) -> CommittedText:
    """
    Replace the Latin word before `cursor` with Odia text.

    If `replacement` is None the engine transliteration is used. Text after
    the caret is preserved. With no current word the buffer comes back
    unchanged.
    """
    cursor = clamp_cursor(buffer, cursor)
    word = extract_current_word(buffer, cursor)
    if not word:
        return CommittedText(buffer=buffer, cursor=cursor, word="", inserted="")

    odia = replacement if replacement is not None else transliterate(word, dictionary)
    inserted = odia + trailing

    start = cursor - len(word)
    new_buffer = buffer[:start] + inserted + buffer[cursor:]
    return CommittedText(
        buffer=new_buffer,
        cursor=start + len(inserted),
        word=word,
        inserted=inserted,
    )


@dataclass
class SuggestionList:
    """
    The floating suggestion list shown while a Latin word is typed.

    Mirrors the editor's key handling: arrows wrap around, digits 1-5 pick
    directly, Escape hides the list.
    """
    limit: int = DEFAULT_LIMIT
    dictionary: Optional[WordDictionary] = None
    word: str = ""
    suggestions: List[Suggestion] = field(default_factory=list)
    active: int = 0
    visible: bool = False

    def refresh(self, buffer: str, cursor: int) -> List[Suggestion]:
        """Recompute candidates for the word before the caret."""
        self.word = extract_current_word(buffer, cursor)
        if self.word:
            self.suggestions = rank_suggestions(self.word, self.limit, self.dictionary)
        else:
            self.suggestions = []
        self.visible = bool(self.suggestions)
        self.active = 0
        return self.suggestions

    @property
    def active_suggestion(self) -> Optional[Suggestion]:
        if not self.visible or not self.suggestions:
            return None
        return self.suggestions[self.active]

    def move_up(self) -> int:
        if self.suggestions:
            self.active = self.active - 1 if self.active > 0 else len(self.suggestions) - 1
        return self.active

    def move_down(self) -> int:
        if self.suggestions:
            self.active = self.active + 1 if self.active < len(self.suggestions) - 1 else 0
        return self.active

    def select(self, index: int) -> Optional[Suggestion]:
        """Suggestion at 0-based `index`, or None if out of range."""
        if 0 <= index < len(self.suggestions):
            return self.suggestions[index]
        return None

    def quick_pick(self, digit: int) -> Optional[Suggestion]:
        """Map keys 1-5 to suggestions; anything else is not a pick."""
        if digit not in QUICK_PICK_KEYS:
            return None
        return self.select(digit - 1)

    def dismiss(self) -> None:
        self.visible = False

    def clear(self) -> None:
        self.word = ""
        self.suggestions = []
        self.active = 0
        self.visible = False

    def commit(self, buffer: str, cursor: int, suggestion: Suggestion) -> CommittedText:
        """Splice a picked suggestion in place of the current word and reset."""
        result = commit_word(buffer, cursor, replacement=suggestion.text, trailing="",
                             dictionary=self.dictionary)
        self.clear()
        return result
