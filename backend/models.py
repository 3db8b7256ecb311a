"""
Central Data Models for the Odia IME API
========================================

Pydantic request/response models for the HTTP surface. The engine itself
works on plain strings; these only describe what crosses the wire.
"""

from typing import List, Optional
from pydantic import BaseModel, Field
from enum import Enum


# ==========================================
#  ENUMS
# ==========================================

class CommitTrigger(str, Enum):
    """What made the host commit the current word."""
    SPACE = "space"
    ENTER = "enter"
    QUICK_PICK = "quick_pick"
    CLICK = "click"


# ==========================================
#  TRANSLITERATION
# ==========================================

class TransliterateRequest(BaseModel):
    text: str


class TransliterateResult(BaseModel):
    input: str
    output: str
    contains_odia: bool


# ==========================================
#  SUGGESTIONS
# ==========================================

class SuggestionModel(BaseModel):
    """One ranked candidate. Quick-pick digit is key + 1."""
    text: str
    key: int = Field(ge=0)


class SuggestRequest(BaseModel):
    text: str
    limit: Optional[int] = Field(None, ge=1, le=20)


class SuggestResult(BaseModel):
    partial: str
    suggestions: List[SuggestionModel] = []
    hint: str = ""


# ==========================================
#  EDITOR BUFFER
# ==========================================

class CurrentWordRequest(BaseModel):
    buffer: str
    cursor: Optional[int] = Field(None, description="Caret offset; defaults to end of buffer")


class CurrentWordResult(BaseModel):
    word: str
    suggestions: List[SuggestionModel] = []
    word_count: int
    contains_odia: bool


class CommitRequest(BaseModel):
    """
    Replace the Latin word before the caret.

    - space/enter: engine transliteration, followed by a space
    - quick_pick: suggestion number `selection` (1-5)
    - click: `replacement` taken verbatim
    """
    buffer: str
    cursor: Optional[int] = None
    trigger: CommitTrigger = CommitTrigger.SPACE
    selection: Optional[int] = Field(None, ge=1, le=5)
    replacement: Optional[str] = None


class CommitResult(BaseModel):
    buffer: str
    cursor: int
    word: str
    inserted: str


# ==========================================
#  NUMERALS
# ==========================================

class ToOdiaNumeralRequest(BaseModel):
    value: int = Field(ge=0)


class FromOdiaNumeralRequest(BaseModel):
    text: str


class NumeralResult(BaseModel):
    value: int
    odia: str
