"""
Odia IME - API Server
=====================

Serves the transliteration engine to the browser editor. The editor calls
these on every keystroke and on commit; all state (buffer, caret) lives
in the editor and is sent with each request.

Endpoints:
- GET  /health               - Health check
- POST /transliterate        - Latin text -> Odia
- POST /suggest              - Ranked candidates for a partial word
- POST /current-word         - Word before the caret + its candidates
- POST /commit               - Replace the word before the caret
- POST /numeral/to-odia      - 42 -> ୪୨
- POST /numeral/from-odia    - ୪୨ -> 42
"""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

# Ensure backend/ is on the path for imports
THIS_DIR = Path(__file__).parent.resolve()
sys.path.insert(0, str(THIS_DIR))

from config import get_settings
from editor_session import commit_word
from logging_config import setup_logging
from models import (
    CommitRequest,
    CommitResult,
    CommitTrigger,
    CurrentWordRequest,
    CurrentWordResult,
    FromOdiaNumeralRequest,
    NumeralResult,
    SuggestionModel,
    SuggestRequest,
    SuggestResult,
    ToOdiaNumeralRequest,
    TransliterateRequest,
    TransliterateResult,
)
from tools import (
    contains_odia,
    count_words,
    extract_current_word,
    from_odia_numeral,
    get_dictionary,
    get_typing_hint,
    install_dictionary,
    rank_suggestions,
    to_odia_numeral,
    transliterate,
    WordDictionary,
)


# ==========================================
#  SETTINGS & LOGGING SETUP
# ==========================================

settings = get_settings()
logger = logging.getLogger("api_server")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    setup_logging()

    dictionary = install_dictionary(WordDictionary(extra_file=settings.dictionary_file))
    logger.info("=" * 60)
    logger.info(f"{settings.app_name} API Server Starting")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Dictionary entries: {len(dictionary)}")
    logger.info("=" * 60)

    yield

    logger.info(f"{settings.app_name} API Server Shutting Down")


app = FastAPI(
    title=f"{settings.app_name} API",
    description="Phonetic Latin-to-Odia transliteration and suggestions",
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _check_length(text: str, field: str = "text") -> None:
    if len(text) > settings.max_input_length:
        raise HTTPException(
            status_code=422,
            detail=f"{field} longer than {settings.max_input_length} characters",
        )


def _suggestion_models(word: str, limit: int) -> List[SuggestionModel]:
    return [SuggestionModel(text=s.text, key=s.key) for s in rank_suggestions(word, limit)]


# ==========================================
#  HEALTH CHECK
# ==========================================

@app.get("/health")
def health_check() -> Dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.environment,
        "dictionary": get_dictionary().get_stats(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ==========================================
#  ENGINE ENDPOINTS
# ==========================================

@app.post("/transliterate")
def transliterate_endpoint(request: TransliterateRequest) -> TransliterateResult:
    """Transliterate a whole Latin string."""
    _check_length(request.text)
    try:
        output = transliterate(request.text)
    except Exception as e:
        logger.error(f"[/transliterate] Error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    logger.debug(f"[/transliterate] '{request.text}' -> '{output}'")
    return TransliterateResult(
        input=request.text,
        output=output,
        contains_odia=contains_odia(output),
    )


@app.post("/suggest")
def suggest_endpoint(request: SuggestRequest) -> SuggestResult:
    """Ranked candidates for a partial word."""
    _check_length(request.text)
    limit = request.limit or settings.suggestion_limit
    try:
        suggestions = _suggestion_models(request.text, limit)
    except Exception as e:
        logger.error(f"[/suggest] Error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    return SuggestResult(
        partial=request.text,
        suggestions=suggestions,
        hint=get_typing_hint(request.text),
    )


# ==========================================
#  EDITOR ENDPOINTS
# ==========================================

@app.post("/current-word")
def current_word_endpoint(request: CurrentWordRequest) -> CurrentWordResult:
    """Word before the caret, its candidates, and buffer stats."""
    cursor = len(request.buffer) if request.cursor is None else request.cursor
    word = extract_current_word(request.buffer, cursor)
    return CurrentWordResult(
        word=word,
        suggestions=_suggestion_models(word, settings.suggestion_limit) if word else [],
        word_count=count_words(request.buffer),
        contains_odia=contains_odia(request.buffer),
    )


@app.post("/commit")
def commit_endpoint(request: CommitRequest) -> CommitResult:
    """
    Replace the Latin word before the caret.

    space/enter use the engine and keep a trailing space; quick_pick and
    click insert the chosen text as-is.
    """
    cursor = len(request.buffer) if request.cursor is None else request.cursor

    if request.trigger in (CommitTrigger.SPACE, CommitTrigger.ENTER):
        result = commit_word(request.buffer, cursor)

    elif request.trigger == CommitTrigger.QUICK_PICK:
        if request.selection is None:
            raise HTTPException(status_code=422, detail="quick_pick requires selection (1-5)")
        word = extract_current_word(request.buffer, cursor)
        candidates = rank_suggestions(word, settings.suggestion_limit) if word else []
        if request.selection > len(candidates):
            raise HTTPException(
                status_code=422,
                detail=f"No suggestion {request.selection} for '{word}'",
            )
        picked = candidates[request.selection - 1]
        result = commit_word(request.buffer, cursor, replacement=picked.text, trailing="")

    else:
        if request.replacement is None:
            raise HTTPException(status_code=422, detail="click requires replacement text")
        result = commit_word(request.buffer, cursor, replacement=request.replacement, trailing="")

    logger.debug(f"[/commit] {request.trigger.value}: '{result.word}' -> '{result.inserted}'")
    return CommitResult(
        buffer=result.buffer,
        cursor=result.cursor,
        word=result.word,
        inserted=result.inserted,
    )


# ==========================================
#  NUMERAL ENDPOINTS
# ==========================================

@app.post("/numeral/to-odia")
def to_odia_endpoint(request: ToOdiaNumeralRequest) -> NumeralResult:
    return NumeralResult(value=request.value, odia=to_odia_numeral(request.value))


@app.post("/numeral/from-odia")
def from_odia_endpoint(request: FromOdiaNumeralRequest) -> NumeralResult:
    value = from_odia_numeral(request.text)
    if value is None:
        raise HTTPException(status_code=422, detail=f"Not an Odia numeral: '{request.text}'")
    return NumeralResult(value=value, odia=to_odia_numeral(value))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api_server:app", host=settings.host, port=settings.port)
