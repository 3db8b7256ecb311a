"""
Shared fixtures for the Odia IME test suite.
"""

import os
import sys
from pathlib import Path

import pytest

# Settings are read from the environment on first use - fix them before
# any backend module is imported.
os.environ.setdefault("ODIA_IME_ENVIRONMENT", "test")
os.environ.setdefault("ODIA_IME_LOG_TO_FILE", "false")

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tools.word_dictionary import WordDictionary, reset_dictionary


@pytest.fixture
def dictionary() -> WordDictionary:
    """Built-in entries only, independent of settings."""
    return WordDictionary()


@pytest.fixture
def small_dictionary() -> WordDictionary:
    """A tiny dictionary with known order for ranking tests."""
    return WordDictionary(entries={
        "odisha": "ଓଡ଼ିଶା",
        "odia": "ଓଡ଼ିଆ",
        "body": "ମୂଳ ବିଷୟ",
        "melody": "ସୁର",
        "section": "ବିଭାଗ",
        "bibhag": "ବିଭାଗ",
    })


@pytest.fixture(autouse=True)
def builtin_engine_dictionary():
    """Hosts install a dictionary globally; drop it after every test."""
    yield
    reset_dictionary()
