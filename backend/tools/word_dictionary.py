"""
Word Dictionary - Romanized Shortcuts
=====================================

Common romanized words, place-names and exam/news terms with their
canonical Odia spelling.

Used two ways:
1. Whole-word shortcut in transliterate() - a dictionary hit wins over
   the compositional result.
2. Suggestion source - prefix matches, then substring matches.

The engine default is COMMON_WORDS alone. Hosts (API server, console)
install a copy extended with settings.dictionary_file at startup.

JSON file format (either form per entry):
  {
    "jatra": "ଯାତ୍ରା",
    "rathajatra": {"odia": "ରଥଯାତ୍ରା"}
  }
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)


# ==========================================
#  BUILT-IN ENTRIES
# ==========================================

# Iteration order is the suggestion order - keep related words together.
COMMON_WORDS: Mapping[str, str] = MappingProxyType({
    # Greetings
    "namaste": "ନମସ୍ତେ",
    "namaskar": "ନମସ୍କାର",
    "dhanyabad": "ଧନ୍ୟବାଦ",

    # Places
    "odisha": "ଓଡ଼ିଶା",
    "odia": "ଓଡ଼ିଆ",
    "bhubaneswar": "ଭୁବନେଶ୍ୱର",
    "cuttack": "କଟକ",
    "puri": "ପୁରୀ",
    "jagannath": "ଜଗନ୍ନାଥ",
    "konark": "କୋଣାର୍କ",
    "sambalpur": "ସମ୍ବଲପୁର",
    "berhampur": "ବ୍ରହ୍ମପୁର",
    "rourkela": "ରାଉରକେଲା",
    "balasore": "ବାଲେଶ୍ୱର",
    "kendrapara": "କେନ୍ଦ୍ରାପଡ଼ା",
    "mayurbhanj": "ମୟୂରଭଞ୍ଜ",
    "ganjam": "ଗଞ୍ଜାମ",
    "khordha": "ଖୋର୍ଦ୍ଧା",
    "nayagarh": "ନୟାଗଡ଼",

    # Government
    "panchayat": "ପଞ୍ଚାୟତ",
    "sarpanch": "ସରପଞ୍ଚ",
    "vidhayak": "ବିଧାୟକ",
    "mantri": "ମନ୍ତ୍ରୀ",
    "mukhyamantri": "ମୁଖ୍ୟମନ୍ତ୍ରୀ",
    "sarkar": "ସରକାର",

    # Exams and schools
    "prashan": "ପ୍ରଶ୍ନ",
    "prashna": "ପ୍ରଶ୍ନ",
    "uttar": "ଉତ୍ତର",
    "pariksha": "ପରୀକ୍ଷା",
    "vidyarthi": "ବିଦ୍ୟାର୍ଥୀ",
    "shikhyak": "ଶିକ୍ଷକ",
    "vidyalaya": "ବିଦ୍ୟାଳୟ",
    "mahavidyalaya": "ମହାବିଦ୍ୟାଳୟ",
    "vishwavidyalaya": "ବିଶ୍ୱବିଦ୍ୟାଳୟ",

    # News
    "sambad": "ସମ୍ବାଦ",
    "samachar": "ସମାଚାର",
    "khabar": "ଖବର",
    "rajniti": "ରାଜନୀତି",
    "krida": "କ୍ରୀଡ଼ା",
    "khela": "ଖେଳ",
    "cinema": "ସିନେମା",

    # Arts
    "sangeet": "ସଂଗୀତ",
    "nrutya": "ନୃତ୍ୟ",
    "sahitya": "ସାହିତ୍ୟ",
    "kabi": "କବି",
    "lekhak": "ଲେଖକ",
    "pustaka": "ପୁସ୍ତକ",
    "pathak": "ପାଠକ",

    # Everyday words
    "anek": "ଅନେକ",
    "sabhu": "ସବୁ",
    "ebe": "ଏବେ",
    "aaji": "ଆଜି",
    "kaali": "କାଲି",
    "gote": "ଗୋଟେ",

    # Numbers
    "dui": "ଦୁଇ",
    "tini": "ତିନି",
    "chaari": "ଚାରି",
    "pancha": "ପାଞ୍ଚ",
    "chha": "ଛଅ",
    "saata": "ସାତ",
    "aatha": "ଆଠ",
    "naa": "ନଅ",
    "dasha": "ଦଶ",
    "sata": "ଶତ",
    "sahasa": "ସହସ୍ର",
    "laksha": "ଲକ୍ଷ",
    "koti": "କୋଟି",

    # Exam paper labels
    "anka": "ଅଙ୍କ",
    "marks": "ମାର୍କ",
    "section": "ବିଭାଗ",
    "bibhag": "ବିଭାଗ",
    "mcq": "ବହୁ ବିକଳ୍ପ",
    "short": "ସଂକ୍ଷିପ୍ତ",
    "long": "ବିସ୍ତୃତ",

    # News article labels
    "headline": "ଶିରୋନାମା",
    "body": "ମୂଳ ବିଷୟ",
    "politics": "ରାଜନୀତି",
    "sports": "କ୍ରୀଡ଼ା",
    "local": "ସ୍ଥାନୀୟ",
    "national": "ଜାତୀୟ",
    "entertainment": "ମନୋରଞ୍ଜନ",
})


def normalize_key(word: str) -> str:
    """Dictionary keys are compared lowercase with surrounding space removed."""
    return word.lower().strip()


def load_entries_file(path: Path) -> Dict[str, str]:
    """
    Load extra entries from a JSON file.

    Entries whose value is neither a string nor {"odia": str} are skipped
    with a warning. Raises ValueError if the top level is not an object.
    """
    with open(path, 'r', encoding='utf-8') as f:
        raw = json.load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Dictionary file {path} must contain a JSON object")

    entries: Dict[str, str] = {}
    for key, value in raw.items():
        if isinstance(value, dict):
            value = value.get("odia")
        if not isinstance(value, str) or not value:
            logger.warning(f"[DICT] Skipping '{key}' in {path.name}: no Odia value")
            continue
        norm = normalize_key(key)
        if not norm:
            continue
        entries[norm] = value

    return entries


# ==========================================
#  DICTIONARY
# ==========================================

class WordDictionary:
    """
    Read-only romanized -> Odia dictionary.

    Lookups are case-insensitive on the key. Iteration follows insertion
    order: built-in entries first, then file entries.
    """

    def __init__(
        self,
        entries: Optional[Mapping[str, str]] = None,
        extra_file: Optional[Union[str, Path]] = None,
    ):
        merged: Dict[str, str] = {}
        for key, value in (COMMON_WORDS if entries is None else entries).items():
            merged[normalize_key(key)] = value

        self.source_file: Optional[Path] = None
        if extra_file is not None:
            self.source_file = Path(extra_file)
            if self.source_file.exists():
                extra = load_entries_file(self.source_file)
                merged.update(extra)
                logger.info(f"[DICT] Loaded {len(extra)} entries from {self.source_file}")
            else:
                logger.warning(f"[DICT] Dictionary file not found: {self.source_file}")

        self._entries: Mapping[str, str] = MappingProxyType(merged)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and normalize_key(word) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(self._entries.items())

    def lookup(self, word: str) -> Optional[str]:
        """Exact whole-word lookup. Returns the Odia value or None."""
        return self._entries.get(word.lower())

    def prefix_matches(self, prefix: str) -> Iterator[str]:
        """Values whose key starts with prefix, in dictionary order."""
        prefix = prefix.lower()
        for key, value in self._entries.items():
            if key.startswith(prefix):
                yield value

    def substring_matches(self, fragment: str) -> Iterator[str]:
        """Values whose key contains fragment anywhere except at the start."""
        fragment = fragment.lower()
        for key, value in self._entries.items():
            if fragment in key and not key.startswith(fragment):
                yield value

    def get_stats(self) -> Dict:
        """Get dictionary statistics"""
        return {
            "total_entries": len(self._entries),
            "builtin_entries": sum(1 for k in self._entries if k in COMMON_WORDS),
            "distinct_values": len(set(self._entries.values())),
            "source_file": str(self.source_file) if self.source_file else None,
        }


# ==========================================
#  GLOBAL INSTANCE
# ==========================================

_dictionary: Optional[WordDictionary] = None


def get_dictionary() -> WordDictionary:
    """
    Get the dictionary the engine uses by default.

    Built-in entries only, unless a host has installed a larger one with
    install_dictionary(). Never reads settings or files.
    """
    global _dictionary
    if _dictionary is None:
        _dictionary = WordDictionary()
    return _dictionary


def install_dictionary(dictionary: WordDictionary) -> WordDictionary:
    """Make `dictionary` the engine default (called by hosts at startup)."""
    global _dictionary
    _dictionary = dictionary
    logger.info(f"[DICT] Dictionary ready with {len(dictionary)} entries")
    return dictionary


def reset_dictionary() -> None:
    """Drop the installed instance; the next get_dictionary() is built-ins only."""
    global _dictionary
    _dictionary = None
