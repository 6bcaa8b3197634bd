from .builder import build_wordset
from .validator import validate_dictionary, dictionary_report, pretty_summary
from .io import load_words, save_words
from .source import fetch_raw_text
from .store import DictionaryStore

__all__ = [
    "build_wordset",
    "validate_dictionary",
    "dictionary_report",
    "pretty_summary",
    "load_words",
    "save_words",
    "fetch_raw_text",
    "DictionaryStore",
]
