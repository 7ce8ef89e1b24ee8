from .validator import validate_root_wordlist, pretty_summary
from .io import read_lines, write_lines
from .rootwords import load_root_words, pick_root_word, DEFAULT_START_WORDS, DEFAULT_ROOT_WORD

__all__ = [
    "validate_root_wordlist", "pretty_summary", "read_lines", "write_lines",
    "load_root_words", "pick_root_word", "DEFAULT_START_WORDS", "DEFAULT_ROOT_WORD",
]
