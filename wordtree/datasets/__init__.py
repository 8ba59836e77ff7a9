from .lexicon import Lexicon, WORD_LENGTH
from .io import load, read_lines, read_words, read_responses
from .validator import validate_wordlists, pretty_summary

__all__ = ["Lexicon", "WORD_LENGTH", "load", "read_words", "read_responses",
           "validate_wordlists", "pretty_summary"]
