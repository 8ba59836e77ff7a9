from .entropy import entropies, entropy, rank_guesses, rank_words
from .tree import DEFAULT_MAX_DEPTH, DEFAULT_WIDTH, SearchResult, TreeSearch, search, search_words

__all__ = [
    "entropies", "entropy", "rank_guesses", "rank_words", "DEFAULT_MAX_DEPTH",
    "DEFAULT_WIDTH", "SearchResult", "TreeSearch", "search", "search_words",
]
