import pytest

from wordtree.datasets import Lexicon
from wordtree.engine import build_response_table

FOUR = ["aback", "abase", "abate", "abbey"]

# A small real-word lexicon: big enough for several tree levels, small
# enough to search exhaustively in well under a second.
SMALL_ANSWERS = [
    "cigar", "rebut", "sissy", "humph", "awake", "blush", "focal", "evade",
    "naval", "serve", "heath", "dwarf", "model", "karma", "stink", "grade",
    "quiet", "bench", "abate", "feign", "major", "death", "fresh", "crust",
    "stool", "colon", "abase", "marry", "react", "batty", "pride", "floss",
    "helix", "croak", "staff", "paper", "unfed", "whelp", "trawl", "outdo",
]
SMALL_EXTRA = ["raise", "slate", "crane", "soare", "roate"]


@pytest.fixture(scope="session")
def four_table():
    """Answers = guesses = aback, abase, abate, abbey."""
    return build_response_table(Lexicon.from_words(FOUR))


@pytest.fixture(scope="session")
def four_plus_table():
    """The four answers plus two extra guesses: abbot and a useless zzzzz."""
    return build_response_table(Lexicon.from_words(FOUR, ["abbot", "zzzzz"]))


@pytest.fixture(scope="session")
def small_table():
    return build_response_table(Lexicon.from_words(SMALL_ANSWERS, SMALL_EXTRA))
