"""
Indexed word lists.

A Lexicon holds the two lists every other component works with:
  - answers : words that can be the hidden solution
  - guesses : words the game accepts as input (answers plus extra guesses)

Both are sorted and duplicate-free, and a word's index is its sort
position. Indices are what the response table, partitions and the search
operate on; words only appear at the edges.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from wordtree.errors import LoadError, NotFound

WORD_LENGTH = 5

WORD_RE = re.compile(r"^[a-z]{%d}$" % WORD_LENGTH)


def normalize(word: str) -> str:
    """Canonical form of a word: stripped and lower-cased."""
    return word.strip().lower()


def check_word(word: str, *, source: str = "<words>", line_number: int = 0) -> str:
    """
    Normalize `word` and make sure it is WORD_LENGTH letters a–z.

    Raises LoadError naming `source` and `line_number` otherwise.
    """
    w = normalize(word)
    if len(w) != WORD_LENGTH:
        raise LoadError(source, line_number, word, f"expected {WORD_LENGTH} letters, got {len(w)}")
    if not WORD_RE.match(w):
        raise LoadError(source, line_number, word, "letters must be a-z")
    return w


def _index(words: Tuple[str, ...]) -> Dict[str, int]:
    return {w: i for i, w in enumerate(words)}


@dataclass(frozen=True)
class Lexicon:
    answers: Tuple[str, ...]
    guesses: Tuple[str, ...]
    _answer_index: Dict[str, int] = field(init=False, repr=False, compare=False)
    _guess_index: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        for name, words in (("answers", self.answers), ("guesses", self.guesses)):
            for i, w in enumerate(words, 1):
                if check_word(w, source=name, line_number=i) != w:
                    raise LoadError(name, i, w, "words must be lowercase without surrounding space")
            if any(a >= b for a, b in zip(words, words[1:])):
                raise ValueError(f"{name} must be sorted and unique")
        # frozen dataclass: bypass __setattr__ for the derived maps
        object.__setattr__(self, "_answer_index", _index(self.answers))
        object.__setattr__(self, "_guess_index", _index(self.guesses))
        missing = [w for w in self.answers if w not in self._guess_index]
        if missing:
            raise ValueError(f"answers missing from guesses (e.g., {missing[:5]})")

    @classmethod
    def from_words(cls, answers: Iterable[str], extra_guesses: Iterable[str] = ()) -> "Lexicon":
        """
        Build a Lexicon from raw word iterables.

        Every word is normalized and validated; the first bad one raises
        LoadError. Guesses are the sorted union of answers and extras.
        """
        ans = {check_word(w, source="answers", line_number=i) for i, w in enumerate(answers, 1)}
        extra = {check_word(w, source="extra_guesses", line_number=i)
                 for i, w in enumerate(extra_guesses, 1)}
        return cls(answers=tuple(sorted(ans)), guesses=tuple(sorted(ans | extra)))

    # ---- lookups ----

    def index_of_answer(self, word: str) -> int:
        try:
            return self._answer_index[normalize(word)]
        except KeyError:
            raise NotFound(word, "answers") from None

    def index_of_guess(self, word: str) -> int:
        try:
            return self._guess_index[normalize(word)]
        except KeyError:
            raise NotFound(word, "guesses") from None

    def answer_at(self, index: int) -> str:
        return self.answers[index]

    def guess_at(self, index: int) -> str:
        return self.guesses[index]

    def answer_indices(self, words: Iterable[str]) -> List[int]:
        return [self.index_of_answer(w) for w in words]

    def guess_indices(self, words: Iterable[str]) -> List[int]:
        return [self.index_of_guess(w) for w in words]

    def __repr__(self) -> str:
        return f"Lexicon(answers={len(self.answers)}, guesses={len(self.guesses)})"
