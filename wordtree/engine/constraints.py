"""
Candidate filtering from feedback.

Two kinds of evidence shrink a candidate set:

  - Own feedback: we guessed g and saw response r. Keep answers a with
    table[a, g] == r (`winnow`, or `filter_candidates` for a history).

  - Someone else's feedback: only the response r is known, not the guess
    that produced it. Keep answers for which *some* allowed guess yields r
    (`sift`). `find_errors` reports which responses a given answer could
    never have produced, which usually means a typo in the reported data.

All functions take and return answer indices and keep input order.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

from wordtree.engine.table import ResponseTable

# History is a sequence of (guess index, response code) pairs.
History = Iterable[Tuple[int, int]]


def winnow(table: ResponseTable, candidates: Sequence[int], guess: int, code: int) -> List[int]:
    """Answers in `candidates` that respond `code` to `guess`."""
    idx = np.asarray(candidates, dtype=np.intp)
    keep = table.matrix[idx, guess] == code
    return idx[keep].tolist()


def filter_candidates(table: ResponseTable, candidates: Sequence[int], history: History) -> List[int]:
    """
    Answers consistent with every (guess, code) pair in `history`.

    Example:
        lex = table.lexicon
        g = lex.index_of_guess("raise")
        filter_candidates(table, range(len(lex.answers)), [(g, parse("yybbg"))])
    """
    out = list(candidates)
    for guess, code in history:
        if not out:
            break
        out = winnow(table, out, guess, code)
    return out


def has_response(table: ResponseTable, answer: int, code: int) -> bool:
    """True if some allowed guess yields `code` against `answer`."""
    return bool((table.matrix[answer] == code).any())


def sift(table: ResponseTable, candidates: Sequence[int], responses: Iterable[int]) -> List[int]:
    """Answers in `candidates` that could have produced every code in `responses`."""
    idx = np.asarray(candidates, dtype=np.intp)
    rows = table.matrix[idx]
    keep = np.ones(len(idx), dtype=bool)
    for code in responses:
        keep &= (rows == code).any(axis=1)
    return idx[keep].tolist()


def find_errors(table: ResponseTable, answer: int, responses: Iterable[int]) -> List[int]:
    """Codes in `responses` that no allowed guess can produce against `answer`."""
    possible = set(np.unique(table.matrix[answer]).tolist())
    return [code for code in responses if code not in possible]
