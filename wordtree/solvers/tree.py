"""
Width-bounded tree search for the guess that minimizes the expected number
of turns.

For a candidate subset S, the `width` lowest-entropy guesses are tried.
Each one splits S into buckets by response; a bucket costs
  - |b| > 2  : the best total found by searching b recursively
  - |b| == 2 : 3 (guess one of them: 1 turn if right, 2 if not)
  - |b| == 1 : 0 if it is the guess itself, else 1
and the guess's total over S is the bucket sum plus |S| for the guess
itself. The expected number of turns is total / |S|.

Totals are integers, so equal strategies compare equal exactly and the
first guess in ranked order (entropy, then pool order) wins ties.

This is a heuristic: `width` trades fidelity for time. Larger widths
approach an exhaustive search at super-linear cost; width >= len(guesses)
is exhaustive. Nothing is cached between calls, and identical subsets met
in different branches are searched again.

Budgets:
  time_limit (seconds) is checked on entry to every node and max_depth
  bounds the recursion. A node reached past either budget is not searched;
  it is scored as if its candidates were guessed one after another,
  (n + 1) / 2 turns on average, and the run is marked truncated.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from wordtree.engine.partition import Partition
from wordtree.engine.table import ResponseTable
from wordtree.errors import EmptyInput
from wordtree.solvers.entropy import rank_guesses

log = logging.getLogger(__name__)

DEFAULT_WIDTH = 1
DEFAULT_MAX_DEPTH = 32


class SearchResult(NamedTuple):
    guess: int       # guess index of the best first guess
    average: float   # expected number of turns, that guess included


class TreeSearch:
    """
    One configured search over a fixed guess pool.

    Holds the per-run scratch: one Partition per recursion depth, reused by
    every node at that depth. An instance is not thread-safe.
    """

    def __init__(self, table: ResponseTable, guesses: Sequence[int], width: int = DEFAULT_WIDTH, *,
                 workers: int = 1, time_limit: Optional[float] = None,
                 max_depth: int = DEFAULT_MAX_DEPTH):
        if width < 1:
            raise ValueError(f"width must be >= 1, got {width}")
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        self.table = table
        self.pool = np.asarray(guesses, dtype=np.intp)
        self.width = int(width)
        self.workers = workers
        self.time_limit = time_limit
        self.max_depth = max_depth

        self.nodes = 0
        self.truncated = False
        self._deadline: Optional[float] = None
        self._scratch: List[Partition] = []
        self._executor: Optional[Executor] = None

    def run(self, candidates: Sequence[int]) -> SearchResult:
        subset = candidates.tolist() if hasattr(candidates, "tolist") else list(candidates)
        if not subset:
            raise EmptyInput("search needs at least one candidate answer")

        self.nodes = 0
        self.truncated = False
        self._deadline = None if self.time_limit is None else time.monotonic() + self.time_limit

        if self.workers > 1:
            # one pool for every node of this run
            with ThreadPoolExecutor(max_workers=self.workers) as ex:
                self._executor = ex
                try:
                    guess, total = self._search(subset, 0)
                finally:
                    self._executor = None
        else:
            guess, total = self._search(subset, 0)
        return SearchResult(guess, total / len(subset))

    # ---- internals ----

    def _partition_at(self, depth: int) -> Partition:
        while len(self._scratch) <= depth:
            self._scratch.append(Partition())
        return self._scratch[depth]

    def _over_budget(self, depth: int) -> bool:
        if depth > self.max_depth:
            reason = f"max_depth={self.max_depth}"
        elif self._deadline is not None and time.monotonic() > self._deadline:
            reason = f"time_limit={self.time_limit}s"
        else:
            return False
        if not self.truncated:
            log.warning(f"Search truncated ({reason}); remaining subtrees are estimated")
            self.truncated = True
        return True

    def _sequential(self, subset: List[int]) -> Tuple[int, int]:
        """Guess the candidates in order: 1 + 2 + ... + n turns in total."""
        n = len(subset)
        return int(self.table.answer_guess[subset[0]]), n * (n + 1) // 2

    def _search(self, subset: List[int], depth: int) -> Tuple[int, int]:
        """(best guess, total turns over subset)."""
        n = len(subset)
        if n == 1:
            # the answer is known; guessing it takes one turn
            return int(self.table.answer_guess[subset[0]]), 1

        self.nodes += 1
        if self._over_budget(depth):
            return self._sequential(subset)

        table = self.table
        p = self._partition_at(depth)
        best_guess: Optional[int] = None
        best_total = 0

        for guess, _ in rank_guesses(table, subset, self.pool, self.width,
                                     executor=self._executor):
            p.build(table, guess, subset)
            if len(p) == 1:
                continue  # distinguishes nothing

            total = n
            for _, bucket in p.items():
                size = len(bucket)
                if size > 2:
                    total += self._search(bucket, depth + 1)[1]
                elif size == 2:
                    total += 3
                elif not table.is_answer(bucket[0], guess):
                    total += 1

            if best_guess is None or total < best_total:
                best_guess, best_total = guess, total

        if best_guess is None:
            # no guess in the pool splits this subset
            log.debug(f"depth {depth}: no splitting guess for {n} candidates")
            return self._sequential(subset)

        if depth <= 1:
            log.debug(f"depth {depth}: {n} candidates -> "
                      f"{table.lexicon.guess_at(best_guess)} avg {best_total / n:.4f}")
        return best_guess, best_total


def search(table: ResponseTable, candidates: Sequence[int], guesses: Sequence[int],
           width: int = DEFAULT_WIDTH, *, workers: int = 1, time_limit: Optional[float] = None,
           max_depth: int = DEFAULT_MAX_DEPTH) -> SearchResult:
    """
    Best first guess for answer indices `candidates` using guess indices
    `guesses`, and its expected number of turns.

    Example:
        search_words(table, ["aback", "abase", "abate", "abbey"],
                     ["aback", "abase", "abate", "abbey"], 4)
        -> ("abase", 1.75)
    """
    t0 = time.perf_counter()
    ts = TreeSearch(table, guesses, width, workers=workers, time_limit=time_limit,
                    max_depth=max_depth)
    result = ts.run(candidates)
    log.info(f"width={width}: best {table.lexicon.guess_at(result.guess)} "
             f"avg {result.average:.6f} ({ts.nodes} nodes, {time.perf_counter() - t0:.2f}s"
             f"{', truncated' if ts.truncated else ''})")
    return result


def search_words(table: ResponseTable, answers: Sequence[str], guesses: Sequence[str],
                 width: int = DEFAULT_WIDTH, **kwargs) -> Tuple[str, float]:
    """search() on words; returns (guess word, expected turns)."""
    lex = table.lexicon
    result = search(table, lex.answer_indices(answers), lex.guess_indices(guesses), width, **kwargs)
    return lex.guess_at(result.guess), result.average
