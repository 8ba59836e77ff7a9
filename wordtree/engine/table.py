"""
Dense response table: matrix[a, g] = encode(guesses[g], answers[a]).

The table is built once per Lexicon and is read-only afterwards. It is also
the context object the rest of the library receives: it carries the lexicon
it was built from, so partitions and the search need nothing global.

Build strategy:
  Words are turned into (n, 5) uint8 letter arrays and the two-pass scoring
  is evaluated with numpy over a block of guess columns at a time. Blocks
  are independent, so with workers > 1 they run on a thread pool (numpy
  releases the GIL) and each writes its own column slice. The result does
  not depend on `workers` or `chunk_size`.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

import numpy as np

from wordtree.datasets.lexicon import Lexicon
from wordtree.engine.response import NUM_CODES, POSITIONS

log = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 256

# digit weights for base-3 packing, position 0 least significant
_PLACE = (3 ** np.arange(POSITIONS)).astype(np.uint8)

assert NUM_CODES <= 256  # codes fit in uint8


def _letters(words: Sequence[str]) -> np.ndarray:
    """(len(words), 5) array of byte values."""
    if not words:
        return np.zeros((0, POSITIONS), dtype=np.uint8)
    buf = "".join(words).encode("ascii")
    return np.frombuffer(buf, dtype=np.uint8).reshape(len(words), POSITIONS)


def _score_block(answers: np.ndarray, guesses: np.ndarray) -> np.ndarray:
    """
    Codes for every (answer, guess) pair of the two letter arrays.

    answers: (A, 5), guesses: (G, 5)  ->  (A, G) uint8
    """
    a = answers[:, None, :]   # (A, 1, 5)
    g = guesses[None, :, :]   # (1, G, 5)

    exact = a == g                                   # (A, G, 5)
    consumed = exact.copy()                          # answer slots used up
    present = np.zeros_like(exact)

    # Pass 2, vectorised over all pairs: guess position i takes the first
    # free answer slot j holding its letter.
    for i in range(POSITIONS):
        open_i = ~exact[..., i]
        gi = g[..., i]
        for j in range(POSITIONS):
            hit = open_i & ~consumed[..., j] & (a[..., j] == gi)
            present[..., i] |= hit
            consumed[..., j] |= hit
            open_i &= ~hit

    digits = exact.astype(np.uint8) * 2 + present.astype(np.uint8)
    return (digits * _PLACE).sum(axis=-1, dtype=np.uint8)


class ResponseTable:
    """
    Read-only (answer x guess) matrix of response codes plus its lexicon.
    """

    def __init__(self, lexicon: Lexicon, matrix: np.ndarray):
        n_a, n_g = len(lexicon.answers), len(lexicon.guesses)
        if matrix.shape != (n_a, n_g) or matrix.dtype != np.uint8:
            raise ValueError(f"matrix must be uint8 of shape {(n_a, n_g)}, "
                             f"got {matrix.dtype} {matrix.shape}")
        matrix.setflags(write=False)
        self.lexicon = lexicon
        self.matrix = matrix
        # guess index of every answer (answers are a subset of guesses)
        self.answer_guess = np.array(
            [lexicon.index_of_guess(w) for w in lexicon.answers], dtype=np.intp)

    @property
    def shape(self):
        return self.matrix.shape

    def __getitem__(self, key):
        return self.matrix[key]

    def codes(self, subset: Sequence[int], guess: int) -> np.ndarray:
        """Codes of `guess` against each answer index in `subset` (in order)."""
        return self.matrix[np.asarray(subset, dtype=np.intp), guess]

    def is_answer(self, answer: int, guess: int) -> bool:
        """True when guess index `guess` is the same word as answer index `answer`."""
        return int(self.answer_guess[answer]) == guess

    def __repr__(self) -> str:
        return f"ResponseTable({self.shape[0]} answers x {self.shape[1]} guesses)"


def build_response_table(lexicon: Lexicon, *, workers: int = 1,
                         chunk_size: int = DEFAULT_CHUNK_SIZE) -> ResponseTable:
    """
    Compute the full response table for `lexicon`.

    O(|answers| * |guesses|) time and one byte per cell.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")

    t0 = time.perf_counter()
    ans = _letters(lexicon.answers)
    gss = _letters(lexicon.guesses)
    matrix = np.empty((len(ans), len(gss)), dtype=np.uint8)

    starts = range(0, len(gss), chunk_size)

    def fill(start: int) -> None:
        stop = min(start + chunk_size, len(gss))
        matrix[:, start:stop] = _score_block(ans, gss[start:stop])

    if workers > 1 and len(starts) > 1:
        with ThreadPoolExecutor(max_workers=workers) as ex:
            # list() surfaces worker exceptions
            list(ex.map(fill, starts))
    else:
        for s in starts:
            fill(s)

    log.info(f"Built response table {matrix.shape[0]}x{matrix.shape[1]} "
             f"in {time.perf_counter() - t0:.2f}s (workers={workers})")
    return ResponseTable(lexicon, matrix)
