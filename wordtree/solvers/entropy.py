"""
Entropy ranking (expected remaining uncertainty).

Idea:
  A guess splits the current candidates into buckets of sizes n_i. A bucket
  of size n still needs log2(n) bits to resolve, so the expected remaining
  uncertainty, averaged over candidates, is

      H = sum_i n_i * log2(n_i) / sum_i n_i

  Lower is better. H == 0 means every bucket is a singleton. A guess that
  leaves everything in one bucket scores log2(n), the worst possible value,
  so such guesses always rank after any guess that splits the set.

Ranking:
  H depends only on the bucket sizes, so `rank_guesses` does not materialize
  a Partition per guess: it takes a block of pool columns from the table,
  histograms each column with one bincount, and looks up n*log2(n). Blocks
  are independent; with workers > 1 they run on a thread pool, each with
  its own buffers. The final order is a stable sort over the whole pool, so
  ties keep pool order regardless of `workers`.
"""

from __future__ import annotations

from concurrent.futures import Executor, ThreadPoolExecutor
from math import log2
from typing import List, Optional, Sequence, Tuple

import numpy as np

from wordtree.engine.partition import Partition
from wordtree.engine.response import NUM_CODES
from wordtree.engine.table import ResponseTable
from wordtree.errors import EmptyInput

RANK_CHUNK_SIZE = 512


def entropy(p: Partition) -> float:
    """
    Average remaining entropy (bits) of a partition.

    Example (candidates aback, abase, abate, abbey; guess abbot):
      buckets {aback, abase}, {abate}, {abbey}  ->  2*1 / 4 = 0.5
    """
    total = 0.0
    count = 0
    for _, bucket in p.items():
        n = len(bucket)
        total += n * log2(n)
        count += n
    if count == 0:
        raise EmptyInput("entropy of an empty partition")
    return total / count


def _nlogn(n: int) -> np.ndarray:
    """k * log2(k) for k in 0..n, with 0 * log2(0) taken as 0."""
    k = np.arange(n + 1, dtype=np.float64)
    out = np.zeros(n + 1, dtype=np.float64)
    out[1:] = k[1:] * np.log2(k[1:])
    return out


def entropies(table: ResponseTable, subset: Sequence[int], pool: Sequence[int], *,
              workers: int = 1, chunk_size: int = RANK_CHUNK_SIZE,
              executor: Optional[Executor] = None) -> np.ndarray:
    """
    Entropy of every guess in `pool` over `subset`, in pool order.

    Blocks run on `executor` when one is given, else on a pool of `workers`
    threads created for this call.
    """
    rows = np.asarray(subset, dtype=np.intp)
    cols = np.asarray(pool, dtype=np.intp)
    n = len(rows)
    if n == 0:
        raise EmptyInput("no candidate answers to rank guesses against")

    sub = table.matrix[rows]          # (n, |guesses|)
    nlogn = _nlogn(n)
    out = np.empty(len(cols), dtype=np.float64)
    starts = range(0, len(cols), chunk_size)

    def fill(start: int) -> None:
        block = cols[start:start + chunk_size]
        m = len(block)
        # shift column c's codes into its own NUM_CODES-wide slot, then one bincount
        codes = sub[:, block].astype(np.intp) + np.arange(m, dtype=np.intp) * NUM_CODES
        counts = np.bincount(codes.ravel(), minlength=m * NUM_CODES).reshape(m, NUM_CODES)
        # sorted rows: equal bucket-size multisets sum in the same order, so they tie exactly
        counts.sort(axis=1)
        out[start:start + m] = nlogn[counts].sum(axis=1) / n

    if len(starts) > 1 and executor is not None:
        list(executor.map(fill, starts))
    elif len(starts) > 1 and workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as ex:
            list(ex.map(fill, starts))
    else:
        for s in starts:
            fill(s)
    return out


def rank_guesses(table: ResponseTable, subset: Sequence[int], pool: Sequence[int],
                 width: int, *, workers: int = 1,
                 executor: Optional[Executor] = None) -> List[Tuple[int, float]]:
    """
    The `width` guesses from `pool` with the lowest entropy over `subset`.

    Returns (guess index, entropy) pairs in ascending entropy; equal
    entropies keep their order in `pool`.
    """
    if width < 1:
        raise ValueError(f"width must be >= 1, got {width}")
    cols = np.asarray(pool, dtype=np.intp)
    e = entropies(table, subset, cols, workers=workers, executor=executor)
    order = np.argsort(e, kind="stable")[:width]
    return [(int(cols[j]), float(e[j])) for j in order]


def rank_words(table: ResponseTable, answers: Sequence[str], guesses: Sequence[str],
               width: int, *, workers: int = 1) -> List[Tuple[str, float]]:
    """rank_guesses() on words."""
    lex = table.lexicon
    ranked = rank_guesses(table, lex.answer_indices(answers), lex.guess_indices(guesses),
                          width, workers=workers)
    return [(lex.guess_at(g), h) for g, h in ranked]
