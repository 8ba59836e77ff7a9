"""
Partition of a candidate-answer subset by response to one guess.

A Partition is scratch space: one slot per response code (NUM_CODES of
them), each slot a list created on first use and kept afterwards, plus the
codes that are currently non-empty in the order they first received an
answer. `build` resets and refills it, so a single instance is reused for
every guess evaluated at one level of a search instead of allocating new
buckets each time.

Not thread-safe; give every concurrent worker its own instance.

Example:
    p = partition_words(table, ["aback", "abase", "abate", "abbey"], "abbot")
    print(p.format(table.lexicon))
      ggbbb aback abase
      ggbby abate
      gggbb abbey
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from wordtree.datasets.lexicon import Lexicon
from wordtree.engine.response import NUM_CODES, to_string
from wordtree.engine.table import ResponseTable


class Partition:
    __slots__ = ("buckets", "non_empty")

    def __init__(self):
        self.buckets: List[Optional[List[int]]] = [None] * NUM_CODES
        self.non_empty: List[int] = []

    def reset(self) -> None:
        """Empty every bucket; the bucket lists themselves are kept."""
        for code in self.non_empty:
            self.buckets[code].clear()
        self.non_empty.clear()

    def build(self, table: ResponseTable, guess: int, subset: Sequence[int]) -> "Partition":
        """Refill with `subset` bucketed by its response to `guess`."""
        self.reset()
        answers = subset.tolist() if hasattr(subset, "tolist") else subset
        codes = table.codes(answers, guess).tolist()
        buckets, non_empty = self.buckets, self.non_empty
        for a, code in zip(answers, codes):
            b = buckets[code]
            if b is None:
                b = buckets[code] = []
            if not b:
                non_empty.append(code)
            b.append(a)
        return self

    def bucket_for(self, code: int) -> List[int]:
        """The bucket for `code` (possibly empty)."""
        if not 0 <= code < NUM_CODES:
            raise ValueError(f"response code out of range: {code}")
        b = self.buckets[code]
        if b is None:
            b = self.buckets[code] = []
        return b

    def items(self) -> Iterator[Tuple[int, List[int]]]:
        """(code, bucket) for every non-empty bucket, in first-seen order."""
        buckets = self.buckets
        for code in self.non_empty:
            yield code, buckets[code]

    __iter__ = items

    def __len__(self) -> int:
        """Number of non-empty buckets."""
        return len(self.non_empty)

    @property
    def size(self) -> int:
        """Total number of answers across all buckets."""
        return sum(len(self.buckets[c]) for c in self.non_empty)

    def format(self, lexicon: Lexicon) -> str:
        rows = []
        for code, bucket in self.items():
            rows.append(" ".join([to_string(code)] + [lexicon.answer_at(a) for a in bucket]))
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"Partition(buckets={len(self)}, size={self.size})"


def partition(table: ResponseTable, guess: int, subset: Sequence[int]) -> Partition:
    """Fresh Partition of answer indices `subset` by guess index `guess`."""
    return Partition().build(table, guess, subset)


def partition_words(table: ResponseTable, answers: Sequence[str], guess: str) -> Partition:
    """Same as partition(), taking words instead of indices."""
    lex = table.lexicon
    return partition(table, lex.index_of_guess(guess), lex.answer_indices(answers))
