"""
Width sweep: how the search result changes as the width grows.

- run_width:  one search at a given width, timed.
- run_sweep:  run_width for every width in a sequence.

Both return plain dicts so a CLI, a notebook or a test can consume them and
harness.io can write them out unchanged.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List, Optional, Sequence

from wordtree.engine.table import ResponseTable
from wordtree.solvers.tree import TreeSearch

# Row schema shared with harness.io.write_csv
FIELDS = ["width", "guess", "average", "nodes", "truncated", "time_ms"]


def run_width(
        table: ResponseTable,
        candidates: Sequence[int],
        guesses: Sequence[int],
        width: int,
        *,
        workers: int = 1,
        time_limit: Optional[float] = None,
) -> Dict:
    """
    Search once and report the best first guess.

    Returns:
        dict with keys: width, guess (word), average, nodes, truncated, time_ms
    """
    ts = TreeSearch(table, guesses, width, workers=workers, time_limit=time_limit)
    t0 = time.perf_counter()
    result = ts.run(candidates)
    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "width": width,
        "guess": table.lexicon.guess_at(result.guess),
        "average": result.average,
        "nodes": ts.nodes,
        "truncated": ts.truncated,
        "time_ms": dt,
    }


def run_sweep(
        table: ResponseTable,
        candidates: Sequence[int],
        guesses: Sequence[int],
        widths: Iterable[int],
        *,
        workers: int = 1,
        time_limit: Optional[float] = None,
) -> List[Dict]:
    """
    run_width for each width, in the order given. `time_limit` applies to
    each search separately.
    """
    return [
        run_width(table, candidates, guesses, w, workers=workers, time_limit=time_limit)
        for w in widths
    ]
