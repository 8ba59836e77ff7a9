"""
Sweep the search width and record how the best first guess and its
expected number of turns change.

  python -m apps.cli.benchmark --max-width 8 --outdir reports

Writes:
  - CSV:  one row per width (width, guess, average, nodes, truncated, time_ms)
  - JSON: manifest with config, word-list hashes and git commit
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from tqdm import tqdm

from apps.cli.common import add_common_args, candidates_after, load_table, setup_logging
from wordtree.errors import WordTreeError
from wordtree.harness import run_width, write_csv, write_manifest
from wordtree.harness.io import git_commit_or_unknown, timestamp_id


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordtree: search width sweep")
    add_common_args(ap)
    ap.add_argument("--min-width", type=int, default=1)
    ap.add_argument("--max-width", type=int, default=8)
    ap.add_argument("--history", action="append", default=[], metavar="WORD:RESPONSE",
                    help="sweep from the position after this feedback (repeatable)")
    ap.add_argument("--time-limit", type=float, help="per-width search time limit (seconds)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar",
                    help="show a progress bar over widths")
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    if not 1 <= args.min_width <= args.max_width:
        ap.error("need 1 <= --min-width <= --max-width")

    try:
        table, rep = load_table(args)
        cands = candidates_after(table, args.history)
        if not cands:
            print("No answer is consistent with the history.", file=sys.stderr)
            return 1
        pool = range(len(table.lexicon.guesses))

        rows = []
        widths = range(args.min_width, args.max_width + 1)
        bar = tqdm(widths, ncols=80, desc="Widths", unit="width", disable=args.progress == "off")
        for w in bar:
            r = run_width(table, cands, pool, w, workers=args.workers, time_limit=args.time_limit)
            rows.append(r)
            # tqdm.write keeps the bar intact
            tqdm.write(f"{r['width']} {r['guess']} {r['average']:.6f}  ({r['time_ms'] / 1000:.2f}s)")
    except (WordTreeError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"sweep_{run_id}.csv"
    manifest_path = outdir / f"sweep_{run_id}_manifest.json"

    write_csv(rows, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_candidates": len(cands),
        "rows": rows,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
