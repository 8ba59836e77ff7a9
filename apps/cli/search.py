"""
Find the best next guess.

  python -m apps.cli.search --width 3
  python -m apps.cli.search --width 5 --history raise:bybbg --rank 10

Steps:
  1) Validate and load the word lists, build the response table.
  2) Narrow the answers with any --history feedback given.
  3) Optionally print the --rank lowest-entropy guesses.
  4) Run the tree search and print the best guess and expected turns.
"""

from __future__ import annotations

import argparse
import sys

from apps.cli.common import add_common_args, candidates_after, load_table, setup_logging
from wordtree.errors import WordTreeError
from wordtree.solvers import DEFAULT_WIDTH, TreeSearch, rank_guesses


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordtree: best guess by width-bounded tree search")
    add_common_args(ap)
    ap.add_argument("--width", type=int, default=DEFAULT_WIDTH,
                    help="guesses tried at each tree level (fidelity vs. runtime)")
    ap.add_argument("--history", action="append", default=[], metavar="WORD:RESPONSE",
                    help="feedback already seen, e.g. raise:bybbg (repeatable)")
    ap.add_argument("--rank", type=int, default=0,
                    help="also print this many lowest-entropy guesses")
    ap.add_argument("--time-limit", type=float,
                    help="seconds before the search falls back to estimates")
    args = ap.parse_args(argv)

    if args.width < 1:
        ap.error("--width must be >= 1")
    setup_logging(args.verbose)

    try:
        table, _ = load_table(args)
        lex = table.lexicon
        cands = candidates_after(table, args.history)
        print(f"{len(cands)} candidate answer(s) remain")
        if not cands:
            print("No answer is consistent with the history.", file=sys.stderr)
            return 1
        if len(cands) <= 10:
            print("  " + " ".join(lex.answer_at(a) for a in cands))

        pool = range(len(lex.guesses))
        if args.rank > 0:
            for g, h in rank_guesses(table, cands, pool, args.rank, workers=args.workers):
                print(f"  {lex.guess_at(g)}  {h:.6f} bits")

        ts = TreeSearch(table, pool, args.width, workers=args.workers, time_limit=args.time_limit)
        result = ts.run(cands)
    except (WordTreeError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"best guess: {lex.guess_at(result.guess)}  expected turns: {result.average:.6f}"
          f"{'  (truncated)' if ts.truncated else ''}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
