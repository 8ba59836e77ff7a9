"""
Narrow the answers using responses other players reported (guesses unknown).

  python -m apps.cli.sift --responses shared.txt
  python -m apps.cli.sift --responses shared.txt --answer crane

The responses file has one b/y/g response per line; '#' comments and blank
lines are ignored. With --answer, also list the reported responses that
answer could never produce.
"""

from __future__ import annotations

import argparse
import sys

from apps.cli.common import add_common_args, candidates_after, load_table, setup_logging
from wordtree.datasets import read_responses
from wordtree.engine import find_errors, sift, to_string
from wordtree.errors import WordTreeError


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordtree: sift answers by reported responses")
    add_common_args(ap)
    ap.add_argument("--responses", required=True, help="file of reported responses")
    ap.add_argument("--history", action="append", default=[], metavar="WORD:RESPONSE",
                    help="own feedback to apply first (repeatable)")
    ap.add_argument("--answer", help="check the reported responses against this answer")
    ap.add_argument("--limit", type=int, default=50, help="print at most this many answers")
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    try:
        table, _ = load_table(args)
        lex = table.lexicon
        codes = read_responses(args.responses)
        cands = sift(table, candidates_after(table, args.history), codes)
        print(f"{len(cands)} answer(s) fit {len(codes)} reported response(s)")
        print("  " + " ".join(lex.answer_at(a) for a in cands[: args.limit]))

        if args.answer:
            bad = find_errors(table, lex.index_of_answer(args.answer), codes)
            if bad:
                print(f"{len(bad)} response(s) impossible for {args.answer}: "
                      + " ".join(to_string(c) for c in bad))
            else:
                print(f"all responses are possible for {args.answer}")
    except (WordTreeError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
