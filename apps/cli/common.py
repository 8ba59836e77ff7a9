"""
Shared plumbing for the wordtree CLI scripts: word-list flags, logging
setup, and loading the lexicon + response table.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Tuple

from wordtree.datasets import load, pretty_summary, validate_wordlists
from wordtree.engine import ResponseTable, build_response_table, filter_candidates, parse

DEFAULT_ANSWERS = "data/answers.txt"
DEFAULT_EXTRA = "data/guesses-other.txt"


def add_common_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--answers", default=DEFAULT_ANSWERS,
                    help="path to answers list (one word per line)")
    ap.add_argument("--extra", default=DEFAULT_EXTRA,
                    help="path to extra allowed guesses (answers are always allowed)")
    ap.add_argument("--workers", type=int, default=1,
                    help="threads for table build and guess ranking")
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="-v for info logging, -vv for debug")


def setup_logging(verbose: int) -> None:
    level = logging.WARNING if verbose == 0 else logging.INFO if verbose == 1 else logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")


def load_table(args) -> Tuple[ResponseTable, dict]:
    """Print the word-list summary, then load the lists and build the table."""
    rep = validate_wordlists(args.answers, args.extra)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")
    lex = load(args.answers, args.extra)
    return build_response_table(lex, workers=args.workers), rep


def parse_history(table: ResponseTable, items: List[str]) -> List[Tuple[int, int]]:
    """'raise:yybbg' items -> [(guess index, code)]."""
    out = []
    for item in items:
        word, _, resp = item.partition(":")
        out.append((table.lexicon.index_of_guess(word), parse(resp)))
    return out


def candidates_after(table: ResponseTable, history_items: List[str]) -> List[int]:
    every = range(len(table.lexicon.answers))
    return filter_candidates(table, every, parse_history(table, history_items))
