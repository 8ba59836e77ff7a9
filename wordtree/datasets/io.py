"""
File readers for word lists and externally reported responses.

Word lists: one word per line, any case; blank lines are skipped, any other
malformed line aborts the load with a LoadError naming the line.

Response files: one response per line (five of b/y/g, anything after is
ignored), '#' comment lines and blank lines are skipped.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List

from wordtree.datasets.lexicon import Lexicon, check_word
from wordtree.engine.response import parse
from wordtree.errors import InvalidFormat

log = logging.getLogger(__name__)

_RESPONSE_RE = re.compile(r"^[bygBYG]{5}")
_SKIP_RE = re.compile(r"^\s*(#.*)?$")


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_words(p: Path | str) -> List[str]:
    """Read a word list, normalized to lowercase, in file order (duplicates kept)."""
    words: List[str] = []
    for n, line in enumerate(read_lines(p), 1):
        if not line.strip():
            continue
        words.append(check_word(line, source=str(p), line_number=n))
    return words


def load(answers_path: Path | str, extra_guesses_path: Path | str) -> Lexicon:
    """
    Load the answers list and the extra-guesses list into a Lexicon.

    Guesses are sorted(dedupe(answers + extras)).
    """
    answers = read_words(answers_path)
    extras = read_words(extra_guesses_path)
    lex = Lexicon.from_words(answers, extras)
    log.info(f"Loaded {len(lex.answers)} answers from {answers_path} and "
             f"{len(lex.guesses)} guesses (with {extra_guesses_path})")
    return lex


def read_responses(p: Path | str) -> List[int]:
    """Read a file of reported responses into a list of ResponseCodes."""
    out: List[int] = []
    for n, line in enumerate(read_lines(p), 1):
        m = _RESPONSE_RE.match(line)
        if m:
            out.append(parse(m.group(0)))
        elif not _SKIP_RE.match(line):
            raise InvalidFormat(f"{p}:{n}: invalid response line: {line!r}")
    log.info(f"Read {len(out)} responses from {p}")
    return out
