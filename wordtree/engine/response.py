"""
Response codes: the feedback for one (guess, answer) pair.

Conventions (text form, one character per position):
  - 'g' : exact   = correct letter in the correct position
  - 'y' : present = letter occurs elsewhere in the answer
  - 'b' : absent  = letter not present (or present fewer times than guessed)

Packed form: each position is a base-3 digit (absent=0, present=1,
exact=2), position 0 least significant. Codes are dense in range(243) and
index the response table and the partition buckets directly.

Scoring is the two-pass algorithm:
  1) mark exact positions and consume those answer slots;
  2) for every other guess position, scan the answer left to right for an
     unconsumed slot with the same letter; mark it present and consume it.
A letter therefore never collects more exact+present marks than it has
occurrences in the answer.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence, Tuple

from wordtree.errors import InvalidFormat

POSITIONS = 5
NUM_CODES = 3 ** POSITIONS

ALL_CODES = range(NUM_CODES)


class Color(IntEnum):
    ABSENT = 0
    PRESENT = 1
    EXACT = 2


COLOR_CHARS = "byg"
_CHAR_TO_COLOR = {c: Color(i) for i, c in enumerate(COLOR_CHARS)}

Colors = Tuple[Color, ...]


def colors(guess: str, answer: str) -> Colors:
    """
    Per-position feedback for `guess` against `answer`.

    Examples:
      colors("abbot", "abate") -> (EXACT, EXACT, ABSENT, ABSENT, PRESENT)
      colors("nanny", "wrung") -> (ABSENT, ABSENT, ABSENT, EXACT, ABSENT)
    """
    if len(guess) != POSITIONS or len(answer) != POSITIONS:
        raise ValueError(f"words must have {POSITIONS} letters: {guess!r}, {answer!r}")

    out = [Color.ABSENT] * POSITIONS
    consumed = [False] * POSITIONS

    # Pass 1: exact matches
    for i in range(POSITIONS):
        if guess[i] == answer[i]:
            out[i] = Color.EXACT
            consumed[i] = True

    # Pass 2: misplaced letters, first free answer slot wins
    for i in range(POSITIONS):
        if out[i] == Color.EXACT:
            continue
        for j in range(POSITIONS):
            if not consumed[j] and answer[j] == guess[i]:
                out[i] = Color.PRESENT
                consumed[j] = True
                break

    return tuple(out)


def pack(cs: Sequence[int]) -> int:
    """Pack a colour sequence into its code."""
    if len(cs) != POSITIONS:
        raise ValueError(f"expected {POSITIONS} colours, got {len(cs)}")
    code = 0
    for c in reversed(cs):
        code = code * 3 + int(c)
    return code


def unpack(code: int) -> Colors:
    """Inverse of pack()."""
    if not 0 <= code < NUM_CODES:
        raise ValueError(f"response code out of range: {code}")
    out = []
    for _ in range(POSITIONS):
        code, k = divmod(code, 3)
        out.append(Color(k))
    return tuple(out)


def encode(guess: str, answer: str) -> int:
    """Response code for `guess` against `answer`."""
    return pack(colors(guess, answer))


def to_string(code: int) -> str:
    """Text form of a code, e.g. 'ggbby'."""
    return "".join(COLOR_CHARS[c] for c in unpack(code))


def parse(text: str) -> int:
    """
    Code for a 5-character b/y/g string (case-insensitive).

    Raises InvalidFormat on wrong length or any other character.
    """
    if not isinstance(text, str) or len(text) != POSITIONS:
        raise InvalidFormat(f"response must be {POSITIONS} characters: {text!r}")
    try:
        return pack([_CHAR_TO_COLOR[ch] for ch in text.lower()])
    except KeyError as e:
        raise InvalidFormat(f"invalid response character {e.args[0]!r} in {text!r} "
                            f"(expected one of {COLOR_CHARS!r})") from None


ALL_EXACT = pack([Color.EXACT] * POSITIONS)
