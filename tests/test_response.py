import random
from collections import Counter
from itertools import product

import pytest

from wordtree.engine import (ALL_CODES, ALL_EXACT, Color, NUM_CODES, colors, encode, pack,
                             parse, to_string, unpack)
from wordtree.errors import InvalidFormat

E, P, A = Color.EXACT, Color.PRESENT, Color.ABSENT


def _reference(guess, answer):
    """Independent scorer: count leftover answer letters, hand out presents."""
    out = ["b"] * 5
    left = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            out[i] = "g"
        else:
            left[a] += 1
    for i, g in enumerate(guess):
        if out[i] != "g" and left[g] > 0:
            out[i] = "y"
            left[g] -= 1
    return "".join(out)


# --- golden cases, duplicates included ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "bgyyy"),
    ("level", "level", "ggggg"),
    ("lemon", "level", "ggbbb"),
    ("cools", "scoop", "yygby"),
    ("raise", "crane", "yybbg"),
    ("stare", "crane", "bbgyg"),
    ("speed", "abide", "bbyby"),
    ("abbot", "abate", "ggbby"),
    ("nanny", "wrung", "bbbgb"),
])
def test_encode_golden(guess, answer, expected):
    assert to_string(encode(guess, answer)) == expected


def test_duplicate_letter_regressions():
    # the answer's single b is already taken by the exact match
    assert colors("abbot", "abate") == (E, E, A, A, P)
    # the answer's single n is taken by position 4; the other n's are absent
    assert colors("nanny", "wrung") == (A, A, A, E, A)


def test_letter_marks_never_exceed_answer_count():
    rng = random.Random(5)
    for _ in range(500):
        guess = "".join(rng.choice("aabbc") for _ in range(5))
        answer = "".join(rng.choice("aabbc") for _ in range(5))
        cs = colors(guess, answer)
        marked = Counter(ch for ch, c in zip(guess, cs) if c != A)
        for ch, k in marked.items():
            assert k <= answer.count(ch)


def test_matches_reference_scorer_on_random_words():
    rng = random.Random(11)
    for _ in range(2000):
        guess = "".join(rng.choice("abcde") for _ in range(5))
        answer = "".join(rng.choice("abcde") for _ in range(5))
        assert to_string(encode(guess, answer)) == _reference(guess, answer)


def test_packing_is_base3_position0_lowest():
    assert pack([E, E, A, A, P]) == 2 + 2 * 3 + 1 * 81
    assert unpack(89) == (E, E, A, A, P)
    assert pack([A] * 5) == 0
    assert ALL_EXACT == NUM_CODES - 1 == 242


def test_all_codes_are_a_bijection_with_strings():
    strings = {to_string(c) for c in ALL_CODES}
    assert len(strings) == 243
    assert strings == {"".join(t) for t in product("byg", repeat=5)}
    for c in ALL_CODES:
        assert parse(to_string(c)) == c
        assert pack(unpack(c)) == c


def test_parse_is_case_insensitive():
    assert parse("GGBBY") == parse("ggbby") == 89


@pytest.mark.parametrize("bad", ["", "bbyg", "bbyggg", "bbygx", "gg by", "12345"])
def test_parse_rejects_malformed(bad):
    with pytest.raises(InvalidFormat):
        parse(bad)


def test_invalid_format_is_a_value_error():
    with pytest.raises(ValueError):
        parse("xxxxx")


def test_unpack_range_checked():
    with pytest.raises(ValueError):
        unpack(243)
    with pytest.raises(ValueError):
        unpack(-1)


def test_colors_requires_five_letters():
    with pytest.raises(ValueError):
        colors("abc", "abcde")
