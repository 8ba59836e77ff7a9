from pathlib import Path

import pytest

from wordtree.datasets import Lexicon, load, read_responses, read_words
from wordtree.engine import parse
from wordtree.errors import InvalidFormat, LoadError, NotFound


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return p


def test_from_words_sorts_dedupes_and_unions():
    lex = Lexicon.from_words(["abate", "Aback", "abate"], ["zzzzz", "aback"])
    assert lex.answers == ("aback", "abate")
    assert lex.guesses == ("aback", "abate", "zzzzz")


def test_index_lookups_round_trip():
    lex = Lexicon.from_words(["abate", "aback", "abase"], ["abbot"])
    for i, w in enumerate(lex.answers):
        assert lex.index_of_answer(w) == i
        assert lex.answer_at(i) == w
    assert lex.index_of_guess(" ABBOT ") == 3
    assert lex.guess_indices(["abbot", "aback"]) == [3, 0]


def test_not_found():
    lex = Lexicon.from_words(["aback"], ["abbot"])
    with pytest.raises(NotFound) as ei:
        lex.index_of_answer("abbot")   # a guess, not an answer
    assert ei.value.word == "abbot"
    assert "answers" in str(ei.value)
    with pytest.raises(KeyError):
        lex.index_of_guess("crane")


def test_constructor_requires_sorted_unique():
    with pytest.raises(ValueError):
        Lexicon(answers=("abate", "aback"), guesses=("aback", "abate"))
    with pytest.raises(ValueError):
        Lexicon(answers=("aback",), guesses=("abate",))


@pytest.mark.parametrize("bad", ["abc", "abcdef", "ab1de", "Aback", " aback"])
def test_constructor_rejects_malformed_words(bad):
    with pytest.raises(LoadError) as ei:
        Lexicon(answers=(bad,), guesses=(bad, "zzzzz"))
    assert ei.value.line_number == 1
    with pytest.raises(LoadError):
        Lexicon(answers=("aback",), guesses=("aback", bad))


@pytest.mark.parametrize("bad", ["abc", "abcdef", "ab1de", "ab-de", "abçde"])
def test_from_words_rejects_malformed(bad):
    with pytest.raises(LoadError):
        Lexicon.from_words(["aback", bad])


def test_load_normalizes_and_skips_blank_lines(tmp_path: Path):
    ans = _write(tmp_path / "answers.txt", ["Abate", "abase", "", "abase"])
    ext = _write(tmp_path / "extra.txt", ["ZZZZZ", "abate"])
    lex = load(ans, ext)
    assert lex.answers == ("abase", "abate")
    assert lex.guesses == ("abase", "abate", "zzzzz")


def test_load_error_names_the_line(tmp_path: Path):
    ans = _write(tmp_path / "answers.txt", ["aback", "abase", "ab4te"])
    ext = _write(tmp_path / "extra.txt", ["zzzzz"])
    with pytest.raises(LoadError) as ei:
        load(ans, ext)
    assert ei.value.line_number == 3
    assert ei.value.line == "ab4te"
    assert str(ans) in str(ei.value)


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_words(tmp_path / "nope.txt")


def test_read_responses(tmp_path: Path):
    p = _write(tmp_path / "r.txt", ["# shared results", "", "ggbbb from a friend", "BBBBB", "   "])
    assert read_responses(p) == [parse("ggbbb"), 0]


def test_read_responses_rejects_garbage(tmp_path: Path):
    p = _write(tmp_path / "r.txt", ["ggbbb", "hello"])
    with pytest.raises(InvalidFormat) as ei:
        read_responses(p)
    assert ":2:" in str(ei.value)
