import importlib
from concurrent.futures import ThreadPoolExecutor

import pytest

from wordtree.datasets import Lexicon
from wordtree.engine import build_response_table, partition
from wordtree.errors import EmptyInput
from wordtree.solvers import SearchResult, TreeSearch, search, search_words

# the package re-exports a function named entropy over the submodule
entropy_module = importlib.import_module("wordtree.solvers.entropy")
tree_module = importlib.import_module("wordtree.solvers.tree")

FOUR = ["aback", "abase", "abate", "abbey"]


def test_end_to_end_example(four_table):
    assert search_words(four_table, FOUR, FOUR, 4) == ("abase", 1.75)


def test_narrow_width_finds_same_here(four_table):
    assert search_words(four_table, FOUR, FOUR, 1) == ("abase", 1.75)


def test_result_is_a_pair_of_indices_and_average(four_table):
    lex = four_table.lexicon
    res = search(four_table, range(4), range(4), 4)
    assert isinstance(res, SearchResult)
    guess, avg = res
    assert lex.guess_at(guess) == "abase" and avg == 1.75


def test_ties_keep_ranked_order(four_table):
    # abase and abate both reach 1.75 with equal entropy: the pool order decides
    assert search_words(four_table, FOUR, ["abate", "abase"], 2) == ("abate", 1.75)
    assert search_words(four_table, FOUR, ["abase", "abate"], 2) == ("abase", 1.75)


def test_single_candidate_is_guessed_directly(four_plus_table):
    assert search_words(four_plus_table, ["abate"], ["zzzzz"], 1) == ("abate", 1.0)


def test_two_candidates(four_table):
    assert search_words(four_table, ["aback", "abbey"], FOUR, 4) == ("aback", 1.5)


def test_useless_guess_is_never_chosen(four_plus_table):
    guess, avg = search_words(four_plus_table, FOUR, ["zzzzz", "abbot"], 2)
    assert guess == "abbot"
    # abbot: {aback, abase} -> 3, abate -> 1, abbey -> 1, plus 4 for abbot itself
    assert avg == pytest.approx(9 / 4)


def test_no_splitting_guess_falls_back_to_guessing_candidates(four_plus_table):
    guess, avg = search_words(four_plus_table, FOUR, ["zzzzz"], 1)
    assert guess == "aback"
    assert avg == pytest.approx(2.5)


def test_best_guess_always_splits(small_table):
    everyone = range(len(small_table.lexicon.answers))
    res = search(small_table, everyone, range(len(small_table.lexicon.guesses)), 2)
    assert len(partition(small_table, res.guess, everyone)) > 1


def test_width_monotonicity(small_table):
    everyone = range(len(small_table.lexicon.answers))
    pool = range(len(small_table.lexicon.guesses))
    averages = [search(small_table, everyone, pool, w).average for w in range(1, 5)]
    for narrow, wide in zip(averages, averages[1:]):
        assert wide <= narrow
    assert 1.0 < averages[-1] < 3.0


def test_result_independent_of_workers(small_table):
    everyone = range(len(small_table.lexicon.answers))
    pool = range(len(small_table.lexicon.guesses))
    assert search(small_table, everyone, pool, 3) == search(small_table, everyone, pool, 3, workers=3)


def test_workers_share_one_pool_per_run(small_table, monkeypatch):
    created = []

    class CountingPool(ThreadPoolExecutor):
        def __init__(self, *args, **kwargs):
            created.append(self)
            super().__init__(*args, **kwargs)

    monkeypatch.setattr(tree_module, "ThreadPoolExecutor", CountingPool)
    monkeypatch.setattr(entropy_module, "ThreadPoolExecutor", CountingPool)
    ts = TreeSearch(small_table, range(len(small_table.lexicon.guesses)), 3, workers=2)
    ts.run(range(len(small_table.lexicon.answers)))
    assert ts.nodes > 1
    assert len(created) == 1
    assert ts._executor is None


def test_empty_candidates_rejected(four_table):
    with pytest.raises(EmptyInput):
        search(four_table, [], range(4), 2)


def test_bad_width_rejected(four_table):
    with pytest.raises(ValueError):
        search(four_table, range(4), range(4), 0)


def test_scratch_is_reused_between_runs(small_table):
    ts = TreeSearch(small_table, range(len(small_table.lexicon.guesses)), 2)
    first = ts.run(range(len(small_table.lexicon.answers)))
    depth_scratch = list(ts._scratch)
    assert ts.nodes > 0
    assert ts.run(range(len(small_table.lexicon.answers))) == first
    assert all(a is b for a, b in zip(depth_scratch, ts._scratch))


@pytest.fixture(scope="module")
def deep_table():
    # guess ccccc leaves bbbbb, bbbbd, bbbbe together
    return build_response_table(Lexicon.from_words(["bbbbb", "bbbbc", "bbbbd", "bbbbe", "ccccc"]))


def test_max_depth_truncates(deep_table):
    lex = deep_table.lexicon
    pool = lex.guess_indices(["ccccc"])
    ts = TreeSearch(deep_table, pool, 1, max_depth=0)
    res = ts.run(range(5))
    assert ts.truncated
    # 5 for ccccc, 6 = 1+2+3 for the estimated triple, 1 for bbbbc
    assert res.average == pytest.approx(12 / 5)
    assert lex.guess_at(res.guess) == "ccccc"

    ts = TreeSearch(deep_table, pool, 1)
    assert ts.run(range(5)).average == pytest.approx(12 / 5)
    assert not ts.truncated


def test_expired_time_limit_returns_estimate(small_table):
    n = len(small_table.lexicon.answers)
    ts = TreeSearch(small_table, range(len(small_table.lexicon.guesses)), 3, time_limit=-1)
    res = ts.run(range(n))
    assert ts.truncated
    assert res.average == pytest.approx((n + 1) / 2)
