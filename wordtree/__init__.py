"""
wordtree: width-bounded tree search for five-letter word-guessing games.

Typical use:
    from wordtree.datasets import load
    from wordtree.engine import build_response_table
    from wordtree.solvers import search_words

    lex = load("answers.txt", "guesses-other.txt")
    table = build_response_table(lex)
    guess, avg = search_words(table, lex.answers, lex.guesses, width=4)
"""

__version__ = "0.1.0"
