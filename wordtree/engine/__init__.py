from .response import (ALL_CODES, ALL_EXACT, Color, NUM_CODES, colors, encode, pack,
                       parse, to_string, unpack)
from .table import ResponseTable, build_response_table
from .partition import Partition, partition, partition_words
from .constraints import filter_candidates, find_errors, sift, winnow

__all__ = [
    "ALL_CODES", "ALL_EXACT", "Color", "NUM_CODES", "colors", "encode", "pack", "parse",
    "to_string", "unpack", "ResponseTable", "build_response_table", "Partition",
    "partition", "partition_words", "filter_candidates", "find_errors", "sift", "winnow",
]
