"""
Name-order comparators: surname first, then the full string.
"""

from natorder.names.last_first import (
    LAST_FIRST_IGNORE_CASE_KEY,
    LAST_FIRST_KEY,
    compare_ignore_case_null,
    compare_last_first,
    compare_last_first_ignore_case,
    make_last_first_comparator,
    surname_index,
)

__all__ = [
    "LAST_FIRST_IGNORE_CASE_KEY",
    "LAST_FIRST_KEY",
    "compare_ignore_case_null",
    "compare_last_first",
    "compare_last_first_ignore_case",
    "make_last_first_comparator",
    "surname_index",
]
