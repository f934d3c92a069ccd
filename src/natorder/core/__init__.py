"""
Core natural compare algorithm and its configuration.

Pure functions without I/O or shared mutable state.
"""

from natorder.core.config import ComparatorConfig
from natorder.core.natural_compare import (
    compare_chars_ignore_case,
    compare_natural,
    is_digit,
    split_subwords,
)

__all__ = [
    # Configuration
    "ComparatorConfig",
    # Algorithm
    "compare_natural",
    "compare_chars_ignore_case",
    "is_digit",
    "split_subwords",
]
