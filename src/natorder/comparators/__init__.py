"""
Derived natural comparators and sorting helpers.
"""

from natorder.comparators.derived import (
    DEFAULT_NATURAL,
    NATURAL_ASCII,
    NATURAL_IGNORE_CASE_ASCII,
    CollatorRequiredError,
    NaturalComparator,
    compare_natural_ascii,
    compare_natural_default,
    compare_natural_ignore_case_ascii,
    compare_natural_locale,
    default_natural_comparator,
    make_locale_natural_comparator,
    make_natural_comparator,
    natural_sorted,
    nulls_first,
)

__all__ = [
    # Constants
    "DEFAULT_NATURAL",
    "NATURAL_ASCII",
    "NATURAL_IGNORE_CASE_ASCII",
    # Exceptions
    "CollatorRequiredError",
    # Types
    "NaturalComparator",
    # Functions
    "compare_natural_ascii",
    "compare_natural_default",
    "compare_natural_ignore_case_ascii",
    "compare_natural_locale",
    "default_natural_comparator",
    "make_locale_natural_comparator",
    "make_natural_comparator",
    "natural_sorted",
    "nulls_first",
]
