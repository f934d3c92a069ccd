"""
natorder — natural-order string comparison.

Embedded digit runs compare by numeric value, text runs by code point
(optionally case-insensitive) or through an injected locale collator.
Includes a surname-first ordering for person names.
"""

from natorder.collation import DEFAULT_LOCALE_COLLATOR, LocaleCollator, TextCollator
from natorder.comparators import (
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
from natorder.core import ComparatorConfig, compare_natural, split_subwords
from natorder.names import (
    LAST_FIRST_IGNORE_CASE_KEY,
    LAST_FIRST_KEY,
    compare_ignore_case_null,
    compare_last_first,
    compare_last_first_ignore_case,
    make_last_first_comparator,
)

__version__ = "1.0.0"

__all__ = [
    # Collation
    "DEFAULT_LOCALE_COLLATOR",
    "LocaleCollator",
    "TextCollator",
    # Core
    "ComparatorConfig",
    "compare_natural",
    "split_subwords",
    # Derived comparators
    "DEFAULT_NATURAL",
    "NATURAL_ASCII",
    "NATURAL_IGNORE_CASE_ASCII",
    "CollatorRequiredError",
    "NaturalComparator",
    "compare_natural_ascii",
    "compare_natural_default",
    "compare_natural_ignore_case_ascii",
    "compare_natural_locale",
    "default_natural_comparator",
    "make_locale_natural_comparator",
    "make_natural_comparator",
    "natural_sorted",
    "nulls_first",
    # Name order
    "LAST_FIRST_IGNORE_CASE_KEY",
    "LAST_FIRST_KEY",
    "compare_ignore_case_null",
    "compare_last_first",
    "compare_last_first_ignore_case",
    "make_last_first_comparator",
]
