"""
Collation — внешняя capability для locale-зависимого сравнения текста.
"""

from natorder.collation.collator import (
    DEFAULT_LOCALE_COLLATOR,
    LocaleCollator,
    TextCollator,
    resolve_environment_locale,
)

__all__ = [
    "DEFAULT_LOCALE_COLLATOR",
    "LocaleCollator",
    "TextCollator",
    "resolve_environment_locale",
]
