"""
Derived Comparators — фиксированные конфигурации natural compare

Специализации compare_natural:
- locale natural:          collator обязателен (make_natural_comparator)
- named-locale natural:    make_locale_natural_comparator(locale_name)
- default-locale natural:  DEFAULT_LOCALE_COLLATOR, создаётся один раз
- ASCII natural:           без collator, с учётом регистра
- ASCII natural ignore case: без collator, без учёта регистра

ASCII-варианты корректны только для 7-bit текста; для не-ASCII без
collator порядок не определён (но сравнение не падает).
"""

import functools
import logging
from typing import Any, Callable, Final, Iterable, Optional, TypeVar

from natorder.collation.collator import DEFAULT_LOCALE_COLLATOR, LocaleCollator, TextCollator
from natorder.core.config import ComparatorConfig
from natorder.core.natural_compare import compare_natural

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CollatorRequiredError(ValueError):
    """
    Locale natural компаратор запрошен без collator.

    Поднимается при создании компаратора, а не при первом сравнении.
    Для сравнения без collator следует использовать ASCII-варианты.
    """


# =============================================================================
# NATURAL COMPARATOR
# =============================================================================


class NaturalComparator:
    """
    Stateless компаратор, привязанный к одной ComparatorConfig.

    Вызывается как cmp(s, t) -> int; key пригоден для sorted(key=...).
    """

    def __init__(self, config: ComparatorConfig, name: str = "natural"):
        self.config = config
        self.name = name
        self.key = functools.cmp_to_key(self)

    def __call__(self, s: str, t: str) -> int:
        return self.config.compare(s, t)

    def sorted(self, items: Iterable[str], reverse: bool = False) -> list[str]:
        """Отсортированная копия items."""
        return sorted(items, key=self.key, reverse=reverse)

    def __repr__(self) -> str:
        return f"NaturalComparator(name={self.name!r}, config={self.config!r})"


def make_natural_comparator(collator: Optional[TextCollator]) -> NaturalComparator:
    """
    Locale natural компаратор с заданным collator.

    Args:
        collator: Collator для текстовых subword'ов (обязателен)

    Returns:
        NaturalComparator

    Raises:
        CollatorRequiredError: если collator is None
        pydantic.ValidationError: если у collator нет compare()
    """
    if collator is None:
        raise CollatorRequiredError(
            "collator must not be None; use NATURAL_ASCII or "
            "NATURAL_IGNORE_CASE_ASCII for comparison without a collator"
        )
    comparator = NaturalComparator(
        ComparatorConfig(case_sensitive=True, collator=collator), name="locale"
    )
    logger.debug("Built locale natural comparator with %r", collator)
    return comparator


def make_locale_natural_comparator(locale_name: str) -> NaturalComparator:
    """
    Locale natural компаратор для заданной локали LC_COLLATE.

    Args:
        locale_name: Имя локали, например "nl_NL.UTF-8"

    Returns:
        NaturalComparator с LocaleCollator(locale_name)

    Raises:
        locale.Error: Локаль недоступна в системе
    """
    return make_natural_comparator(LocaleCollator(locale_name))


# =============================================================================
# ФИКСИРОВАННЫЕ КОНФИГУРАЦИИ
# =============================================================================

NATURAL_ASCII: Final[NaturalComparator] = NaturalComparator(
    ComparatorConfig(case_sensitive=True), name="ascii"
)

NATURAL_IGNORE_CASE_ASCII: Final[NaturalComparator] = NaturalComparator(
    ComparatorConfig(case_sensitive=False), name="ascii_ignore_case"
)

DEFAULT_NATURAL: Final[NaturalComparator] = NaturalComparator(
    ComparatorConfig(case_sensitive=False, collator=DEFAULT_LOCALE_COLLATOR),
    name="default_locale",
)


def default_natural_comparator() -> NaturalComparator:
    """Natural компаратор с collator локали по умолчанию (один на процесс)."""
    return DEFAULT_NATURAL


# =============================================================================
# ФУНКЦИОНАЛЬНЫЕ ТОЧКИ ВХОДА
# =============================================================================


def compare_natural_ascii(s: str, t: str) -> int:
    """Natural compare по code point, с учётом регистра."""
    return NATURAL_ASCII(s, t)


def compare_natural_ignore_case_ascii(s: str, t: str) -> int:
    """
    Natural compare по code point без учёта регистра.

    Examples:
        >>> compare_natural_ignore_case_ascii("File2", "file10") < 0
        True
    """
    return NATURAL_IGNORE_CASE_ASCII(s, t)


def compare_natural_locale(collator: TextCollator, s: str, t: str) -> int:
    """Natural compare с заданным collator для текстовых subword'ов."""
    if collator is None:
        raise CollatorRequiredError("collator must not be None")
    return compare_natural(s, t, True, collator)


def compare_natural_default(s: str, t: str) -> int:
    """Natural compare по правилам локали по умолчанию."""
    return DEFAULT_NATURAL(s, t)


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def nulls_first(cmp: Callable[[Any, Any], int]) -> Callable[[Any, Any], int]:
    """
    Null-aware обёртка компаратора: None раньше любого значения,
    два None равны.
    """

    def wrapper(a: Any, b: Any) -> int:
        if a is None and b is None:
            return 0
        if a is None:
            return -1
        if b is None:
            return 1
        return cmp(a, b)

    return wrapper


def natural_sorted(
    items: Iterable[T],
    comparator: Callable[[Any, Any], int] = NATURAL_ASCII,
    reverse: bool = False,
) -> list[T]:
    """
    Отсортированная копия items в естественном порядке.

    Examples:
        >>> natural_sorted(["track10", "track2", "track1"])
        ['track1', 'track2', 'track10']
    """
    return sorted(items, key=functools.cmp_to_key(comparator), reverse=reverse)
