"""
Last-First — сортировка имён по фамилии

Имена вида "title givenname surname" / "initials surname" сортируются
сначала по последнему слову (фамилии), затем по строке целиком:

    "Alice Smith" < "Jane Smith"      (фамилии равны → полная строка)
    "Smith"       < "Jane Smith"      (фамилии равны, без пробела раньше)
    "Jane Adams"  < "Alice Smith"     (Adams < Smith)

Фамилия: подстрока после последнего пробела; если пробела нет,
фамилией считается вся строка. Фамилии и полные строки сравниваются
natural компаратором (по умолчанию DEFAULT_NATURAL).

Null ordering: None раньше любой строки, пустая строка раньше непустой.
"""

import functools
from typing import Callable, Final, Optional

from natorder.comparators.derived import DEFAULT_NATURAL, NaturalComparator
from natorder.core.natural_compare import compare_chars_ignore_case

SPACE: Final[str] = " "

LastFirstComparator = Callable[[Optional[str], Optional[str]], int]


def _compare_presence(o1: Optional[str], o2: Optional[str]) -> Optional[int]:
    """
    Порядок для None и пустых строк.

    Returns:
        Результат сравнения, если он определяется None/пустотой; иначе None
    """
    if o1 is None and o2 is None:
        return 0
    if o1 is None:
        return -1
    if o2 is None:
        return 1
    if not o1 and not o2:
        return 0
    if not o1:
        return -1
    if not o2:
        return 1
    return None


def surname_index(name: str) -> int:
    """
    Начало фамилии: позиция после последнего пробела, 0 если пробела нет.

    Examples:
        >>> surname_index("Jane Smith")
        5
        >>> surname_index("Smith")
        0
    """
    return name.rfind(SPACE) + 1


def _compare_last_first(o1: Optional[str], o2: Optional[str], natural: NaturalComparator) -> int:
    presence = _compare_presence(o1, o2)
    if presence is not None:
        return presence

    l1 = surname_index(o1)
    l2 = surname_index(o2)

    c = natural(o1[l1:], o2[l2:])
    if c != 0:
        return c

    # Фамилии равны
    if l1 == 0 and l2 == 0:
        return 0
    if l1 == 0:
        return -1
    if l2 == 0:
        return 1
    return natural(o1, o2)


def make_last_first_comparator(
    natural: NaturalComparator, ignore_case: bool = False
) -> LastFirstComparator:
    """
    Last-first компаратор поверх заданного natural компаратора.

    Args:
        natural: Компаратор для фамилий и полных строк
        ignore_case: Приводить обе строки к нижнему регистру перед сравнением

    Returns:
        cmp(o1, o2) -> int, null-aware
    """

    def compare(o1: Optional[str], o2: Optional[str]) -> int:
        if ignore_case:
            presence = _compare_presence(o1, o2)
            if presence is not None:
                return presence
            o1 = o1.lower()
            o2 = o2.lower()
        return _compare_last_first(o1, o2, natural)

    return compare


_LAST_FIRST_IGNORE_CASE: Final[LastFirstComparator] = make_last_first_comparator(
    DEFAULT_NATURAL, ignore_case=True
)


def compare_last_first(o1: Optional[str], o2: Optional[str]) -> int:
    """
    Сравнение имён по фамилии, затем по полной строке.

    Args:
        o1: Первое имя (или None)
        o2: Второе имя (или None)

    Returns:
        < 0, 0 или > 0

    Examples:
        >>> compare_last_first("Jane Smith", "Alice Smith") > 0
        True
        >>> compare_last_first(None, "Smith")
        -1
    """
    return _compare_last_first(o1, o2, DEFAULT_NATURAL)


def compare_last_first_ignore_case(o1: Optional[str], o2: Optional[str]) -> int:
    """Как compare_last_first, но обе строки предварительно приводятся к lower()."""
    return _LAST_FIRST_IGNORE_CASE(o1, o2)


def compare_ignore_case_null(s1: Optional[str], s2: Optional[str]) -> int:
    """
    Null-aware сравнение строк без учёта регистра (без natural-логики).

    None раньше любой строки, два None равны. Символы сравниваются через
    upper, затем lower; при равном общем префиксе короче раньше.
    """
    if s1 is None and s2 is None:
        return 0
    if s1 is None:
        return -1
    if s2 is None:
        return 1
    for a, b in zip(s1, s2):
        c = compare_chars_ignore_case(a, b)
        if c != 0:
            return c
    return len(s1) - len(s2)


LAST_FIRST_KEY: Final = functools.cmp_to_key(compare_last_first)
LAST_FIRST_IGNORE_CASE_KEY: Final = functools.cmp_to_key(compare_last_first_ignore_case)
