"""
Тесты для Name-Order Comparator (last-first)

Проверяет:
1. Null и пустые строки
2. Сравнение по фамилии, затем по полной строке
3. Имена без пробела против имён с пробелом
4. Вариант без учёта регистра
5. compare_ignore_case_null
"""

import pytest

from natorder.comparators.derived import make_natural_comparator
from natorder.names.last_first import (
    LAST_FIRST_IGNORE_CASE_KEY,
    LAST_FIRST_KEY,
    compare_ignore_case_null,
    compare_last_first,
    compare_last_first_ignore_case,
    make_last_first_comparator,
    surname_index,
)


class CaseFoldCollator:
    def compare(self, a: str, b: str) -> int:
        a_key = a.casefold()
        b_key = b.casefold()
        return (a_key > b_key) - (a_key < b_key)


# =============================================================================
# NULL И ПУСТЫЕ СТРОКИ
# =============================================================================


class TestPresenceOrdering:
    """Тесты порядка None и пустых строк"""

    def test_none_before_string(self) -> None:
        assert compare_last_first(None, "Smith") < 0
        assert compare_last_first("Smith", None) > 0

    def test_two_none_equal(self) -> None:
        assert compare_last_first(None, None) == 0

    def test_empty_before_non_empty(self) -> None:
        assert compare_last_first("", "") == 0
        assert compare_last_first("", "Smith") < 0
        assert compare_last_first("Smith", "") > 0

    def test_none_before_empty(self) -> None:
        assert compare_last_first(None, "") < 0

    def test_ignore_case_variant_presence(self) -> None:
        assert compare_last_first_ignore_case(None, "smith") < 0
        assert compare_last_first_ignore_case(None, None) == 0
        assert compare_last_first_ignore_case("", "smith") < 0


# =============================================================================
# ФАМИЛИЯ, ЗАТЕМ ПОЛНАЯ СТРОКА
# =============================================================================


class TestSurnameFirst:
    """Тесты сравнения по фамилии"""

    def test_surname_decides(self) -> None:
        """Adams < Smith независимо от имени"""
        assert compare_last_first("Jane Adams", "Alice Smith") < 0
        assert compare_last_first("Alice Smith", "Jane Adams") > 0

    def test_surname_tie_falls_back_to_full_string(self) -> None:
        """Фамилии равны → решает полная строка"""
        assert compare_last_first("Jane Smith", "Alice Smith") > 0
        assert compare_last_first("Alice Smith", "Jane Smith") < 0

    def test_identical_names(self) -> None:
        assert compare_last_first("Jane Smith", "Jane Smith") == 0
        assert compare_last_first("Smith", "Smith") == 0

    def test_no_space_before_space(self) -> None:
        """Без пробела раньше, чем с пробелом, при равных фамилиях"""
        assert compare_last_first("Smith", "Jane Smith") < 0
        assert compare_last_first("Jane Smith", "Smith") > 0

    def test_leading_space_counts_as_space(self) -> None:
        """Пробел в позиции 0: фамилия после него, имя считается «с пробелом»"""
        assert compare_last_first(" Smith", "Smith") > 0
        assert compare_last_first("Smith", " Smith") < 0

    def test_last_space_is_used(self) -> None:
        """Фамилия: последнее слово"""
        assert compare_last_first("Mary Ann Zeta", "Bob Alpha") > 0
        assert compare_last_first("Dr. J. Brown", "Anna Clark") < 0

    def test_numeric_surnames(self) -> None:
        """Фамилии сравниваются natural-порядком"""
        assert compare_last_first("Unit 2", "Unit 10") < 0

    def test_sort_with_key(self) -> None:
        names = ["Jane Smith", "Smith", "Alice Smith", "Bob Adams"]
        assert sorted(names, key=LAST_FIRST_KEY) == [
            "Bob Adams",
            "Smith",
            "Alice Smith",
            "Jane Smith",
        ]


class TestSurnameIndex:
    """Тесты surname_index"""

    @pytest.mark.parametrize(
        "name,expected",
        [("Jane Smith", 5), ("Smith", 0), ("Mary Ann Zeta", 9), (" Smith", 1), ("Smith ", 6)],
    )
    def test_index(self, name: str, expected: int) -> None:
        assert surname_index(name) == expected


# =============================================================================
# БЕЗ УЧЁТА РЕГИСТРА
# =============================================================================


class TestIgnoreCase:
    """Тесты compare_last_first_ignore_case"""

    def test_case_ignored(self) -> None:
        assert compare_last_first_ignore_case("SMITH", "smith") == 0
        assert compare_last_first_ignore_case("Jane SMITH", "jane smith") == 0

    def test_order_after_lowercasing(self) -> None:
        assert compare_last_first_ignore_case("jane smith", "Alice SMITH") > 0
        assert compare_last_first_ignore_case("ZED adams", "amy Smith") < 0

    def test_sort_with_key(self) -> None:
        names = ["bob SMITH", "Alice smith", "carol Adams"]
        assert sorted(names, key=LAST_FIRST_IGNORE_CASE_KEY) == [
            "carol Adams",
            "Alice smith",
            "bob SMITH",
        ]


class TestMakeLastFirstComparator:
    """Тесты last-first поверх заданного natural компаратора"""

    def test_custom_collator(self) -> None:
        compare = make_last_first_comparator(make_natural_comparator(CaseFoldCollator()))
        assert compare("Bob smith", "Ann Smith") > 0
        assert compare("smith", "Ann Smith") < 0
        assert compare(None, "Smith") < 0

    def test_ignore_case_flag(self) -> None:
        compare = make_last_first_comparator(
            make_natural_comparator(CaseFoldCollator()), ignore_case=True
        )
        assert compare("BOB SMITH", "bob smith") == 0
        assert compare("", "bob") < 0


# =============================================================================
# COMPARE IGNORE CASE NULL
# =============================================================================


class TestCompareIgnoreCaseNull:
    """Тесты compare_ignore_case_null"""

    def test_none_handling(self) -> None:
        assert compare_ignore_case_null(None, None) == 0
        assert compare_ignore_case_null(None, "a") < 0
        assert compare_ignore_case_null("a", None) > 0

    def test_case_ignored(self) -> None:
        assert compare_ignore_case_null("abc", "ABC") == 0
        assert compare_ignore_case_null("b", "A") > 0

    def test_prefix_shorter_first(self) -> None:
        assert compare_ignore_case_null("ab", "ABC") < 0
        assert compare_ignore_case_null("", "a") < 0

    def test_not_natural(self) -> None:
        """Числа сравниваются как символы"""
        assert compare_ignore_case_null("img2", "img10") > 0
