"""
Natural Compare — сравнение строк в "естественном" порядке

Строка разбивается на чередующиеся subword'ы: максимальные цепочки цифр
и цепочки не-цифр. Цепочки цифр сравниваются по числовому значению
(поразрядно, без конвертации в int), остальные либо посимвольно по
code point (опционально без учёта регистра), либо целиком через
внешний collator.

    "img2"  < "img10"     (2 < 10, хотя "2" > "1" лексикографически)
    "07"    < "007"       (одинаковое значение, меньше ведущих нулей раньше)
    "0"    == "00"        (обе цепочки целиком из нулей)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функция тотальна: любая пара строк (включая пустые) сравнима
2. Рефлексивность, антисимметричность и транзитивность при фиксированной
   конфигурации: результат пригоден для sort()
3. Цепочки цифр произвольной длины: никаких int() / переполнений
4. Исключение из collator.compare пробрасывается без обёртки
"""

from typing import Final, Optional

from natorder.collation.collator import TextCollator

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[str] = "0"


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def is_digit(ch: str) -> bool:
    """Десятичная цифра (Unicode Nd), как при разбиении на subword'ы."""
    return ch.isdecimal()


def _sign(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare_chars_ignore_case(a: str, b: str) -> int:
    """
    Сравнение двух символов без учёта регистра.

    Сначала сравниваются upper-формы; если они различаются, сравниваются
    lower-формы от upper-форм (upper() не инъективен для части алфавитов).
    Upper/lower в Python может вернуть несколько символов ('ß' → 'SS'),
    поэтому формы сравниваются как строки.

    Returns:
        < 0, 0 или > 0
    """
    if a == b:
        return 0
    a_up = a.upper()
    b_up = b.upper()
    if a_up == b_up:
        return 0
    a_low = a_up.lower()
    b_low = b_up.lower()
    if a_low == b_low:
        return 0
    if len(a_low) == 1 and len(b_low) == 1:
        return ord(a_low) - ord(b_low)
    return _sign(a_low, b_low)


def split_subwords(text: str) -> list[str]:
    """
    Разбиение строки на чередующиеся subword'ы (цифры / не-цифры).

    Разбиение уникально и тотально: "".join(result) == text.

    Examples:
        >>> split_subwords("img010b")
        ['img', '010', 'b']
        >>> split_subwords("")
        []
    """
    parts: list[str] = []
    start = 0
    for i in range(1, len(text) + 1):
        if i == len(text) or is_digit(text[i]) != is_digit(text[start]):
            parts.append(text[start:i])
            start = i
    return parts


# =============================================================================
# NATURAL COMPARE
# =============================================================================


def compare_natural(
    s: str,
    t: str,
    case_sensitive: bool = True,
    collator: Optional[TextCollator] = None,
) -> int:
    """
    Сравнение двух строк в естественном порядке.

    Две независимые позиции (s_index, t_index) идут слева направо.
    На каждом шаге:
    - обе строки исчерпаны → 0; исчерпана одна → она меньше
    - оба текущих символа цифры → сравнение числовых subword'ов
    - иначе → сравнение текстовых subword'ов

    Числовой subword:
    - ведущие '0' пропускаются и считаются для каждой стороны
    - если после нулей цифр нет на обеих сторонах → равны, идём дальше;
      если только на одной → она меньше ("0" < любое ненулевое число)
    - далее поразрядно; первая разница запоминается в diff, но решает
      только если длины цепочек совпали. Более длинная цепочка больше.
    - если обе строки закончились ровно на конце цепочек и diff == 0,
      решает разница количества ведущих нулей (меньше нулей раньше)

    Текстовый subword:
    - с collator: обе позиции продвигаются до конца не-цифровой цепочки,
      цепочки целиком передаются в collator.compare
    - без collator: посимвольно, по code point (case_sensitive=True) или
      через compare_chars_ignore_case

    Args:
        s: Первая строка
        t: Вторая строка
        case_sensitive: Учитывать регистр (игнорируется при наличии collator)
        collator: Locale-зависимое сравнение текстовых subword'ов

    Returns:
        < 0 если s раньше t, 0 если равны, > 0 если s позже t

    Examples:
        >>> compare_natural("img2", "img10") < 0
        True
        >>> compare_natural("007", "07") > 0
        True
        >>> compare_natural("0", "00")
        0
    """
    s_index = 0
    t_index = 0
    s_length = len(s)
    t_length = len(t)

    while True:
        # Обе позиции стоят на границе subword'а (или на нуле)
        if s_index == s_length and t_index == t_length:
            return 0
        if s_index == s_length:
            return -1
        if t_index == t_length:
            return 1

        s_char = s[s_index]
        t_char = t[t_index]

        if is_digit(s_char) and is_digit(t_char):
            # ---------------------------------------------------------------
            # Числовой subword
            # ---------------------------------------------------------------
            s_leading_zeros = 0
            while s_char == ZERO:
                s_leading_zeros += 1
                s_index += 1
                if s_index == s_length:
                    break
                s_char = s[s_index]

            t_leading_zeros = 0
            while t_char == ZERO:
                t_leading_zeros += 1
                t_index += 1
                if t_index == t_length:
                    break
                t_char = t[t_index]

            s_all_zero = s_index == s_length or not is_digit(s_char)
            t_all_zero = t_index == t_length or not is_digit(t_char)
            if s_all_zero and t_all_zero:
                continue
            if s_all_zero:
                return -1
            if t_all_zero:
                return 1

            diff = 0
            while True:
                if diff == 0:
                    diff = ord(s_char) - ord(t_char)
                s_index += 1
                t_index += 1

                if s_index == s_length and t_index == t_length:
                    return diff if diff != 0 else s_leading_zeros - t_leading_zeros
                if s_index == s_length:
                    if diff == 0:
                        return -1
                    return -1 if is_digit(t[t_index]) else diff
                if t_index == t_length:
                    if diff == 0:
                        return 1
                    return 1 if is_digit(s[s_index]) else diff

                s_char = s[s_index]
                t_char = t[t_index]
                s_char_is_digit = is_digit(s_char)
                t_char_is_digit = is_digit(t_char)

                if not s_char_is_digit and not t_char_is_digit:
                    # Цепочки одинаковой длины
                    if diff != 0:
                        return diff
                    break
                if not s_char_is_digit:
                    return -1
                if not t_char_is_digit:
                    return 1

        elif collator is not None:
            # ---------------------------------------------------------------
            # Текстовый subword через collator: только целыми цепочками
            # ---------------------------------------------------------------
            s_start = s_index
            t_start = t_index
            s_index += 1
            while s_index < s_length and not is_digit(s[s_index]):
                s_index += 1
            t_index += 1
            while t_index < t_length and not is_digit(t[t_index]):
                t_index += 1

            subword_result = collator.compare(s[s_start:s_index], t[t_start:t_index])
            if subword_result != 0:
                return subword_result

        else:
            # ---------------------------------------------------------------
            # Текстовый subword без collator: посимвольно
            # ---------------------------------------------------------------
            while True:
                if s_char != t_char:
                    if case_sensitive:
                        return ord(s_char) - ord(t_char)
                    char_result = compare_chars_ignore_case(s_char, t_char)
                    if char_result != 0:
                        return char_result

                s_index += 1
                t_index += 1
                if s_index == s_length and t_index == t_length:
                    return 0
                if s_index == s_length:
                    return -1
                if t_index == t_length:
                    return 1

                s_char = s[s_index]
                t_char = t[t_index]
                if is_digit(s_char) or is_digit(t_char):
                    break
