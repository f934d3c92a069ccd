"""
Text Collator — locale-зависимое сравнение текстовых subword'ов

Natural compare не реализует локаль сам: сравнение не-цифровых цепочек
делегируется объекту с методом compare(a, b) -> int (TextCollator).
Конкретный collator выбирает вызывающий код.

LocaleCollator привязан к одной локали LC_COLLATE, выбранной при создании:
- LocaleCollator()               → локаль окружения (LC_ALL / LC_COLLATE / LANG)
- LocaleCollator("de_DE.UTF-8")  → заданная локаль

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Локаль разрешается один раз при создании, а не при каждом compare()
2. Недоступная локаль → locale.Error при создании, а не при сравнении
3. compare() не меняет LC_COLLATE процесса: прежнее значение
   восстанавливается после каждого вызова

Ограничение: stdlib не умеет сравнивать строки по локали без изменения
глобального состояния процесса. compare() переключает LC_COLLATE под
блокировкой модуля; код, который вызывает locale.setlocale в другом
потоке в обход этой блокировки, может увидеть чужую LC_COLLATE.
"""

import locale
import logging
import threading
from typing import Final, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


# =============================================================================
# CAPABILITY
# =============================================================================


@runtime_checkable
class TextCollator(Protocol):
    """Сравнение двух строк по правилам локали: < 0, 0, > 0."""

    def compare(self, a: str, b: str) -> int:
        ...


# =============================================================================
# LOCALE COLLATOR
# =============================================================================

FALLBACK_LOCALE: Final[str] = "C"

# Все переключения LC_COLLATE внутри модуля идут под этой блокировкой
_LC_COLLATE_LOCK: Final[threading.Lock] = threading.Lock()


def _resolve_collate_locale(locale_name: str) -> str:
    """
    Каноническое имя локали LC_COLLATE.

    Локаль временно устанавливается и сразу возвращается прежняя.
    Пустая строка означает локаль окружения.

    Raises:
        locale.Error: Локаль недоступна в системе
    """
    with _LC_COLLATE_LOCK:
        previous = locale.setlocale(locale.LC_COLLATE)
        try:
            return locale.setlocale(locale.LC_COLLATE, locale_name)
        finally:
            locale.setlocale(locale.LC_COLLATE, previous)


def resolve_environment_locale() -> str:
    """
    Локаль LC_COLLATE окружения (LC_ALL, LC_COLLATE, LANG).

    Если окружение указывает на неустановленную локаль, используется "C".
    """
    try:
        return _resolve_collate_locale("")
    except locale.Error as e:
        logger.warning(
            "Environment collation locale unavailable (%s), falling back to %s",
            e,
            FALLBACK_LOCALE,
        )
        return FALLBACK_LOCALE


class LocaleCollator:
    """
    Collator поверх locale.strcoll с фиксированной локалью.

    Результат нормализуется к -1 / 0 / 1. Последующие вызовы
    locale.setlocale не меняют порядок уже созданного collator'а.
    """

    def __init__(self, locale_name: Optional[str] = None):
        """
        Args:
            locale_name: Имя локали LC_COLLATE; None → локаль окружения

        Raises:
            locale.Error: Локаль locale_name недоступна
        """
        if locale_name is None:
            self.locale_name = resolve_environment_locale()
        else:
            self.locale_name = _resolve_collate_locale(locale_name)

    def compare(self, a: str, b: str) -> int:
        with _LC_COLLATE_LOCK:
            previous = locale.setlocale(locale.LC_COLLATE)
            if previous == self.locale_name:
                result = locale.strcoll(a, b)
            else:
                locale.setlocale(locale.LC_COLLATE, self.locale_name)
                try:
                    result = locale.strcoll(a, b)
                finally:
                    locale.setlocale(locale.LC_COLLATE, previous)
        return (result > 0) - (result < 0)

    def __repr__(self) -> str:
        return f"LocaleCollator(locale_name={self.locale_name!r})"


# Единственный экземпляр для "default natural" компаратора,
# локаль окружения разрешается один раз при импорте
DEFAULT_LOCALE_COLLATOR: Final[LocaleCollator] = LocaleCollator()
logger.debug("Default collator resolved: %s", DEFAULT_LOCALE_COLLATOR.locale_name)
