"""
Scanning — Predicate-Driven Scan & Transform Primitives

Модуль предоставляет однопроходные примитивы, параметризованные предикатом
над одним code unit:
- count_if: количество code units, удовлетворяющих предикату
- find_if / find_if_not: индекс первого (не)совпадения или NOT_FOUND
- trim_while: срез максимального совпадающего прогона с начала/конца/обеих сторон
- replace_if: посимвольная замена с сохранением длины

На этих примитивах построены whitespace-операции (trim, remove_whitespace,
collapse_whitespace).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустой текст валиден: count 0, NOT_FOUND, пустой/неизменный результат
2. len(replace_if(t, p, c)) == len(t)
3. trim_while идемпотентен: повторное применение ничего не меняет
4. Входной текст никогда не изменяется (str неизменяем, результат — срез или новая строка)
"""

from enum import Enum
from typing import Callable, Final

from textcore.algorithms.classification import is_whitespace

# =============================================================================
# КОНСТАНТЫ И ТИПЫ
# =============================================================================

# Sentinel "не найдено" (конвенция str.find)
NOT_FOUND: Final[int] = -1

# Предикат над одним code unit
CharPredicate = Callable[[str], bool]


class TrimSide(Enum):
    """Сторона, с которой trim_while срезает совпадающий прогон"""

    START = "START"
    END = "END"
    BOTH = "BOTH"


# =============================================================================
# ПОИСК И ПОДСЧЁТ
# =============================================================================


def count_if(text: str, pred: CharPredicate) -> int:
    """
    Количество code units, удовлетворяющих предикату.

    Args:
        text: Исходный текст
        pred: Предикат над одним code unit

    Returns:
        Число совпадений (0 для пустого текста)

    Examples:
        >>> count_if("a b\\tc", is_whitespace)
        2
    """
    count = 0
    for c in text:
        if pred(c):
            count += 1
    return count


def find_if(text: str, pred: CharPredicate) -> int:
    """
    Индекс первого (самого левого) code unit, удовлетворяющего предикату.

    Returns:
        Индекс или NOT_FOUND

    Examples:
        >>> find_if("ab c", is_whitespace)
        2
        >>> find_if("abc", is_whitespace)
        -1
    """
    for i, c in enumerate(text):
        if pred(c):
            return i
    return NOT_FOUND


def find_if_not(text: str, pred: CharPredicate) -> int:
    """
    Индекс первого code unit, НЕ удовлетворяющего предикату.

    Returns:
        Индекс или NOT_FOUND

    Examples:
        >>> find_if_not("   x", is_whitespace)
        3
    """
    for i, c in enumerate(text):
        if not pred(c):
            return i
    return NOT_FOUND


# =============================================================================
# TRIM
# =============================================================================


def trim_while(
    text: str,
    pred: CharPredicate,
    side: TrimSide = TrimSide.BOTH,
) -> str:
    """
    Срез максимального прогона совпадающих code units с заданной стороны.

    Если весь текст удовлетворяет предикату — результат пустой.
    Если ни один крайний code unit не совпадает — текст возвращается как есть.

    Args:
        text: Исходный текст
        pred: Предикат над одним code unit
        side: START, END или BOTH (default: BOTH)

    Returns:
        Срез исходного текста

    Examples:
        >>> trim_while("xxhixx", lambda c: c == "x")
        'hi'
        >>> trim_while("xxhixx", lambda c: c == "x", TrimSide.START)
        'hixx'
        >>> trim_while("xxxx", lambda c: c == "x")
        ''
    """
    start = 0
    end = len(text)

    if side in (TrimSide.START, TrimSide.BOTH):
        while start < end and pred(text[start]):
            start += 1

    if side in (TrimSide.END, TrimSide.BOTH):
        while end > start and pred(text[end - 1]):
            end -= 1

    return text[start:end]


def trim_start_while(text: str, pred: CharPredicate) -> str:
    """Срез совпадающего прогона только с начала текста."""
    return trim_while(text, pred, TrimSide.START)


def trim_end_while(text: str, pred: CharPredicate) -> str:
    """Срез совпадающего прогона только с конца текста."""
    return trim_while(text, pred, TrimSide.END)


def trim(text: str) -> str:
    """Срез ASCII whitespace с обеих сторон."""
    return trim_while(text, is_whitespace, TrimSide.BOTH)


def trim_start(text: str) -> str:
    """Срез ASCII whitespace с начала."""
    return trim_while(text, is_whitespace, TrimSide.START)


def trim_end(text: str) -> str:
    """Срез ASCII whitespace с конца."""
    return trim_while(text, is_whitespace, TrimSide.END)


# =============================================================================
# ТРАНСФОРМАЦИИ
# =============================================================================


def replace_if(text: str, pred: CharPredicate, replacement: str) -> str:
    """
    Замена каждого совпадающего code unit на replacement (один к одному).

    Длина результата всегда равна длине исходного текста.

    Args:
        text: Исходный текст
        pred: Предикат над одним code unit
        replacement: Ровно один code unit

    Returns:
        Новая строка той же длины

    Raises:
        ValueError: Если replacement не является одним code unit

    Examples:
        >>> replace_if("a b\\tc", is_whitespace, "_")
        'a_b_c'
    """
    if len(replacement) != 1:
        raise ValueError(
            f"replacement must be a single code unit, got {replacement!r}"
        )

    return "".join(replacement if pred(c) else c for c in text)


def remove_if(text: str, pred: CharPredicate) -> str:
    """
    Удаление всех code units, удовлетворяющих предикату.

    Examples:
        >>> remove_if("a1b2", lambda c: c in "0123456789")
        'ab'
    """
    return "".join(c for c in text if not pred(c))


def remove_whitespace(text: str) -> str:
    """Удаление всех ASCII whitespace code units."""
    return remove_if(text, is_whitespace)


def collapse_whitespace(text: str) -> str:
    """
    Схлопывание прогонов whitespace в один пробел.

    Ведущие и завершающие whitespace удаляются.

    Examples:
        >>> collapse_whitespace("  a \\t\\n b  ")
        'a b'
    """
    parts: list[str] = []
    in_whitespace = True  # пропуск ведущих whitespace

    for c in text:
        if is_whitespace(c):
            if not in_whitespace:
                parts.append(" ")
                in_whitespace = True
        else:
            parts.append(c)
            in_whitespace = False

    if parts and parts[-1] == " ":
        parts.pop()

    return "".join(parts)
