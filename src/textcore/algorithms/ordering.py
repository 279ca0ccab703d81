"""
Ordering — Case-Insensitive & Natural Comparison

Модуль реализует трёхзначные компараторы и извлечение общих префиксов:
- compare_ignore_case: сравнение с ASCII folding (только A-Z)
- natural_compare: сравнение с учётом числовых значений прогонов цифр
- common_prefix / common_suffix: побайтовые (case-sensitive) общие части
- starts_with_ignore_case / ends_with_ignore_case / contains_ignore_case

Результат сравнения: -1 (меньше), 0 (равно), +1 (больше).

АЛГОРИТМ natural_compare:
    Оба текста сканируются синхронно. Если на текущей позиции обе стороны —
    цифры, с каждой стороны берётся максимальный прогон цифр, и прогоны
    сравниваются как токены:
        1. по величине: длина значащей части (без ведущих нулей),
           затем поразрядно
        2. при равной величине — по полной длине прогона ("0" < "00")
    Иначе code units сравниваются по числовому значению.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Оба компаратора — строгие тотальные порядки: cmp(a, b) == -cmp(b, a)
2. Прогоны цифр никогда не конвертируются в int: прогон любой длины
   сравнивается корректно (например, 30-значный)
3. Если один текст — префикс другого, короткий сортируется первым
4. common_prefix/common_suffix — срезы входа длиной <= min(len(a), len(b))
"""

from functools import cmp_to_key
from typing import Iterable

from textcore.algorithms.classification import is_digit, lower_ascii, to_lower_ascii

# =============================================================================
# CASE-INSENSITIVE
# =============================================================================


def _sign(diff: int) -> int:
    if diff < 0:
        return -1
    if diff > 0:
        return 1
    return 0


def compare_ignore_case(lhs: str, rhs: str) -> int:
    """
    Трёхзначное сравнение с ASCII case folding.

    Складываются только A-Z; прочие code units сравниваются как есть.
    Первая неравная пара (после folding) определяет знак; при совпадении
    общей части короткий текст меньше.

    Args:
        lhs: Левый текст
        rhs: Правый текст

    Returns:
        -1, 0 или +1

    Examples:
        >>> compare_ignore_case("hello", "HELLO")
        0
        >>> compare_ignore_case("apple", "BANANA")
        -1
        >>> compare_ignore_case("testing", "TEST")
        1
    """
    for lc, rc in zip(lhs, rhs):
        lf = ord(to_lower_ascii(lc))
        rf = ord(to_lower_ascii(rc))
        if lf != rf:
            return _sign(lf - rf)

    return _sign(len(lhs) - len(rhs))


def equals_ignore_case(lhs: str, rhs: str) -> bool:
    """Равенство с ASCII case folding: compare_ignore_case(lhs, rhs) == 0."""
    if len(lhs) != len(rhs):
        return False
    return compare_ignore_case(lhs, rhs) == 0


def starts_with_ignore_case(text: str, prefix: str) -> bool:
    """Начинается ли text с prefix с точностью до ASCII регистра."""
    return equals_ignore_case(text[:len(prefix)], prefix)


def ends_with_ignore_case(text: str, suffix: str) -> bool:
    """Заканчивается ли text на suffix с точностью до ASCII регистра."""
    if len(suffix) > len(text):
        return False
    return equals_ignore_case(text[len(text) - len(suffix):], suffix)


def contains_ignore_case(text: str, needle: str) -> bool:
    """
    Вхождение needle в text с ASCII case folding.

    Пустой needle содержится в любом тексте.

    Examples:
        >>> contains_ignore_case("Hello World", "WORLD")
        True
        >>> contains_ignore_case("straße", "STRASSE")
        False
    """
    return lower_ascii(needle) in lower_ascii(text)


# =============================================================================
# NATURAL ORDER
# =============================================================================


def _digit_run_end(text: str, start: int) -> int:
    end = start
    while end < len(text) and is_digit(text[end]):
        end += 1
    return end


def _skip_leading_zeros(text: str, start: int, end: int) -> int:
    while start < end and text[start] == "0":
        start += 1
    return start


def _compare_digit_runs(
    lhs: str,
    l_start: int,
    l_end: int,
    rhs: str,
    r_start: int,
    r_end: int,
) -> int:
    """
    Сравнение двух прогонов цифр как чисел произвольной длины.

    Returns:
        -1, 0 или +1
    """
    l_sig = _skip_leading_zeros(lhs, l_start, l_end)
    r_sig = _skip_leading_zeros(rhs, r_start, r_end)

    # Больше значащих цифр — больше величина
    l_sig_len = l_end - l_sig
    r_sig_len = r_end - r_sig
    if l_sig_len != r_sig_len:
        return _sign(l_sig_len - r_sig_len)

    # Равная длина: поразрядное сравнение
    for offset in range(l_sig_len):
        ld = lhs[l_sig + offset]
        rd = rhs[r_sig + offset]
        if ld != rd:
            return -1 if ld < rd else 1

    # Равная величина: короткий прогон меньше ("0" < "00", "7" < "007")
    return _sign((l_end - l_start) - (r_end - r_start))


def natural_compare(lhs: str, rhs: str) -> int:
    """
    Трёхзначное "естественное" сравнение: прогоны цифр — числа.

    Args:
        lhs: Левый текст
        rhs: Правый текст

    Returns:
        -1, 0 или +1

    Examples:
        >>> natural_compare("file2.txt", "file10.txt")
        -1
        >>> natural_compare("v1.9", "v1.10")
        -1
        >>> natural_compare("0", "00")
        -1
        >>> natural_compare("", "")
        0
    """
    i = 0
    j = 0

    while i < len(lhs) and j < len(rhs):
        lc = lhs[i]
        rc = rhs[j]

        if is_digit(lc) and is_digit(rc):
            i_end = _digit_run_end(lhs, i)
            j_end = _digit_run_end(rhs, j)

            result = _compare_digit_runs(lhs, i, i_end, rhs, j, j_end)
            if result != 0:
                return result

            i = i_end
            j = j_end
            continue

        if lc != rc:
            return -1 if lc < rc else 1

        i += 1
        j += 1

    # Один из текстов исчерпан: остаток у другого делает его больше
    return _sign((len(lhs) - i) - (len(rhs) - j))


# =============================================================================
# SORT KEYS
# =============================================================================

# Адаптеры для sorted() / list.sort()
ignore_case_key = cmp_to_key(compare_ignore_case)
natural_key = cmp_to_key(natural_compare)


def natural_sorted(items: Iterable[str], reverse: bool = False) -> list[str]:
    """
    Стабильная сортировка в естественном порядке.

    Examples:
        >>> natural_sorted(["file10", "file2", "file1"])
        ['file1', 'file2', 'file10']
    """
    return sorted(items, key=natural_key, reverse=reverse)


# =============================================================================
# COMMON PREFIX / SUFFIX
# =============================================================================


def common_prefix(lhs: str, rhs: str) -> str:
    """
    Самый длинный общий префикс (case-sensitive, по code units).

    Examples:
        >>> common_prefix("testing", "tester")
        'test'
        >>> common_prefix("Hello", "hello")
        ''
    """
    limit = min(len(lhs), len(rhs))
    i = 0
    while i < limit and lhs[i] == rhs[i]:
        i += 1
    return lhs[:i]


def common_suffix(lhs: str, rhs: str) -> str:
    """
    Самый длинный общий суффикс (case-sensitive, по code units).

    Examples:
        >>> common_suffix("file1.txt", "file2.txt")
        '.txt'
        >>> common_suffix("Hello", "hello")
        'ello'
    """
    limit = min(len(lhs), len(rhs))
    n = 0
    while n < limit and lhs[len(lhs) - 1 - n] == rhs[len(rhs) - 1 - n]:
        n += 1
    return lhs[len(lhs) - n:]
