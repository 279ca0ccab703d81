"""
Extraction — Substring Extraction by Delimiter

Извлечение подстрок относительно разделителя:
- substring_before / substring_after: относительно первого вхождения
- substring_before_last / substring_after_last: относительно последнего
- extract_between: между start и первым последующим end
- count_occurrences: число вхождений, с перекрытием или без
- remove_prefix / remove_suffix

Поиск — точное совпадение code units, без учёта регистра не выполняется.
"""

from textcore.algorithms.scanning import NOT_FOUND


def substring_before(text: str, delimiter: str) -> str:
    """
    Часть текста до первого вхождения delimiter.

    Пустой или отсутствующий delimiter — текст целиком.

    Examples:
        >>> substring_before("hello.world.txt", ".")
        'hello'
        >>> substring_before("hello", "/")
        'hello'
    """
    if not delimiter:
        return text

    pos = text.find(delimiter)
    if pos == NOT_FOUND:
        return text
    return text[:pos]


def substring_after(text: str, delimiter: str) -> str:
    """
    Часть текста после первого вхождения delimiter.

    Пустой или отсутствующий delimiter — пустая строка.

    Examples:
        >>> substring_after("hello.world.txt", ".")
        'world.txt'
        >>> substring_after("file.tar.gz", "tar")
        '.gz'
    """
    if not delimiter:
        return ""

    pos = text.find(delimiter)
    if pos == NOT_FOUND:
        return ""
    return text[pos + len(delimiter):]


def substring_before_last(text: str, delimiter: str) -> str:
    """Часть текста до последнего вхождения delimiter (текст целиком, если нет)."""
    if not delimiter:
        return text

    pos = text.rfind(delimiter)
    if pos == NOT_FOUND:
        return text
    return text[:pos]


def substring_after_last(text: str, delimiter: str) -> str:
    """Часть текста после последнего вхождения delimiter ("" если нет)."""
    if not delimiter:
        return ""

    pos = text.rfind(delimiter)
    if pos == NOT_FOUND:
        return ""
    return text[pos + len(delimiter):]


def extract_between(text: str, start: str, end: str) -> str:
    """
    Текст между первым start и первым end после него.

    Вложенность не учитывается: берётся ближайший end.

    Args:
        text: Исходный текст
        start: Открывающий маркер (непустой)
        end: Закрывающий маркер (непустой)

    Returns:
        Извлечённый текст или "" если маркер пуст или не найден

    Examples:
        >>> extract_between("{{text}}", "{{", "}}")
        'text'
        >>> extract_between("[outer [inner]]", "[", "]")
        'outer [inner'
    """
    if not start or not end:
        return ""

    start_pos = text.find(start)
    if start_pos == NOT_FOUND:
        return ""

    content_start = start_pos + len(start)
    end_pos = text.find(end, content_start)
    if end_pos == NOT_FOUND:
        return ""

    return text[content_start:end_pos]


def count_occurrences(text: str, needle: str, overlapping: bool = False) -> int:
    """
    Число вхождений needle в text.

    Без overlapping совпадает с str.count; с overlapping поиск
    продолжается со следующего code unit после начала совпадения.
    Пустой needle — 0 вхождений.

    Examples:
        >>> count_occurrences("aaaa", "aa")
        2
        >>> count_occurrences("aaaa", "aa", overlapping=True)
        3
    """
    if not needle:
        return 0
    if not overlapping:
        return text.count(needle)

    count = 0
    pos = text.find(needle)
    while pos != NOT_FOUND:
        count += 1
        pos = text.find(needle, pos + 1)
    return count


def remove_prefix(text: str, prefix: str) -> str:
    """Удаление prefix, если текст с него начинается."""
    if prefix and text.startswith(prefix):
        return text[len(prefix):]
    return text


def remove_suffix(text: str, suffix: str) -> str:
    """Удаление suffix, если текст им заканчивается."""
    if suffix and text.endswith(suffix):
        return text[:-len(suffix)]
    return text
