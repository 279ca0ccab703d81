"""
Reflow — Truncation, Word Wrap, Indentation

Модуль реализует абзацные преобразования текста:
- truncate: обрезка до max_length с бюджетированием ellipsis
- word_wrap: жадная упаковка слов в строки шириной <= width
- indent / dedent: добавление и снятие отступов по строкам
- pad_left / pad_right / center / repeat: форматирование до ширины

Строки разделяются только "\\n"; прочие whitespace code units
(классификатор) — разделители слов и символы отступа.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(truncate(t, n, e)) == min(n, len(t))
2. word_wrap: каждая выходная строка <= width (при width > 0);
   пустые строки и структура абзацев сохраняются; width == 0 — identity
3. indent(t, 0) == t; dedent(indent(t, n)) == t для t без ведущих отступов
4. Отрицательные ширины/длины — ошибка программиста (ValueError)
"""

from typing import Final

from textcore.algorithms.classification import is_whitespace
from textcore.algorithms.ordering import common_prefix
from textcore.algorithms.scanning import NOT_FOUND, find_if_not

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

DEFAULT_ELLIPSIS: Final[str] = "..."

DEFAULT_FILL_CHAR: Final[str] = " "

LINE_SEPARATOR: Final[str] = "\n"


def _validate_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _validate_fill_char(fill: str) -> None:
    if len(fill) != 1:
        raise ValueError(f"fill must be a single code unit, got {fill!r}")


# =============================================================================
# TRUNCATE
# =============================================================================


def truncate(text: str, max_length: int, ellipsis: str = "") -> str:
    """
    Обрезка текста до max_length code units с ellipsis в конце.

    Алгоритм:
        если len(text) <= max_length → text
        keep = max(max_length - len(ellipsis), 0)
        result = text[:keep] + ellipsis[:max_length - keep]

    Если ellipsis не короче max_length, от текста не остаётся ничего,
    а сам ellipsis обрезается до max_length.

    Args:
        text: Исходный текст
        max_length: Бюджет длины результата (>= 0)
        ellipsis: Маркер обрезки (default: "")

    Returns:
        Текст длиной ровно min(max_length, len(text))

    Raises:
        ValueError: Если max_length < 0

    Examples:
        >>> truncate("Hello World", 6, "...")
        'Hel...'
        >>> truncate("Hi", 10)
        'Hi'
        >>> truncate("Hello", 4, "......")
        '....'
    """
    _validate_non_negative(max_length, "max_length")

    if len(text) <= max_length:
        return text

    keep = max(max_length - len(ellipsis), 0)
    return text[:keep] + ellipsis[: max_length - keep]


# =============================================================================
# WORD WRAP
# =============================================================================


def _split_words(line: str) -> list[str]:
    words: list[str] = []
    start = None

    for i, c in enumerate(line):
        if is_whitespace(c):
            if start is not None:
                words.append(line[start:i])
                start = None
        elif start is None:
            start = i

    if start is not None:
        words.append(line[start:])

    return words


def _wrap_line(line: str, width: int) -> list[str]:
    """
    Жадная упаковка слов одной логической строки.

    Returns:
        Выходные строки (одна пустая строка для пустого входа)
    """
    lines: list[str] = []
    current = ""

    for word in _split_words(line):
        if not current:
            candidate = word
        else:
            candidate = current + " " + word

        if len(candidate) <= width:
            current = candidate
            continue

        if current:
            lines.append(current)

        # Слово длиннее width режется ровно по границам width
        while len(word) > width:
            lines.append(word[:width])
            word = word[width:]

        current = word

    if current or not lines:
        lines.append(current)

    return lines


def word_wrap(text: str, width: int) -> str:
    """
    Жадный перенос слов по ширине.

    Каждая строка входа (разделитель "\\n") обрабатывается независимо;
    пустые строки проходят как пустые. Внутри строки слова разделяются
    whitespace и упаковываются, пока строка с разделяющим пробелом
    помещается в width. Слово длиннее width режется на куски по width.

    Args:
        text: Исходный текст
        width: Максимальная ширина строки (0 — без переноса)

    Returns:
        Текст с переносами

    Raises:
        ValueError: Если width < 0

    Examples:
        >>> word_wrap("Hello World", 8)
        'Hello\\nWorld'
        >>> word_wrap("Supercalifragilistic is", 10)
        'Supercalif\\nragilistic\\nis'
        >>> word_wrap("Hello", 0)
        'Hello'
    """
    _validate_non_negative(width, "width")

    if width == 0 or not text:
        return text

    wrapped: list[str] = []
    for line in text.split(LINE_SEPARATOR):
        wrapped.extend(_wrap_line(line, width))

    return LINE_SEPARATOR.join(wrapped)


# =============================================================================
# INDENT / DEDENT
# =============================================================================


def indent(text: str, spaces: int) -> str:
    """
    Добавление spaces пробелов в начало каждой строки, включая пустые.

    Пустой текст остаётся пустым; после завершающего "\\n" следует
    строка, состоящая из одного отступа.

    Args:
        text: Исходный текст
        spaces: Количество пробелов (>= 0)

    Returns:
        Текст с отступом

    Raises:
        ValueError: Если spaces < 0

    Examples:
        >>> indent("Line1\\nLine2", 2)
        '  Line1\\n  Line2'
        >>> indent("\\n", 2)
        '  \\n  '
    """
    _validate_non_negative(spaces, "spaces")

    if not text or spaces == 0:
        return text

    prefix = " " * spaces
    return LINE_SEPARATOR.join(prefix + line for line in text.split(LINE_SEPARATOR))


def _leading_whitespace(line: str) -> str:
    end = find_if_not(line, is_whitespace)
    if end == NOT_FOUND:
        return line
    return line[:end]


def dedent(text: str) -> str:
    """
    Снятие общего ведущего отступа со всех строк.

    Отступ (margin) — общий префикс ведущих whitespace всех непустых строк,
    сравниваемый code unit за code unit (табы не раскрываются: пробел против
    таба обрывает общий префикс). Строки только из whitespace в вычислении
    не участвуют, но теряют до len(margin) ведущих code units.

    Если непустых строк нет, margin — общий префикс всех строк, так что
    dedent(indent(t, n)) == t выполняется и для t из одних "\\n".

    Args:
        text: Исходный текст

    Returns:
        Текст без общего отступа

    Examples:
        >>> dedent("  Line1\\n  Line2")
        'Line1\\nLine2'
        >>> dedent("    Line1\\n      Line2")
        'Line1\\n  Line2'
        >>> dedent("  \\n  ")
        '\\n'
    """
    lines = text.split(LINE_SEPARATOR)

    margin = None
    for line in lines:
        leading = _leading_whitespace(line)
        if len(leading) == len(line):
            continue  # пустая строка или только whitespace

        if margin is None:
            margin = leading
        else:
            margin = common_prefix(margin, leading)

    if margin is None:
        # Только пустые строки и строки из whitespace
        margin = lines[0]
        for line in lines[1:]:
            margin = common_prefix(margin, line)

    if not margin:
        return text

    width = len(margin)
    dedented = []
    for line in lines:
        leading = _leading_whitespace(line)
        dedented.append(line[min(width, len(leading)):])

    return LINE_SEPARATOR.join(dedented)


# =============================================================================
# PADDING
# =============================================================================


def pad_left(text: str, width: int, fill: str = DEFAULT_FILL_CHAR) -> str:
    """
    Дополнение слева до width code units.

    Текст не короче width возвращается без изменений.

    Examples:
        >>> pad_left("42", 5, "0")
        '00042'
    """
    _validate_non_negative(width, "width")
    _validate_fill_char(fill)

    if len(text) >= width:
        return text
    return fill * (width - len(text)) + text


def pad_right(text: str, width: int, fill: str = DEFAULT_FILL_CHAR) -> str:
    """Дополнение справа до width code units."""
    _validate_non_negative(width, "width")
    _validate_fill_char(fill)

    if len(text) >= width:
        return text
    return text + fill * (width - len(text))


def center(text: str, width: int, fill: str = DEFAULT_FILL_CHAR) -> str:
    """
    Центрирование в поле шириной width.

    При нечётном остатке лишний fill уходит вправо.

    Examples:
        >>> center("ab", 5, "*")
        '*ab**'
    """
    _validate_non_negative(width, "width")
    _validate_fill_char(fill)

    if len(text) >= width:
        return text

    total = width - len(text)
    left = total // 2
    return fill * left + text + fill * (total - left)


def repeat(text: str, count: int) -> str:
    """Повтор текста count раз (count >= 0)."""
    _validate_non_negative(count, "count")
    return text * count
