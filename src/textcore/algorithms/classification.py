"""
Classification — ASCII Character Classes

RFC 3986 §2.2 (reserved), §2.3 (unreserved)

Модуль классифицирует отдельные code units (символы str) по ASCII-классам:
- whitespace: пробел, \\t, \\n, \\r, \\f, \\v
- digit: 0-9
- alpha: A-Z, a-z
- alphanumeric: digit ∪ alpha
- hex digit: 0-9, a-f, A-F
- URI reserved: gen-delims ":/?#[]@" и sub-delims "!$&'()*+,;="
- URI unreserved: ALPHA / DIGIT / "-" / "." / "_" / "~"

Классификация табличная: одна 128-элементная таблица битовых флагов,
индексируемая числовым значением code unit.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Code units вне 0–127 (и NUL) не принадлежат ни одному классу
2. Классификатор никогда не бросает исключений для одиночного символа
3. O(1), без аллокаций, без состояния между вызовами
"""

from typing import Final

# =============================================================================
# ТАБЛИЦА КЛАССОВ
# =============================================================================

# Последний ASCII code unit; всё выше — непрозрачные code units
ASCII_MAX: Final[int] = 127

WHITESPACE_CHARS: Final[frozenset[str]] = frozenset(" \t\n\r\f\v")

# RFC 3986 §2.2
URI_GEN_DELIMS: Final[frozenset[str]] = frozenset(":/?#[]@")
URI_SUB_DELIMS: Final[frozenset[str]] = frozenset("!$&'()*+,;=")

# RFC 3986 §2.3 (помимо ALPHA / DIGIT)
URI_UNRESERVED_MARKS: Final[frozenset[str]] = frozenset("-._~")

_WHITESPACE: Final[int] = 1 << 0
_DIGIT: Final[int] = 1 << 1
_ALPHA: Final[int] = 1 << 2
_HEX: Final[int] = 1 << 3
_URI_RESERVED: Final[int] = 1 << 4
_URI_UNRESERVED: Final[int] = 1 << 5


def _build_class_table() -> tuple[int, ...]:
    table = [0] * (ASCII_MAX + 1)

    for code in range(1, ASCII_MAX + 1):
        c = chr(code)
        flags = 0

        if c in WHITESPACE_CHARS:
            flags |= _WHITESPACE
        if "0" <= c <= "9":
            flags |= _DIGIT | _HEX | _URI_UNRESERVED
        if "a" <= c <= "z" or "A" <= c <= "Z":
            flags |= _ALPHA | _URI_UNRESERVED
        if "a" <= c <= "f" or "A" <= c <= "F":
            flags |= _HEX
        if c in URI_GEN_DELIMS or c in URI_SUB_DELIMS:
            flags |= _URI_RESERVED
        if c in URI_UNRESERVED_MARKS:
            flags |= _URI_UNRESERVED

        table[code] = flags

    return tuple(table)


_CLASS_TABLE: Final[tuple[int, ...]] = _build_class_table()


def _flags(c: str) -> int:
    code = ord(c)
    if code > ASCII_MAX:
        return 0
    return _CLASS_TABLE[code]


# =============================================================================
# КЛАССИФИКАЦИЯ CODE UNIT
# =============================================================================


def is_whitespace(c: str) -> bool:
    """
    Проверка ASCII whitespace: пробел, \\t, \\n, \\r, \\f, \\v.

    Args:
        c: Один code unit

    Returns:
        True если c — ASCII whitespace

    Examples:
        >>> is_whitespace(" ")
        True
        >>> is_whitespace("\\v")
        True
        >>> is_whitespace("\\u00a0")  # NBSP вне ASCII
        False
    """
    return bool(_flags(c) & _WHITESPACE)


def is_digit(c: str) -> bool:
    """
    Проверка ASCII цифры 0-9.

    Юникодные цифры (например, "٣") цифрами не считаются.

    Examples:
        >>> is_digit("7")
        True
        >>> is_digit("٣")
        False
    """
    return bool(_flags(c) & _DIGIT)


def is_alpha(c: str) -> bool:
    """Проверка ASCII буквы A-Z / a-z."""
    return bool(_flags(c) & _ALPHA)


def is_alphanumeric(c: str) -> bool:
    """Проверка ASCII буквы или цифры."""
    return bool(_flags(c) & (_ALPHA | _DIGIT))


def is_hex_digit(c: str) -> bool:
    """Проверка шестнадцатеричной цифры: 0-9, a-f, A-F."""
    return bool(_flags(c) & _HEX)


def is_uri_reserved(c: str) -> bool:
    """
    Проверка зарезервированного символа URI.

    RFC 3986 §2.2:
        gen-delims = ":" / "/" / "?" / "#" / "[" / "]" / "@"
        sub-delims = "!" / "$" / "&" / "'" / "(" / ")"
                   / "*" / "+" / "," / ";" / "="

    Examples:
        >>> is_uri_reserved("/")
        True
        >>> is_uri_reserved("-")
        False
    """
    return bool(_flags(c) & _URI_RESERVED)


def is_uri_unreserved(c: str) -> bool:
    """
    Проверка незарезервированного символа URI.

    RFC 3986 §2.3: ALPHA / DIGIT / "-" / "." / "_" / "~"

    Examples:
        >>> is_uri_unreserved("~")
        True
        >>> is_uri_unreserved("%")
        False
    """
    return bool(_flags(c) & _URI_UNRESERVED)


# =============================================================================
# ASCII FOLDING
# =============================================================================


def to_lower_ascii(c: str) -> str:
    """
    ASCII-lowercase одного code unit.

    Складываются только A-Z; всё остальное (включая не-ASCII) возвращается
    без изменений.

    Examples:
        >>> to_lower_ascii("Q")
        'q'
        >>> to_lower_ascii("Ä")
        'Ä'
    """
    if "A" <= c <= "Z":
        return chr(ord(c) + 32)
    return c


def to_upper_ascii(c: str) -> str:
    """ASCII-uppercase одного code unit (только a-z)."""
    if "a" <= c <= "z":
        return chr(ord(c) - 32)
    return c


def lower_ascii(text: str) -> str:
    """
    ASCII-lowercase всего текста.

    В отличие от str.lower() не трогает не-ASCII ("İ", "Σ" остаются как есть).

    Examples:
        >>> lower_ascii("Hello ÄÖ")
        'hello ÄÖ'
    """
    return "".join(to_lower_ascii(c) for c in text)


def upper_ascii(text: str) -> str:
    """ASCII-uppercase всего текста (только a-z)."""
    return "".join(to_upper_ascii(c) for c in text)


# =============================================================================
# ПРЕДИКАТЫ ДЛЯ ВСЕГО ТЕКСТА
# =============================================================================


def is_all_digits(text: str) -> bool:
    """
    Непустой текст, состоящий только из ASCII цифр.

    Examples:
        >>> is_all_digits("0123")
        True
        >>> is_all_digits("")
        False
    """
    if not text:
        return False
    return all(is_digit(c) for c in text)


def is_null_or_whitespace(text: str) -> bool:
    """
    Пустой текст или текст только из ASCII whitespace.

    Examples:
        >>> is_null_or_whitespace("")
        True
        >>> is_null_or_whitespace(" \\t\\n")
        True
        >>> is_null_or_whitespace(" x ")
        False
    """
    return all(is_whitespace(c) for c in text)


def is_uri_reserved_text(text: str) -> bool:
    """Непустой текст, каждый code unit которого — URI reserved."""
    if not text:
        return False
    return all(is_uri_reserved(c) for c in text)


def is_uri_unreserved_text(text: str) -> bool:
    """Непустой текст, каждый code unit которого — URI unreserved."""
    if not text:
        return False
    return all(is_uri_unreserved(c) for c in text)
