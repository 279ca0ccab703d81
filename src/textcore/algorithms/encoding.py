"""
Encoding — RFC 3986 Percent-Encoding

RFC 3986 §2.1 (percent-encoding), §2.3 (unreserved characters)

Модуль кодирует текст для безопасной подстановки в URI:
- url_encode: unreserved code units проходят как есть, всё остальное —
  %XX по байтам UTF-8 (верхний регистр hex)
- url_decode: обратное преобразование; некорректная escape-последовательность
  или невалидный UTF-8 → MalformedEscapeError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. url_decode(url_encode(t)) == t для любого str без одиночных суррогатов
2. url_encode выдаёт только unreserved символы и "%XX"
3. Декодирование никогда не возвращает частичный результат
"""

import logging
from typing import Final

from textcore.algorithms.classification import is_hex_digit, is_uri_unreserved

logger = logging.getLogger(__name__)

HEX_DIGITS_UPPER: Final[str] = "0123456789ABCDEF"

PERCENT: Final[str] = "%"


class MalformedEscapeError(ValueError):
    """Некорректная escape-последовательность (percent, JSON, XML, C++) или невалидный UTF-8"""

    pass


def url_encode(text: str) -> str:
    """
    Percent-encoding текста (RFC 3986).

    Args:
        text: Исходный текст

    Returns:
        Закодированный текст

    Examples:
        >>> url_encode("a b&c")
        'a%20b%26c'
        >>> url_encode("é")
        '%C3%A9'
    """
    parts: list[str] = []

    for c in text:
        if is_uri_unreserved(c):
            parts.append(c)
            continue

        for byte in c.encode("utf-8"):
            parts.append(PERCENT)
            parts.append(HEX_DIGITS_UPPER[byte >> 4])
            parts.append(HEX_DIGITS_UPPER[byte & 0x0F])

    return "".join(parts)


def url_decode(text: str) -> str:
    """
    Декодирование percent-encoding.

    Символы вне escape-последовательностей копируются как есть
    (включая "+", который НЕ превращается в пробел).

    Args:
        text: Закодированный текст

    Returns:
        Декодированный текст

    Raises:
        MalformedEscapeError: Если за "%" не следуют две hex-цифры
            или байты не образуют валидный UTF-8

    Examples:
        >>> url_decode("a%20b")
        'a b'
        >>> url_decode("%C3%A9")
        'é'
    """
    buffer = bytearray()
    i = 0

    while i < len(text):
        c = text[i]

        if c != PERCENT:
            buffer.extend(c.encode("utf-8"))
            i += 1
            continue

        escape = text[i + 1:i + 3]
        if len(escape) != 2 or not all(is_hex_digit(h) for h in escape):
            logger.debug("Malformed percent escape", extra={"position": i})
            raise MalformedEscapeError(
                f"Malformed percent escape at position {i}: {text[i:i + 3]!r}"
            )

        buffer.append(int(escape, 16))
        i += 3

    try:
        return buffer.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.debug("Percent-decoded bytes are not UTF-8", extra={"position": e.start})
        raise MalformedEscapeError(f"Decoded bytes are not valid UTF-8: {e}") from e
