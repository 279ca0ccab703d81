"""
Escaping — JSON, XML and C++ String Literal Codecs

RFC 8259 §7 (JSON strings), XML 1.0 §4.6 (predefined entities),
§4.1 (character references)

Модуль экранирует текст для подстановки в строковые литералы:
- json_escape / json_unescape: короткие escape, \\uXXXX для управляющих,
  суррогатные пары при декодировании
- xml_escape / xml_unescape: пять предопределённых сущностей и
  числовые ссылки &#DDD; / &#xHHH;
- cpp_escape / cpp_unescape: простые escape, \\xHH и восьмеричные \\ooo

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. unescape(escape(t)) == t для каждого кодека (t без одиночных суррогатов)
2. Некорректный вход декодера → MalformedEscapeError, никогда не частичный результат
3. Code units вне экранируемого набора копируются как есть
"""

import logging
from typing import Final, Optional

from textcore.algorithms.classification import is_digit, is_hex_digit
from textcore.algorithms.encoding import MalformedEscapeError

logger = logging.getLogger(__name__)

BACKSLASH: Final[str] = "\\"

# =============================================================================
# JSON
# =============================================================================

_JSON_ESCAPES: Final[dict[str, str]] = {
    '"': '\\"',
    "\\": "\\\\",
    "/": "\\/",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_JSON_UNESCAPES: Final[dict[str, str]] = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

# Первый code unit, не требующий \\u-escape
JSON_CONTROL_LIMIT: Final[int] = 0x20

HIGH_SURROGATE_MIN: Final[int] = 0xD800
LOW_SURROGATE_MIN: Final[int] = 0xDC00
SURROGATE_MAX: Final[int] = 0xDFFF


def _malformed(kind: str, text: str, position: int) -> MalformedEscapeError:
    logger.debug(
        "Malformed escape sequence",
        extra={"codec": kind, "position": position},
    )
    return MalformedEscapeError(
        f"Malformed {kind} escape at position {position}: {text[position:position + 8]!r}"
    )


def json_escape(text: str) -> str:
    """
    Экранирование для JSON-строки.

    '"', '\\\\' и '/' получают обратный слэш; \\b \\f \\n \\r \\t — короткие
    формы; прочие code units < 0x20 — \\u00XX (верхний регистр hex).

    Examples:
        >>> json_escape('say "hi"')
        'say \\\\"hi\\\\"'
        >>> json_escape("\\x01")
        '\\\\u0001'
    """
    parts: list[str] = []

    for c in text:
        escaped = _JSON_ESCAPES.get(c)
        if escaped is not None:
            parts.append(escaped)
        elif ord(c) < JSON_CONTROL_LIMIT:
            parts.append(f"\\u{ord(c):04X}")
        else:
            parts.append(c)

    return "".join(parts)


def _read_hex4(text: str, start: int) -> Optional[int]:
    digits = text[start:start + 4]
    if len(digits) != 4 or not all(is_hex_digit(h) for h in digits):
        return None
    return int(digits, 16)


def json_unescape(text: str) -> str:
    """
    Декодирование JSON-строки (без окружающих кавычек).

    \\uXXXX принимает hex в любом регистре; пара high+low surrogate
    объединяется в один code point.

    Raises:
        MalformedEscapeError: Обратный слэш в конце, неизвестный escape,
            неполный/не-hex \\uXXXX или одиночный surrogate

    Examples:
        >>> json_unescape("caf\\\\u00e9")
        'café'
        >>> json_unescape("\\\\ud83d\\\\ude00")
        '\U0001f600'
    """
    parts: list[str] = []
    i = 0

    while i < len(text):
        c = text[i]
        if c != BACKSLASH:
            parts.append(c)
            i += 1
            continue

        if i + 1 >= len(text):
            raise _malformed("JSON", text, i)

        marker = text[i + 1]
        simple = _JSON_UNESCAPES.get(marker)
        if simple is not None:
            parts.append(simple)
            i += 2
            continue

        if marker != "u":
            raise _malformed("JSON", text, i)

        code = _read_hex4(text, i + 2)
        if code is None:
            raise _malformed("JSON", text, i)

        if HIGH_SURROGATE_MIN <= code < LOW_SURROGATE_MIN:
            # Ожидается вторая половина пары: \uDC00..\uDFFF
            low = None
            if text[i + 6:i + 8] == "\\u":
                low = _read_hex4(text, i + 8)
            if low is None or not LOW_SURROGATE_MIN <= low <= SURROGATE_MAX:
                raise _malformed("JSON", text, i)
            code = 0x10000 + ((code - HIGH_SURROGATE_MIN) << 10) + (low - LOW_SURROGATE_MIN)
            i += 12
        elif LOW_SURROGATE_MIN <= code <= SURROGATE_MAX:
            raise _malformed("JSON", text, i)
        else:
            i += 6

        parts.append(chr(code))

    return "".join(parts)


# =============================================================================
# XML
# =============================================================================

_XML_ESCAPES: Final[dict[str, str]] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
}

_XML_ENTITIES: Final[dict[str, str]] = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "apos": "'",
}

UNICODE_MAX: Final[int] = 0x10FFFF


def xml_escape(text: str) -> str:
    """
    Замена & < > " ' на предопределённые сущности XML.

    Examples:
        >>> xml_escape("<a href=\\"x\\">AT&T</a>")
        '&lt;a href=&quot;x&quot;&gt;AT&amp;T&lt;/a&gt;'
    """
    return "".join(_XML_ESCAPES.get(c, c) for c in text)


def _character_reference(body: str) -> Optional[int]:
    """
    Значение числовой ссылки по телу сущности без "&" и ";".

    "#DDD" — десятичная, "#xHHH" — шестнадцатеричная (только строчный x).
    """
    if body.startswith("#x"):
        digits = body[2:]
        if not digits or not all(is_hex_digit(h) for h in digits):
            return None
        value = int(digits, 16)
    else:
        digits = body[1:]
        if not digits or not all(is_digit(d) for d in digits):
            return None
        value = int(digits)

    if value > UNICODE_MAX or HIGH_SURROGATE_MIN <= value <= SURROGATE_MAX:
        return None
    return value


def xml_unescape(text: str) -> str:
    """
    Декодирование сущностей XML.

    Принимаются &amp; &lt; &gt; &quot; &apos; и числовые ссылки
    &#DDD; / &#xHHH; (значение <= 0x10FFFF, не surrogate).

    Raises:
        MalformedEscapeError: "&" без ";", неизвестная сущность,
            пустая/не-числовая ссылка или значение вне диапазона Unicode

    Examples:
        >>> xml_unescape("Tom &amp; Jerry")
        'Tom & Jerry'
        >>> xml_unescape("&#8364;&#x41;")
        '€A'
    """
    parts: list[str] = []
    i = 0

    while i < len(text):
        c = text[i]
        if c != "&":
            parts.append(c)
            i += 1
            continue

        end = text.find(";", i + 1)
        if end == -1:
            raise _malformed("XML", text, i)

        body = text[i + 1:end]
        if body.startswith("#"):
            value = _character_reference(body)
            if value is None:
                raise _malformed("XML", text, i)
            parts.append(chr(value))
        else:
            named = _XML_ENTITIES.get(body)
            if named is None:
                raise _malformed("XML", text, i)
            parts.append(named)

        i = end + 1

    return "".join(parts)


# =============================================================================
# C++
# =============================================================================

_CPP_ESCAPES: Final[dict[str, str]] = {
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\\": "\\\\",
    '"': '\\"',
    "'": "\\'",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
    "\a": "\\a",
}

_CPP_UNESCAPES: Final[dict[str, str]] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "a": "\a",
    "?": "?",
}

OCTAL_DIGITS: Final[str] = "01234567"

CPP_DEL: Final[int] = 0x7F

# Наибольшее значение \ooo / \xHH
CPP_BYTE_MAX: Final[int] = 0xFF


def cpp_escape(text: str) -> str:
    """
    Экранирование для строкового литерала C++.

    NUL — "\\0" (или "\\x00" перед восьмеричной цифрой), прочие
    управляющие и DEL — "\\xhh" в нижнем регистре. Не-ASCII проходит как есть.

    Examples:
        >>> cpp_escape("it's\\n")
        "it\\\\'s\\\\n"
        >>> cpp_escape("\\x7f")
        '\\\\x7f'
    """
    parts: list[str] = []

    for i, c in enumerate(text):
        escaped = _CPP_ESCAPES.get(c)
        if escaped is not None:
            parts.append(escaped)
        elif c == "\0":
            following = text[i + 1:i + 2]
            parts.append("\\x00" if following and following in OCTAL_DIGITS else "\\0")
        elif ord(c) < JSON_CONTROL_LIMIT or ord(c) == CPP_DEL:
            parts.append(f"\\x{ord(c):02x}")
        else:
            parts.append(c)

    return "".join(parts)


def cpp_unescape(text: str) -> str:
    """
    Декодирование строкового литерала C++ (без окружающих кавычек).

    \\xHH — ровно две hex-цифры; \\ooo — от одной до трёх восьмеричных
    цифр со значением <= 255. Результат — по одному code unit на escape.

    Raises:
        MalformedEscapeError: Обратный слэш в конце, неизвестный escape,
            неполный \\xHH или восьмеричное значение > 255

    Examples:
        >>> cpp_unescape("null\\\\0char")
        'null\\x00char'
        >>> cpp_unescape("\\\\x41\\\\101")
        'AA'
    """
    parts: list[str] = []
    i = 0

    while i < len(text):
        c = text[i]
        if c != BACKSLASH:
            parts.append(c)
            i += 1
            continue

        if i + 1 >= len(text):
            raise _malformed("C++", text, i)

        marker = text[i + 1]
        simple = _CPP_UNESCAPES.get(marker)
        if simple is not None:
            parts.append(simple)
            i += 2
            continue

        if marker == "x":
            digits = text[i + 2:i + 4]
            if len(digits) != 2 or not all(is_hex_digit(h) for h in digits):
                raise _malformed("C++", text, i)
            parts.append(chr(int(digits, 16)))
            i += 4
            continue

        if marker in OCTAL_DIGITS:
            end = i + 1
            while end < len(text) and end < i + 4 and text[end] in OCTAL_DIGITS:
                end += 1
            value = int(text[i + 1:end], 8)
            if value > CPP_BYTE_MAX:
                raise _malformed("C++", text, i)
            parts.append(chr(value))
            i = end
            continue

        raise _malformed("C++", text, i)

    return "".join(parts)
