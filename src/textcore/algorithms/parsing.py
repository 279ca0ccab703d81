"""
Parsing — Strict All-or-Nothing Text → Value Conversion

Модуль преобразует текст в типизированные значения (bool / int / float).
Разбор строгий: значение возвращается только если ВЕСЬ текст является
корректным литералом целевого типа.

Две формы вызова с общей грамматикой:
- try_from_string: ParseResult(ok, value), никогда не бросает на str
- from_string: значение или StrictParseError

ГРАММАТИКИ:
    bool:    "true" | "false"                       (case-sensitive)
    int:     "-"? DIGIT+                             (знаковые виды)
    uint:    DIGIT+                                  (беззнаковые виды)
    float:   "-"? ( DIGIT+ ("." DIGIT*)? | "." DIGIT+ ) ( [eE] [+-]? DIGIT+ )?
           | "-"? ( "nan" | "inf" | "infinity" )     (ASCII case-insensitive)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Частичный разбор невозможен: "123abc" → ошибка, не 123
2. Пробелы по краям не допускаются
3. Любой не-ASCII code unit → ошибка (текст валидируется классификатором
   до передачи в int()/float(), которые иначе приняли бы юникодные цифры,
   "_" и пробелы)
4. Переполнение ширины типа → ошибка, не насыщение
5. Ошибка разбора никогда не превращается в False/0
"""

import logging
import math
from enum import Enum
from typing import Callable, Final, NamedTuple, Optional, Union

from textcore.algorithms.classification import is_digit, to_lower_ascii

logger = logging.getLogger(__name__)

# =============================================================================
# ГРАНИЦЫ ТИПОВ
# =============================================================================

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
UINT32_MAX: Final[int] = 2**32 - 1
UINT64_MAX: Final[int] = 2**64 - 1

# Значащих цифр в самом широком поддерживаемом типе (UINT64_MAX)
INTEGER_MAX_SIGNIFICANT_DIGITS: Final[int] = len(str(UINT64_MAX))

BOOL_TRUE_TOKEN: Final[str] = "true"
BOOL_FALSE_TOKEN: Final[str] = "false"

# Специальные float токены (сравниваются после ASCII folding)
FLOAT_SPECIAL_TOKENS: Final[frozenset[str]] = frozenset({"nan", "inf", "infinity"})


# =============================================================================
# ТИПЫ
# =============================================================================


class ValueKind(str, Enum):
    """Целевой тип разбора"""

    BOOL = "bool"
    INT32 = "int32"
    INT64 = "int64"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT64 = "float64"


ParsedValue = Union[bool, int, float]


class ParseResult(NamedTuple):
    """
    Результат строгого разбора.

    ok=False всегда означает value=None: частично разобранного значения нет.
    """

    ok: bool
    value: Optional[ParsedValue]


_FAILURE: Final[ParseResult] = ParseResult(ok=False, value=None)


class StrictParseError(ValueError):
    """
    Текст не является корректным литералом целевого типа.

    Бросается только from_string; try_from_string возвращает ParseResult.
    """

    def __init__(self, text: str, kind: ValueKind):
        self.text = text
        self.kind = kind
        super().__init__(f"Cannot parse {text!r} as {kind.value}")


# =============================================================================
# ГРАММАТИКИ
# =============================================================================


def _scan_digits(text: str, pos: int) -> int:
    while pos < len(text) and is_digit(text[pos]):
        pos += 1
    return pos


def _is_integer_literal(text: str, signed: bool) -> bool:
    pos = 0
    if signed and text.startswith("-"):
        pos = 1

    end = _scan_digits(text, pos)
    return end > pos and end == len(text)


def _is_decimal_float_literal(text: str) -> bool:
    pos = 0
    if text.startswith("-"):
        pos = 1

    # Мантисса: хотя бы одна цифра до или после точки
    int_end = _scan_digits(text, pos)
    mantissa_digits = int_end - pos
    pos = int_end

    if pos < len(text) and text[pos] == ".":
        frac_end = _scan_digits(text, pos + 1)
        mantissa_digits += frac_end - (pos + 1)
        pos = frac_end

    if mantissa_digits == 0:
        return False

    # Экспонента: [eE] [+-]? DIGIT+
    if pos < len(text) and text[pos] in "eE":
        pos += 1
        if pos < len(text) and text[pos] in "+-":
            pos += 1
        exp_end = _scan_digits(text, pos)
        if exp_end == pos:
            return False
        pos = exp_end

    return pos == len(text)


def _is_special_float_literal(text: str) -> bool:
    body = text[1:] if text.startswith("-") else text
    if len(body) > len("infinity"):
        return False
    folded = "".join(to_lower_ascii(c) for c in body)
    return folded in FLOAT_SPECIAL_TOKENS


# =============================================================================
# ПАРСЕРЫ ПО ВИДАМ
# =============================================================================


def _parse_bool(text: str) -> ParseResult:
    if text == BOOL_TRUE_TOKEN:
        return ParseResult(ok=True, value=True)
    if text == BOOL_FALSE_TOKEN:
        return ParseResult(ok=True, value=False)
    return _FAILURE


def _integer_parser(
    min_value: int, max_value: int, signed: bool
) -> Callable[[str], ParseResult]:
    def parse(text: str) -> ParseResult:
        if not _is_integer_literal(text, signed):
            return _FAILURE

        negative = text.startswith("-")
        significant = text[1:].lstrip("0") if negative else text.lstrip("0")

        # Длина проверяется до int(): у int() есть лимит на число цифр
        if len(significant) > INTEGER_MAX_SIGNIFICANT_DIGITS:
            return _FAILURE

        value = int(significant) if significant else 0
        if negative:
            value = -value

        if value < min_value or value > max_value:
            return _FAILURE

        return ParseResult(ok=True, value=value)

    return parse


def _parse_float64(text: str) -> ParseResult:
    if _is_decimal_float_literal(text):
        value = float(text)
        # Конечный литерал, переполнивший double
        if math.isinf(value):
            return _FAILURE
        return ParseResult(ok=True, value=value)

    if _is_special_float_literal(text):
        return ParseResult(ok=True, value=float(text))

    return _FAILURE


_PARSERS: Final[dict[ValueKind, Callable[[str], ParseResult]]] = {
    ValueKind.BOOL: _parse_bool,
    ValueKind.INT32: _integer_parser(INT32_MIN, INT32_MAX, signed=True),
    ValueKind.INT64: _integer_parser(INT64_MIN, INT64_MAX, signed=True),
    ValueKind.UINT32: _integer_parser(0, UINT32_MAX, signed=False),
    ValueKind.UINT64: _integer_parser(0, UINT64_MAX, signed=False),
    ValueKind.FLOAT64: _parse_float64,
}


# =============================================================================
# PUBLIC API
# =============================================================================


def try_from_string(
    text: str, kind: Union[ValueKind, str] = ValueKind.INT64
) -> ParseResult:
    """
    Строгий разбор текста (checked-форма).

    Args:
        text: Полный текст литерала
        kind: Целевой тип (ValueKind или его строковое значение)

    Returns:
        ParseResult(ok=True, value=...) при успехе,
        ParseResult(ok=False, value=None) при любой ошибке

    Raises:
        ValueError: Если kind не является известным ValueKind

    Examples:
        >>> try_from_string("123", ValueKind.INT32)
        ParseResult(ok=True, value=123)
        >>> try_from_string("123abc", ValueKind.INT32)
        ParseResult(ok=False, value=None)
        >>> try_from_string("真", ValueKind.BOOL)
        ParseResult(ok=False, value=None)
    """
    kind = ValueKind(kind)
    result = _PARSERS[kind](text)

    if not result.ok:
        logger.debug(
            "Strict parse rejected input",
            extra={"kind": kind.value, "length": len(text)},
        )

    return result


def from_string(
    text: str, kind: Union[ValueKind, str] = ValueKind.INT64
) -> ParsedValue:
    """
    Строгий разбор текста (convenience-форма).

    Та же грамматика, что и у try_from_string; ошибка разбора
    превращается в исключение.

    Args:
        text: Полный текст литерала
        kind: Целевой тип

    Returns:
        Разобранное значение

    Raises:
        StrictParseError: Если текст не является литералом kind
        ValueError: Если kind не является известным ValueKind

    Examples:
        >>> from_string("true", ValueKind.BOOL)
        True
        >>> from_string("-2.5e3", ValueKind.FLOAT64)
        -2500.0
    """
    kind = ValueKind(kind)
    result = try_from_string(text, kind)

    if not result.ok:
        raise StrictParseError(text, kind)

    return result.value
