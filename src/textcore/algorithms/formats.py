"""
Formats — String Format Validators

RFC 3339 §5.6 (date / time / date-time), ISO 8601 (duration),
RFC 5321 §4.5.3 (email limits), RFC 4122 (UUID), RFC 3986 §3.1 (scheme),
RFC 6570 (URI template), RFC 6901 (JSON pointer),
draft-handrews-relative-json-pointer (relative JSON pointer)

Предикаты формата для строковых значений:
- is_date / is_time / is_date_time: RFC 3339 full-date / full-time
- is_duration: ISO 8601 "PnYnMnDTnHnMnS" и "PnW"
- is_email: local@domain с проверкой домена через is_domain_name
- is_uuid: 8-4-4-4-12 hex
- is_uri / is_uri_reference / is_uri_template
- is_json_pointer / is_relative_json_pointer

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Валидатор никогда не бросает на str: только True / False
2. Code unit > 127 не является ни буквой, ни цифрой, ни разделителем;
   в URI и литералах URI template он недопустим, в токенах JSON pointer — непрозрачен
3. Пробелы по краям не обрезаются
"""

from typing import Final, Optional

from textcore.algorithms.classification import (
    ASCII_MAX,
    is_alpha,
    is_alphanumeric,
    is_digit,
    is_hex_digit,
)
from textcore.algorithms.network import is_domain_name

# =============================================================================
# ДАТА И ВРЕМЯ
# =============================================================================

# Максимум дней по месяцам; февраль всегда 29 (високосность не проверяется)
DAYS_IN_MONTH: Final[tuple[int, ...]] = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

DATE_LENGTH: Final[int] = 10  # YYYY-MM-DD
TIME_BASE_LENGTH: Final[int] = 8  # HH:MM:SS

HOUR_MAX: Final[int] = 23
MINUTE_MAX: Final[int] = 59
SECOND_MAX: Final[int] = 60  # leap second

# (месяц, день), в которые допускается секунда 60
LEAP_SECOND_DAYS: Final[frozenset[tuple[int, int]]] = frozenset({(6, 30), (12, 31)})


def _digits_value(text: str, start: int, count: int) -> Optional[int]:
    field = text[start:start + count]
    if len(field) != count or not all(is_digit(c) for c in field):
        return None
    return int(field)


def _parse_date(text: str) -> Optional[tuple[int, int, int]]:
    if len(text) != DATE_LENGTH or text[4] != "-" or text[7] != "-":
        return None

    year = _digits_value(text, 0, 4)
    month = _digits_value(text, 5, 2)
    day = _digits_value(text, 8, 2)
    if year is None or month is None or day is None:
        return None

    if not 1 <= month <= 12:
        return None
    if not 1 <= day <= DAYS_IN_MONTH[month - 1]:
        return None

    return year, month, day


def _is_offset(text: str) -> bool:
    """Смещение часового пояса: "Z" / "z" или "+HH:MM" / "-HH:MM"."""
    if text in ("Z", "z"):
        return True

    if len(text) != 6 or text[0] not in "+-" or text[3] != ":":
        return False

    hour = _digits_value(text, 1, 2)
    minute = _digits_value(text, 4, 2)
    if hour is None or minute is None:
        return False
    return hour <= HOUR_MAX and minute <= MINUTE_MAX


def _parse_time(text: str) -> Optional[tuple[int, int, int]]:
    if len(text) < TIME_BASE_LENGTH or text[2] != ":" or text[5] != ":":
        return None

    hour = _digits_value(text, 0, 2)
    minute = _digits_value(text, 3, 2)
    second = _digits_value(text, 6, 2)
    if hour is None or minute is None or second is None:
        return None
    if hour > HOUR_MAX or minute > MINUTE_MAX or second > SECOND_MAX:
        return None

    pos = TIME_BASE_LENGTH
    if text[pos:pos + 1] == ".":
        pos += 1
        fraction_start = pos
        while pos < len(text) and is_digit(text[pos]):
            pos += 1
        if pos == fraction_start:
            return None

    if not _is_offset(text[pos:]):
        return None

    return hour, minute, second


def is_date(text: str) -> bool:
    """
    RFC 3339 full-date: YYYY-MM-DD.

    День проверяется по максимуму месяца; 02-29 допустимо в любом году.

    Examples:
        >>> is_date("2024-02-29")
        True
        >>> is_date("2025-04-31")
        False
    """
    return _parse_date(text) is not None


def is_time(text: str) -> bool:
    """
    RFC 3339 full-time: HH:MM:SS[.frac](Z|±HH:MM).

    Часовой пояс обязателен. Секунда 60 допустима в любом времени суток;
    привязка leap second к дате проверяется в is_date_time.

    Examples:
        >>> is_time("14:30:00.123Z")
        True
        >>> is_time("14:30:00")
        False
    """
    return _parse_time(text) is not None


def is_date_time(text: str) -> bool:
    """
    RFC 3339 date-time: full-date "T" full-time ("t" допускается).

    Секунда 60 принимается только как 23:59:60 в дни 06-30 и 12-31.

    Examples:
        >>> is_date_time("2025-11-29T14:30:00+05:30")
        True
        >>> is_date_time("2016-12-31T23:59:60Z")
        True
        >>> is_date_time("2025-11-29 14:30:00Z")
        False
    """
    if len(text) <= DATE_LENGTH or text[DATE_LENGTH] not in "Tt":
        return False

    date = _parse_date(text[:DATE_LENGTH])
    time = _parse_time(text[DATE_LENGTH + 1:])
    if date is None or time is None:
        return False

    _, month, day = date
    hour, minute, second = time
    if second == SECOND_MAX:
        return (hour, minute) == (HOUR_MAX, MINUTE_MAX) and (month, day) in LEAP_SECOND_DAYS

    return True


# =============================================================================
# DURATION
# =============================================================================

DATE_DESIGNATORS: Final[str] = "YMD"
TIME_DESIGNATORS: Final[str] = "HMS"
WEEK_DESIGNATOR: Final[str] = "W"


def _is_duration_number(text: str) -> bool:
    """DIGIT+ ("." DIGIT+)?"""
    whole, dot, fraction = text.partition(".")
    if not whole or not all(is_digit(c) for c in whole):
        return False
    if dot:
        return bool(fraction) and all(is_digit(c) for c in fraction)
    return True


def _count_components(text: str, designators: str) -> Optional[int]:
    """
    Число компонентов "<число><обозначение>" или None при ошибке.

    Обозначения должны идти в порядке designators, каждое не более раза.
    """
    count = 0
    next_allowed = 0
    start = 0

    for i, c in enumerate(text):
        if is_digit(c) or c == ".":
            continue

        position = designators.find(c, next_allowed)
        if position == -1 or not _is_duration_number(text[start:i]):
            return None

        count += 1
        next_allowed = position + 1
        start = i + 1

    if start != len(text):
        return None  # число без обозначения
    return count


def is_duration(text: str) -> bool:
    """
    ISO 8601 duration.

    "P" + компоненты Y M D, затем "T" + компоненты H M S; либо "P<n>W"
    без других компонентов. Нужен хотя бы один компонент; "T" без
    временных компонентов недопустимо.

    Examples:
        >>> is_duration("P1Y2M3DT4H5M6S")
        True
        >>> is_duration("PT0.5S")
        True
        >>> is_duration("P1WT1H")
        False
    """
    if not text.startswith("P"):
        return False

    body = text[1:]
    if body.endswith(WEEK_DESIGNATOR):
        return _is_duration_number(body[:-1])

    date_part, separator, time_part = body.partition("T")
    if separator and not time_part:
        return False

    date_count = _count_components(date_part, DATE_DESIGNATORS)
    time_count = _count_components(time_part, TIME_DESIGNATORS)
    if date_count is None or time_count is None:
        return False

    return date_count + time_count > 0


# =============================================================================
# EMAIL И UUID
# =============================================================================

EMAIL_MAX_LENGTH: Final[int] = 254
EMAIL_LOCAL_MAX_LENGTH: Final[int] = 64

# RFC 5322 atext помимо букв и цифр
EMAIL_LOCAL_SPECIALS: Final[frozenset[str]] = frozenset("!#$%&'*+/=?^_`{|}~-")

UUID_LENGTH: Final[int] = 36
UUID_HYPHEN_POSITIONS: Final[frozenset[int]] = frozenset({8, 13, 18, 23})


def is_email(text: str) -> bool:
    """
    Адрес вида local@domain (dot-atom local part).

    Не длиннее 254 code units; local part 1..64 без ведущей, завершающей
    и двойной точки; domain — is_domain_name.

    Examples:
        >>> is_email("user+tag@example.com")
        True
        >>> is_email("user@example")
        False
    """
    if len(text) > EMAIL_MAX_LENGTH:
        return False

    local, at, domain = text.partition("@")
    if not at or not 1 <= len(local) <= EMAIL_LOCAL_MAX_LENGTH:
        return False

    if local[0] == "." or local[-1] == "." or ".." in local:
        return False

    for c in local:
        if not (is_alphanumeric(c) or c == "." or c in EMAIL_LOCAL_SPECIALS):
            return False

    return is_domain_name(domain)


def is_uuid(text: str) -> bool:
    """UUID в канонической форме 8-4-4-4-12 (hex в любом регистре)."""
    if len(text) != UUID_LENGTH:
        return False

    for i, c in enumerate(text):
        if i in UUID_HYPHEN_POSITIONS:
            if c != "-":
                return False
        elif not is_hex_digit(c):
            return False

    return True


# =============================================================================
# URI
# =============================================================================


def _scheme_length(text: str) -> int:
    """
    Длина схемы RFC 3986 перед ":" или 0, если текст не начинается со схемы.

    scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
    """
    if not text or not is_alpha(text[0]):
        return 0

    for i, c in enumerate(text):
        if c == ":":
            return i
        if not (is_alphanumeric(c) or c in "+-."):
            return 0

    return 0


def _is_printable_ascii(text: str) -> bool:
    return all(0x20 < ord(c) < ASCII_MAX for c in text)


def is_uri(text: str) -> bool:
    """
    Абсолютный URI: scheme ":" и остаток без пробелов и управляющих.

    Examples:
        >>> is_uri("urn:isbn:0451450523")
        True
        >>> is_uri("example.com")
        False
    """
    return _scheme_length(text) > 0 and _is_printable_ascii(text)


def is_uri_reference(text: str) -> bool:
    """
    URI или относительная ссылка; пустая строка валидна.

    Examples:
        >>> is_uri_reference("../parent/path")
        True
        >>> is_uri_reference("path with spaces")
        False
    """
    if _scheme_length(text) > 0:
        return is_uri(text)
    return _is_printable_ascii(text)


# Операторы уровней 2-4 (RFC 6570 §2.2)
URI_TEMPLATE_OPERATORS: Final[frozenset[str]] = frozenset("+#./;?&")

# Code units, недопустимые в литеральной части шаблона
URI_TEMPLATE_LITERAL_FORBIDDEN: Final[frozenset[str]] = frozenset(" \"'<>\\^`{|}")

# Наибольшая длина префикса ":N"
URI_TEMPLATE_PREFIX_MAX: Final[int] = 9999


def _is_pct_encoded(text: str, i: int) -> bool:
    return (
        text[i] == "%"
        and i + 2 < len(text)
        and is_hex_digit(text[i + 1])
        and is_hex_digit(text[i + 2])
    )


def _is_varname(name: str) -> bool:
    """varchar *( ["."] varchar ), varchar = ALPHA / DIGIT / "_" / pct-encoded"""
    if not name or name[0] == "." or name[-1] == "." or ".." in name:
        return False

    i = 0
    while i < len(name):
        c = name[i]
        if c == "%":
            if not _is_pct_encoded(name, i):
                return False
            i += 3
            continue
        if not (is_alphanumeric(c) or c in "_."):
            return False
        i += 1

    return True


def _is_varspec(spec: str) -> bool:
    """varname [ "*" / ":" max-length ]"""
    if spec.endswith("*"):
        return _is_varname(spec[:-1])

    name, colon, prefix = spec.partition(":")
    if colon:
        if not prefix or prefix[0] == "0" or not all(is_digit(c) for c in prefix):
            return False
        if int(prefix) > URI_TEMPLATE_PREFIX_MAX:
            return False

    return _is_varname(name)


def _is_template_expression(body: str) -> bool:
    if body and body[0] in URI_TEMPLATE_OPERATORS:
        body = body[1:]
    return all(_is_varspec(spec) for spec in body.split(","))


def is_uri_template(text: str) -> bool:
    """
    Синтаксис URI template (RFC 6570, уровень 4).

    Литералы — печатные ASCII без " ' < > \\\\ ^ ` { | } и пробела, "%"
    только как pct-encoded. Выражение "{...}": необязательный оператор
    из "+#./;?&", затем varspec через ",". Пустая строка валидна.

    Examples:
        >>> is_uri_template("/search{?q,page,limit}")
        True
        >>> is_uri_template("/path/{}")
        False
    """
    i = 0
    while i < len(text):
        c = text[i]

        if c == "{":
            close = text.find("}", i + 1)
            if close == -1 or not _is_template_expression(text[i + 1:close]):
                return False
            i = close + 1
            continue

        if c == "%":
            if not _is_pct_encoded(text, i):
                return False
            i += 3
            continue

        if c in URI_TEMPLATE_LITERAL_FORBIDDEN or not 0x20 < ord(c) < ASCII_MAX:
            return False
        i += 1

    return True


# =============================================================================
# JSON POINTER
# =============================================================================


def is_json_pointer(text: str) -> bool:
    """
    JSON Pointer (RFC 6901): "" или последовательность "/token".

    В токене "~" допустимо только как "~0" или "~1".

    Examples:
        >>> is_json_pointer("/a~1b/0")
        True
        >>> is_json_pointer("/foo~2")
        False
    """
    if not text:
        return True
    if text[0] != "/":
        return False

    for i, c in enumerate(text):
        if c == "~" and text[i + 1:i + 2] not in ("0", "1"):
            return False

    return True


def is_relative_json_pointer(text: str) -> bool:
    """
    Relative JSON Pointer: неотрицательное целое без ведущих нулей,
    за которым следует ничего, "#" или JSON pointer.

    Examples:
        >>> is_relative_json_pointer("1/foo/bar")
        True
        >>> is_relative_json_pointer("0#")
        True
        >>> is_relative_json_pointer("01")
        False
    """
    end = 0
    while end < len(text) and is_digit(text[end]):
        end += 1

    prefix = text[:end]
    if not prefix or (len(prefix) > 1 and prefix[0] == "0"):
        return False

    rest = text[end:]
    if not rest or rest == "#":
        return True
    return rest[0] == "/" and is_json_pointer(rest)
