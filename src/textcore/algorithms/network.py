"""
Network — Address, Hostname and Endpoint Validation

RFC 791 (IPv4 dotted quad), RFC 4291 §2.2 (IPv6 text form),
RFC 6874 (zone identifier), RFC 1123 §2.1 (hostnames)

Модуль проверяет сетевые идентификаторы в текстовой форме:
- is_ipv4_address: четыре десятичных октета без ведущих нулей
- is_ipv6_address: 8 групп hex, не более одного "::", хвостовой IPv4,
  необязательный "%zone"
- is_hostname / is_domain_name: метки RFC 1123
- is_port_number: десятичный порт 0..65535
- try_parse_endpoint: "host:port" / "[ipv6]:port" → Endpoint или None

Все проверки — только ASCII: любой code unit > 127 делает текст невалидным.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пробелы по краям не допускаются ни одним валидатором
2. try_parse_endpoint никогда не бросает на str: None при любой ошибке
3. Хост Endpoint — без квадратных скобок
"""

from typing import Final, NamedTuple, Optional

from textcore.algorithms.classification import (
    is_all_digits,
    is_alphanumeric,
    is_digit,
    is_hex_digit,
    is_uri_unreserved_text,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

IPV4_OCTET_COUNT: Final[int] = 4
IPV4_OCTET_MAX: Final[int] = 255

IPV6_GROUP_COUNT: Final[int] = 8
IPV6_GROUP_MAX_DIGITS: Final[int] = 4

HOSTNAME_MAX_LENGTH: Final[int] = 253
HOSTNAME_LABEL_MAX_LENGTH: Final[int] = 63

PORT_MAX: Final[int] = 65535
PORT_MAX_DIGITS: Final[int] = 5

ZONE_SEPARATOR: Final[str] = "%"


class Endpoint(NamedTuple):
    """Разобранная пара host:port"""

    host: str
    port: int


# =============================================================================
# IP АДРЕСА
# =============================================================================


def is_ipv4_address(text: str) -> bool:
    """
    IPv4 в точечно-десятичной форме.

    Октет — 1..3 цифры без ведущего нуля (кроме самого "0"), значение <= 255.

    Examples:
        >>> is_ipv4_address("192.168.1.1")
        True
        >>> is_ipv4_address("01.02.03.04")
        False
    """
    octets = text.split(".")
    if len(octets) != IPV4_OCTET_COUNT:
        return False

    for octet in octets:
        if not is_all_digits(octet) or len(octet) > 3:
            return False
        if len(octet) > 1 and octet[0] == "0":
            return False
        if int(octet) > IPV4_OCTET_MAX:
            return False

    return True


def _is_hex_group(group: str) -> bool:
    return 1 <= len(group) <= IPV6_GROUP_MAX_DIGITS and all(is_hex_digit(h) for h in group)


def _count_groups(groups: list[str], allow_ipv4_tail: bool) -> Optional[int]:
    """
    Число 16-битных групп или None, если группа некорректна.

    Хвостовой IPv4 (только последняя группа) считается за две группы.
    """
    count = 0
    for i, group in enumerate(groups):
        if allow_ipv4_tail and i == len(groups) - 1 and "." in group:
            if not is_ipv4_address(group):
                return None
            count += 2
        elif _is_hex_group(group):
            count += 1
        else:
            return None
    return count


def is_ipv6_address(text: str) -> bool:
    """
    IPv6 в текстовой форме RFC 4291.

    Допускается одно сжатие "::", хвостовой IPv4 ("::ffff:192.0.2.1")
    и zone identifier после "%" (unreserved code units). Скобки,
    префикс "/64" и одиночные ведущие/завершающие ":" недопустимы.

    Examples:
        >>> is_ipv6_address("2001:db8::1")
        True
        >>> is_ipv6_address("fe80::1%eth0")
        True
        >>> is_ipv6_address("2001:db8::1::2")
        False
    """
    address, separator, zone = text.partition(ZONE_SEPARATOR)
    if separator and not is_uri_unreserved_text(zone):
        return False

    if ":::" in address or address.count("::") > 1:
        return False

    if "::" in address:
        head, tail = address.split("::")
        head_groups = head.split(":") if head else []
        tail_groups = tail.split(":") if tail else []

        head_count = _count_groups(head_groups, allow_ipv4_tail=False)
        tail_count = _count_groups(tail_groups, allow_ipv4_tail=True)
        if head_count is None or tail_count is None:
            return False
        # "::" заменяет как минимум одну нулевую группу
        return head_count + tail_count < IPV6_GROUP_COUNT

    count = _count_groups(address.split(":"), allow_ipv4_tail=True)
    return count == IPV6_GROUP_COUNT


# =============================================================================
# ИМЕНА ХОСТОВ
# =============================================================================


def _is_hostname_label(label: str) -> bool:
    if not 1 <= len(label) <= HOSTNAME_LABEL_MAX_LENGTH:
        return False
    if label[0] == "-" or label[-1] == "-":
        return False
    return all(is_alphanumeric(c) or c == "-" for c in label)


def is_hostname(text: str) -> bool:
    """
    Hostname по RFC 1123.

    Не длиннее 253 code units; метки 1..63 из букв, цифр и "-",
    без "-" по краям метки. Пустые метки (включая завершающую точку)
    недопустимы.

    Examples:
        >>> is_hostname("my-server.example.com")
        True
        >>> is_hostname("example.com.")
        False
    """
    if not text or len(text) > HOSTNAME_MAX_LENGTH:
        return False
    return all(_is_hostname_label(label) for label in text.split("."))


def is_domain_name(text: str) -> bool:
    """Hostname минимум из двух меток ("localhost" — не домен)."""
    return "." in text and is_hostname(text)


# =============================================================================
# ПОРТЫ И ENDPOINTS
# =============================================================================


def is_port_number(text: str) -> bool:
    """
    Десятичный номер порта 0..65535 без знака и пробелов.

    Examples:
        >>> is_port_number("65535")
        True
        >>> is_port_number("+80")
        False
    """
    if not is_all_digits(text) or len(text) > PORT_MAX_DIGITS:
        return False
    return int(text) <= PORT_MAX


def try_parse_endpoint(text: str) -> Optional[Endpoint]:
    """
    Разбор "host:port" или "[ipv6]:port".

    Форма со скобками требует валидный IPv6 внутри и порт после "]:".
    Иначе текст делится по последнему ":"; хост из одних цифр и точек
    обязан быть IPv4, любой другой — hostname. Голый IPv6 без скобок
    не принимается.

    Args:
        text: Исходный текст

    Returns:
        Endpoint(host, port) или None

    Examples:
        >>> try_parse_endpoint("[::1]:8080")
        Endpoint(host='::1', port=8080)
        >>> try_parse_endpoint("example.com:443")
        Endpoint(host='example.com', port=443)
        >>> try_parse_endpoint("::1:80") is None
        True
    """
    if text.startswith("["):
        close = text.find("]")
        if close == -1:
            return None

        host = text[1:close]
        rest = text[close + 1:]
        if not rest.startswith(":"):
            return None

        port_text = rest[1:]
        if not is_ipv6_address(host) or not is_port_number(port_text):
            return None
        return Endpoint(host, int(port_text))

    colon = text.rfind(":")
    if colon == -1:
        return None

    host = text[:colon]
    port_text = text[colon + 1:]
    if not host or not is_port_number(port_text):
        return None

    if all(is_digit(c) or c == "." for c in host):
        host_ok = is_ipv4_address(host)
    else:
        host_ok = is_hostname(host)

    if not host_ok:
        return None
    return Endpoint(host, int(port_text))
