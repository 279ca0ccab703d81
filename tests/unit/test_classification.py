"""
Тесты для модуля Classification

Проверяет:
1. ASCII классы: whitespace, digit, alpha, alphanumeric, hex
2. RFC 3986 reserved / unreserved
3. Не-ASCII и NUL не принадлежат ни одному классу
4. ASCII folding
5. Предикаты для всего текста
"""

import pytest

from textcore.algorithms.classification import (
    ASCII_MAX,
    URI_GEN_DELIMS,
    URI_SUB_DELIMS,
    WHITESPACE_CHARS,
    is_all_digits,
    is_alpha,
    is_alphanumeric,
    is_digit,
    is_hex_digit,
    is_null_or_whitespace,
    is_uri_reserved,
    is_uri_reserved_text,
    is_uri_unreserved,
    is_uri_unreserved_text,
    is_whitespace,
    lower_ascii,
    to_lower_ascii,
    to_upper_ascii,
    upper_ascii,
)

ALL_PREDICATES = [
    is_whitespace,
    is_digit,
    is_alpha,
    is_alphanumeric,
    is_hex_digit,
    is_uri_reserved,
    is_uri_unreserved,
]


# =============================================================================
# ТЕСТЫ: Code unit классы
# =============================================================================


class TestIsWhitespace:
    """Тесты is_whitespace"""

    @pytest.mark.parametrize("c", [" ", "\t", "\n", "\r", "\f", "\v"])
    def test_ascii_whitespace(self, c: str) -> None:
        """Шесть ASCII whitespace символов распознаются"""
        assert is_whitespace(c)

    @pytest.mark.parametrize("c", ["a", "0", "_", "\x00", "\u00a0", "\u2003"])
    def test_not_whitespace(self, c: str) -> None:
        """Прочие символы, включая юникодные пробелы, не whitespace"""
        assert not is_whitespace(c)

    def test_whitespace_table_matches_constant(self) -> None:
        """Таблица согласована с WHITESPACE_CHARS"""
        found = {chr(code) for code in range(ASCII_MAX + 1) if is_whitespace(chr(code))}
        assert found == set(WHITESPACE_CHARS)


class TestIsDigit:
    """Тесты is_digit"""

    def test_all_ascii_digits(self) -> None:
        """0-9 — цифры"""
        for c in "0123456789":
            assert is_digit(c)

    def test_boundaries(self) -> None:
        """Соседи '0' и '9' по коду — не цифры"""
        assert not is_digit("/")
        assert not is_digit(":")

    def test_unicode_digits_rejected(self) -> None:
        """Юникодные цифры не считаются"""
        assert not is_digit("٣")
        assert not is_digit("５")


class TestIsAlpha:
    """Тесты is_alpha и is_alphanumeric"""

    def test_letters(self) -> None:
        """A-Z и a-z — буквы"""
        assert is_alpha("A")
        assert is_alpha("z")
        assert not is_alpha("@")
        assert not is_alpha("[")
        assert not is_alpha("`")
        assert not is_alpha("{")

    def test_non_ascii_letters_rejected(self) -> None:
        """Не-ASCII буквы не считаются"""
        assert not is_alpha("é")
        assert not is_alpha("Ж")

    def test_alphanumeric_union(self) -> None:
        """alphanumeric = alpha ∪ digit"""
        for code in range(ASCII_MAX + 1):
            c = chr(code)
            assert is_alphanumeric(c) == (is_alpha(c) or is_digit(c))


class TestIsHexDigit:
    """Тесты is_hex_digit"""

    def test_hex_digits(self) -> None:
        """0-9, a-f, A-F"""
        for c in "0123456789abcdefABCDEF":
            assert is_hex_digit(c)

    def test_non_hex(self) -> None:
        """g, G и прочие — не hex"""
        for c in "gGxX-":
            assert not is_hex_digit(c)


class TestUriClasses:
    """Тесты RFC 3986 классов"""

    def test_reserved(self) -> None:
        """gen-delims и sub-delims — reserved"""
        for c in URI_GEN_DELIMS | URI_SUB_DELIMS:
            assert is_uri_reserved(c)
        assert not is_uri_reserved("a")
        assert not is_uri_reserved("-")

    def test_unreserved(self) -> None:
        """ALPHA / DIGIT / - . _ ~ — unreserved"""
        for c in "aZ09-._~":
            assert is_uri_unreserved(c)
        for c in "% /?":
            assert not is_uri_unreserved(c)

    def test_reserved_and_unreserved_disjoint(self) -> None:
        """Классы не пересекаются"""
        for code in range(ASCII_MAX + 1):
            c = chr(code)
            assert not (is_uri_reserved(c) and is_uri_unreserved(c))


class TestTotality:
    """Классификатор тотален и никогда не бросает"""

    @pytest.mark.parametrize("predicate", ALL_PREDICATES)
    def test_nul_classifies_as_nothing(self, predicate) -> None:
        """NUL не принадлежит ни одному классу"""
        assert predicate("\x00") is False

    @pytest.mark.parametrize("predicate", ALL_PREDICATES)
    def test_non_ascii_classifies_as_nothing(self, predicate) -> None:
        """Code units > 127 не принадлежат ни одному классу"""
        for c in ["\x80", "\xff", "é", "真", "\U0001f600"]:
            assert predicate(c) is False


# =============================================================================
# ТЕСТЫ: ASCII folding
# =============================================================================


class TestAsciiFolding:
    """Тесты to_lower_ascii / to_upper_ascii"""

    def test_lower(self) -> None:
        """A-Z складываются в a-z"""
        assert to_lower_ascii("A") == "a"
        assert to_lower_ascii("Z") == "z"
        assert to_lower_ascii("a") == "a"
        assert to_lower_ascii("1") == "1"

    def test_upper(self) -> None:
        """a-z складываются в A-Z"""
        assert to_upper_ascii("a") == "A"
        assert to_upper_ascii("z") == "Z"
        assert to_upper_ascii("Q") == "Q"

    def test_non_ascii_unchanged(self) -> None:
        """Не-ASCII буквы не складываются"""
        assert to_lower_ascii("Ä") == "Ä"
        assert to_upper_ascii("ä") == "ä"

    def test_whole_text(self) -> None:
        """lower_ascii / upper_ascii складывают только ASCII буквы"""
        assert lower_ascii("Hello World 42") == "hello world 42"
        assert upper_ascii("Hello World 42") == "HELLO WORLD 42"
        assert lower_ascii("ÄÖÜ İ") == "ÄÖÜ İ"
        assert upper_ascii("straße") == "STRAßE"
        assert lower_ascii("") == ""


# =============================================================================
# ТЕСТЫ: Предикаты для текста
# =============================================================================


class TestTextPredicates:
    """Тесты предикатов для всего текста"""

    def test_is_all_digits(self) -> None:
        """Непустой текст только из цифр"""
        assert is_all_digits("0123456789")
        assert not is_all_digits("")
        assert not is_all_digits("12a")
        assert not is_all_digits("-1")

    def test_is_null_or_whitespace(self) -> None:
        """Пустой или только whitespace"""
        assert is_null_or_whitespace("")
        assert is_null_or_whitespace(" \t\r\n\f\v")
        assert not is_null_or_whitespace(" a ")
        assert not is_null_or_whitespace("\u00a0")

    def test_uri_text_predicates(self) -> None:
        """Весь текст из одного URI класса; пустой — False"""
        assert is_uri_reserved_text(":/?#")
        assert not is_uri_reserved_text(":a")
        assert not is_uri_reserved_text("")
        assert is_uri_unreserved_text("abc-123_~.")
        assert not is_uri_unreserved_text("a b")
        assert not is_uri_unreserved_text("")
