"""
Тесты для модуля Escaping

Проверяет:
1. json_escape / json_unescape: короткие escape, \\uXXXX, суррогатные пары
2. xml_escape / xml_unescape: предопределённые сущности, числовые ссылки
3. cpp_escape / cpp_unescape: простые escape, \\xHH, восьмеричные
4. Некорректный вход декодеров → MalformedEscapeError
5. unescape(escape(t)) == t
"""

import pytest

from textcore.algorithms.encoding import MalformedEscapeError
from textcore.algorithms.escaping import (
    cpp_escape,
    cpp_unescape,
    json_escape,
    json_unescape,
    xml_escape,
    xml_unescape,
)

SAMPLE_TEXTS = [
    "",
    "hello world",
    '"quoted" \\ path/to/file',
    "line1\nline2\r\n\ttab\b\f",
    "\x00\x01\x1f\x7f",
    "café → 中 \U0001f600",
    "<tag attr='v'>A & B</tag>",
    "\x000\x007",
]

# =============================================================================
# ТЕСТЫ: JSON
# =============================================================================


class TestJsonEscape:
    """Тесты json_escape"""

    def test_plain_text_unchanged(self) -> None:
        """Обычный текст не меняется"""
        assert json_escape("hello world") == "hello world"
        assert json_escape("") == ""

    def test_quote_backslash_slash(self) -> None:
        """Кавычка, обратный и прямой слэш"""
        assert json_escape('say "hello"') == 'say \\"hello\\"'
        assert json_escape("path\\to\\file") == "path\\\\to\\\\file"
        assert json_escape("path/to/file") == "path\\/to\\/file"

    @pytest.mark.parametrize(
        "raw,escaped",
        [("\b", "\\b"), ("\f", "\\f"), ("\n", "\\n"), ("\r", "\\r"), ("\t", "\\t")],
    )
    def test_short_control_escapes(self, raw: str, escaped: str) -> None:
        """Короткие формы управляющих символов"""
        assert json_escape(raw) == escaped

    def test_other_controls_as_unicode(self) -> None:
        """Прочие управляющие — \\u00XX в верхнем регистре"""
        assert json_escape("\x00") == "\\u0000"
        assert json_escape("\x01") == "\\u0001"
        assert json_escape("\x1f") == "\\u001F"

    def test_non_ascii_passes_through(self) -> None:
        """Не-ASCII и DEL не экранируются"""
        assert json_escape("café\x7f") == "café\x7f"


class TestJsonUnescape:
    """Тесты json_unescape"""

    def test_simple_escapes(self) -> None:
        """Короткие escape"""
        assert json_unescape('say \\"hello\\"') == 'say "hello"'
        assert json_unescape("path\\/to\\\\file") == "path/to\\file"
        assert json_unescape("\\r\\n\\t\\b\\f") == "\r\n\t\b\f"

    def test_unicode_escapes(self) -> None:
        """\\uXXXX в любом регистре hex"""
        assert json_unescape("\\u0041") == "A"
        assert json_unescape("caf\\u00E9") == "café"
        assert json_unescape("caf\\u00e9") == "café"
        assert json_unescape("\\u20AC") == "€"
        assert json_unescape("\\u0000") == "\x00"

    def test_surrogate_pair_combined(self) -> None:
        """Пара surrogate — один code point"""
        assert json_unescape("\\uD83D\\uDE00") == "\U0001f600"
        assert json_unescape("x\\ud834\\udd1ey") == "x\U0001d11ey"

    @pytest.mark.parametrize(
        "text",
        [
            "test\\",
            "\\x",
            "\\q",
            "\\u",
            "\\u0",
            "\\u000",
            "\\u00GG",
            "\\uXXXX",
            "\\uD83D",
            "\\uD83Dx",
            "\\uD83D\\u0041",
            "\\uDE00",
        ],
    )
    def test_malformed_rejected(self, text: str) -> None:
        """Некорректный escape — MalformedEscapeError"""
        with pytest.raises(MalformedEscapeError, match="Malformed JSON escape"):
            json_unescape(text)

    def test_error_is_value_error(self) -> None:
        """MalformedEscapeError — подкласс ValueError"""
        with pytest.raises(ValueError):
            json_unescape("\\q")

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_inverse_of_escape(self, text: str) -> None:
        """json_unescape(json_escape(t)) == t"""
        assert json_unescape(json_escape(text)) == text


# =============================================================================
# ТЕСТЫ: XML
# =============================================================================


class TestXmlEscape:
    """Тесты xml_escape"""

    def test_predefined_entities(self) -> None:
        """Пять предопределённых сущностей"""
        assert xml_escape("&<>\"'") == "&amp;&lt;&gt;&quot;&apos;"
        assert xml_escape("AT&T") == "AT&amp;T"

    def test_other_text_unchanged(self) -> None:
        """Остальные code units не меняются"""
        assert xml_escape("hello\nwörld") == "hello\nwörld"
        assert xml_escape("") == ""


class TestXmlUnescape:
    """Тесты xml_unescape"""

    def test_named_entities(self) -> None:
        """Предопределённые сущности"""
        assert xml_unescape("Tom &amp; Jerry") == "Tom & Jerry"
        assert xml_unescape("&lt;tag attr=&quot;v&quot;&gt;") == '<tag attr="v">'
        assert xml_unescape("it&apos;s") == "it's"

    def test_decimal_references(self) -> None:
        """&#DDD;"""
        assert xml_unescape("&#65;") == "A"
        assert xml_unescape("&#8364;") == "€"
        assert xml_unescape("caf&#233;") == "café"

    def test_hex_references(self) -> None:
        """&#xHHH; (hex в любом регистре)"""
        assert xml_unescape("&#x41;") == "A"
        assert xml_unescape("&#xe9;&#xE9;") == "éé"
        assert xml_unescape("&#x4E2D;") == "中"
        assert xml_unescape("&#x10FFFF;") == "\U0010ffff"

    @pytest.mark.parametrize(
        "text",
        [
            "test & more",
            "test &amp more",
            "&",
            "&a",
            "&unknown;",
            "&xyz;",
            "&;",
            "&#;",
            "&#x;",
            "&#xGG;",
            "&#xyz;",
            "&#X41;",
            "&#12a;",
            "&#x110000;",
            "&#1114112;",
            "&#xD800;",
            "&#57343;",
        ],
    )
    def test_malformed_rejected(self, text: str) -> None:
        """Некорректная сущность — MalformedEscapeError"""
        with pytest.raises(MalformedEscapeError, match="Malformed XML escape"):
            xml_unescape(text)

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_inverse_of_escape(self, text: str) -> None:
        """xml_unescape(xml_escape(t)) == t"""
        assert xml_unescape(xml_escape(text)) == text


# =============================================================================
# ТЕСТЫ: C++
# =============================================================================


class TestCppEscape:
    """Тесты cpp_escape"""

    def test_simple_escapes(self) -> None:
        """Простые escape"""
        assert cpp_escape("line1\nline2\ttab") == "line1\\nline2\\ttab"
        assert cpp_escape("say \"hi\" it's") == "say \\\"hi\\\" it\\'s"
        assert cpp_escape("path\\file") == "path\\\\file"
        assert cpp_escape("\b\f\v\a\r") == "\\b\\f\\v\\a\\r"

    def test_nul(self) -> None:
        """NUL — \\0, перед восьмеричной цифрой — \\x00"""
        assert cpp_escape("null\x00char") == "null\\0char"
        assert cpp_escape("\x001") == "\\x001"
        assert cpp_escape("\x008") == "\\08"

    def test_other_controls_as_hex(self) -> None:
        """Прочие управляющие и DEL — \\xhh в нижнем регистре"""
        assert cpp_escape("\x01") == "\\x01"
        assert cpp_escape("\x1f") == "\\x1f"
        assert cpp_escape("\x7f") == "\\x7f"

    def test_non_ascii_passes_through(self) -> None:
        """Не-ASCII не экранируется"""
        assert cpp_escape("café") == "café"


class TestCppUnescape:
    """Тесты cpp_unescape"""

    def test_simple_escapes(self) -> None:
        """Простые escape"""
        assert cpp_unescape("A\\nB\\tC\\\\D") == "A\nB\tC\\D"
        assert cpp_unescape("\\\"q\\\" \\'s\\'") == "\"q\" 's'"
        assert cpp_unescape("\\b\\f\\v\\a") == "\b\f\v\a"
        assert cpp_unescape("a\\?b") == "a?b"

    def test_hex_escapes(self) -> None:
        """\\xHH — ровно две hex-цифры"""
        assert cpp_unescape("\\x41") == "A"
        assert cpp_unescape("\\x0f\\x0F") == "\x0f\x0f"
        assert cpp_unescape("\\xff") == "\xff"
        assert cpp_unescape("\\x411") == "A1"

    def test_octal_escapes(self) -> None:
        """\\o, \\oo, \\ooo"""
        assert cpp_unescape("null\\0char") == "null\x00char"
        assert cpp_unescape("\\001\\007\\012") == "\x01\x07\n"
        assert cpp_unescape("\\1\\77") == "\x01?"
        assert cpp_unescape("\\101") == "A"
        assert cpp_unescape("\\377") == "\xff"
        assert cpp_unescape("\\1012") == "A2"

    @pytest.mark.parametrize(
        "text",
        ["test\\", "\\q", "\\z", "\\x", "\\x0", "\\xGG", "\\xZZ", "\\777", "\\400", "\\8"],
    )
    def test_malformed_rejected(self, text: str) -> None:
        """Некорректный escape — MalformedEscapeError"""
        with pytest.raises(MalformedEscapeError, match="Malformed C\\+\\+ escape"):
            cpp_unescape(text)

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_inverse_of_escape(self, text: str) -> None:
        """cpp_unescape(cpp_escape(t)) == t"""
        assert cpp_unescape(cpp_escape(text)) == text
