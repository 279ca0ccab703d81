"""
Тесты для модуля Network

Проверяет:
1. is_ipv4_address: четыре октета, без ведущих нулей, <= 255
2. is_ipv6_address: группы, одно "::", хвостовой IPv4, zone
3. is_hostname / is_domain_name: метки RFC 1123, ограничения длины
4. is_port_number: 0..65535
5. try_parse_endpoint: IPv4 / [IPv6] / hostname и отказ на некорректном вводе
"""

import pytest

from textcore.algorithms.network import (
    Endpoint,
    is_domain_name,
    is_hostname,
    is_ipv4_address,
    is_ipv6_address,
    is_port_number,
    try_parse_endpoint,
)

# =============================================================================
# ТЕСТЫ: IPv4
# =============================================================================


class TestIpv4Address:
    """Тесты is_ipv4_address"""

    @pytest.mark.parametrize(
        "text", ["0.0.0.0", "127.0.0.1", "192.168.1.1", "255.255.255.255", "8.8.8.8"]
    )
    def test_valid(self, text: str) -> None:
        """Корректные адреса"""
        assert is_ipv4_address(text) is True

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "192.168.1",
            "192.168.1.1.1",
            "192.168..1",
            ".192.168.1.1",
            "192.168.1.1.",
            "256.1.1.1",
            "1.1.1.256",
            "999.999.999.999",
            "192.168.1.a",
            "192.168.1.1 ",
            " 192.168.1.1",
            "192.168.1.1:80",
            "192.168.1.1/24",
            "01.02.03.04",
            "1.2.3.0001",
            "1.2.3.٣",
        ],
    )
    def test_invalid(self, text: str) -> None:
        """Некорректные адреса"""
        assert is_ipv4_address(text) is False


# =============================================================================
# ТЕСТЫ: IPv6
# =============================================================================


class TestIpv6Address:
    """Тесты is_ipv6_address"""

    @pytest.mark.parametrize(
        "text",
        [
            "2001:0db8:0000:0000:0000:0000:0000:0001",
            "2001:db8:0:0:0:0:0:1",
            "::",
            "::1",
            "1::",
            "2001:db8::1",
            "2001:db8:85a3::8a2e:370:7334",
            "1:2:3:4:5:6:7::",
            "::2:3:4:5:6:7:8",
            "::ffff:192.0.2.1",
            "1:2:3:4:5:6:192.0.2.1",
            "fe80::1%eth0",
            "fe80::1%lo0",
            "ABCD:ef01::",
        ],
    )
    def test_valid(self, text: str) -> None:
        """Корректные адреса"""
        assert is_ipv6_address(text) is True

    @pytest.mark.parametrize(
        "text",
        [
            "",
            ":",
            ":::",
            "1:::2",
            ":1::2",
            "1::2:",
            "2001:db8::1::2",
            "gggg::1",
            "20011:db8::1",
            "1:2:3:4:5:6:7",
            "1:2:3:4:5:6:7:8:9",
            "1:2:3:4:5:6:7:8::",
            "2001:db8:85a3::8a2e:370:7334:extra",
            "1:2:3:4:5:6:7:192.0.2.1",
            "::192.0.2.1:1",
            "::ffff:256.0.2.1",
            "2001:db8::1 ",
            " 2001:db8::1",
            "2001:db8::1/64",
            "[2001:db8::1]",
            "fe80::1%",
            "fe80::1%eth 0",
            "1.2.3.4",
        ],
    )
    def test_invalid(self, text: str) -> None:
        """Некорректные адреса"""
        assert is_ipv6_address(text) is False


# =============================================================================
# ТЕСТЫ: Hostname / Domain
# =============================================================================


class TestHostname:
    """Тесты is_hostname / is_domain_name"""

    @pytest.mark.parametrize(
        "text",
        ["localhost", "example.com", "my-server", "server-01", "192-168-1-1", "a", "a.b"],
    )
    def test_valid_hostname(self, text: str) -> None:
        """Корректные имена"""
        assert is_hostname(text) is True

    def test_length_limits(self) -> None:
        """Метка до 63, имя до 253 code units"""
        label63 = "a" * 63
        assert is_hostname(label63) is True
        assert is_hostname(label63 + ".com") is True
        assert is_hostname("a" * 64) is False

        hostname253 = ".".join([label63, label63, label63, "a" * 61])
        assert len(hostname253) == 253
        assert is_hostname(hostname253) is True
        assert is_hostname(hostname253 + "a") is False

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "-server",
            "server-",
            "server.-test",
            "example..com",
            ".example.com",
            "example.com.",
            "example_com",
            "example com",
            "example:8080",
            "münchen.de",
        ],
    )
    def test_invalid_hostname(self, text: str) -> None:
        """Некорректные имена"""
        assert is_hostname(text) is False

    def test_domain_requires_two_labels(self) -> None:
        """Домен — hostname с точкой"""
        assert is_domain_name("example.com") is True
        assert is_domain_name("test-site.co.uk") is True
        assert is_domain_name("localhost") is False
        assert is_domain_name("") is False
        assert is_domain_name(".com") is False
        assert is_domain_name("test_site.com") is False


# =============================================================================
# ТЕСТЫ: Port / Endpoint
# =============================================================================


class TestPortNumber:
    """Тесты is_port_number"""

    @pytest.mark.parametrize("text", ["0", "1", "80", "443", "65535"])
    def test_valid(self, text: str) -> None:
        """Порты в диапазоне"""
        assert is_port_number(text) is True

    @pytest.mark.parametrize(
        "text", ["", "65536", "99999", "100000", "80a", " 80", "-80", "+80", "80.0", "٨٠"]
    )
    def test_invalid(self, text: str) -> None:
        """Порты вне диапазона или не цифры"""
        assert is_port_number(text) is False


class TestTryParseEndpoint:
    """Тесты try_parse_endpoint"""

    @pytest.mark.parametrize(
        "text,host,port",
        [
            ("192.168.1.1:80", "192.168.1.1", 80),
            ("127.0.0.1:8080", "127.0.0.1", 8080),
            ("[::1]:80", "::1", 80),
            ("[2001:db8::1]:443", "2001:db8::1", 443),
            ("[fe80::1%eth0]:80", "fe80::1%eth0", 80),
            ("localhost:0", "localhost", 0),
            ("example.com:65535", "example.com", 65535),
            ("my-server:3000", "my-server", 3000),
        ],
    )
    def test_valid(self, text: str, host: str, port: int) -> None:
        """Разбор корректных endpoints"""
        assert try_parse_endpoint(text) == Endpoint(host, port)

    def test_result_fields(self) -> None:
        """Endpoint — именованный кортеж host, port"""
        endpoint = try_parse_endpoint("example.com:443")
        assert endpoint is not None
        assert endpoint.host == "example.com"
        assert endpoint.port == 443

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "localhost",
            "192.168.1.1",
            ":80",
            "localhost:",
            "localhost:abc",
            "localhost:65536",
            "host:80:443",
            "256.1.1.1:80",
            "192.168.1:80",
            "::1:80",
            "2001:db8::1:443",
            "[::1]",
            "[::1",
            "::1]",
            "[::1]:abc",
            "[::1]80",
            "[localhost]:80",
            "-invalid:80",
            "inva lid:80",
        ],
    )
    def test_invalid(self, text: str) -> None:
        """Некорректный ввод — None"""
        assert try_parse_endpoint(text) is None
