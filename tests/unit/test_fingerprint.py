"""Unit tests for device fingerprinting and client IP extraction."""

import re
from types import SimpleNamespace

import pytest

from app.core.fingerprint import (
    fingerprint_from_request,
    generate_device_fingerprint,
    get_client_ip,
)

WINDOWS_UA = "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"
MAC_UA = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7)"
HEX64 = re.compile(r"^[0-9a-f]{64}$")


def make_request(headers: dict, host: str | None = None):
    client = SimpleNamespace(host=host) if host else None
    return SimpleNamespace(headers=headers, client=client)


class TestGenerateDeviceFingerprint:
    @pytest.mark.parametrize(
        "user_agent,ip",
        [
            (WINDOWS_UA, "192.168.1.1"),
            (MAC_UA, "10.0.0.7"),
            ("", "203.0.113.1"),
            (WINDOWS_UA, None),
        ],
    )
    def test_is_deterministic_sha256_hex(self, user_agent, ip):
        fp1 = generate_device_fingerprint(user_agent, ip)
        fp2 = generate_device_fingerprint(user_agent, ip)
        assert fp1 == fp2
        assert HEX64.match(fp1)

    def test_different_user_agents_differ(self):
        ip = "192.168.1.1"
        assert generate_device_fingerprint(WINDOWS_UA, ip) != generate_device_fingerprint(MAC_UA, ip)

    def test_different_ips_differ(self):
        assert generate_device_fingerprint(WINDOWS_UA, "192.168.1.1") != generate_device_fingerprint(
            WINDOWS_UA, "192.168.1.2"
        )

    def test_missing_ip_uses_unknown_token(self):
        assert generate_device_fingerprint(WINDOWS_UA) == generate_device_fingerprint(WINDOWS_UA, "unknown")

    def test_missing_ip_differs_from_empty_ip(self):
        assert generate_device_fingerprint(WINDOWS_UA) != generate_device_fingerprint(WINDOWS_UA, "")


class TestGetClientIp:
    def test_uses_first_forwarded_for_entry(self):
        request = make_request({"x-forwarded-for": "203.0.113.1, 198.51.100.1"})
        assert get_client_ip(request) == "203.0.113.1"

    def test_trims_forwarded_for_entry(self):
        request = make_request({"x-forwarded-for": "  203.0.113.9  ,198.51.100.1"})
        assert get_client_ip(request) == "203.0.113.9"

    def test_uses_x_client_ip(self):
        assert get_client_ip(make_request({"x-client-ip": "203.0.113.1"})) == "203.0.113.1"

    def test_uses_x_real_ip(self):
        assert get_client_ip(make_request({"x-real-ip": "203.0.113.1"})) == "203.0.113.1"

    def test_forwarded_for_wins_over_other_headers(self):
        request = make_request(
            {
                "x-forwarded-for": "203.0.113.1",
                "x-client-ip": "198.51.100.1",
                "x-real-ip": "192.0.2.1",
            }
        )
        assert get_client_ip(request) == "203.0.113.1"

    def test_client_ip_wins_over_real_ip(self):
        request = make_request({"x-client-ip": "198.51.100.1", "x-real-ip": "192.0.2.1"})
        assert get_client_ip(request) == "198.51.100.1"

    def test_falls_back_to_socket_address(self):
        assert get_client_ip(make_request({}, host="127.0.0.1")) == "127.0.0.1"

    def test_returns_none_without_any_source(self):
        assert get_client_ip(make_request({})) is None


def test_fingerprint_from_request_combines_user_agent_and_ip():
    request = make_request({"user-agent": MAC_UA, "x-real-ip": "192.0.2.1"})
    assert fingerprint_from_request(request) == generate_device_fingerprint(MAC_UA, "192.0.2.1")
