"""Tests for mirror resolution and base URL construction."""

import socket
from collections.abc import Callable
from typing import Any
from unittest.mock import patch

import pytest

from radioctrl.api.errors import ResolutionError, URLConstructionError
from radioctrl.api.resolver import (
    API_HOSTNAME,
    SocketResolver,
    build_base_url,
    format_host,
    resolve_mirrors,
    select_mirror,
)

Resolver = Callable[..., Any]


class TestResolveMirrors:
    """Tests for resolve_mirrors."""

    def test_returns_addresses_in_order(self, stub_resolver: Resolver) -> None:
        """Test addresses come back in resolver order."""
        resolver = stub_resolver(["10.0.0.2", "10.0.0.1"])
        assert resolve_mirrors(resolver) == ["10.0.0.2", "10.0.0.1"]

    def test_resolves_directory_hostname_once(self, stub_resolver: Resolver) -> None:
        """Test the well-known hostname is looked up exactly once."""
        resolver = stub_resolver(["10.0.0.1"])
        resolve_mirrors(resolver)
        assert resolver.calls == [API_HOSTNAME]

    def test_custom_hostname(self, stub_resolver: Resolver) -> None:
        """Test a custom hostname is passed through."""
        resolver = stub_resolver(["10.0.0.1"])
        resolve_mirrors(resolver, "mirror.example")
        assert resolver.calls == ["mirror.example"]

    def test_error_message_preserved(self, stub_resolver: Resolver) -> None:
        """Test resolver failures keep their message."""
        original = OSError("dns")
        resolver = stub_resolver(error=original)

        with pytest.raises(ResolutionError) as exc_info:
            resolve_mirrors(resolver)

        assert str(exc_info.value) == "dns"
        assert exc_info.value.__cause__ is original

    def test_empty_answer_is_error(self, stub_resolver: Resolver) -> None:
        """Test an empty address list fails resolution."""
        with pytest.raises(ResolutionError, match="No addresses found"):
            resolve_mirrors(stub_resolver([]))


class TestSelectMirror:
    """Tests for select_mirror."""

    def test_first_address_wins(self) -> None:
        """Test selection is deterministic on the first address."""
        assert select_mirror(["1.1.1.1", "2.2.2.2", "3.3.3.3"]) == "1.1.1.1"


class TestFormatHost:
    """Tests for format_host."""

    @pytest.mark.parametrize("address", ["2001:db8::1", "::1", "fe80::1"])
    def test_ipv6_bracketed(self, address: str) -> None:
        """Test addresses containing a colon are bracketed."""
        assert format_host(address) == f"[{address}]"

    @pytest.mark.parametrize("address", ["127.0.0.1", "de1.api.radio-browser.info"])
    def test_others_unchanged(self, address: str) -> None:
        """Test IPv4 literals and hostnames are not bracketed."""
        assert format_host(address) == address


class TestBuildBaseUrl:
    """Tests for build_base_url."""

    def test_ipv4(self) -> None:
        """Test IPv4 base URL."""
        url = build_base_url("127.0.0.1")
        assert str(url) == "http://127.0.0.1/json"
        assert url.host == "127.0.0.1"

    def test_ipv6(self) -> None:
        """Test IPv6 literals are bracketed in the URL."""
        url = build_base_url("2001:db8::1")
        assert str(url) == "http://[2001:db8::1]/json"
        assert url.host == "2001:db8::1"

    def test_hostname(self) -> None:
        """Test hostname base URL."""
        url = build_base_url("de1.api.radio-browser.info")
        assert str(url) == "http://de1.api.radio-browser.info/json"

    def test_scheme_and_path(self) -> None:
        """Test the base URL is plain http under /json."""
        url = build_base_url("10.1.2.3")
        assert url.scheme == "http"
        assert url.path == "/json"

    def test_garbage_address(self) -> None:
        """Test reserved characters in the address are rejected."""
        with pytest.raises(URLConstructionError):
            build_base_url("&!@#*)!@)@)@")

    def test_invalid_ipv6(self) -> None:
        """Test a colon-bearing address that is not IPv6 is rejected."""
        with pytest.raises(URLConstructionError):
            build_base_url("not:an:address")

    def test_userinfo_smuggling(self) -> None:
        """Test an address that would parse as userinfo is rejected."""
        with pytest.raises(URLConstructionError):
            build_base_url("user@example.com")


class TestSocketResolver:
    """Tests for SocketResolver."""

    def test_deduplicates_addresses(self) -> None:
        """Test duplicate getaddrinfo entries collapse, order preserved."""
        infos = [
            (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("10.0.0.1", 0)),
            (socket.AF_INET6, socket.SOCK_STREAM, 6, "", ("2001:db8::1", 0, 0, 0)),
            (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("10.0.0.1", 0)),
        ]
        with patch("radioctrl.api.resolver.socket.getaddrinfo", return_value=infos) as mock_gai:
            result = SocketResolver().lookup_ip(API_HOSTNAME)

        assert result == ["10.0.0.1", "2001:db8::1"]
        mock_gai.assert_called_once_with(API_HOSTNAME, None, type=socket.SOCK_STREAM)

    def test_failure_propagates(self) -> None:
        """Test resolver errors surface as ResolutionError through resolve_mirrors."""
        error = socket.gaierror(-2, "Name or service not known")
        with patch("radioctrl.api.resolver.socket.getaddrinfo", side_effect=error):
            with pytest.raises(ResolutionError) as exc_info:
                resolve_mirrors(SocketResolver())

        assert str(exc_info.value) == str(error)
