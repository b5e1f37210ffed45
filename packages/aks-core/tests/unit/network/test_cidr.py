"""Unit tests for CIDR parsing and address arithmetic."""

from __future__ import annotations

import ipaddress

import pytest
from pydantic import ValidationError

from aks_core.errors import AddressOutOfRangeError, InvalidCidrFormatError
from aks_core.network import (
    DNS_SERVICE_IP_OFFSET,
    IPv4Cidr,
    contains,
    format_cidr,
    offset_address,
    parse_cidr,
)


class TestParseCidr:
    """Tests for parse_cidr."""

    def test_parses_canonical_block(self) -> None:
        """A canonical block parses into its parts."""
        cidr = parse_cidr("10.250.0.0/16")
        assert cidr.network_address == ipaddress.IPv4Address("10.250.0.0")
        assert cidr.prefix_length == 16

    def test_canonicalises_host_bits(self) -> None:
        """Host bits are masked off rather than rejected."""
        cidr = parse_cidr("10.250.1.7/16")
        assert format_cidr(cidr) == "10.250.0.0/16"

    def test_ignores_surrounding_whitespace(self) -> None:
        """Leading and trailing whitespace is ignored."""
        assert format_cidr(parse_cidr("  88.77.66.0/24\n")) == "88.77.66.0/24"

    @pytest.mark.parametrize("text", ["0.0.0.0/0", "255.255.255.255/32", "192.168.0.0/24"])
    def test_prefix_bounds(self, text: str) -> None:
        """Prefix lengths 0 and 32 are both accepted."""
        assert format_cidr(parse_cidr(text)) == text

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "10.0.0.0",
            "10.0.0/8",
            "10.0.0.0/",
            "10.0.0.0/33",
            "256.0.0.0/8",
            "10.0.0.0/255.0.0.0",
            "010.0.0.0/8",
            "10.0.0.0/08",
            "\u0661\u0660.0.0.0/8",
            "10.0.0.0/8/8",
            "a.b.c.d/8",
            "::1/128",
        ],
    )
    def test_rejects_malformed(self, text: str) -> None:
        """Anything other than four decimal octets and a prefix is rejected."""
        with pytest.raises(InvalidCidrFormatError) as exc_info:
            parse_cidr(text)
        assert exc_info.value.code == "InvalidCidrFormat"

    def test_error_names_offending_text(self) -> None:
        """The error is attributed to the text that failed."""
        with pytest.raises(InvalidCidrFormatError) as exc_info:
            parse_cidr("300.1.1.1/24")
        assert exc_info.value.subject == "300.1.1.1/24"
        assert "out of range" in exc_info.value.user_message

    def test_rejects_non_string(self) -> None:
        """Non-string input is a format error, not a TypeError."""
        with pytest.raises(InvalidCidrFormatError):
            parse_cidr(42)  # type: ignore[arg-type]


class TestFormatCidr:
    """Tests for format_cidr and str(IPv4Cidr)."""

    def test_round_trip(self) -> None:
        """Formatting then parsing yields an equal value."""
        cidr = parse_cidr("172.17.0.1/16")
        assert parse_cidr(format_cidr(cidr)) == cidr

    def test_str_matches_format(self) -> None:
        """str() uses the canonical form."""
        cidr = IPv4Cidr(network_address="10.1.2.3", prefix_length=8)
        assert str(cidr) == "10.0.0.0/8"


class TestIPv4Cidr:
    """Tests for the IPv4Cidr model."""

    def test_num_addresses(self) -> None:
        """Block size follows the prefix length."""
        assert parse_cidr("10.0.0.0/16").num_addresses == 65536
        assert parse_cidr("10.0.0.0/32").num_addresses == 1

    def test_to_network(self) -> None:
        """Conversion to ipaddress.IPv4Network keeps the block."""
        assert parse_cidr("10.0.0.0/16").to_network() == ipaddress.IPv4Network("10.0.0.0/16")

    def test_prefix_out_of_range_rejected(self) -> None:
        """Direct construction still enforces the prefix range."""
        with pytest.raises(ValidationError):
            IPv4Cidr(network_address="10.0.0.0", prefix_length=33)

    def test_frozen(self) -> None:
        """IPv4Cidr is immutable."""
        cidr = parse_cidr("10.0.0.0/8")
        with pytest.raises(ValidationError):
            cidr.prefix_length = 16  # type: ignore[misc]


class TestOffsetAddress:
    """Tests for offset_address."""

    def test_dns_service_ip_offset(self) -> None:
        """The DNS service IP sits two addresses into the block."""
        address = offset_address(parse_cidr("10.250.0.0/16"), DNS_SERVICE_IP_OFFSET)
        assert str(address) == "10.250.0.2"

    def test_offset_from_canonicalised_block(self) -> None:
        """Offsets are taken from the canonical network address."""
        address = offset_address(parse_cidr("10.250.9.9/16"), 2)
        assert str(address) == "10.250.0.2"

    def test_zero_offset(self) -> None:
        """Offset zero is the network address."""
        assert str(offset_address(parse_cidr("192.168.1.0/24"), 0)) == "192.168.1.0"

    def test_last_address(self) -> None:
        """The last address in the block is in range."""
        assert str(offset_address(parse_cidr("192.168.1.0/24"), 255)) == "192.168.1.255"

    @pytest.mark.parametrize(("text", "offset"), [("10.0.0.0/31", 2), ("10.0.0.0/24", 256)])
    def test_outside_block(self, text: str, offset: int) -> None:
        """Offsets at or beyond the block size are rejected."""
        with pytest.raises(AddressOutOfRangeError) as exc_info:
            offset_address(parse_cidr(text), offset)
        assert exc_info.value.subject == text

    def test_negative_offset(self) -> None:
        """Negative offsets are rejected."""
        with pytest.raises(AddressOutOfRangeError):
            offset_address(parse_cidr("10.0.0.0/8"), -1)


class TestContains:
    """Tests for contains."""

    def test_address(self) -> None:
        """Addresses inside and outside the block."""
        block = parse_cidr("10.250.0.0/16")
        assert contains(block, "10.250.0.2")
        assert not contains(block, "10.251.0.2")
        assert contains(block, ipaddress.IPv4Address("10.250.255.255"))

    def test_block(self) -> None:
        """A smaller block inside is contained; a larger one is not."""
        block = parse_cidr("10.250.0.0/16")
        assert contains(block, "10.250.4.0/24")
        assert not contains(block, parse_cidr("10.0.0.0/8"))

    def test_invalid_address(self) -> None:
        """Unparseable addresses are reported as format errors."""
        with pytest.raises(InvalidCidrFormatError):
            contains(parse_cidr("10.0.0.0/8"), "not-an-address")
