"""Unit tests for rjsconfig.attributes -- lookup and typed conversion."""

from __future__ import annotations

import ipaddress

import pytest

from rjsconfig.attributes import IP_ADDR, U16, find_attribute, parse_as
from rjsconfig.errors import ConfigError, MissingAttribute, ParseFailure, UNKNOWN_LOCATION


# ======================================================================
# find_attribute tests
# ======================================================================


class TestFindAttribute:
    """Tests for find_attribute."""

    def test_returns_value(self):
        attrs = [("prejezd", "P1"), ("ip", "10.0.0.1")]
        assert find_attribute(attrs, "ip") == "10.0.0.1"

    def test_first_match_wins(self):
        attrs = [("type", "first"), ("type", "second")]
        assert find_attribute(attrs, "type") == "first"

    def test_mapping_accepted(self):
        assert find_attribute({"alias": "dls"}, "alias") == "dls"

    def test_empty_value_is_present(self):
        assert find_attribute([("type", "")], "type") == ""

    def test_key_must_match_exactly(self):
        with pytest.raises(ConfigError) as excinfo:
            find_attribute([("IP", "10.0.0.1"), ("ns:ip", "10.0.0.1")], "ip")
        assert excinfo.value.cause == MissingAttribute(name="ip")

    def test_missing_has_no_location_yet(self):
        with pytest.raises(ConfigError) as excinfo:
            find_attribute([], "port")
        assert excinfo.value.location == UNKNOWN_LOCATION


# ======================================================================
# parse_as tests
# ======================================================================


class TestParseIpAddr:
    """Tests for IP address conversion."""

    def test_ipv4(self):
        assert parse_as("10.0.0.1", IP_ADDR) == ipaddress.IPv4Address("10.0.0.1")

    def test_ipv6(self):
        assert parse_as("2001:db8::1", IP_ADDR) == ipaddress.IPv6Address("2001:db8::1")

    @pytest.mark.parametrize(
        "value",
        ["", "10.0.0", "10.0.0.256", "not-an-ip", "10.0.0.1/24", "fe80::1%eth0", "fe80::1%1"],
    )
    def test_malformed(self, value):
        with pytest.raises(ConfigError) as excinfo:
            parse_as(value, IP_ADDR)
        cause = excinfo.value.cause
        assert isinstance(cause, ParseFailure)
        assert cause.input == value
        assert cause.to == "IpAddr"
        assert cause.cause


class TestParseU16:
    """Tests for unsigned 16-bit integer conversion."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("0", 0), ("5000", 5000), ("65535", 65535), ("+80", 80), ("00080", 80)],
    )
    def test_valid(self, value, expected):
        assert parse_as(value, U16) == expected

    def test_out_of_range(self):
        with pytest.raises(ConfigError) as excinfo:
            parse_as("70000", U16)
        assert excinfo.value.cause == ParseFailure(
            input="70000",
            to="u16",
            cause="number too large to fit in target type",
        )

    def test_very_long_number_is_out_of_range(self):
        value = "9" * 5000
        with pytest.raises(ConfigError) as excinfo:
            parse_as(value, U16)
        assert excinfo.value.cause.cause == "number too large to fit in target type"

    def test_leading_zeros_do_not_count(self):
        assert parse_as("0" * 20 + "65535", U16) == 65535

    def test_empty(self):
        with pytest.raises(ConfigError) as excinfo:
            parse_as("", U16)
        assert excinfo.value.cause.cause == "cannot parse integer from empty string"

    @pytest.mark.parametrize("value", ["-1", " 80", "80 ", "8_0", "0x50", "80.0", "+"])
    def test_invalid_digit(self, value):
        with pytest.raises(ConfigError) as excinfo:
            parse_as(value, U16)
        assert excinfo.value.cause.cause == "invalid digit found in string"

    def test_unknown_target(self):
        with pytest.raises(KeyError):
            parse_as("1", "f64")
