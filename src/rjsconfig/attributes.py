"""Attribute lookup and typed conversion of attribute values.

``find_attribute()`` fetches a raw attribute value by name and
``parse_as()`` converts it to one of the registered target types.  Both
raise :class:`~rjsconfig.errors.ConfigError` without a location; the
document walker adds it.
"""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Union

from rjsconfig.errors import ConfigError, MissingAttribute, ParseFailure

Attributes = Union[Iterable[tuple[str, str]], Mapping[str, str]]

IP_ADDR = "IpAddr"
U16 = "u16"

_U16_MAX = 0xFFFF
_DECIMAL = re.compile(r"\+?[0-9]+")


def find_attribute(attributes: Attributes, name: str) -> str:
    """Return the value of the first attribute whose key equals *name*.

    Raises:
        ConfigError: with a ``MissingAttribute`` cause when no key matches.
    """
    pairs = attributes.items() if isinstance(attributes, Mapping) else attributes
    for key, value in pairs:
        if key == name:
            return value
    raise ConfigError(MissingAttribute(name=name))


def _to_ip_addr(value: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    # scoped IPv6 addresses (fe80::1%eth0) are not plain addresses
    if "%" in value:
        raise ValueError("invalid IP address syntax")
    return ipaddress.ip_address(value)


def _to_u16(value: str) -> int:
    if not value:
        raise ValueError("cannot parse integer from empty string")
    if not _DECIMAL.fullmatch(value):
        raise ValueError("invalid digit found in string")
    if len(value.lstrip("+").lstrip("0")) > 5:
        raise ValueError("number too large to fit in target type")
    number = int(value)
    if number > _U16_MAX:
        raise ValueError("number too large to fit in target type")
    return number


_CONVERTERS: dict[str, Callable[[str], Any]] = {
    IP_ADDR: _to_ip_addr,
    U16: _to_u16,
}


def parse_as(value: str, to: str) -> Any:
    """Convert *value* to the target type registered under *to*.

    Raises:
        ConfigError: with a ``ParseFailure`` cause on malformed or
            out-of-range input.
        KeyError: if *to* is not a registered target.
    """
    converter = _CONVERTERS[to]
    try:
        return converter(value)
    except ValueError as exc:
        raise ConfigError(
            ParseFailure(input=value, to=to, cause=str(exc))
        ) from exc
