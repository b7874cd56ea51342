"""Record builders for ``<rjs>`` and ``<dlsip>`` elements.

Each builder reads the attributes it needs in a fixed order and either
returns a complete record or raises the first
:class:`~rjsconfig.errors.ConfigError` it meets.
"""

from __future__ import annotations

from rjsconfig.attributes import IP_ADDR, U16, Attributes, find_attribute, parse_as
from rjsconfig.errors import ConfigError, InvalidValue
from rjsconfig.models import Connection, DlsIP, DlsIPHosts, DlsIPStatic, Rjs


def build_rjs(attributes: Attributes) -> Rjs:
    """Build an ``Rjs`` from ``prejezd``, ``ip``, ``port`` and ``type``."""
    prejezd = find_attribute(attributes, "prejezd")
    ip = parse_as(find_attribute(attributes, "ip"), IP_ADDR)
    port = parse_as(find_attribute(attributes, "port"), U16)
    rjs_type = find_attribute(attributes, "type")
    return Rjs(prejezd=prejezd, ip=ip, port=port, rjs_type=rjs_type)


def build_dlsip(attributes: Attributes) -> DlsIP:
    """Build the ``DlsIP`` variant selected by the ``source`` attribute.

    ``HOSTS`` needs ``connection`` (checked first) and ``alias``;
    ``STATIC`` needs ``ip``.
    """
    source = find_attribute(attributes, "source")

    if source == "HOSTS":
        raw_connection = find_attribute(attributes, "connection")
        try:
            connection = Connection(raw_connection)
        except ValueError:
            raise ConfigError(
                InvalidValue(name="connection", value=raw_connection)
            ) from None
        alias = find_attribute(attributes, "alias")
        return DlsIPHosts(alias=alias, connection=connection)

    if source == "STATIC":
        ip = parse_as(find_attribute(attributes, "ip"), IP_ADDR)
        return DlsIPStatic(ip=ip)

    raise ConfigError(InvalidValue(name="source", value=source))
