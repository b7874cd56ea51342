"""Pydantic models for records read from an RJS config document.

Contains ``Rjs``, the ``DlsIP`` variants (``DlsIPHosts`` and
``DlsIPStatic``), ``Connection`` and the ``XmlData`` result.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress

from rjsconfig.attributes import Attributes


class Connection(str, Enum):
    """Link type of a HOSTS diagnostic entry."""

    P2P = "P2P"
    BROADCAST = "BROADCAST"


class Rjs(BaseModel):
    """Railway-crossing endpoint: crossing id, address, port and type."""

    model_config = ConfigDict(frozen=True)

    prejezd: str
    ip: IPvAnyAddress
    port: int = Field(ge=0, le=65535)
    rjs_type: str

    @classmethod
    def from_attributes(cls, attributes: Attributes) -> Rjs:
        """Build from ``<rjs>`` attributes; see :func:`rjsconfig.builders.build_rjs`."""
        from rjsconfig.builders import build_rjs

        return build_rjs(attributes)


class DlsIPHosts(BaseModel):
    """Diagnostic entry resolved through the hosts table."""

    model_config = ConfigDict(frozen=True)

    source: Literal["HOSTS"] = "HOSTS"
    alias: str
    connection: Connection


class DlsIPStatic(BaseModel):
    """Diagnostic entry with a fixed address."""

    model_config = ConfigDict(frozen=True)

    source: Literal["STATIC"] = "STATIC"
    ip: IPvAnyAddress


DlsIP = Annotated[Union[DlsIPHosts, DlsIPStatic], Field(discriminator="source")]


class XmlData(BaseModel):
    """Everything read from one document, each sequence in document order."""

    model_config = ConfigDict(frozen=True)

    rjss: tuple[Rjs, ...] = ()
    diagnet: tuple[DlsIP, ...] = ()
