"""rjsconfig -- typed reader for RJS / DlsIP XML config files.

Public API re-exports for convenient access.
"""

from rjsconfig.config import XmlReaderConfig
from rjsconfig.errors import (
    ConfigError,
    ConfigIOError,
    ErrorCode,
    InvalidValue,
    MissingAttribute,
    ParseFailure,
    ReadError,
    RjsConfigException,
    SecurityRejectedError,
    XmlSyntaxError,
)
from rjsconfig.models import Connection, DlsIP, DlsIPHosts, DlsIPStatic, Rjs, XmlData
from rjsconfig.reader import XmlConfigReader, read_from_xml, read_from_xml_file

__all__ = [
    "XmlConfigReader",
    "XmlReaderConfig",
    "read_from_xml",
    "read_from_xml_file",
    "XmlData",
    "Rjs",
    "DlsIP",
    "DlsIPHosts",
    "DlsIPStatic",
    "Connection",
    "ErrorCode",
    "ReadError",
    "RjsConfigException",
    "ConfigError",
    "ConfigIOError",
    "XmlSyntaxError",
    "SecurityRejectedError",
    "ParseFailure",
    "MissingAttribute",
    "InvalidValue",
]
