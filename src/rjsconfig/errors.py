"""Error codes, structured error model and exceptions for rjsconfig.

``ErrorCode`` lists every failure the reader can report.  Configuration
failures carry a *cause* model (``ParseFailure``, ``MissingAttribute`` or
``InvalidValue``) and a location string naming the XML element path.

Every exception raised by the package derives from ``RjsConfigException``
and wraps a ``ReadError`` pydantic model as its ``.error`` attribute, so
callers can inspect or serialize failures without parsing messages.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_LOCATION = "unknown location"


class ErrorCode(str, Enum):
    """Error codes for config reading.

    Values equal their names so they are stable strings suitable for
    logs and alerting.
    """

    # Input
    E_IO = "E_IO"
    E_XML_SYNTAX = "E_XML_SYNTAX"

    # Security
    E_SECURITY_TOO_LARGE = "E_SECURITY_TOO_LARGE"
    E_SECURITY_ENTITY_DECLARATION = "E_SECURITY_ENTITY_DECLARATION"

    # Configuration content
    E_CONFIG_PARSE = "E_CONFIG_PARSE"
    E_CONFIG_MISSING_ATTRIBUTE = "E_CONFIG_MISSING_ATTRIBUTE"
    E_CONFIG_INVALID_VALUE = "E_CONFIG_INVALID_VALUE"


# ----------------------------------------------------------------------
# Causes of configuration errors
# ----------------------------------------------------------------------


class ParseFailure(BaseModel):
    """An attribute value could not be converted to its target type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["parse"] = "parse"
    input: str
    to: str
    cause: str

    @property
    def code(self) -> ErrorCode:
        return ErrorCode.E_CONFIG_PARSE

    def __str__(self) -> str:
        return f"Error parsing {self.input} as {self.to}"


class MissingAttribute(BaseModel):
    """A required attribute is absent from the element."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["missing_attribute"] = "missing_attribute"
    name: str

    @property
    def code(self) -> ErrorCode:
        return ErrorCode.E_CONFIG_MISSING_ATTRIBUTE

    def __str__(self) -> str:
        return f"Missing {self.name} attribute"


class InvalidValue(BaseModel):
    """An attribute holds a value outside its allowed set."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["invalid_value"] = "invalid_value"
    name: str
    value: str

    @property
    def code(self) -> ErrorCode:
        return ErrorCode.E_CONFIG_INVALID_VALUE

    def __str__(self) -> str:
        return f"Invalid value {self.value} in {self.name} attribute"


ConfigCause = Annotated[
    Union[ParseFailure, MissingAttribute, InvalidValue],
    Field(discriminator="kind"),
]


class ReadError(BaseModel):
    """Structured error with code, message, and XML location context.

    ``location`` is only set for configuration errors; I/O, syntax and
    security failures happen before any element is reached.
    """

    code: ErrorCode
    message: str
    stage: str | None = None
    location: str | None = None
    cause: ConfigCause | None = None


# ----------------------------------------------------------------------
# Exceptions
# ----------------------------------------------------------------------


class RjsConfigException(Exception):
    """Base for every error raised while reading a config document.

    Carries the structured ``ReadError`` as the ``.error`` attribute.
    """

    def __init__(self, error: ReadError) -> None:
        self.error = error
        super().__init__(error.message)

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def stage(self) -> str | None:
        return self.error.stage


class ConfigIOError(RjsConfigException):
    """The config file could not be opened, read or decoded."""

    def __init__(self, message: str) -> None:
        super().__init__(
            ReadError(code=ErrorCode.E_IO, message=message, stage="read")
        )


class XmlSyntaxError(RjsConfigException):
    """The document is not well-formed XML.

    ``line`` is 1-based and ``column`` 0-based, as reported by expat.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(
            ReadError(code=ErrorCode.E_XML_SYNTAX, message=message, stage="parse")
        )


class SecurityRejectedError(RjsConfigException):
    """The document failed a pre-flight security check."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(ReadError(code=code, message=message, stage="security"))


class ConfigError(RjsConfigException):
    """An element's attributes do not describe a valid record.

    Record builders raise it without a location; the document walker
    re-raises it through :meth:`at` once the element path is known.
    """

    def __init__(
        self,
        cause: ParseFailure | MissingAttribute | InvalidValue,
        location: str = UNKNOWN_LOCATION,
    ) -> None:
        super().__init__(
            ReadError(
                code=cause.code,
                message=f"{cause} at {location}",
                stage="build",
                location=location,
                cause=cause,
            )
        )

    @property
    def cause(self) -> ParseFailure | MissingAttribute | InvalidValue:
        return self.error.cause  # type: ignore[return-value]

    @property
    def location(self) -> str:
        return self.error.location or UNKNOWN_LOCATION

    def at(self, location: str) -> ConfigError:
        """Return a new error with the same cause stamped with *location*."""
        return ConfigError(self.cause, location)
