"""XmlConfigReader -- document walker and public API of rjsconfig.

Reads a config document into :class:`~rjsconfig.models.XmlData`:

1. Security scan via :class:`XmlSecurityScanner`.
2. Pull XML events via :func:`iter_events`.
3. Track open elements in an :class:`ElementPath`.
4. Dispatch self-closing ``<rjs>`` / ``<dlsip>`` elements to their builders.
5. Stamp any configuration error with the element path and re-raise.

The reader is **all-or-nothing**: the first error aborts the walk and no
records are returned.
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable

from rjsconfig.builders import build_dlsip, build_rjs
from rjsconfig.config import XmlReaderConfig
from rjsconfig.errors import ConfigError, ConfigIOError, RjsConfigException
from rjsconfig.events import EmptyElement, EndElement, EndOfDocument, StartElement, iter_events
from rjsconfig.models import DlsIP, Rjs, XmlData
from rjsconfig.path import ElementPath
from rjsconfig.security import XmlSecurityScanner

logger = logging.getLogger("rjsconfig")


def local_name(tag: str) -> str:
    """Strip a ``prefix:`` from *tag*."""
    return tag.rpartition(":")[2]


class XmlConfigReader:
    """Walks config documents and collects their records.

    Parameters
    ----------
    config:
        Reader configuration.  Uses defaults when *None*.
    """

    def __init__(self, config: XmlReaderConfig | None = None) -> None:
        self._config = config or XmlReaderConfig()
        self._security_scanner = XmlSecurityScanner(self._config)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def read_file(self, path: str | os.PathLike[str]) -> XmlData:
        """Read the whole file at *path* and parse it.

        Raises:
            ConfigIOError: If the file cannot be opened, read or decoded.
            RjsConfigException: Any error raised by :meth:`read`.
        """
        try:
            with open(path, "rb") as fh:
                raw = fh.read()
        except OSError as exc:
            raise ConfigIOError(f"Cannot read file {path}: {exc}") from exc

        try:
            text = raw.decode(self._config.encoding)
        except UnicodeDecodeError as exc:
            raise ConfigIOError(
                f"File {path} is not valid {self._config.encoding}: {exc}"
            ) from exc

        return self.read(text, source=os.fspath(path))

    def read(self, text: str, source: str = "<string>") -> XmlData:
        """Parse *text* and return every ``rjs`` and ``dlsip`` record.

        Raises:
            SecurityRejectedError: If the pre-flight scan fails.
            XmlSyntaxError: On malformed markup.
            ConfigError: On the first invalid element, with its location.
        """
        start = time.monotonic()
        try:
            self._security_scanner.scan(text)
            data = self._walk(text)
        except RjsConfigException as exc:
            logger.error(
                "rjsconfig | source=%s | code=%s | detail=%s",
                source,
                exc.code.value,
                exc.message,
            )
            raise

        logger.info(
            "rjsconfig | source=%s | parser=%s | rjs=%d | dlsip=%d | time=%.3fs",
            source,
            self._config.parser_version,
            len(data.rjss),
            len(data.diagnet),
            time.monotonic() - start,
        )
        return data

    # ------------------------------------------------------------------
    # Walk
    # ------------------------------------------------------------------

    def _walk(self, text: str) -> XmlData:
        path = ElementPath(self._config.max_tracked_depth)
        rjss: list[Rjs] = []
        diagnet: list[DlsIP] = []

        consumers: dict[str, tuple[Callable, list]] = {
            "rjs": (build_rjs, rjss),
            "dlsip": (build_dlsip, diagnet),
        }

        for event in iter_events(text, self._config.read_chunk_size):
            if isinstance(event, StartElement):
                path.enter(event.name)
            elif isinstance(event, EmptyElement):
                path.enter(event.name)
                consumer = consumers.get(local_name(event.name))
                if consumer is not None:
                    build, records = consumer
                    try:
                        record = build(event.attributes)
                    except ConfigError as exc:
                        raise exc.at(path.location()) from exc
                    if logger.isEnabledFor(logging.DEBUG):
                        logger.debug(
                            "rjsconfig | tag=%s | location=%s",
                            event.name,
                            path.location(),
                        )
                    records.append(record)
                path.leave()
            elif isinstance(event, EndElement):
                path.leave()
            elif isinstance(event, EndOfDocument):
                break

        return XmlData(rjss=tuple(rjss), diagnet=tuple(diagnet))


def read_from_xml(text: str, config: XmlReaderConfig | None = None) -> XmlData:
    """Parse config *text*; see :meth:`XmlConfigReader.read`."""
    return XmlConfigReader(config).read(text)


def read_from_xml_file(
    path: str | os.PathLike[str], config: XmlReaderConfig | None = None
) -> XmlData:
    """Read and parse the config file at *path*; see :meth:`XmlConfigReader.read_file`."""
    return XmlConfigReader(config).read_file(path)
