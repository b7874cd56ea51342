"""Pull-based XML event reader built on expat.

``iter_events()`` feeds the document to an expat parser in chunks and
yields ``StartElement``, ``EmptyElement``, ``EndElement`` and finally
``EndOfDocument``.  Self-closing tags (``<rjs ... />``) are reported as a
single ``EmptyElement`` instead of a start/end pair, which is how the
walker tells them apart from ``<rjs ...></rjs>``.
"""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union
from xml.parsers import expat

from rjsconfig.errors import XmlSyntaxError

DEFAULT_CHUNK_SIZE = 64 * 1024

# A start tag up to and including its closing '>', skipping quoted values.
_START_TAG = re.compile(rb"""(?:[^>"']|"[^"]*"|'[^']*')*>""")


@dataclass(frozen=True)
class StartElement:
    name: str
    attributes: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class EmptyElement:
    name: str
    attributes: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class EndElement:
    name: str


@dataclass(frozen=True)
class EndOfDocument:
    pass


Event = Union[StartElement, EmptyElement, EndElement, EndOfDocument]


def _is_self_closing(data: bytes, start: int) -> bool:
    """Return True if the start tag beginning at byte *start* ends in ``/>``."""
    match = _START_TAG.match(data, start)
    return match is not None and data[match.end() - 2 : match.end()] == b"/>"


def iter_events(text: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[Event]:
    """Yield XML events for *text* in document order.

    Events produced before a syntax error are still yielded, then
    :class:`~rjsconfig.errors.XmlSyntaxError` is raised.

    Args:
        text: The whole document.
        chunk_size: Number of UTF-8 bytes handed to expat per step.
    """
    data = text.encode("utf-8")
    parser = expat.ParserCreate(encoding="utf-8")
    parser.ordered_attributes = True

    pending: deque[Event] = deque()
    skip_next_end = False

    def on_start(name: str, attrs: list[str]) -> None:
        nonlocal skip_next_end
        pairs = tuple(zip(attrs[0::2], attrs[1::2]))
        if _is_self_closing(data, parser.CurrentByteIndex):
            pending.append(EmptyElement(name, pairs))
            # expat reports the matching end immediately
            skip_next_end = True
        else:
            pending.append(StartElement(name, pairs))

    def on_end(name: str) -> None:
        nonlocal skip_next_end
        if skip_next_end:
            skip_next_end = False
            return
        pending.append(EndElement(name))

    parser.StartElementHandler = on_start
    parser.EndElementHandler = on_end

    offset = 0
    while True:
        chunk = data[offset : offset + chunk_size]
        offset += len(chunk)
        final = offset >= len(data)

        failure: expat.ExpatError | None = None
        try:
            parser.Parse(chunk, final)
        except expat.ExpatError as exc:
            failure = exc

        while pending:
            yield pending.popleft()

        if failure is not None:
            raise XmlSyntaxError(
                expat.ErrorString(failure.code), failure.lineno, failure.offset
            ) from failure
        if final:
            break

    yield EndOfDocument()
