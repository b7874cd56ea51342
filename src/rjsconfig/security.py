"""Pre-flight security scanner for config documents.

Rejects oversized documents and documents declaring entities (billion
laughs / XXE prevention) before any parsing begins.
"""

from __future__ import annotations

import re

from rjsconfig.config import XmlReaderConfig
from rjsconfig.errors import ErrorCode, SecurityRejectedError

_COMMENT = re.compile(rb"<!--.*?-->", re.DOTALL)


class XmlSecurityScanner:
    """Run pre-flight security checks on config text.

    :meth:`scan` returns quietly when the document is acceptable and
    raises :class:`~rjsconfig.errors.SecurityRejectedError` otherwise.
    """

    def __init__(self, config: XmlReaderConfig) -> None:
        self.config = config

    def scan(self, text: str) -> None:
        raw = text.encode("utf-8")

        # --- 1. Size limit ---
        max_bytes = self.config.max_file_size_mb * 1024 * 1024
        if len(raw) > max_bytes:
            raise SecurityRejectedError(
                ErrorCode.E_SECURITY_TOO_LARGE,
                f"Document size {len(raw)} bytes exceeds limit of "
                f"{max_bytes} bytes ({self.config.max_file_size_mb} MB)",
            )

        if not self.config.reject_entity_declarations:
            return

        # --- 2. Entity declaration scan ---
        # markup inside comments is inert
        scanned = _COMMENT.sub(b"", raw)
        raw_upper = scanned.upper()
        if b"<!ENTITY" in raw_upper:
            raise SecurityRejectedError(
                ErrorCode.E_SECURITY_ENTITY_DECLARATION,
                "Document contains <!ENTITY declaration "
                "(potential billion laughs / XXE attack)",
            )

        # --- 3. DOCTYPE internal subset ---
        doctype_pos = raw_upper.find(b"<!DOCTYPE")
        if doctype_pos != -1:
            bracket_pos = scanned.find(b"[", doctype_pos)
            close_pos = scanned.find(b">", doctype_pos)
            if bracket_pos != -1 and (close_pos == -1 or bracket_pos < close_pos):
                raise SecurityRejectedError(
                    ErrorCode.E_SECURITY_ENTITY_DECLARATION,
                    "Document contains <!DOCTYPE with internal subset "
                    "(potential entity expansion attack)",
                )
