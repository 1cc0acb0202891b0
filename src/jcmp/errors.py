"""Exception hierarchy for jcmp.

Nothing raised here comes from a classification: every outcome of a
comparison is a normal report.  These exceptions cover the edges of the
system, namely documents that cannot be loaded and canonical paths that
cannot be decoded.
"""

from __future__ import annotations

__all__ = ["DocumentLoadError", "InvalidPathError", "JcmpError"]


class JcmpError(Exception):
    """Base class for all jcmp errors."""


class DocumentLoadError(JcmpError, ValueError):
    """A JSON document could not be read or parsed.

    Attributes:
        source: File name (or ``"<string>"``) the document came from.
        reason: Human-readable description of the underlying failure.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"cannot load JSON document {source!r}: {reason}")


class InvalidPathError(JcmpError, ValueError):
    """A canonical path string is malformed (e.g. ends in a lone escape)."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"invalid path {path!r}: {reason}")
