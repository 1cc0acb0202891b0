"""Value accessor: resolve canonical paths against parsed JSON documents.

A ``Value`` records whether a path is reachable in a document, what kind of
JSON value sits there, and a serialized text used for both equality checks
and display.  Existence reflects reachability only, so a JSON ``null`` at a
path exists (kind ``null``) and is distinct from a missing key.

Serialized text:
- strings:            their raw content, unquoted
- numbers/booleans:   their JSON spelling (``1``, ``2.5``, ``true``)
- null:               ``null``
- objects/arrays:     compact JSON with sorted keys
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from cachetools import LRUCache

from jcmp.paths import decode_path

__all__ = [
    "MISSING",
    "Value",
    "ValueAccessor",
    "ValueKind",
    "child_keys",
    "kind_of",
    "resolve",
    "serialize",
    "step",
]

# Sentinel for a node that is not reachable in a document.
MISSING: Any = object()


class ValueKind(StrEnum):
    """Kind of the JSON value found at a path.

    ``NONE`` is reserved for paths that do not exist; it is never the kind
    of a real JSON value.
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    NONE = auto()

    @property
    def is_container(self) -> bool:
        return self in (ValueKind.OBJECT, ValueKind.ARRAY)


@dataclass(frozen=True, slots=True)
class Value:
    """The result of resolving one path against one document.

    Attributes:
        exists: True when the path is reachable from the root.
        kind:   JSON kind of the value, ``ValueKind.NONE`` when missing.
        text:   Serialized form (see module docstring); "" when missing.
        raw:    The underlying Python value (None when missing).
    """

    exists: bool
    kind: ValueKind
    text: str
    raw: Any = None

    @classmethod
    def missing(cls) -> Value:
        return cls(exists=False, kind=ValueKind.NONE, text="")

    @classmethod
    def from_node(cls, node: Any) -> Value:
        """Wrap a raw node, mapping ``MISSING`` to ``Value.missing()``."""
        if node is MISSING:
            return cls.missing()
        return cls.of(node)

    @classmethod
    def of(cls, raw: Any) -> Value:
        """Wrap an existing JSON value."""
        return cls(exists=True, kind=kind_of(raw), text=serialize(raw), raw=raw)


def kind_of(raw: Any) -> ValueKind:
    """Return the ValueKind of a parsed JSON value.

    Raises:
        TypeError: If ``raw`` is not a JSON-compatible Python value.
    """
    # bool MUST be checked before int: bool subclasses int
    if isinstance(raw, bool):
        return ValueKind.BOOLEAN
    if isinstance(raw, dict):
        return ValueKind.OBJECT
    if isinstance(raw, list):
        return ValueKind.ARRAY
    if isinstance(raw, str):
        return ValueKind.STRING
    if isinstance(raw, (int, float)):
        return ValueKind.NUMBER
    if raw is None:
        return ValueKind.NULL
    raise TypeError(f"Unsupported JSON value type: {type(raw)!r}")


def serialize(raw: Any) -> str:
    """Return the serialized text of a parsed JSON value."""
    if isinstance(raw, str):
        return raw
    return json.dumps(raw, ensure_ascii=False, separators=(",", ":"), sort_keys=True)


def _index(segment: str) -> int | None:
    """Parse a canonical decimal array index ("0", "12"), else None."""
    if not segment.isdecimal() or not segment.isascii():
        return None
    if len(segment) > 1 and segment[0] == "0":
        return None
    return int(segment)


def step(node: Any, segment: str) -> Any:
    """Return the child of a raw ``node`` named by ``segment``, or ``MISSING``."""
    if isinstance(node, dict):
        return node.get(segment, MISSING)
    if isinstance(node, list):
        idx = _index(segment)
        if idx is None or idx >= len(node):
            return MISSING
        return node[idx]
    # Scalars have no children.
    return MISSING


def _walk(document: Any, segments: tuple[str, ...]) -> Value:
    node = document
    for segment in segments:
        node = step(node, segment)
        if node is MISSING:
            break
    return Value.from_node(node)


def resolve(document: Any, canonical: str) -> Value:
    """Resolve ``canonical`` against ``document``.

    Args:
        document:  A parsed JSON value; never mutated.
        canonical: Canonical path; "" is the root, which always exists.

    Returns:
        The ``Value`` at the path, or ``Value.missing()`` when an object key
        is absent, an array index is out of range or not a decimal index,
        or the path descends below a scalar.
    """
    return _walk(document, decode_path(canonical))


class ValueAccessor:
    """Resolves paths against one bound document.

    Decoded path segments are held in a per-instance ``LRUCache`` so
    repeated lookups skip unescaping.  Two accessors never share cache state.

    Example::

        accessor = ValueAccessor({"a": [10, 20]})
        accessor.resolve("a.1").text   # "20"
    """

    def __init__(self, document: Any, cache_size: int = 1024) -> None:
        self._document = document
        self._segments: LRUCache[str, tuple[str, ...]] = LRUCache(maxsize=cache_size)

    def segments(self, canonical: str) -> tuple[str, ...]:
        """Return the decoded segments of ``canonical`` (cached)."""
        cached = self._segments.get(canonical)
        if cached is None:
            cached = decode_path(canonical)
            self._segments[canonical] = cached
        return cached

    def resolve(self, canonical: str) -> Value:
        return _walk(self._document, self.segments(canonical))


def child_keys(value: Value) -> list[str]:
    """Return the child segments of a resolved container value."""
    if value.kind is ValueKind.OBJECT:
        return list(value.raw.keys())
    if value.kind is ValueKind.ARRAY:
        return [str(i) for i in range(len(value.raw))]
    return []
