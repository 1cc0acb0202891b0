"""jcmp - path-by-path comparison of two JSON documents."""

from __future__ import annotations

from jcmp.accessor import Value, ValueKind, resolve
from jcmp.api import compare, diff_events, is_identical
from jcmp.classifier import Outcome, classify
from jcmp.config import CompareConfig
from jcmp.engine import PathComparator
from jcmp.errors import DocumentLoadError, InvalidPathError, JcmpError
from jcmp.events import DiffEvent, EventTag
from jcmp.paths import decode_path, display_form, encode_child

__version__: str = "0.1.0"
__all__: list[str] = [
    "CompareConfig",
    "DiffEvent",
    "DocumentLoadError",
    "EventTag",
    "InvalidPathError",
    "JcmpError",
    "Outcome",
    "PathComparator",
    "Value",
    "ValueKind",
    "classify",
    "compare",
    "decode_path",
    "diff_events",
    "display_form",
    "encode_child",
    "is_identical",
    "resolve",
]
