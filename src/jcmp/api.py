"""Public API functions for jcmp.

Each call creates a fresh ``PathComparator`` run, so no state is shared
between calls.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import replace
from typing import Any

from jcmp.config import CompareConfig
from jcmp.engine import PathComparator
from jcmp.events import DiffEvent, EventTag

__all__ = ["compare", "diff_events", "is_identical"]


def diff_events(
    left: Any,
    right: Any,
    start_path: str = "",
    config: CompareConfig | None = None,
) -> Iterator[DiffEvent]:
    """Lazily yield the classified events for two parsed JSON documents.

    Args:
        left:       Left (old) JSON value (dict, list, str, int, float, bool, None).
        right:      Right (new) JSON value.
        start_path: Canonical path to compare from. Defaults to the root.
        config:     Comparison settings. Defaults to ``CompareConfig()`` when None.

    Returns:
        A single-pass iterator of ``DiffEvent``s in depth-first order.
    """
    return PathComparator(config=config).compare(left, right, start_path)


def compare(
    left: Any,
    right: Any,
    start_path: str = "",
    config: CompareConfig | None = None,
) -> list[DiffEvent]:
    """Compare two parsed JSON documents and return every event as a list.

    Same arguments as ``diff_events()``.
    """
    return list(diff_events(left, right, start_path, config=config))


def is_identical(
    left: Any,
    right: Any,
    config: CompareConfig | None = None,
) -> bool:
    """Return True if a strict comparison of the two documents reports nothing.

    Blacklisted paths are skipped, so documents that differ only below a
    blacklisted path are identical.
    """
    strict = replace(config if config is not None else CompareConfig(), strict=True)
    return all(
        event.tag is EventTag.BLACKLISTED
        for event in diff_events(left, right, config=strict)
    )
