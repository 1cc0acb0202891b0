"""Traversal engine: the deduplicated, depth-first path-by-path comparison.

``PathComparator`` holds configuration only.  Each ``compare()`` call builds
a fresh ``TraversalRun`` that owns the visited set and blacklist for that run
and yields ``DiffEvent``s lazily, depth-first, in document order.

Per-path state machine::

    visited? -> blacklisted? -> resolve both -> classify -> emit | recurse

Pending paths live on an explicit stack, so nesting depth is bounded by
memory rather than the interpreter recursion limit.  Children are pushed in
reverse (left keys first, then right-only keys) so they pop in document
order.  The visited set is keyed by segment tuples: a root-level empty key
(segments ``("",)``) has the canonical path ``""`` yet is distinct from the
root (``()``), and each such location is classified once.

Entry point: when both documents hold containers of the same kind at the
start path, the start path itself is not reported and its children are
walked directly, even when the two containers are equal.  Any other start
value is classified like an ordinary path.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterator
from typing import Any

from jcmp.accessor import MISSING, Value, ValueAccessor, child_keys, step
from jcmp.blacklist import is_blacklisted
from jcmp.classifier import Classification, Outcome, classify
from jcmp.config import CompareConfig
from jcmp.events import DiffEvent, EventTag
from jcmp.paths import decode_path, display_form, encode_child, encode_path

__all__ = ["PathComparator", "TraversalRun"]

logger = logging.getLogger(__name__)

# Terminal outcomes map directly to a single event tag.
_TERMINAL_TAGS: dict[Outcome, EventTag] = {
    Outcome.NOT_EXIST_BOTH: EventTag.NOT_EXIST_BOTH,
    Outcome.ADDED: EventTag.ADDED,
    Outcome.DELETED: EventTag.DELETED,
    Outcome.TYPE_MISMATCH: EventTag.TYPE_MISMATCH,
}

# (canonical path, segments, left node, right node); nodes may be MISSING.
_Pending = tuple[str, tuple[str, ...], Any, Any]


def _node(value: Value) -> Any:
    return value.raw if value.exists else MISSING


class TraversalRun:
    """State of a single comparison run.

    Not reusable: ``events()`` may be consumed once.  The visited set and
    blacklist belong to this instance and are discarded with it.

    Args:
        left:   Left (old) parsed JSON document.
        right:  Right (new) parsed JSON document.
        config: Settings for this run.
    """

    def __init__(self, left: Any, right: Any, config: CompareConfig) -> None:
        self._config = config
        self._left = ValueAccessor(left, cache_size=config.path_cache_size)
        self._right = ValueAccessor(right, cache_size=config.path_cache_size)
        self._blacklist: tuple[str, ...] = config.blacklist
        self._visited: set[tuple[str, ...]] = set()
        self._started = False
        self.counts: Counter[EventTag] = Counter()

    @property
    def visited(self) -> frozenset[str]:
        """Canonical paths visited so far, including the start path."""
        return frozenset(encode_path(segments) for segments in self._visited)

    def events(self, start_path: str = "") -> Iterator[DiffEvent]:
        """Yield the events of this run, starting at ``start_path``.

        Raises:
            RuntimeError: If called a second time on the same run.
            InvalidPathError: If ``start_path`` is not a valid canonical path.
        """
        if self._started:
            raise RuntimeError("a TraversalRun can only be consumed once")
        self._started = True
        decode_path(start_path)  # validate eagerly

        return self._run(start_path)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _run(self, start_path: str) -> Iterator[DiffEvent]:
        logger.debug("comparing from %r", display_form(start_path) or "<root>")
        for event in self._walk(start_path):
            self.counts[event.tag] += 1
            yield event
        logger.debug(
            "comparison finished: %d paths visited, %s",
            len(self._visited),
            dict(self.counts) or "no events",
        )

    def _walk(self, start_path: str) -> Iterator[DiffEvent]:
        segments = self._left.segments(start_path)
        left = self._left.resolve(start_path)
        right = self._right.resolve(start_path)
        stack: list[_Pending] = []
        if (
            left.exists
            and right.exists
            and left.kind is right.kind
            and left.kind.is_container
            and not is_blacklisted(start_path, self._blacklist)
        ):
            self._visited.add(segments)
            self._push_children(stack, start_path, segments, left, right)
        else:
            stack.append((start_path, segments, _node(left), _node(right)))

        while stack:
            path, segments, left_node, right_node = stack.pop()
            if segments in self._visited:
                continue
            self._visited.add(segments)

            if is_blacklisted(path, self._blacklist):
                yield DiffEvent(path, EventTag.BLACKLISTED)
                continue

            left = Value.from_node(left_node)
            right = Value.from_node(right_node)
            result = classify(left, right, self._config.max_value_length)

            yield from self._emit(path, result)

            if result.recurse:
                self._push_children(stack, path, segments, left, right)

    @staticmethod
    def _push_children(
        stack: list[_Pending],
        path: str,
        segments: tuple[str, ...],
        left: Value,
        right: Value,
    ) -> None:
        # Left keys first, then right-only keys; pushed reversed so the first
        # key is popped first.
        keys = list(dict.fromkeys(child_keys(left) + child_keys(right)))
        for key in reversed(keys):
            stack.append(
                (
                    encode_child(path, key),
                    (*segments, key),
                    step(left.raw, key),
                    step(right.raw, key),
                )
            )

    def _emit(self, path: str, result: Classification) -> Iterator[DiffEvent]:
        outcome = result.outcome
        if outcome in _TERMINAL_TAGS:
            yield DiffEvent(
                path, _TERMINAL_TAGS[outcome], result.left_text, result.right_text
            )
        elif outcome is Outcome.EQUAL_BOTH:
            if not self._config.strict:
                yield DiffEvent(path, EventTag.EXISTS)
                yield DiffEvent(path, EventTag.EQUAL)
        elif result.recurse:
            yield DiffEvent(path, EventTag.CONTAINER_DIFFERS)
        else:
            yield DiffEvent(
                path, EventTag.VALUE_DIFFERS, result.left_text, result.right_text
            )


class PathComparator:
    """Compares two JSON documents path by path.

    Holds configuration only; every ``compare()`` call starts an independent
    ``TraversalRun`` with a fresh visited set, so one comparator can be
    reused safely.

    Example::

        from jcmp.engine import PathComparator

        cmp = PathComparator()
        for event in cmp.compare({"x": {"y": 1}}, {"x": {"y": 2}}):
            print(event.tag, event.path)
        # container_differs x
        # value_differs x.y
    """

    def __init__(self, config: CompareConfig | None = None) -> None:
        self._config: CompareConfig = config if config is not None else CompareConfig()

    @property
    def config(self) -> CompareConfig:
        return self._config

    def run(self, left: Any, right: Any) -> TraversalRun:
        """Create a new run over ``left`` and ``right`` without starting it."""
        return TraversalRun(left, right, self._config)

    def compare(
        self, left: Any, right: Any, start_path: str = ""
    ) -> Iterator[DiffEvent]:
        """Lazily compare ``left`` (old) against ``right`` (new).

        Args:
            left:       Left (old) parsed JSON document.
            right:      Right (new) parsed JSON document.
            start_path: Canonical path to start at; "" compares from the root.

        Returns:
            A single-pass iterator of ``DiffEvent``s in depth-first document
            order.
        """
        return self.run(left, right).events(start_path)
