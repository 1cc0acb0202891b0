"""Integration tests for the public API surface.

All imports are from the top-level ``jcmp`` package, never from internal
submodules.  Walks the reference scenarios end to end, from JSON text
through parsing and comparison to rendered report lines.
"""

from __future__ import annotations

import io

from jcmp import CompareConfig, DiffEvent, EventTag, compare, diff_events
from jcmp.loader import parse_document
from jcmp.reporter import Reporter


def _report(left: str, right: str, config: CompareConfig | None = None) -> list[str]:
    stream = io.StringIO()
    events = diff_events(parse_document(left), parse_document(right), config=config)
    Reporter(stream=stream, color=False).report(events)
    return stream.getvalue().splitlines()


class TestSC1Equal:
    """SC1 — equal documents report equality at the shared key."""

    def test_events(self) -> None:
        events = compare({"x": 1}, {"x": 1})
        assert [e.tag for e in events if e.path == "x"] == [
            EventTag.EXISTS,
            EventTag.EQUAL,
        ]

    def test_report(self) -> None:
        assert _report('{"x":1}', '{"x":1}') == [":EXS x", "=EQL x"]


class TestSC2Deleted:
    """SC2 — a key present only in the left (old) document is deleted."""

    def test_events(self) -> None:
        assert compare({"x": 1}, {}) == [DiffEvent("x", EventTag.DELETED)]

    def test_report(self) -> None:
        assert _report('{"x":1}', "{}") == ["-DEL x"]


class TestSC3NestedDifference:
    """SC3 — a nested leaf difference is localised by recursion."""

    def test_report(self) -> None:
        assert _report('{"x":{"y":1}}', '{"x":{"y":2}}') == [
            "~DIF x",
            "!EQL x . y:",
            "1",
            " --- vs ---",
            "2",
        ]


class TestSC4TypeMismatch:
    """SC4 — number vs string is a type mismatch without recursion."""

    def test_report(self) -> None:
        assert _report('{"x":1}', '{"x":"1"}') == ["!TYP x number vs string"]


class TestSC5Blacklist:
    """SC5 — a blacklisted dotted key is reported once and skipped."""

    def test_events(self) -> None:
        config = CompareConfig(blacklist=("secret",))
        events = compare(
            {"secret.token": "abc"}, {"secret.token": "xyz"}, config=config
        )
        assert events == [DiffEvent("secret\\.token", EventTag.BLACKLISTED)]

    def test_report(self) -> None:
        config = CompareConfig(blacklist=("secret",))
        lines = _report('{"secret.token":"abc"}', '{"secret.token":"xyz"}', config)
        assert lines == ["!BLK secret.token"]


class TestTruncationEndToEnd:
    def test_long_leaf_values_are_cut(self) -> None:
        left = '{"blob": "' + "a" * 1200 + '"}'
        right = '{"blob": "b"}'
        lines = _report(left, right)
        assert lines[1] == "a" * 1000 + "...(1200 bytes)"
        assert lines[3] == "b"
