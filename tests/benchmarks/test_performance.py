"""Performance benchmark suite for jcmp.

Run with: pytest tests/benchmarks/ --benchmark-only -v
Skip during normal test runs: pytest --benchmark-disable
"""

from __future__ import annotations

from jcmp import CompareConfig, EventTag, compare

STRICT = CompareConfig(strict=True)


class TestPerformance10Key:
    """10-key flat objects."""

    def test_10key(self, benchmark, pair_10key):  # type: ignore[no-untyped-def]
        left, right = pair_10key
        events = benchmark(compare, left, right, config=STRICT)
        assert [e.path for e in events] == ["key_3"]


class TestPerformance1000Key:
    """1000-leaf nested objects with one changed leaf per section."""

    def test_1000key(self, benchmark, pair_1000key):  # type: ignore[no-untyped-def]
        left, right = pair_1000key
        events = benchmark(compare, left, right, config=STRICT)
        leaf_diffs = [e for e in events if e.tag is EventTag.VALUE_DIFFERS]
        assert len(leaf_diffs) == 10

    def test_1000key_loose(self, benchmark, pair_1000key):  # type: ignore[no-untyped-def]
        left, right = pair_1000key
        events = benchmark(compare, left, right)
        assert any(e.tag is EventTag.EQUAL for e in events)


class TestPerformanceDeep:
    """50 levels of nesting with a single differing leaf at the bottom."""

    def test_deep(self, benchmark, pair_deep):  # type: ignore[no-untyped-def]
        left, right = pair_deep
        events = benchmark(compare, left, right, config=STRICT)
        assert events[-1].tag is EventTag.VALUE_DIFFERS
        assert events[-1].path.endswith("level_0.leaf")
