"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 10-key flat, 1000-key nested, 50-level deep.
Each tier provides a pair that differs in a few leaves only, so the
traversal has to descend through most of the tree.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def _make_nested_1000() -> tuple[dict[str, Any], dict[str, Any]]:
    """10 sections x 10 groups x 10 leaves, one leaf changed per section."""
    left: dict[str, Any] = {}
    right: dict[str, Any] = {}
    for s in range(10):
        section_l: dict[str, Any] = {}
        section_r: dict[str, Any] = {}
        for g in range(10):
            leaves = generate_flat_object(10, prefix=f"leaf_{s}_{g}")
            section_l[f"group_{g}"] = leaves
            section_r[f"group_{g}"] = dict(leaves)
        section_r["group_0"][f"leaf_{s}_0_0"] = "changed"
        left[f"section_{s}"] = section_l
        right[f"section_{s}"] = section_r
    return left, right


def _make_deep(depth: int) -> tuple[dict[str, Any], dict[str, Any]]:
    """A chain of ``depth`` nested objects with a differing leaf at the bottom."""
    left: dict[str, Any] = {"leaf": 1, "items": [1, 2, 3]}
    right: dict[str, Any] = {"leaf": 2, "items": [1, 2, 3]}
    for level in range(depth):
        left = {f"level_{level}": left, "sibling": level}
        right = {f"level_{level}": right, "sibling": level}
    return left, right


@pytest.fixture
def pair_10key() -> tuple[dict[str, Any], dict[str, Any]]:
    left = generate_flat_object(10)
    right = dict(left, key_3="other")
    return left, right


@pytest.fixture
def pair_1000key() -> tuple[dict[str, Any], dict[str, Any]]:
    return _make_nested_1000()


@pytest.fixture
def pair_deep() -> tuple[dict[str, Any], dict[str, Any]]:
    return _make_deep(50)
