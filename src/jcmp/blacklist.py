"""Blacklist filter: suppress paths by unanchored substring match."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["is_blacklisted"]


def is_blacklisted(canonical: str, blacklist: Iterable[str]) -> bool:
    """Return True if any blacklist entry occurs anywhere in ``canonical``.

    Matching is case-sensitive and runs against the canonical (escaped) path,
    so an entry of ``secret`` suppresses ``secret``, ``top.secret\\.token``
    and ``secretary`` alike.
    """
    return any(entry in canonical for entry in blacklist)
