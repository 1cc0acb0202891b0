"""CompareConfig: immutable settings for one comparison."""

from __future__ import annotations

from dataclasses import dataclass

from jcmp.classifier import DEFAULT_MAX_LENGTH

__all__ = ["CompareConfig"]


@dataclass(frozen=True, slots=True)
class CompareConfig:
    """Immutable configuration for a PathComparator.

    Attributes:
        strict: When True, the informational ``exists`` and ``equal`` events
            are suppressed.  Differences are reported in both modes.
        blacklist: Substrings matched against canonical paths; a matching
            path is reported once as blacklisted and never descended into.
            Any iterable of strings is accepted and stored as a tuple.
        max_value_length: Leaf values longer than this many characters are
            truncated in ``value_differs`` events.  Default 1000.
        path_cache_size: Size of each accessor's decoded-path LRU cache.
    """

    strict: bool = False
    blacklist: tuple[str, ...] = ()
    max_value_length: int = DEFAULT_MAX_LENGTH
    path_cache_size: int = 1024

    def __post_init__(self) -> None:
        if isinstance(self.blacklist, str):
            msg = "blacklist must be a collection of strings, not a single string"
            raise ValueError(msg)
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "blacklist", tuple(self.blacklist))
        for entry in self.blacklist:
            if not isinstance(entry, str):
                msg = f"blacklist entries must be strings, got {entry!r}"
                raise ValueError(msg)
            if not entry:
                msg = "blacklist entries must be non-empty"
                raise ValueError(msg)
        if self.max_value_length < 1:
            msg = f"max_value_length must be >= 1, got {self.max_value_length}"
            raise ValueError(msg)
        if self.path_cache_size < 1:
            msg = f"path_cache_size must be >= 1, got {self.path_cache_size}"
            raise ValueError(msg)
