"""DiffEvent: the unit of output produced by a comparison run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from jcmp.paths import display_form

__all__ = ["DiffEvent", "EventTag"]


class EventTag(StrEnum):
    """What a DiffEvent reports about its path.

    - BLACKLISTED:       path matched the blacklist; nothing below it is visited
    - NOT_EXIST_BOTH:    path is missing from both documents
    - ADDED:             path exists only in the right (new) document
    - DELETED:           path exists only in the left (old) document
    - TYPE_MISMATCH:     both exist with different kinds
    - VALUE_DIFFERS:     both are scalars of one kind with different values
    - CONTAINER_DIFFERS: both are containers that differ somewhere below
    - EQUAL:             both values are equal (informational)
    - EXISTS:            path exists on both sides (informational)
    """

    BLACKLISTED = auto()
    NOT_EXIST_BOTH = auto()
    ADDED = auto()
    DELETED = auto()
    TYPE_MISMATCH = auto()
    VALUE_DIFFERS = auto()
    CONTAINER_DIFFERS = auto()
    EQUAL = auto()
    EXISTS = auto()

    @property
    def is_informational(self) -> bool:
        """True for the notes suppressed in strict mode."""
        return self in (EventTag.EQUAL, EventTag.EXISTS)


@dataclass(frozen=True, slots=True)
class DiffEvent:
    """One classified report line.

    Attributes:
        path:       Canonical path of the reported location.
        tag:        What is being reported.
        left_text:  Left value text (VALUE_DIFFERS) or kind (TYPE_MISMATCH).
        right_text: Right-hand counterpart of ``left_text``.
    """

    path: str
    tag: EventTag
    left_text: str = ""
    right_text: str = ""

    @property
    def display_path(self) -> str:
        return display_form(self.path)
