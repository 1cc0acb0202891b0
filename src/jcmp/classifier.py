"""Diff classifier: decide the outcome for one path and whether to recurse.

Decision order (first match wins):

1. Neither side exists        -> NOT_EXIST_BOTH
2. Only the left side exists  -> DELETED   (left is the old document)
   Only the right side exists -> ADDED     (right is the new document)
3. Kinds differ               -> TYPE_MISMATCH
4. Serialized texts are equal -> EQUAL_BOTH
5. Containers that differ     -> VALUE_DIFFER, recurse into children
   Scalars that differ        -> VALUE_DIFFER, carry both (truncated) texts

Only case 5 for containers recurses: equality is decided on the full
serialized subtree, so nothing below an equal container can differ.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from jcmp.accessor import Value

__all__ = ["DEFAULT_MAX_LENGTH", "Classification", "Outcome", "classify", "truncate"]

DEFAULT_MAX_LENGTH = 1000


class Outcome(StrEnum):
    """Relationship between the two values found at one path."""

    EQUAL_BOTH = auto()
    NOT_EXIST_BOTH = auto()
    ADDED = auto()
    DELETED = auto()
    TYPE_MISMATCH = auto()
    VALUE_DIFFER = auto()


@dataclass(frozen=True, slots=True)
class Classification:
    """Outcome of ``classify()``.

    Attributes:
        outcome:    One of the six ``Outcome`` members.
        recurse:    True only for differing containers.
        left_text:  Left-hand detail: truncated value for a leaf difference,
                    kind name for a type mismatch, "" otherwise.
        right_text: Right-hand counterpart of ``left_text``.
    """

    outcome: Outcome
    recurse: bool = False
    left_text: str = ""
    right_text: str = ""


def truncate(text: str, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Cut ``text`` to ``max_length`` characters plus a byte-count marker.

    >>> truncate("abcdef", 3)
    'abc...(6 bytes)'
    """
    if len(text) > max_length:
        return f"{text[:max_length]}...({len(text.encode('utf-8'))} bytes)"
    return text


def classify(
    left: Value,
    right: Value,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> Classification:
    """Classify the pair of values found at the same path.

    Args:
        left:       Value resolved from the left (old) document.
        right:      Value resolved from the right (new) document.
        max_length: Truncation threshold for leaf difference texts.

    Returns:
        A ``Classification`` describing the outcome and whether the traversal
        should descend into the children of this path.
    """
    if not left.exists and not right.exists:
        return Classification(Outcome.NOT_EXIST_BOTH)
    if not right.exists:
        return Classification(Outcome.DELETED)
    if not left.exists:
        return Classification(Outcome.ADDED)

    if left.kind is not right.kind:
        return Classification(
            Outcome.TYPE_MISMATCH,
            left_text=str(left.kind),
            right_text=str(right.kind),
        )

    if left.text == right.text:
        return Classification(Outcome.EQUAL_BOTH)

    if left.kind.is_container:
        return Classification(Outcome.VALUE_DIFFER, recurse=True)

    return Classification(
        Outcome.VALUE_DIFFER,
        left_text=truncate(left.text, max_length),
        right_text=truncate(right.text, max_length),
    )
