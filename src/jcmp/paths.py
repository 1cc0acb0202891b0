"""Path codec: canonical, escapable textual paths into JSON documents.

A path is a sequence of string segments (object keys, or array indices
written as decimal strings).  Its canonical form joins the escaped segments
with ``.``:

- ``\\`` inside a segment is written as ``\\\\``
- ``.`` inside a segment is written as ``\\.``

so ``{"secret.token": ...}`` lives at ``secret\\.token`` while
``{"secret": {"token": ...}}`` lives at ``secret.token``.  The empty string
is the document root.  Users type blacklist substrings against this form,
so the rule must stay stable.
"""

from __future__ import annotations

from collections.abc import Iterable

from jcmp.errors import InvalidPathError

__all__ = [
    "ESCAPE",
    "SEPARATOR",
    "decode_path",
    "display_form",
    "encode_child",
    "encode_path",
    "escape_segment",
]

SEPARATOR = "."
ESCAPE = "\\"

# Visual separator used by display_form(); never parsed back.
_DISPLAY_SEPARATOR = " . "


def escape_segment(key: str) -> str:
    """Escape a single key so it cannot be mistaken for a path boundary."""
    # Escape character first, otherwise the separator escapes get doubled.
    return key.replace(ESCAPE, ESCAPE + ESCAPE).replace(
        SEPARATOR, ESCAPE + SEPARATOR
    )


def encode_child(parent: str, key: str) -> str:
    """Return the canonical path of ``key`` below the canonical ``parent``.

    Args:
        parent: Canonical path of the parent node ("" for the root).
        key:    Raw object key or decimal array index.

    Returns:
        ``escaped(key)`` when ``parent`` is the root, otherwise
        ``parent + "." + escaped(key)``.
    """
    if parent == "":
        return escape_segment(key)
    return parent + SEPARATOR + escape_segment(key)


def encode_path(segments: Iterable[str]) -> str:
    """Fold ``encode_child`` over ``segments`` starting from the root."""
    path = ""
    for index, segment in enumerate(segments):
        path = escape_segment(segment) if index == 0 else encode_child(path, segment)
    return path


def decode_path(canonical: str) -> tuple[str, ...]:
    """Split a canonical path back into its raw segments.

    Args:
        canonical: A path produced by ``encode_child`` / ``encode_path``.

    Returns:
        Tuple of unescaped segments; ``()`` for the root path ``""``.

    Raises:
        InvalidPathError: If the path ends with an unpaired escape character.
    """
    if canonical == "":
        return ()

    segments: list[str] = []
    current: list[str] = []
    chars = iter(canonical)
    for ch in chars:
        if ch == ESCAPE:
            nxt = next(chars, None)
            if nxt is None:
                raise InvalidPathError(canonical, "dangling escape character")
            current.append(nxt)
        elif ch == SEPARATOR:
            segments.append("".join(current))
            current = []
        else:
            current.append(ch)
    segments.append("".join(current))
    return tuple(segments)


def display_form(canonical: str) -> str:
    """Return a human-friendly rendering of ``canonical``.

    Separators are widened to ``" . "`` and escapes removed, so
    ``a.b\\.c`` is shown as ``a . b.c``.  Presentation only: the result is
    lossy and must never be used for lookups or as a visited-set key.
    """
    try:
        segments = decode_path(canonical)
    except InvalidPathError:
        return canonical
    return _DISPLAY_SEPARATOR.join(segments)
