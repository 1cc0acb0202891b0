"""Terminal reporter: render DiffEvents as styled, prefixed lines.

Colours follow the classic jcmp palette.  Styling goes through
``click.style`` so ``color=False`` (or a non-terminal stream) produces plain
text with identical content.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import IO, Any

import click

from jcmp.events import DiffEvent, EventTag

__all__ = ["STYLES", "Reporter", "format_event"]

VALUE_SEPARATOR = " --- vs ---"

STYLES: dict[str, dict[str, Any]] = {
    "equal": {"fg": "bright_cyan"},
    "not_equal": {"fg": "bright_yellow"},
    "added": {"fg": "bright_green"},
    "deleted": {"fg": "bright_red"},
    "type": {"fg": "bright_magenta"},
    "exists": {"fg": "bright_blue"},
    "left_value": {"fg": "bright_black", "bg": "white"},
    "right_value": {"fg": "yellow", "bg": "white"},
    "blacklisted": {"fg": "bright_white", "bg": "bright_black"},
    "separator": {"fg": "bright_yellow"},
    "container": {"fg": "yellow"},
}


def format_event(event: DiffEvent) -> list[tuple[str, str]]:
    """Return ``(text, style_name)`` pairs, one per output line, for ``event``."""
    path = event.display_path
    tag = event.tag
    if tag is EventTag.BLACKLISTED:
        return [(f"!BLK {path}", "blacklisted")]
    if tag is EventTag.NOT_EXIST_BOTH:
        return [(f"!EBT {path} (path does not exist in both JSONs)", "deleted")]
    if tag is EventTag.ADDED:
        return [(f"+ADD {path}", "added")]
    if tag is EventTag.DELETED:
        return [(f"-DEL {path}", "deleted")]
    if tag is EventTag.TYPE_MISMATCH:
        return [(f"!TYP {path} {event.left_text} vs {event.right_text}", "type")]
    if tag is EventTag.EXISTS:
        return [(f":EXS {path}", "exists")]
    if tag is EventTag.EQUAL:
        return [(f"=EQL {path}", "equal")]
    if tag is EventTag.CONTAINER_DIFFERS:
        return [(f"~DIF {path}", "container")]
    return [
        (f"!EQL {path}:", "not_equal"),
        (event.left_text, "left_value"),
        (VALUE_SEPARATOR, "separator"),
        (event.right_text, "right_value"),
    ]


class Reporter:
    """Writes events to a text stream, one styled line at a time.

    Args:
        stream: Destination; defaults to stdout (resolved by ``click.echo``).
        color:  True/False forces styling on/off; None lets click decide
                based on whether the stream is a terminal.
    """

    def __init__(
        self, stream: IO[str] | None = None, color: bool | None = None
    ) -> None:
        self._stream = stream
        self._color = color

    def line(self, text: str, style: str | None = None) -> None:
        if style is not None:
            text = click.style(text, **STYLES[style])
        click.echo(text, file=self._stream, color=self._color)

    def report(self, events: Iterable[DiffEvent]) -> int:
        """Render every event; return how many events were rendered."""
        count = 0
        for event in events:
            for text, style in format_event(event):
                self.line(text, style)
            count += 1
        return count
