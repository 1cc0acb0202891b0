"""Document loading: read and parse JSON before any comparison starts.

Failures surface as ``DocumentLoadError`` so the caller can stop the run
before the engine is ever invoked.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from jcmp.errors import DocumentLoadError

__all__ = ["load_document", "parse_document"]

logger = logging.getLogger(__name__)


def parse_document(text: str, source: str = "<string>") -> Any:
    """Parse JSON ``text``.

    Raises:
        DocumentLoadError: If ``text`` is not valid JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(
            source, f"{exc.msg} (line {exc.lineno}, column {exc.colno})"
        ) from exc


def load_document(path: str | Path) -> Any:
    """Read and parse the JSON file at ``path`` (UTF-8, BOM tolerated).

    Raises:
        DocumentLoadError: If the file cannot be read or decoded, or does
            not contain valid JSON.
    """
    source = str(path)
    try:
        text = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(source, str(exc)) from exc
    logger.debug("loaded %s (%d characters)", source, len(text))
    return parse_document(text, source=source)
