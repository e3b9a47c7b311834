from __future__ import annotations

from collections.abc import Iterable

from .ranges import Range


def format_positions(ranges: Iterable[Range]) -> str:
    """Render ranges in canonical list form; ``parse_positions`` reads it back unchanged."""
    out = [r.format() for r in ranges]
    if not out:
        raise ValueError("format_positions() requires at least one range")
    return ",".join(out)
