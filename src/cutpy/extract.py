from __future__ import annotations

from collections.abc import Sequence

from .ranges import Range


def _select(units: Sequence, ranges: Sequence[Range]) -> list:
    # Clamp to the input; positions past the end select nothing.
    n = len(units)
    return [units[i] for r in ranges for i in range(r.start, min(r.end, n))]


def extract_chars(line: str, ranges: Sequence[Range]) -> str:
    """Select characters (code points, not bytes) in range-list order."""
    return "".join(_select(line, ranges))


def extract_bytes(line: str, ranges: Sequence[Range]) -> str:
    """Select UTF-8 bytes in range-list order, then decode lossily.

    A selection that splits a multi-byte character decodes to U+FFFD.
    """
    raw = line.encode("utf-8")
    return bytes(_select(raw, ranges)).decode("utf-8", errors="replace")


def extract_fields(record: Sequence[str], ranges: Sequence[Range]) -> list[str]:
    """Select fields of an already split record in range-list order."""
    return list(_select(record, ranges))
