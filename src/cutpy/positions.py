from __future__ import annotations

import logging
import re

from .errors import ListValueError, RangeOrderError, ZeroPositionError
from .ranges import PositionList, Range


LOGGER = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"[0-9]+")


def _position(s: str) -> int:
    """Convert one 1-based position, rejecting signs, spaces and zero."""
    if not _DIGITS_RE.fullmatch(s):
        raise ListValueError(token=s)
    n = int(s)
    if n == 0:
        raise ZeroPositionError()
    return n


def _parse_part(part: str) -> Range:
    if "-" not in part:
        n = _position(part)
        return Range(n - 1, n)

    start_s, _, end_s = part.partition("-")
    if not start_s or not end_s:
        raise RangeOrderError(start=start_s, end=end_s)
    start = _position(start_s)
    end = _position(end_s)
    if start >= end:
        raise RangeOrderError(start=start, end=end)
    return Range(start - 1, end)


def parse_positions(spec: str) -> PositionList:
    """Parse a list such as ``"1,3-5,2"`` into ranges, in the order written.

    Nothing is sorted, merged or de-duplicated: ``"3,1"`` selects unit 3
    before unit 1 and ``"1,1"`` selects unit 1 twice.
    """
    out = tuple(_parse_part(part) for part in spec.split(","))
    LOGGER.debug("parsed position list %r into %d range(s)", spec, len(out))
    return out
