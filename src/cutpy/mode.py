from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .errors import ConfigError
from .extract import extract_bytes, extract_chars, extract_fields
from .positions import parse_positions
from .ranges import PositionList


LOGGER = logging.getLogger(__name__)


class Mode(str, Enum):
    FIELDS = "fields"
    BYTES = "bytes"
    CHARS = "chars"


@dataclass(frozen=True, slots=True)
class Fields:
    positions: PositionList

    @property
    def mode(self) -> Mode:
        return Mode.FIELDS


@dataclass(frozen=True, slots=True)
class Bytes:
    positions: PositionList

    @property
    def mode(self) -> Mode:
        return Mode.BYTES


@dataclass(frozen=True, slots=True)
class Chars:
    positions: PositionList

    @property
    def mode(self) -> Mode:
        return Mode.CHARS


Extract = Fields | Bytes | Chars

_VARIANTS: dict[Mode, type[Fields] | type[Bytes] | type[Chars]] = {
    Mode.FIELDS: Fields,
    Mode.BYTES: Bytes,
    Mode.CHARS: Chars,
}


def select_extract(
    *,
    fields: str | None = None,
    bytes_: str | None = None,
    chars: str | None = None,
) -> Extract:
    """Pick the single extraction mode for a run and parse its list.

    Exactly one of the three lists must be given.
    """
    given = [
        (mode, spec)
        for mode, spec in ((Mode.FIELDS, fields), (Mode.BYTES, bytes_), (Mode.CHARS, chars))
        if spec is not None
    ]
    if not given:
        raise ConfigError("No extract option provided")
    if len(given) > 1:
        names = ", ".join(mode.value for mode, _ in given)
        raise ConfigError(f"extract options are mutually exclusive, got: {names}")

    mode, spec = given[0]
    out = _VARIANTS[mode](parse_positions(spec))
    LOGGER.debug("extracting %s with list %r", mode.value, spec)
    return out


def extractor_for(extract: Extract) -> Callable[..., object]:
    """Return the extraction function bound to ``extract``'s positions."""
    positions = extract.positions
    if isinstance(extract, Fields):
        return lambda record: extract_fields(record, positions)
    if isinstance(extract, Bytes):
        return lambda line: extract_bytes(line, positions)
    if isinstance(extract, Chars):
        return lambda line: extract_chars(line, positions)
    raise TypeError(f"unknown extract variant: {type(extract)!r}")
