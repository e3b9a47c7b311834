from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .errors import ConfigError
from .mode import Extract, select_extract
from .streams import STDIN


DEFAULT_DELIMITER = "\t"


def parse_delimiter(value: str) -> str:
    # A single byte, so multi-byte characters such as "é" are rejected.
    if len(value.encode("utf-8")) != 1:
        raise ConfigError(f'--delim "{value}" must be a single byte')
    return value


@dataclass(frozen=True, slots=True)
class CutConfig:
    """A validated run: what to extract, with which delimiter, from which inputs."""

    extract: Extract
    delimiter: str = DEFAULT_DELIMITER
    files: tuple[str, ...] = (STDIN,)

    @classmethod
    def from_args(
        cls,
        *,
        fields: str | None = None,
        bytes_: str | None = None,
        chars: str | None = None,
        delimiter: str = DEFAULT_DELIMITER,
        files: Sequence[str] = (),
    ) -> "CutConfig":
        delim = parse_delimiter(delimiter)
        extract = select_extract(fields=fields, bytes_=bytes_, chars=chars)
        return cls(extract=extract, delimiter=delim, files=tuple(files) or (STDIN,))
