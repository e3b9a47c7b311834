from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class CutError(Exception):
    """Base of every error cutpy reports to the user."""

    def __str__(self) -> str:
        return "cut error"


@dataclass(slots=True)
class ConfigError(CutError):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class ListValueError(CutError):
    """A list token that is not a run of ASCII digits."""

    token: str

    def __str__(self) -> str:
        return f'illegal list value: "{self.token}"'


@dataclass(slots=True)
class RangeError(CutError):
    pass


@dataclass(slots=True)
class ZeroPositionError(RangeError):
    def __str__(self) -> str:
        return 'illegal list value: "0"'


@dataclass(slots=True)
class RangeOrderError(RangeError):
    # Either converted numbers, or the raw (possibly empty) sides.
    start: int | str
    end: int | str

    def __str__(self) -> str:
        return f"First number in range ({self.start}) must be lower than second number ({self.end})"


@dataclass(slots=True)
class InputError(CutError):
    name: str
    reason: str

    def __str__(self) -> str:
        return f"{self.name}: {self.reason}"
