from __future__ import annotations

__version__ = "0.1.0"

from .api import RunResult, cut_lines, run
from .config import CutConfig, parse_delimiter
from .errors import (
    ConfigError,
    CutError,
    InputError,
    ListValueError,
    RangeError,
    RangeOrderError,
    ZeroPositionError,
)
from .extract import extract_bytes, extract_chars, extract_fields
from .format import format_positions
from .mode import Bytes, Chars, Extract, Fields, Mode, extractor_for, select_extract
from .positions import parse_positions
from .ranges import PositionList, Range

__all__ = [
    "Bytes",
    "Chars",
    "ConfigError",
    "CutConfig",
    "CutError",
    "Extract",
    "Fields",
    "InputError",
    "ListValueError",
    "Mode",
    "PositionList",
    "Range",
    "RangeError",
    "RangeOrderError",
    "RunResult",
    "ZeroPositionError",
    "cut_lines",
    "extract_bytes",
    "extract_chars",
    "extract_fields",
    "extractor_for",
    "format_positions",
    "parse_delimiter",
    "parse_positions",
    "run",
    "select_extract",
]
