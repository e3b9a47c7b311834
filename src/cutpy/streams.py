from __future__ import annotations

import csv
import io
import logging
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .errors import InputError


LOGGER = logging.getLogger(__name__)

STDIN = "-"


def open_source(name: str) -> TextIO:
    """Open a named input as UTF-8 text; ``"-"`` is standard input.

    Standard input gets the same decoding and newline handling as files.
    """
    if name == STDIN:
        buf = getattr(sys.stdin, "buffer", None)
        if buf is None:
            # Already a text-only stream (e.g. an in-memory one).
            return sys.stdin
        return io.TextIOWrapper(buf, encoding="utf-8", newline="")
    try:
        return open(name, encoding="utf-8", newline="")
    except OSError as e:
        raise InputError(name=name, reason=e.strerror or str(e)) from e


def close_source(name: str, stream: TextIO) -> None:
    if name != STDIN:
        stream.close()
    elif isinstance(stream, io.TextIOWrapper) and stream is not sys.stdin:
        # Leave the process's stdin open.
        stream.detach()


def read_lines(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        yield line


def read_records(stream: Iterable[str], delimiter: str) -> Iterator[list[str]]:
    # Blank lines are not records.
    for record in csv.reader(stream, delimiter=delimiter):
        if record:
            yield record


class OutputWriter:
    """Writes one output unit per input unit to a text stream."""

    def __init__(self, stream: TextIO, *, delimiter: str = "\t") -> None:
        self.stream = stream
        self.delimiter = delimiter
        self.written = 0
        self._csv = csv.writer(stream, delimiter=delimiter, lineterminator="\n")

    def write_line(self, text: str) -> None:
        self.stream.write(text)
        self.stream.write("\n")
        self.written += 1

    def write_record(self, fields: Iterable[str]) -> None:
        self._csv.writerow(fields)
        self.written += 1

    def flush(self) -> None:
        self.stream.flush()
