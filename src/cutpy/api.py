from __future__ import annotations

import csv
import logging
import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

from .config import CutConfig
from .errors import InputError
from .mode import Fields, extractor_for
from .streams import OutputWriter, close_source, open_source, read_lines, read_records


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RunResult:
    written: int
    failed: tuple[str, ...]  # names of sources that could not be read

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0


def cut_lines(config: CutConfig, stream: Iterable[str]) -> Iterator[object]:
    """Apply ``config.extract`` to every line or record of one already-open input."""
    extractor = extractor_for(config.extract)
    if isinstance(config.extract, Fields):
        units: Iterator = read_records(stream, config.delimiter)
    else:
        units = read_lines(stream)
    for unit in units:
        yield extractor(unit)


def _emitter(config: CutConfig, writer: OutputWriter) -> Callable[..., None]:
    if isinstance(config.extract, Fields):
        return writer.write_record
    return writer.write_line


def run(config: CutConfig, *, stdout: TextIO | None = None, stderr: TextIO | None = None) -> RunResult:
    """Process every input of ``config`` in order.

    A source that cannot be opened or read is reported on ``stderr`` and
    skipped; the remaining sources are still processed.
    """
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr
    writer = OutputWriter(out, delimiter=config.delimiter)
    emit = _emitter(config, writer)
    failed: list[str] = []

    for name in config.files:
        try:
            _run_source(config, name, emit)
        except InputError as e:
            LOGGER.debug("skipping input %s", name, exc_info=True)
            print(e, file=err)
            failed.append(name)

    writer.flush()
    return RunResult(written=writer.written, failed=tuple(failed))


def _checked(name: str, units: Iterator[object]) -> Iterator[object]:
    # Only reading is translated; a failed write is not an input error.
    try:
        yield from units
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        reason = getattr(e, "strerror", None) or str(e)
        raise InputError(name=name, reason=reason) from e


def _run_source(config: CutConfig, name: str, emit: Callable[..., None]) -> None:
    stream = open_source(name)
    LOGGER.debug("reading %s", name)
    try:
        for selected in _checked(name, cut_lines(config, stream)):
            emit(selected)
    finally:
        close_source(name, stream)
