"""
Line-oriented reader for actor/movie data files.

Actors are listed on their own line prefixed with <a>, followed by the lines of
the movies they appeared in, prefixed with <t>. Every other line is ignored.
"""

import errno
import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from ..models import NodeKind, Record

logger = logging.getLogger(__name__)


def parse_line(line: str) -> Optional[Record]:
    """
    Parse one input line into a record.

    Args:
        line: Raw line, with or without its terminator.

    Returns:
        The record with its marker stripped, or None if the line carries neither marker.
    """
    line = line.rstrip("\r\n")
    for kind in NodeKind:
        if line.startswith(kind.marker):
            return Record(kind=kind, text=line[len(kind.marker):])
    return None


def iter_records(lines: Iterable[str]) -> Iterator[Record]:
    """Yield the records of the recognized lines, in order."""
    ignored = 0
    for line in lines:
        record = parse_line(line)
        if record is None:
            ignored += 1
            continue
        yield record
    if ignored:
        logger.debug(f"Ignored {ignored} unrecognized lines")


def read_records(path: Union[str, Path, None]) -> Iterator[Record]:
    """
    Read the records of a data file.

    The file is checked up front but only opened once iteration starts, and is
    closed when the records are exhausted.

    Raises:
        ValueError: If no path is given.
        FileNotFoundError: If the file does not exist.
        OSError: If the file can't be read.
    """
    if path is None or not str(path).strip():
        raise ValueError("File name can't be empty")

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(path))
    return _read_file(path)


def _read_file(path: Path) -> Iterator[Record]:
    with path.open("r", encoding="utf-8") as handle:
        yield from iter_records(handle)
