#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Reader selection by REACLIB format
"""

from __future__ import annotations

import logging
from pathlib import Path

from pyreaclib.exceptions import FileFormatError, ReaclibError
from pyreaclib.models.records import Format, ReaclibSet
from pyreaclib.readers.base import BaseReader, LineSource
from pyreaclib.readers.reaclib1 import Reaclib1Reader
from pyreaclib.readers.reaclib2 import Reaclib2Reader

logger = logging.getLogger(__name__)

READERS: dict[Format, type[BaseReader]] = {
    Format.REACLIB1: Reaclib1Reader,
    Format.REACLIB2: Reaclib2Reader,
}


def make_reader(source: LineSource, fmt: Format | str) -> BaseReader:
    """Create the streaming reader for *fmt* over *source*

    Parameters
    ----------
    source : LineSource
        Iterable of text or byte lines.
    fmt : Format | str
        A :class:`~pyreaclib.models.records.Format` or the flag ``"1"`` /
        ``"2"``.

    Raises
    ------
    FileFormatError
        If *fmt* is not a known format.
    """
    return READERS[Format.from_flag(fmt)](source)


def read_sets(path: Path | str, fmt: Format | str) -> list[ReaclibSet]:
    """Read every set of a REACLIB file

    The file is opened in binary mode so that undecodable bytes surface
    as :class:`~pyreaclib.exceptions.ReadError` on the offending line.

    Parameters
    ----------
    path : Path | str
        Path to the REACLIB file.
    fmt : Format | str
        File layout, ``"1"`` or ``"2"``.

    Returns
    -------
    list[ReaclibSet]
        All sets in file order.

    Raises
    ------
    FileFormatError
        If *path* is not an existing file or *fmt* is unknown.
    ReaclibError
        The first read or parse error encountered.
    """
    filepath = Path(path)
    logger.debug("Opening REACLIB file: %s", filepath)

    if not filepath.is_file():
        raise FileFormatError(f"REACLIB file not found: {filepath}")

    fmt = Format.from_flag(fmt)
    with open(filepath, "rb") as fh:
        reader = make_reader(fh, fmt)
        try:
            sets = list(reader)
        except ReaclibError:
            logger.debug("Parse of %s failed after %d lines", filepath, reader.lines_read)
            raise

    logger.debug("Read %d sets from %s (REACLIB %s)", len(sets), filepath, fmt.value)
    return sets
