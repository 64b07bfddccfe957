#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
pyreaclib - Python library for reading JINA REACLIB reaction-rate files

Parse REACLIB 1 and REACLIB 2 fixed-column files into typed rate sets,
evaluate the seven-parameter rate fits, and convert the sets to JSON or
HDF5 for use in nuclear reaction network codes.

Pipeline
--------
1. **Read** sets lazily from any line source:
   ``Reaclib2Reader(open("reaclib", "rb"))``

2. **Group** sets by reaction:
   ``build_reaction_table(fh, "2")``

3. **Convert** a whole file:
   ``python -m pyreaclib.cli -f 2 json reaclib``

Modules
-------
readers
    Streaming readers for both REACLIB layouts and the reaction table.
models
    Frozen set dataclass and the chapter / resonance / format enums.
converters
    JSON and HDF5 converters.
utils
    Fixed-width parsing helpers, format constants and capacity checks.

Examples
--------
>>> from pyreaclib import Reaclib1Reader
>>> with open("reaclib_v1", "rb") as fh:
...     for s in Reaclib1Reader(fh):
...         print(s.reactants, s.products, s.rate(1.0))
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from pyreaclib.models.records import Chapter, Format, ReaclibSet, Reaction, Resonance
from pyreaclib.readers import (
    BaseReader,
    Reaclib1Reader,
    Reaclib2Reader,
    build_reaction_table,
    group_by_reaction,
    make_reader,
    read_sets,
)
from pyreaclib.exceptions import (
    ReaclibError,
    ReadError,
    ParseError,
    ParseIntError,
    ParseFloatError,
    ChapterUnsetError,
    UnknownChapterError,
    UnknownResonanceError,
    TooShortLineError,
    TooFewLinesError,
    StrIndexError,
    ValidationError,
    FileFormatError,
    ConversionError,
)

__all__ = [
    # Version
    "__version__",
    # Models
    "Chapter",
    "Format",
    "ReaclibSet",
    "Reaction",
    "Resonance",
    # Readers
    "BaseReader",
    "Reaclib1Reader",
    "Reaclib2Reader",
    "build_reaction_table",
    "group_by_reaction",
    "make_reader",
    "read_sets",
    # Exceptions
    "ReaclibError",
    "ReadError",
    "ParseError",
    "ParseIntError",
    "ParseFloatError",
    "ChapterUnsetError",
    "UnknownChapterError",
    "UnknownResonanceError",
    "TooShortLineError",
    "TooFewLinesError",
    "StrIndexError",
    "ValidationError",
    "FileFormatError",
    "ConversionError",
]
