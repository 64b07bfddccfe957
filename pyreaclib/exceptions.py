#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the pyreaclib package

All exceptions raised by pyreaclib inherit from :class:`ReaclibError`, making
it possible to catch every library-specific error with a single ``except``
clause while still allowing fine-grained handling when needed.

Exception Hierarchy
-------------------
::

    ReaclibError
    ├── ReadError                # Line source failure or invalid encoding
    ├── ParseError               # Malformed REACLIB content
    │   ├── ParseIntError
    │   ├── ParseFloatError
    │   ├── ChapterUnsetError
    │   ├── UnknownChapterError
    │   ├── UnknownResonanceError
    │   ├── TooShortLineError
    │   ├── TooFewLinesError
    │   └── StrIndexError
    ├── ValidationError          # Bounded model field out of capacity
    ├── FileFormatError          # Unknown format flag or unreadable input
    └── ConversionError          # JSON / HDF5 conversion failures

Every parse error is scoped to a single reader pull.  The reader stays
usable after raising one, which lets callers skip a broken set and keep
going.
"""

from __future__ import annotations


class ReaclibError(Exception):
    """Base exception for all pyreaclib errors

    Every exception raised by pyreaclib is a subclass of this type.
    Catching ``ReaclibError`` therefore catches any library-specific failure
    while still allowing standard Python exceptions (``KeyError``,
    ``TypeError``, etc.) to propagate normally.
    """


class ReadError(ReaclibError):
    """Raised when the underlying line source fails

    Only the error *kind* is kept, never the operating-system message, so
    that the error compares equal across platforms and Python versions.

    Parameters
    ----------
    kind : str
        ``"invalid_data"`` for undecodable bytes, otherwise the errno
        symbol (e.g. ``"EISDIR"``) or the exception class name.
    """

    def __init__(self, kind: str) -> None:
        super().__init__(f"read error ({kind})")
        self.kind = kind


class ParseError(ReaclibError):
    """Raised when REACLIB text contains malformed or unparseable content

    This includes fields past the end of a line, non-numeric data in
    numeric fields, unknown chapter or resonance codes, and truncated
    line groups.
    """


class ParseIntError(ParseError):
    """Raised when an integer field (chapter code) cannot be converted"""

    def __init__(self, text: str) -> None:
        super().__init__(f"int parsing error: {text!r}")
        self.text = text


class ParseFloatError(ParseError):
    """Raised when a float field (Q-value or rate parameter) cannot be converted"""

    def __init__(self, text: str) -> None:
        super().__init__(f"float parsing error: {text!r}")
        self.text = text


class ChapterUnsetError(ParseError):
    """Raised when a set appears before any chapter header (REACLIB 1 only)"""

    def __init__(self) -> None:
        super().__init__("no chapter set")


class UnknownChapterError(ParseError):
    """Raised when a chapter code is outside the range 1-11

    Parameters
    ----------
    code : int
        The offending chapter code.
    """

    def __init__(self, code: int) -> None:
        super().__init__(f"unknown chapter: {code}")
        self.code = code


class UnknownResonanceError(ParseError):
    """Raised when the resonance column holds an unrecognised flag

    Parameters
    ----------
    text : str
        The offending resonance code.
    """

    def __init__(self, text: str) -> None:
        super().__init__(f"unknown resonance: {text}")
        self.text = text


class TooShortLineError(ParseError):
    """Raised when a line ends before a field's column range does"""

    def __init__(self) -> None:
        super().__init__("line too short")


class TooFewLinesError(ParseError):
    """Raised when the input ends in the middle of a line group"""

    def __init__(self) -> None:
        super().__init__("too few lines in a set")


class StrIndexError(ParseError):
    """Raised when a column boundary falls inside a multi-byte character"""

    def __init__(self) -> None:
        super().__init__("string indexing error")


class ValidationError(ReaclibError):
    """Raised when a model field exceeds the capacity fixed by the format

    Nuclides hold at most five bytes, labels four, each side of a
    reaction four nuclides, and every set exactly seven parameters.
    """


class FileFormatError(ReaclibError):
    """Raised when the REACLIB format flag or input file is unusable

    For example when a format flag other than ``"1"`` or ``"2"`` is given,
    or when the input path does not exist.
    """


class ConversionError(ReaclibError):
    """Raised when JSON or HDF5 conversion fails

    This covers malformed JSON documents, missing keys, an existing output
    file without ``overwrite``, and HDF5 write failures.
    """
