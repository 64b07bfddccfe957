#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared REACLIB parsing helpers for the pyreaclib package

All low-level text handling (fixed-width field extraction, numeric
conversion, line normalisation) lives here so that neither reader module
duplicates format-specific logic.

Fixed-Width Columns
-------------------
REACLIB files are fixed-column Fortran output.  Column offsets are counted
in bytes of the UTF-8 encoded line.  A field therefore fails in one of
two distinct ways:

* the line is shorter than the end of the field
  (:class:`~pyreaclib.exceptions.TooShortLineError`), or
* a multi-byte character straddles one of the field boundaries
  (:class:`~pyreaclib.exceptions.StrIndexError`).

Trailing padding may be omitted from a line as long as every field that
is read still fits.

Numeric Fields
--------------
Numbers use plain C/Fortran notation (``-6.781610e+00``) and are converted
independently of the current locale.  Unlike Python's :func:`float`, digit
group underscores, surrounding whitespace and non-ASCII digits are
rejected.
"""

from __future__ import annotations

import re

from pyreaclib.exceptions import (
    ParseFloatError,
    ParseIntError,
    ReadError,
    StrIndexError,
    TooShortLineError,
)

_INT_PATTERN: re.Pattern[str] = re.compile(r"\+?[0-9]+")
"""ASCII base-10 digits with an optional plus sign."""

INT_MAX: int = 255
"""Largest integer field value; chapter codes are stored in one byte."""

INVALID_DATA: str = "invalid_data"
"""Kind of :class:`~pyreaclib.exceptions.ReadError` for undecodable bytes."""


# ---------------------------------------------------------------------------
# Field extraction
# ---------------------------------------------------------------------------

def extract_field(line: str, start: int, end: int) -> str:
    """Return the whitespace-stripped content of columns ``start..end``

    Parameters
    ----------
    line : str
        A single line of REACLIB text, without its line terminator.
    start, end : int
        Half-open column range in bytes of the UTF-8 encoded line.

    Returns
    -------
    str
        The field content with leading and trailing whitespace removed.
        An empty string is a valid result (e.g. a blank resonance flag).

    Raises
    ------
    TooShortLineError
        If the encoded line is shorter than *end*.
    StrIndexError
        If *start* or *end* falls inside a multi-byte character.

    Examples
    --------
    >>> extract_field("         n    p", 5, 10)
    'n'
    >>> extract_field("abc", 0, 5)
    Traceback (most recent call last):
        ...
    pyreaclib.exceptions.TooShortLineError: line too short
    """
    raw = line.encode("utf-8")
    if len(raw) < end:
        raise TooShortLineError()
    try:
        return raw[start:end].decode("utf-8").strip()
    except UnicodeDecodeError as exc:
        raise StrIndexError() from exc


def is_blank(line: str) -> bool:
    """Return ``True`` if *line* is empty or whitespace only"""
    return not line.strip()


def normalize_line(line: str | bytes) -> str:
    """Strip the line terminator and decode byte lines as UTF-8

    Parameters
    ----------
    line : str | bytes
        One item from a line source: a text line as produced by iterating
        a text file or ``str.splitlines``, or a raw line from a binary file.

    Returns
    -------
    str
        The line without its trailing ``"\\n"`` or ``"\\r\\n"``.

    Raises
    ------
    ReadError
        With kind ``"invalid_data"`` if a byte line is not valid UTF-8.
    """
    if isinstance(line, (bytes, bytearray)):
        try:
            line = bytes(line).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ReadError(INVALID_DATA) from exc
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


# ---------------------------------------------------------------------------
# Numeric conversion
# ---------------------------------------------------------------------------

def parse_int(text: str) -> int:
    """Convert an unsigned one-byte integer field to a Python int

    Parameters
    ----------
    text : str
        Stripped field content, e.g. a chapter code.

    Returns
    -------
    int
        The converted value.

    Raises
    ------
    ParseIntError
        If *text* is not ASCII digits with an optional ``+``, or the value
        exceeds :data:`INT_MAX`.

    Examples
    --------
    >>> parse_int("11")
    11
    >>> parse_int("1.0")
    Traceback (most recent call last):
        ...
    pyreaclib.exceptions.ParseIntError: int parsing error: '1.0'
    >>> parse_int("256")
    Traceback (most recent call last):
        ...
    pyreaclib.exceptions.ParseIntError: int parsing error: '256'
    """
    try:
        if not _INT_PATTERN.fullmatch(text):
            raise ValueError(f"invalid literal for base-10 int: {text!r}")
        value = int(text, 10)
        if value > INT_MAX:
            raise ValueError(f"{value} does not fit in one byte")
        return value
    except ValueError as exc:
        raise ParseIntError(text) from exc


def parse_float(text: str) -> float:
    """Convert a REACLIB floating-point field to a Python float

    Parameters
    ----------
    text : str
        Stripped field content, e.g. ``"-6.781610e+00"``.

    Returns
    -------
    float
        The converted value.  ``inf`` and ``nan`` spellings are accepted.

    Raises
    ------
    ParseFloatError
        If *text* is empty, contains non-ASCII characters, underscores or
        whitespace, or is otherwise not a valid decimal number.

    Examples
    --------
    >>> parse_float("7.82300e-01")
    0.7823
    >>> parse_float("")
    Traceback (most recent call last):
        ...
    pyreaclib.exceptions.ParseFloatError: float parsing error: ''
    """
    if not text.isascii() or "_" in text or text != text.strip():
        raise ParseFloatError(text)
    try:
        return float(text)
    except ValueError as exc:
        raise ParseFloatError(text) from exc
