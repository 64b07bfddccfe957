#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Abstract base class for REACLIB streaming readers

Both concrete readers (REACLIB 1 and REACLIB 2) inherit from
:class:`BaseReader`, which owns the line source, reads fixed-size line
groups, and exposes the iterator protocol.  Subclasses only decide how a
line group is classified and which chapter governs the set.

The set decoder :func:`decode_set` is shared by both readers: a set is
always three data lines whose column layout depends only on the number of
reactants and products of its chapter.

Error Model
-----------
``__next__`` returns a :class:`~pyreaclib.models.records.ReaclibSet`,
raises :class:`StopIteration` at the clean end of input, or raises a
:class:`~pyreaclib.exceptions.ReaclibError` describing what went wrong with
*this* pull.  The reader stays usable afterwards; what the next pull sees
depends on how many lines the failed pull consumed.  Use
:meth:`BaseReader.results` to receive errors as stream items instead.
"""

from __future__ import annotations

import errno
import logging
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Sequence, Union

from pyreaclib.exceptions import ReaclibError, ReadError, TooFewLinesError
from pyreaclib.models.records import Chapter, ReaclibSet, Resonance
from pyreaclib.utils.constants import (
    LABEL_COLUMNS,
    NUCLIDE_OFFSET,
    NUCLIDE_WIDTH,
    PARAM_COLUMNS,
    Q_VALUE_COLUMNS,
    RESONANCE_COLUMNS,
    REVERSE_COLUMNS,
    REVERSE_FLAG,
    SET_LINES,
)
from pyreaclib.utils.parsing import INVALID_DATA, extract_field, normalize_line, parse_float

logger = logging.getLogger(__name__)

LineSource = Iterable[Union[str, bytes]]
"""Anything yielding lines: text or binary files, lists, ``io.StringIO``."""


# ---------------------------------------------------------------------------
# Set decoding
# ---------------------------------------------------------------------------

def _nuclide_columns(index: int) -> tuple[int, int]:
    start = NUCLIDE_OFFSET + NUCLIDE_WIDTH * index
    return start, start + NUCLIDE_WIDTH


def decode_set(chapter: Chapter, lines: Sequence[str]) -> ReaclibSet:
    """Decode the three data lines of a set

    Parameters
    ----------
    chapter : Chapter
        Chapter governing the set; fixes how many nuclide columns are
        reactants and how many are products.
    lines : Sequence[str]
        Exactly three lines, without line terminators.

    Returns
    -------
    ReaclibSet
        The decoded set.

    Raises
    ------
    TooFewLinesError
        If fewer than three lines are given.
    TooShortLineError
        If a line ends before one of the fields read from it.
    StrIndexError
        If a multi-byte character straddles a field boundary.
    UnknownResonanceError
        If the resonance column holds an unknown flag.
    ParseFloatError
        If the Q-value or a rate parameter is not a number.
    ValueError
        If more than three lines are given.

    Notes
    -----
    Fields are read in column order: reactants, products, label,
    resonance, reverse flag, Q-value, then a0 … a6.  The first failing
    field aborts the set.
    """
    if len(lines) < SET_LINES:
        raise TooFewLinesError()
    if len(lines) > SET_LINES:
        raise ValueError(f"A set spans exactly {SET_LINES} lines, got {len(lines)}.")
    first = lines[0]

    n_r = chapter.num_reactants
    n_p = chapter.num_products
    reactants = [extract_field(first, *_nuclide_columns(i)) for i in range(n_r)]
    products = [extract_field(first, *_nuclide_columns(i)) for i in range(n_r, n_r + n_p)]
    label = extract_field(first, *LABEL_COLUMNS)
    resonance = Resonance.from_code(extract_field(first, *RESONANCE_COLUMNS))
    reverse = extract_field(first, *REVERSE_COLUMNS) == REVERSE_FLAG
    q_value = parse_float(extract_field(first, *Q_VALUE_COLUMNS))
    params = [
        parse_float(extract_field(lines[row], *columns))
        for row, columns in PARAM_COLUMNS
    ]

    return ReaclibSet(
        reactants=tuple(reactants),
        products=tuple(products),
        label=label,
        resonance=resonance,
        reverse=reverse,
        q_value=q_value,
        params=tuple(params),
    )


def _error_kind(exc: Exception) -> str:
    if isinstance(exc, UnicodeDecodeError):
        return INVALID_DATA
    if isinstance(exc, OSError) and exc.errno in errno.errorcode:
        return errno.errorcode[exc.errno]
    return type(exc).__name__


# ---------------------------------------------------------------------------
# Reader base class
# ---------------------------------------------------------------------------

class BaseReader(ABC):
    """Abstract base for REACLIB streaming readers

    Subclasses set :attr:`group_size` (lines consumed per pull) and
    override :meth:`_next_set`.

    The reader is a single-pass iterator over its line source.  It does
    not open or close anything; the owner of the line source is
    responsible for releasing it.

    Parameters
    ----------
    source : LineSource
        Iterable of lines.  ``bytes`` lines are decoded as UTF-8; line
        terminators are stripped.

    Attributes
    ----------
    lines_read : int
        Number of lines consumed so far, for error reporting.
    """

    group_size: int = SET_LINES

    def __init__(self, source: LineSource) -> None:
        self._lines = iter(source)
        self.lines_read = 0

    def __iter__(self) -> BaseReader:
        return self

    def __next__(self) -> ReaclibSet:
        return self._next_set()

    @abstractmethod
    def _next_set(self) -> ReaclibSet:
        """Consume line groups until a set can be returned

        Raises
        ------
        StopIteration
            When no line is left at a group boundary.
        ReaclibError
            For any read or parse failure of this pull.
        """
        ...

    def results(self) -> Iterator[ReaclibSet | ReaclibError]:
        """Yield every set or per-pull error as a stream item

        Unlike plain iteration, a parse error does not end the stream: it
        is yielded in place of the set and reading continues with the
        next line group.  A :class:`~pyreaclib.exceptions.ReadError` is
        yielded and ends the stream, since the line source is not
        guaranteed to make progress after failing.
        """
        while True:
            try:
                item = next(self)
            except StopIteration:
                return
            except ReadError as exc:
                yield exc
                return
            except ReaclibError as exc:
                logger.debug("Pull failed after %d lines: %s", self.lines_read, exc)
                item = exc
            yield item

    def _read_line(self) -> str | None:
        """Return the next normalised line, or ``None`` at end of input

        Raises
        ------
        ReadError
            If the line source fails or yields undecodable bytes.
        """
        try:
            raw = next(self._lines)
        except StopIteration:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(_error_kind(exc)) from exc
        self.lines_read += 1
        return normalize_line(raw)

    def _read_group(self) -> list[str] | None:
        """Read exactly :attr:`group_size` lines

        Returns
        -------
        list[str] | None
            The lines, or ``None`` if the input ended at the group
            boundary.

        Raises
        ------
        TooFewLinesError
            If the input ended inside the group.
        ReadError
            As soon as the line source fails; the rest of the group is
            left unread.
        """
        lines: list[str] = []
        for _ in range(self.group_size):
            line = self._read_line()
            if line is None:
                if not lines:
                    return None
                raise TooFewLinesError()
            lines.append(line)
        return lines
