#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Format constants and lookup tables used across pyreaclib

Column ranges are half-open ``(start, end)`` offsets measured in bytes of
the UTF-8 encoded line, which for the ASCII files published by JINA
REACLIB is the same as the character column.

REACLIB Set Layout
------------------
::

    line 0   cols  5..   nuclides, 5 columns each (reactants then products)
             cols 43..47 label
             col  47     resonance flag
             col  48     reverse flag ("v")
             cols 52..64 Q-value (MeV)
    line 1   cols  0..52 a0 a1 a2 a3   (13 columns each)
    line 2   cols  0..39 a4 a5 a6

References
----------
.. [1] JINA REACLIB format help,
   https://reaclib.jinaweb.org/help.php?topic=reaclib_format
.. [2] R. H. Cyburt et al., ApJS 189 (2010) 240.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Capacities
# ---------------------------------------------------------------------------

NUCLIDE_CAPACITY: int = 5
"""Maximum width of a nuclide name in bytes."""

LABEL_CAPACITY: int = 4
"""Maximum width of a set label in bytes."""

MAX_NUCLIDES_PER_SIDE: int = 4
"""Maximum number of reactants (or products) in a set."""

N_PARAMS: int = 7
"""Number of rate-fit parameters a0 … a6 in every set."""

SET_LINES: int = 3
"""Number of data lines making up one set."""

# ---------------------------------------------------------------------------
# Column layout of line 0
# ---------------------------------------------------------------------------

NUCLIDE_OFFSET: int = 5
"""Column of the first nuclide field."""

NUCLIDE_WIDTH: int = 5
"""Width of each nuclide field."""

LABEL_COLUMNS: tuple[int, int] = (43, 47)
RESONANCE_COLUMNS: tuple[int, int] = (47, 48)
REVERSE_COLUMNS: tuple[int, int] = (48, 49)
Q_VALUE_COLUMNS: tuple[int, int] = (52, 64)

REVERSE_FLAG: str = "v"
"""Content of the reverse column for rates derived by detailed balance."""

# ---------------------------------------------------------------------------
# Column layout of lines 1 and 2
# ---------------------------------------------------------------------------

PARAM_WIDTH: int = 13
"""Width of each rate-parameter field."""

PARAM_COLUMNS: tuple[tuple[int, tuple[int, int]], ...] = (
    (1, (0, 13)),
    (1, (13, 26)),
    (1, (26, 39)),
    (1, (39, 52)),
    (2, (0, 13)),
    (2, (13, 26)),
    (2, (26, 39)),
)
"""``(line index, column range)`` of parameters a0 … a6 within a set."""

# ---------------------------------------------------------------------------
# Chapters
# ---------------------------------------------------------------------------

CHAPTER_SHAPES: dict[int, tuple[int, int]] = {
    1:  (1, 1),   # e1 -> e2
    2:  (1, 2),   # e1 -> e2 + e3
    3:  (1, 3),   # e1 -> e2 + e3 + e4
    4:  (2, 1),   # e1 + e2 -> e3
    5:  (2, 2),   # e1 + e2 -> e3 + e4
    6:  (2, 3),   # e1 + e2 -> e3 + e4 + e5
    7:  (2, 4),   # e1 + e2 -> e3 + e4 + e5 + e6
    8:  (3, 1),   # e1 + e2 + e3 -> e4
    9:  (3, 2),   # e1 + e2 + e3 -> e4 + e5
    10: (4, 2),   # e1 + e2 + e3 + e4 -> e5 + e6
    11: (1, 4),   # e1 -> e2 + e3 + e4 + e5
}
"""Chapter code → ``(number of reactants, number of products)``.

Older files used chapter 8 for both e1 + e2 + e3 → e4 and
e1 + e2 + e3 → e4 + e5; only the current single-product meaning is
supported.
"""

# ---------------------------------------------------------------------------
# Resonance flags
# ---------------------------------------------------------------------------

RESONANCE_CODES: dict[str, str] = {
    "": "NON_RESONANT",
    " ": "NON_RESONANT",
    "n": "NON_RESONANT",
    "r": "RESONANT",
    "w": "WEAK",
    "s": "S",
}
"""Resonance column content → :class:`~pyreaclib.models.records.Resonance` name."""
