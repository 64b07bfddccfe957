#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Streaming readers for REACLIB files

This sub-package provides one reader class per REACLIB layout:

* :class:`~pyreaclib.readers.reaclib1.Reaclib1Reader` — REACLIB 1, a
  three-line chapter header precedes many sets
* :class:`~pyreaclib.readers.reaclib2.Reaclib2Reader` — REACLIB 2, a
  one-line chapter header precedes every set

Both share the :class:`~pyreaclib.readers.base.BaseReader` interface.
:func:`make_reader` picks the class from a format flag, and
:func:`build_reaction_table` folds a whole file into a reaction table.
"""

from __future__ import annotations

from pyreaclib.readers.base import BaseReader, decode_set
from pyreaclib.readers.reaclib1 import Reaclib1Reader
from pyreaclib.readers.reaclib2 import Reaclib2Reader
from pyreaclib.readers.factory import make_reader, read_sets
from pyreaclib.readers.table import build_reaction_table, group_by_reaction

__all__ = [
    "BaseReader",
    "Reaclib1Reader",
    "Reaclib2Reader",
    "build_reaction_table",
    "decode_set",
    "group_by_reaction",
    "make_reader",
    "read_sets",
]
