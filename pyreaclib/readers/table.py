#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Reaction tables: all sets describing the same reaction

A REACLIB rate is usually the sum of several sets (non-resonant plus
resonant contributions).  The helpers here group sets by their
``(reactants, products)`` key so that callers can evaluate a complete rate.

Examples
--------
>>> with open("reaclib2", "rb") as fh:
...     table = build_reaction_table(fh, "2")
>>> sets = table[(("he4", "c12"), ("o16",))]
>>> total = sum(s.rate(0.2) for s in sets)
"""

from __future__ import annotations

import logging
from typing import Iterable

from pyreaclib.models.records import Format, ReaclibSet, Reaction
from pyreaclib.readers.base import LineSource
from pyreaclib.readers.factory import make_reader

logger = logging.getLogger(__name__)


def group_by_reaction(sets: Iterable[ReaclibSet]) -> dict[Reaction, list[ReaclibSet]]:
    """Group sets by reaction, keeping input order inside each group"""
    table: dict[Reaction, list[ReaclibSet]] = {}
    for s in sets:
        table.setdefault(s.reaction, []).append(s)
    return table


def build_reaction_table(
    source: LineSource,
    fmt: Format | str,
) -> dict[Reaction, list[ReaclibSet]]:
    """Read a whole REACLIB file into a reaction table

    Parameters
    ----------
    source : LineSource
        Iterable of text or byte lines.
    fmt : Format | str
        File layout, ``Format.REACLIB1`` / ``"1"`` or
        ``Format.REACLIB2`` / ``"2"``.

    Returns
    -------
    dict[Reaction, list[ReaclibSet]]
        Sets keyed by ``(reactants, products)``.

    Raises
    ------
    ReaclibError
        The first read or parse error; no partial table is returned.
    """
    table = group_by_reaction(make_reader(source, fmt))
    logger.debug(
        "Built reaction table: %d reactions, %d sets",
        len(table),
        sum(len(v) for v in table.values()),
    )
    return table
