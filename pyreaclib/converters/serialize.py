#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
JSON serialization of REACLIB sets

Each :class:`~pyreaclib.models.records.ReaclibSet` maps to a flat JSON
object; a file is a JSON array of such objects::

    {
      "reactants": ["n"],
      "products": ["p"],
      "label": "wc12",
      "resonance": "WEAK",
      "reverse": false,
      "q_value": 0.7823,
      "params": [-6.78161, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0]
    }

The resonance flag is stored by enum name.  Deserialized sets go through
the model's capacity checks, so a document can never produce a set that
the fixed-width format could not hold.  Non-finite floats are written as
``NaN`` / ``Infinity`` as the :mod:`json` module does.
"""

from __future__ import annotations

import json
import logging
from typing import IO, Any, Iterable

from pyreaclib.exceptions import ConversionError, ValidationError
from pyreaclib.models.records import ReaclibSet, Resonance

logger = logging.getLogger(__name__)

SET_KEYS: tuple[str, ...] = (
    "reactants",
    "products",
    "label",
    "resonance",
    "reverse",
    "q_value",
    "params",
)
"""Keys of the JSON object describing one set, in output order."""


def set_to_dict(s: ReaclibSet) -> dict[str, Any]:
    """Convert a set to a JSON-compatible dict"""
    return {
        "reactants": list(s.reactants),
        "products": list(s.products),
        "label": s.label,
        "resonance": s.resonance.name,
        "reverse": s.reverse,
        "q_value": s.q_value,
        "params": list(s.params),
    }


def set_from_dict(data: dict[str, Any]) -> ReaclibSet:
    """Rebuild a set from :func:`set_to_dict` output

    Raises
    ------
    ConversionError
        If a key is missing, the resonance name is unknown, or a field
        violates the format's capacities.
    """
    missing = [key for key in SET_KEYS if key not in data]
    if missing:
        raise ConversionError(f"Set object is missing key(s): {', '.join(missing)}")

    try:
        resonance = Resonance[data["resonance"]]
    except (KeyError, TypeError):
        raise ConversionError(f"Unknown resonance name {data['resonance']!r}") from None

    try:
        return ReaclibSet(
            reactants=tuple(data["reactants"]),
            products=tuple(data["products"]),
            label=data["label"],
            resonance=resonance,
            reverse=bool(data["reverse"]),
            q_value=float(data["q_value"]),
            params=tuple(data["params"]),
        )
    except (ValidationError, TypeError, ValueError) as exc:
        raise ConversionError(f"Invalid set object: {exc}") from exc


def write_json(sets: Iterable[ReaclibSet], fp: IO[str], *, indent: int | None = 2) -> int:
    """Write sets as a JSON array

    Parameters
    ----------
    sets : Iterable[ReaclibSet]
        Sets to write, e.g. a reader or a list.
    fp : IO[str]
        Text stream to write to.
    indent : int | None, optional
        Indentation for pretty-printing; ``None`` for compact output.

    Returns
    -------
    int
        Number of sets written.
    """
    items = [set_to_dict(s) for s in sets]
    json.dump(items, fp, indent=indent)
    fp.write("\n")
    logger.debug("Wrote %d sets as JSON", len(items))
    return len(items)


def read_json(fp: IO[str]) -> list[ReaclibSet]:
    """Read a JSON array written by :func:`write_json`

    Raises
    ------
    ConversionError
        If the document is not valid JSON, is not an array of objects,
        or any object fails :func:`set_from_dict`.
    """
    try:
        items = json.load(fp)
    except json.JSONDecodeError as exc:
        raise ConversionError(f"Malformed JSON document: {exc}") from exc

    if not isinstance(items, list):
        raise ConversionError(f"Expected a JSON array of sets, got {type(items).__name__}")

    sets = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise ConversionError(f"Item {i} is not a JSON object")
        sets.append(set_from_dict(item))
    return sets
