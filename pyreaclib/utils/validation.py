#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Capacity checks for REACLIB set fields

Every validation function raises :class:`~pyreaclib.exceptions.ValidationError`
when a bounded field exceeds the capacity fixed by the REACLIB format.
The model layer calls these from ``__post_init__`` so that a
:class:`~pyreaclib.models.records.ReaclibSet` can never hold more than
its fixed-width columns could express, whether it was built by a reader,
by a deserializer, or by hand.

Checked Constraints
-------------------
* A nuclide name is at most 5 bytes (UTF-8).
* A label is at most 4 bytes (UTF-8).
* Each side of a reaction holds at most 4 nuclides.
* A set carries exactly 7 rate parameters.

Physical plausibility of the parameters is deliberately not checked.

Design Note
-----------
Validation functions accept plain strings and sequences, **not** model
instances, so that this module does not depend on ``models``::

    utils ← models ← readers ← converters
"""

from __future__ import annotations

from typing import Sequence

from pyreaclib.exceptions import ValidationError
from pyreaclib.utils.constants import (
    LABEL_CAPACITY,
    MAX_NUCLIDES_PER_SIDE,
    N_PARAMS,
    NUCLIDE_CAPACITY,
)


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


def validate_nuclide(name: str) -> None:
    """Verify that *name* fits a nuclide field

    Raises
    ------
    ValidationError
        If *name* is not a string or is longer than five bytes.

    Examples
    --------
    >>> validate_nuclide("c12")
    >>> validate_nuclide("mg24x")
    >>> validate_nuclide("toolong")  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pyreaclib.exceptions.ValidationError: ...
    """
    if not isinstance(name, str):
        raise ValidationError(f"Nuclide must be a string, got {type(name).__name__}.")
    if _byte_length(name) > NUCLIDE_CAPACITY:
        raise ValidationError(
            f"Nuclide {name!r} exceeds the capacity of {NUCLIDE_CAPACITY} bytes."
        )


def validate_label(label: str) -> None:
    """Verify that *label* fits the four-column label field"""
    if not isinstance(label, str):
        raise ValidationError(f"Label must be a string, got {type(label).__name__}.")
    if _byte_length(label) > LABEL_CAPACITY:
        raise ValidationError(
            f"Label {label!r} exceeds the capacity of {LABEL_CAPACITY} bytes."
        )


def validate_nuclides(nuclides: Sequence[str], side: str = "reactants") -> None:
    """Verify one side of a reaction

    Parameters
    ----------
    nuclides : Sequence[str]
        Reactant or product names.
    side : str, optional
        ``"reactants"`` or ``"products"``, used in error messages.

    Raises
    ------
    ValidationError
        If there are more than four nuclides or any name is too long.
    """
    if len(nuclides) > MAX_NUCLIDES_PER_SIDE:
        raise ValidationError(
            f"A set holds at most {MAX_NUCLIDES_PER_SIDE} {side}, "
            f"got {len(nuclides)}."
        )
    for name in nuclides:
        validate_nuclide(name)


def validate_params(params: Sequence[float]) -> None:
    """Verify that exactly seven rate parameters are present

    Raises
    ------
    ValidationError
        If the parameter count differs from seven.
    """
    if len(params) != N_PARAMS:
        raise ValidationError(
            f"A set carries exactly {N_PARAMS} rate parameters, got {len(params)}."
        )
