#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed models for parsed REACLIB data

The :class:`ReaclibSet` dataclass is the sole output of the reader layer
and the sole input accepted by the converter layer, enforcing strict
separation of concerns.  Sets are frozen: they are built once from input
text (or a serialized copy) and never mutated.

Hierarchy
---------
::

    Resonance    — resonance flag of a set (n / r / w / s)
    Chapter      — reaction shape (number of reactants and products)
    Format       — REACLIB 1 or REACLIB 2 file layout
    ReaclibSet   — one fitted rate set: nuclides, flags, Q-value, a0 … a6
    Reaction     — (reactants, products) key shared by all sets of a rate

Units
-----
* Q-values are in **MeV**.
* Temperatures passed to :meth:`ReaclibSet.rate` are in **GK** (T9).
* Rates are in the REACLIB convention, i.e. ``N_A^(n-1) <σv>`` for
  *n* reactants, or s⁻¹ for decays.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np

from pyreaclib.exceptions import FileFormatError, UnknownChapterError, UnknownResonanceError
from pyreaclib.utils.constants import CHAPTER_SHAPES, RESONANCE_CODES
from pyreaclib.utils.parsing import parse_int
from pyreaclib.utils.validation import (
    validate_label,
    validate_nuclides,
    validate_params,
)

Reaction = tuple[tuple[str, ...], tuple[str, ...]]
"""``(reactants, products)``; the key grouping sets of the same reaction."""


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Resonance(enum.Enum):
    """Resonance flag of a set

    ``S`` is not described by the format documentation but appears in
    published REACLIB snapshots.
    """

    NON_RESONANT = "n"
    RESONANT = "r"
    WEAK = "w"
    S = "s"

    @classmethod
    def from_code(cls, code: str) -> Resonance:
        """Decode the single-column resonance flag

        Parameters
        ----------
        code : str
            Column content.  ``""``, ``" "`` and ``"n"`` all mean
            non-resonant.

        Raises
        ------
        UnknownResonanceError
            For any other content; nothing is silently defaulted.
        """
        try:
            return cls[RESONANCE_CODES[code]]
        except KeyError:
            raise UnknownResonanceError(code) from None


class Chapter(enum.IntEnum):
    """Class of reactions with the same number of reactants and products"""

    CHAPTER_1 = 1
    CHAPTER_2 = 2
    CHAPTER_3 = 3
    CHAPTER_4 = 4
    CHAPTER_5 = 5
    CHAPTER_6 = 6
    CHAPTER_7 = 7
    CHAPTER_8 = 8
    CHAPTER_9 = 9
    CHAPTER_10 = 10
    CHAPTER_11 = 11

    @property
    def num_reactants(self) -> int:
        return CHAPTER_SHAPES[self.value][0]

    @property
    def num_products(self) -> int:
        return CHAPTER_SHAPES[self.value][1]

    @classmethod
    def from_code(cls, code: int) -> Chapter:
        """Map a chapter code to its chapter

        Raises
        ------
        UnknownChapterError
            If *code* is outside 1-11.
        """
        try:
            return cls(code)
        except ValueError:
            raise UnknownChapterError(code) from None

    @classmethod
    def from_text(cls, text: str) -> Chapter:
        """Parse a chapter header line

        Raises
        ------
        ParseIntError
            If the stripped line is not an unsigned integer of at most 255.
        UnknownChapterError
            If the integer is outside 1-11.
        """
        return cls.from_code(parse_int(text.strip()))


class Format(enum.Enum):
    """Layout of a REACLIB file

    ``REACLIB1`` files start each chapter with a three-line header that
    precedes many sets; ``REACLIB2`` files prefix every set with a
    one-line chapter header.
    """

    REACLIB1 = "1"
    REACLIB2 = "2"

    @classmethod
    def from_flag(cls, flag: str | int | Format) -> Format:
        """Resolve a ``"1"`` / ``"2"`` flag to a format

        The flag must match exactly; surrounding whitespace is not ignored.

        Raises
        ------
        FileFormatError
            For any other value.
        """
        if isinstance(flag, Format):
            return flag
        try:
            return cls(str(flag))
        except ValueError:
            raise FileFormatError(
                f"Unknown REACLIB format {flag!r}.  Only '1' and '2' are valid formats."
            ) from None


# ---------------------------------------------------------------------------
# Set model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ReaclibSet:
    """A single fitted rate set

    A reaction rate may be made up of several sets (e.g. a non-resonant
    and one or more resonant contributions) whose rates are summed.

    Parameters
    ----------
    reactants : tuple[str, ...]
        Nuclides going into the reaction (at most 4, each ≤ 5 bytes).
    products : tuple[str, ...]
        Nuclides coming out of the reaction (at most 4, each ≤ 5 bytes).
    label : str
        Source label of the fit (≤ 4 bytes), see
        https://reaclib.jinaweb.org/labels.php.
    resonance : Resonance
        Resonance flag.
    reverse : bool
        ``True`` if the rate was derived from the reverse rate by
        detailed balance and must be corrected with partition functions.
    q_value : float
        Q-value of the reaction (MeV).
    params : tuple[float, ...]
        Exactly seven fit parameters a0 … a6.

    Raises
    ------
    ValidationError
        If any bounded field exceeds its capacity.
    """

    reactants: tuple[str, ...]
    products: tuple[str, ...]
    label: str
    resonance: Resonance
    reverse: bool
    q_value: float
    params: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "reactants", tuple(self.reactants))
        object.__setattr__(self, "products", tuple(self.products))
        object.__setattr__(self, "params", tuple(float(a) for a in self.params))
        validate_nuclides(self.reactants, "reactants")
        validate_nuclides(self.products, "products")
        validate_label(self.label)
        validate_params(self.params)

    @property
    def reaction(self) -> Reaction:
        """The ``(reactants, products)`` key of this set"""
        return (self.reactants, self.products)

    def rate(self, temperature: float | np.ndarray) -> float | np.ndarray:
        """Evaluate the rate at a temperature

        Uses the seven-parameter REACLIB fit

        .. math::

            \\lambda = \\exp\\left(a_0 + \\sum_{i=1}^{5} a_i T_9^{2i/3}
                       + a_6 \\ln T_9\\right)

        i.e. the powers of ``T9`` are 2/3, 4/3, 2, 8/3 and 10/3.

        Parameters
        ----------
        temperature : float | numpy.ndarray
            Temperature(s) in GK.

        Returns
        -------
        float | numpy.ndarray
            A float for scalar input, an array of the input's shape
            otherwise.  Non-positive temperatures yield ``nan`` or ``inf``
            rather than an exception.
        """
        t9 = np.asarray(temperature, dtype="f8")
        a = self.params
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            exponent = a[0] + a[6] * np.log(t9)
            for i in range(1, 6):
                exponent = exponent + a[i] * np.power(t9, (2.0 * i) / 3.0)
            result = np.exp(exponent)
        if result.ndim == 0:
            return float(result)
        return result
