#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for pyreaclib tests

Provides synthetic REACLIB text in both layouts for testing the parsing
helpers, readers, and converters without requiring a real REACLIB
snapshot.
"""

from __future__ import annotations

from typing import Callable, Sequence

import pytest

from pyreaclib.models.records import ReaclibSet, Resonance

LINE_WIDTH = 74

# n -> p weak rate, as published in REACLIB
KNOWN_SET_LINES = [
    "         n    p                            wc12w     7.82300e-01          ",
    "-6.781610e+00 0.000000e+00 0.000000e+00 0.000000e+00                      ",
    " 0.000000e+00 0.000000e+00 0.000000e+00                                   ",
]

DEFAULT_PARAMS = (1.5, -2.25, 0.5, 3.0, -0.125, 0.0625, -1.5)


def format_set(
    reactants: Sequence[str],
    products: Sequence[str],
    label: str = "test",
    resonance: str = " ",
    reverse: bool = False,
    q_value: float = 1.0,
    params: Sequence[float] = DEFAULT_PARAMS,
) -> list[str]:
    """Render a set as three fixed-width REACLIB lines"""
    line0 = " " * 5 + "".join(f"{n:>5}" for n in [*reactants, *products])
    line0 = (
        line0.ljust(43)
        + f"{label:<4}"
        + f"{resonance:1}"
        + ("v" if reverse else " ")
        + " " * 3
        + f"{q_value:12.5e}"
    )
    line1 = "".join(f"{a:13.6e}" for a in params[:4])
    line2 = "".join(f"{a:13.6e}" for a in params[4:])
    return [line.ljust(LINE_WIDTH) for line in (line0, line1, line2)]


def v1_header(chapter: int | str) -> list[str]:
    """Three-line REACLIB 1 chapter header"""
    return [str(chapter).ljust(LINE_WIDTH), " " * LINE_WIDTH, " " * LINE_WIDTH]


@pytest.fixture
def make_set() -> Callable[..., list[str]]:
    """Factory rendering a set as three lines (see :func:`format_set`)"""
    return format_set


@pytest.fixture
def make_header() -> Callable[[int | str], list[str]]:
    """Factory rendering a REACLIB 1 chapter header"""
    return v1_header


@pytest.fixture
def known_set_lines() -> list[str]:
    """The three data lines of the published n -> p weak rate"""
    return list(KNOWN_SET_LINES)


@pytest.fixture
def reaclib1_lines() -> list[str]:
    """REACLIB 1 file with four chapters, one of them empty

    Shapes in order: 3 sets of 1 -> 4, 1 set of 1 -> 1, an empty chapter 3,
    then 2 sets of 2 -> 4.
    """
    return [
        *v1_header(11),
        *format_set(["b8"], ["he4", "he4", "n", "p"], label="wc12", resonance="w"),
        *format_set(["li9"], ["he4", "he4", "n", "n"], label="wc12", resonance="w"),
        *format_set(["c12"], ["he4", "he4", "he4", "n"], label="bb92"),
        *v1_header(1),
        *KNOWN_SET_LINES,
        *v1_header(3),
        *v1_header(7),
        *format_set(["he4", "li7"], ["n", "n", "he4", "he4"], label="cf88"),
        *format_set(["he4", "li7"], ["n", "n", "he4", "he4"], label="cf88", resonance="r"),
    ]


@pytest.fixture
def reaclib2_lines() -> list[str]:
    """REACLIB 2 file with three sets in chapters 1, 4 and 4"""
    return [
        "1",
        *KNOWN_SET_LINES,
        "4",
        *format_set(["he4", "c12"], ["o16"], label="nac2", q_value=7.16192),
        "4",
        *format_set(["he4", "c12"], ["o16"], label="nac2", resonance="r", q_value=7.16192),
    ]


@pytest.fixture
def sample_set() -> ReaclibSet:
    """A C12(a,g)O16 set"""
    return ReaclibSet(
        reactants=("he4", "c12"),
        products=("o16",),
        label="nac2",
        resonance=Resonance.RESONANT,
        reverse=False,
        q_value=7.16192,
        params=DEFAULT_PARAMS,
    )
