#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed models for parsed REACLIB data

The frozen :class:`~pyreaclib.models.records.ReaclibSet` dataclass and the
enumerations describing its flags are the sole output format of the reader
layer and the sole input format accepted by the converter layer.
"""

from __future__ import annotations

from pyreaclib.models.records import (
    Chapter,
    Format,
    ReaclibSet,
    Reaction,
    Resonance,
)

__all__ = [
    "Chapter",
    "Format",
    "ReaclibSet",
    "Reaction",
    "Resonance",
]
