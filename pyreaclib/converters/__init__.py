#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Converters for parsed REACLIB sets

Provides two output formats:

* :mod:`~pyreaclib.converters.serialize`
    JSON arrays of set objects (lossless round trip).
* :mod:`~pyreaclib.converters.hdf5`
    Column-wise HDF5 tables via :func:`convert_reaclib_to_hdf5`.
"""

from __future__ import annotations

from pyreaclib.converters.serialize import (
    read_json,
    set_from_dict,
    set_to_dict,
    write_json,
)
from pyreaclib.converters.hdf5 import (
    convert_reaclib_to_hdf5,
    read_sets_hdf5,
    write_sets_hdf5,
)

__all__ = [
    "convert_reaclib_to_hdf5",
    "read_json",
    "read_sets_hdf5",
    "set_from_dict",
    "set_to_dict",
    "write_json",
    "write_sets_hdf5",
]
