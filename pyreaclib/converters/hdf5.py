#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
HDF5 converter for REACLIB sets

Writes deterministic, self-documenting HDF5 files from the set models
returned by the reader layer, and reads them back.

HDF5 Layout
-----------
Sets are stored column-wise, one dataset per field, row *k* describing
set *k* in file order::

    /metadata/
        n_sets          int64
        format          string   — "1" or "2" (source REACLIB layout)

    /sets/
        reactants       S5[N, 4] — padded with empty strings
        n_reactants     int8[N]
        products        S5[N, 4]
        n_products      int8[N]
        label           S4[N]
        resonance       S1[N]    — "n", "r", "w" or "s"
        reverse         bool[N]
        q_value         float64[N]     units: MeV
        params          float64[N, 7]  a0 … a6

Strings are stored UTF-8 encoded in fixed-width byte datasets whose
widths equal the format's capacities.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import numpy as np

try:
    import h5py
except ImportError as _exc:  # pragma: no cover
    raise ImportError(
        "The 'h5py' package is required by the HDF5 converter.  "
        "Install it with: pip install h5py"
    ) from _exc

from pyreaclib.exceptions import ConversionError
from pyreaclib.models.records import Format, ReaclibSet, Resonance
from pyreaclib.readers.factory import read_sets
from pyreaclib.utils.constants import (
    LABEL_CAPACITY,
    MAX_NUCLIDES_PER_SIDE,
    N_PARAMS,
    NUCLIDE_CAPACITY,
)

logger = logging.getLogger(__name__)

_NUCLIDE_DTYPE = f"S{NUCLIDE_CAPACITY}"
_LABEL_DTYPE = f"S{LABEL_CAPACITY}"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _encode(text: str) -> bytes:
    return text.encode("utf-8")


def _decode(raw: bytes) -> str:
    return bytes(raw).decode("utf-8")


def _nuclide_matrix(sides: list[tuple[str, ...]]) -> np.ndarray:
    """Pack one side of every set into an ``(N, 4)`` byte-string array"""
    out = np.zeros((len(sides), MAX_NUCLIDES_PER_SIDE), dtype=_NUCLIDE_DTYPE)
    for row, side in enumerate(sides):
        for col, name in enumerate(side):
            out[row, col] = _encode(name)
    return out


def _write_metadata(h5f: h5py.File, n_sets: int, fmt: Format | None) -> None:
    meta = h5f.create_group("metadata")
    meta.create_dataset("n_sets", data=np.int64(n_sets))
    meta.create_dataset("format", data=fmt.value if fmt is not None else "")


# ---------------------------------------------------------------------------
# Public writers / readers
# ---------------------------------------------------------------------------

def write_sets_hdf5(
    h5f: h5py.File,
    sets: Iterable[ReaclibSet],
    fmt: Format | None = None,
) -> int:
    """Write sets to an open HDF5 file

    Parameters
    ----------
    h5f : h5py.File
        Open HDF5 file handle (write mode).
    sets : Iterable[ReaclibSet]
        Sets to write.
    fmt : Format | None, optional
        REACLIB layout the sets were read from, recorded in
        ``/metadata/format``.

    Returns
    -------
    int
        Number of sets written.
    """
    sets = list(sets)
    n = len(sets)
    _write_metadata(h5f, n, fmt)

    grp = h5f.create_group("sets")
    grp.create_dataset("reactants", data=_nuclide_matrix([s.reactants for s in sets]))
    grp.create_dataset(
        "n_reactants", data=np.array([len(s.reactants) for s in sets], dtype="i1")
    )
    grp.create_dataset("products", data=_nuclide_matrix([s.products for s in sets]))
    grp.create_dataset(
        "n_products", data=np.array([len(s.products) for s in sets], dtype="i1")
    )
    grp.create_dataset(
        "label", data=np.array([_encode(s.label) for s in sets], dtype=_LABEL_DTYPE)
    )
    grp.create_dataset(
        "resonance",
        data=np.array([_encode(s.resonance.value) for s in sets], dtype="S1"),
    )
    grp.create_dataset("reverse", data=np.array([s.reverse for s in sets], dtype=bool))
    ds_q = grp.create_dataset(
        "q_value", data=np.array([s.q_value for s in sets], dtype="f8")
    )
    ds_q.attrs["units"] = "MeV"
    params = np.array([s.params for s in sets], dtype="f8").reshape(n, N_PARAMS)
    grp.create_dataset("params", data=params)

    logger.debug("Wrote %d sets to HDF5 group /sets", n)
    return n


def read_sets_hdf5(h5f: h5py.File) -> list[ReaclibSet]:
    """Read sets written by :func:`write_sets_hdf5`

    Raises
    ------
    ConversionError
        If the ``/sets`` group or one of its datasets is missing.
    """
    if "sets" not in h5f:
        raise ConversionError("HDF5 file has no /sets group")
    grp = h5f["sets"]
    try:
        reactants = grp["reactants"][()]
        n_reactants = grp["n_reactants"][()]
        products = grp["products"][()]
        n_products = grp["n_products"][()]
        labels = grp["label"][()]
        resonances = grp["resonance"][()]
        reverse = grp["reverse"][()]
        q_values = grp["q_value"][()]
        params = grp["params"][()]
    except KeyError as exc:
        raise ConversionError(f"HDF5 /sets group is incomplete: {exc}") from exc

    sets = []
    for k in range(len(q_values)):
        sets.append(
            ReaclibSet(
                reactants=tuple(_decode(x) for x in reactants[k, : n_reactants[k]]),
                products=tuple(_decode(x) for x in products[k, : n_products[k]]),
                label=_decode(labels[k]),
                resonance=Resonance(_decode(resonances[k])),
                reverse=bool(reverse[k]),
                q_value=float(q_values[k]),
                params=tuple(float(a) for a in params[k]),
            )
        )
    return sets


def convert_reaclib_to_hdf5(
    source_path: Path | str,
    output_path: Path | str,
    fmt: Format | str,
    *,
    overwrite: bool = False,
) -> int:
    """Read a REACLIB file and write a structured HDF5 file

    Parameters
    ----------
    source_path : Path | str
        Path to the REACLIB source file.
    output_path : Path | str
        Path for the output HDF5 file.  Parent directories are created
        automatically.
    fmt : Format | str
        Layout of the source file, ``"1"`` or ``"2"``.
    overwrite : bool, optional
        If ``True``, overwrite an existing HDF5 file.  If ``False``
        (default), raise :class:`~pyreaclib.exceptions.ConversionError`
        when the output file already exists.

    Returns
    -------
    int
        Number of sets written.

    Raises
    ------
    ConversionError
        If *overwrite* is ``False`` and *output_path* exists, or if any
        HDF5 write operation fails.
    FileFormatError
        If the source file does not exist or *fmt* is unknown.
    ParseError
        If the source file content is malformed.

    Examples
    --------
    >>> convert_reaclib_to_hdf5("reaclib_v2", "output/reaclib.h5", "2", overwrite=True)
    """
    fmt = Format.from_flag(fmt)
    src = Path(source_path)
    out = Path(output_path)

    if out.exists() and not overwrite:
        raise ConversionError(
            f"Output file {out} already exists and overwrite=False."
        )

    sets = read_sets(src, fmt)

    out.parent.mkdir(parents=True, exist_ok=True)
    try:
        mode = "w" if overwrite else "w-"
        with h5py.File(str(out), mode) as h5f:
            n = write_sets_hdf5(h5f, sets, fmt)
    except Exception as exc:
        if isinstance(exc, ConversionError):
            raise
        raise ConversionError(
            f"Failed to write HDF5 file {out}: {exc}"
        ) from exc

    logger.info("Wrote %d REACLIB sets to HDF5 file: %s", n, out)
    return n
