#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
pyreaclib command-line interface

Provides commands for inspecting and converting REACLIB files:

1. **json**  — Print every set as a pretty-printed JSON array
2. **table** — Group sets by reaction and print one line per reaction
3. **hdf5**  — Write the sets to a structured HDF5 file
4. **rate**  — Evaluate the summed rate of every reaction at one T9

Usage
-----
::

    # Convert a REACLIB 1 snapshot to JSON
    python -m pyreaclib.cli --format 1 json reaclib_v1 > reaclib.json

    # List the reactions of a REACLIB 2 file
    python -m pyreaclib.cli -f 2 table reaclib_v2

    # HDF5 export
    python -m pyreaclib.cli -f 2 hdf5 reaclib_v2 reaclib.h5 --overwrite

    # Rates at 0.5 GK
    python -m pyreaclib.cli -f 2 rate reaclib_v2 --temperature 0.5
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

from pyreaclib.exceptions import FileFormatError, ReaclibError
from pyreaclib.models.records import Format

logger = logging.getLogger("pyreaclib.cli")


def _format_arg(value: str) -> Format:
    """argparse ``type`` for the REACLIB format flag"""
    try:
        return Format.from_flag(value)
    except FileFormatError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _reaction_label(reaction) -> str:
    reactants, products = reaction
    return f"{' + '.join(reactants)} -> {' + '.join(products)}"


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_json(args) -> int:
    """Print all sets of a file as JSON."""
    from pyreaclib.converters.serialize import write_json
    from pyreaclib.readers.factory import read_sets

    sets = read_sets(args.file, args.format)
    write_json(sets, sys.stdout, indent=2)
    logger.info("Converted %d sets from %s", len(sets), args.file)
    return 0


def cmd_table(args) -> int:
    """Print the reaction table of a file."""
    from pyreaclib.readers.factory import read_sets
    from pyreaclib.readers.table import group_by_reaction

    table = group_by_reaction(read_sets(args.file, args.format))
    for reaction, sets in table.items():
        print(f"{_reaction_label(reaction)}: {len(sets)} set(s)")
    logger.info("%d reactions in %s", len(table), args.file)
    return 0


def cmd_hdf5(args) -> int:
    """Write the sets of a file to HDF5."""
    from pyreaclib.converters.hdf5 import convert_reaclib_to_hdf5

    n = convert_reaclib_to_hdf5(
        args.file,
        args.output,
        args.format,
        overwrite=args.overwrite,
    )
    print(f"{args.file} -> {args.output}: {n} sets")
    return 0


def cmd_rate(args) -> int:
    """Print the summed rate of every reaction at one temperature."""
    from pyreaclib.readers.factory import read_sets
    from pyreaclib.readers.table import group_by_reaction

    table = group_by_reaction(read_sets(args.file, args.format))
    for reaction, sets in table.items():
        total = sum(s.rate(args.temperature) for s in sets)
        print(f"{_reaction_label(reaction)}: {total:.6e}")
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pyreaclib",
        description="REACLIB reaction-rate file tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
    python -m pyreaclib.cli -f 1 json reaclib_v1             # JSON to stdout
    python -m pyreaclib.cli -f 2 table reaclib_v2            # reactions
    python -m pyreaclib.cli -f 2 hdf5 reaclib_v2 out.h5      # HDF5 export
    python -m pyreaclib.cli -f 2 rate reaclib_v2 -t 0.5      # rates at 0.5 GK
""",
    )

    # Common arguments
    parser.add_argument(
        "--format", "-f",
        type=_format_arg,
        required=True,
        help="REACLIB format of the input file (1, 2)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    # Subcommands
    sub = parser.add_subparsers(dest="command", help="Command to run")

    p_json = sub.add_parser("json", help="Print sets as a JSON array")
    p_json.add_argument("file", help="REACLIB file to read")

    p_table = sub.add_parser("table", help="Print the reaction table")
    p_table.add_argument("file", help="REACLIB file to read")

    p_hdf5 = sub.add_parser("hdf5", help="Write sets to an HDF5 file")
    p_hdf5.add_argument("file", help="REACLIB file to read")
    p_hdf5.add_argument("output", help="HDF5 file to write")
    p_hdf5.add_argument(
        "--overwrite",
        action="store_true",
        help="Overwrite an existing output file",
    )

    p_rate = sub.add_parser("rate", help="Evaluate reaction rates")
    p_rate.add_argument("file", help="REACLIB file to read")
    p_rate.add_argument(
        "--temperature", "-t",
        type=float,
        required=True,
        help="Temperature in GK (T9)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    t0 = time.time()

    commands = {
        "json": cmd_json,
        "table": cmd_table,
        "hdf5": cmd_hdf5,
        "rate": cmd_rate,
    }

    try:
        rc = commands[args.command](args)
    except ReaclibError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1
    logger.debug("Completed in %.1fs", time.time() - t0)
    return rc


if __name__ == "__main__":
    sys.exit(main())
