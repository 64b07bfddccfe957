#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for reader selection, whole-file reading and reaction tables
"""

from __future__ import annotations

import io

import pytest

from pyreaclib.exceptions import (
    ChapterUnsetError,
    FileFormatError,
    ReaclibError,
    ReadError,
    UnknownChapterError,
)
from pyreaclib.models.records import Format, Resonance
from pyreaclib.readers import (
    Reaclib1Reader,
    Reaclib2Reader,
    build_reaction_table,
    group_by_reaction,
    make_reader,
    read_sets,
)


def _stream(lines: list[str]) -> io.StringIO:
    return io.StringIO("".join(line + "\n" for line in lines))


# -----------------------------------------------------------------------
# make_reader / read_sets
# -----------------------------------------------------------------------

class TestMakeReader:

    @pytest.mark.parametrize("flag", ["1", Format.REACLIB1])
    def test_reaclib1(self, flag) -> None:
        assert isinstance(make_reader([], flag), Reaclib1Reader)

    @pytest.mark.parametrize("flag", ["2", Format.REACLIB2])
    def test_reaclib2(self, flag) -> None:
        assert isinstance(make_reader([], flag), Reaclib2Reader)

    def test_unknown_flag(self) -> None:
        with pytest.raises(FileFormatError):
            make_reader([], "3")


class TestReadSets:

    def test_reaclib1_file(self, tmp_path, reaclib1_lines) -> None:
        path = tmp_path / "reaclib_v1"
        path.write_text("".join(line + "\n" for line in reaclib1_lines), encoding="utf-8")
        sets = read_sets(path, "1")
        assert len(sets) == 6

    def test_reaclib2_file(self, tmp_path, reaclib2_lines) -> None:
        path = tmp_path / "reaclib_v2"
        path.write_text("".join(line + "\n" for line in reaclib2_lines), encoding="utf-8")
        sets = read_sets(str(path), Format.REACLIB2)
        assert [s.label for s in sets] == ["wc12", "nac2", "nac2"]

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileFormatError, match="not found"):
            read_sets(tmp_path / "missing", "1")

    def test_directory(self, tmp_path) -> None:
        with pytest.raises(FileFormatError):
            read_sets(tmp_path, "2")

    def test_first_error_propagates(self, tmp_path, known_set_lines) -> None:
        path = tmp_path / "reaclib_v1"
        path.write_text("".join(line + "\n" for line in known_set_lines), encoding="utf-8")
        with pytest.raises(ChapterUnsetError):
            read_sets(path, "1")

    def test_invalid_utf8(self, tmp_path) -> None:
        path = tmp_path / "reaclib_v2"
        path.write_bytes(b"1\n\xff\xff\n\n\n")
        with pytest.raises(ReadError):
            read_sets(path, "2")


# -----------------------------------------------------------------------
# Reaction tables
# -----------------------------------------------------------------------

class TestGroupByReaction:

    def test_empty(self) -> None:
        assert group_by_reaction([]) == {}

    def test_order_within_group(self, reaclib2_lines) -> None:
        table = group_by_reaction(Reaclib2Reader(reaclib2_lines))
        sets = table[(("he4", "c12"), ("o16",))]
        assert [s.resonance for s in sets] == [Resonance.NON_RESONANT, Resonance.RESONANT]

    def test_first_seen_key_order(self, reaclib1_lines) -> None:
        table = group_by_reaction(Reaclib1Reader(reaclib1_lines))
        assert list(table) == [
            (("b8",), ("he4", "he4", "n", "p")),
            (("li9",), ("he4", "he4", "n", "n")),
            (("c12",), ("he4", "he4", "he4", "n")),
            (("n",), ("p",)),
            (("he4", "li7"), ("n", "n", "he4", "he4")),
        ]
        assert len(table[(("he4", "li7"), ("n", "n", "he4", "he4"))]) == 2


class TestBuildReactionTable:
    """Tests for reading a whole file into a reaction table"""

    def test_reaclib2(self, reaclib2_lines) -> None:
        table = build_reaction_table(_stream(reaclib2_lines), "2")
        assert len(table) == 2
        assert len(table[(("n",), ("p",))]) == 1
        assert len(table[(("he4", "c12"), ("o16",))]) == 2

    def test_reaclib1(self, reaclib1_lines) -> None:
        table = build_reaction_table(_stream(reaclib1_lines), Format.REACLIB1)
        assert sum(len(v) for v in table.values()) == 6

    def test_empty_input(self) -> None:
        assert build_reaction_table(_stream([]), "1") == {}

    def test_summed_rate(self, reaclib2_lines) -> None:
        table = build_reaction_table(reaclib2_lines, "2")
        sets = table[(("he4", "c12"), ("o16",))]
        total = sum(s.rate(0.2) for s in sets)
        assert total == pytest.approx(2 * sets[0].rate(0.2))

    def test_error_aborts(self, reaclib2_lines, known_set_lines) -> None:
        lines = [*reaclib2_lines, "12", *known_set_lines]
        with pytest.raises(UnknownChapterError):
            build_reaction_table(lines, "2")

    def test_error_is_reaclib_error(self, known_set_lines) -> None:
        with pytest.raises(ReaclibError):
            build_reaction_table(known_set_lines, "1")

    def test_unknown_format(self, reaclib2_lines) -> None:
        with pytest.raises(FileFormatError):
            build_reaction_table(reaclib2_lines, "v2")
