#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for JSON serialization of sets

Covers the dict layout, round trips through a text stream, and rejection
of malformed documents.
"""

from __future__ import annotations

import io
import json

import pytest

from pyreaclib.converters.serialize import (
    SET_KEYS,
    read_json,
    set_from_dict,
    set_to_dict,
    write_json,
)
from pyreaclib.exceptions import ConversionError
from pyreaclib.models.records import ReaclibSet, Resonance
from pyreaclib.readers import Reaclib1Reader


class TestSetToDict:

    def test_keys(self, sample_set: ReaclibSet) -> None:
        assert tuple(set_to_dict(sample_set)) == SET_KEYS

    def test_values(self, sample_set: ReaclibSet) -> None:
        data = set_to_dict(sample_set)
        assert data["reactants"] == ["he4", "c12"]
        assert data["products"] == ["o16"]
        assert data["resonance"] == "RESONANT"
        assert data["reverse"] is False
        assert data["q_value"] == 7.16192
        assert len(data["params"]) == 7

    def test_json_compatible(self, sample_set: ReaclibSet) -> None:
        text = json.dumps(set_to_dict(sample_set))
        assert '"label": "nac2"' in text


class TestSetFromDict:

    def test_inverse(self, sample_set: ReaclibSet) -> None:
        assert set_from_dict(set_to_dict(sample_set)) == sample_set

    @pytest.mark.parametrize("resonance", list(Resonance))
    def test_every_resonance(self, sample_set: ReaclibSet, resonance: Resonance) -> None:
        data = set_to_dict(sample_set)
        data["resonance"] = resonance.name
        assert set_from_dict(data).resonance is resonance

    def test_capacity_boundaries(self) -> None:
        s = ReaclibSet(
            reactants=("mg24x", "he4", "é12", "p"),
            products=("n", "n", "n", "n"),
            label="abcd",
            resonance=Resonance.S,
            reverse=True,
            q_value=-1.5,
            params=(0.0,) * 7,
        )
        assert set_from_dict(set_to_dict(s)) == s

    @pytest.mark.parametrize("key", SET_KEYS)
    def test_missing_key(self, sample_set: ReaclibSet, key: str) -> None:
        data = set_to_dict(sample_set)
        del data[key]
        with pytest.raises(ConversionError, match=key):
            set_from_dict(data)

    @pytest.mark.parametrize("name", ["r", "resonant", None])
    def test_unknown_resonance(self, sample_set: ReaclibSet, name) -> None:
        data = set_to_dict(sample_set)
        data["resonance"] = name
        with pytest.raises(ConversionError, match="Unknown resonance"):
            set_from_dict(data)

    def test_capacity_violation(self, sample_set: ReaclibSet) -> None:
        data = set_to_dict(sample_set)
        data["label"] = "toolong"
        with pytest.raises(ConversionError, match="Invalid set object"):
            set_from_dict(data)

    def test_wrong_param_count(self, sample_set: ReaclibSet) -> None:
        data = set_to_dict(sample_set)
        data["params"] = data["params"][:6]
        with pytest.raises(ConversionError):
            set_from_dict(data)

    def test_non_numeric_q_value(self, sample_set: ReaclibSet) -> None:
        data = set_to_dict(sample_set)
        data["q_value"] = "high"
        with pytest.raises(ConversionError):
            set_from_dict(data)


class TestJsonStream:
    """Tests for write_json / read_json"""

    def test_round_trip(self, reaclib1_lines) -> None:
        sets = list(Reaclib1Reader(reaclib1_lines))
        buf = io.StringIO()
        assert write_json(sets, buf) == 6
        buf.seek(0)
        assert read_json(buf) == sets

    def test_writes_array(self, sample_set: ReaclibSet) -> None:
        buf = io.StringIO()
        write_json([sample_set], buf, indent=None)
        doc = json.loads(buf.getvalue())
        assert isinstance(doc, list)
        assert doc[0]["label"] == "nac2"
        assert buf.getvalue().endswith("\n")

    def test_accepts_reader(self, reaclib1_lines) -> None:
        buf = io.StringIO()
        assert write_json(Reaclib1Reader(reaclib1_lines), buf) == 6

    def test_empty(self) -> None:
        buf = io.StringIO()
        assert write_json([], buf) == 0
        buf.seek(0)
        assert read_json(buf) == []

    def test_malformed_document(self) -> None:
        with pytest.raises(ConversionError, match="Malformed JSON"):
            read_json(io.StringIO("[{"))

    def test_not_an_array(self) -> None:
        with pytest.raises(ConversionError, match="JSON array"):
            read_json(io.StringIO('{"label": "nac2"}'))

    def test_item_not_an_object(self, sample_set: ReaclibSet) -> None:
        text = json.dumps([set_to_dict(sample_set), 3])
        with pytest.raises(ConversionError, match="Item 1"):
            read_json(io.StringIO(text))
